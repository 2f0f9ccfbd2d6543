"""
Endpoint subpackage.

Each module defines an ``APIRouter`` for one domain; they are aggregated
in ``api/router.py`` and included by the application factory.
"""
