"""
Core infrastructure shared by the API layer.

Nothing in here knows about HTTP routes; endpoints and services import
what they need from the individual modules.
"""
