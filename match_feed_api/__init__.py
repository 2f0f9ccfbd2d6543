"""
Top‑level package for the Match Feed API.

The server lives in the ``app`` subpackage (``match_feed_api.app.main``)
and a small synchronous HTTP client for it in ``match_feed_api.client``.
Both are imported by their fully qualified names; the package itself
re‑exports nothing.
"""

__all__ = []
