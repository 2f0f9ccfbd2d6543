"""
Application package initializer.

The server is split into small pieces: ``core`` holds configuration,
logging, the in‑memory store, the realtime connection registry and the
origin middleware; ``schemas`` the pydantic payload models; ``services``
the per‑domain logic; and ``api`` the routers that expose it all over
HTTP and WebSocket.
"""

from .main import app  # noqa: F401
