"""
Cross‑origin policy.

The API trusts exactly one browser origin.  ``install_cors`` wires two
layers onto the application:

* ``OriginGuardMiddleware`` (outermost) refuses any HTTP request or
  WebSocket handshake whose ``Origin`` header names a different origin.
  Refused requests never reach a handler, so they cannot mutate the
  store or trigger a broadcast.  Requests without an ``Origin`` header
  (curl, server‑to‑server calls, same‑origin tools) pass through.
* Starlette's ``CORSMiddleware`` then answers preflight requests and
  adds the ``Access-Control-Allow-*`` headers, credentials included.
"""

import logging
from typing import Iterable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Receive, Scope, Send
from starlette.websockets import WebSocketClose

logger = logging.getLogger(__name__)


class OriginGuardMiddleware:
    """Pure ASGI middleware rejecting requests from untrusted origins."""

    def __init__(self, app: ASGIApp, allowed_origins: Iterable[str]) -> None:
        self.app = app
        self.allowed_origins = frozenset(o.rstrip("/") for o in allowed_origins)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        origin = Headers(scope=scope).get("origin")
        if origin is None or origin.rstrip("/") in self.allowed_origins:
            await self.app(scope, receive, send)
            return

        logger.warning("Rejected %s request from origin %s", scope["type"], origin)
        if scope["type"] == "websocket":
            # 1008: policy violation
            await WebSocketClose(code=1008)(scope, receive, send)
            return
        response = JSONResponse({"error": "Origin not allowed"}, status_code=403)
        await response(scope, receive, send)


def install_cors(app: FastAPI, origin: str) -> None:
    """Allow ``origin`` (with credentials) and reject every other origin."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added last so it wraps the CORS layer.
    app.add_middleware(OriginGuardMiddleware, allowed_origins=[origin])
