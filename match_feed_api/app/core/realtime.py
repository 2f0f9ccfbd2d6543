"""
Realtime broadcast channel.

``ConnectionManager`` keeps the WebSocket connections that are currently
open and fans events out to all of them.  Delivery is best effort: there
is no acknowledgment and no retry, and a connection whose send fails is
dropped from the registry without affecting the other clients or the
request that published the event.

Every event goes out as one JSON text frame::

    {"event": "newMatch", "data": {...}}
"""

import asyncio
import logging
from typing import Any, List

from fastapi import WebSocket

logger = logging.getLogger(__name__)

NEW_MATCH_EVENT = "newMatch"

# Seconds a single client may take to accept a frame before it is dropped.
DEFAULT_SEND_TIMEOUT = 5.0


class ConnectionManager:
    """Registry of connected realtime clients."""

    def __init__(self, send_timeout: float = DEFAULT_SEND_TIMEOUT) -> None:
        self.active: List[WebSocket] = []
        self.send_timeout = send_timeout

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.active.append(websocket)
        logger.info("A client connected (%d total)", len(self.active))

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self.active:
            self.active.remove(websocket)
            logger.info("Client disconnected (%d remaining)", len(self.active))

    async def _send(self, websocket: WebSocket, message: dict) -> None:
        await asyncio.wait_for(websocket.send_json(message), timeout=self.send_timeout)

    async def broadcast(self, event: str, payload: Any) -> int:
        """Send ``event`` with ``payload`` to every connected client.

        All sends run concurrently, each bounded by ``send_timeout``, so a
        slow client delays neither the others nor the caller beyond that
        bound.  Clients whose send fails or times out are dropped.
        Returns the number of clients the frame was handed to.
        """
        message = {"event": event, "data": payload}
        # Snapshot; connects/disconnects may happen while we await.
        targets = list(self.active)
        results = await asyncio.gather(
            *(self._send(ws, message) for ws in targets), return_exceptions=True
        )

        delivered = 0
        for ws, result in zip(targets, results):
            if isinstance(result, BaseException):
                logger.warning("Dropping realtime client after failed send: %r", result)
                self.disconnect(ws)
            else:
                delivered += 1

        logger.debug("Broadcast %s to %d client(s)", event, delivered)
        return delivered

    def client_count(self) -> int:
        """Number of currently registered clients."""
        return len(self.active)
