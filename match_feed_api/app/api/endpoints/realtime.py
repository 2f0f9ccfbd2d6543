"""
WebSocket endpoint for the realtime match feed.

Clients connect to ``/ws`` and from then on only receive frames; there
is no handshake payload and nothing they send is acted upon.  The loop
below merely waits for the disconnect.
"""

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from match_feed_api.app.core.realtime import ConnectionManager

router = APIRouter()


@router.websocket("/ws")
async def realtime_feed(websocket: WebSocket) -> None:
    manager: ConnectionManager = websocket.app.state.connections
    await manager.connect(websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(websocket)
