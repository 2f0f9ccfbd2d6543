"""
Service layer for sports matches.

Creating a match appends it to the store and then announces it to every
connected realtime client as a ``newMatch`` event.  The announcement is
best effort and never makes the creation fail.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from match_feed_api.app.core.realtime import NEW_MATCH_EVENT, ConnectionManager
from match_feed_api.app.core.store import DataStore

logger = logging.getLogger(__name__)


class MatchService:
    """Service class for the match collection."""

    def __init__(self, store: DataStore, connections: ConnectionManager) -> None:
        self.store = store
        self.connections = connections

    async def create_match(self, data: Dict[str, Any]) -> Dict[str, Any]:
        match = self.store.add_match(data)
        delivered = await self.connections.broadcast(NEW_MATCH_EVENT, match)
        logger.info("Created match %s, pushed to %d client(s)", match.get("id"), delivered)
        return match
