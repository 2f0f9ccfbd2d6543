"""
Service layer for users.

Listing returns the collection in insertion order, lookups return the
first user carrying the requested id, and creation appends the payload
as received.  Path identifiers are parsed leniently: a leading integer
is taken and anything after it ignored, so ``"3abc"`` looks up user 3
while ``"abc"`` can never match.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

from match_feed_api.app.core.store import DataStore

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_user_id(raw: str) -> Optional[int]:
    """Return the integer at the start of ``raw`` or ``None`` if there is none."""
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


class UserService:
    """Service class for the user collection."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    async def list_users(self) -> List[Dict[str, Any]]:
        return self.store.list_users()

    async def get_user(self, raw_id: str) -> Optional[Dict[str, Any]]:
        """Look up a user by the raw path identifier."""
        return self.store.find_user(parse_user_id(raw_id))

    async def create_user(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Append a user and return the stored record.

        The payload is stored verbatim: no fields are added, dropped or
        converted, so ``{"id": "3"}`` keeps its string id.
        """
        user = self.store.add_user(data)
        logger.info("Created user %s", user.get("id"))
        return user
