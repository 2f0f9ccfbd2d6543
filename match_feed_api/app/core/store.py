"""
In‑memory data store.

``DataStore`` owns the two collections served by the API: users and
sports matches.  Records are plain dictionaries kept in insertion order;
they are only ever appended, never updated or removed.  Every access
goes through a lock so that scans and appends stay serialized even if
handlers end up running on a worker thread.

Each application instance owns its own store (see ``create_app``), which
keeps tests isolated from one another.  Nothing is persisted: the data
lives exactly as long as the store object.
"""

from __future__ import annotations

import copy
import threading
from typing import Any, Dict, Iterable, List, Optional

Record = Dict[str, Any]

SEED_USERS: List[Record] = [
    {"id": 1, "name": "John"},
    {"id": 2, "name": "Jane"},
]

SEED_MATCHES: List[Record] = [
    {"id": 1, "team1": "Team A", "team2": "Team B", "score": "0-0"},
    {"id": 2, "team1": "Team C", "team2": "Team D", "score": "1-2"},
]


class DataStore:
    """Process‑local holder for the user and match collections."""

    def __init__(
        self,
        users: Optional[Iterable[Record]] = None,
        matches: Optional[Iterable[Record]] = None,
    ) -> None:
        self._lock = threading.Lock()
        self._users: List[Record] = [dict(u) for u in users or []]
        self._matches: List[Record] = [dict(m) for m in matches or []]

    @classmethod
    def with_seed_data(cls) -> "DataStore":
        """Return a store holding the fixed startup records."""
        return cls(copy.deepcopy(SEED_USERS), copy.deepcopy(SEED_MATCHES))

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def list_users(self) -> List[Record]:
        with self._lock:
            return [dict(u) for u in self._users]

    def find_user(self, user_id: Optional[int]) -> Optional[Record]:
        """Return the first user whose ``id`` equals ``user_id``.

        ``None`` stands for an unparseable identifier and never matches,
        not even a record stored without an ``id``.
        """
        if user_id is None:
            return None
        with self._lock:
            for user in self._users:
                if "id" in user and user["id"] == user_id:
                    return dict(user)
        return None

    def add_user(self, record: Record) -> Record:
        """Append ``record`` as is.  Duplicate ids are not rejected."""
        stored = dict(record)
        with self._lock:
            self._users.append(stored)
        return dict(stored)

    # ------------------------------------------------------------------
    # Matches
    # ------------------------------------------------------------------
    def list_matches(self) -> List[Record]:
        """Return copies of all matches in insertion order."""
        with self._lock:
            return [dict(m) for m in self._matches]

    def add_match(self, record: Record) -> Record:
        stored = dict(record)
        with self._lock:
            self._matches.append(stored)
        return dict(stored)
