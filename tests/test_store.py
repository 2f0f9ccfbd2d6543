"""
tests/test_store.py - DataStore and user id parsing.
"""

import pytest

from match_feed_api.app.core.store import SEED_MATCHES, SEED_USERS, DataStore
from match_feed_api.app.services.user_service import parse_user_id


class TestDataStore:
    def test_seeded_store(self):
        store = DataStore.with_seed_data()
        assert store.list_users() == [{"id": 1, "name": "John"}, {"id": 2, "name": "Jane"}]
        assert store.list_matches() == [
            {"id": 1, "team1": "Team A", "team2": "Team B", "score": "0-0"},
            {"id": 2, "team1": "Team C", "team2": "Team D", "score": "1-2"},
        ]

    def test_stores_do_not_share_seed_records(self):
        first = DataStore.with_seed_data()
        first.add_user({"id": 3, "name": "Amy"})
        assert len(DataStore.with_seed_data().list_users()) == 2
        assert SEED_USERS == [{"id": 1, "name": "John"}, {"id": 2, "name": "Jane"}]
        assert len(SEED_MATCHES) == 2

    def test_returned_records_are_copies(self):
        store = DataStore.with_seed_data()
        store.list_users()[0]["name"] = "Changed"
        store.find_user(2)["name"] = "Changed"
        assert store.find_user(1) == {"id": 1, "name": "John"}
        assert store.find_user(2) == {"id": 2, "name": "Jane"}

    def test_find_user_returns_first_match(self):
        store = DataStore([{"id": 7, "name": "first"}, {"id": 7, "name": "second"}])
        assert store.find_user(7) == {"id": 7, "name": "first"}

    def test_find_user_none_never_matches(self):
        store = DataStore([{"name": "no id"}, {"id": None, "name": "null id"}])
        assert store.find_user(None) is None

    def test_add_match_appends(self):
        store = DataStore()
        store.add_match({"id": 1})
        store.add_match({"id": 1})
        assert store.list_matches() == [{"id": 1}, {"id": 1}]


class TestParseUserId:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1", 1),
            ("42", 42),
            ("-3", -3),
            ("+5", 5),
            (" 8", 8),
            ("3abc", 3),
            ("2.9", 2),
            ("abc", None),
            ("", None),
            ("NaN", None),
            ("-", None),
        ],
    )
    def test_parse(self, raw, expected):
        assert parse_user_id(raw) == expected
