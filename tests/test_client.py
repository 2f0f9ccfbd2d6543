"""
tests/test_client.py - MatchFeedAPI client tests.

The requests session is replaced by a mock returning canned responses.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from match_feed_api.client import MatchFeedAPI


def make_response(status_code, body=None, text=None):
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = "http://testserver"
    if body is not None:
        resp._content = json.dumps(body).encode("utf-8")
    else:
        resp._content = (text or "").encode("utf-8")
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return MatchFeedAPI(base_url="http://localhost:3002/", session=session)


class TestRequests:
    def test_list_users(self, api, session):
        users = [{"id": 1, "name": "John"}]
        session.request.return_value = make_response(200, users)

        data, error = api.list_users()

        assert data == users
        assert error is None
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "http://localhost:3002/api/users"
        assert "Origin" not in kwargs["headers"]

    def test_get_user(self, api, session):
        session.request.return_value = make_response(200, {"id": 2, "name": "Jane"})
        data, error = api.get_user(2)
        assert data == {"id": 2, "name": "Jane"}
        assert session.request.call_args.kwargs["url"].endswith("/api/users/2")

    def test_create_user_sends_body(self, api, session):
        session.request.return_value = make_response(201, {"id": 3, "name": "Amy"})
        data, error = api.create_user({"id": 3, "name": "Amy"})
        assert error is None
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["json"] == {"id": 3, "name": "Amy"}

    def test_create_match(self, api, session):
        match = {"id": 3, "team1": "Team E", "team2": "Team F", "score": "2-2"}
        session.request.return_value = make_response(201, match)
        data, error = api.create_match(match)
        assert data == match
        assert session.request.call_args.kwargs["url"].endswith("/api/matches")

    def test_origin_header(self, session):
        api = MatchFeedAPI(origin="http://localhost:3000", session=session)
        session.request.return_value = make_response(200, [])
        api.list_users()
        assert session.request.call_args.kwargs["headers"] == {"Origin": "http://localhost:3000"}


class TestErrors:
    def test_not_found_message_comes_from_error_key(self, api, session):
        session.request.return_value = make_response(404, {"error": "User not found"})
        data, error = api.get_user(99)
        assert data is None
        assert error == {"status_code": 404, "message": "User not found"}

    def test_non_json_error_body(self, api, session):
        session.request.return_value = make_response(500, text="Internal Server Error")
        data, error = api.create_user({"name": "x"})
        assert data is None
        assert error == {"status_code": 500, "message": "Internal Server Error"}

    def test_list_users_failure_returns_empty_list(self, api, session):
        session.request.return_value = make_response(403, {"error": "Origin not allowed"})
        data, error = api.list_users()
        assert data == []
        assert error["status_code"] == 403
        assert error["message"] == "Origin not allowed"

    def test_connection_error(self, api, session):
        session.request.side_effect = requests.ConnectionError("refused")
        data, error = api.create_match({"id": 1})
        assert data is None
        assert error == {"status_code": None, "message": "refused"}
