"""Match Feed API client.

A thin synchronous wrapper around the REST surface of the server, built
on ``requests``.  It exposes one method per operation:

* :meth:`MatchFeedAPI.list_users` – return every stored user.
* :meth:`MatchFeedAPI.get_user` – fetch a single user by id.
* :meth:`MatchFeedAPI.create_user` – add a user.
* :meth:`MatchFeedAPI.create_match` – add a match (which the server also
  pushes to its realtime clients).

Methods never raise on HTTP or network errors.  Each returns a tuple
``(data, error)`` where ``error`` is ``None`` on success and otherwise a
dictionary with ``status_code`` and ``message`` keys.

The server only accepts browser requests from one origin.  When the
client runs on behalf of such a front‑end, pass ``origin=`` and it is
sent as the ``Origin`` header on every request.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class MatchFeedAPI:
    """Client for the users/matches REST API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3002",
        origin: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, without the ``/api`` prefix.
            origin: Optional value for the ``Origin`` header.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.origin = origin
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against ``base_url + path``.

        Returns:
            ``(data, None)`` with the decoded JSON body on success, or
            ``(None, error)`` on failure.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.origin:
            headers["Origin"] = self.origin
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all users.  On failure the list is empty."""
        data, error = self._request("GET", "/api/users")
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    def get_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single user.  An unknown id yields a 404 error."""
        return self._request("GET", f"/api/users/{user_id}")

    def create_user(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/api/users", json_body=payload)

    # ------------------------------------------------------------------
    # Matches
    # ------------------------------------------------------------------
    def create_match(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a match.

        Args:
            payload: Match fields, e.g. ``{"id": 3, "team1": "Team E",
                "team2": "Team F", "score": "2-2"}``.
        """
        return self._request("POST", "/api/matches", json_body=payload)
