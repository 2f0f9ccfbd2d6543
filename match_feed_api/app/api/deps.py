"""
FastAPI dependencies.

The store and the connection manager are owned by the application
instance (``app.state``); these helpers hand them, or services built on
them, to the endpoints.
"""

from fastapi import Depends, Request

from match_feed_api.app.core.realtime import ConnectionManager
from match_feed_api.app.core.store import DataStore
from match_feed_api.app.services.match_service import MatchService
from match_feed_api.app.services.user_service import UserService


def get_store(request: Request) -> DataStore:
    return request.app.state.store


def get_connections(request: Request) -> ConnectionManager:
    return request.app.state.connections


def get_user_service(store: DataStore = Depends(get_store)) -> UserService:
    return UserService(store)


def get_match_service(
    store: DataStore = Depends(get_store),
    connections: ConnectionManager = Depends(get_connections),
) -> MatchService:
    return MatchService(store, connections)
