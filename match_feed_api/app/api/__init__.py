"""
API package.

``router`` aggregates the REST endpoints mounted under ``/api``;
``realtime_router`` carries the WebSocket route, mounted at the root.
"""
