"""
Match endpoints.

Only creation is exposed.  Every created match is also pushed to the
connected realtime clients as a ``newMatch`` event (see ``realtime``).
The body is stored and broadcast exactly as posted.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from match_feed_api.app.api.deps import get_match_service
from match_feed_api.app.api.openapi import documented_body
from match_feed_api.app.schemas.match import MatchCreate, MatchRead
from match_feed_api.app.services.match_service import MatchService

router = APIRouter()


@router.post(
    "",
    response_model=None,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new sports match",
    responses={201: {"description": "Match created successfully", "model": MatchRead}},
    openapi_extra=documented_body(MatchCreate),
)
async def create_match(
    match_in: Dict[str, Any] = Body(...),
    service: MatchService = Depends(get_match_service),
) -> Dict[str, Any]:
    """Store a match and broadcast it to realtime clients."""
    return await service.create_match(match_in)
