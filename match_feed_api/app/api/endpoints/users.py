"""
User endpoints.

List all users, fetch one by id and add new ones.  There is no update
or delete.  Ids are not generated or checked for uniqueness; a lookup
returns the first user with the requested id.  New users are stored
exactly as posted: the schemas in ``schemas.user`` only document the
usual shape.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, status

from match_feed_api.app.api.deps import get_user_service
from match_feed_api.app.api.openapi import documented_body
from match_feed_api.app.schemas.user import UserCreate, UserRead
from match_feed_api.app.services.user_service import UserService

router = APIRouter()


@router.get(
    "",
    response_model=None,
    summary="Get a list of users",
    responses={200: {"description": "Successful response", "model": List[UserRead]}},
)
async def list_users(service: UserService = Depends(get_user_service)) -> List[Dict[str, Any]]:
    """Return every stored user in insertion order."""
    return await service.list_users()


@router.get(
    "/{user_id}",
    response_model=None,
    summary="Get a user by ID",
    responses={
        200: {"description": "Successful response", "model": UserRead},
        404: {"description": "User not found"},
    },
)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> Dict[str, Any]:
    """Retrieve a single user by ID.

    ``user_id`` is declared as a string so that a non‑numeric id yields
    404 (nothing can match it) instead of a validation error.
    """
    user = await service.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.post(
    "",
    response_model=None,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new user",
    responses={201: {"description": "User created successfully", "model": UserRead}},
    openapi_extra=documented_body(UserCreate),
)
async def create_user(
    user_in: Dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    return await service.create_user(user_in)
