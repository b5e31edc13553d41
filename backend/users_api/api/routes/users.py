"""Users Routes — list, get, create, update and delete User records.

Invariants:
    - Not-found answers are 404 with an empty body (no error envelope)
    - PUT overwrites name, email and password together and never creates a row
    - PUT answers 201 with the updated user, same as POST
    - DELETE checks existence first: the repository delete does not report misses
    - Body "id" fields are ignored; ids come from the path or the store
    - Path ids outside 1..2**63-1 answer 400 VALIDATION_ERROR before any query

Design Decisions:
    - UserService injected per request via get_user_service (explicit construction)
    - Duplicate emails surface as EmailConflictError → 409 via the global handler
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from users_api.core.domain_types import UserId
from users_api.models.user import User
from users_api.schemas.user import UserCreate, UserResponse, UserUpdate
from users_api.services.user_service import UserService, get_user_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])

# Store ids are BIGINT; larger values would fail inside the driver
UserIdPath = Annotated[int, Path(ge=1, le=2**63 - 1)]


def _not_found(user_id: int) -> Response:
    logger.info(f"User {user_id} not found", extra={"user_id": user_id})
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    """List all users."""
    users = await service.get_all()
    return [UserResponse.model_validate(u) for u in users]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"description": "User not found (empty body)"}},
)
async def get_user(
    user_id: UserIdPath, service: UserService = Depends(get_user_service),
):
    """Get one user by id."""
    user = await service.user_by_id(UserId(user_id))
    if user is None:
        return _not_found(user_id)
    return UserResponse.model_validate(user)


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Email already in use"}},
)
async def create_user(
    body: UserCreate, service: UserService = Depends(get_user_service),
):
    """Create a user; the store assigns the id."""
    user = await service.save(
        User(name=body.name, email=body.email, password=body.password),
    )
    return UserResponse.model_validate(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"description": "User not found (empty body)"},
        409: {"description": "Email already in use"},
    },
)
async def update_user(
    user_id: UserIdPath,
    body: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    """Overwrite name, email and password of an existing user."""
    user = await service.user_by_id(UserId(user_id))
    if user is None:
        return _not_found(user_id)
    user.name = body.name
    user.email = body.email
    user.password = body.password
    user = await service.save(user)
    return UserResponse.model_validate(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "User not found (empty body)"}},
)
async def delete_user(
    user_id: UserIdPath, service: UserService = Depends(get_user_service),
):
    """Delete a user."""
    if await service.user_by_id(UserId(user_id)) is None:
        return _not_found(user_id)
    await service.delete(UserId(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
