"""Users Routes — mock CRUD endpoints with fabricated responses.

Invariants:
    - No backing store: every response is derived from the request alone
    - Zero id → INVALID_IDENTIFIER (400); empty name/email → VALIDATION_ERROR (400)
    - Negative, non-numeric, or above-U32_MAX id rejected by FastAPI validation (400)

Design Decisions:
    - Routes stay thin; record fabrication and checks live in core.user_factory
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Path, status

from crud_api.core import user_factory
from crud_api.core.domain_types import U32_MAX
from crud_api.schemas.user import (
    CreateUserRequest, MessageResponse, UpdateUserRequest,
    UserListResponse, UserMutationResponse, UserResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])

UserIdPath = Annotated[int, Path(ge=0, le=U32_MAX, description="User identifier; 0 is rejected")]


@router.get("", response_model=UserListResponse)
async def list_users():
    """Return the two fixed sample users."""
    users = user_factory.sample_users()
    return UserListResponse(users=users, total=len(users))


@router.post(
    "", response_model=UserMutationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(body: CreateUserRequest):
    """Echo the payload back as a created user with the constant id."""
    user = user_factory.build_created_user(body)
    logger.info("User created", extra={"user_id": user.id})
    return UserMutationResponse(message="User created successfully", user=user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: UserIdPath):
    return UserResponse(user=user_factory.fabricate_user(user_id))


@router.put("/{user_id}", response_model=UserMutationResponse)
async def update_user(body: UpdateUserRequest, user_id: UserIdPath):
    user = user_factory.build_updated_user(user_id, body)
    logger.info("User updated", extra={"user_id": user_id})
    return UserMutationResponse(message="User updated successfully", user=user)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: UserIdPath):
    """Acknowledge deletion without checking existence."""
    user_factory.check_user_id(user_id)
    logger.info("User deleted", extra={"user_id": user_id})
    return MessageResponse(message=f"User {user_id} deleted successfully")
