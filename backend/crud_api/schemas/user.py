"""User Schemas — Pydantic models for the users service boundary.

Invariants:
    - id and age are unsigned 32-bit (0..U32_MAX); age is otherwise unchecked
    - name/email emptiness is a domain rule (user_factory), not a schema rule,
      so it surfaces as VALIDATION_ERROR from the domain handler

Design Decisions:
    - Create and update share UserPayload: the bodies are structurally identical
"""

from typing import Annotated

from pydantic import BaseModel, Field

from crud_api.core.domain_types import U32_MAX

U32 = Annotated[int, Field(ge=0, le=U32_MAX)]


class User(BaseModel):
    """Fabricated user record — never persisted."""
    id: U32 | None = None
    name: str
    email: str
    age: U32


class UserPayload(BaseModel):
    """Request body for POST /users and PUT /users/{id}."""
    name: str
    email: str
    age: U32


CreateUserRequest = UserPayload
UpdateUserRequest = UserPayload


class UserListResponse(BaseModel):
    users: list[User]
    total: int


class UserResponse(BaseModel):
    user: User


class UserMutationResponse(BaseModel):
    """Create/update acknowledgement echoing the resulting record."""
    message: str
    user: User


class MessageResponse(BaseModel):
    message: str
