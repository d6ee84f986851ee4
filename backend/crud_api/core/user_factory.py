"""User Factory — pure fabrication and validation of mock User records.

Invariants:
    - No lookup, no storage: every User is derived from its inputs
    - Zero identifier is rejected before any record is built
    - Empty name or email is rejected on both create and update

Design Decisions:
    - Plain functions over a service class: nothing to hold between calls
"""

from crud_api.core.domain_types import CREATED_USER_ID, DEFAULT_USER_AGE, UserId
from crud_api.core.errors import InvalidFieldError, InvalidIdentifierError
from crud_api.schemas.user import User, UserPayload

SAMPLE_EMAIL = "6oL0U@example.com"


def sample_users() -> list[User]:
    """The two fixed records returned by the list endpoint."""
    return [
        User(id=1, name="John Doe", email=SAMPLE_EMAIL, age=30),
        User(id=2, name="Jane Doe", email=SAMPLE_EMAIL, age=25),
    ]


def check_user_id(user_id: int) -> UserId:
    if user_id == 0:
        raise InvalidIdentifierError("User", user_id)
    return UserId(user_id)


def check_payload(payload: UserPayload) -> None:
    """Raise InvalidFieldError for the first empty required field."""
    for field_name in ("name", "email"):
        if not getattr(payload, field_name):
            raise InvalidFieldError(field_name)


def build_created_user(payload: UserPayload) -> User:
    check_payload(payload)
    return User(
        id=CREATED_USER_ID,
        name=payload.name, email=payload.email, age=payload.age,
    )


def fabricate_user(user_id: int) -> User:
    """Deterministic stand-in record for GET /users/{id}."""
    uid = check_user_id(user_id)
    return User(
        id=uid,
        name=f"User {uid}",
        email=f"user{uid}@example.com",
        age=DEFAULT_USER_AGE,
    )


def build_updated_user(user_id: int, payload: UserPayload) -> User:
    uid = check_user_id(user_id)
    check_payload(payload)
    return User(
        id=uid, name=payload.name, email=payload.email, age=payload.age,
    )
