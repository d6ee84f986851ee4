"""Domain Types — identity types and fixed values shared by both services.

Invariants:
    - UserId wraps int in 1..U32_MAX (0 is never a valid user), TodoId wraps a UUID4 string
    - CREATED_USER_ID is constant — the users service allocates no ids
    - ServiceName enumerates the two independently deployable apps

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
TodoId = NewType("TodoId", str)


# ─── Constants ───────────────────────────────────────────────────

CREATED_USER_ID = UserId(44)
DEFAULT_USER_AGE = 30
U32_MAX = 4_294_967_295  # user ids and ages are unsigned 32-bit


# ─── Enums ───────────────────────────────────────────────────────

class ServiceName(str, Enum):
    """The two HTTP services — each binds its own listener."""
    USERS = "users"
    TODOS = "todos"
