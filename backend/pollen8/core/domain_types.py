"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, ConnectionId, InviteId wrap UUIDs — never use bare UUID in domain logic
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
ConnectionId = NewType("ConnectionId", UUID)
InviteId = NewType("InviteId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class ActivityKind(str, Enum):
    """Kinds of user activity recorded by the auth/profile layer."""
    LOGIN = "login"
    PROFILE_UPDATE = "profile_update"
