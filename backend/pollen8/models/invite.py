"""Invite ORM — trackable referral link owned by a user.

Invariants:
    - url is unique and never reused
    - click_count and conversion_count start at 0 and only ever increase
    - Immutable otherwise: no update or delete path exists

Design Decisions:
    - Counters updated with SQL-side increments (col = col + 1), never
      read-modify-write in Python
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from pollen8.db.base import Base


class Invite(Base):
    """Referral invite link."""
    __tablename__ = "invites"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    url: Mapped[str] = mapped_column(String(500), nullable=False, unique=True)
    click_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    conversion_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
