"""ActivityEvent ORM — login and profile-update events used for engagement analytics.

Invariants:
    - kind is an ActivityKind value
    - Written by the auth/profile layer; read-only for the analytics engine
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from pollen8.db.base import Base


class ActivityEvent(Base):
    """Single user activity event."""
    __tablename__ = "activity_events"
    __table_args__ = (
        Index("ix_activity_events_user_kind", "user_id", "kind", "occurred_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    kind: Mapped[str] = mapped_column(String(20), nullable=False)
    occurred_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
