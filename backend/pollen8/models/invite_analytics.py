"""InviteAnalytics ORM — per-invite, per-date click counter.

Invariants:
    - One row per (invite_id, day); the column is named "date" (uq_invite_analytics_day)
    - clicks counts the clicks recorded on `day`; starts at 1, only increases

Design Decisions:
    - Written in the same transaction as the click_count increment, so windowed
      queries never need to rescan raw click events
"""

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from pollen8.db.base import Base


class InviteAnalytics(Base):
    """Daily click counter for one invite."""
    __tablename__ = "invite_analytics"
    __table_args__ = (
        UniqueConstraint("invite_id", "date", name="uq_invite_analytics_day"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    invite_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("invites.id", ondelete="CASCADE"),
        nullable=False,
    )
    day: Mapped[date] = mapped_column("date", Date, nullable=False)
    clicks: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
