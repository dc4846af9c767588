"""Connection ORM — one directional edge of a mutual connection between two users.

Invariants:
    - Directional: user_id (initiator) -> connected_user_id (target)
    - A mutual relationship is two rows (A->B and B->A), written and removed together
    - At most one row per ordered (user_id, connected_user_id) pair (uq_connection_pair)
    - value is fixed at CONNECTION_VALUE when the row is written

Design Decisions:
    - The unique constraint is the authoritative conflict signal for concurrent
      creates of the same pair
    - Separate indexes on each endpoint: network queries filter on either column
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Float, DateTime, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from pollen8.core.network_value import CONNECTION_VALUE
from pollen8.db.base import Base


class Connection(Base):
    """Directional connection record."""
    __tablename__ = "connections"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "connected_user_id", name="uq_connection_pair",
        ),
        Index("ix_connections_connected_user_id", "connected_user_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    connected_user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    value: Mapped[float] = mapped_column(
        Float, nullable=False, default=CONNECTION_VALUE,
    )
    connected_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
