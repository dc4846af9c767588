"""User ORM — the profile record that connections, invites and activity belong to.

Invariants:
    - id is UUID primary key
    - phone_number is unique (phone-verified accounts)
    - Only existence and lookup are used by the network engine; profile CRUD
      belongs to the user/auth layer

Design Decisions:
    - industries many-to-many through user_industries: feeds the industry
      breakdown of a user's network
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, ForeignKey, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from pollen8.db.base import Base

user_industries = Table(
    "user_industries",
    Base.metadata,
    Column(
        "user_id", UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"), primary_key=True,
    ),
    Column(
        "industry_id", UUID(as_uuid=True),
        ForeignKey("industries.id", ondelete="CASCADE"), primary_key=True,
    ),
)


class User(Base):
    """Platform user — owner of connections and invites."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    phone_number: Mapped[str] = mapped_column(
        String(20), nullable=False, unique=True,
    )
    city: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    zip_code: Mapped[str] = mapped_column(String(10), nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    industries: Mapped[list["Industry"]] = relationship(
        "Industry", secondary=user_industries,
        back_populates="users", lazy="selectin",
    )
