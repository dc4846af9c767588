"""Industry ORM — catalogue of industries users attach to their profiles.

Invariants:
    - name is unique
"""

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from pollen8.db.base import Base


class Industry(Base):
    """Industry label (Technology, Finance, ...)."""
    __tablename__ = "industries"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    users: Mapped[list["User"]] = relationship(
        "User", secondary="user_industries", back_populates="industries",
    )
