"""
Path2Hack Backend: User SQLAlchemy Model
=========================================

What:  ORM model for the `users` table.
Who:   Written by UserService on registration; never updated or deleted.

Table Design Rationale:
    - email carries a UNIQUE index: it is the identity key, and the index is what
      makes concurrent registrations with the same address safe
    - username is free text; no uniqueness is implied
    - text columns carry no length limit; the stored values are whatever the
      client sent
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from path2hack.database import Base


class User(Base):
    """A registered portal user, keyed by email."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    username: Mapped[str] = mapped_column(Text, nullable=False)

    # Identity key: duplicate inserts fail with IntegrityError
    email: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        unique=True,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
