"""
Path2Hack Backend: Project SQLAlchemy Model
============================================

What:  ORM model for the `projects` table (hackathon project submissions).
Who:   Written by ProjectService on creation; never updated by this service.

Table Design Rationale:
    - project_name is UNIQUE: the portal addresses projects by name, and the
      index turns "insert if absent" into a single atomic statement
    - image_url stores the upload path, not the bytes; the filesystem owns the file
    - tech_stack is a JSON array so the submitted order survives the round trip
    - user_name is NOT a foreign key: submissions are not checked against users
    - every string column is unbounded TEXT; names and URLs are not length-checked
"""

import uuid
from datetime import datetime, timezone
from typing import List

from sqlalchemy import JSON, Boolean, DateTime, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from path2hack.database import Base


class Project(Base):
    """A submitted hackathon project."""

    __tablename__ = "projects"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    project_name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        unique=True,
        index=True,
    )

    # Path to the uploaded image (e.g. "uploads/1700000000000-cover.png"), or NULL
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    hackathon_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    devpost_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    devfolio_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    github_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    project_description: Mapped[str | None] = mapped_column(Text, nullable=True)

    tech_stack: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    is_project_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_winner: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    user_name: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, project_name='{self.project_name}')>"
