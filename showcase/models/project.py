"""ORM model for submitted projects."""

import uuid

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text, func

from showcase.models.base import Base
from showcase.models.enums import ProjectStatus


class Project(Base):
    """
    A project submitted for the showcase.

    user_id references the submitting user by id only (no foreign key), so
    projects survive independently of the users table. Only APPROVED projects
    are visible on the public listing.
    """

    __tablename__ = "projects"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    # Monotonic insertion counter; created_at alone can tie within one clock tick.
    seq = Column(Integer, nullable=False, index=True)
    user_id = Column(String(36), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(255), nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    video_link = Column(String(2048), nullable=True)
    image_url = Column(String(2048), nullable=True)
    status = Column(
        String(32),
        nullable=False,
        default=ProjectStatus.PENDING.value,
        index=True,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
