"""ORM model for project comments (append-only)."""

import uuid

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from showcase.models.base import Base


class Comment(Base):
    __tablename__ = "comments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    seq = Column(Integer, nullable=False, index=True)
    project_id = Column(String(36), nullable=False, index=True)
    user_id = Column(String(36), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
