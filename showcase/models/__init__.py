"""SQLAlchemy ORM models."""

from showcase.models.base import Base
from showcase.models.comment import Comment
from showcase.models.enums import ProjectStatus, Role
from showcase.models.project import Project
from showcase.models.user import User

__all__ = ["Base", "Comment", "Project", "ProjectStatus", "Role", "User"]
