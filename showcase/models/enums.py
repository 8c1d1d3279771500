"""Closed value sets stored as plain strings in the database."""

from enum import StrEnum


class Role(StrEnum):
    USER = "user"
    ADMIN = "admin"


class ProjectStatus(StrEnum):
    """Moderation state of a project. New projects always start as PENDING."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
