"""SQLAlchemy declarative Base shared by the users, projects and comments tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
