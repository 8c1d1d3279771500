"""Database engine and session management."""

from collections.abc import Generator, Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from showcase.core.config import settings
from showcase.core.errors import StorageError


def build_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine; SQLite connections are shared across FastAPI worker threads."""
    connect_args: dict[str, Any] = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        url,
        pool_pre_ping=True,
        echo=echo,
        connect_args=connect_args,
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False


@contextmanager
def storage_errors(session: Session, action: str) -> Iterator[None]:
    """Roll back and re-raise database failures as StorageError("Error <action>")."""
    try:
        yield
    except SQLAlchemyError as e:
        session.rollback()
        raise StorageError(f"Error {action}") from e


def init_db(bind: Engine | None = None) -> None:
    """Create any missing tables. Alembic migrations describe the same schema."""
    from showcase.models import Base

    Base.metadata.create_all(bind=bind or engine)
