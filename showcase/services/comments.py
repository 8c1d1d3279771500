"""Comment repository: append-only comments attached to projects by id."""

import logging
import threading

from sqlalchemy import func
from sqlalchemy.orm import Session

from showcase.core.database import storage_errors
from showcase.core.errors import ValidationError
from showcase.models import Comment

logger = logging.getLogger(__name__)


class CommentRepository:
    """
    Owns the comments table. project_id is not checked against the projects
    table: adding to or listing an unknown project is not an error.
    """

    _write_lock = threading.Lock()

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, project_id: str | None, author_user_id: str, content: str | None) -> Comment:
        project_id = (project_id or "").strip()
        content = (content or "").strip()
        if not project_id or not content:
            raise ValidationError("projectId and content are required")

        with self._write_lock, storage_errors(self.session, "adding comment"):
            current = self.session.query(func.max(Comment.seq)).scalar()
            comment = Comment(
                seq=(current or 0) + 1,
                project_id=project_id,
                user_id=author_user_id,
                content=content,
            )
            self.session.add(comment)
            self.session.commit()
            self.session.refresh(comment)

        logger.info("Added comment id=%s project=%s", comment.id, project_id)
        return comment

    def list_for_project(self, project_id: str) -> list[Comment]:
        with storage_errors(self.session, "fetching comments"):
            return (
                self.session.query(Comment)
                .filter(Comment.project_id == project_id)
                .order_by(Comment.seq)
                .all()
            )
