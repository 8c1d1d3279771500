"""Comment submission."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from showcase.api.auth import get_current_user
from showcase.core.database import get_db
from showcase.schemas.auth import TokenClaims
from showcase.schemas.comment import CommentCreate, CommentRead
from showcase.services.comments import CommentRepository

router = APIRouter()


@router.post("", response_model=CommentRead, status_code=status.HTTP_201_CREATED)
def add_comment(
    body: CommentCreate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[TokenClaims, Depends(get_current_user)],
) -> CommentRead:
    comment = CommentRepository(db).add(
        project_id=body.project_id,
        author_user_id=user.id,
        content=body.content,
    )
    return CommentRead.model_validate(comment)
