"""Public project listing, project submission and project comments."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from showcase.api.auth import get_current_user
from showcase.core.database import get_db
from showcase.schemas.auth import TokenClaims
from showcase.schemas.comment import CommentRead
from showcase.schemas.project import ProjectCreate, ProjectRead
from showcase.services.comments import CommentRepository
from showcase.services.projects import ProjectRepository

router = APIRouter()


@router.get("", response_model=list[ProjectRead])
def list_projects(db: Annotated[Session, Depends(get_db)]) -> list[ProjectRead]:
    """Approved projects only, oldest first."""
    return [ProjectRead.model_validate(p) for p in ProjectRepository(db).list_approved()]


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project(
    body: ProjectCreate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[TokenClaims, Depends(get_current_user)],
) -> ProjectRead:
    """Submit a project for review. It stays hidden from the public list until approved."""
    project = ProjectRepository(db).create(
        owner_user_id=user.id,
        title=body.title,
        description=body.description,
        category=body.category,
        tags=body.tags,
        video_link=body.video_link,
        image_url=body.image_url,
    )
    return ProjectRead.model_validate(project)


@router.get("/{project_id}", response_model=ProjectRead)
def get_project(
    project_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> ProjectRead:
    return ProjectRead.model_validate(ProjectRepository(db).get_by_id(project_id))


@router.get("/{project_id}/comments", response_model=list[CommentRead])
def list_project_comments(
    project_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> list[CommentRead]:
    """Comments for a project, oldest first. Unknown projects return an empty list."""
    comments = CommentRepository(db).list_for_project(project_id)
    return [CommentRead.model_validate(c) for c in comments]
