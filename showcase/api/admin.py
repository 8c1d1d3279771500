"""Admin endpoints: project review queue and moderation."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from showcase.api.auth import get_bearer_token, require_admin
from showcase.core.database import get_db
from showcase.models import ProjectStatus
from showcase.schemas.auth import TokenClaims
from showcase.schemas.project import ProjectRead, StatusUpdate
from showcase.services.moderation import ModerationWorkflow
from showcase.services.projects import ProjectRepository

router = APIRouter()


@router.get("/projects", response_model=list[ProjectRead])
def list_all_projects(
    _admin: Annotated[TokenClaims, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> list[ProjectRead]:
    """Every project regardless of status (admin only)."""
    return [ProjectRead.model_validate(p) for p in ProjectRepository(db).list_all()]


@router.get("/pending", response_model=list[ProjectRead])
def list_pending_projects(
    _admin: Annotated[TokenClaims, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> list[ProjectRead]:
    """Projects awaiting review (admin only)."""
    projects = ProjectRepository(db).list_by_status(ProjectStatus.PENDING)
    return [ProjectRead.model_validate(p) for p in projects]


def _workflow(db: Session) -> ModerationWorkflow:
    return ModerationWorkflow(ProjectRepository(db))


@router.put("/projects/{project_id}/status", response_model=ProjectRead)
def update_project_status(
    project_id: str,
    _admin: Annotated[TokenClaims, Depends(require_admin)],
    token: Annotated[str | None, Depends(get_bearer_token)],
    db: Annotated[Session, Depends(get_db)],
    body: StatusUpdate,
) -> ProjectRead:
    """
    Set a project's status to pending, approved or rejected (admin only).
    The admin check runs as a dependency so unauthenticated calls get 401/403 before the body is validated.
    """
    project = _workflow(db).moderate(token, project_id, body.status)
    return ProjectRead.model_validate(project)


@router.put("/approve/{project_id}", response_model=ProjectRead)
def approve_project(
    project_id: str,
    token: Annotated[str | None, Depends(get_bearer_token)],
    db: Annotated[Session, Depends(get_db)],
) -> ProjectRead:
    return ProjectRead.model_validate(_workflow(db).approve(token, project_id))


@router.put("/reject/{project_id}", response_model=ProjectRead)
def reject_project(
    project_id: str,
    token: Annotated[str | None, Depends(get_bearer_token)],
    db: Annotated[Session, Depends(get_db)],
) -> ProjectRead:
    return ProjectRead.model_validate(_workflow(db).reject(token, project_id))
