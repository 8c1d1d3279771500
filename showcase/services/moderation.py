"""Moderation workflow: admin-gated project status transitions."""

import logging

from showcase.core.errors import ForbiddenError
from showcase.models import Project, ProjectStatus
from showcase.services.credentials import CredentialStore
from showcase.services.projects import ProjectRepository

logger = logging.getLogger(__name__)


class ModerationWorkflow:
    """
    Authenticate the requester from a bearer token, require the admin role,
    then delegate to ProjectRepository.set_status.

    No transition is locked: an approved project can be rejected or reset to
    pending by a later call, and vice versa.
    """

    def __init__(self, projects: ProjectRepository) -> None:
        self.projects = projects

    def moderate(self, token: str | None, project_id: str, new_status: str | None) -> Project:
        claims = CredentialStore.verify_token(token)
        if not claims.is_admin:
            logger.warning(
                "User id=%s (role=%s) attempted to moderate project id=%s",
                claims.id,
                claims.role,
                project_id,
            )
            raise ForbiddenError("Admin access required")
        return self.projects.set_status(project_id, new_status, claims.role)

    def approve(self, token: str | None, project_id: str) -> Project:
        return self.moderate(token, project_id, ProjectStatus.APPROVED)

    def reject(self, token: str | None, project_id: str) -> Project:
        return self.moderate(token, project_id, ProjectStatus.REJECTED)
