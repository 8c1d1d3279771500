"""Project repository: submission, listing and moderation status updates."""

import logging
import threading
from collections.abc import Iterable

from sqlalchemy import func
from sqlalchemy.orm import Session

from showcase.core.database import storage_errors
from showcase.core.errors import ForbiddenError, NotFoundError, ValidationError
from showcase.models import Project, ProjectStatus, Role

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "description", "category")

SAMPLE_PROJECT = {
    "title": "Smart Home Automation System",
    "description": (
        "An innovative IoT-based home automation system that allows users to control "
        "their home appliances remotely using a mobile app. Features include energy "
        "monitoring, security integration, and voice control capabilities."
    ),
    "category": "IoT",
    "tags": ["IoT", "Home Automation", "Mobile App", "Energy Efficiency"],
    "image_url": "/uploads/sample-project.jpg",
}


def parse_tags(tags: Iterable[str] | str | None) -> list[str]:
    """
    Normalize tags to an ordered list of non-empty, stripped strings.
    Accepts a list or a comma-separated string ("IoT, Home Automation").
    """
    if tags is None:
        return []
    items = tags.split(",") if isinstance(tags, str) else tags
    return [str(t).strip() for t in items if t is not None and str(t).strip()]


def parse_status(value: str | None) -> ProjectStatus:
    try:
        return ProjectStatus((value or "").strip().lower())
    except ValueError:
        raise ValidationError(
            f"Invalid status; must be one of {', '.join(s.value for s in ProjectStatus)}"
        ) from None


class ProjectRepository:
    """
    Owns the projects table.

    All writes go through one process-wide lock and update a single row per
    transaction, so concurrent status changes on different projects cannot
    overwrite each other.
    """

    _write_lock = threading.Lock()

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(
        self,
        owner_user_id: str,
        title: str | None,
        description: str | None,
        category: str | None,
        tags: Iterable[str] | str | None = None,
        video_link: str | None = None,
        image_url: str | None = None,
        status: ProjectStatus = ProjectStatus.PENDING,
    ) -> Project:
        """Insert a project. Title, description and category are required; status starts pending."""
        project = self._build(
            owner_user_id, title, description, category, tags, video_link, image_url, status
        )
        with self._write_lock, storage_errors(self.session, "creating project"):
            self._insert(project)

        logger.info("Created project id=%s owner=%s", project.id, owner_user_id)
        return project

    def list_approved(self) -> list[Project]:
        return self.list_by_status(ProjectStatus.APPROVED)

    def list_by_status(self, status: ProjectStatus) -> list[Project]:
        with storage_errors(self.session, "fetching projects"):
            return (
                self.session.query(Project)
                .filter(Project.status == status.value)
                .order_by(Project.seq)
                .all()
            )

    def list_all(self) -> list[Project]:
        """Every project regardless of status. Callers must restrict this to admins."""
        with storage_errors(self.session, "fetching projects"):
            return self.session.query(Project).order_by(Project.seq).all()

    def get_by_id(self, project_id: str) -> Project:
        with storage_errors(self.session, "fetching project"):
            project = self.session.get(Project, project_id)
        if project is None:
            raise NotFoundError("Project not found")
        return project

    def set_status(
        self,
        project_id: str,
        new_status: str | ProjectStatus,
        requester_role: str | Role,
    ) -> Project:
        """
        Change a project's moderation status and return the updated project.

        Raises ForbiddenError unless requester_role is admin (nothing is written),
        ValidationError for an unknown status and NotFoundError for an unknown id.
        Any status may be set again later; approved/rejected are not terminal.
        """
        if requester_role != Role.ADMIN:
            raise ForbiddenError("Admin access required")
        status = parse_status(new_status)

        with self._write_lock, storage_errors(self.session, "updating project status"):
            project = self.session.get(Project, project_id, with_for_update=True)
            if project is None:
                self.session.rollback()
                raise NotFoundError("Project not found")
            previous = project.status
            project.status = status.value
            self.session.commit()
            self.session.refresh(project)

        logger.info(
            "Project id=%s status changed: %s -> %s", project_id, previous, status.value
        )
        return project

    def seed_sample_project(self) -> Project | None:
        """Insert the approved sample project if there are no projects yet."""
        project = self._build(owner_user_id="1", status=ProjectStatus.APPROVED, **SAMPLE_PROJECT)
        with self._write_lock, storage_errors(self.session, "seeding projects"):
            if self.session.query(Project.id).first() is not None:
                return None
            self._insert(project)
        logger.info("Seeded sample project id=%s", project.id)
        return project

    @staticmethod
    def _build(
        owner_user_id: str,
        title: str | None,
        description: str | None,
        category: str | None,
        tags: Iterable[str] | str | None = None,
        video_link: str | None = None,
        image_url: str | None = None,
        status: ProjectStatus = ProjectStatus.PENDING,
    ) -> Project:
        values = {
            "title": (title or "").strip(),
            "description": (description or "").strip(),
            "category": (category or "").strip(),
        }
        missing = [name for name in REQUIRED_FIELDS if not values[name]]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
        return Project(
            user_id=owner_user_id,
            tags=parse_tags(tags),
            video_link=(video_link or "").strip() or None,
            image_url=(image_url or "").strip() or None,
            status=status.value,
            **values,
        )

    def _insert(self, project: Project) -> None:
        # Caller holds _write_lock.
        current = self.session.query(func.max(Project.seq)).scalar()
        project.seq = (current or 0) + 1
        self.session.add(project)
        self.session.commit()
        self.session.refresh(project)
