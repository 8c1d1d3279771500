"""Unit tests for showcase.services.moderation: token check, admin gate, delegation."""

import unittest

from showcase.core.errors import AuthError, ForbiddenError, NotFoundError
from showcase.models import ProjectStatus
from showcase.services.moderation import ModerationWorkflow
from showcase.services.projects import ProjectRepository
from tests.support import DatabaseTestCase


class TestModerationWorkflow(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.admin_token = self.make_user("root", "root@x.com", role="admin")
        self.user_token = self.make_user("alice", "a@x.com")
        self.projects = ProjectRepository(self.session)
        self.workflow = ModerationWorkflow(self.projects)
        self.project = self.projects.create(
            owner_user_id="u-1", title="T", description="D", category="IoT"
        )

    def test_admin_approves(self) -> None:
        updated = self.workflow.approve(self.admin_token, self.project.id)
        self.assertEqual(updated.status, ProjectStatus.APPROVED)
        self.assertIn(self.project.id, [p.id for p in self.projects.list_approved()])

    def test_admin_rejects(self) -> None:
        updated = self.workflow.reject(self.admin_token, self.project.id)
        self.assertEqual(updated.status, ProjectStatus.REJECTED)
        self.assertEqual(self.projects.list_approved(), [])

    def test_approve_then_reject_is_allowed(self) -> None:
        self.workflow.approve(self.admin_token, self.project.id)
        updated = self.workflow.moderate(self.admin_token, self.project.id, "rejected")
        self.assertEqual(updated.status, ProjectStatus.REJECTED)

    def test_non_admin_forbidden_and_status_unchanged(self) -> None:
        with self.assertRaises(ForbiddenError):
            self.workflow.approve(self.user_token, self.project.id)
        self.assertEqual(self.projects.get_by_id(self.project.id).status, ProjectStatus.PENDING)

    def test_missing_or_invalid_token(self) -> None:
        for token in (None, "garbage"):
            with self.subTest(token=token), self.assertRaises(AuthError):
                self.workflow.approve(token, self.project.id)
        self.assertEqual(self.projects.get_by_id(self.project.id).status, ProjectStatus.PENDING)

    def test_unknown_project(self) -> None:
        with self.assertRaises(NotFoundError):
            self.workflow.approve(self.admin_token, "missing")


if __name__ == "__main__":
    unittest.main()
