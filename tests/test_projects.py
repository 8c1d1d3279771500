"""Unit tests for showcase.services.projects: submission, listing and status changes."""

import unittest

from showcase.core.errors import ForbiddenError, NotFoundError, ValidationError
from showcase.models import Project, ProjectStatus, Role
from showcase.services.projects import ProjectRepository, parse_status, parse_tags
from tests.support import DatabaseTestCase


def _create(repo: ProjectRepository, title: str = "T", **kwargs: object) -> Project:
    defaults: dict[str, object] = {
        "owner_user_id": "owner-1",
        "description": "D",
        "category": "IoT",
    }
    defaults.update(kwargs)
    return repo.create(title=title, **defaults)


class TestParseTags(unittest.TestCase):
    def test_none(self) -> None:
        self.assertEqual(parse_tags(None), [])

    def test_comma_separated_string(self) -> None:
        self.assertEqual(parse_tags("IoT, Home Automation ,,Mobile"), ["IoT", "Home Automation", "Mobile"])

    def test_list_keeps_order_and_drops_blanks(self) -> None:
        self.assertEqual(parse_tags(["b", " ", "a "]), ["b", "a"])


class TestParseStatus(unittest.TestCase):
    def test_known_values(self) -> None:
        self.assertEqual(parse_status("Approved"), ProjectStatus.APPROVED)
        self.assertEqual(parse_status(ProjectStatus.PENDING), ProjectStatus.PENDING)

    def test_unknown_value(self) -> None:
        for value in (None, "", "archived"):
            with self.subTest(value=value), self.assertRaises(ValidationError):
                parse_status(value)


class TestCreate(DatabaseTestCase):
    def test_new_project_is_pending(self) -> None:
        project = _create(ProjectRepository(self.session), tags="IoT, Sensors", video_link="https://v")
        self.assertEqual(project.status, ProjectStatus.PENDING)
        self.assertEqual(project.tags, ["IoT", "Sensors"])
        self.assertEqual(project.video_link, "https://v")
        self.assertEqual(project.user_id, "owner-1")
        self.assertTrue(project.id)
        self.assertIsNotNone(project.created_at)

    def test_required_fields(self) -> None:
        repo = ProjectRepository(self.session)
        for missing in ("title", "description", "category"):
            kwargs = {"title": "T", "description": "D", "category": "IoT"}
            kwargs[missing] = "  "
            with self.subTest(missing=missing):
                with self.assertRaises(ValidationError) as ctx:
                    repo.create(owner_user_id="owner-1", **kwargs)
                self.assertIn(missing, ctx.exception.message)
        self.assertEqual(repo.list_all(), [])

    def test_optional_fields_default_empty(self) -> None:
        project = _create(ProjectRepository(self.session))
        self.assertEqual(project.tags, [])
        self.assertIsNone(project.video_link)
        self.assertIsNone(project.image_url)


class TestListing(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.repo = ProjectRepository(self.session)

    def test_fresh_project_not_in_approved_list(self) -> None:
        project = _create(self.repo)
        self.assertNotIn(project.id, [p.id for p in self.repo.list_approved()])

    def test_approved_project_listed(self) -> None:
        project = _create(self.repo)
        self.repo.set_status(project.id, "approved", Role.ADMIN)
        self.assertEqual([p.id for p in self.repo.list_approved()], [project.id])

    def test_rejected_project_not_listed(self) -> None:
        project = _create(self.repo)
        self.repo.set_status(project.id, "rejected", "admin")
        self.assertEqual(self.repo.list_approved(), [])

    def test_list_all_in_insertion_order(self) -> None:
        ids = [_create(self.repo, title=f"P{i}").id for i in range(5)]
        self.repo.set_status(ids[3], "approved", "admin")
        self.repo.set_status(ids[1], "rejected", "admin")
        self.assertEqual([p.id for p in self.repo.list_all()], ids)

    def test_list_approved_in_insertion_order(self) -> None:
        ids = [_create(self.repo, title=f"P{i}").id for i in range(4)]
        for pid in reversed(ids):
            self.repo.set_status(pid, "approved", "admin")
        self.assertEqual([p.id for p in self.repo.list_approved()], ids)

    def test_list_by_status_pending(self) -> None:
        a = _create(self.repo, title="A")
        b = _create(self.repo, title="B")
        self.repo.set_status(a.id, "approved", "admin")
        self.assertEqual([p.id for p in self.repo.list_by_status(ProjectStatus.PENDING)], [b.id])

    def test_get_by_id(self) -> None:
        project = _create(self.repo, title="Mine")
        self.assertEqual(self.repo.get_by_id(project.id).title, "Mine")

    def test_get_unknown_id(self) -> None:
        with self.assertRaises(NotFoundError):
            self.repo.get_by_id("does-not-exist")


class TestSetStatus(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.repo = ProjectRepository(self.session)
        self.project = _create(self.repo)

    def test_non_admin_is_forbidden_and_status_unchanged(self) -> None:
        for role in ("user", Role.USER, "", "Admin"):
            with self.subTest(role=role), self.assertRaises(ForbiddenError):
                self.repo.set_status(self.project.id, "approved", role)
        fresh = ProjectRepository(self.SessionLocal()).get_by_id(self.project.id)
        self.assertEqual(fresh.status, ProjectStatus.PENDING)

    def test_unknown_id(self) -> None:
        with self.assertRaises(NotFoundError):
            self.repo.set_status("missing", "approved", "admin")

    def test_invalid_status(self) -> None:
        with self.assertRaises(ValidationError):
            self.repo.set_status(self.project.id, "published", "admin")
        self.assertEqual(self.repo.get_by_id(self.project.id).status, ProjectStatus.PENDING)

    def test_status_can_be_flipped_again(self) -> None:
        self.repo.set_status(self.project.id, "approved", "admin")
        self.repo.set_status(self.project.id, "rejected", "admin")
        updated = self.repo.set_status(self.project.id, "approved", "admin")
        self.assertEqual(updated.status, ProjectStatus.APPROVED)

    def test_reset_to_pending(self) -> None:
        self.repo.set_status(self.project.id, "approved", "admin")
        updated = self.repo.set_status(self.project.id, "pending", "admin")
        self.assertEqual(updated.status, ProjectStatus.PENDING)
        self.assertEqual(self.repo.list_approved(), [])

    def test_update_is_persisted(self) -> None:
        self.repo.set_status(self.project.id, "approved", "admin")
        other = ProjectRepository(self.SessionLocal())
        self.assertEqual(other.get_by_id(self.project.id).status, ProjectStatus.APPROVED)
        other.session.close()


class TestSeedSampleProject(DatabaseTestCase):
    def test_seeds_approved_sample_when_empty(self) -> None:
        repo = ProjectRepository(self.session)
        project = repo.seed_sample_project()
        self.assertIsNotNone(project)
        self.assertEqual(project.status, ProjectStatus.APPROVED)
        self.assertEqual(project.category, "IoT")
        self.assertEqual([p.id for p in repo.list_approved()], [project.id])

    def test_does_nothing_when_projects_exist(self) -> None:
        repo = ProjectRepository(self.session)
        _create(repo)
        self.assertIsNone(repo.seed_sample_project())
        self.assertEqual(len(repo.list_all()), 1)


if __name__ == "__main__":
    unittest.main()
