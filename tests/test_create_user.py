"""Tests for the create_user CLI (bootstrapping the first admin)."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from showcase.models import Role, User
from showcase.scripts import create_user
from tests.support import DatabaseTestCase


class TestCreateUserCli(DatabaseTestCase):
    def _run(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with patch.object(create_user, "SessionLocal", self.SessionLocal), patch.object(
            create_user, "init_db"
        ), redirect_stdout(out), redirect_stderr(err):
            code = create_user.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_creates_admin(self) -> None:
        code, out, _ = self._run("root", "root@x.com", "secret1", "admin")
        self.assertEqual(code, 0)
        self.assertIn("role 'admin'", out)
        user = self.session.query(User).filter(User.username == "root").one()
        self.assertEqual(user.role, Role.ADMIN)

    def test_default_role_is_user(self) -> None:
        code, _, _ = self._run("alice", "a@x.com", "secret1")
        self.assertEqual(code, 0)
        user = self.session.query(User).filter(User.username == "alice").one()
        self.assertEqual(user.role, Role.USER)

    def test_existing_user_fails(self) -> None:
        self._run("root", "root@x.com", "secret1", "admin")
        code, _, err = self._run("root", "other@x.com", "secret1")
        self.assertEqual(code, 1)
        self.assertIn("Username already exists", err)

    def test_short_password_fails(self) -> None:
        code, _, err = self._run("root", "root@x.com", "123")
        self.assertEqual(code, 1)
        self.assertIn("at least 6", err)


if __name__ == "__main__":
    unittest.main()
