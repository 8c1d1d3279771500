"""Shared test cases: a throwaway SQLite database and an API client bound to it."""

import tempfile
import unittest
from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from showcase.core.database import build_engine, get_db, init_db
from showcase.main import app
from showcase.services.credentials import CredentialStore


class DatabaseTestCase(unittest.TestCase):
    """Each test gets a fresh file-backed SQLite database (file-backed so threads can share it)."""

    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        self.engine = build_engine(f"sqlite:///{self._tmpdir.name}/test.db")
        init_db(self.engine)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.session = self.SessionLocal()

    def tearDown(self) -> None:
        self.session.close()
        self.engine.dispose()
        self._tmpdir.cleanup()

    def make_user(
        self,
        username: str = "alice",
        email: str = "a@x.com",
        password: str = "secret1",
        role: str | None = None,
    ) -> str:
        """Register a user directly through the credential store; return the token."""
        token, _ = CredentialStore(self.session).register(username, email, password, role)
        return token


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient whose get_db yields sessions on the test database."""

    def setUp(self) -> None:
        super().setUp()

        def override_get_db() -> Generator[Session, None, None]:
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        super().tearDown()

    @staticmethod
    def auth(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    def register(
        self,
        username: str,
        email: str,
        password: str = "secret1",
        role: str | None = None,
    ) -> str:
        body = {"username": username, "email": email, "password": password}
        if role is not None:
            body["role"] = role
        resp = self.client.post("/api/register", json=body)
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()["token"]
