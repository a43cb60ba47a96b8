"""Shared fixtures: an isolated in-memory database per test and an API client bound to it."""

import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db, init_db
from app.main import app


def make_engine():
    """In-memory SQLite shared by every connection of the returned engine."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    return engine


class DatabaseTestCase(unittest.TestCase):
    """Gives each test a fresh schema and a session (self.db)."""

    def setUp(self) -> None:
        self.engine = make_engine()
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.db = self.SessionLocal()

    def tearDown(self) -> None:
        self.db.close()
        self.engine.dispose()


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient whose get_db points at the test database."""

    def setUp(self) -> None:
        super().setUp()

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = self.new_client()

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        super().tearDown()

    def new_client(self, **kwargs: object) -> TestClient:
        """A client with its own cookie jar (one per simulated browser)."""
        return TestClient(app, **kwargs)

    def register(self, client: TestClient, email: str, password: str = "secret1"):
        return client.post("/api/register", json={"email": email, "password": password})

    def login(self, client: TestClient, email: str, password: str = "secret1"):
        return client.post("/api/login", json={"email": email, "password": password})

    def signed_in_client(self, email: str, password: str = "secret1") -> TestClient:
        client = self.new_client()
        r = self.register(client, email, password)
        self.assertEqual(r.status_code, 201, r.text)
        return client
