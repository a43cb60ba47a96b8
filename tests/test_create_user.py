"""Tests for the create_user CLI (app.scripts.create_user)."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from app.core.security import verify_password
from app.scripts.create_user import main
from app.services.users import find_user_by_email
from tests import support


class TestCreateUserCli(support.DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        patcher = patch("app.scripts.create_user.SessionLocal", self.SessionLocal)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _run(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_creates_user_with_hashed_password(self) -> None:
        code, out, _ = self._run("alice@example.com", "secret1")
        self.assertEqual(code, 0)
        self.assertIn("alice@example.com", out)
        user = find_user_by_email(self.db, "alice@example.com")
        self.assertIsNotNone(user)
        self.assertTrue(verify_password("secret1", user.password_hash))

    def test_duplicate_email_fails(self) -> None:
        self.assertEqual(self._run("alice@example.com", "secret1")[0], 0)
        code, _, err = self._run("alice@example.com", "secret2")
        self.assertEqual(code, 1)
        self.assertIn("already exists", err)

    def test_invalid_input_fails(self) -> None:
        for argv in (("not-an-email", "secret1"), ("alice@example.com", "short")):
            with self.subTest(argv=argv):
                code, _, err = self._run(*argv)
                self.assertEqual(code, 1)
                self.assertTrue(err)


if __name__ == "__main__":
    unittest.main()
