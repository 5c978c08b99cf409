"""Tests for the create_user operator script against in-memory SQLite."""

import io
import unittest
from contextlib import contextmanager, redirect_stderr, redirect_stdout
from unittest.mock import patch

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.security import verify_password
from app.models import Base, User
from app.scripts.create_user import main


class TestCreateUser(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = create_engine("sqlite://")
        Base.metadata.create_all(self.engine)
        self.Session = sessionmaker(bind=self.engine)

        @contextmanager
        def scope():
            db = self.Session()
            try:
                yield db
            finally:
                db.close()

        patcher = patch("app.scripts.create_user.session_scope", scope)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self.engine.dispose()

    def _run(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_creates_admin(self) -> None:
        code, out, _ = self._run("root", "root@x.com", "s3cret-pass", "admin")
        self.assertEqual(code, 0)
        self.assertIn("role 'admin'", out)
        db = self.Session()
        try:
            user = db.query(User).filter(User.email == "root@x.com").one()
            self.assertEqual(user.role, "admin")
            self.assertTrue(verify_password("s3cret-pass", user.password_hash))
        finally:
            db.close()

    def test_refuses_duplicate_email(self) -> None:
        self._run("root", "root@x.com", "s3cret-pass")
        code, _, err = self._run("other", "root@x.com", "another-pass")
        self.assertEqual(code, 1)
        self.assertIn("already exists", err)

    def test_rejects_blank_username(self) -> None:
        code, _, err = self._run("   ", "root@x.com", "s3cret-pass")
        self.assertEqual(code, 1)
        self.assertIn("username", err)


if __name__ == "__main__":
    unittest.main()
