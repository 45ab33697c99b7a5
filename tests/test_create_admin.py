"""Tests for the create_admin command against an in-memory SQLite session."""

import unittest
from unittest.mock import MagicMock, patch

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import PASSWORD_MAX_LEN, USERNAME_MAX_LEN, PasswordHasher
from app.models import AdminUser, Base
from app.scripts.create_admin import main


class TestCreateAdmin(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False)

        session_patch = patch("app.scripts.create_admin.SessionLocal", self.SessionLocal)
        settings_patch = patch(
            "app.scripts.create_admin.get_settings",
            return_value=MagicMock(BCRYPT_ROUNDS=4),
        )
        session_patch.start()
        settings_patch.start()
        self.addCleanup(session_patch.stop)
        self.addCleanup(settings_patch.stop)

    def tearDown(self) -> None:
        self.engine.dispose()

    def _admins(self) -> list[AdminUser]:
        db = self.SessionLocal()
        try:
            return db.query(AdminUser).all()
        finally:
            db.close()

    def test_creates_admin_with_verifiable_hash(self) -> None:
        code = main(["admin", "pw", "--email", "admin@logicspark.com"])
        self.assertEqual(code, 0)
        admins = self._admins()
        self.assertEqual(len(admins), 1)
        self.assertEqual(admins[0].username, "admin")
        self.assertEqual(admins[0].email, "admin@logicspark.com")
        self.assertEqual(admins[0].role, "admin")
        self.assertNotEqual(admins[0].password_hash, "pw")
        self.assertTrue(PasswordHasher(rounds=4).verify("pw", admins[0].password_hash))

    def test_username_is_stripped(self) -> None:
        self.assertEqual(main(["  admin  ", "pw"]), 0)
        self.assertEqual(self._admins()[0].username, "admin")

    def test_second_create_with_same_username_fails(self) -> None:
        self.assertEqual(main(["admin", "pw"]), 0)
        self.assertEqual(main(["admin", "other-pw"]), 1)
        self.assertEqual(len(self._admins()), 1)

    def test_invalid_arguments_fail_without_writing(self) -> None:
        for argv in (
            ["   ", "pw"],
            ["x" * (USERNAME_MAX_LEN + 1), "pw"],
            ["admin", ""],
            ["admin", "p" * (PASSWORD_MAX_LEN + 1)],
        ):
            self.assertEqual(main(argv), 1)
        self.assertEqual(self._admins(), [])


if __name__ == "__main__":
    unittest.main()
