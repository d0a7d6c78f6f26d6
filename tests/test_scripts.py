"""Tests for the CLI scripts: create_user and seed_catalog."""

import unittest
from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from unittest.mock import patch

from db_support import make_session_factory
from wastetrack.core.security import verify_password
from wastetrack.models import Location, User, WasteType
from wastetrack.scripts import create_user
from wastetrack.scripts.seed_catalog import (
    DEFAULT_LOCATIONS,
    DEFAULT_WASTE_TYPES,
    seed_catalog,
)


class TestSeedCatalog(unittest.TestCase):
    """seed_catalog inserts the defaults once and is idempotent."""

    def setUp(self) -> None:
        self.db = make_session_factory()()

    def tearDown(self) -> None:
        self.db.close()

    def test_seeds_then_noop(self) -> None:
        added = seed_catalog(self.db)
        self.assertEqual(added, (len(DEFAULT_WASTE_TYPES), len(DEFAULT_LOCATIONS)))
        self.assertEqual(seed_catalog(self.db), (0, 0))
        self.assertEqual(self.db.query(WasteType).count(), len(DEFAULT_WASTE_TYPES))
        self.assertEqual(self.db.query(Location).count(), len(DEFAULT_LOCATIONS))

    def test_keeps_existing_rows(self) -> None:
        self.db.add(WasteType(name="Vidrio"))
        self.db.add(Location(name="Lobby"))
        self.db.commit()
        types_added, _ = seed_catalog(self.db)
        self.assertEqual(types_added, len(DEFAULT_WASTE_TYPES) - 1)
        self.assertEqual(self.db.query(Location).filter(Location.name == "Lobby").count(), 1)

    def test_catalog_covers_spa_and_vidrio(self) -> None:
        self.assertIn("Vidrio", DEFAULT_WASTE_TYPES)
        self.assertIn("Spa", DEFAULT_LOCATIONS)
        self.assertEqual(len(set(DEFAULT_LOCATIONS)), len(DEFAULT_LOCATIONS))


class TestCreateUser(unittest.TestCase):
    """create_user stores a bcrypt hash and refuses duplicates and short passwords."""

    def setUp(self) -> None:
        self.session_factory = make_session_factory()
        patcher = patch.object(create_user, "SessionLocal", self.session_factory)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _run(self, *argv: str) -> int:
        with redirect_stdout(StringIO()), redirect_stderr(StringIO()):
            return create_user.main(list(argv))

    def test_creates_user_with_hash(self) -> None:
        self.assertEqual(self._run("jefe", "jefe-pass-123", "admin", "--name", "Jefe de Turno"), 0)
        db = self.session_factory()
        try:
            user = db.query(User).filter(User.username == "jefe").one()
            self.assertEqual(user.role, "admin")
            self.assertEqual(user.full_name, "Jefe de Turno")
            self.assertTrue(verify_password("jefe-pass-123", user.password_hash))
        finally:
            db.close()

    def test_default_role_is_operator(self) -> None:
        self.assertEqual(self._run("ana", "ana-pass-123"), 0)
        db = self.session_factory()
        try:
            self.assertEqual(db.query(User).filter(User.username == "ana").one().role, "operator")
        finally:
            db.close()

    def test_duplicate_rejected(self) -> None:
        self.assertEqual(self._run("ana", "ana-pass-123"), 0)
        self.assertEqual(self._run("ana", "other-pass-123"), 1)

    def test_short_password_rejected(self) -> None:
        self.assertEqual(self._run("ana", "short"), 1)


if __name__ == "__main__":
    unittest.main()
