import json
import sqlite3
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.storage import SQLiteCareerStore, StoreError, load_catalog, seed_careers  # noqa: E402


class CatalogSeedTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.store = SQLiteCareerStore(str(Path(self._tmp.name) / "careers.db"))

    def tearDown(self):
        self.store.close()
        self._tmp.cleanup()

    def test_seeding_only_runs_on_empty_catalog(self):
        self.assertEqual(seed_careers(self.store), 5)
        self.assertEqual(seed_careers(self.store), 0)
        self.assertEqual(len(self.store.get_all_careers()), 5)

    def test_failed_seed_rolls_back_every_insert(self):
        real_insert = self.store._insert_career
        seen = []

        def insert_until_third(cur, career):
            seen.append(career.title)
            if len(seen) == 3:
                raise sqlite3.IntegrityError("constraint failed")
            return real_insert(cur, career)

        with patch.object(self.store, "_insert_career", side_effect=insert_until_third):
            with self.assertRaises(StoreError):
                seed_careers(self.store)

        self.assertEqual(self.store.get_all_careers(), [])
        self.assertEqual(seed_careers(self.store), 5)
        self.assertEqual(len(self.store.get_all_careers()), 5)

    def test_second_connection_does_not_duplicate_catalog(self):
        other = SQLiteCareerStore(self.store.db_path)
        try:
            self.assertEqual(seed_careers(self.store), 5)
            self.assertEqual(seed_careers(other), 0)
            self.assertEqual(len(other.get_all_careers()), 5)
        finally:
            other.close()

    def test_custom_catalog_file(self):
        path = Path(self._tmp.name) / "catalog.json"
        path.write_text(
            json.dumps([{"title": "Librarian", "description": "Curate collections", "interests": ["learning"]}]),
            encoding="utf-8",
        )
        self.assertEqual(seed_careers(self.store, path), 1)
        career = self.store.get_all_careers()[0]
        self.assertEqual(career.title, "Librarian")
        self.assertIsNone(career.personality_vector)

    def test_catalog_must_be_a_list(self):
        path = Path(self._tmp.name) / "bad.json"
        path.write_text(json.dumps({"title": "x"}), encoding="utf-8")
        with self.assertRaises(RuntimeError):
            load_catalog(path)


if __name__ == "__main__":
    unittest.main()
