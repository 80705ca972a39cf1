import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.schemas import CareerCreate, JournalEntryCreate, ScoredCareer, TraitVector, UserUpsert  # noqa: E402
from app.storage import SQLiteCareerStore, StoreError, seed_careers  # noqa: E402


class SQLiteCareerStoreTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.store = SQLiteCareerStore(str(Path(self._tmp.name) / "nested" / "careers.db"))

    def tearDown(self):
        self.store.close()
        self._tmp.cleanup()

    def _career(self, title: str) -> str:
        return self.store.create_career(CareerCreate(title=title, description=f"{title} work")).id

    def test_user_upsert_refreshes_fields(self):
        created = self.store.upsert_user(UserUpsert(id="u1", email="a@example.com", first_name="Ada"))
        updated = self.store.upsert_user(UserUpsert(id="u1", email="a@example.com", first_name="Grace"))
        self.assertEqual(updated.first_name, "Grace")
        self.assertEqual(updated.created_at, created.created_at)
        self.assertIsNone(self.store.get_user("missing"))

    def test_assessment_is_replaced_not_versioned(self):
        self.assertIsNone(self.store.get_personality_assessment("u1"))
        self.store.save_personality_assessment("u1", TraitVector(openness=0.2))
        second = self.store.save_personality_assessment("u1", TraitVector(openness=0.9))

        current = self.store.get_personality_assessment("u1")
        self.assertEqual(current.id, second.id)
        self.assertAlmostEqual(current.openness, 0.9)

    def test_journal_entries_newest_first_with_limit(self):
        ids = [
            self.store.create_journal_entry("u1", JournalEntryCreate(mood="happy", enjoyed=f"entry {idx}")).id
            for idx in range(4)
        ]
        self.store.create_journal_entry("u2", JournalEntryCreate(enjoyed="someone else"))

        entries = self.store.get_journal_entries("u1", limit=3)
        self.assertEqual([entry.id for entry in entries], list(reversed(ids))[:3])
        self.assertIsNone(entries[0].themes)

    def test_analysis_update_overwrites_tags(self):
        entry = self.store.create_journal_entry("u1", JournalEntryCreate(enjoyed="coding"))
        self.store.update_journal_entry_analysis(entry.id, ["coding"], ["technology"], ["programming"])
        self.store.update_journal_entry_analysis(entry.id, ["coding"], ["technology"], [])

        stored = self.store.get_journal_entries("u1", limit=1)[0]
        self.assertEqual(stored.keywords, ["coding"])
        self.assertEqual(stored.themes, ["technology"])
        self.assertEqual(stored.skills, [])

    def test_careers_round_trip_in_insertion_order(self):
        self.assertEqual(seed_careers(self.store), 5)
        careers = self.store.get_all_careers()
        self.assertEqual(
            [career.title for career in careers],
            ["UX Designer", "Software Developer", "Graphic Designer", "Data Scientist", "Marketing Specialist"],
        )
        data_scientist = self.store.get_career_by_id(careers[3].id)
        self.assertIn("Python/R", data_scientist.skills)
        self.assertAlmostEqual(data_scientist.personality_vector.conscientiousness, 0.9)
        self.assertTrue(data_scientist.remote_work)
        self.assertIsNone(self.store.get_career_by_id("nope"))

    def test_recommendations_are_replaced_wholesale(self):
        a, b, c = self._career("A"), self._career("B"), self._career("C")
        self.store.save_career_recommendations(
            "u1",
            [ScoredCareer(career_id=a, match_score=0.9), ScoredCareer(career_id=b, match_score=0.5)],
        )
        self.store.save_career_recommendations("u1", [ScoredCareer(career_id=c, match_score=0.7)])

        recommendations = self.store.get_career_recommendations("u1")
        self.assertEqual([rec.career_id for rec in recommendations], [c])
        self.assertEqual(recommendations[0].career.title, "C")

    def test_equal_scores_keep_saved_order(self):
        a, b, c = self._career("A"), self._career("B"), self._career("C")
        self.store.save_career_recommendations(
            "u1",
            [
                ScoredCareer(career_id=b, match_score=0.8),
                ScoredCareer(career_id=c, match_score=0.4),
                ScoredCareer(career_id=a, match_score=0.4),
            ],
        )
        self.assertEqual([rec.career_id for rec in self.store.get_career_recommendations("u1")], [b, c, a])

    def test_failed_replace_keeps_previous_set(self):
        a = self._career("A")
        self.store.save_career_recommendations("u1", [ScoredCareer(career_id=a, match_score=0.6)])

        with self.assertRaises(StoreError):
            self.store.save_career_recommendations(
                "u1",
                [ScoredCareer(career_id="missing-career", match_score=0.9)],
            )

        remaining = self.store.get_career_recommendations("u1")
        self.assertEqual([rec.career_id for rec in remaining], [a])


if __name__ == "__main__":
    unittest.main()
