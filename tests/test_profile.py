import sys
import unittest
from datetime import datetime, timezone
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.schemas import JournalEntry, TraitVector  # noqa: E402
from app.semantic import build_user_profile  # noqa: E402


def _entry(entry_id: str, themes=None, skills=None) -> JournalEntry:
    return JournalEntry(
        id=entry_id,
        user_id="u1",
        enjoyed="text",
        themes=themes,
        skills=skills,
        created_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
    )


class ProfileAggregatorTests(unittest.TestCase):
    def test_counts_themes_and_skills_across_entries(self):
        traits = TraitVector(openness=0.5)
        profile = build_user_profile(
            traits,
            [
                _entry("e1", themes=["technology", "learning"], skills=["programming"]),
                _entry("e2", themes=["technology"], skills=["programming", "writing"]),
                _entry("e3"),
            ],
        )
        self.assertIs(profile.traits, traits)
        self.assertEqual(profile.theme_counts, {"technology": 2, "learning": 1})
        self.assertEqual(profile.skill_counts, {"programming": 2, "writing": 1})
        self.assertEqual(profile.total_themes, 3)
        self.assertEqual(profile.total_skills, 3)

    def test_no_entries_gives_empty_frequencies(self):
        profile = build_user_profile(None, [])
        self.assertIsNone(profile.traits)
        self.assertEqual(profile.theme_counts, {})
        self.assertEqual(profile.total_themes, 0)


if __name__ == "__main__":
    unittest.main()
