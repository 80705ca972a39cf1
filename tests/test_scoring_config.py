import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.config.scoring import get_scoring_config, get_scoring_value


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("similarity.weights.personality"), 0.6)
        self.assertEqual(get_scoring_value("similarity.weights.interests"), 0.3)
        self.assertEqual(get_scoring_value("similarity.weights.skills"), 0.1)
        self.assertEqual(get_scoring_value("recommendations.top_n"), 10)
        self.assertEqual(get_scoring_value("recommendations.journal_window"), 50)

    def test_missing_path_returns_default(self):
        self.assertEqual(get_scoring_value("similarity.weights.unknown", 0.42), 0.42)
        self.assertEqual(get_scoring_value("similarity.weights.personality.deeper", "x"), "x")
        self.assertIsNone(get_scoring_value(""))


if __name__ == "__main__":
    unittest.main()
