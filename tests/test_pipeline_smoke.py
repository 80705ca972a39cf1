import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import app.main  # noqa: F401
from app.core.config.scoring import get_scoring_value


class PipelineSmokeTests(unittest.TestCase):
    def test_safe_imports_and_scoring_config_lookup(self):
        self.assertEqual(get_scoring_value("keywords.max_keywords"), 10)

    def test_routes_are_mounted(self):
        paths = {route.path for route in app.main.app.routes}
        for expected in (
            "/v1/health",
            "/v1/personality-assessment",
            "/v1/journal-entries",
            "/v1/careers/{career_id}",
            "/v1/career-recommendations",
            "/v1/dashboard",
        ):
            self.assertIn(expected, paths)


if __name__ == "__main__":
    unittest.main()
