import sys
import tempfile
import unittest
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from app.core.config import settings  # noqa: E402
from app.core.rate_limit import limiter  # noqa: E402
from app.main import app  # noqa: E402
from app.storage import get_default_store  # noqa: E402


class LifespanTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        test_settings = replace(
            settings,
            database_path=str(Path(self._tmp.name) / "careers.db"),
            seed_catalog_on_startup=True,
        )
        self._patches = [
            patch("app.storage.settings", test_settings),
            patch("app.core.lifespan.settings", test_settings),
            patch.object(limiter, "enabled", False),
        ]
        for item in self._patches:
            item.start()
        get_default_store.cache_clear()
        app.dependency_overrides.clear()

    def tearDown(self):
        for item in reversed(self._patches):
            item.stop()
        get_default_store.cache_clear()
        self._tmp.cleanup()

    def test_startup_seeds_catalog_and_demo_user(self):
        with TestClient(app) as client:
            self.assertEqual(client.get("/v1/health").json()["catalog_size"], 5)
            user = client.get("/v1/auth/user")
            self.assertEqual(user.status_code, 200)
            self.assertEqual(user.json()["id"], settings.demo_user_id)

    def test_app_restarts_in_same_process(self):
        for _ in range(2):
            with TestClient(app) as client:
                response = client.get("/v1/health")
                self.assertEqual(response.status_code, 200)
                self.assertEqual(response.json()["catalog_size"], 5)


if __name__ == "__main__":
    unittest.main()
