from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.config import settings  # noqa: E402
from app.storage import SQLiteCareerStore, seed_careers  # noqa: E402
from app.storage.seed import DEFAULT_CATALOG_PATH  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the career catalog when it is empty.")
    parser.add_argument("--db", default=settings.database_path, help="SQLite database path")
    parser.add_argument(
        "--data",
        default=str(DEFAULT_CATALOG_PATH),
        help="Career catalog JSON file",
    )
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level, format="%(message)s")
    store = SQLiteCareerStore(args.db)
    try:
        inserted = seed_careers(store, args.data)
    finally:
        store.close()

    if inserted:
        print(f"Inserted {inserted} careers into {args.db}")
    else:
        print(f"Catalog in {args.db} already populated; nothing to do")


if __name__ == "__main__":
    main()
