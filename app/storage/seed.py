from __future__ import annotations

import json
import logging
from pathlib import Path

from app.schemas import CareerCreate

from .provider import CareerStore

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).with_name("careers.json")


def load_catalog(path: str | Path | None = None) -> list[CareerCreate]:
    catalog_path = Path(path) if path else DEFAULT_CATALOG_PATH
    with catalog_path.open("r", encoding="utf-8") as handle:
        raw = json.load(handle)
    if not isinstance(raw, list):
        raise RuntimeError(f"Invalid career catalog '{catalog_path}': expected a top-level list.")
    return [CareerCreate.model_validate(item) for item in raw]


def seed_careers(store: CareerStore, path: str | Path | None = None) -> int:
    """Insert the catalog only when the store has no careers yet. Returns rows inserted.

    The emptiness check and the inserts share one transaction, so a failed seed
    leaves the catalog empty and concurrent seeders cannot both insert.
    """
    careers = load_catalog(path)
    inserted = store.seed_catalog(careers)
    if inserted:
        logger.info("career_catalog_seeded count=%s", inserted)
    return inserted
