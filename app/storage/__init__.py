from functools import lru_cache

from app.core.config import settings

from .provider import CareerStore, StoreError
from .seed import load_catalog, seed_careers
from .sqlite_store import SQLiteCareerStore


@lru_cache(maxsize=1)
def get_default_store() -> CareerStore:
    return SQLiteCareerStore(settings.database_path)


__all__ = [
    "CareerStore",
    "StoreError",
    "SQLiteCareerStore",
    "get_default_store",
    "load_catalog",
    "seed_careers",
]
