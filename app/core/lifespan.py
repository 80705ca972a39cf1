from contextlib import asynccontextmanager
import asyncio
import logging

from app.core.config import settings
from app.schemas import UserUpsert
from app.storage import get_default_store, seed_careers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    store = get_default_store()

    if settings.seed_catalog_on_startup:
        try:
            inserted = await asyncio.to_thread(seed_careers, store)
            if inserted:
                logger.info("career_catalog_ready inserted=%s", inserted)
        except Exception as exc:  # pragma: no cover - startup continues without a catalog
            logger.warning("career_catalog_seed_failed: %s", exc)

    await asyncio.to_thread(
        store.upsert_user,
        UserUpsert(
            id=settings.demo_user_id,
            email=settings.demo_user_email,
            first_name="Demo",
            last_name="User",
        ),
    )
    app.state.store = store
    try:
        yield
    finally:
        store.close()
        # A later startup in this process must open a fresh connection.
        get_default_store.cache_clear()
