from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from app.core.config.scoring import get_scoring_value
from app.schemas import CareerRecord, ScoredCareer
from app.semantic import UserProfile, build_user_profile, score_career
from app.storage import CareerStore

logger = logging.getLogger(__name__)


def rank_careers(profile: UserProfile, careers: Sequence[CareerRecord], top_n: int) -> list[ScoredCareer]:
    """Score every career and keep the best ``top_n``; ties keep catalog order."""
    scored = [
        ScoredCareer(career_id=career.id, match_score=score_career(profile, career))
        for career in careers
    ]
    # sorted() is stable, so equal scores stay in catalog order.
    ranked = sorted(scored, key=lambda item: item.match_score, reverse=True)
    return ranked[:top_n]


async def generate_recommendations(store: CareerStore, user_id: str) -> list[ScoredCareer] | None:
    """Rebuild and persist the user's recommendation set.

    Returns the persisted ranking, or None when the user has no assessment or
    the catalog is empty (nothing is written in that case). Store errors
    propagate to the caller.
    """
    journal_window = int(get_scoring_value("recommendations.journal_window", 50))
    top_n = int(get_scoring_value("recommendations.top_n", 10))

    assessment, entries, careers = await asyncio.gather(
        asyncio.to_thread(store.get_personality_assessment, user_id),
        asyncio.to_thread(store.get_journal_entries, user_id, journal_window),
        asyncio.to_thread(store.get_all_careers),
    )

    if assessment is None or not careers:
        logger.info(
            "recommendations_skipped user_id=%s has_assessment=%s catalog_size=%s",
            user_id,
            assessment is not None,
            len(careers),
        )
        return None

    profile = build_user_profile(assessment, entries)
    ranked = rank_careers(profile, careers, top_n)
    await asyncio.to_thread(store.save_career_recommendations, user_id, ranked)
    logger.info(
        "recommendations_generated user_id=%s entries=%s careers=%s kept=%s",
        user_id,
        len(entries),
        len(careers),
        len(ranked),
    )
    return ranked


async def regenerate_recommendations_quietly(store: CareerStore, user_id: str) -> None:
    """Background-task wrapper: failures are logged and discarded."""
    try:
        await generate_recommendations(store, user_id)
    except Exception:  # noqa: BLE001 - never surface background failures
        logger.exception("recommendations_generation_failed user_id=%s", user_id)
