from __future__ import annotations

import asyncio
from collections.abc import Sequence
from datetime import datetime, timezone

from app.core.config.scoring import get_scoring_value
from app.schemas import DashboardStats, JournalEntry
from app.storage import CareerStore

_SECONDS_PER_DAY = 60 * 60 * 24


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def calculate_streak(entries: Sequence[JournalEntry], now: datetime | None = None) -> int:
    """Count leading entries (newest first) whose age in whole days equals their position."""
    if not entries:
        return 0
    reference = now or _utc_now()
    ordered = sorted(entries, key=lambda entry: entry.created_at, reverse=True)

    streak = 0
    for index, entry in enumerate(ordered):
        created = entry.created_at
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        days = int((reference - created).total_seconds() // _SECONDS_PER_DAY)
        if days != index:
            break
        streak += 1
    return streak


def calculate_overall_progress(has_assessment: bool, journal_count: int) -> int:
    progress = 0
    if has_assessment:
        progress += 40
    if journal_count > 0:
        progress += 20
    if journal_count >= 5:
        progress += 20
    if journal_count >= 10:
        progress += 20
    return min(progress, 100)


async def build_dashboard(store: CareerStore, user_id: str) -> DashboardStats:
    journal_window = int(get_scoring_value("recommendations.journal_window", 50))
    assessment, entries, recommendations = await asyncio.gather(
        asyncio.to_thread(store.get_personality_assessment, user_id),
        asyncio.to_thread(store.get_journal_entries, user_id, journal_window),
        asyncio.to_thread(store.get_career_recommendations, user_id),
    )
    return DashboardStats(
        assessment_complete=assessment is not None,
        journal_entry_count=len(entries),
        journal_streak=calculate_streak(entries),
        top_recommendations=recommendations[:3],
        overall_progress=calculate_overall_progress(assessment is not None, len(entries)),
    )
