from __future__ import annotations

import asyncio
import logging

from app.features import JournalSignals, extract_journal_signals
from app.schemas import JournalEntry
from app.storage import CareerStore

from .recommendation_service import regenerate_recommendations_quietly

logger = logging.getLogger(__name__)

WRITING_PROMPTS: tuple[str, ...] = (
    "What made you feel proud today?",
    "Describe a moment when time flew by",
    "What would you change about your day?",
    "What new skill did you practice?",
    "Who inspired you today and why?",
    "What problem did you solve creatively?",
)


def analyze_journal_entry(store: CareerStore, entry: JournalEntry) -> JournalSignals:
    signals = extract_journal_signals(entry.enjoyed, entry.challenges, entry.learned)
    store.update_journal_entry_analysis(entry.id, signals.keywords, signals.themes, signals.skills)
    logger.info(
        "journal_entry_analyzed entry_id=%s keywords=%s themes=%s skills=%s",
        entry.id,
        len(signals.keywords),
        len(signals.themes),
        len(signals.skills),
    )
    return signals


async def process_new_journal_entry(store: CareerStore, entry: JournalEntry) -> None:
    """Runs after the create-entry response: analyse, then refresh recommendations.

    A failed analysis is logged and does not stop the regeneration.
    """
    try:
        await asyncio.to_thread(analyze_journal_entry, store, entry)
    except Exception:  # noqa: BLE001 - background task boundary
        logger.exception("journal_analysis_failed entry_id=%s", entry.id)

    await regenerate_recommendations_quietly(store, entry.user_id)
