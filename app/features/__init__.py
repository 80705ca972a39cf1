from .journal_signals import (
    SKILL_LABELS,
    THEME_LABELS,
    JournalSignals,
    extract_journal_signals,
    extract_keywords,
    extract_skills,
    extract_themes,
)
from .traits import QUESTION_BANK, normalize_traits

__all__ = [
    "SKILL_LABELS",
    "THEME_LABELS",
    "JournalSignals",
    "extract_journal_signals",
    "extract_keywords",
    "extract_skills",
    "extract_themes",
    "QUESTION_BANK",
    "normalize_traits",
]
