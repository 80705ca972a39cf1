from __future__ import annotations

import re
from dataclasses import dataclass, field

from app.core.config.scoring import get_scoring_value

# ASCII word characters only; accented letters are stripped like punctuation.
_PUNCT_RE = re.compile(r"[^A-Za-z0-9_\s]")
_SPACE_RE = re.compile(r"\s+")

_STOPWORDS = {
    "a",
    "an",
    "and",
    "are",
    "as",
    "at",
    "be",
    "by",
    "for",
    "from",
    "has",
    "he",
    "in",
    "is",
    "it",
    "its",
    "of",
    "on",
    "that",
    "the",
    "to",
    "was",
    "were",
    "will",
    "with",
    "i",
    "me",
    "my",
    "myself",
    "we",
    "us",
    "our",
    "you",
    "your",
    "have",
    "had",
    "do",
    "does",
    "did",
    "can",
    "could",
    "should",
    "would",
    "may",
    "might",
}

# Trigger stems match as plain substrings, so "art" also fires on "start".
_THEME_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("creativity", re.compile(r"creat|design|art|draw|paint|music|write|imagination", re.IGNORECASE)),
    ("technology", re.compile(r"code|program|computer|tech|digital|software|app|web", re.IGNORECASE)),
    ("leadership", re.compile(r"lead|manage|organize|team|group|direct|coordinate", re.IGNORECASE)),
    ("helping", re.compile(r"help|assist|support|care|volunteer|community|service", re.IGNORECASE)),
    ("problem_solving", re.compile(r"solve|fix|challenge|puzzle|analyze|think|logic", re.IGNORECASE)),
    ("communication", re.compile(r"talk|speak|present|explain|teach|share|discuss", re.IGNORECASE)),
    ("learning", re.compile(r"learn|study|research|discover|explore|understand", re.IGNORECASE)),
    ("collaboration", re.compile(r"team|group|together|cooperate|work with|collaborate", re.IGNORECASE)),
)

_SKILL_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("programming", re.compile(r"code|program|javascript|python|html|css|react|node", re.IGNORECASE)),
    ("design", re.compile(r"design|photoshop|illustrator|figma|sketch|ui|ux", re.IGNORECASE)),
    ("writing", re.compile(r"write|blog|article|story|content|copy", re.IGNORECASE)),
    ("analysis", re.compile(r"analyze|data|research|investigate|examine", re.IGNORECASE)),
    ("presentation", re.compile(r"present|speak|pitch|demonstrate|show", re.IGNORECASE)),
    ("project_management", re.compile(r"organize|plan|schedule|coordinate|manage", re.IGNORECASE)),
    ("customer_service", re.compile(r"customer|client|service|support|help", re.IGNORECASE)),
    ("sales", re.compile(r"sell|sales|market|promote|advertise", re.IGNORECASE)),
    ("teaching", re.compile(r"teach|tutor|mentor|explain|instruct", re.IGNORECASE)),
    ("leadership", re.compile(r"lead|manage|supervise|direct|guide", re.IGNORECASE)),
)

THEME_LABELS: tuple[str, ...] = tuple(label for label, _ in _THEME_PATTERNS)
SKILL_LABELS: tuple[str, ...] = tuple(label for label, _ in _SKILL_PATTERNS)


@dataclass(slots=True)
class JournalSignals:
    keywords: list[str] = field(default_factory=list)
    themes: list[str] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)


def extract_keywords(text: str) -> list[str]:
    max_keywords = int(get_scoring_value("keywords.max_keywords", 10))
    min_length = int(get_scoring_value("keywords.min_length", 4))

    cleaned = _PUNCT_RE.sub("", (text or "").lower())
    candidates = [
        word
        for word in _SPACE_RE.split(cleaned)
        if len(word) >= min_length and word not in _STOPWORDS
    ][:max_keywords]
    return list(dict.fromkeys(candidates))


def _match_labels(text: str, patterns: tuple[tuple[str, re.Pattern[str]], ...]) -> list[str]:
    return [label for label, pattern in patterns if pattern.search(text or "")]


def extract_themes(text: str) -> list[str]:
    return _match_labels(text, _THEME_PATTERNS)


def extract_skills(text: str) -> list[str]:
    return _match_labels(text, _SKILL_PATTERNS)


def build_journal_text(enjoyed: str | None, challenges: str | None, learned: str | None) -> str:
    return f"{enjoyed or ''} {challenges or ''} {learned or ''}".lower()


def extract_journal_signals(enjoyed: str | None, challenges: str | None, learned: str | None) -> JournalSignals:
    """Keywords, themes and skills for one journal entry's three text fields."""
    text = build_journal_text(enjoyed, challenges, learned)
    return JournalSignals(
        keywords=extract_keywords(text),
        themes=extract_themes(text),
        skills=extract_skills(text),
    )
