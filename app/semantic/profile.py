from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from app.schemas.journal import JournalEntry
from app.schemas.traits import TraitVector


@dataclass(frozen=True, slots=True)
class UserProfile:
    traits: TraitVector | None = None
    theme_counts: dict[str, int] = field(default_factory=dict)
    skill_counts: dict[str, int] = field(default_factory=dict)

    @property
    def total_themes(self) -> int:
        return sum(self.theme_counts.values())

    @property
    def total_skills(self) -> int:
        return sum(self.skill_counts.values())


def build_user_profile(traits: TraitVector | None, entries: Iterable[JournalEntry]) -> UserProfile:
    """Combine a trait vector with theme/skill frequencies across journal entries.

    Entries that have not been analysed yet carry no themes or skills and
    contribute nothing.
    """
    theme_counts: Counter[str] = Counter()
    skill_counts: Counter[str] = Counter()
    for entry in entries:
        theme_counts.update(entry.themes or [])
        skill_counts.update(entry.skills or [])

    return UserProfile(
        traits=traits,
        theme_counts=dict(theme_counts),
        skill_counts=dict(skill_counts),
    )
