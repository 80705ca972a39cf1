from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from app.core.config.scoring import get_scoring_value
from app.schemas.career import CareerRecord
from app.schemas.traits import TRAIT_NAMES

from .profile import UserProfile

_NON_ALPHA_RE = re.compile(r"[^a-z]")


@dataclass(slots=True)
class _Accumulator:
    dot: float = 0.0
    user_sq: float = 0.0
    career_sq: float = 0.0

    def add(self, user_value: float, career_value: float, weight: float) -> None:
        self.dot += user_value * career_value * weight
        self.user_sq += (user_value * weight) ** 2
        self.career_sq += (career_value * weight) ** 2

    def score(self) -> float:
        magnitude = math.sqrt(self.user_sq) * math.sqrt(self.career_sq)
        if magnitude <= 0:
            return 0.0
        return min(self.dot / magnitude, 1.0)


def normalize_skill_label(label: str) -> str:
    """'Python/R' -> 'python_r'; every non a-z character becomes an underscore."""
    return _NON_ALPHA_RE.sub("_", label.lower())


def _channel_weights() -> tuple[float, float, float]:
    return (
        float(get_scoring_value("similarity.weights.personality", 0.6)),
        float(get_scoring_value("similarity.weights.interests", 0.3)),
        float(get_scoring_value("similarity.weights.skills", 0.1)),
    )


def _add_label_channel(
    acc: _Accumulator,
    labels: Iterable[str],
    counts: Mapping[str, int],
    total: int,
    weight: float,
) -> None:
    denominator = max(total, 1)
    for label in labels:
        acc.add(counts.get(label, 0) / denominator, 1.0, weight)


def score_career(profile: UserProfile, career: CareerRecord) -> float:
    """Weighted cosine-style match score in [0, 1] between a user and one career.

    All three channels feed one dot product and one pair of magnitudes, with
    each value pre-multiplied by its channel weight before squaring. A career
    with nothing to compare against scores 0.
    """
    personality_weight, interest_weight, skill_weight = _channel_weights()
    acc = _Accumulator()

    if career.personality_vector is not None:
        for trait in TRAIT_NAMES:
            user_value = profile.traits.value(trait) if profile.traits is not None else 0.0
            acc.add(user_value, career.personality_vector.value(trait), personality_weight)

    _add_label_channel(acc, career.interests, profile.theme_counts, profile.total_themes, interest_weight)
    _add_label_channel(
        acc,
        (normalize_skill_label(skill) for skill in career.skills),
        profile.skill_counts,
        profile.total_skills,
        skill_weight,
    )

    return max(acc.score(), 0.0)
