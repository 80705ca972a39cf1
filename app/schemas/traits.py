from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

TraitName = Literal["openness", "conscientiousness", "extraversion", "agreeableness", "neuroticism"]

TRAIT_NAMES: tuple[TraitName, ...] = (
    "openness",
    "conscientiousness",
    "extraversion",
    "agreeableness",
    "neuroticism",
)


class TraitVector(BaseModel):
    openness: float = Field(default=0.0, ge=0.0, le=1.0)
    conscientiousness: float = Field(default=0.0, ge=0.0, le=1.0)
    extraversion: float = Field(default=0.0, ge=0.0, le=1.0)
    agreeableness: float = Field(default=0.0, ge=0.0, le=1.0)
    neuroticism: float = Field(default=0.0, ge=0.0, le=1.0)

    def value(self, trait: TraitName) -> float:
        return float(getattr(self, trait))
