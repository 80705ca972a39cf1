from __future__ import annotations

from pydantic import BaseModel, Field

from .traits import TraitVector


class CareerBase(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str
    salary_min: int | None = None
    salary_max: int | None = None
    growth_rate: float | None = None
    education_level: str | None = None
    remote_work: bool = False
    skills: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
    personality_vector: TraitVector | None = None
    roadmap_year1: str | None = None
    roadmap_year2: str | None = None
    roadmap_year3: str | None = None
    icon_class: str | None = None
    color_scheme: str | None = None


class CareerCreate(CareerBase):
    pass


class CareerRecord(CareerBase):
    id: str
