from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from .career import CareerRecord


class ScoredCareer(BaseModel):
    career_id: str
    match_score: float = Field(ge=0.0, le=1.0)


class Recommendation(BaseModel):
    id: str
    user_id: str
    career_id: str
    match_score: float = Field(ge=0.0, le=1.0)
    generated_at: datetime


class RecommendationWithCareer(Recommendation):
    career: CareerRecord
