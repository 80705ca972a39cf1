from __future__ import annotations

from pydantic import BaseModel, Field

from .recommendation import RecommendationWithCareer


class DashboardStats(BaseModel):
    assessment_complete: bool
    journal_entry_count: int
    journal_streak: int
    top_recommendations: list[RecommendationWithCareer] = Field(default_factory=list)
    overall_progress: int = Field(ge=0, le=100)
