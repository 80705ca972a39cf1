from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from app.schemas import (
    CareerCreate,
    CareerRecord,
    JournalEntry,
    JournalEntryCreate,
    PersonalityAssessment,
    RecommendationWithCareer,
    ScoredCareer,
    TraitVector,
    User,
    UserUpsert,
)


class StoreError(RuntimeError):
    def __init__(self, message: str, status_code: int = 503):
        super().__init__(message)
        self.status_code = status_code


class CareerStore(Protocol):
    def upsert_user(self, user: UserUpsert) -> User:
        """Insert the user or refresh its profile fields."""

    def get_user(self, user_id: str) -> User | None:
        """Return the user or None."""

    def save_personality_assessment(self, user_id: str, traits: TraitVector) -> PersonalityAssessment:
        """Replace any prior assessment of the user with ``traits``."""

    def get_personality_assessment(self, user_id: str) -> PersonalityAssessment | None:
        """Return the user's current assessment or None."""

    def create_journal_entry(self, user_id: str, entry: JournalEntryCreate) -> JournalEntry:
        """Append an entry with empty analysis fields."""

    def get_journal_entries(self, user_id: str, limit: int = 10) -> list[JournalEntry]:
        """Most recent entries first."""

    def update_journal_entry_analysis(
        self,
        entry_id: str,
        keywords: Sequence[str],
        themes: Sequence[str],
        skills: Sequence[str],
    ) -> None:
        """Overwrite the derived tag lists of one entry."""

    def get_all_careers(self) -> list[CareerRecord]:
        """Whole catalog in insertion order."""

    def get_career_by_id(self, career_id: str) -> CareerRecord | None:
        """Return one career or None."""

    def create_career(self, career: CareerCreate) -> CareerRecord:
        """Add a career to the catalog."""

    def seed_catalog(self, careers: Sequence[CareerCreate]) -> int:
        """Insert every career in one transaction if the catalog is empty; return rows inserted."""

    def save_career_recommendations(self, user_id: str, recommendations: Sequence[ScoredCareer]) -> None:
        """Atomically replace the user's recommendation set, keeping list order as rank."""

    def get_career_recommendations(self, user_id: str) -> list[RecommendationWithCareer]:
        """Recommendations joined with careers, best match first."""
