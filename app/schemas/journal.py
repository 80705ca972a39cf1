from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator

Mood = Literal["happy", "neutral", "sad", "frustrated", "tired"]


class JournalEntryCreate(BaseModel):
    mood: Mood | None = None
    enjoyed: str | None = Field(default=None, max_length=20000)
    challenges: str | None = Field(default=None, max_length=20000)
    learned: str | None = Field(default=None, max_length=20000)

    @model_validator(mode="after")
    def _require_some_text(self) -> "JournalEntryCreate":
        texts = (self.enjoyed, self.challenges, self.learned)
        if not any((text or "").strip() for text in texts):
            raise ValueError("at least one of enjoyed, challenges or learned must be provided")
        return self


class JournalEntry(BaseModel):
    id: str
    user_id: str
    mood: Mood | None = None
    enjoyed: str | None = None
    challenges: str | None = None
    learned: str | None = None
    keywords: list[str] | None = None
    themes: list[str] | None = None
    skills: list[str] | None = None
    created_at: datetime
