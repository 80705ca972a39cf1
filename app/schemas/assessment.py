from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from .traits import TraitName, TraitVector


class AssessmentQuestion(BaseModel):
    id: int
    text: str
    trait: TraitName
    reverse: bool = False


class AssessmentSubmission(BaseModel):
    answers: dict[int, int] = Field(min_length=1, max_length=200)

    @field_validator("answers")
    @classmethod
    def _validate_likert(cls, value: dict[int, int]) -> dict[int, int]:
        for question_id, response in value.items():
            if response < 1 or response > 5:
                raise ValueError(f"answer for question {question_id} must be between 1 and 5")
        return value


class PersonalityAssessment(TraitVector):
    id: str
    user_id: str
    completed_at: datetime
