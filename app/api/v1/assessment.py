from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from app.api.deps import current_user_id, get_store, require_api_key
from app.core.rate_limit import rate_limit
from app.features import QUESTION_BANK, normalize_traits
from app.schemas import AssessmentQuestion, AssessmentSubmission, PersonalityAssessment
from app.services.recommendation_service import generate_recommendations
from app.storage import CareerStore

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/assessment/questions", response_model=list[AssessmentQuestion])
def list_questions():
    return list(QUESTION_BANK)


@router.post("/personality-assessment", response_model=PersonalityAssessment)
@rate_limit()
async def submit_assessment(
    request: Request,
    payload: AssessmentSubmission,
    user_id: str = Depends(current_user_id),
    store: CareerStore = Depends(get_store),
    _: None = Depends(require_api_key),
):
    _ = request
    traits = normalize_traits(payload.answers)
    assessment = store.save_personality_assessment(user_id, traits)
    try:
        await generate_recommendations(store, user_id)
    except Exception as exc:  # noqa: BLE001 - the assessment is already saved
        logger.exception("recommendations_after_assessment_failed user_id=%s: %s", user_id, exc)
    return assessment


@router.get("/personality-assessment", response_model=PersonalityAssessment | None)
def get_assessment(
    user_id: str = Depends(current_user_id),
    store: CareerStore = Depends(get_store),
):
    return store.get_personality_assessment(user_id)
