from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import current_user_id, get_store
from app.schemas import CareerRecord, RecommendationWithCareer
from app.storage import CareerStore

router = APIRouter()


@router.get("/careers", response_model=list[CareerRecord])
def list_careers(store: CareerStore = Depends(get_store)):
    return store.get_all_careers()


@router.get("/careers/{career_id}", response_model=CareerRecord)
def get_career(career_id: str, store: CareerStore = Depends(get_store)):
    career = store.get_career_by_id(career_id)
    if career is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Career not found.")
    return career


@router.get("/career-recommendations", response_model=list[RecommendationWithCareer])
def list_recommendations(
    user_id: str = Depends(current_user_id),
    store: CareerStore = Depends(get_store),
):
    return store.get_career_recommendations(user_id)
