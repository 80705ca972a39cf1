from fastapi import APIRouter, Depends

from app.api.deps import current_user_id, get_store
from app.schemas import DashboardStats
from app.services.dashboard_service import build_dashboard
from app.storage import CareerStore

router = APIRouter()


@router.get("/dashboard", response_model=DashboardStats)
async def dashboard(
    user_id: str = Depends(current_user_id),
    store: CareerStore = Depends(get_store),
):
    return await build_dashboard(store, user_id)
