from fastapi import APIRouter, Depends

from app.api.deps import get_store
from app.storage import CareerStore

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check(store: CareerStore = Depends(get_store)):
    return {"status": "healthy", "catalog_size": len(store.get_all_careers())}
