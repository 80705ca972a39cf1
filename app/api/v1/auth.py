from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import current_user_id, get_store
from app.schemas import User
from app.storage import CareerStore

router = APIRouter()


@router.get("/auth/user", response_model=User)
def get_current_user(
    user_id: str = Depends(current_user_id),
    store: CareerStore = Depends(get_store),
):
    user = store.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    return user
