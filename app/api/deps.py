from __future__ import annotations

from fastapi import Header

from app.core.config import settings
from app.core.security import check_api_key
from app.storage import CareerStore, get_default_store


def get_store() -> CareerStore:
    return get_default_store()


def require_api_key(x_api_key: str | None = Header(default=None, alias="X-API-Key")) -> None:
    check_api_key(x_api_key)


def current_user_id(x_user_id: str | None = Header(default=None, alias="X-User-Id")) -> str:
    # Session handling lives outside this service; fall back to the demo account.
    user_id = (x_user_id or "").strip()
    return user_id or settings.demo_user_id
