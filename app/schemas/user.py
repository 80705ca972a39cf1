from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class UserUpsert(BaseModel):
    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None


class User(UserUpsert):
    created_at: datetime
    updated_at: datetime
