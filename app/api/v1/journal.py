from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request

from app.api.deps import current_user_id, get_store, require_api_key
from app.core.config import settings
from app.core.rate_limit import rate_limit
from app.schemas import JournalEntry, JournalEntryCreate
from app.services.journal_service import WRITING_PROMPTS, process_new_journal_entry
from app.storage import CareerStore

router = APIRouter()


@router.post("/journal-entries", response_model=JournalEntry)
@rate_limit()
async def create_journal_entry(
    request: Request,
    payload: JournalEntryCreate,
    background_tasks: BackgroundTasks,
    user_id: str = Depends(current_user_id),
    store: CareerStore = Depends(get_store),
    _: None = Depends(require_api_key),
):
    _ = request
    entry = store.create_journal_entry(user_id, payload)
    background_tasks.add_task(process_new_journal_entry, store, entry)
    return entry


@router.get("/journal-entries", response_model=list[JournalEntry])
def list_journal_entries(
    limit: int | None = Query(default=None, ge=1, le=100),
    user_id: str = Depends(current_user_id),
    store: CareerStore = Depends(get_store),
):
    return store.get_journal_entries(user_id, limit or settings.journal_history_limit)


@router.get("/journal/prompts", response_model=list[str])
def list_writing_prompts():
    return list(WRITING_PROMPTS)
