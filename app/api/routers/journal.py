# app/api/routers/journal.py
from typing import List
from datetime import date
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.core.security import get_current_user
from app.models.user_auth import UserAuth
from app.schemas.journal_entry import JournalEntryUpsert, JournalEntryRead
from app.schemas.user_auth import SuccessResponse
from app.services.journal_entry import journal_entry_service

router = APIRouter(prefix="/journal", tags=["Journal"])


@router.get("", response_model=List[JournalEntryRead], summary="List journal entries")
def list_entries(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return journal_entry_service.list_entries(db, current_user, skip=skip, limit=limit)


@router.get("/{entry_date}", response_model=JournalEntryRead, summary="Get the entry for a date")
def get_entry(
    entry_date: date,
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return journal_entry_service.get_entry(db, entry_date, current_user)


@router.put("/{entry_date}", response_model=JournalEntryRead, summary="Write the entry for a date")
def upsert_entry(
    entry_date: date,
    entry_data: JournalEntryUpsert,
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Create or overwrite the reflection for a date.

    At least one of `reflection` and `goals` must be non-blank.
    """
    return journal_entry_service.upsert_entry(db, entry_date, entry_data, current_user)


@router.delete("/{entry_date}", response_model=SuccessResponse, summary="Delete the entry for a date")
def delete_entry(
    entry_date: date,
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    journal_entry_service.delete_entry(db, entry_date, current_user)
    return SuccessResponse(message="Journal entry deleted successfully")
