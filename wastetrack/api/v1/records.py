"""Waste record endpoints: capture a record, list all records newest first."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from wastetrack.api.v1.auth import get_current_user
from wastetrack.core.config import get_settings
from wastetrack.core.database import get_db
from wastetrack.core.errors import UnknownReference
from wastetrack.schemas.auth import CurrentUser
from wastetrack.schemas.records import WasteRecordCreate, WasteRecordCreated, WasteRecordOut
from wastetrack.services.records import create_waste_record, list_waste_records

router = APIRouter()


@router.post("", response_model=WasteRecordCreated, status_code=status.HTTP_201_CREATED)
def post_waste_record(
    body: WasteRecordCreate,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> WasteRecordCreated:
    """
    Save one waste record. Type and location are catalog names, not ids.

    date/time are optional local values (RECORDS_TIMEZONE); without them the
    record is stamped with the database's current time.
    """
    try:
        record_id = create_waste_record(db, body, get_settings().records_zone)
    except UnknownReference as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    return WasteRecordCreated(message="Record saved", id=record_id)


@router.get("", response_model=list[WasteRecordOut])
def get_waste_records(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[WasteRecordOut]:
    """Return every record with type and location names, most recent first."""
    return list_waste_records(db, get_settings().records_zone)
