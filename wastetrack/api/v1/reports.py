"""Report endpoint: aggregated totals for the admin dashboard."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from wastetrack.api.v1.auth import require_admin
from wastetrack.core.config import get_settings
from wastetrack.core.database import get_db
from wastetrack.schemas.auth import CurrentUser
from wastetrack.schemas.reports import ReportSummary
from wastetrack.services.reports import build_summary

router = APIRouter()


@router.get("/summary", response_model=ReportSummary)
def get_summary(
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    date_from: Annotated[date | None, Query(description="First local date (inclusive)")] = None,
    date_to: Annotated[date | None, Query(description="Last local date (inclusive)")] = None,
) -> ReportSummary:
    """
    Record count and total kilograms overall, per waste type and per location.

    Admin only. Without dates, all records are included.
    """
    if date_from is not None and date_to is not None and date_from > date_to:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="date_from must not be after date_to.",
        )
    return build_summary(db, get_settings().records_zone, date_from, date_to)
