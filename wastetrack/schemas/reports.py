"""Response schemas for the admin report summary."""

import datetime as dt

from pydantic import BaseModel, Field


class ReportGroup(BaseModel):
    """Totals for one waste type or location."""

    name: str
    record_count: int = Field(..., ge=0)
    total_weight: float = Field(..., ge=0, description="Kilograms, rounded to 3 decimals")


class ReportSummary(BaseModel):
    """Aggregated totals over the requested local date range (inclusive)."""

    date_from: dt.date | None = None
    date_to: dt.date | None = None
    record_count: int = Field(..., ge=0)
    total_weight: float = Field(..., ge=0)
    by_type: list[ReportGroup] = Field(default_factory=list)
    by_location: list[ReportGroup] = Field(default_factory=list)
