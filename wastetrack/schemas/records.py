"""Request/response schemas for waste records."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Upper bound on a single weighed batch; anything larger is a typo.
MAX_WEIGHT_KG = 100_000
MAX_NOTES_LEN = 1000


class WasteRecordCreate(BaseModel):
    """Body of POST /waste-records. Names are resolved against the catalog."""

    model_config = ConfigDict(str_strip_whitespace=True)

    type: str = Field(..., min_length=1, max_length=255, description="Waste type name")
    location: str = Field(..., min_length=1, max_length=255, description="Location name")
    weight: float = Field(
        ...,
        gt=0,
        le=MAX_WEIGHT_KG,
        allow_inf_nan=False,
        description="Weight in kilograms",
    )
    notes: str | None = Field(default=None, max_length=MAX_NOTES_LEN)
    date: dt.date | None = Field(default=None, description="Local date (YYYY-MM-DD)")
    time: dt.time | None = Field(default=None, description="Local time (HH:MM)")

    @field_validator("notes")
    @classmethod
    def empty_notes_to_none(cls, v: str | None) -> str | None:
        return v or None


class WasteRecordCreated(BaseModel):
    message: str
    id: int


class WasteRecordOut(BaseModel):
    """One row of GET /waste-records; date/time are local to RECORDS_TIMEZONE."""

    id: int
    type: str
    location: str
    weight: float
    date: str = Field(..., description="YYYY-MM-DD")
    time: str = Field(..., description="HH:MM")
    notes: str | None = None
