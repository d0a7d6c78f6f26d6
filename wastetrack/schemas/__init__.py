"""Pydantic request/response schemas."""

from wastetrack.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    LoginUser,
)
from wastetrack.schemas.catalog import CatalogItem
from wastetrack.schemas.health import HealthResponse
from wastetrack.schemas.records import (
    WasteRecordCreate,
    WasteRecordCreated,
    WasteRecordOut,
)
from wastetrack.schemas.reports import ReportGroup, ReportSummary

__all__ = [
    "CatalogItem",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "LoginUser",
    "ReportGroup",
    "ReportSummary",
    "WasteRecordCreate",
    "WasteRecordCreated",
    "WasteRecordOut",
]
