"""API v1 routes."""

from fastapi import APIRouter

from wastetrack.api.v1 import auth, catalog, health, records, reports

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(records.router, prefix="/waste-records", tags=["waste-records"])
router.include_router(catalog.router, prefix="/catalog", tags=["catalog"])
router.include_router(reports.router, prefix="/reports", tags=["reports"])
