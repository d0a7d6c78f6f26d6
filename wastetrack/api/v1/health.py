"""Status endpoint for load balancers and the capture/dashboard client."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from wastetrack import __version__
from wastetrack.core.config import get_settings
from wastetrack.core.database import check_db_connected, get_db
from wastetrack.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """
    Always 200 while the process serves requests; database reports the store.

    With the store disconnected only the fallback accounts can log in, so the
    client can warn operators before they try.
    """
    settings = get_settings()
    return HealthResponse(
        version=__version__,
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
        fallback_users_enabled=settings.fallback_users_enabled,
        records_timezone=settings.RECORDS_TIMEZONE,
    )
