"""Catalog endpoints: the waste type and location names accepted by the capture form."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from wastetrack.api.v1.auth import get_current_user
from wastetrack.core.database import get_db
from wastetrack.models import Location, WasteType
from wastetrack.schemas.auth import CurrentUser
from wastetrack.schemas.catalog import CatalogItem

router = APIRouter()


@router.get("/waste-types", response_model=list[CatalogItem])
def get_waste_types(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[CatalogItem]:
    rows = db.query(WasteType).order_by(WasteType.name).all()
    return [CatalogItem.model_validate(r) for r in rows]


@router.get("/locations", response_model=list[CatalogItem])
def get_locations(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[CatalogItem]:
    rows = db.query(Location).order_by(Location.name).all()
    return [CatalogItem.model_validate(r) for r in rows]
