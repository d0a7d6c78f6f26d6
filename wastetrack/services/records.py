"""Waste record ingestion (name -> id resolution, insert) and the newest-first listing."""

import logging
from datetime import UTC, date, datetime, time
from decimal import Decimal
from zoneinfo import ZoneInfo

from sqlalchemy.orm import Session

from wastetrack.core.errors import UnknownReference
from wastetrack.models import Location, WasteRecord, WasteType
from wastetrack.schemas.records import WasteRecordCreate, WasteRecordOut

logger = logging.getLogger(__name__)


def resolve_recorded_at(
    day: date | None,
    clock: time | None,
    tz: ZoneInfo,
    now: datetime | None = None,
) -> datetime | None:
    """
    Turn an optional local date and time into a UTC timestamp.

    None when neither is given (the store default applies). A date alone means local
    midnight; a time alone means that time on today's local date.
    """
    if day is None and clock is None:
        return None
    local_now = (now or datetime.now(UTC)).astimezone(tz)
    local = datetime.combine(
        day or local_now.date(),
        (clock or time(0)).replace(tzinfo=None),
        tzinfo=tz,
    )
    return local.astimezone(UTC)


def as_utc(value: datetime) -> datetime:
    """Stored timestamps come back naive from SQLite; they are UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _resolve_id(db: Session, model: type[WasteType] | type[Location], name: str) -> int | None:
    # FOR SHARE keeps the row from being deleted before the insert commits (no-op on SQLite).
    return (
        db.query(model.id)
        .filter(model.name == name)
        .with_for_update(read=True)
        .scalar()
    )


def create_waste_record(
    db: Session,
    data: WasteRecordCreate,
    tz: ZoneInfo,
    now: datetime | None = None,
) -> int:
    """
    Resolve type and location names, insert the record and return its id.

    Lookups and insert share one transaction. Raises UnknownReference (nothing is
    written) when either name is missing from the catalog.
    """
    try:
        waste_type_id = _resolve_id(db, WasteType, data.type)
        location_id = _resolve_id(db, Location, data.location)
        if waste_type_id is None:
            raise UnknownReference("type", data.type)
        if location_id is None:
            raise UnknownReference("location", data.location)

        record = WasteRecord(
            waste_type_id=waste_type_id,
            location_id=location_id,
            weight_kg=Decimal(str(data.weight)),
            notes=data.notes,
        )
        recorded_at = resolve_recorded_at(data.date, data.time, tz, now=now)
        if recorded_at is not None:
            record.recorded_at = recorded_at
        db.add(record)
        db.commit()
    except UnknownReference as e:
        db.rollback()
        logger.info("Rejected waste record: %s", e.message)
        raise
    except Exception:
        db.rollback()
        raise

    logger.info(
        "Saved waste record id=%s type=%r location=%r weight_kg=%s",
        record.id,
        data.type,
        data.location,
        data.weight,
    )
    return record.id


def list_waste_records(db: Session, tz: ZoneInfo) -> list[WasteRecordOut]:
    """All records with type/location names, newest first; weight as float."""
    rows = (
        db.query(
            WasteRecord.id,
            WasteType.name.label("type_name"),
            Location.name.label("location_name"),
            WasteRecord.weight_kg,
            WasteRecord.notes,
            WasteRecord.recorded_at,
        )
        .join(WasteType, WasteRecord.waste_type_id == WasteType.id)
        .join(Location, WasteRecord.location_id == Location.id)
        .order_by(WasteRecord.recorded_at.desc(), WasteRecord.id.desc())
        .all()
    )
    out: list[WasteRecordOut] = []
    for row in rows:
        local = as_utc(row.recorded_at).astimezone(tz)
        out.append(
            WasteRecordOut(
                id=row.id,
                type=row.type_name,
                location=row.location_name,
                weight=float(row.weight_kg),
                date=local.strftime("%Y-%m-%d"),
                time=local.strftime("%H:%M"),
                notes=row.notes,
            )
        )
    return out
