"""Aggregated totals for the admin dashboard and reports."""

from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from wastetrack.models import Location, WasteRecord, WasteType
from wastetrack.schemas.reports import ReportGroup, ReportSummary

WEIGHT_DECIMALS = 3


def local_day_bounds(
    date_from: date | None, date_to: date | None, tz: ZoneInfo
) -> tuple[datetime | None, datetime | None]:
    """UTC [start, end) covering the inclusive local date range; None for an open end."""
    start = end = None
    if date_from is not None:
        start = datetime.combine(date_from, time(0), tzinfo=tz).astimezone(UTC)
    if date_to is not None:
        end = datetime.combine(date_to + timedelta(days=1), time(0), tzinfo=tz).astimezone(UTC)
    return start, end


def _in_range(query: Query, start: datetime | None, end: datetime | None) -> Query:
    if start is not None:
        query = query.filter(WasteRecord.recorded_at >= start)
    if end is not None:
        query = query.filter(WasteRecord.recorded_at < end)
    return query


def _kg(value: object) -> float:
    return round(float(value or 0), WEIGHT_DECIMALS)


def _grouped(
    db: Session,
    model: type[WasteType] | type[Location],
    fk_column,
    start: datetime | None,
    end: datetime | None,
) -> list[ReportGroup]:
    query = db.query(
        model.name,
        func.count(WasteRecord.id),
        func.sum(WasteRecord.weight_kg),
    ).join(WasteRecord, fk_column == model.id)
    rows = _in_range(query, start, end).group_by(model.name).all()
    groups = [
        ReportGroup(name=name, record_count=count, total_weight=_kg(total))
        for name, count, total in rows
    ]
    groups.sort(key=lambda g: (-g.total_weight, g.name))
    return groups


def build_summary(
    db: Session,
    tz: ZoneInfo,
    date_from: date | None = None,
    date_to: date | None = None,
) -> ReportSummary:
    """
    Record count and total weight overall, per waste type and per location.

    Dates are inclusive local dates in tz. Groups are ordered by total weight
    descending, then name.
    """
    start, end = local_day_bounds(date_from, date_to, tz)
    totals = _in_range(
        db.query(func.count(WasteRecord.id), func.sum(WasteRecord.weight_kg)),
        start,
        end,
    ).one()
    record_count, total_weight = totals
    return ReportSummary(
        date_from=date_from,
        date_to=date_to,
        record_count=record_count or 0,
        total_weight=_kg(total_weight),
        by_type=_grouped(db, WasteType, WasteRecord.waste_type_id, start, end),
        by_location=_grouped(db, Location, WasteRecord.location_id, start, end),
    )
