"""Unit tests for wastetrack.services.reports: totals, grouping and local date ranges."""

import unittest
from datetime import UTC, date, datetime, time
from zoneinfo import ZoneInfo

from db_support import add_catalog, make_session_factory
from wastetrack.schemas.records import WasteRecordCreate
from wastetrack.services.records import create_waste_record
from wastetrack.services.reports import build_summary, local_day_bounds

CANCUN = ZoneInfo("America/Cancun")


class TestLocalDayBounds(unittest.TestCase):
    """Inclusive local dates map to a half-open UTC interval."""

    def test_open_ends(self) -> None:
        self.assertEqual(local_day_bounds(None, None, CANCUN), (None, None))

    def test_single_day(self) -> None:
        start, end = local_day_bounds(date(2026, 10, 19), date(2026, 10, 19), CANCUN)
        self.assertEqual(start, datetime(2026, 10, 19, 5, 0, tzinfo=UTC))
        self.assertEqual(end, datetime(2026, 10, 20, 5, 0, tzinfo=UTC))


class TestBuildSummary(unittest.TestCase):
    """build_summary aggregates count and kilograms overall, by type and by location."""

    def setUp(self) -> None:
        self.db = make_session_factory()()
        add_catalog(self.db)
        for type_, location, weight, day, hh in (
            ("Vidrio", "Spa", 12.5, 18, 12),
            ("Pet", "Spa", 3.25, 19, 9),
            ("Vidrio", "Bares", 7.0, 19, 23),
        ):
            create_waste_record(
                self.db,
                WasteRecordCreate(
                    type=type_,
                    location=location,
                    weight=weight,
                    date=date(2026, 10, day),
                    time=time(hh, 0),
                ),
                CANCUN,
            )

    def tearDown(self) -> None:
        self.db.close()

    def test_all_records(self) -> None:
        summary = build_summary(self.db, CANCUN)
        self.assertEqual(summary.record_count, 3)
        self.assertEqual(summary.total_weight, 22.75)
        self.assertEqual(
            [(g.name, g.record_count, g.total_weight) for g in summary.by_type],
            [("Vidrio", 2, 19.5), ("Pet", 1, 3.25)],
        )
        self.assertEqual(
            [(g.name, g.record_count, g.total_weight) for g in summary.by_location],
            [("Spa", 2, 15.75), ("Bares", 1, 7.0)],
        )

    def test_single_local_day(self) -> None:
        # 23:00 local on the 19th is already the 20th in UTC; it still counts.
        summary = build_summary(self.db, CANCUN, date(2026, 10, 19), date(2026, 10, 19))
        self.assertEqual(summary.record_count, 2)
        self.assertEqual(summary.total_weight, 10.25)
        self.assertEqual([g.name for g in summary.by_type], ["Vidrio", "Pet"])
        self.assertEqual(summary.date_from, date(2026, 10, 19))

    def test_open_start(self) -> None:
        summary = build_summary(self.db, CANCUN, date_to=date(2026, 10, 18))
        self.assertEqual(summary.record_count, 1)
        self.assertEqual(summary.by_location[0].name, "Spa")

    def test_range_without_records(self) -> None:
        summary = build_summary(self.db, CANCUN, date(2026, 1, 1), date(2026, 1, 31))
        self.assertEqual(summary.record_count, 0)
        self.assertEqual(summary.total_weight, 0.0)
        self.assertEqual(summary.by_type, [])
        self.assertEqual(summary.by_location, [])


if __name__ == "__main__":
    unittest.main()
