from __future__ import annotations

from datetime import datetime, timedelta, timezone

from src.absence_manager.absence_manager.common.datetime_utils import parse_iso_datetime
from src.absence_manager.absence_manager.common.payloads import as_datetime


def test_zulu_and_offset_inputs_become_naive_utc():
    assert parse_iso_datetime("2025-03-11T08:00:00Z") == datetime(2025, 3, 11, 8, 0, 0)
    assert parse_iso_datetime("2025-03-11T10:00:00+02:00") == datetime(2025, 3, 11, 8, 0, 0)
    assert parse_iso_datetime("2025-03-10") == datetime(2025, 3, 10)


def test_aware_datetime_objects_are_normalised():
    aware = datetime(2025, 3, 11, 9, 0, tzinfo=timezone(timedelta(hours=1)))

    value = as_datetime(aware)

    assert value.tzinfo is None
    assert value == datetime(2025, 3, 11, 8, 0)
    assert sorted([as_datetime("2025-03-10"), value]) == [datetime(2025, 3, 10), value]
