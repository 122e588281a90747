"""Tests for day identifiers."""

from datetime import UTC, datetime

import pytest

from worldle.services.days import current_day_id, parse_day_id


def test_current_day_id_uses_calendar_date_in_zone() -> None:
    moment = datetime(2024, 3, 1, 23, 30, tzinfo=UTC)

    assert current_day_id(moment) == "2024-03-01"
    assert current_day_id(moment, timezone="Europe/Paris") == "2024-03-02"
    assert current_day_id(moment, timezone="America/New_York") == "2024-03-01"


def test_current_day_id_ignores_time_of_day() -> None:
    morning = datetime(2024, 3, 1, 0, 1, tzinfo=UTC)
    night = datetime(2024, 3, 1, 23, 59, tzinfo=UTC)

    assert current_day_id(morning) == current_day_id(night)


def test_naive_datetimes_are_treated_as_utc() -> None:
    assert current_day_id(datetime(2024, 12, 31, 12, 0)) == "2024-12-31"


def test_parse_day_id() -> None:
    assert parse_day_id("2024-02-29").isoformat() == "2024-02-29"
    with pytest.raises(ValueError):
        parse_day_id("2023-02-29")
    with pytest.raises(ValueError):
        parse_day_id("29/02/2024")
