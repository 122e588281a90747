"""Day identifier helpers."""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

DAY_ID_FORMAT = "%Y-%m-%d"


def current_day_id(now: datetime | None = None, timezone: str = "UTC") -> str:
    """Return today's day identifier in the given zone.

    This is the only place the game reads the clock.
    """
    moment = now or datetime.now(tz=UTC)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(ZoneInfo(timezone)).strftime(DAY_ID_FORMAT)


def parse_day_id(raw: str) -> date:
    """Parse a ``YYYY-MM-DD`` day identifier, raising ValueError if malformed."""
    return datetime.strptime(raw, DAY_ID_FORMAT).replace(tzinfo=UTC).date()
