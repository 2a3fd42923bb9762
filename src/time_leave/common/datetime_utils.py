from __future__ import annotations

from datetime import date, datetime, time, timezone


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_hhmm(value: str) -> time:
    """Parse a 24-hour HH:MM string into time."""
    return datetime.strptime(value, "%H:%M").time()


def minutes_of(value: time) -> int:
    return value.hour * 60 + value.minute


def ensure_aware(instant: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    return instant if instant.tzinfo else instant.replace(tzinfo=timezone.utc)


def now_utc() -> datetime:
    """Current instant.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def format_hms(seconds: int) -> str:
    seconds = max(int(seconds), 0)
    return f"{seconds // 3600:02d}:{(seconds % 3600) // 60:02d}:{seconds % 60:02d}"
