"""
Timestamp helpers shared by the scan recorder, the analytics views and the
response schemas
"""
from datetime import date, datetime, timezone, tzinfo
from typing import Annotated, Optional

from pydantic import AfterValidator


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a stored timestamp to an aware UTC datetime.

    SQLite hands back naive values; everything is written in UTC, so a naive
    value is read as UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Response field type: always serialized with an explicit UTC offset
UtcDateTime = Annotated[datetime, AfterValidator(as_utc)]


def to_report_tz(value: datetime, tz: tzinfo) -> datetime:
    """Convert a stored instant to the reporting timezone before bucketing."""
    return as_utc(value).astimezone(tz)


def local_date(value: datetime, tz: tzinfo) -> date:
    return to_report_tz(value, tz).date()


def local_hour(value: datetime, tz: tzinfo) -> int:
    return to_report_tz(value, tz).hour
