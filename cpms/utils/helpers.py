"""Timezone helpers for the local-input / UTC-storage boundary."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from cpms.config import settings


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def local_zone() -> ZoneInfo:
    return ZoneInfo(settings.LOCAL_TIMEZONE)


def to_utc(value: datetime) -> datetime:
    """Convert a client-supplied timestamp to an aware UTC datetime.

    Values carrying an offset keep it; naive values are read as wall-clock
    time in ``settings.LOCAL_TIMEZONE``.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=local_zone())
    return value.astimezone(timezone.utc)


def from_utc_to_local(value: datetime) -> datetime:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(local_zone())
