"""Resolution of the "local" zone used for offset-less inputs."""
from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo

_UTC_NAMES = {"UTC", "Etc/UTC", "Z"}


def resolve_zone(name: str | None) -> tzinfo | None:
    """Map a configured zone name to a ``tzinfo``; ``None`` means the host's zone."""
    if name is None:
        return None
    if name in _UTC_NAMES:
        return timezone.utc
    return ZoneInfo(name)


def localize(naive: datetime, zone: tzinfo | None) -> datetime:
    """Attach the local zone to a wall-clock time without shifting it."""
    if zone is None:
        return naive.astimezone()
    return naive.replace(tzinfo=zone)


def to_local(moment: datetime, zone: tzinfo | None) -> datetime:
    """Express an aware instant in the local zone."""
    return moment.astimezone(zone)


def now_in(zone: tzinfo | None) -> datetime:
    if zone is None:
        return datetime.now().astimezone()
    return datetime.now(zone)
