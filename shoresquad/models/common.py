"""Common types and helpers shared across models."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


def to_epoch_millis(dt: datetime) -> int:
    return int(dt.timestamp() * 1000)


def from_epoch_millis(millis: int | float) -> datetime:
    return datetime.fromtimestamp(millis / 1000, tz=UTC)
