"""Forecast data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


@dataclass(frozen=True)
class Range:
    low: float | None = None
    high: float | None = None


@dataclass(frozen=True)
class Wind:
    speed: Range = field(default_factory=Range)
    direction: str = ""


@dataclass(frozen=True)
class ForecastDay:
    date: str  # YYYY-MM-DD
    summary_text: str = ""
    temperature: Range = field(default_factory=Range)
    wind: Wind = field(default_factory=Wind)
    relative_humidity: Range = field(default_factory=Range)

    def to_wire(self) -> dict:
        """Serialize using the remote API's key names."""
        return {
            "date": self.date,
            "forecast": self.summary_text,
            "temperature": {
                "low": self.temperature.low,
                "high": self.temperature.high,
            },
            "wind": {
                "speed": {
                    "low": self.wind.speed.low,
                    "high": self.wind.speed.high,
                },
                "direction": self.wind.direction,
            },
            "relative_humidity": {
                "low": self.relative_humidity.low,
                "high": self.relative_humidity.high,
            },
        }


@dataclass(frozen=True)
class ForecastPayload:
    days: tuple[ForecastDay, ...]

    @property
    def today(self) -> ForecastDay:
        return self.days[0]

    def to_wire(self) -> dict:
        return {"forecasts": [d.to_wire() for d in self.days]}


@dataclass(frozen=True)
class CacheEntry:
    timestamp: datetime
    data: ForecastPayload


class FailureKind(StrEnum):
    TRANSPORT = "transport error"
    INVALID_SHAPE = "invalid shape"
    UNEXPECTED = "unexpected error"


@dataclass(frozen=True)
class FetchFailure:
    kind: FailureKind
    status_code: int | None = None
    reason: str | None = None
    cause: BaseException | None = None

    def __str__(self) -> str:
        detail = self.kind.value
        if self.status_code is not None:
            detail += f" (HTTP {self.status_code})"
        if self.reason is not None:
            detail += f" ({self.reason})"
        if self.cause is not None:
            detail += f": {self.cause}"
        return detail


@dataclass(frozen=True)
class Valid:
    payload: ForecastPayload


@dataclass(frozen=True)
class Invalid:
    reason: str


ParseResult = Valid | Invalid
FetchResult = ForecastPayload | FetchFailure
