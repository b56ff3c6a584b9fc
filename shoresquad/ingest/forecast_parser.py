"""Validated parse of the forecast API response into a ForecastPayload."""

import logging
import math
from typing import Any

from shoresquad.models.forecast import (
    ForecastDay,
    ForecastPayload,
    Invalid,
    ParseResult,
    Range,
    Valid,
    Wind,
)

logger = logging.getLogger(__name__)


def parse_forecast_response(raw: Any) -> ParseResult:
    """Validate a decoded response body.

    The API wraps forecast sets in ``items``; only the first set is used.
    A bare forecast set (``{"forecasts": [...]}``) is accepted as-is.
    """
    if isinstance(raw, dict) and "items" in raw:
        items = raw.get("items")
        if not isinstance(items, list) or not items:
            return Invalid("response has no forecast sets")
        if len(items) > 1:
            logger.debug("Response has %d forecast sets, using the first", len(items))
        raw = items[0]
    return parse_forecast_set(raw)


def parse_forecast_set(raw: Any) -> ParseResult:
    """Validate one forecast set; it must hold a non-empty ``forecasts`` list."""
    if not isinstance(raw, dict):
        return Invalid("forecast set is not an object")
    forecasts = raw.get("forecasts")
    if not isinstance(forecasts, list) or not forecasts:
        return Invalid("missing or empty forecasts")

    days = []
    for i, f in enumerate(forecasts):
        if not isinstance(f, dict):
            return Invalid(f"forecast {i} is not an object")
        days.append(_parse_day(f))
    return Valid(ForecastPayload(days=tuple(days)))


def _parse_day(f: dict) -> ForecastDay:
    wind = _as_dict(f.get("wind"))
    return ForecastDay(
        date=_as_text(f.get("date")),
        summary_text=_as_text(f.get("forecast")),
        temperature=_parse_range(f.get("temperature")),
        wind=Wind(
            speed=_parse_range(wind.get("speed")),
            direction=_as_text(wind.get("direction")),
        ),
        relative_humidity=_parse_range(f.get("relative_humidity")),
    )


def _parse_range(raw: Any) -> Range:
    d = _as_dict(raw)
    return Range(low=_as_number(d.get("low")), high=_as_number(d.get("high")))


def _as_dict(raw: Any) -> dict:
    return raw if isinstance(raw, dict) else {}


def _as_text(raw: Any) -> str:
    if raw is None:
        return ""
    return str(raw)


def _as_number(raw: Any) -> float | None:
    # bool is an int subclass; true/false is not a reading
    if isinstance(raw, bool) or raw is None:
        return None
    if not isinstance(raw, int | float | str):
        return None
    try:
        value = float(raw)
    except (ValueError, OverflowError):
        return None
    # NaN and Infinity decode from JSON but are not readings
    if not math.isfinite(value):
        return None
    return value
