"""Turns a fetch result into display-ready, HTML-escaped view entries."""

import html
from datetime import date

from shoresquad.models.forecast import FetchFailure, FetchResult, ForecastDay, ForecastPayload
from shoresquad.models.view import RenderedEntry, RenderedView

PLACEHOLDER = "—"
UNAVAILABLE_SUMMARY = "Weather unavailable"
UNAVAILABLE_ENTRY = "Forecast unavailable"


def render(result: FetchResult) -> RenderedView:
    if isinstance(result, FetchFailure):
        return render_unavailable()
    return render_payload(result)


def render_unavailable() -> RenderedView:
    return RenderedView(
        summary=UNAVAILABLE_SUMMARY,
        entries=[RenderedEntry(label="", summary_text=UNAVAILABLE_ENTRY)],
        unavailable=True,
    )


def render_payload(payload: ForecastPayload) -> RenderedView:
    """Summary line from the first day, then one entry per day."""
    today = payload.today
    summary = (
        f"{_text(today.summary_text)} • "
        f"{_num(today.temperature.low)}°C–{_num(today.temperature.high)}°C"
    )
    return RenderedView(
        summary=summary,
        entries=[render_day(d) for d in payload.days],
    )


def render_day(day: ForecastDay) -> RenderedEntry:
    wind = f"{_num(day.wind.speed.low)}–{_num(day.wind.speed.high)} km/h"
    if day.wind.direction:
        wind += f" {escape(day.wind.direction)}"
    return RenderedEntry(
        label=day_label(day.date),
        summary_text=_text(day.summary_text),
        temperature=f"{_num(day.temperature.low)}°C — {_num(day.temperature.high)}°C",
        wind=wind,
        humidity=(
            f"{_num(day.relative_humidity.low)}%–{_num(day.relative_humidity.high)}%"
        ),
        date=escape(day.date),
    )


def day_label(iso_date: str) -> str:
    """Short weekday and date, e.g. 'Wed, May 1'. Names follow the process locale."""
    try:
        d = date.fromisoformat(iso_date)
    except ValueError:
        return escape(iso_date) or PLACEHOLDER
    return f"{d:%a}, {d:%b} {d.day}"


def escape(text: str) -> str:
    return html.escape(text, quote=True)


def _text(text: str) -> str:
    return escape(text) if text else PLACEHOLDER


def _num(value: float | None) -> str:
    if value is None:
        return PLACEHOLDER
    if value.is_integer():
        return str(int(value))
    return f"{value:g}"
