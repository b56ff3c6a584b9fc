"""Output formatters for rendered forecast views."""

import html
import json

from shoresquad.models.view import RenderedView


def format_view_text(view: RenderedView) -> str:
    """Plain text for the terminal. Escaped fields are decoded back for display."""
    lines = [html.unescape(view.summary)]
    for e in view.entries:
        if not e.label:
            lines.append(f"  {html.unescape(e.summary_text)}")
            continue
        lines.append(
            f"  {e.label}: {html.unescape(e.summary_text)} | "
            f"{e.temperature} | {html.unescape(e.wind)} | {e.humidity}"
        )
    return "\n".join(lines)


def format_view_json(view: RenderedView) -> str:
    """JSON for programmatic consumption. Field values stay HTML-escaped."""
    data = {
        "summary": view.summary,
        "unavailable": view.unavailable,
        "entries": [
            {
                "date": e.date,
                "label": e.label,
                "summary_text": e.summary_text,
                "temperature": e.temperature,
                "wind": e.wind,
                "humidity": e.humidity,
            }
            for e in view.entries
        ],
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_view_html(view: RenderedView) -> str:
    """List markup for the forecast container. Entries are already escaped."""
    if view.unavailable:
        items = [
            f'<li class="forecast-day unavailable">{e.summary_text}</li>'
            for e in view.entries
        ]
    else:
        items = [
            f'<li class="forecast-day" data-date="{e.date}">'
            f'<div class="fd-date">{e.label}</div>'
            f'<div class="fd-summary">{e.summary_text}</div>'
            f'<div class="fd-temp">{e.temperature}</div>'
            f'<div class="fd-wind">{e.wind}</div>'
            f'<div class="fd-humidity">{e.humidity}</div>'
            "</li>"
            for e in view.entries
        ]
    return (
        f'<p id="weather-summary">{view.summary}</p>\n'
        '<ul id="forecast-list">\n'
        + "\n".join(items)
        + "\n</ul>"
    )
