"""Display-ready view models produced by the renderer."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RenderedEntry:
    label: str
    summary_text: str
    temperature: str = ""
    wind: str = ""
    humidity: str = ""
    date: str = ""  # YYYY-MM-DD, empty for placeholder entries


@dataclass(frozen=True)
class RenderedView:
    summary: str
    entries: list[RenderedEntry] = field(default_factory=list)
    unavailable: bool = False
