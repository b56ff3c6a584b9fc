"""The UI surface the widget writes to."""

import logging
from typing import Protocol

from shoresquad.models.view import RenderedEntry

logger = logging.getLogger(__name__)


class UiPort(Protocol):
    refresh_label: str

    def set_summary(self, text: str) -> None: ...

    def set_entries(self, entries: list[RenderedEntry]) -> None: ...


class MemoryUi:
    """Holds the latest widget state; the CLI formats it once the work is done."""

    def __init__(self, refresh_label: str = "Refresh"):
        self.summary = ""
        self.entries: list[RenderedEntry] = []
        self.refresh_label = refresh_label

    def set_summary(self, text: str) -> None:
        logger.debug("summary: %s", text)
        self.summary = text

    def set_entries(self, entries: list[RenderedEntry]) -> None:
        self.entries = list(entries)
