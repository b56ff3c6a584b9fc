"""Widget controller: load-time fetch and user-triggered refresh."""

import asyncio
import itertools
import logging

from shoresquad.cache.ttl_cache import TtlCache
from shoresquad.config.schema import RefreshConfig
from shoresquad.ingest.forecast_client import ForecastClient
from shoresquad.models.view import RenderedView
from shoresquad.render.renderer import render
from shoresquad.ui.port import UiPort

logger = logging.getLogger(__name__)

LOADING_SUMMARY = "Loading weather..."


class WidgetController:
    """Drives fetch → render → UI for one widget instance.

    Every load takes a sequence token. Only the most recently issued load may
    write to the UI, so an older response resolving late is dropped.
    """

    def __init__(
        self,
        client: ForecastClient,
        cache: TtlCache,
        ui: UiPort,
        refresh: RefreshConfig | None = None,
    ):
        self.client = client
        self.cache = cache
        self.ui = ui
        self.refresh_config = refresh or RefreshConfig()
        self._tokens = itertools.count(1)
        self._latest = 0

    async def load(self, use_cache: bool = True) -> RenderedView | None:
        """Fetch and render. Returns None if a newer load superseded this one."""
        token = next(self._tokens)
        self._latest = token
        self.ui.set_summary(LOADING_SUMMARY)

        result = await self.client.fetch_forecast(use_cache=use_cache)

        if token != self._latest:
            logger.info("Dropping forecast result %d, superseded by %d", token, self._latest)
            return None

        view = render(result)
        self.ui.set_summary(view.summary)
        self.ui.set_entries(view.entries)
        return view

    async def refresh(self) -> RenderedView | None:
        """Invalidate the cache and reload, with a transient label change.

        The label reverts after ``ack_seconds`` whatever the fetch outcome.
        """
        try:
            self.cache.invalidate()
        except Exception as e:
            logger.warning("Could not drop cached forecast %s: %s", self.cache.key, e)
        prior_label = self.ui.refresh_label
        if prior_label == self.refresh_config.ack_label:
            # a previous refresh is still acknowledging
            prior_label = self.refresh_config.label
        self.ui.refresh_label = self.refresh_config.ack_label
        revert = asyncio.create_task(self._revert_label(prior_label))
        try:
            return await self.load(use_cache=False)
        finally:
            await revert

    async def _revert_label(self, label: str) -> None:
        await asyncio.sleep(self.refresh_config.ack_seconds)
        self.ui.refresh_label = label
