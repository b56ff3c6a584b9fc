"""Forecast client: cache-first fetch with validation and failure collapse."""

import logging

import httpx

from shoresquad.cache.ttl_cache import TtlCache
from shoresquad.ingest.forecast_api import ForecastApi
from shoresquad.ingest.forecast_parser import parse_forecast_response
from shoresquad.models.forecast import (
    CacheEntry,
    FailureKind,
    FetchFailure,
    FetchResult,
    Invalid,
)

logger = logging.getLogger(__name__)


class ForecastClient:
    def __init__(self, api: ForecastApi, cache: TtlCache):
        self.api = api
        self.cache = cache

    async def fetch_forecast(self, use_cache: bool = True) -> FetchResult:
        """Return the forecast payload, or a FetchFailure. Never raises.

        A fresh cache entry is returned without touching the network unless
        ``use_cache`` is False.
        An unreadable store counts as a cache miss.
        Only a validated payload is written back to the cache.
        """
        entry = self._read_cache() if use_cache else None
        if entry is not None:
            logger.debug("Serving forecast from cache (stored %s)", entry.timestamp)
            return entry.data

        try:
            resp = await self.api.get_forecast()
            if not resp.is_success:
                logger.warning(
                    "Forecast endpoint %s returned %d", self.api.url, resp.status_code
                )
                return FetchFailure(FailureKind.TRANSPORT, status_code=resp.status_code)

            parsed = parse_forecast_response(resp.json())
            if isinstance(parsed, Invalid):
                logger.warning("Rejecting forecast response: %s", parsed.reason)
                return FetchFailure(FailureKind.INVALID_SHAPE, reason=parsed.reason)

            self.cache.write(parsed.payload)
            logger.info("Fetched forecast with %d days", len(parsed.payload.days))
            return parsed.payload
        except httpx.RequestError as e:
            logger.warning("Forecast request to %s failed: %s", self.api.url, e)
            return FetchFailure(FailureKind.TRANSPORT, cause=e)
        except Exception as e:
            logger.exception("Unexpected error fetching forecast")
            return FetchFailure(FailureKind.UNEXPECTED, cause=e)

    def _read_cache(self) -> CacheEntry | None:
        """The cached entry if it is still fresh."""
        try:
            entry = self.cache.read()
            if entry is not None and self.cache.is_fresh(entry):
                return entry
        except Exception as e:
            logger.warning("Forecast cache %s unreadable, fetching: %s", self.cache.key, e)
        return None
