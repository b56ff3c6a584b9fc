"""Single-slot forecast cache with a fixed time-to-live."""

import json
import logging
from datetime import datetime, timedelta

from shoresquad.config.defaults import DEFAULT_CACHE_KEY
from shoresquad.ingest.forecast_parser import parse_forecast_set
from shoresquad.models.common import from_epoch_millis, to_epoch_millis, utc_now
from shoresquad.models.forecast import CacheEntry, ForecastPayload, Invalid
from shoresquad.storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

CACHE_TTL = timedelta(minutes=15)


class TtlCache:
    """Owns one named slot in a key-value store.

    The slot holds ``{"timestamp": <epoch millis>, "data": {"forecasts": [...]}}``.
    Stale entries are reported as stale, never purged.
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_CACHE_KEY):
        self.store = store
        self.key = key

    def read(self) -> CacheEntry | None:
        """Return the stored entry, or None if missing or unreadable."""
        raw = self.store.get(self.key)
        if raw is None:
            return None
        try:
            doc = json.loads(raw)
            timestamp = from_epoch_millis(doc["timestamp"])
            parsed = parse_forecast_set(doc["data"])
        except (ValueError, KeyError, TypeError, OverflowError, OSError) as e:
            logger.warning("Ignoring corrupt cache entry %s: %s", self.key, e)
            return None
        if isinstance(parsed, Invalid):
            logger.warning(
                "Ignoring corrupt cache entry %s: %s", self.key, parsed.reason
            )
            return None
        return CacheEntry(timestamp=timestamp, data=parsed.payload)

    def write(self, data: ForecastPayload, now: datetime | None = None) -> None:
        if now is None:
            now = utc_now()
        doc = {"timestamp": to_epoch_millis(now), "data": data.to_wire()}
        self.store.set(self.key, json.dumps(doc))

    def invalidate(self) -> None:
        self.store.delete(self.key)

    def is_fresh(self, entry: CacheEntry, now: datetime | None = None) -> bool:
        """True iff the entry is younger than CACHE_TTL; exactly TTL old is stale."""
        if now is None:
            now = utc_now()
        return now - entry.timestamp < CACHE_TTL
