"""Tests for the single-slot TTL cache, including freshness boundaries."""

import json
from datetime import UTC, datetime, timedelta

from shoresquad.cache.ttl_cache import CACHE_TTL, TtlCache
from shoresquad.ingest.forecast_parser import parse_forecast_response
from shoresquad.models.forecast import ForecastPayload

STORED_AT = datetime(2024, 5, 1, 8, 0, 0, tzinfo=UTC)


def _payload(forecast_response: dict) -> ForecastPayload:
    return parse_forecast_response(forecast_response).payload


class TestReadWrite:
    def test_read_missing(self, cache: TtlCache):
        assert cache.read() is None

    def test_write_then_read(self, cache: TtlCache, forecast_response: dict):
        payload = _payload(forecast_response)
        cache.write(payload, now=STORED_AT)

        entry = cache.read()
        assert entry is not None
        assert entry.timestamp == STORED_AT
        assert entry.data == payload

    def test_stored_format(self, cache: TtlCache, fake_store, forecast_response: dict):
        cache.write(_payload(forecast_response), now=STORED_AT)

        doc = json.loads(fake_store.data["shoresquad:weather"])
        assert doc["timestamp"] == 1714550400000
        assert doc["data"]["forecasts"][0]["forecast"] == "Sunny"
        assert doc["data"]["forecasts"][0]["wind"]["speed"]["high"] == 20

    def test_write_overwrites(self, cache: TtlCache, forecast_response: dict):
        payload = _payload(forecast_response)
        cache.write(payload, now=STORED_AT)
        later = STORED_AT + timedelta(hours=1)
        cache.write(payload, now=later)

        entry = cache.read()
        assert entry is not None
        assert entry.timestamp == later

    def test_invalidate(self, cache: TtlCache, forecast_response: dict):
        cache.write(_payload(forecast_response), now=STORED_AT)
        cache.invalidate()
        assert cache.read() is None

    def test_invalidate_missing_is_noop(self, cache: TtlCache):
        cache.invalidate()
        assert cache.read() is None

    def test_separate_keys(self, fake_store, forecast_response: dict):
        a = TtlCache(fake_store, key="a")
        b = TtlCache(fake_store, key="b")
        a.write(_payload(forecast_response), now=STORED_AT)
        assert b.read() is None
        assert a.read() is not None


class TestCorruptEntries:
    def test_not_json(self, cache: TtlCache, fake_store):
        fake_store.set(cache.key, "{not json")
        assert cache.read() is None

    def test_not_an_object(self, cache: TtlCache, fake_store):
        fake_store.set(cache.key, "[1, 2, 3]")
        assert cache.read() is None

    def test_missing_timestamp(self, cache: TtlCache, fake_store):
        fake_store.set(cache.key, json.dumps({"data": {"forecasts": [{"date": "2024-05-01"}]}}))
        assert cache.read() is None

    def test_bad_timestamp(self, cache: TtlCache, fake_store):
        fake_store.set(
            cache.key,
            json.dumps({"timestamp": "yesterday", "data": {"forecasts": [{"date": "2024-05-01"}]}}),
        )
        assert cache.read() is None

    def test_empty_forecasts(self, cache: TtlCache, fake_store):
        fake_store.set(cache.key, json.dumps({"timestamp": 1714550400000, "data": {"forecasts": []}}))
        assert cache.read() is None


class TestIsFresh:
    def _entry(self, cache: TtlCache, forecast_response: dict):
        cache.write(_payload(forecast_response), now=STORED_AT)
        entry = cache.read()
        assert entry is not None
        return entry

    def test_fresh_at_storage_time(self, cache: TtlCache, forecast_response: dict):
        entry = self._entry(cache, forecast_response)
        assert cache.is_fresh(entry, now=STORED_AT) is True

    def test_fresh_just_before_ttl(self, cache: TtlCache, forecast_response: dict):
        entry = self._entry(cache, forecast_response)
        now = STORED_AT + CACHE_TTL - timedelta(milliseconds=1)
        assert cache.is_fresh(entry, now=now) is True

    def test_boundary_exact(self, cache: TtlCache, forecast_response: dict):
        entry = self._entry(cache, forecast_response)
        # Exactly 15 minutes = stale (strict less-than)
        assert cache.is_fresh(entry, now=STORED_AT + timedelta(minutes=15)) is False

    def test_stale(self, cache: TtlCache, forecast_response: dict):
        entry = self._entry(cache, forecast_response)
        assert cache.is_fresh(entry, now=STORED_AT + timedelta(hours=2)) is False

    def test_stale_entry_is_not_purged(self, cache: TtlCache, forecast_response: dict):
        entry = self._entry(cache, forecast_response)
        cache.is_fresh(entry, now=STORED_AT + timedelta(hours=2))
        assert cache.read() is not None


class TestSqliteBacked:
    def test_round_trip(self, store, forecast_response: dict):
        cache = TtlCache(store)
        cache.write(_payload(forecast_response), now=STORED_AT)
        entry = cache.read()
        assert entry is not None
        assert len(entry.data.days) == 4
        cache.invalidate()
        assert cache.read() is None
