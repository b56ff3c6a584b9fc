"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from shoresquad.config.defaults import (
    DEFAULT_CACHE_KEY,
    DEFAULT_DB_PATH,
    DEFAULT_FORECAST_URL,
    DEFAULT_SAVED_EVENTS_KEY,
    DEFAULT_USER_AGENT,
)


class ForecastApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    url: str = DEFAULT_FORECAST_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class CacheConfig(BaseModel):
    model_config = {"extra": "forbid"}

    db_path: str = DEFAULT_DB_PATH
    key: str = Field(default=DEFAULT_CACHE_KEY, min_length=1)


class RefreshConfig(BaseModel):
    model_config = {"extra": "forbid"}

    label: str = "Refresh"
    ack_label: str = "Refreshed"
    ack_seconds: float = Field(default=1.5, ge=0.0)


class SavedEventsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    key: str = Field(default=DEFAULT_SAVED_EVENTS_KEY, min_length=1)


class WidgetConfig(BaseModel):
    model_config = {"extra": "forbid"}

    forecast: ForecastApiConfig = ForecastApiConfig()
    cache: CacheConfig = CacheConfig()
    refresh: RefreshConfig = RefreshConfig()
    saved_events: SavedEventsConfig = SavedEventsConfig()
