"""Default endpoint, storage keys and paths."""

DEFAULT_FORECAST_URL = "https://api.data.gov.sg/v1/environment/4-day-weather-forecast"
DEFAULT_USER_AGENT = "shoresquad-widget/0.1.0"

DEFAULT_DB_PATH = "data/shoresquad.db"
DEFAULT_CACHE_KEY = "shoresquad:weather"
DEFAULT_SAVED_EVENTS_KEY = "shoresquad:savedEvents"
