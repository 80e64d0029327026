"""Cities shown on the dashboard before the user searches for anything."""

DEFAULT_CITIES: list[str] = ["London", "New York", "Tokyo", "Paris", "Sydney"]

API_KEY_ENV_VAR = "OPENWEATHER_API_KEY"
