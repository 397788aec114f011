"""Project-wide single-source configuration constants for the feed dashboard."""

# ------ Upstream API base URLs -------
WEATHER_BASE_URL: str = "https://api.openweathermap.org/data/2.5"
CRYPTO_BASE_URL: str = "https://api.coingecko.com/api/v3"
COVID_BASE_URL: str = "https://disease.sh/v3/covid-19"

# ------ HTTP -------
REQUEST_TIMEOUT_S: float | None = None   # None: requests' own default (no timeout)

# ------- Weather panel -------
DEFAULT_CITIES: tuple[str, ...] = ("London", "New York", "Tokyo", "Sydney", "Paris")
WEATHER_UNITS: str = "metric"
FORECAST_SLOTS: int = 5                  # forecast entries after the current slot

# ------- Crypto panel -------
CRYPTO_VS_CURRENCY: str = "usd"
CRYPTO_TOP_N: int = 10                   # coins per markets page
CRYPTO_CHART_DAYS: int = 7               # market_chart window
BASE_CURRENCY: str = "USD"
# Static table; never refreshed at runtime
DEFAULT_EXCHANGE_RATES: dict[str, float] = {"EUR": 0.84, "GBP": 0.72, "JPY": 110.14}

# ------- COVID panel -------
COVID_TOP_N: int = 10                    # countries kept in the table
COVID_HISTORY_DAYS: int = 30             # historical/all window

# ------- Loading placeholders -------
WEATHER_PLACEHOLDERS: int = 5
CRYPTO_PLACEHOLDERS: int = 10
COVID_PLACEHOLDERS: int = 10

# ------- Panel error messages -------
WEATHER_LOAD_ERROR = "Failed to fetch weather data"
WEATHER_SEARCH_ERROR = "Failed to fetch weather data"
CRYPTO_LOAD_ERROR = "Failed to fetch cryptocurrency data"
CRYPTO_SEARCH_ERROR = "Failed to fetch data for the specified coin"
COVID_LOAD_ERROR = "Failed to fetch COVID-19 data"
COVID_SEARCH_ERROR = "Failed to fetch data for the specified country"

# ------- Stale response policy -------
DISCARD_STALE_RESPONSES: bool = True     # False: last-to-resolve wins

# ------- Logging -------
LOG_LEVEL: str = "INFO"
