"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings

from src.domain.search import SearchDefaults


class Settings(BaseSettings):
    # Search defaults
    default_city: str = "Denver"
    default_region: str = "Colorado"
    default_radius_miles: float = 30.0
    default_page_size: int = 200
    max_page_size: int = 200  # Open Brewery DB per_page limit

    # Upstream services
    directory_url: str = "https://api.openbrewerydb.org/v1/breweries"
    geocoder_url: str = "https://nominatim.openstreetmap.org/search"
    geocoder_country: str = "USA"
    user_agent: str = "brewery-map/1.0 (contact: example@example.com)"
    http_timeout_seconds: float = 10.0

    # API
    rate_limit: str = "100/minute"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

    def search_defaults(self) -> SearchDefaults:
        return SearchDefaults(
            city=self.default_city,
            region=self.default_region,
            radius_miles=self.default_radius_miles,
            page_size=self.default_page_size,
            max_page_size=self.max_page_size,
        )


settings = Settings()
