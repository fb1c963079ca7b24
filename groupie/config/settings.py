"""Application settings loaded from environment variables via pydantic-settings.

Values are read from environment variables first, then from a ``.env`` file
in the working directory; the defaults below apply when neither is set.
Field ``api_base_url`` maps to env var ``API_BASE_URL`` and so on.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Groupie Tracker application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === Upstream API ===
    api_base_url: str = "https://groupietrackers.herokuapp.com/api"

    # === App Config ===
    app_host: str = "0.0.0.0"
    app_port: int = 8080
    app_env: str = "development"
    log_level: str = "INFO"
