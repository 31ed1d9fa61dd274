"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - PORT unset or empty resolves to 8080
    - get_settings() is cached (lru_cache) — single instance per process
    - Asset directories default to the copies shipped inside the package

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for every setting: the portal runs with no environment at all
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_PORT = 8080


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Listener
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    @field_validator("port", mode="before")
    @classmethod
    def default_empty_port(cls, v):
        """PORT="" counts as unset."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_PORT
        return v

    # Service identity
    service_name: str = "nc-fttx-portal"
    page_title: str = "NC FTTX Permitting Portal"

    # Web assets
    templates_dir: Path = PACKAGE_DIR / "web" / "templates"
    static_dir: Path = PACKAGE_DIR / "web" / "static"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
