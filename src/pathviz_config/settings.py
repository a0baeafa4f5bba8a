"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. PATHVIZ_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

HEX_COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent
        if (parent / "pyproject.toml").is_file():
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path (for .env files and snapshots)."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. PATHVIZ_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("PATHVIZ_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "pathviz"
    debug: bool = False

    # API (API_ prefix)
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_cors_origins: str = ""  # Empty = no CORS allowed

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> str:
        """Ensure cors_origins is stored as comma-separated string."""
        if isinstance(v, list):
            return ",".join(v)
        return str(v) if v else ""

    # Scenario data (JSON snapshot of a backend response)
    snapshot_path: Path | None = None

    # Number formatting
    significant_digits: int = 3

    # Chart theme (CHART_ prefix)
    chart_palette: str = "#1f5f9e,#d64c3a,#2f8a4e"
    chart_default_color: str = "#1f5f9e"
    chart_link_tint: float = 0.25
    chart_segment_tint: float = 0.5

    @field_validator("chart_palette", mode="before")
    @classmethod
    def _validate_chart_palette(cls, v: Any) -> str:
        """Accept a list or comma-separated string of hex colors."""
        if isinstance(v, (list, tuple)):
            v = ",".join(v)
        colors = [c.strip() for c in str(v).split(",") if c.strip()]
        invalid = [c for c in colors if not HEX_COLOR_PATTERN.match(c)]
        if invalid or not colors:
            msg = f"chart_palette must be a list of #rrggbb colors, got {v!r}"
            raise ValueError(msg)
        return ",".join(colors)

    @field_validator("chart_link_tint", "chart_segment_tint")
    @classmethod
    def _validate_tint(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            msg = "Tint amounts must be between 0 and 1"
            raise ValueError(msg)
        return v

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    # Computed properties
    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def palette(self) -> list[str]:
        """Parse the chart palette from comma-separated string."""
        return [c.strip() for c in self.chart_palette.split(",") if c.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
