"""Runtime configuration.

Loaded from ``ORDERS_*`` environment variables or a ``.env`` file in the
working directory.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ORDERS_",
        env_file=".env",
        extra="ignore",
    )

    database_url: str = f"sqlite:///{_DATA_DIR / 'orders.db'}"
    echo_sql: bool = False
    seed_on_startup: bool = True
    log_level: str = "WARNING"


def load_settings() -> Settings:
    return Settings()
