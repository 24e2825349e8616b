"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DATABASE_FILENAME = "wallet_ledger.db"


class Settings(BaseSettings):
    """Ledger configuration from environment variables and ``.env``."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Wallet Ledger"

    # Holds the SQLite file when database_url is unset
    data_dir: Path = Path.home() / ".wallet-ledger"
    database_url: Optional[str] = None

    # Seconds a SQLite connection waits for another writer's lock
    sqlite_busy_timeout_seconds: float = 30.0

    log_level: str = "INFO"

    def get_database_url(self) -> str:
        """Return ``database_url``, or a SQLite URL for a file in ``data_dir``."""
        if self.database_url:
            return self.database_url
        return f"sqlite:///{self.data_dir / DATABASE_FILENAME}"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None
