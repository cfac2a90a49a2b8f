"""Application settings and configuration management."""
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Flat file locations."""

    data_dir: Path = Path(".")
    rooms_file: str = "rooms.txt"
    reservations_file: str = "reservations.txt"
    students_file: str = "students.csv"

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    @property
    def rooms_path(self) -> Path:
        return self.data_dir / self.rooms_file

    @property
    def reservations_path(self) -> Path:
        return self.data_dir / self.reservations_file

    @property
    def students_path(self) -> Path:
        return self.data_dir / self.students_file


class HotelSettings(BaseSettings):
    """Hotel reservation console configuration."""

    confirmation_word: str = "yes"  # Answer that confirms the simulated payment
    currency_symbol: str = "$"

    model_config = SettingsConfigDict(env_prefix="HOTEL_")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "console"] = "console"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    environment: Literal["dev", "staging", "prod"] = "dev"

    # Sub-settings
    storage: StorageSettings = StorageSettings()
    hotel: HotelSettings = HotelSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    def with_data_dir(self, data_dir: Path) -> "Settings":
        """Return a copy of these settings pointing at another data directory.

        Args:
            data_dir: Directory holding the flat files

        Returns:
            New Settings instance; self is left untouched
        """
        storage = self.storage.model_copy(update={"data_dir": data_dir})
        return self.model_copy(update={"storage": storage})


# Global settings instance
settings = Settings()
