from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    input_path: Path = Field(default=Path("input.json"), description="JSON file with the named operations.")
    output_path: Path = Field(default=Path("output.txt"), description="Text report, overwritten each run.")
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CALC_REPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def resolved_log_level(self) -> str:
        """
        Returns the configured log level upper-cased, falling back to INFO for unknown names.
        """
        level = self.log_level.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            return "INFO"
        return level


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
