"""
Pig & Motor Pulse - Application Settings

Loads configuration from environment variables (or a local .env file)
using Pydantic Settings, and builds the engine/analyzer config objects.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from src.analysis.base import AnalyzerConfig
from src.engine.base import PigConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "WARNING"

    # Pig
    pig_target_score: int = Field(default=100, gt=0)
    pig_computer_turn_cap: int = Field(default=40, gt=0)
    pig_dice_sides: int = Field(default=6, ge=2)
    pig_seed: int | None = None

    # Motor analyzer
    motor_count: int = Field(default=7, ge=1)
    sample_count: int = Field(default=1000, ge=1)
    on_threshold: float = 1.0
    exceed_threshold: float = 8.0
    close_open_pulse: bool = False
    logger_file: str = "Logger.csv"
    report_dir: str = "."
    report_name_template: str = "Motor{number}.csv"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def pig_config(self) -> PigConfig:
        return PigConfig(
            target_score=self.pig_target_score,
            computer_turn_cap=self.pig_computer_turn_cap,
            dice_sides=self.pig_dice_sides,
        )

    def analyzer_config(self) -> AnalyzerConfig:
        return AnalyzerConfig(
            motor_count=self.motor_count,
            sample_count=self.sample_count,
            on_threshold=self.on_threshold,
            exceed_threshold=self.exceed_threshold,
            close_open_pulse=self.close_open_pulse,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
