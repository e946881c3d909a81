"""
Central configuration management for graphcluster.

Loads settings from environment variables and provides typed access.
The clustering engine itself takes no configuration; these settings drive
logging and how results are summarised for display.
"""
from pathlib import Path
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class LoggingSettings(BaseSettings):
    """Logging configuration used by scripts and demos."""
    level: str = Field(default="INFO", alias="GRAPHCLUSTER_LOG_LEVEL")
    format: str = Field(
        default="%(levelname)s: %(name)s: %(message)s",
        alias="GRAPHCLUSTER_LOG_FORMAT",
    )


class AnalysisSettings(BaseSettings):
    """Presentation of computed coefficients."""
    precision: int = Field(
        default=4,
        ge=0,
        alias="GRAPHCLUSTER_PRECISION",
        description="Decimal places kept when summarising scores",
    )


class Settings(BaseSettings):
    """Main settings aggregator."""
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)

    # Project root
    project_root: Path = Field(default_factory=lambda: Path(__file__).parent.parent.parent)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def load_dotenv_if_exists():
    """Load the project .env file into the process environment if present."""
    from dotenv import load_dotenv
    env_path = Path(__file__).parent.parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)
