"""Application configuration."""
from functools import lru_cache
from typing import List

from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment."""

    # Application
    app_env: str = "development"
    cors_origins: str = "http://localhost:5173,http://localhost:3000"
    log_level: str = "INFO"

    # Participant weights (technical contribution counts twice non-technical)
    technical_weight: float = 1.0
    non_technical_weight: float = 0.5

    # Speed multiplier bounds (estimated / actual days is clamped to this range)
    speed_multiplier_min: float = 0.5
    speed_multiplier_max: float = 1.5

    # Decimal places for presented amounts
    rounding_places: int = 2

    @model_validator(mode="after")
    def check_engine_constants(self) -> "Settings":
        if self.technical_weight <= 0 or self.non_technical_weight <= 0:
            raise ValueError("participant weights must be positive")
        if self.speed_multiplier_min <= 0:
            raise ValueError("speed_multiplier_min must be positive")
        if self.speed_multiplier_min > self.speed_multiplier_max:
            raise ValueError("speed_multiplier_min must not exceed speed_multiplier_max")
        if self.rounding_places < 0:
            raise ValueError("rounding_places must not be negative")
        return self

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
