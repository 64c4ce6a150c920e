"""Configuration management for the compensation engine."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache

from dotenv import load_dotenv

from compensation_engine.calculators.validation import CompensationRules


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    engine_version: str
    host: str
    port: int
    debug: bool
    log_level: str
    catalog_path: str | None
    default_shift_hours: int
    min_hourly_rate: Decimal
    max_hourly_rate: Decimal
    outlier_threshold: Decimal

    @property
    def HOST(self) -> str:
        """Alias for host."""
        return self.host

    @property
    def PORT(self) -> int:
        """Alias for port."""
        return self.port

    @property
    def DEBUG(self) -> bool:
        """Alias for debug."""
        return self.debug

    def compensation_rules(self) -> CompensationRules:
        """Validation thresholds built from these settings."""
        return CompensationRules(
            min_hourly_rate=self.min_hourly_rate,
            max_hourly_rate=self.max_hourly_rate,
            outlier_threshold=self.outlier_threshold,
        )

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        return cls(
            engine_version=os.getenv("ENGINE_VERSION", "1.0.0"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            catalog_path=os.getenv("DIFFERENTIAL_CATALOG_PATH") or None,
            default_shift_hours=int(os.getenv("DEFAULT_SHIFT_HOURS", "12")),
            min_hourly_rate=Decimal(os.getenv("MIN_HOURLY_RATE", "15")),
            max_hourly_rate=Decimal(os.getenv("MAX_HOURLY_RATE", "200")),
            outlier_threshold=Decimal(os.getenv("OUTLIER_THRESHOLD", "0.3")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()


settings = get_settings()
