"""Runtime settings for metricfmt.

Only the ambient concerns (logging, the metrics sidecar server) are
configurable. Negotiation constants are fixed by the exposition protocol.
"""

from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings, read from ``METRICFMT_*`` variables."""

    model_config = SettingsConfigDict(env_prefix="METRICFMT_", case_sensitive=True)

    LOG_LEVEL: Literal["debug", "info", "warning", "error"] = "info"
    LOG_JSON: bool = False

    METRICS_HOST: str = "0.0.0.0"
    METRICS_PORT: int = 9100
    METRICS_PATH: str = "/metrics"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


settings = Settings()
