from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic import ConfigDict, field_validator

ENV_BOOL_TRUE = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ENV_BOOL_TRUE


class Settings(BaseModel):
    default_tax_year: int = Field(default_factory=lambda: int(os.getenv("TAX_DEFAULT_YEAR", "2025")))
    default_province: str = Field(default_factory=lambda: os.getenv("TAX_DEFAULT_PROVINCE", "ON"))
    build_version: str = Field(default_factory=lambda: os.getenv("BUILD_VERSION", "dev"))
    build_sha: str = Field(default_factory=lambda: os.getenv("BUILD_SHA", "local"))
    log_dir: str = Field(default_factory=lambda: os.getenv("TAX_LOG_DIR", "logs"))
    telemetry_enabled: bool = Field(default_factory=lambda: _env_bool("TAX_TELEMETRY_ENABLED", False))

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("default_province", mode="before")
    @classmethod
    def _normalize_province(cls, value: str) -> str:
        code = (value or "ON").strip().upper()
        if len(code) != 2:
            raise ValueError(f"TAX_DEFAULT_PROVINCE must be a two-letter code, got {code!r}")
        return code

    @field_validator("default_tax_year")
    @classmethod
    def _validate_year(cls, value: int) -> int:
        if value < 2000:
            raise ValueError(f"TAX_DEFAULT_YEAR looks wrong: {value}")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
