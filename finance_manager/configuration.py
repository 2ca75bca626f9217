"""Mini README: Centralised configuration models and helpers for the finance manager.

Structure:
    * FinanceSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to discover the default ledger file, the log level,
    and the address the web front end binds to. Values can be overridden with
    ``FINANCE_MANAGER_*`` environment variables or a local ``.env`` file.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Union

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class FinanceSettings(BaseSettings):
    """Runtime configuration for the finance manager."""

    ledger_file: Path = Field(
        Path("finance.txt"),
        description="Flat file the ledger is loaded from at startup and saved to on exit.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web front end to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the web front end exposes.",
        ge=1,
        le=65535,
    )
    log_level: str = Field(
        "INFO",
        description="Name of the logging level applied to the root logger.",
    )

    class Config:
        env_prefix = "FINANCE_MANAGER_"
        env_file = ".env"
        case_sensitive = False

    @validator("ledger_file", pre=True)
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Expand ``~`` so home-relative ledger paths work from any directory."""

        return Path(value).expanduser()

    @validator("log_level")
    def _check_log_level(cls, value: str) -> str:
        """Accept any casing but only level names the logging module knows."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> FinanceSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return FinanceSettings()
