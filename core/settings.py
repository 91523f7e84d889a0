"""
Project settings.

Values are read from environment variables (prefix ``CONVERTER_``) or a
``.env`` file in the working directory, then exposed as module-level
constants so the rest of the code can simply do
``from core.settings import FRANKFURTER_URL``.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Environment variables:
        - CONVERTER_FRANKFURTER_URL: Rate service root (default: https://api.frankfurter.app)
        - CONVERTER_REQUEST_TIMEOUT: Seconds before a rate request is abandoned (default: 10)
        - CONVERTER_HISTORY_FILE: Append-only conversion log (default: conversion_history.txt)
        - CONVERTER_RATE_PROVIDER: "frankfurter" or "mock" (default: frankfurter)
        - CONVERTER_LOG_LEVEL: Logging level (default: WARNING)
    """

    model_config = SettingsConfigDict(
        env_prefix="CONVERTER_",
        env_file=".env",
        extra="ignore",
    )

    frankfurter_url: str = Field(
        default="https://api.frankfurter.app",
        description="Root URL of the Frankfurter rate service"
    )
    request_timeout: float = Field(default=10.0, gt=0)
    history_file: Path = Field(default=Path("conversion_history.txt"))
    rate_provider: Literal["frankfurter", "mock"] = "frankfurter"
    log_level: str = "WARNING"


settings = Settings()

FRANKFURTER_URL = settings.frankfurter_url.rstrip("/")
REQUEST_TIMEOUT = settings.request_timeout
HISTORY_FILE = settings.history_file
RATE_PROVIDER = settings.rate_provider
LOG_LEVEL = settings.log_level.upper()
