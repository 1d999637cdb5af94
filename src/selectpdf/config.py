"""
Configuration management for the SelectPdf client.
"""

import logging
from typing import Optional

from pydantic import ConfigDict
from pydantic_settings import BaseSettings

DEFAULT_API_BASE_URL = "https://selectpdf.com/api2/"


class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", env_prefix="SELECTPDF_", extra="ignore")

    api_key: Optional[str] = None
    # feature endpoints are resolved relative to this url
    api_base_url: str = DEFAULT_API_BASE_URL

    # seconds
    timeout_seconds: int = 6000

    async_calls_ping_interval: int = 3
    async_calls_max_pings: int = 1000

    debug: bool = False
    log_level: str = "INFO"


def get_settings() -> Settings:
    return Settings()


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the client."""
    logger = logging.getLogger("selectpdf")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"selectpdf.{name}")
