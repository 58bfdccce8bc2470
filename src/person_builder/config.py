"""Settings from the environment (and an optional .env file) plus logging setup."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import phonenumbers
from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_PHONE_REGION = "US"


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    phone_region: str = DEFAULT_PHONE_REGION


def load_settings(env_file: Path | None = None) -> Settings:
    """Read PERSON_BUILDER_* variables. Values already in the environment win over .env."""
    path = env_file if env_file is not None else Path.cwd() / ".env"
    if path.exists():
        load_dotenv(path)
    log_level = os.environ.get("PERSON_BUILDER_LOG_LEVEL", "").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        log_level = DEFAULT_LOG_LEVEL
    region = os.environ.get("PERSON_BUILDER_PHONE_REGION", "").strip().upper()
    if region not in phonenumbers.SUPPORTED_REGIONS:
        region = DEFAULT_PHONE_REGION
    return Settings(log_level=log_level, phone_region=region)


def configure_logging(settings: Settings | None = None) -> None:
    """Install the root handler. Call from entry points, never on import."""
    settings = settings or load_settings()
    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level)
