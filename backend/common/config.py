"""backend.common.config

Environment configuration, logging setup and the process-wide service
bundle shared by every driver Lambda.

Environment variables:
- `TABLE_NAME`: DynamoDB table holding the driver items (required).
- `REGION`: AWS region for DynamoDB and Translate. Falls back to
  `AWS_REGION` / `AWS_DEFAULT_REGION`, then to the boto3 default chain.
- `LOG_LEVEL`: root logger level (default `INFO`).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from backend.common.errors import ConfigurationError
from backend.common.store import DriverStore
from backend.common.translator import AwsTranslator


@dataclass(frozen=True)
class Settings:
    table_name: str
    region: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ

        table_name = (env.get("TABLE_NAME") or "").strip()
        if not table_name:
            raise ConfigurationError("TABLE_NAME not configured")

        region = env.get("REGION") or env.get("AWS_REGION") or env.get("AWS_DEFAULT_REGION")
        log_level = (env.get("LOG_LEVEL") or "INFO").upper()
        return cls(table_name=table_name, region=region or None, log_level=log_level)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Set the root logger level.

    The Lambda runtime installs its own handler on the root logger, so only
    the level is adjusted here. A handler is added when none exists (local
    runs and tests).
    """
    logger = logging.getLogger()
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level, logging.INFO))
    return logger


@dataclass(frozen=True)
class Services:
    settings: Settings
    store: DriverStore
    translator: AwsTranslator


@lru_cache(maxsize=1)
def get_services() -> Services:
    """Build the store and translator once per process (warm-start reuse)."""
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    return Services(
        settings=settings,
        store=DriverStore.from_settings(settings),
        translator=AwsTranslator.from_settings(settings),
    )
