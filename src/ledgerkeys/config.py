"""
Runtime configuration.

Settings are read from the environment (after loading a ``.env`` file if one
is present):

    LEDGERKEYS_VERIFY_CACHE_SIZE   capacity of the verification cache (default 65535)
    LEDGERKEYS_LOG_LEVEL           log level of the ``ledgerkeys`` logger (default WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .errors import InvalidInputError

DEFAULT_VERIFY_CACHE_SIZE = 0xFFFF

_ENV_CACHE_SIZE = "LEDGERKEYS_VERIFY_CACHE_SIZE"
_ENV_LOG_LEVEL = "LEDGERKEYS_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    """Process-level settings."""

    verify_cache_size: int = DEFAULT_VERIFY_CACHE_SIZE
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if (
            isinstance(self.verify_cache_size, bool)
            or not isinstance(self.verify_cache_size, int)
            or self.verify_cache_size <= 0
        ):
            raise InvalidInputError(
                f"verify_cache_size must be a positive integer, got {self.verify_cache_size!r}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidInputError(f"unknown log level {self.log_level!r}")


def load_settings(dotenv: bool = True) -> Settings:
    """Build Settings from the environment."""
    if dotenv:
        load_dotenv()

    raw_size = os.getenv(_ENV_CACHE_SIZE)
    if raw_size is None or raw_size.strip() == "":
        size = DEFAULT_VERIFY_CACHE_SIZE
    else:
        try:
            size = int(raw_size.strip(), 0)
        except ValueError as e:
            raise InvalidInputError(
                f"{_ENV_CACHE_SIZE} must be an integer, got {raw_size!r}"
            ) from e

    level = os.getenv(_ENV_LOG_LEVEL) or "WARNING"
    return Settings(verify_cache_size=size, log_level=level.strip().upper())


__all__: tuple[str, ...] = (
    "DEFAULT_VERIFY_CACHE_SIZE",
    "Settings",
    "load_settings",
)
