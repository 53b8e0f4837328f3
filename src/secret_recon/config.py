"""Runtime settings for the reconstruction tooling.

Defaults live in :class:`Settings`; each value can be overridden through an
environment variable so batch jobs can be tuned without touching code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    return default


def _load_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    candidate = value.strip().upper()
    if candidate in LOG_LEVELS:
        return candidate
    return default


@dataclass(frozen=True)
class Settings:
    """Holds tunables shared by the CLI and the batch driver."""

    log_level: str = "WARNING"
    fail_fast: bool = False
    verify_limit: int = 64


def load_settings() -> Settings:
    """Load settings considering environment overrides."""

    return Settings(
        log_level=_load_level("SECRET_RECON_LOG_LEVEL", "WARNING"),
        fail_fast=_load_bool("SECRET_RECON_FAIL_FAST", False),
        verify_limit=max(1, _load_int("SECRET_RECON_VERIFY_LIMIT", 64)),
    )


settings = load_settings()


__all__ = ["LOG_LEVELS", "Settings", "settings", "load_settings"]
