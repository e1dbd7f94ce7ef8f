# core/config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Policy defaults (slider bounds of the generator page)
MIN_LENGTH = 8
MAX_LENGTH = 128
DEFAULT_LENGTH = 16
MAX_QUANTITY = 50


@dataclass(frozen=True)
class Settings:
    min_length: int = MIN_LENGTH
    max_length: int = MAX_LENGTH
    default_length: int = DEFAULT_LENGTH
    max_quantity: int = MAX_QUANTITY
    log_level: str = "INFO"
    log_file: Optional[str] = None


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer (got {raw!r}).") from None


def load_settings(dotenv: bool = True) -> Settings:
    """
    Read SPG_* variables (optionally from a .env file) into Settings.
    Raises ValueError when the length bounds are not usable.
    """
    if dotenv:
        load_dotenv()

    min_length = _int_env("SPG_MIN_LENGTH", MIN_LENGTH)
    max_length = _int_env("SPG_MAX_LENGTH", MAX_LENGTH)
    default_length = _int_env("SPG_DEFAULT_LENGTH", DEFAULT_LENGTH)
    max_quantity = _int_env("SPG_MAX_QUANTITY", MAX_QUANTITY)

    if min_length < 1:
        raise ValueError("SPG_MIN_LENGTH must be at least 1.")
    if max_length < min_length:
        raise ValueError("SPG_MAX_LENGTH must not be smaller than SPG_MIN_LENGTH.")
    if not min_length <= default_length <= max_length:
        raise ValueError("SPG_DEFAULT_LENGTH must lie between SPG_MIN_LENGTH and SPG_MAX_LENGTH.")
    if max_quantity < 1:
        raise ValueError("SPG_MAX_QUANTITY must be at least 1.")

    return Settings(
        min_length=min_length,
        max_length=max_length,
        default_length=default_length,
        max_quantity=max_quantity,
        log_level=(os.getenv("SPG_LOG_LEVEL") or "INFO").strip().upper(),
        log_file=os.getenv("SPG_LOG_FILE") or None,
    )
