#!/usr/bin/env python3
"""
Helpers for reading environment variables.

Values coming from .env files edited on Windows often carry CRLF line endings,
which would otherwise leak into URLs and tokens (e.g. DGRAPH_URL=http://...\r).
Every getter strips them and falls back to the default when a value can't be
parsed.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


def getenv_clean(key: str, default: str = None, strip: bool = True) -> Optional[str]:
    """Get environment variable with line endings and whitespace removed.

    Args:
        key: Environment variable name
        default: Default value if variable is not set
        strip: If True, strip whitespace and line endings (default: True)

    Returns:
        Cleaned environment variable value, or default if not set

    Example:
        >>> # .env file has: DGRAPH_URL=http://dgraph:8080\r\n
        >>> getenv_clean("DGRAPH_URL", "http://localhost:8080")
        'http://dgraph:8080'
    """
    raw_value = os.getenv(key, default)

    if raw_value is None:
        return None

    if not strip:
        return raw_value

    cleaned = raw_value.strip()

    if raw_value != cleaned:
        logger.warning(
            f"Environment variable {key} had trailing whitespace/line endings: "
            f"raw={repr(raw_value)}, cleaned={repr(cleaned)}"
        )

    return cleaned


def getenv_bool(key: str, default: bool = False) -> bool:
    """Get environment variable as boolean.

    "true", "1", "yes", "on" map to True; "false", "0", "no", "off" and the
    empty string map to False. Anything else logs a warning and returns the
    default.
    """
    raw_value = getenv_clean(key, None)

    if raw_value is None:
        return default

    cleaned_lower = raw_value.lower()
    if cleaned_lower in ("true", "1", "yes", "on"):
        return True
    elif cleaned_lower in ("false", "0", "no", "off", ""):
        return False

    logger.warning(
        f"Environment variable {key} has unexpected boolean value: {repr(raw_value)}. "
        f"Using default: {default}"
    )
    return default


def getenv_int(key: str, default: int) -> int:
    """Get environment variable as integer, falling back to default when invalid."""
    raw_value = getenv_clean(key, None)

    if raw_value is None:
        return default

    try:
        return int(raw_value)
    except ValueError:
        logger.warning(
            f"Environment variable {key} is not a valid integer: {repr(raw_value)}. "
            f"Using default: {default}"
        )
        return default


def getenv_float(key: str, default: float) -> float:
    """Get environment variable as float (timeouts, retry delays).

    Example:
        >>> # .env file has: SCHEMA_SYNC_TIMEOUT=90\r\n
        >>> getenv_float("SCHEMA_SYNC_TIMEOUT", 60.0)
        90.0
    """
    raw_value = getenv_clean(key, None)

    if raw_value is None:
        return default

    try:
        return float(raw_value)
    except ValueError:
        logger.warning(
            f"Environment variable {key} is not a valid number: {repr(raw_value)}. "
            f"Using default: {default}"
        )
        return default


def getenv_list(key: str, default: list[str] = None, separator: str = ",") -> list[str]:
    """Get environment variable as a list of cleaned, non-empty items.

    Example:
        >>> # .env file has: CORS_ORIGINS=http://localhost:3000,http://localhost:8080\r\n
        >>> getenv_list("CORS_ORIGINS", ["http://localhost:3000"])
        ['http://localhost:3000', 'http://localhost:8080']
    """
    if default is None:
        default = []

    raw_value = getenv_clean(key, None)

    if raw_value is None or raw_value == "":
        return default

    items = [item.strip() for item in raw_value.split(separator) if item.strip()]
    return items if items else default
