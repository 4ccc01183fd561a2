#!/usr/bin/env python3
"""
Configuration settings for the Dgraph connection and schema synchronization.

All values can be overridden via environment variables. Defaults target a
local Dgraph standalone container (docker run dgraph/standalone).
"""

import logging

from .env_utils import getenv_bool, getenv_clean, getenv_float

logger = logging.getLogger(__name__)

DEFAULT_DGRAPH_URL = "http://localhost:8080"


class DgraphConfig:
    """Dgraph connection configuration.

    Values are read when the config is constructed, so tests can patch the
    environment and build a fresh instance.
    """

    def __init__(self):
        # Base URL of the Dgraph alpha HTTP port; /graphql, /admin and /alter hang off it
        self.URL = getenv_clean("DGRAPH_URL", DEFAULT_DGRAPH_URL).rstrip("/")

        # Sent as X-Dgraph-AuthToken when the alpha runs with --security token=...
        self.AUTH_TOKEN = getenv_clean("DGRAPH_AUTH_TOKEN", None) or None

        # Per-request HTTP timeout in seconds
        self.TIMEOUT = getenv_float("DGRAPH_TIMEOUT", 30.0)


class SchemaSyncConfig:
    """Schema synchronization configuration.

    SYNC_TIMEOUT bounds the whole wait for a cold-starting database; the
    synchronizer itself never caps the number of readiness retries.
    """

    def __init__(self):
        # Install the schema during application startup
        self.SYNC_ON_STARTUP = getenv_bool("SCHEMA_SYNC_ON_STARTUP", True)

        # Overall deadline in seconds for one create/drop operation
        self.SYNC_TIMEOUT = getenv_float("SCHEMA_SYNC_TIMEOUT", 60.0)

        # Fixed delay between readiness retries
        self.RETRY_DELAY = getenv_float("SCHEMA_RETRY_DELAY", 2.0)

        if self.RETRY_DELAY < 0:
            logger.warning(f"SCHEMA_RETRY_DELAY must not be negative, got {self.RETRY_DELAY}. Using 2.0")
            self.RETRY_DELAY = 2.0


def get_dgraph_config() -> DgraphConfig:
    """Build Dgraph configuration from the current environment"""
    return DgraphConfig()


def get_schema_sync_config() -> SchemaSyncConfig:
    """Build schema sync configuration from the current environment"""
    return SchemaSyncConfig()
