#!/usr/bin/env python3

from .config import get_dgraph_config, get_schema_sync_config

# Global Dgraph client instance
_dgraph_client = None


def get_dgraph_client():
    """Get or create global Dgraph client instance"""
    global _dgraph_client
    if _dgraph_client is None:
        from ..clients.dgraph_client import DgraphClient

        config = get_dgraph_config()
        _dgraph_client = DgraphClient(config.URL, auth_token=config.AUTH_TOKEN, timeout=config.TIMEOUT)

    return _dgraph_client


def get_schema_synchronizer():
    """Build a SchemaSynchronizer on the shared Dgraph client"""
    from ..services.domain.schema import SchemaSynchronizer

    sync_config = get_schema_sync_config()
    return SchemaSynchronizer(get_dgraph_client(), retry_delay=sync_config.RETRY_DELAY)


def get_affix_service():
    """Build an AffixService on the shared Dgraph client"""
    from ..services.affix_service import AffixService

    return AffixService(get_dgraph_client())


def cleanup_connections():
    """Clean up global connections on application shutdown"""
    global _dgraph_client
    if _dgraph_client is not None:
        _dgraph_client.close()
        _dgraph_client = None
