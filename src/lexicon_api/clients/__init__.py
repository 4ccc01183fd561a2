"""
Client Layer

This package contains low-level client wrappers for external services.
Clients handle communication with external systems but contain no business logic.

Modules:
- dgraph_client: Dgraph GraphQL/admin/alter HTTP client
"""

from .dgraph_client import DgraphClient, DgraphError, DgraphQueryError, is_not_ready_error, serialize_result

__all__ = [
    'DgraphClient',
    'DgraphError',
    'DgraphQueryError',
    'is_not_ready_error',
    'serialize_result',
]
