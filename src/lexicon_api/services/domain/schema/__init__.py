"""
Schema Domain

Keeps the Dgraph GraphQL schema in sync with the application's schema document:
- Canonicalization and comparison of schema text
- Idempotent schema install with read-back verification
- Destructive reset with drop verification
"""

from .canonical import ValidationOutcome, canonicalize, validate_schema
from .document import SCHEMA_DOCUMENT
from .errors import SchemaError, SchemaErrorKind
from .synchronizer import NOT_READY_RETRY_DELAY, SchemaSynchronizer

__all__ = [
    'SCHEMA_DOCUMENT',
    'NOT_READY_RETRY_DELAY',
    'SchemaError',
    'SchemaErrorKind',
    'SchemaSynchronizer',
    'ValidationOutcome',
    'canonicalize',
    'validate_schema',
]
