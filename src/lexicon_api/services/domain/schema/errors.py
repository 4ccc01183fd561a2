#!/usr/bin/env python3
"""Error kinds raised by schema synchronization."""

from enum import Enum


class SchemaErrorKind(str, Enum):
    """Closed set of schema synchronization failures."""
    NOT_READY = "not_ready"            # Database still initializing, deadline ran out
    NO_SCHEMA = "no_schema"            # No schema installed where one was required
    INVALID_SCHEMA = "invalid_schema"  # Live schema doesn't match the canon
    TRANSPORT = "transport"            # Any other client/query failure


class SchemaError(Exception):
    """
    Exception raised when a schema operation fails.

    Callers branch on `kind`; the message carries the operation context, and
    the originating client error (if any) is chained as __cause__.
    """

    def __init__(self, kind: SchemaErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self):
        return f"{self.message} [{self.kind.value}]"
