#!/usr/bin/env python3
"""Schema canonicalization and comparison.

Dgraph can't describe its installed GraphQL schema as structured data, so the
only signal available is the schema text itself. Both sides are reduced to
their alphanumeric token stream before comparison:

- indentation, line breaks, punctuation and braces disappear
- type names, field names, directives and enum values survive in order

Renaming, adding, removing or reordering a field changes the token stream.
"""

import logging
import re
from enum import Enum

from ....clients.dgraph_client import NO_SCHEMA_ENVELOPES, SCHEMA_ENVELOPE_PREFIX_LENGTH

logger = logging.getLogger(__name__)

# JSON escape sequences that stand for whitespace in the serialized envelope.
# Stripped before the punctuation pass so their letters don't leak into the tokens.
WHITESPACE_ESCAPES = ("\\n", "\\t", "\\r")

NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]+")


class ValidationOutcome(str, Enum):
    """Result of comparing a live schema with the canon."""
    NO_SCHEMA = "no_schema"
    MATCHES = "matches"
    MISMATCH = "mismatch"


def canonicalize(text: str) -> str:
    """Reduce schema text to its case-sensitive alphanumeric token stream.

    Example:
        >>> canonicalize("type Affix {\\n  id: ID!\\n}")
        'typeAffixidID'
    """
    for escape in WHITESPACE_ESCAPES:
        text = text.replace(escape, "")
    return NON_ALPHANUMERIC.sub("", text)


def validate_schema(live: str, document: str) -> ValidationOutcome:
    """Classify a serialized live schema envelope against the expected document.

    Args:
        live: Output of serialize_result() for a getGQLSchema query
        document: Expected schema text

    Returns:
        NO_SCHEMA when nothing is installed, MATCHES when the token streams
        are identical, MISMATCH otherwise (including envelopes too short to
        hold a schema)
    """
    if live in NO_SCHEMA_ENVELOPES:
        return ValidationOutcome.NO_SCHEMA

    if len(live) < SCHEMA_ENVELOPE_PREFIX_LENGTH:
        logger.warning(f"Live schema envelope too short to hold a schema: {live!r}")
        return ValidationOutcome.MISMATCH

    expected = canonicalize(document)
    actual = canonicalize(live[SCHEMA_ENVELOPE_PREFIX_LENGTH:])

    if expected != actual:
        logger.debug(f"Schema token streams differ: expected {len(expected)} chars, got {len(actual)}")
        return ValidationOutcome.MISMATCH

    return ValidationOutcome.MATCHES
