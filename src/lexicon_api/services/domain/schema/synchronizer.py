#!/usr/bin/env python3
"""
Schema Synchronizer

Keeps the GraphQL schema installed on Dgraph in line with SCHEMA_DOCUMENT:

- create(): install the schema only when the live one differs, then read it
  back to confirm the write took effect
- drop_all(): erase all data and schema, then confirm nothing is left
- retrieve(): read the live schema, waiting out a database that is still
  starting up

A freshly started alpha rejects schema operations with "Server not ready"
for a while. Retrieval keeps polling at a fixed delay until the server
answers or the caller's Deadline expires; there is no attempt cap of its own.
"""

import logging
import time

from ....clients.dgraph_client import DgraphClient, DgraphError, is_not_ready_error, serialize_result
from ....core.deadline import Deadline
from .canonical import ValidationOutcome, validate_schema
from .document import SCHEMA_DOCUMENT
from .errors import SchemaError, SchemaErrorKind

logger = logging.getLogger(__name__)

NOT_READY_RETRY_DELAY = 2.0  # seconds between readiness retries

DROP_ALL_COMMAND = '{"drop_all": true}'

GET_SCHEMA_QUERY = "query { getGQLSchema { schema }}"

UPDATE_SCHEMA_MUTATION = """mutation updateGQLSchema($schema: String!) {
    updateGQLSchema(input: {
        set: { schema: $schema }
    }) {
        gqlSchema {
            schema
        }
    }
}"""


class SchemaSynchronizer:
    """Manages the server-side GraphQL schema against the expected document"""

    def __init__(
        self,
        client: DgraphClient,
        document: str = SCHEMA_DOCUMENT,
        retry_delay: float = NOT_READY_RETRY_DELAY,
    ):
        self.client = client
        self.document = document
        self.retry_delay = retry_delay

    def create(self, deadline: Deadline | None = None) -> None:
        """
        Install the schema document unless the live schema already matches.

        Safe to call on every startup: when the live schema matches, no
        write is issued. After a write the schema is read back and must match.

        Args:
            deadline: Bounds the wait for a database that isn't ready yet

        Raises:
            SchemaError: NOT_READY if the deadline ran out while waiting,
                TRANSPORT on client failures, INVALID_SCHEMA if the schema
                still doesn't match after the write
        """
        schema = self._retrieve_for("can't create schema, db not ready", deadline)

        if self.validate(schema) == ValidationOutcome.MATCHES:
            logger.info("Live schema matches schema document, nothing to do", extra={"operation": "create"})
            return

        logger.info("Installing schema document", extra={"operation": "create"})
        try:
            self.client.admin_query(UPDATE_SCHEMA_MUTATION, {"schema": self.document})
        except DgraphError as e:
            raise SchemaError(SchemaErrorKind.TRANSPORT, f"create schema: {e}") from e

        schema = self._retrieve_for("can't create schema, db not ready", deadline)

        outcome = self.validate(schema)
        if outcome != ValidationOutcome.MATCHES:
            raise SchemaError(
                SchemaErrorKind.INVALID_SCHEMA,
                f"invalid schema: live schema is {outcome.value} after update",
            )

        logger.info("Schema installed and verified", extra={"operation": "create"})

    def drop_all(self, deadline: Deadline | None = None) -> None:
        """
        Remove all data and schema from the database and confirm the drop.

        Raises:
            SchemaError: TRANSPORT if the drop command fails, NOT_READY or
                TRANSPORT if the schema can't be read back, INVALID_SCHEMA
                if any schema is still installed afterwards
        """
        logger.warning("Dropping all data and schema", extra={"operation": "drop_all"})
        try:
            self.client.alter(DROP_ALL_COMMAND)
        except DgraphError as e:
            raise SchemaError(SchemaErrorKind.TRANSPORT, f"dropping schema and data: {e}") from e

        schema = self._retrieve_for("can't validate schema, db not ready", deadline)

        outcome = self.validate(schema)
        if outcome != ValidationOutcome.NO_SCHEMA:
            raise SchemaError(
                SchemaErrorKind.INVALID_SCHEMA,
                f"unable to drop schema and data: live schema is {outcome.value}",
            )

        logger.info("All data and schema dropped", extra={"operation": "drop_all"})

    def status(self, deadline: Deadline | None = None) -> ValidationOutcome:
        """Retrieve the live schema and classify it without changing anything."""
        return self.validate(self._retrieve_for("can't check schema, db not ready", deadline))

    def retrieve(self, deadline: Deadline | None = None) -> str:
        """
        Query the live schema, retrying while the server reports it isn't ready.

        The deadline is checked after each not-ready failure, before sleeping.
        A request already in flight is never interrupted.

        Returns:
            The serialized getGQLSchema envelope

        Raises:
            SchemaError: NOT_READY once the deadline has expired, TRANSPORT
                for any other failure (never retried)
        """
        attempt = 0
        while True:
            attempt += 1
            try:
                return self._query()
            except DgraphError as e:
                if not is_not_ready_error(e):
                    raise SchemaError(SchemaErrorKind.TRANSPORT, f"query schema: {e}") from e

                if deadline is not None and deadline.expired():
                    raise SchemaError(SchemaErrorKind.NOT_READY, f"server not ready: {e}") from e

                logger.warning(
                    f"Database not ready for schema operations, retrying in {self.retry_delay}s",
                    extra={"operation": "retrieve", "attempt": attempt},
                )
                time.sleep(self.retry_delay)

    def validate(self, schema: str) -> ValidationOutcome:
        """Classify a serialized live schema against the schema document."""
        return validate_schema(schema, self.document)

    def _retrieve_for(self, context: str, deadline: Deadline | None) -> str:
        try:
            return self.retrieve(deadline)
        except SchemaError as e:
            raise SchemaError(e.kind, f"{context}: {e.message}") from e

    def _query(self) -> str:
        result = self.client.admin_query(GET_SCHEMA_QUERY)
        return serialize_result(result)
