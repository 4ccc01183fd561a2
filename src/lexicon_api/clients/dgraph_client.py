#!/usr/bin/env python3
"""
Dgraph Database Client

A low-level client wrapper for Dgraph's HTTP endpoints:
- /graphql: queries and mutations against the generated GraphQL API
- /admin: the admin GraphQL namespace (schema read/update)
- /alter: raw administrative commands such as drop_all

This client is pure infrastructure - it contains no business logic.
It also owns the wire-format details the schema synchronizer depends on
(the not-ready error phrasing and the serialized schema envelope), so they
can be adjusted here without touching the synchronizer.
"""

import json
import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

# Endpoint paths, relative to the alpha's HTTP base URL
CMD_QUERY = "/graphql"
CMD_ADMIN = "/admin"
CMD_ALTER = "/alter"
CMD_HEALTH = "/health"

# Dgraph reports a cold or restarting alpha with messages such as
# "Server not ready. Please try after sometime." on schema operations
SERVER_NOT_READY_MARKER = "Server not ready"

# serialize_result() of a present schema always starts with this prefix,
# because keys are sorted and separators are compact. 27 characters.
SCHEMA_ENVELOPE_PREFIX = '{"getGQLSchema":{"schema":"'
SCHEMA_ENVELOPE_PREFIX_LENGTH = len(SCHEMA_ENVELOPE_PREFIX)

# Serialized results that mean no schema is installed
NO_SCHEMA_ENVELOPES = frozenset({
    '{"getGQLSchema":null}',
    '{"getGQLSchema":{"schema":""}}',
})


class DgraphError(Exception):
    """
    Exception raised when a request to Dgraph fails.

    Used for:
    - Connection failures and timeouts
    - Non-2xx HTTP responses
    - Responses that are not valid JSON
    """
    pass


class DgraphQueryError(DgraphError):
    """GraphQL-level failure: the response carried an "errors" array."""

    def __init__(self, errors: list[dict[str, Any]]):
        self.errors = errors
        messages = [str(error.get("message", error)) if isinstance(error, dict) else str(error) for error in errors]
        super().__init__("; ".join(messages) or "unknown GraphQL error")


def is_not_ready_error(error: BaseException) -> bool:
    """Return True if the error says the server can't serve schema operations yet."""
    return SERVER_NOT_READY_MARKER in str(error)


def serialize_result(result: Any) -> str:
    """Serialize a decoded result as compact JSON with sorted keys.

    Key order and separators are fixed so that SCHEMA_ENVELOPE_PREFIX and
    NO_SCHEMA_ENVELOPES match byte for byte.
    """
    return json.dumps(result, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


class DgraphClient:
    """
    Dgraph HTTP client with connection pooling and GraphQL error extraction.

    Example:
        ```python
        client = DgraphClient("http://localhost:8080")
        data = client.admin_query("query { getGQLSchema { schema }}")
        client.alter('{"drop_all": true}')
        client.close()
        ```

    The underlying httpx.Client is thread-safe, so one instance can be shared
    across request handlers.
    """

    def __init__(
        self,
        url: str = "http://localhost:8080",
        auth_token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize Dgraph client.

        Args:
            url: Base URL of the Dgraph alpha HTTP port
            auth_token: Optional value for the X-Dgraph-AuthToken header
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.url = url.rstrip("/")
        headers = {}
        if auth_token:
            headers["X-Dgraph-AuthToken"] = auth_token

        self.http = httpx.Client(base_url=self.url, headers=headers, timeout=timeout, transport=transport)

    def query(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Execute a query or mutation against the GraphQL API.

        Args:
            query: GraphQL document
            variables: Optional variables referenced by the document

        Returns:
            The "data" member of the response

        Raises:
            DgraphQueryError: If the response contains GraphQL errors
            DgraphError: If the request fails
        """
        return self._graphql(CMD_QUERY, query, variables)

    def admin_query(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Execute a query or mutation against the admin namespace.

        Raises:
            DgraphQueryError: If the response contains GraphQL errors
            DgraphError: If the request fails
        """
        return self._graphql(CMD_ADMIN, query, variables)

    def alter(self, body: str) -> None:
        """
        Send a raw administrative command to /alter.

        Example:
            ```python
            client.alter('{"drop_all": true}')
            ```

        Raises:
            DgraphQueryError: If Dgraph rejects the operation
            DgraphError: If the request fails
        """
        logger.info(f"Executing alter command: {body}")
        response = self._post(CMD_ALTER, content=body.encode("utf-8"))
        self._decode(CMD_ALTER, response)

    def health(self) -> list[dict[str, Any]]:
        """
        Get alpha health information.

        Returns:
            List of instance health records as reported by /health

        Raises:
            DgraphError: If the alpha is unreachable or unhealthy
        """
        try:
            response = self.http.get(CMD_HEALTH)
        except httpx.HTTPError as e:
            raise DgraphError(f"request to {CMD_HEALTH} failed: {e}") from e

        if response.is_error:
            raise DgraphError(f"{CMD_HEALTH} returned HTTP {response.status_code}: {response.text}")

        try:
            payload = response.json()
        except ValueError as e:
            raise DgraphError(f"{CMD_HEALTH} returned invalid JSON") from e

        return payload if isinstance(payload, list) else [payload]

    def _graphql(self, path: str, query: str, variables: dict[str, Any] | None) -> dict[str, Any]:
        body: dict[str, Any] = {"query": query}
        if variables:
            body["variables"] = variables

        logger.debug(f"Executing GraphQL request on {path}")
        response = self._post(path, json=body)
        return self._decode(path, response)

    def _post(self, path: str, **kwargs) -> httpx.Response:
        try:
            return self.http.post(path, **kwargs)
        except httpx.HTTPError as e:
            raise DgraphError(f"request to {path} failed: {e}") from e

    def _decode(self, path: str, response: httpx.Response) -> dict[str, Any]:
        """Extract "data", raising on GraphQL errors before HTTP status errors."""
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict) and payload.get("errors"):
            raise DgraphQueryError(payload["errors"])

        if response.is_error:
            raise DgraphError(f"{path} returned HTTP {response.status_code}: {response.text}")

        if not isinstance(payload, dict):
            raise DgraphError(f"{path} returned invalid JSON")

        return payload.get("data") or {}

    def close(self):
        """
        Close the underlying HTTP connection pool.

        The client is unusable after calling this method.
        """
        self.http.close()
