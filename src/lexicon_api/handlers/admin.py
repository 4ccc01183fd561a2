#!/usr/bin/env python3

import logging
import secrets

from fastapi import HTTPException

from ..core.config import get_schema_sync_config
from ..core.deadline import Deadline
from ..models.models import ResetRequest, ResetResponse, SchemaStatusResponse, SchemaSyncResponse
from ..services.domain.schema import SchemaError, SchemaErrorKind, SchemaSynchronizer, ValidationOutcome

logger = logging.getLogger(__name__)


def handle_schema_status(synchronizer: SchemaSynchronizer) -> SchemaStatusResponse:
    """Report how the live schema compares with the schema document"""
    try:
        outcome = synchronizer.status(_request_deadline())
    except SchemaError as e:
        logger.error(f"Schema status check failed: {e}")
        raise _to_http_exception(e, "Schema status check failed") from e

    return SchemaStatusResponse(status=outcome.value, matches=outcome == ValidationOutcome.MATCHES)


def handle_schema_sync(synchronizer: SchemaSynchronizer) -> SchemaSyncResponse:
    """Install the schema document if the live schema differs"""
    try:
        synchronizer.create(_request_deadline())
    except SchemaError as e:
        logger.error(f"Schema sync failed: {e}")
        raise _to_http_exception(e, "Schema sync failed") from e

    return SchemaSyncResponse(status=ValidationOutcome.MATCHES.value, message="Schema is up to date")


def handle_reset(request: ResetRequest, synchronizer: SchemaSynchronizer) -> ResetResponse:
    """Handle database reset (drop all data and schema)"""
    try:
        if request.dry_run:
            outcome = synchronizer.status(_request_deadline())
            confirm_token = secrets.token_urlsafe(32)
            return ResetResponse(
                schema_status=outcome.value,
                confirm_token=confirm_token,
                message="Dry run completed. Use confirm_token to execute reset."
            )

        if not request.confirm_token:
            raise HTTPException(status_code=400, detail="confirm_token required for actual reset")

        synchronizer.drop_all(_request_deadline())

        return ResetResponse(
            schema_status=ValidationOutcome.NO_SCHEMA.value,
            message="Reset completed successfully"
        )

    except HTTPException:
        raise
    except SchemaError as e:
        logger.error(f"Reset failed: {e}")
        raise _to_http_exception(e, "Reset failed") from e


def _request_deadline() -> Deadline:
    return Deadline(timeout=get_schema_sync_config().SYNC_TIMEOUT)


def _to_http_exception(error: SchemaError, context: str) -> HTTPException:
    """Map a schema error to 503 while the database is starting, 500 otherwise"""
    status_code = 503 if error.kind == SchemaErrorKind.NOT_READY else 500
    return HTTPException(
        status_code=status_code,
        detail={"message": f"{context}: {error.message}", "kind": error.kind.value},
    )
