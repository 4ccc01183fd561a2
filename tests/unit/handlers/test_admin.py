#!/usr/bin/env python3

from unittest.mock import Mock

import pytest
from fastapi import HTTPException

from lexicon_api.handlers.admin import handle_reset, handle_schema_status, handle_schema_sync
from lexicon_api.models.models import ResetRequest
from lexicon_api.services.domain.schema import SchemaError, SchemaErrorKind, SchemaSynchronizer, ValidationOutcome


@pytest.mark.unit
class TestAdminHandlers:
    """Test suite for admin handler functions"""

    @pytest.fixture
    def mock_synchronizer(self):
        """Mock schema synchronizer"""
        mock = Mock(spec=SchemaSynchronizer)
        mock.status.return_value = ValidationOutcome.MATCHES
        return mock

    def test_schema_status_matches(self, mock_synchronizer):
        """Test status reports a matching schema"""
        result = handle_schema_status(mock_synchronizer)

        assert result.status == "matches"
        assert result.matches is True
        mock_synchronizer.status.assert_called_once()

    def test_schema_status_mismatch(self, mock_synchronizer):
        """Test status reports a mismatching schema"""
        mock_synchronizer.status.return_value = ValidationOutcome.MISMATCH

        result = handle_schema_status(mock_synchronizer)

        assert result.status == "mismatch"
        assert result.matches is False

    def test_schema_sync_success(self, mock_synchronizer):
        """Test sync runs create with a deadline"""
        result = handle_schema_sync(mock_synchronizer)

        assert result.status == "matches"
        deadline = mock_synchronizer.create.call_args.args[0]
        assert not deadline.expired()

    def test_schema_sync_not_ready(self, mock_synchronizer):
        """Test a database that never became ready maps to 503"""
        mock_synchronizer.create.side_effect = SchemaError(
            SchemaErrorKind.NOT_READY, "can't create schema, db not ready: server not ready"
        )

        with pytest.raises(HTTPException) as exc_info:
            handle_schema_sync(mock_synchronizer)

        assert exc_info.value.status_code == 503
        assert exc_info.value.detail["kind"] == "not_ready"
        assert "db not ready" in exc_info.value.detail["message"]

    @pytest.mark.parametrize("kind", [SchemaErrorKind.INVALID_SCHEMA, SchemaErrorKind.TRANSPORT])
    def test_schema_sync_failure(self, mock_synchronizer, kind):
        """Test other schema errors map to 500"""
        mock_synchronizer.create.side_effect = SchemaError(kind, "invalid schema")

        with pytest.raises(HTTPException) as exc_info:
            handle_schema_sync(mock_synchronizer)

        assert exc_info.value.status_code == 500
        assert exc_info.value.detail["kind"] == kind.value

    def test_handle_reset_dry_run(self, mock_synchronizer):
        """Test reset handler dry run returns a confirm token without dropping"""
        result = handle_reset(ResetRequest(dry_run=True), mock_synchronizer)

        assert result.schema_status == "matches"
        assert result.confirm_token is not None
        assert "Dry run" in result.message
        mock_synchronizer.drop_all.assert_not_called()

    def test_handle_reset_dry_run_tokens_differ(self, mock_synchronizer):
        """Test each dry run issues a fresh token"""
        first = handle_reset(ResetRequest(dry_run=True), mock_synchronizer)
        second = handle_reset(ResetRequest(dry_run=True), mock_synchronizer)

        assert first.confirm_token != second.confirm_token

    def test_handle_reset_without_token(self, mock_synchronizer):
        """Test reset handler requires confirm token for actual reset"""
        with pytest.raises(HTTPException) as exc_info:
            handle_reset(ResetRequest(dry_run=False), mock_synchronizer)

        assert exc_info.value.status_code == 400
        assert "confirm_token required" in exc_info.value.detail
        mock_synchronizer.drop_all.assert_not_called()

    def test_handle_reset_execute(self, mock_synchronizer):
        """Test reset handler drops schema and data with confirm token"""
        result = handle_reset(ResetRequest(dry_run=False, confirm_token="token"), mock_synchronizer)

        assert result.message == "Reset completed successfully"
        assert result.schema_status == "no_schema"
        mock_synchronizer.drop_all.assert_called_once()

    def test_handle_reset_drop_failure(self, mock_synchronizer):
        """Test a schema that survives the drop maps to 500"""
        mock_synchronizer.drop_all.side_effect = SchemaError(
            SchemaErrorKind.INVALID_SCHEMA, "unable to drop schema and data: live schema is mismatch"
        )

        with pytest.raises(HTTPException) as exc_info:
            handle_reset(ResetRequest(dry_run=False, confirm_token="token"), mock_synchronizer)

        assert exc_info.value.status_code == 500
        assert exc_info.value.detail["message"].startswith("Reset failed")
