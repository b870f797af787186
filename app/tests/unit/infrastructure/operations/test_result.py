"""Tests for OperationResult."""

import pytest

from infrastructure.operations import OperationResult, OperationStatus


@pytest.mark.unit
class TestOperationResult:
    """Tests for OperationResult factories."""

    def test_success(self):
        result = OperationResult.success(data={"id": "uid-1"}, message="done")

        assert result.is_success
        assert result.status == OperationStatus.SUCCESS
        assert result.data == {"id": "uid-1"}
        assert result.error_code is None

    def test_success_defaults(self):
        result = OperationResult.success()

        assert result.message == "ok"
        assert result.data is None

    def test_error(self):
        result = OperationResult.error(
            OperationStatus.CANCELLED, "cancelled", error_code="CONFIRMATION_DECLINED"
        )

        assert not result.is_success
        assert result.status == OperationStatus.CANCELLED
        assert result.error_code == "CONFIRMATION_DECLINED"

    def test_transient_error(self):
        result = OperationResult.transient_error("store down", error_code="X")

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "X"

    def test_permanent_error(self):
        result = OperationResult.permanent_error("bad payload")

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.message == "bad payload"

    def test_named_failures(self):
        assert OperationResult.unauthorized().error_code == "FORBIDDEN"
        assert OperationResult.conflict("busy").status == OperationStatus.CONFLICT
        assert OperationResult.not_found("gone").error_code == "NOT_FOUND"
        cancelled = OperationResult.cancelled("no", error_code="CONFIRMATION_DECLINED")
        assert cancelled.status == OperationStatus.CANCELLED

    def test_retryable_statuses(self):
        assert OperationResult.transient_error("store down").is_retryable
        assert OperationResult.conflict("busy").is_retryable
        assert not OperationResult.permanent_error("bad payload").is_retryable
        assert not OperationResult.success().is_retryable
