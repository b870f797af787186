"""Tests for operation context binding."""

import pytest
import structlog

from infrastructure.logging import (
    bind_operation_context,
    clear_operation_context,
    get_correlation_id,
    set_correlation_id,
)


@pytest.fixture(autouse=True)
def clean_context():
    clear_operation_context()
    yield
    clear_operation_context()


@pytest.mark.unit
class TestBindOperationContext:
    """Tests for bind_operation_context()."""

    def test_generates_correlation_id(self):
        with bind_operation_context(operation="toggle_status") as correlation_id:
            assert correlation_id
            assert get_correlation_id() == correlation_id

    def test_uses_given_correlation_id(self):
        with bind_operation_context(correlation_id="corr-1") as correlation_id:
            assert correlation_id == "corr-1"

    def test_binds_actor_operation_and_target(self):
        with bind_operation_context(
            actor_id="admin-1",
            operation="delete_user",
            target_id="uid-1",
            source="admin_view",
        ):
            context = structlog.contextvars.get_contextvars()

        assert context["actor_id"] == "admin-1"
        assert context["operation"] == "delete_user"
        assert context["target_id"] == "uid-1"
        assert context["source"] == "admin_view"

    def test_omits_unset_fields(self):
        with bind_operation_context(operation="export_data"):
            context = structlog.contextvars.get_contextvars()

        assert "actor_id" not in context
        assert "target_id" not in context

    def test_unbinds_on_exit(self):
        with bind_operation_context(actor_id="admin-1"):
            pass

        assert structlog.contextvars.get_contextvars() == {}

    def test_unbinds_when_block_raises(self):
        with pytest.raises(RuntimeError):
            with bind_operation_context(actor_id="admin-1"):
                raise RuntimeError("boom")

        assert get_correlation_id() is None


@pytest.mark.unit
def test_set_correlation_id():
    set_correlation_id("corr-42")
    assert get_correlation_id() == "corr-42"
