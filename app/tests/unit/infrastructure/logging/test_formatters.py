"""Tests for log processors."""

import pytest

from infrastructure.logging import (
    add_deployment_info,
    mask_sensitive_data,
    truncate_large_values,
)


@pytest.mark.unit
class TestMaskSensitiveData:
    """Tests for mask_sensitive_data()."""

    def test_masks_sensitive_keys(self):
        processor = mask_sensitive_data()

        result = processor(None, "info", {"password": "hunter2", "user": "alice"})

        assert result["password"] == "***REDACTED***"
        assert result["user"] == "alice"

    def test_masks_keys_containing_pattern(self):
        processor = mask_sensitive_data()

        result = processor(None, "info", {"password_reset_link": "https://x"})

        assert result["password_reset_link"] == "***REDACTED***"

    def test_keeps_none_values(self):
        processor = mask_sensitive_data()

        result = processor(None, "info", {"token": None})

        assert result["token"] is None

    def test_keeps_authentication_flags(self):
        processor = mask_sensitive_data()

        result = processor(None, "info", {"authenticated": True})

        assert result["authenticated"] is True

    def test_additional_patterns(self):
        processor = mask_sensitive_data(additional_patterns=frozenset({"email"}))

        result = processor(None, "info", {"email": "alice@example.com"})

        assert result["email"] == "***REDACTED***"

    def test_masks_nested_operation_metadata(self):
        processor = mask_sensitive_data()

        result = processor(
            None,
            "info",
            {"metadata": {"email": "bob@example.com", "reset_token": "abc"}},
        )

        assert result["metadata"] == {
            "email": "bob@example.com",
            "reset_token": "***REDACTED***",
        }


@pytest.mark.unit
class TestTruncateLargeValues:
    """Tests for truncate_large_values()."""

    def test_truncates_long_strings(self):
        processor = truncate_large_values(max_length=10)

        result = processor(None, "info", {"document": "x" * 50})

        assert result["document"] == "x" * 10 + "...[truncated, 50 chars total]"

    def test_keeps_short_strings(self):
        processor = truncate_large_values(max_length=10)

        result = processor(None, "info", {"event": "short"})

        assert result["event"] == "short"


@pytest.mark.unit
class TestAddDeploymentInfo:
    """Tests for add_deployment_info()."""

    def test_stamps_sha_and_environment(self):
        processor = add_deployment_info("abc123", "production")

        result = processor(None, "info", {"event": "users_loaded"})

        assert result["git_sha"] == "abc123"
        assert result["environment"] == "production"

    def test_keeps_existing_fields(self):
        processor = add_deployment_info("abc123", "dev")

        result = processor(None, "info", {"environment": "staging"})

        assert result["environment"] == "staging"
        assert result["git_sha"] == "abc123"
