"""Custom log processors for structured logging.

Processors plugged into the structlog pipeline: deployment context on every
entry, credentials kept out of the logs, and bounded value sizes.

Usage:
    from infrastructure.logging.formatters import mask_sensitive_data
"""

from typing import Any, Optional


SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "api_key",
        "apikey",
        "authorization",
        "credential",
        "private_key",
        "session_id",
        "cookie",
        "jwt",
        "bearer",
        "reset_link",
    }
)


def add_deployment_info(git_sha: str, environment: str):
    """Create a processor stamping the deployment on every log entry.

    Fields already present on the entry are left alone.

    Args:
        git_sha: Commit SHA of the running build.
        environment: Environment name ("production" or the PREFIX in use).

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("git_sha", git_sha)
        event_dict.setdefault("environment", environment)
        return event_dict

    return processor


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: Optional[frozenset[str]] = None,
):
    """Create a processor that masks sensitive data in log entries.

    Values are masked when their key contains one of the sensitive
    patterns (case-insensitive). Nested mappings, such as operation
    metadata, are masked the same way.

    Args:
        mask_value: The string to replace sensitive values with.
        additional_patterns: Extra patterns to consider sensitive.

    Returns:
        A structlog processor function.

    Example:
        processor = mask_sensitive_data(additional_patterns=frozenset({"otp"}))
    """
    patterns = SENSITIVE_PATTERNS
    if additional_patterns:
        patterns = patterns | additional_patterns

    def is_sensitive(key: Any) -> bool:
        key_lower = str(key).lower()
        return any(pattern in key_lower for pattern in patterns)

    def mask(values: dict[Any, Any]) -> dict[Any, Any]:
        masked = {}
        for key, value in values.items():
            if value is None:
                masked[key] = value
            elif is_sensitive(key):
                masked[key] = mask_value
            elif isinstance(value, dict):
                masked[key] = mask(value)
            else:
                masked[key] = value
        return masked

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        return mask(event_dict)

    return processor


def truncate_large_values(max_length: int = 500):
    """Create a processor that truncates overly large string values.

    Export documents can be large; this keeps an accidental dump from
    flooding the log stream.

    Args:
        max_length: Maximum string length before truncation.

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
