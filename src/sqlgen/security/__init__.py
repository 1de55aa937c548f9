"""Security helpers for sqlgen."""

from .redaction import REDACTED_VALUE, is_sensitive_name, redact_params, redact_value

__all__ = ["REDACTED_VALUE", "is_sensitive_name", "redact_params", "redact_value"]
