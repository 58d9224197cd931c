"""Custom exceptions for vercheck.

Provides structured error handling with categorized exceptions
and a standardized error dict format.
"""

from typing import Optional, Dict, Any


class VercheckException(Exception):
    """Base exception for all vercheck errors.

    Provides structured error format with:
    - error_code: Machine-readable error identifier
    - message: Human-readable error description
    - details: Optional additional context
    """

    error_code: str = "VERCHECK_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Return structured error dict."""
        response = {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response


# ============ Version Errors ============


class ExtractionError(VercheckException):
    """A derivation method could not find its component in the version value."""

    error_code = "EXTRACTION_ERROR"

    def __init__(self, method: str, value: str):
        super().__init__(
            f"Cannot extract {method} from version {value!r}",
            details={"method": method, "value": value},
        )
        self.method = method
        self.value = value


class VersionParseError(VercheckException):
    """A version value is not a well-formed semantic version."""

    error_code = "VERSION_PARSE_ERROR"

    def __init__(self, value: str, reason: str = "Invalid version"):
        super().__init__(f"{reason}: {value!r}", details={"value": value, "reason": reason})
        self.value = value


# ============ Grouping Errors ============


class EmptyInputError(VercheckException):
    """An aggregate operation was called on an empty collection."""

    error_code = "EMPTY_INPUT"

    def __init__(self, operation: str):
        super().__init__(f"{operation} requires at least one group", details={"operation": operation})
        self.operation = operation


# ============ Configuration Errors ============


class ConfigurationError(VercheckException):
    """Configuration issue."""

    error_code = "CONFIGURATION_ERROR"

    def __init__(self, setting: str, message: str):
        super().__init__(f"Configuration error for {setting}: {message}", details={"setting": setting})
        self.setting = setting
