# ==============================================
# Exception Hierarchy
# ==============================================
#
# PURPOSE:
#   Specific exception types for the things that can go wrong:
#   a malformed subject record / source row, an unreadable
#   fixture directory, and a bad configuration value.
#
# CLASSES:
# --------
# - AnomalyReportError     → base, carries code + details
# - ValidationError        → missing or mistyped field (names the field)
# - FixtureError           → fixture file missing or wrong shape
# - ConfigError            → unusable configuration value
#
# ==============================================

from typing import Any, Dict, Optional


class AnomalyReportError(Exception):
    """Base exception for all anomaly report errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a plain dictionary."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class ValidationError(AnomalyReportError):
    """A required field is absent or has the wrong type."""

    def __init__(
        self,
        field_name: str,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message or f"Required field '{field_name}' is missing",
            code="VALIDATION_ERROR",
            details={"field": field_name, **(details or {})}
        )
        self.field_name = field_name


class FixtureError(AnomalyReportError):
    """A fixture source file cannot be read or has the wrong shape."""

    def __init__(
        self,
        path: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="FIXTURE_ERROR",
            details={"path": path, **(details or {})}
        )
        self.path = path


class ConfigError(AnomalyReportError):
    """A configuration value is not usable."""

    def __init__(
        self,
        setting: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="CONFIG_ERROR",
            details={"setting": setting, **(details or {})}
        )
        self.setting = setting
