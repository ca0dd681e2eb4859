"""Exceptions raised by bevmenu."""

from typing import Any, Dict


class MenuError(Exception):
    """Base class for menu errors."""

    def __init__(self, code: str, message: str, details: Dict[str, Any] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class SourceDataError(MenuError):
    """Source payload could not be parsed at all."""

    def __init__(self, message: str, details: Dict[str, Any] = None):
        super().__init__(
            code="SOURCE_DATA_ERROR",
            message=message,
            details=details or {}
        )


class ConfigurationError(MenuError):
    """Grouping configuration is invalid."""

    def __init__(self, message: str, details: Dict[str, Any] = None):
        super().__init__(
            code="CONFIGURATION_ERROR",
            message=message,
            details=details or {}
        )
