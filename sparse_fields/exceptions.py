"""
Custom Exception Classes for Sparse Field Selection

Only wiring mistakes raise. Client-supplied selections never do; unknown
fields and groups degrade to the default field set instead.
"""

from typing import Any

from fastapi import status


class FieldSelectionError(Exception):
    """Base exception class for all field selection exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(FieldSelectionError):
    """Raised when a selector is constructed with an invalid field schema"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, details=details or {})


class InvalidGroupError(ConfigurationError):
    """Raised when a field group references fields outside the available set"""

    def __init__(self, group: str, fields: list[str]):
        super().__init__(
            message=f"Group {group} contains invalid fields: {', '.join(fields)}",
            details={"group": group, "fields": fields},
        )
