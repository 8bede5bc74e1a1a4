"""Custom exception hierarchy."""

from __future__ import annotations


class InventoryError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(InventoryError):
    """Endpoint, credential or paging configuration is invalid.

    Raised before any network activity takes place.
    """

    pass


class TransportError(InventoryError):
    """Network-level failure while issuing or completing a request."""

    pass


class ResponseTooLargeError(TransportError):
    """Response body exceeded the configured size cap."""

    def __init__(self, message: str, max_bytes: int) -> None:
        super().__init__(message)
        self.max_bytes = max_bytes


class UnexpectedStatusError(InventoryError):
    """Remote endpoint answered with a non-success status code."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(InventoryError):
    """Response body could not be parsed or lacks a required field."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidRecordError(InventoryError):
    """A decoded record failed field validation."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
