"""Core request definition and exception hierarchy."""

from .exceptions import (
    ConfigurationError,
    InvalidRecordError,
    InventoryError,
    MalformedResponseError,
    ResponseTooLargeError,
    TransportError,
    UnexpectedStatusError,
)
from .request import FetchRequest, validate_endpoint_url, validate_username

__all__ = [
    "ConfigurationError",
    "FetchRequest",
    "InvalidRecordError",
    "InventoryError",
    "MalformedResponseError",
    "ResponseTooLargeError",
    "TransportError",
    "UnexpectedStatusError",
    "validate_endpoint_url",
    "validate_username",
]
