"""Laakhay Inventory - Paged inventory API client."""

from .api import fetch_stream
from .connectors.device42 import Device42RESTConnector, fetch_raw_device_details
from .core import (
    ConfigurationError,
    FetchRequest,
    InvalidRecordError,
    InventoryError,
    MalformedResponseError,
    ResponseTooLargeError,
    TransportError,
    UnexpectedStatusError,
)
from .models import Device, to_device
from .runtime.paging import PagedSequence, PageResult, PageWindow, paginate
from .runtime.rest import decode_page

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Device",
    "Device42RESTConnector",
    "FetchRequest",
    "InvalidRecordError",
    "InventoryError",
    "MalformedResponseError",
    "PageResult",
    "PageWindow",
    "PagedSequence",
    "ResponseTooLargeError",
    "TransportError",
    "UnexpectedStatusError",
    "decode_page",
    "fetch_raw_device_details",
    "fetch_stream",
    "paginate",
    "to_device",
]
