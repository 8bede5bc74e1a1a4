"""Device42 connector package."""

from .provider import Device42RESTConnector, fetch_raw_device_details

__all__ = [
    "Device42RESTConnector",
    "fetch_raw_device_details",
]
