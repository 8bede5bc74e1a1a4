"""Device42 device listing endpoint definition and adapters."""

from __future__ import annotations

from typing import Any

from laakhay.inventory.connectors.device42.config import DEVICES_RESOURCE
from laakhay.inventory.models import Device
from laakhay.inventory.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    """Build the device listing path."""
    return params.get("resource") or DEVICES_RESOURCE


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Fixed query parameters; offset and limit are added per page."""
    return dict(params.get("query_params") or {})


# Endpoint specification
SPEC = RestEndpointSpec(
    id="devices",
    build_path=build_path,
    build_query=build_query,
)


class RawAdapter(ResponseAdapter):
    """Passes decoded device records through unchanged."""


class Adapter(ResponseAdapter):
    """Adapter mapping raw device records into Device models.

    Response shape::

        {
            "total_count": 250,
            "limit": 100,
            "offset": 0,
            "Devices": [
                {
                    "device_id": 17,
                    "name": "web-01",
                    "serial_no": "SN123",
                    "hw_model": "PowerEdge R640",
                    "ram": 262144,
                    ...
                }
            ]
        }
    """

    def adapt_record(self, raw: dict[str, Any], params: dict[str, Any]) -> Device:
        return Device.from_raw(raw)
