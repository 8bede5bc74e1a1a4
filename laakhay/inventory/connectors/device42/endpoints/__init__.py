"""Device42 REST endpoint registry.

This module exports all endpoint specifications and adapters for the
Device42 connector.
"""

from __future__ import annotations

from laakhay.inventory.runtime.rest import ResponseAdapter, RestEndpointSpec

from .devices import SPEC as DevicesSpec  # noqa: N811
from .devices import Adapter as DevicesAdapter
from .devices import RawAdapter as RawDevicesAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "devices": (DevicesSpec, DevicesAdapter),
    "raw_devices": (DevicesSpec, RawDevicesAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "devices", "raw_devices")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID."""
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


__all__ = [
    "DevicesAdapter",
    "DevicesSpec",
    "RawDevicesAdapter",
    "get_endpoint_adapter",
    "get_endpoint_spec",
]
