"""Data models for inventory records.

All models are Pydantic v2, immutable (frozen=True) and strictly typed so
that wrongly-typed fields in a response are rejected instead of coerced.
"""

from .device import Device, ram_mb_to_gb, to_device

__all__ = [
    "Device",
    "ram_mb_to_gb",
    "to_device",
]
