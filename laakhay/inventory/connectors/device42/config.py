"""Shared Device42 connector constants."""

from __future__ import annotations

# Detailed device listing; trailing slash avoids a redirect.
DEVICES_RESOURCE = "/api/1.0/devices/all/"

# Field of the listing response holding the page's devices
DEVICES_COLLECTION_FIELD = "Devices"

DEFAULT_PAGE_SIZE = 100
DEFAULT_TIMEOUT = 30.0
