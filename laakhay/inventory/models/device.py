"""Inventory device data model."""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from ..core.exceptions import InvalidRecordError

# Model field -> raw response field
_RAW_FIELDS = {
    "device_id": "device_id",
    "name": "name",
    "serial_no": "serial_no",
    "hardware": "hw_model",
    "building": "building",
    "rack": "rack",
    "start_at": "start_at",
    "uuid": "uuid",
}

MB_PER_GB = 1024


def ram_mb_to_gb(ram_mb: int | float) -> int:
    """Convert a RAM size in MB to whole GB, rounding half up (1536 -> 2).

    Integral values use exact integer arithmetic so arbitrarily large sizes
    convert without loss.

    Raises:
        ValueError: If ram_mb is NaN or infinite
    """
    if isinstance(ram_mb, float):
        if not math.isfinite(ram_mb):
            raise ValueError(f"RAM size is not finite: {ram_mb!r}")
        if ram_mb.is_integer():
            ram_mb = int(ram_mb)
    if isinstance(ram_mb, int):
        whole, remainder = divmod(abs(ram_mb), MB_PER_GB)
        gb = whole + (1 if 2 * remainder >= MB_PER_GB else 0)
        return gb if ram_mb >= 0 else -gb
    gb = Decimal(str(ram_mb)) / MB_PER_GB
    return int(gb.quantize(Decimal(1), rounding=ROUND_HALF_UP))


class Device(BaseModel):
    """A device record from the inventory.

    Optional attributes are None when the inventory does not report them.
    Empty strings and zeros are kept as reported.
    """

    device_id: int
    name: str
    serial_no: str
    hardware: str | None = None
    building: str | None = None
    rack: str | None = None
    start_at: int | float | None = None
    uuid: str | None = None
    ram_gb: int | None = None

    model_config = ConfigDict(frozen=True, strict=True)

    @classmethod
    def from_raw(cls, raw: Any) -> Device:
        """Build a Device from one raw decoded record.

        Raises:
            InvalidRecordError: If a required field is missing or any field has the wrong type
        """
        if not isinstance(raw, Mapping):
            raise InvalidRecordError(f"device record is not an object: {type(raw).__name__}")

        data: dict[str, Any] = {}
        for field, raw_field in _RAW_FIELDS.items():
            # Explicit presence check; null counts as absent.
            if raw.get(raw_field) is not None:
                data[field] = raw[raw_field]

        ram = raw.get("ram")
        if ram is not None:
            if isinstance(ram, bool) or not isinstance(ram, (int, float)):
                raise InvalidRecordError(f"device field 'ram' is not a number: {ram!r}", field="ram")
            try:
                data["ram_gb"] = ram_mb_to_gb(ram)
            except (OverflowError, InvalidOperation, ValueError) as exc:
                raise InvalidRecordError(
                    f"device field 'ram' is out of range: {ram!r}", field="ram"
                ) from exc

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            error = exc.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else None
            raw_field = _RAW_FIELDS.get(field, field) if field else None
            raise InvalidRecordError(
                f"invalid device field {raw_field!r}: {error['msg']}", field=raw_field
            ) from exc


def to_device(raw: Any) -> Device:
    """Map one raw device record to a Device."""
    return Device.from_raw(raw)
