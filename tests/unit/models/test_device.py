"""Unit tests for the Device model and raw record adaptation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from laakhay.inventory.core import InvalidRecordError
from laakhay.inventory.models import Device, ram_mb_to_gb, to_device

RAW = {
    "device_id": 17,
    "name": "web-01",
    "serial_no": "SN123",
    "hw_model": "PowerEdge R640",
    "building": "DC1",
    "rack": "R12",
    "start_at": 1500000000,
    "uuid": "4c4c4544-0031",
    "ram": 262144,
    "ignored_field": {"nested": True},
}


def test_full_record():
    device = to_device(RAW)
    assert device == Device(
        device_id=17,
        name="web-01",
        serial_no="SN123",
        hardware="PowerEdge R640",
        building="DC1",
        rack="R12",
        start_at=1500000000,
        uuid="4c4c4544-0031",
        ram_gb=256,
    )


def test_minimal_record_optional_fields_are_none():
    device = to_device({"device_id": 1, "name": "n", "serial_no": "s"})
    assert device.hardware is None
    assert device.building is None
    assert device.rack is None
    assert device.start_at is None
    assert device.uuid is None
    assert device.ram_gb is None


def test_null_optional_fields_are_none():
    device = to_device({"device_id": 1, "name": "n", "serial_no": "s", "ram": None, "rack": None})
    assert device.ram_gb is None
    assert device.rack is None


def test_empty_and_zero_values_kept():
    """Present-but-falsy values are legitimate, not absent."""
    device = to_device(
        {"device_id": 0, "name": "n", "serial_no": "", "building": "", "ram": 0, "start_at": 0}
    )
    assert device.device_id == 0
    assert device.serial_no == ""
    assert device.building == ""
    assert device.ram_gb == 0
    assert device.start_at == 0


@pytest.mark.parametrize(
    ("ram", "expected"),
    [(2048, 2), (1536, 2), (1024, 1), (1500, 1), (2560, 3), (512, 1), (511, 0), (3072.0, 3)],
)
def test_ram_conversion(ram, expected):
    assert ram_mb_to_gb(ram) == expected
    assert to_device({"device_id": 1, "name": "n", "serial_no": "s", "ram": ram}).ram_gb == expected


@pytest.mark.parametrize("field", ["device_id", "name", "serial_no"])
def test_missing_required_field(field):
    raw = {"device_id": 1, "name": "n", "serial_no": "s"}
    del raw[field]
    with pytest.raises(InvalidRecordError) as exc_info:
        to_device(raw)
    assert exc_info.value.field == field


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("device_id", "17"),
        ("device_id", True),
        ("name", 5),
        ("serial_no", ["SN"]),
        ("hw_model", 640),
        ("building", 1),
        ("uuid", 42),
        ("start_at", "2017-01-01"),
        ("ram", "256GB"),
        ("ram", True),
    ],
)
def test_wrongly_typed_field(field, value):
    raw = {"device_id": 1, "name": "n", "serial_no": "s", field: value}
    with pytest.raises(InvalidRecordError) as exc_info:
        to_device(raw)
    assert exc_info.value.field == field


@pytest.mark.parametrize("ram", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_ram_rejected(ram):
    with pytest.raises(InvalidRecordError) as exc_info:
        to_device({"device_id": 1, "name": "n", "serial_no": "s", "ram": ram})
    assert exc_info.value.field == "ram"


@pytest.mark.parametrize("ram", [10**32, 10**400, 1e300, 2**53 + 512.0])
def test_very_large_ram_converts_exactly(ram):
    """Huge but finite sizes convert with integer arithmetic, no precision errors."""
    device = to_device({"device_id": 1, "name": "n", "serial_no": "s", "ram": ram})
    assert device.ram_gb == (int(ram) + 512) // 1024


def test_negative_ram_rounds_half_away_from_zero():
    assert ram_mb_to_gb(-1536) == -2
    assert ram_mb_to_gb(-1500.5) == -1


def test_non_mapping_rejected():
    with pytest.raises(InvalidRecordError):
        to_device(["device_id", 1])


def test_device_is_frozen():
    device = to_device(RAW)
    with pytest.raises(ValidationError):
        device.name = "other"
