"""Tests for time units, epochs and bit layouts"""

import pytest
from pydantic import ValidationError

from ksortable.codec.models import (
    EPOCHS,
    LAYOUTS,
    DecodedKsuid,
    TimeUnit,
    layout_for,
)
from ksortable.kernel.errors import InvalidTimeUnit


def test_epoch_constants() -> None:
    assert EPOCHS[TimeUnit.SECOND] == 1_400_000_000
    assert EPOCHS[TimeUnit.MILLISECOND] == 1_400_000_000_000
    assert EPOCHS[TimeUnit.MICROSECOND] == 1_400_000_000_000_000
    assert EPOCHS[TimeUnit.NANOSECOND] == 1_400_000_000_000_000_000


@pytest.mark.parametrize(
    "unit,timestamp_bits,payload_size",
    [(TimeUnit.SECOND, 32, 16), (TimeUnit.MILLISECOND, 64, 12)],
)
def test_layout_widths(unit: TimeUnit, timestamp_bits: int, payload_size: int) -> None:
    layout = layout_for(unit)
    assert layout.timestamp_bits == timestamp_bits
    assert layout.payload_size == payload_size
    assert layout.timestamp_bits + layout.payload_bits == 160


def test_layout_for_accepts_string_values() -> None:
    assert layout_for("second") is LAYOUTS[TimeUnit.SECOND]
    assert layout_for("millisecond") is LAYOUTS[TimeUnit.MILLISECOND]


@pytest.mark.parametrize(
    "unit", [TimeUnit.MICROSECOND, TimeUnit.NANOSECOND, "minute", "SECOND", None, 1]
)
def test_layout_for_rejects_other_units(unit: object) -> None:
    with pytest.raises(InvalidTimeUnit) as exc_info:
        layout_for(unit)  # type: ignore[arg-type]
    assert exc_info.value.unit == unit


def test_decoded_ksuid_is_frozen() -> None:
    decoded = DecodedKsuid(value=0, unit=TimeUnit.SECOND, timestamp=0, payload=b"\x00" * 16)
    with pytest.raises(ValidationError):
        decoded.timestamp = 1  # type: ignore[misc]


def test_decoded_ksuid_rejects_values_over_160_bits() -> None:
    with pytest.raises(ValidationError):
        DecodedKsuid(value=2**160, unit=TimeUnit.SECOND, timestamp=0, payload=b"")


def test_system_time_adds_epoch() -> None:
    decoded = DecodedKsuid(
        value=0, unit=TimeUnit.MILLISECOND, timestamp=5, payload=b"\x00" * 12
    )
    assert decoded.system_time == 1_400_000_000_005
