"""
Identifier layout models

A KSUID is 160 bits: a big-endian timestamp in the most significant bits,
followed by random payload filling the rest. The timestamp width depends on
the resolution, so every operation that touches the bits goes through a
Layout looked up from a TimeUnit.

Fun fact: 32 bits of seconds from a 2014 epoch run out in 2150, while
64 bits of milliseconds last for about 584 million years!
"""

from datetime import datetime, timedelta, timezone
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from ksortable.codec import base62
from ksortable.kernel.errors import InvalidTimeUnit

BIT_LEN = 160
BYTE_LEN = BIT_LEN // 8
ENCODED_LEN = 27
MAX_VALUE = (1 << BIT_LEN) - 1

# Tuesday, 13 May 2014 16:53:20 UTC
SECS_EPOCH = 1_400_000_000
MILLIS_EPOCH = SECS_EPOCH * 1000
MICROS_EPOCH = MILLIS_EPOCH * 1000
NANOS_EPOCH = MICROS_EPOCH * 1000

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class TimeUnit(str, Enum):
    """
    Timestamp resolution

    Only SECOND and MILLISECOND have a layout; the finer units are named so
    callers get a precise InvalidTimeUnit instead of a generic failure.
    """

    SECOND = "second"
    MILLISECOND = "millisecond"
    MICROSECOND = "microsecond"
    NANOSECOND = "nanosecond"


EPOCHS: dict[TimeUnit, int] = {
    TimeUnit.SECOND: SECS_EPOCH,
    TimeUnit.MILLISECOND: MILLIS_EPOCH,
    TimeUnit.MICROSECOND: MICROS_EPOCH,
    TimeUnit.NANOSECOND: NANOS_EPOCH,
}


class Layout(BaseModel):
    """Bit layout of an identifier for one resolution"""

    unit: TimeUnit
    timestamp_bits: int = Field(..., gt=0, lt=BIT_LEN, multiple_of=8)
    tick: timedelta = Field(..., description="Duration of one timestamp unit")

    model_config = {"frozen": True}

    @property
    def payload_bits(self) -> int:
        return BIT_LEN - self.timestamp_bits

    @property
    def payload_size(self) -> int:
        """Payload length in bytes"""
        return self.payload_bits // 8

    @property
    def max_timestamp(self) -> int:
        return (1 << self.timestamp_bits) - 1

    @property
    def epoch(self) -> int:
        """Custom epoch expressed in this layout's unit"""
        return EPOCHS[self.unit]


LAYOUTS: dict[TimeUnit, Layout] = {
    TimeUnit.SECOND: Layout(
        unit=TimeUnit.SECOND, timestamp_bits=32, tick=timedelta(seconds=1)
    ),
    TimeUnit.MILLISECOND: Layout(
        unit=TimeUnit.MILLISECOND, timestamp_bits=64, tick=timedelta(milliseconds=1)
    ),
}


def layout_for(unit: TimeUnit | str) -> Layout:
    """
    Look up the layout for a unit

    Args:
        unit: TimeUnit member or its string value

    Raises:
        InvalidTimeUnit: If the unit is unknown or has no layout
    """
    try:
        return LAYOUTS[TimeUnit(unit)]
    except (ValueError, KeyError):
        raise InvalidTimeUnit(unit) from None


class DecodedKsuid(BaseModel):
    """
    An identifier split into its fields

    The unit is the one the caller asked to read the identifier with; it is
    not stored in the identifier itself.
    """

    value: int
    unit: TimeUnit
    timestamp: int = Field(..., description="Raw timestamp field (custom epoch)")
    payload: bytes

    model_config = {"frozen": True}

    @field_validator("value", "timestamp")
    @classmethod
    def _fits_160_bits(cls, value: int) -> int:
        if not 0 <= value <= MAX_VALUE:
            raise ValueError("must fit in 160 unsigned bits")
        return value

    @property
    def encoded(self) -> str:
        return base62.encode_int(self.value, ENCODED_LEN)

    @property
    def binary(self) -> bytes:
        return self.value.to_bytes(BYTE_LEN, "big")

    @property
    def system_time(self) -> int:
        """Timestamp relative to the Unix epoch, in `unit`"""
        return self.timestamp + EPOCHS[self.unit]

    def __str__(self) -> str:
        return self.encoded
