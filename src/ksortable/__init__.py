"""
ksortable - K-Sortable Unique Identifiers

160-bit identifiers made of a big-endian timestamp and a random payload,
encoded as 27 base62 characters whose string order follows creation time.

Fun fact: KSUIDs are 32 bits longer than UUIDs, and those bits are exactly
the timestamp - the random part alone is already bigger than a UUIDv4's!
"""

from datetime import datetime

from ksortable.codec.models import DecodedKsuid, TimeUnit
from ksortable.kernel.errors import (
    DecodeError,
    InvalidArgument,
    InvalidTimeUnit,
    KsuidError,
    TimestampOutOfRange,
)
from ksortable.kernel.policy import KsuidPolicy
from ksortable.ksuid import KSUID

__version__ = "0.1.0"

_default = KSUID()


def generate(unit: TimeUnit | str | None = None) -> str:
    """Generate an identifier ('second' resolution unless told otherwise)"""
    return _default.generate(unit)


def generate_min() -> str:
    return _default.generate_min()


def minimum_encoded() -> str:
    return _default.minimum_encoded()


def maximum_encoded() -> str:
    return _default.maximum_encoded()


def decode(text: str | bytes) -> int:
    return _default.decode(text)


def encode(value: int) -> str:
    return _default.encode(value)


def parse(text: str | bytes, unit: TimeUnit | str = TimeUnit.SECOND) -> DecodedKsuid:
    return _default.parse(text, unit)


def local_time(text: str | bytes, unit: TimeUnit | str = TimeUnit.SECOND) -> datetime:
    return _default.local_time(text, unit)


def utc_time(text: str | bytes, unit: TimeUnit | str = TimeUnit.SECOND) -> datetime:
    return _default.utc_time(text, unit)


__all__ = [
    "KSUID",
    "KsuidPolicy",
    "DecodedKsuid",
    "TimeUnit",
    "KsuidError",
    "InvalidArgument",
    "InvalidTimeUnit",
    "DecodeError",
    "TimestampOutOfRange",
    "generate",
    "generate_min",
    "minimum_encoded",
    "maximum_encoded",
    "decode",
    "encode",
    "parse",
    "local_time",
    "utc_time",
    "__version__",
]
