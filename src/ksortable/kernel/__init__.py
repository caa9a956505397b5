"""
Kernel - Infrastructure shared by the codec and the translator

Injectable clock and entropy, the error hierarchy, settings, logging and
metrics. Nothing in here knows what a KSUID looks like.
"""

from ksortable.kernel.entropy import FixedRandomSource, RandomSource, SecretsRandomSource
from ksortable.kernel.errors import (
    DecodeError,
    InvalidArgument,
    InvalidCharacter,
    InvalidLength,
    InvalidPayload,
    InvalidTimeUnit,
    KsuidError,
    TimestampOutOfRange,
    ValueOutOfRange,
)
from ksortable.kernel.policy import KsuidPolicy
from ksortable.kernel.time import RealTimeProvider, TestTimeProvider, TimeProvider

__all__ = [
    # Entropy
    "RandomSource",
    "SecretsRandomSource",
    "FixedRandomSource",
    # Time
    "TimeProvider",
    "RealTimeProvider",
    "TestTimeProvider",
    # Settings
    "KsuidPolicy",
    # Errors
    "KsuidError",
    "InvalidArgument",
    "InvalidTimeUnit",
    "InvalidPayload",
    "DecodeError",
    "InvalidCharacter",
    "InvalidLength",
    "ValueOutOfRange",
    "TimestampOutOfRange",
]
