"""
Identifier codec - building, encoding and decoding KSUIDs

Identifiers are handled as plain Python integers below 2**160. The text
form is the 27-character, zero-padded base62 encoding of that integer; the
binary form is its 20-byte big-endian representation.
"""

from datetime import datetime, timezone

from ksortable.codec import base62
from ksortable.codec.models import (
    BYTE_LEN,
    ENCODED_LEN,
    LAYOUTS,
    MAX_VALUE,
    UNIX_EPOCH,
    DecodedKsuid,
    Layout,
    TimeUnit,
    layout_for,
)
from ksortable.kernel.entropy import RandomSource, default_random_source
from ksortable.kernel.errors import (
    DecodeError,
    InvalidCharacter,
    InvalidLength,
    InvalidPayload,
    TimestampOutOfRange,
    ValueOutOfRange,
)
from ksortable.kernel.logging import get_logger
from ksortable.kernel.metrics import record_decode_failure, record_generated
from ksortable.kernel.policy import KsuidPolicy, default_policy
from ksortable.kernel.time import TimeProvider, default_time_provider

logger = get_logger(__name__)

MIN_ENCODED = base62.ZERO * ENCODED_LEN
MAX_ENCODED = base62.encode_int(MAX_VALUE, ENCODED_LEN)

_FAILURE_REASONS: dict[type[DecodeError], str] = {
    InvalidCharacter: "character",
    InvalidLength: "length",
    ValueOutOfRange: "range",
}


def minimum_encoded() -> str:
    """The smallest possible identifier: epoch instant, all-zero payload"""
    return MIN_ENCODED


def maximum_encoded() -> str:
    """The largest possible identifier: every bit set"""
    return MAX_ENCODED


def encode(value: int) -> str:
    """
    Encode a 160-bit value as 27 base62 characters

    Raises:
        ValueOutOfRange: If value is negative or wider than 160 bits
    """
    if not 0 <= value <= MAX_VALUE:
        raise ValueOutOfRange(value)
    return base62.encode_int(value, ENCODED_LEN)


def decode(text: str | bytes, *, strict_length: bool = True) -> int:
    """
    Decode base62 text into its 160-bit value

    Args:
        text: Encoded identifier (str, or ASCII bytes)
        strict_length: Require exactly 27 characters

    Returns:
        Integer in [0, 2**160)

    Raises:
        InvalidCharacter: Text contains a character outside the alphabet
        InvalidLength: strict_length is set and text is not 27 characters
        ValueOutOfRange: Decoded value does not fit in 160 bits
        DecodeError: Text is empty or not ASCII
    """
    try:
        if isinstance(text, bytes):
            try:
                text = text.decode("ascii")
            except UnicodeDecodeError:
                raise DecodeError(f"Identifier {text!r} is not ASCII") from None
        if strict_length and len(text) != ENCODED_LEN:
            raise InvalidLength(ENCODED_LEN, len(text))
        value = base62.decode_int(text)
        if value > MAX_VALUE:
            raise ValueOutOfRange(value)
    except DecodeError as exc:
        reason = _FAILURE_REASONS.get(type(exc), "other")
        record_decode_failure(reason)
        logger.debug("ksuid_decode_rejected", reason=reason, error=str(exc))
        raise
    return value


def to_bytes(value: int) -> bytes:
    """20-byte big-endian binary form of a 160-bit value"""
    if not 0 <= value <= MAX_VALUE:
        raise ValueOutOfRange(value)
    return value.to_bytes(BYTE_LEN, "big")


def from_bytes(data: bytes) -> int:
    """
    Read a 20-byte big-endian binary identifier

    Raises:
        InvalidLength: If data is not exactly 20 bytes
    """
    if len(data) != BYTE_LEN:
        raise InvalidLength(BYTE_LEN, len(data))
    return int.from_bytes(data, "big")


def assemble(timestamp: int, payload: bytes, unit: TimeUnit | str = TimeUnit.SECOND) -> int:
    """
    Build the 160-bit value from its fields

    Args:
        timestamp: Units elapsed since the custom epoch
        payload: Random bytes filling the remaining bits
        unit: Resolution deciding the timestamp width

    Raises:
        InvalidTimeUnit: Unit has no layout
        TimestampOutOfRange: Timestamp is negative or wider than its field
        InvalidPayload: Payload length does not match the layout
    """
    layout = layout_for(unit)
    if not 0 <= timestamp <= layout.max_timestamp:
        raise TimestampOutOfRange(
            timestamp, layout.unit.value, f"field holds {layout.timestamp_bits} bits"
        )
    if len(payload) != layout.payload_size:
        raise InvalidPayload(layout.payload_size, len(payload))
    return (timestamp << layout.payload_bits) | int.from_bytes(payload, "big")


def split(value: int, unit: TimeUnit | str = TimeUnit.SECOND) -> tuple[int, bytes]:
    """Split a 160-bit value into (timestamp, payload) for the given unit"""
    layout = layout_for(unit)
    if not 0 <= value <= MAX_VALUE:
        raise ValueOutOfRange(value)
    timestamp = value >> layout.payload_bits
    payload = value & ((1 << layout.payload_bits) - 1)
    return timestamp, payload.to_bytes(layout.payload_size, "big")


def parse(
    text: str | bytes,
    unit: TimeUnit | str = TimeUnit.SECOND,
    *,
    strict_length: bool = True,
) -> DecodedKsuid:
    """Decode text and split it into fields, read with `unit`"""
    layout = layout_for(unit)
    value = decode(text, strict_length=strict_length)
    timestamp, payload = split(value, layout.unit)
    return DecodedKsuid(value=value, unit=layout.unit, timestamp=timestamp, payload=payload)


class KsuidGenerator:
    """
    Mints encoded identifiers

    Clock and entropy are injected so that generation is reproducible under
    test; each call is independent and safe to make from several threads.
    """

    def __init__(
        self,
        time_provider: TimeProvider | None = None,
        random_source: RandomSource | None = None,
        policy: KsuidPolicy | None = None,
    ) -> None:
        self.time_provider = time_provider or default_time_provider
        self.random_source = random_source or default_random_source
        self.policy = policy or default_policy

    def generate(self, unit: TimeUnit | str | None = None) -> str:
        """
        Generate an identifier stamped with the current time

        Args:
            unit: 'second' or 'millisecond' (policy default if None)

        Raises:
            InvalidTimeUnit: Any other unit
            TimestampOutOfRange: Clock is before the epoch or past the field
        """
        return self.generate_at(self.time_provider.now(), unit)

    def generate_at(self, when: datetime, unit: TimeUnit | str | None = None) -> str:
        """Generate an identifier stamped with `when` (naive means UTC)"""
        layout = layout_for(self.policy.default_unit if unit is None else unit)
        return self._mint(layout, self._elapsed(when, layout))

    def generate_min(self) -> str:
        """
        Generate a second-resolution identifier at the epoch itself

        The payload is still random, so the result sorts after
        minimum_encoded() but before any identifier minted later.
        """
        return self._mint(LAYOUTS[TimeUnit.SECOND], 0)

    @staticmethod
    def _elapsed(when: datetime, layout: Layout) -> int:
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)
        return (when - UNIX_EPOCH) // layout.tick - layout.epoch

    def _mint(self, layout: Layout, timestamp: int) -> str:
        unit = layout.unit.value
        if timestamp < 0:
            raise TimestampOutOfRange(timestamp, unit, "clock is before the KSUID epoch")
        if timestamp > layout.max_timestamp:
            raise TimestampOutOfRange(
                timestamp, unit, f"field holds {layout.timestamp_bits} bits"
            )
        payload = self.random_source.token_bytes(layout.payload_size)
        value = assemble(timestamp, payload, layout.unit)
        record_generated(unit)
        logger.debug("ksuid_generated", unit=unit, timestamp=timestamp)
        return encode(value)
