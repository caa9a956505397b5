"""
KSUID - Main façade class

One object wiring a clock, an entropy source and a policy to the codec and
the translator. Most callers use the module-level functions in `ksortable`,
which delegate to a default instance; construct your own to pin time or
entropy, or to change the policy.

Example:
    >>> from datetime import datetime, timezone
    >>> from ksortable import KSUID
    >>> from ksortable.kernel.time import TestTimeProvider
    >>> ksuid = KSUID(time_provider=TestTimeProvider.at_unix(1_700_000_000))
    >>> text = ksuid.generate()
    >>> ksuid.utc_time(text)
    datetime.datetime(2023, 11, 14, 22, 13, 20, tzinfo=datetime.timezone.utc)
"""

from datetime import datetime

from ksortable.codec import identifier
from ksortable.codec.identifier import KsuidGenerator
from ksortable.codec.models import DecodedKsuid, TimeUnit
from ksortable.kernel.entropy import RandomSource
from ksortable.kernel.policy import KsuidPolicy, default_policy
from ksortable.kernel.time import TimeProvider
from ksortable.timeline import translator


class KSUID:
    """
    KSUID main façade

    Provides:
    - Generation at second or millisecond resolution
    - Minimum/maximum sentinels for range queries
    - Decoding to integer, 20-byte and field forms
    - Timestamp recovery as Unix, UTC or local time
    """

    def __init__(
        self,
        policy: KsuidPolicy | None = None,
        time_provider: TimeProvider | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        """
        Initialize the façade

        Args:
            policy: Settings (module default if None)
            time_provider: Clock (system clock if None)
            random_source: Payload entropy (`secrets` if None)
        """
        self.policy = policy or default_policy
        self.generator = KsuidGenerator(
            time_provider=time_provider,
            random_source=random_source,
            policy=self.policy,
        )

    @property
    def time_provider(self) -> TimeProvider:
        return self.generator.time_provider

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate(self, unit: TimeUnit | str | None = None) -> str:
        """Generate an identifier for now; unit defaults to the policy's"""
        return self.generator.generate(unit)

    def generate_at(self, when: datetime, unit: TimeUnit | str | None = None) -> str:
        """Generate an identifier for a given instant"""
        return self.generator.generate_at(when, unit)

    def generate_min(self) -> str:
        """Generate an epoch-stamped identifier with a random payload"""
        return self.generator.generate_min()

    @staticmethod
    def minimum_encoded() -> str:
        return identifier.minimum_encoded()

    @staticmethod
    def maximum_encoded() -> str:
        return identifier.maximum_encoded()

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def decode(self, text: str | bytes) -> int:
        """Decode to the 160-bit integer value"""
        return identifier.decode(text, strict_length=self.policy.strict_length)

    def encode(self, value: int) -> str:
        return identifier.encode(value)

    def to_bytes(self, text: str | bytes) -> bytes:
        """20-byte binary form of an encoded identifier"""
        return identifier.to_bytes(self.decode(text))

    def from_bytes(self, data: bytes) -> str:
        """Encoded form of a 20-byte binary identifier"""
        return identifier.encode(identifier.from_bytes(data))

    def parse(self, text: str | bytes, unit: TimeUnit | str = TimeUnit.SECOND) -> DecodedKsuid:
        return identifier.parse(text, unit, strict_length=self.policy.strict_length)

    # ------------------------------------------------------------------
    # Time
    # ------------------------------------------------------------------

    def system_time(self, text: str | bytes, unit: TimeUnit | str = TimeUnit.SECOND) -> int:
        return translator.system_time(text, unit, strict_length=self.policy.strict_length)

    def utc_time(self, text: str | bytes, unit: TimeUnit | str = TimeUnit.SECOND) -> datetime:
        return translator.utc_time(text, unit, strict_length=self.policy.strict_length)

    def local_time(self, text: str | bytes, unit: TimeUnit | str = TimeUnit.SECOND) -> datetime:
        """Naive local calendar time, to the second"""
        return translator.local_time(text, unit, strict_length=self.policy.strict_length)
