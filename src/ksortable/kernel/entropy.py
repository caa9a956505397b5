"""
Random payload sources

The payload is what makes two identifiers minted in the same second
different. Production code draws it from the `secrets` module; tests inject
a deterministic source so generated identifiers can be asserted exactly.

Fun fact: with 128 random bits per second, you would need to mint roughly
2^64 KSUIDs within the same second to reach a 50% chance of a collision!
"""

import secrets
from typing import Protocol


class RandomSource(Protocol):
    """Protocol for random byte sources"""

    def token_bytes(self, size: int) -> bytes:
        """Return `size` uniformly distributed bytes"""
        ...


class SecretsRandomSource:
    """Cryptographically secure random source backed by `secrets`"""

    def token_bytes(self, size: int) -> bytes:
        return secrets.token_bytes(size)


class FixedRandomSource:
    """
    Deterministic random source for tests

    Repeats `pattern` to fill every request, so the payload of a generated
    identifier is known in advance.
    """

    def __init__(self, pattern: bytes = b"\xff") -> None:
        if not pattern:
            raise ValueError("pattern must not be empty")
        self.pattern = pattern
        self.calls: list[int] = []

    def token_bytes(self, size: int) -> bytes:
        self.calls.append(size)
        repeats = -(-size // len(self.pattern))
        return (self.pattern * repeats)[:size]


# Global default random source
default_random_source: RandomSource = SecretsRandomSource()
