"""
Base62 integer codec

The alphabet is listed in ASCII order (digits, then uppercase, then
lowercase), so for equal-length strings comparing the text compares the
numbers. Padding to a fixed width keeps that true for every value.
"""

from ksortable.kernel.errors import DecodeError, InvalidCharacter

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)
ZERO = ALPHABET[0]

_INDEX = {char: value for value, char in enumerate(ALPHABET)}


def encode_int(n: int, width: int = 0) -> str:
    """
    Encode a non-negative integer, left-padded with '0' to `width`

    Args:
        n: Value to encode
        width: Minimum output length

    Returns:
        Base62 text
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    chars = []
    while n:
        n, remainder = divmod(n, BASE)
        chars.append(ALPHABET[remainder])
    return "".join(reversed(chars)).rjust(max(width, 1), ZERO)


def decode_int(text: str) -> int:
    """
    Decode base62 text into an integer

    Raises:
        DecodeError: If text is empty
        InvalidCharacter: If text contains a character outside the alphabet
    """
    if not text:
        raise DecodeError("Cannot decode an empty string")
    n = 0
    for position, char in enumerate(text):
        value = _INDEX.get(char)
        if value is None:
            raise InvalidCharacter(text, char, position)
        n = n * BASE + value
    return n


def max_width(bits: int) -> int:
    """Number of base62 digits needed for any value of `bits` bits"""
    return len(encode_int((1 << bits) - 1))
