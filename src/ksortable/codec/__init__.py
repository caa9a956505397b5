"""
Codec - KSUID binary layout and base62 text encoding

Everything needed to mint an identifier and to move it between its integer,
20-byte and 27-character forms.
"""

from ksortable.codec.identifier import (
    KsuidGenerator,
    assemble,
    decode,
    encode,
    from_bytes,
    maximum_encoded,
    minimum_encoded,
    parse,
    split,
    to_bytes,
)
from ksortable.codec.models import (
    BIT_LEN,
    BYTE_LEN,
    ENCODED_LEN,
    DecodedKsuid,
    Layout,
    TimeUnit,
    layout_for,
)

__all__ = [
    # Constants
    "BIT_LEN",
    "BYTE_LEN",
    "ENCODED_LEN",
    # Models
    "DecodedKsuid",
    "Layout",
    "TimeUnit",
    "layout_for",
    # Operations
    "KsuidGenerator",
    "assemble",
    "decode",
    "encode",
    "from_bytes",
    "maximum_encoded",
    "minimum_encoded",
    "parse",
    "split",
    "to_bytes",
]
