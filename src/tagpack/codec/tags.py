"""Tag registry for the tagged value format.

Every encoded value starts with one tag byte. The byte values are part of the
wire format and never change between versions.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from ..exceptions import UnsupportedTagError


class Tag(enum.IntEnum):
    """Closed set of value kinds, one reserved byte each."""

    BOOL = 0x00

    INT = 0x01
    INT64 = 0x02
    INT32 = 0x03
    INT16 = 0x04
    INT8 = 0x05

    UINT = 0x06
    UINT64 = 0x07
    UINT32 = 0x08
    UINT16 = 0x09
    UINT8 = 0x0A

    FLOAT64 = 0x0B
    FLOAT32 = 0x0C

    STRING = 0x0D
    BYTES = 0x0E

    # Reserved for sequences; no encoder or decoder exists for it.
    SLICE = 0x0F

    @property
    def is_supported(self) -> bool:
        """True if the tag has encode/decode operations."""
        return self is not Tag.SLICE

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class KindSpec:
    """Payload layout of one supported tag.

    Attributes:
        tag: Tag byte
        window: Fixed varint window in bytes (None for floats, strings, bytes, bool)
        signed: True for zigzag-encoded integers
        bits: Declared width of the value (integers and floats)
    """

    tag: Tag
    window: Optional[int] = None
    signed: bool = False
    bits: Optional[int] = None

    @property
    def name(self) -> str:
        return str(self.tag)

    @property
    def is_integer(self) -> bool:
        return self.window is not None and self.tag not in (Tag.STRING, Tag.BYTES)

    @property
    def min_value(self) -> Optional[int]:
        """Smallest value of the declared integer width."""
        if not self.is_integer or self.bits is None:
            return None
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> Optional[int]:
        """Largest value of the declared integer width."""
        if not self.is_integer or self.bits is None:
            return None
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


# Length prefix of strings and bytes uses the same window as int64.
LENGTH_WINDOW = 8

KINDS: dict[Tag, KindSpec] = {
    Tag.BOOL: KindSpec(Tag.BOOL),
    Tag.INT: KindSpec(Tag.INT, window=8, signed=True, bits=64),
    Tag.INT64: KindSpec(Tag.INT64, window=8, signed=True, bits=64),
    Tag.INT32: KindSpec(Tag.INT32, window=4, signed=True, bits=32),
    Tag.INT16: KindSpec(Tag.INT16, window=2, signed=True, bits=16),
    Tag.INT8: KindSpec(Tag.INT8, window=1, signed=True, bits=8),
    Tag.UINT: KindSpec(Tag.UINT, window=8, bits=64),
    Tag.UINT64: KindSpec(Tag.UINT64, window=8, bits=64),
    Tag.UINT32: KindSpec(Tag.UINT32, window=4, bits=32),
    Tag.UINT16: KindSpec(Tag.UINT16, window=2, bits=16),
    Tag.UINT8: KindSpec(Tag.UINT8, window=1, bits=8),
    Tag.FLOAT64: KindSpec(Tag.FLOAT64, bits=64),
    Tag.FLOAT32: KindSpec(Tag.FLOAT32, bits=32),
    Tag.STRING: KindSpec(Tag.STRING, window=LENGTH_WINDOW, signed=True),
    Tag.BYTES: KindSpec(Tag.BYTES, window=LENGTH_WINDOW, signed=True),
}


def kind_spec(tag: Tag | int) -> KindSpec:
    """Look up the payload layout for a tag.

    Args:
        tag: Tag member or raw tag byte

    Returns:
        KindSpec for the tag

    Raises:
        UnsupportedTagError: If the tag is reserved (SLICE)
        ValueError: If the byte is not a tag at all
    """
    tag = Tag(tag)
    if not tag.is_supported:
        raise UnsupportedTagError(f"Tag {tag.name} (0x{tag.value:02X}) is reserved and unsupported")
    return KINDS[tag]
