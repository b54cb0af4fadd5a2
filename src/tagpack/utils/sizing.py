"""Encoded size calculation utilities.

This module provides functions to calculate how many bytes values occupy in
an encoder's buffer without actually encoding them.
"""

from __future__ import annotations

import struct
from typing import Any, Iterable

from ..codec.tags import Tag, kind_spec
from ..codec.varint import uvarint_len
from ..exceptions import EncodeError
from ..utils.crc import crc32


def encoded_size(tag: Tag | int, value: Any) -> int:
    """Calculate the number of buffer bytes one value takes, tag included.

    Integer kinds have a fixed size regardless of value. Floats depend on the
    varint length of their bit pattern, strings and bytes on their length.

    Args:
        tag: Kind to size the value as
        value: Value to size (ignored for fixed-size kinds)

    Returns:
        Size in bytes

    Raises:
        UnsupportedTagError: If tag is reserved
        EncodeError: If a string or bytes value has the wrong type

    Example:
        >>> encoded_size(Tag.INT16, 5)
        3
        >>> encoded_size(Tag.STRING, "pi")
        11
    """
    spec = kind_spec(tag)

    if spec.tag is Tag.BOOL:
        return 2
    if spec.is_integer:
        return 1 + spec.window
    if spec.tag is Tag.FLOAT64:
        (bits,) = struct.unpack(">Q", struct.pack(">d", value))
        return 2 + uvarint_len(bits)
    if spec.tag is Tag.FLOAT32:
        (bits,) = struct.unpack(">I", struct.pack(">f", value))
        return 2 + uvarint_len(bits)

    if spec.tag is Tag.STRING:
        if not isinstance(value, str):
            raise EncodeError(f"string size requires str, got {type(value).__name__}")
        return 1 + spec.window + len(value.encode("utf-8"))
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise EncodeError(f"bytes size requires bytes, got {type(value).__name__}")
    return 1 + spec.window + memoryview(value).nbytes


def total_size(values: Iterable[tuple[Tag | int, Any]]) -> int:
    """Calculate the buffer size of a sequence of (tag, value) pairs, trailer excluded."""
    return sum(encoded_size(tag, value) for tag, value in values)


def trailer_size(payload: bytes | bytearray | memoryview) -> int:
    """Calculate the size of the checksum trailer for payload.

    Example:
        >>> trailer_size(b"")
        2
    """
    return uvarint_len(crc32(payload)) + 1
