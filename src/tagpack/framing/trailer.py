"""Checksum trailer framing.

The trailer closes every exported buffer:

    [Payload] [CRC-32 as unsigned varint (1-5 bytes)] [Varint length (1 byte)]

The CRC covers every payload byte. The trailer is never stored inside an
encoder's buffer; it is rebuilt each time a snapshot is taken.
"""

from __future__ import annotations

import logging

from ..codec.varint import decode_unsigned, uvarint
from ..exceptions import ChecksumMismatchError, MalformedTrailerError, MalformedVarintError
from ..utils.crc import crc32, verify_crc32

logger = logging.getLogger(__name__)

BytesLike = bytes | bytearray | memoryview


def build_trailer(payload: BytesLike) -> bytes:
    """Build the trailer for payload.

    Example:
        >>> trailer = build_trailer(b"")
        >>> trailer
        b'\\x00\\x01'
    """
    encoded = uvarint(crc32(payload))
    return encoded + bytes([len(encoded)])


def append_trailer(payload: BytesLike) -> bytes:
    """Return payload followed by its trailer."""
    return bytes(payload) + build_trailer(payload)


def split_trailer(framed: BytesLike) -> tuple[memoryview, int]:
    """Split a framed buffer into payload and trailer CRC.

    Args:
        framed: Payload followed by a trailer

    Returns:
        Tuple of (payload view, CRC value stored in the trailer)

    Raises:
        MalformedTrailerError: If the buffer is too short for the trailer it
            announces, or the trailer varint is unreadable
    """
    view = memoryview(framed).cast("B")
    if len(view) < 1:
        raise MalformedTrailerError("Cannot read trailer from empty data")

    length = view[-1]
    start = len(view) - length - 1
    if length == 0 or start < 0:
        raise MalformedTrailerError(
            f"Trailer announces {length} CRC bytes but only {len(view) - 1} precede it"
        )

    try:
        stored = decode_unsigned(view[start:-1])
    except MalformedVarintError as e:
        raise MalformedTrailerError(f"Unreadable trailer CRC: {e}") from e

    return view[:start], stored


def verify_trailer(framed: BytesLike) -> None:
    """Check that the trailer CRC matches the payload.

    Raises:
        MalformedTrailerError: If the trailer cannot be parsed
        ChecksumMismatchError: If the CRC does not match
    """
    payload, stored = split_trailer(framed)
    if not verify_crc32(payload, stored):
        actual = crc32(payload)
        logger.debug("Trailer CRC 0x%08X does not match payload CRC 0x%08X", stored, actual)
        raise ChecksumMismatchError(stored, actual)
