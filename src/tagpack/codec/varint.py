"""Variable-length integer codec over fixed-capacity windows.

Varints use 7 payload bits per byte, least significant group first, with the
high bit set on every byte except the last. Signed values are zigzag mapped
first so small negative numbers stay short.

Fixed-width integer kinds store their varint inside a window of 1, 2, 4 or 8
bytes. The window is always fully written (zero padded) and always fully
consumed. A value whose varint does not fit its window is rejected with
VarintOverflowError; it is never truncated or saturated.
"""

from __future__ import annotations

from ..exceptions import MalformedVarintError, VarintOverflowError

UINT64_MAX = (1 << 64) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

# A 64-bit value needs at most ten 7-bit groups.
MAX_VARINT_LEN = 10


def zigzag_encode(value: int) -> int:
    """Map a signed 64-bit integer onto an unsigned one (0, -1, 1, -2, ...)."""
    if value < INT64_MIN or value > INT64_MAX:
        raise OverflowError(f"{value} is outside the signed 64-bit range")
    return ((value << 1) ^ (value >> 63)) & UINT64_MAX


def zigzag_decode(value: int) -> int:
    """Inverse of zigzag_encode."""
    return (value >> 1) ^ -(value & 1)


def uvarint(value: int) -> bytes:
    """Encode an unsigned integer with the natural (shortest) varint length.

    Args:
        value: Integer in [0, 2**64)

    Returns:
        Varint bytes, 1 to 10 long

    Raises:
        OverflowError: If value is negative or needs more than 64 bits
    """
    if value < 0 or value > UINT64_MAX:
        raise OverflowError(f"{value} is outside the unsigned 64-bit range")

    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def uvarint_len(value: int) -> int:
    """Number of bytes uvarint(value) produces."""
    return max(1, (value.bit_length() + 6) // 7)


def _fit(encoded: bytes, value: int, max_bytes: int) -> bytes:
    if len(encoded) > max_bytes:
        raise VarintOverflowError(value, max_bytes, len(encoded))
    return encoded + bytes(max_bytes - len(encoded))


def encode_unsigned(value: int, max_bytes: int) -> bytes:
    """Encode an unsigned varint into a window of exactly max_bytes bytes.

    Raises:
        VarintOverflowError: If the varint needs more than max_bytes bytes
    """
    try:
        encoded = uvarint(value)
    except OverflowError:
        raise VarintOverflowError(value, max_bytes, MAX_VARINT_LEN + 1) from None
    return _fit(encoded, value, max_bytes)


def encode_signed(value: int, max_bytes: int) -> bytes:
    """Encode a zigzag varint into a window of exactly max_bytes bytes.

    Raises:
        VarintOverflowError: If the varint needs more than max_bytes bytes
    """
    try:
        encoded = uvarint(zigzag_encode(value))
    except OverflowError:
        raise VarintOverflowError(value, max_bytes, MAX_VARINT_LEN + 1) from None
    return _fit(encoded, value, max_bytes)


def decode_unsigned(window: bytes | memoryview) -> int:
    """Read the first unsigned varint inside window.

    Bytes after the terminating byte (window padding) are ignored. Nothing
    outside the window is ever read.

    Raises:
        MalformedVarintError: If no terminating byte is found in the window,
            or the value does not fit in 64 bits
    """
    result = 0
    shift = 0
    for i, byte in enumerate(window):
        if i == MAX_VARINT_LEN - 1 and byte > 1:
            raise MalformedVarintError("Varint overflows 64 bits")
        result |= (byte & 0x7F) << shift
        if byte < 0x80:
            return result
        shift += 7

    raise MalformedVarintError(f"Varint does not terminate within {len(window)} bytes")


def decode_signed(window: bytes | memoryview) -> int:
    """Read the first zigzag varint inside window."""
    return zigzag_decode(decode_unsigned(window))


def window_limits(max_bytes: int, signed: bool) -> tuple[int, int]:
    """Inclusive value range a varint window can carry.

    Example:
        >>> window_limits(1, signed=True)
        (-64, 63)
        >>> window_limits(2, signed=False)
        (0, 16383)
    """
    bits = min(7 * max_bytes, 64)
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1
