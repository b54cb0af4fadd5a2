"""Exception hierarchy for tagpack.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from TagpackError for easy catching of any tagpack-specific error.
"""

from __future__ import annotations

from typing import Any


class TagpackError(Exception):
    """Base exception for all tagpack errors."""

    pass


class EncodeError(TagpackError):
    """Raised when a value cannot be appended to an encoder.

    Examples:
        - Integer outside the declared width (e.g. 300 for int8)
        - Float too large for single precision
        - String or bytes argument of the wrong type
    """

    pass


class VarintOverflowError(EncodeError):
    """Raised when a varint needs more bytes than its fixed window holds.

    The encoder never truncates or saturates: the value is rejected and the
    buffer is left as it was before the call.
    """

    def __init__(self, value: int, max_bytes: int, needed: int) -> None:
        super().__init__(
            f"Value {value} needs {needed} varint bytes but the window holds {max_bytes}"
        )
        self.value = value
        self.max_bytes = max_bytes
        self.needed = needed


class DecodeError(TagpackError):
    """Raised when decoding binary data fails.

    Examples:
        - Truncated data (insufficient bytes)
        - Next value has a different tag than requested
        - Corrupted varint or string payload
    """

    pass


class EndOfBufferError(DecodeError):
    """Raised when fewer bytes remain than the requested read needs."""

    def __init__(self, needed: int, available: int, offset: int) -> None:
        super().__init__(
            f"End of buffer at offset {offset}: need {needed} bytes, {available} available"
        )
        self.needed = needed
        self.available = available
        self.offset = offset


class TypeMismatchError(DecodeError):
    """Raised when the next tag byte is not the one the caller asked for.

    The decoder cursor is rolled back to the tag byte, so the caller can try a
    different decode at the same position.
    """

    def __init__(self, expected: Any, actual: int, offset: int) -> None:
        super().__init__(
            f"Type mismatch at offset {offset}: expected {expected!s}, found tag 0x{actual:02X}"
        )
        self.expected = expected
        self.actual = actual
        self.offset = offset


class MalformedVarintError(DecodeError):
    """Raised when a varint does not terminate inside its window or overflows 64 bits."""

    pass


class DecoderStateError(DecodeError):
    """Raised when a decoder operation is not allowed in its current state.

    Examples:
        - decompress() after the cursor has advanced
    """

    pass


class FramingError(TagpackError):
    """Raised when the checksum trailer is missing or wrong.

    Examples:
        - Buffer too short to hold a trailer
        - CRC-32 mismatch
    """

    pass


class MalformedTrailerError(FramingError):
    """Raised when the buffer cannot hold a valid checksum trailer."""

    pass


class ChecksumMismatchError(FramingError):
    """Raised when the recomputed CRC-32 disagrees with the trailer."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"CRC-32 verification failed: trailer says 0x{expected:08X}, data is 0x{actual:08X}"
        )
        self.expected = expected
        self.actual = actual


class CompressionError(TagpackError):
    """Raised when the zlib envelope cannot be produced or parsed.

    Examples:
        - Truncated compressed stream
        - Input that is not a zlib stream at all
    """

    pass


class UnsupportedTagError(TagpackError, ValueError):
    """Raised for tags that are reserved but have no encode/decode operation."""

    pass
