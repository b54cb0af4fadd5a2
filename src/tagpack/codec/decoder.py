"""Sequential decoder for tagged values.

A Decoder keeps a read-only view over the caller's bytes and a cursor. Values
must be decoded in the order and with the kinds they were encoded.

Cursor rules:
- A successful decode moves the cursor past the tag and the whole payload.
- A tag mismatch leaves the cursor on the tag byte (TypeMismatchError), so a
  different decode can be tried at the same position.
- A truncated payload (EndOfBufferError) leaves the cursor after the tag byte.
"""

from __future__ import annotations

import logging
import struct
from typing import Any, Callable, Optional

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import (
    DecodeError,
    DecoderStateError,
    EndOfBufferError,
    MalformedVarintError,
    TypeMismatchError,
)
from ..framing.envelope import decompress_envelope
from ..framing.trailer import verify_trailer
from .tags import KINDS, KindSpec, Tag, kind_spec
from .varint import decode_signed, decode_unsigned

logger = logging.getLogger(__name__)


class Decoder:
    """Decodes tagged values from a byte buffer.

    Example:
        >>> decoder = Decoder(encoder.data())
        >>> decoder.validate()
        >>> name = decoder.decode_string()
        >>> depth = decoder.decode_float64()
    """

    def __init__(
        self, data: bytes | bytearray | memoryview, config: Optional[CodecConfig] = None
    ) -> None:
        """Initialize a decoder over data.

        The bytes are not copied; the decoder never writes to them. Buffers
        with wider items (such as array("H")) are read byte by byte. While the
        decoder is alive a bytearray passed as data cannot be resized
        (BufferError); mutating bytes in place is still allowed.

        Args:
            data: Encoded buffer (trailer included if validate() will be used)
            config: Codec options (defaults to CodecConfig())
        """
        self.config = config or DEFAULT_CONFIG
        self._view = memoryview(data).cast("B").toreadonly()
        self._offset = 0
        self._dispatch: dict[Tag, Callable[[], Any]] = {
            Tag.BOOL: self.decode_bool,
            Tag.INT: self.decode_int,
            Tag.INT64: self.decode_int64,
            Tag.INT32: self.decode_int32,
            Tag.INT16: self.decode_int16,
            Tag.INT8: self.decode_int8,
            Tag.UINT: self.decode_uint,
            Tag.UINT64: self.decode_uint64,
            Tag.UINT32: self.decode_uint32,
            Tag.UINT16: self.decode_uint16,
            Tag.UINT8: self.decode_uint8,
            Tag.FLOAT64: self.decode_float64,
            Tag.FLOAT32: self.decode_float32,
            Tag.STRING: self.decode_string,
            Tag.BYTES: self.decode_bytes,
        }

    @property
    def offset(self) -> int:
        """Current cursor position."""
        return self._offset

    @property
    def remaining(self) -> int:
        """Number of bytes after the cursor."""
        return len(self._view) - self._offset

    @property
    def data(self) -> bytes:
        """Copy of the bytes the decoder currently reads from."""
        return self._view.tobytes()

    def at_end(self) -> bool:
        return self._offset >= len(self._view)

    # Generic dispatch

    def decode(self, tag: Tag | int) -> Any:
        """Decode the next value as the kind identified by tag.

        Raises:
            UnsupportedTagError: If tag is reserved (SLICE)
            DecodeError: If the next value cannot be decoded as that kind
        """
        spec = kind_spec(tag)
        return self._dispatch[spec.tag]()

    # Boolean

    def decode_bool(self) -> bool:
        """Decode the next value as a boolean."""
        self._check_type(Tag.BOOL)
        return self._read(1)[0] == 1

    # Integer

    def decode_int(self) -> int:
        """Decode the next value as a default-width signed integer."""
        return self._decode_integer(Tag.INT)

    def decode_int64(self) -> int:
        """Decode the next value as a signed 64-bit integer."""
        return self._decode_integer(Tag.INT64)

    def decode_int32(self) -> int:
        """Decode the next value as a signed 32-bit integer."""
        return self._decode_integer(Tag.INT32)

    def decode_int16(self) -> int:
        """Decode the next value as a signed 16-bit integer."""
        return self._decode_integer(Tag.INT16)

    def decode_int8(self) -> int:
        """Decode the next value as a signed 8-bit integer."""
        return self._decode_integer(Tag.INT8)

    # Unsigned integer

    def decode_uint(self) -> int:
        """Decode the next value as a default-width unsigned integer."""
        return self._decode_integer(Tag.UINT)

    def decode_uint64(self) -> int:
        """Decode the next value as an unsigned 64-bit integer."""
        return self._decode_integer(Tag.UINT64)

    def decode_uint32(self) -> int:
        """Decode the next value as an unsigned 32-bit integer."""
        return self._decode_integer(Tag.UINT32)

    def decode_uint16(self) -> int:
        """Decode the next value as an unsigned 16-bit integer."""
        return self._decode_integer(Tag.UINT16)

    def decode_uint8(self) -> int:
        """Decode the next value as an unsigned 8-bit integer."""
        return self._decode_integer(Tag.UINT8)

    # Floating point

    def decode_float64(self) -> float:
        """Decode the next value as a double precision float."""
        self._check_type(Tag.FLOAT64)
        bits = self._read_float_bits(64)
        return struct.unpack(">d", struct.pack(">Q", bits))[0]

    def decode_float32(self) -> float:
        """Decode the next value as a single precision float.

        The result is the float32 value widened to a Python float.
        """
        self._check_type(Tag.FLOAT32)
        bits = self._read_float_bits(32)
        return struct.unpack(">f", struct.pack(">I", bits))[0]

    # Data

    def decode_string(self) -> str:
        """Decode the next value as a UTF-8 string.

        Raises:
            DecodeError: If the bytes are not valid UTF-8
        """
        self._check_type(Tag.STRING)
        raw = self._read_blob(KINDS[Tag.STRING])
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"String at offset {self._offset - len(raw)} is not UTF-8: {e}") from e

    def decode_bytes(self) -> bytes:
        """Decode the next value as a byte blob."""
        self._check_type(Tag.BYTES)
        return self._read_blob(KINDS[Tag.BYTES])

    # Exported methods

    def validate(self) -> None:
        """Check the CRC-32 trailer at the end of the data.

        Neither the data nor the cursor is changed, so validate() may be
        called at any point and any number of times.

        Raises:
            MalformedTrailerError: If the data is too short for its trailer
            ChecksumMismatchError: If the CRC does not match
        """
        verify_trailer(self._view)
        logger.debug("Validated trailer over %d bytes", len(self._view))

    def decompress(self) -> None:
        """Replace the decoder's data with its inflated zlib envelope.

        Must be called before any value is decoded.

        Raises:
            DecoderStateError: If the cursor has already advanced
            CompressionError: If the data is not a valid zlib stream
        """
        if self._offset != 0:
            raise DecoderStateError(
                f"Cannot decompress after decoding started (offset {self._offset})"
            )
        self._view = memoryview(decompress_envelope(self._view)).cast("B").toreadonly()

    # Non-exported methods

    def _check_type(self, tag: Tag) -> None:
        """Consume the next byte if it is tag, otherwise leave the cursor on it."""
        self._check_length(1)

        actual = self._view[self._offset]
        if actual != tag:
            raise TypeMismatchError(tag, actual, self._offset)
        self._offset += 1

    def _decode_integer(self, tag: Tag) -> int:
        spec = KINDS[tag]
        self._check_type(tag)

        window = self._read(spec.window)
        if spec.signed:
            return decode_signed(window)
        return decode_unsigned(window)

    def _read_float_bits(self, bits: int) -> int:
        length = decode_unsigned(self._read(1))
        value = decode_unsigned(self._read(length))
        return value & ((1 << bits) - 1)

    def _read_blob(self, spec: KindSpec) -> bytes:
        length = decode_signed(self._read(spec.window))
        if length < 0:
            raise MalformedVarintError(f"Negative length {length} at offset {self._offset}")
        if length == 0:
            return b""
        return self._read(length).tobytes()

    def _read(self, n: int) -> memoryview:
        """Return the next n bytes and move the cursor past them."""
        self._check_length(n)
        start = self._offset
        self._offset += n
        return self._view[start : self._offset]

    def _check_length(self, n: int) -> None:
        available = len(self._view) - self._offset
        if n > available:
            raise EndOfBufferError(n, available, self._offset)
