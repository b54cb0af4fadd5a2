"""Sequential encoder for tagged values.

Each encode_* call appends one tag byte followed by the payload of that kind.
The CRC-32 trailer is added only to exported snapshots (data() and
compress()), never to the live buffer.
"""

from __future__ import annotations

import logging
import struct
from typing import Any, Callable, Optional

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import EncodeError
from ..framing.envelope import compress_envelope
from ..framing.trailer import build_trailer
from .tags import KINDS, Tag, kind_spec
from .varint import encode_signed, encode_unsigned, uvarint

logger = logging.getLogger(__name__)


class Encoder:
    """Appends typed values to a growable byte buffer.

    An encoder is meant for one call sequence at a time; it does no locking.

    Example:
        >>> encoder = Encoder()
        >>> encoder.encode_string("depth")
        >>> encoder.encode_float64(12.5)
        >>> data = encoder.data()
    """

    def __init__(self, config: Optional[CodecConfig] = None) -> None:
        """Initialize an empty encoder.

        Args:
            config: Codec options (defaults to CodecConfig())
        """
        self.config = config or DEFAULT_CONFIG
        self._data = bytearray()
        self._dispatch: dict[Tag, Callable[[Any], None]] = {
            Tag.BOOL: self.encode_bool,
            Tag.INT: self.encode_int,
            Tag.INT64: self.encode_int64,
            Tag.INT32: self.encode_int32,
            Tag.INT16: self.encode_int16,
            Tag.INT8: self.encode_int8,
            Tag.UINT: self.encode_uint,
            Tag.UINT64: self.encode_uint64,
            Tag.UINT32: self.encode_uint32,
            Tag.UINT16: self.encode_uint16,
            Tag.UINT8: self.encode_uint8,
            Tag.FLOAT64: self.encode_float64,
            Tag.FLOAT32: self.encode_float32,
            Tag.STRING: self.encode_string,
            Tag.BYTES: self.encode_bytes,
        }

    def __len__(self) -> int:
        """Number of encoded bytes, trailer excluded."""
        return len(self._data)

    # Generic dispatch

    def encode(self, tag: Tag | int, value: Any) -> None:
        """Encode value as the kind identified by tag.

        Raises:
            UnsupportedTagError: If tag is reserved (SLICE)
            EncodeError: If value cannot be represented by the kind
        """
        spec = kind_spec(tag)
        self._dispatch[spec.tag](value)

    # Boolean

    def encode_bool(self, value: bool) -> None:
        """Encode a boolean as 0x00 or 0x01."""
        self._append(Tag.BOOL, b"\x01" if value else b"\x00")

    # Integer

    def encode_int(self, value: int) -> None:
        """Encode a default-width signed integer (8-byte window)."""
        self._encode_integer(Tag.INT, value)

    def encode_int64(self, value: int) -> None:
        """Encode a signed 64-bit integer (8-byte window)."""
        self._encode_integer(Tag.INT64, value)

    def encode_int32(self, value: int) -> None:
        """Encode a signed 32-bit integer (4-byte window)."""
        self._encode_integer(Tag.INT32, value)

    def encode_int16(self, value: int) -> None:
        """Encode a signed 16-bit integer (2-byte window)."""
        self._encode_integer(Tag.INT16, value)

    def encode_int8(self, value: int) -> None:
        """Encode a signed 8-bit integer (1-byte window)."""
        self._encode_integer(Tag.INT8, value)

    # Unsigned integer

    def encode_uint(self, value: int) -> None:
        """Encode a default-width unsigned integer (8-byte window)."""
        self._encode_integer(Tag.UINT, value)

    def encode_uint64(self, value: int) -> None:
        """Encode an unsigned 64-bit integer (8-byte window)."""
        self._encode_integer(Tag.UINT64, value)

    def encode_uint32(self, value: int) -> None:
        """Encode an unsigned 32-bit integer (4-byte window)."""
        self._encode_integer(Tag.UINT32, value)

    def encode_uint16(self, value: int) -> None:
        """Encode an unsigned 16-bit integer (2-byte window)."""
        self._encode_integer(Tag.UINT16, value)

    def encode_uint8(self, value: int) -> None:
        """Encode an unsigned 8-bit integer (1-byte window)."""
        self._encode_integer(Tag.UINT8, value)

    # Floating point

    def encode_float64(self, value: float) -> None:
        """Encode a double precision float.

        The IEEE-754 bit pattern is written as an unsigned varint preceded by
        its byte length.
        """
        try:
            (bits,) = struct.unpack(">Q", struct.pack(">d", value))
        except struct.error as e:
            raise EncodeError(f"Cannot encode {value!r} as float64: {e}") from e
        self._encode_float_bits(Tag.FLOAT64, bits)

    def encode_float32(self, value: float) -> None:
        """Encode a single precision float.

        Raises:
            EncodeError: If value is out of float32 range
        """
        try:
            (bits,) = struct.unpack(">I", struct.pack(">f", value))
        except (struct.error, OverflowError) as e:
            raise EncodeError(f"Cannot encode {value!r} as float32: {e}") from e
        self._encode_float_bits(Tag.FLOAT32, bits)

    # Data

    def encode_string(self, value: str) -> None:
        """Encode a string as length-prefixed UTF-8."""
        if not isinstance(value, str):
            raise EncodeError(f"encode_string requires str, got {type(value).__name__}")
        self._encode_blob(Tag.STRING, value.encode("utf-8"))

    def encode_bytes(self, value: bytes | bytearray | memoryview) -> None:
        """Encode a byte blob as length-prefixed raw bytes."""
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise EncodeError(f"encode_bytes requires bytes, got {type(value).__name__}")
        self._encode_blob(Tag.BYTES, bytes(value))

    # Exported methods

    def data(self) -> bytes:
        """Return the encoded data followed by a freshly computed CRC trailer.

        The encoder's own buffer is not modified, so data() can be called any
        number of times.
        """
        return bytes(self._data) + build_trailer(self._data)

    def flush(self) -> None:
        """Discard all encoded data.

        Snapshots returned earlier by data() or compress() are independent
        copies and are not affected.
        """
        logger.debug("Flushing %d encoded bytes", len(self._data))
        self._data = bytearray()

    def compress(self) -> bytes:
        """Compress data() (trailer included) into a zlib envelope.

        Raises:
            CompressionError: If the compressed stream cannot be finalized
        """
        return compress_envelope(self.data(), self.config.compression_level)

    # Non-exported methods

    def _encode_integer(self, tag: Tag, value: int) -> None:
        spec = KINDS[tag]
        if isinstance(value, bool) or not isinstance(value, int):
            raise EncodeError(f"encode_{spec.name} requires int, got {type(value).__name__}")
        if not spec.min_value <= value <= spec.max_value:
            raise EncodeError(
                f"Value {value} out of range for {spec.name} "
                f"({spec.min_value} to {spec.max_value})"
            )

        if spec.signed:
            payload = encode_signed(value, spec.window)
        else:
            payload = encode_unsigned(value, spec.window)
        self._append(tag, payload)

    def _encode_float_bits(self, tag: Tag, bits: int) -> None:
        encoded = uvarint(bits)
        self._append(tag, bytes([len(encoded)]) + encoded)

    def _encode_blob(self, tag: Tag, raw: bytes) -> None:
        spec = KINDS[tag]
        self._append(tag, encode_signed(len(raw), spec.window) + raw)

    def _append(self, tag: Tag, payload: bytes) -> None:
        """Append a tag and its payload in one step."""
        self._data.append(tag)
        self._data += payload

