"""tagpack: Tagged Binary Value Codec

A Python library for a compact, self-describing binary format. An Encoder
appends typed values (one tag byte plus a payload each) to a buffer, and a
Decoder reads them back in the same order with type and bounds checking.

Key Features:
- 15 value kinds: bool, signed/unsigned integers of 8-64 bits, float32/64,
  UTF-8 strings and byte blobs
- Varint payloads inside fixed-width windows
- CRC-32 trailer over the whole buffer
- Optional zlib compression of the finished buffer
- Non-destructive type mismatches for "try X, else Y" decoding

Quick Start:
    >>> from tagpack import Decoder, Encoder
    >>>
    >>> encoder = Encoder()
    >>> encoder.encode_string("depth")
    >>> encoder.encode_float64(12.5)
    >>> data = encoder.compress()
    >>>
    >>> decoder = Decoder(data)
    >>> decoder.decompress()
    >>> decoder.validate()
    >>> decoder.decode_string()
    'depth'
    >>> decoder.decode_float64()
    12.5
"""

from __future__ import annotations

from .codec import KINDS, Decoder, Encoder, KindSpec, Tag, kind_spec
from .config import CodecConfig
from .exceptions import (
    ChecksumMismatchError,
    CompressionError,
    DecodeError,
    DecoderStateError,
    EncodeError,
    EndOfBufferError,
    FramingError,
    MalformedTrailerError,
    MalformedVarintError,
    TagpackError,
    TypeMismatchError,
    UnsupportedTagError,
    VarintOverflowError,
)
from .framing import (
    append_trailer,
    build_trailer,
    compress_envelope,
    decompress_envelope,
    split_trailer,
    verify_trailer,
)
from .utils import crc32, encoded_size, total_size, trailer_size, verify_crc32

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Encoder",
    "Decoder",
    "CodecConfig",
    # Tags
    "Tag",
    "KindSpec",
    "KINDS",
    "kind_spec",
    # Exceptions
    "TagpackError",
    "EncodeError",
    "VarintOverflowError",
    "DecodeError",
    "EndOfBufferError",
    "TypeMismatchError",
    "MalformedVarintError",
    "DecoderStateError",
    "FramingError",
    "MalformedTrailerError",
    "ChecksumMismatchError",
    "CompressionError",
    "UnsupportedTagError",
    # Framing
    "build_trailer",
    "append_trailer",
    "split_trailer",
    "verify_trailer",
    "compress_envelope",
    "decompress_envelope",
    # CRC
    "crc32",
    "verify_crc32",
    # Sizing
    "encoded_size",
    "total_size",
    "trailer_size",
    # Version
    "__version__",
]
