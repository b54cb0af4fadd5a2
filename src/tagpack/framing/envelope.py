"""Compressed envelope for trailer-bearing buffers.

The envelope is a plain zlib stream (DEFLATE with the zlib header and adler32
footer), so it adds a second integrity check on top of the CRC-32 trailer.
"""

from __future__ import annotations

import logging
import zlib

from ..exceptions import CompressionError

logger = logging.getLogger(__name__)


def compress_envelope(data: bytes | bytearray | memoryview, level: int = -1) -> bytes:
    """Compress data into a zlib envelope.

    Args:
        data: Buffer to compress, trailer included
        level: zlib compression level (-1 for the zlib default, 0-9 otherwise)

    Returns:
        Compressed bytes

    Raises:
        CompressionError: If the zlib stream cannot be produced or finalized
    """
    try:
        compressor = zlib.compressobj(level)
        compressed = compressor.compress(data) + compressor.flush()
    except (zlib.error, ValueError) as e:
        raise CompressionError(f"Failed to compress {len(data)} bytes: {e}") from e

    logger.debug("Compressed %d bytes into %d bytes (level %d)", len(data), len(compressed), level)
    return compressed


def decompress_envelope(data: bytes | bytearray | memoryview) -> bytes:
    """Inflate a zlib envelope.

    Args:
        data: Compressed bytes

    Returns:
        The exact buffer that was compressed

    Raises:
        CompressionError: If data is not a complete zlib stream
    """
    decompressor = zlib.decompressobj()
    try:
        inflated = decompressor.decompress(data) + decompressor.flush()
    except zlib.error as e:
        raise CompressionError(f"Invalid compressed stream: {e}") from e

    if not decompressor.eof:
        raise CompressionError(f"Truncated compressed stream ({len(data)} bytes)")

    logger.debug("Decompressed %d bytes into %d bytes", len(data), len(inflated))
    return inflated
