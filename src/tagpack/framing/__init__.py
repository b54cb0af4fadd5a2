"""Framing utilities for tagpack.

This module provides the CRC-32 checksum trailer and the zlib compressed
envelope that wrap an encoded buffer.
"""

from __future__ import annotations

from .envelope import compress_envelope, decompress_envelope
from .trailer import append_trailer, build_trailer, split_trailer, verify_trailer

__all__ = [
    "build_trailer",
    "append_trailer",
    "split_trailer",
    "verify_trailer",
    "compress_envelope",
    "decompress_envelope",
]
