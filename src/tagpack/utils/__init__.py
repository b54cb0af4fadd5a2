"""Utility functions for tagpack.

This module provides CRC checksums and size calculation helpers.
"""

from __future__ import annotations

from .crc import crc32, verify_crc32
from .sizing import encoded_size, total_size, trailer_size

__all__ = [
    # CRC functions
    "crc32",
    "verify_crc32",
    # Sizing functions
    "encoded_size",
    "total_size",
    "trailer_size",
]
