"""CRC (Cyclic Redundancy Check) helpers.

The checksum trailer uses CRC-32 with the IEEE 802.3 polynomial, the same
checksum zlib.crc32() and binascii.crc32() compute.
"""

from __future__ import annotations

import zlib


def crc32(data: bytes | bytearray | memoryview) -> int:
    """Calculate CRC-32 checksum.

    Args:
        data: Data to checksum

    Returns:
        32-bit CRC value

    Example:
        >>> hex(crc32(b"Hello, World!"))
        '0xec4ac3d0'
    """
    return zlib.crc32(data) & 0xFFFFFFFF


def verify_crc32(data: bytes | bytearray | memoryview, expected_crc: int) -> bool:
    """Verify CRC-32 checksum.

    Args:
        data: Data to verify
        expected_crc: Expected CRC value

    Returns:
        True if CRC matches, False otherwise

    Example:
        >>> data = b"Hello, World!"
        >>> verify_crc32(data, crc32(data))
        True
    """
    return crc32(data) == expected_crc
