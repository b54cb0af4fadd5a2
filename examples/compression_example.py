#!/usr/bin/env python3
"""Compression and integrity example for tagpack.

This example demonstrates:
1. Compressing an encoded buffer (trailer included)
2. Decompressing and validating on the receiving side
3. Error detection with the CRC-32 trailer
"""

from __future__ import annotations

import math

from tagpack import ChecksumMismatchError, CodecConfig, Decoder, Encoder

CONSTANTS = [
    ('{ "name": "pi" }', math.pi),
    ('{ "name": "phi" }', (1 + math.sqrt(5)) / 2),
    ('{ "name": "e" }', math.e),
    ('{ "name": "ln(2)" }', math.log(2)),
]


def main() -> None:
    """Run the compression example."""
    print("=" * 60)
    print("tagpack Compression Example")
    print("=" * 60)
    print()

    encoder = Encoder(CodecConfig(compression_level=9))
    for name, value in CONSTANTS:
        encoder.encode_string(name)
        encoder.encode_float64(value)

    data = encoder.data()
    compressed = encoder.compress()
    change = 100.0 * (len(compressed) - len(data)) / len(data)

    print("1. Sizes:")
    print(f"   Bytes: {len(data)}")
    print(f"   Compressed bytes: {len(compressed)}")
    print(f"   Change: {change:.0f}%")
    print()

    print("2. Receiving...")
    decoder = Decoder(compressed)
    decoder.decompress()
    decoder.validate()
    for name, value in CONSTANTS:
        decoded_name = decoder.decode_string()
        decoded_value = decoder.decode_float64()
        assert (decoded_name, decoded_value) == (name, value)
        print(f"   {decoded_name}: {decoded_value:f}")
    print()

    print("3. Corrupting one byte...")
    corrupted = bytearray(data)
    corrupted[20] ^= 0x01
    try:
        Decoder(corrupted).validate()
    except ChecksumMismatchError as e:
        print(f"   ✓ Detected: {e}")
    else:
        raise SystemExit("   ✗ Corruption was not detected")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
