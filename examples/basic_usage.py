#!/usr/bin/env python3
"""Basic usage example for tagpack.

This example demonstrates:
1. Encoding a sequence of typed values
2. Exporting the buffer with its CRC-32 trailer
3. Validating and decoding the values in order
4. Recovering from a type mismatch
"""

from __future__ import annotations

import json

from tagpack import Decoder, Encoder, Tag, TypeMismatchError, encoded_size


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("tagpack Basic Usage Example")
    print("=" * 60)
    print()

    # Values of a sensor reading
    reading = {"sensor_id": 42, "depth_cm": 2500, "temperature": 11.75, "active": True}

    print("1. Sizing the values...")
    layout = [
        (Tag.UINT8, reading["sensor_id"]),
        (Tag.UINT16, reading["depth_cm"]),
        (Tag.FLOAT64, reading["temperature"]),
        (Tag.BOOL, reading["active"]),
    ]
    for tag, value in layout:
        print(f"   {tag!s:>8}: {encoded_size(tag, value)} bytes")
    print()

    print("2. Encoding...")
    encoder = Encoder()
    encoder.encode_uint8(reading["sensor_id"])
    encoder.encode_uint16(reading["depth_cm"])
    encoder.encode_float64(reading["temperature"])
    encoder.encode_bool(reading["active"])

    data = encoder.data()
    print(f"   Payload: {len(encoder)} bytes, with trailer: {len(data)} bytes")
    print(f"   Hex: {data.hex()}")
    print()

    print("3. Validating and decoding...")
    decoder = Decoder(data)
    decoder.validate()
    decoded = {
        "sensor_id": decoder.decode_uint8(),
        "depth_cm": decoder.decode_uint16(),
        "temperature": decoder.decode_float64(),
        "active": decoder.decode_bool(),
    }
    print(f"   {decoded}")
    if decoded == reading:
        print("   ✓ Round-trip successful! Values match.")
    else:
        raise SystemExit("   ✗ Round-trip failed! Values don't match.")
    print()

    print("4. Speculative decoding...")
    decoder = Decoder(data)
    try:
        decoder.decode_string()
    except TypeMismatchError as e:
        print(f"   {e}")
    print(f"   Cursor still at offset {decoder.offset}; sensor_id = {decoder.decode_uint8()}")
    print()

    json_bytes = json.dumps(reading).encode("utf-8")
    print(f"5. JSON size: {len(json_bytes)} bytes vs tagpack {len(data)} bytes")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
