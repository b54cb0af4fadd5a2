"""Unit tests for size calculation."""

from __future__ import annotations

import math

import pytest

from tagpack import EncodeError, Encoder, Tag, UnsupportedTagError
from tagpack.utils.sizing import encoded_size, total_size, trailer_size


class TestEncodedSize:
    """Test encoded_size against real encodings."""

    @pytest.mark.parametrize(
        ("tag", "value", "expected"),
        [
            (Tag.BOOL, True, 2),
            (Tag.INT8, 0, 2),
            (Tag.INT16, 5, 3),
            (Tag.UINT32, 5, 5),
            (Tag.INT, 5, 9),
            (Tag.UINT64, 5, 9),
            (Tag.FLOAT64, 0.0, 3),
            (Tag.FLOAT64, math.pi, 11),
            (Tag.STRING, "", 9),
            (Tag.STRING, "pi", 11),
            (Tag.BYTES, b"\x00\x01", 11),
        ],
    )
    def test_known_sizes(self, tag: Tag, value: object, expected: int) -> None:
        """Test sizes of single values."""
        assert encoded_size(tag, value) == expected

    @pytest.mark.parametrize(
        ("tag", "value"),
        [
            (Tag.FLOAT32, -math.pi),
            (Tag.FLOAT64, -0.0),
            (Tag.STRING, "ünïcödé"),
            (Tag.UINT16, 16383),
        ],
    )
    def test_matches_encoder(self, tag: Tag, value: object) -> None:
        """Test encoded_size agrees with what the encoder appends."""
        encoder = Encoder()
        encoder.encode(tag, value)

        assert encoded_size(tag, value) == len(encoder)

    def test_slice_unsupported(self) -> None:
        """Test the reserved tag has no size."""
        with pytest.raises(UnsupportedTagError):
            encoded_size(Tag.SLICE, [])

    @pytest.mark.parametrize(
        ("tag", "value"),
        [(Tag.STRING, b"depth"), (Tag.BYTES, "depth"), (Tag.STRING, None)],
    )
    def test_wrong_blob_type(self, tag: Tag, value: object) -> None:
        """Test sizing rejects the same type mistakes the encoder does."""
        with pytest.raises(EncodeError):
            encoded_size(tag, value)
        with pytest.raises(EncodeError):
            Encoder().encode(tag, value)


class TestTotalSize:
    """Test sizing sequences and trailers."""

    def test_total(self, constants_encoder: Encoder) -> None:
        """Test the pi/phi scenario payload is 73 bytes."""
        values = [
            (Tag.STRING, '{ "name": "pi" }'),
            (Tag.FLOAT64, math.pi),
            (Tag.STRING, '{ "name": "phi" }'),
            (Tag.FLOAT64, 1.618033988749895),
        ]
        assert total_size(values) == 73
        assert len(constants_encoder) == 73

    def test_trailer_size(self, constants_encoder: Encoder) -> None:
        """Test trailer_size agrees with data()."""
        data = constants_encoder.data()
        payload = data[: len(constants_encoder)]

        assert len(data) == len(payload) + trailer_size(payload)
        assert trailer_size(b"") == 2
