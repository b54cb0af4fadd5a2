"""Unit tests for the varint codec."""

from __future__ import annotations

import pytest

from tagpack import MalformedVarintError, VarintOverflowError
from tagpack.codec.varint import (
    decode_signed,
    decode_unsigned,
    encode_signed,
    encode_unsigned,
    uvarint,
    uvarint_len,
    window_limits,
    zigzag_decode,
    zigzag_encode,
)


class TestZigzag:
    """Test zigzag mapping."""

    def test_small_values(self) -> None:
        """Test small values interleave positive and negative."""
        assert [zigzag_encode(v) for v in (0, -1, 1, -2, 2)] == [0, 1, 2, 3, 4]

    def test_extremes(self) -> None:
        """Test 64-bit extremes."""
        assert zigzag_encode(2**63 - 1) == 2**64 - 2
        assert zigzag_encode(-(2**63)) == 2**64 - 1
        assert zigzag_decode(2**64 - 1) == -(2**63)

    def test_out_of_range(self) -> None:
        """Test values outside int64 are rejected."""
        with pytest.raises(OverflowError):
            zigzag_encode(2**63)


class TestUvarint:
    """Test natural-length encoding."""

    def test_known_encodings(self) -> None:
        """Test well known varint bytes."""
        assert uvarint(0) == b"\x00"
        assert uvarint(1) == b"\x01"
        assert uvarint(127) == b"\x7f"
        assert uvarint(128) == b"\x80\x01"
        assert uvarint(300) == b"\xac\x02"

    def test_max_length(self) -> None:
        """Test 2**64 - 1 takes ten bytes."""
        assert len(uvarint(2**64 - 1)) == 10
        assert uvarint_len(2**64 - 1) == 10

    def test_len_matches(self) -> None:
        """Test uvarint_len agrees with uvarint."""
        for value in (0, 1, 127, 128, 16383, 16384, 2**28, 2**56 - 1, 2**56):
            assert uvarint_len(value) == len(uvarint(value))

    def test_negative_rejected(self) -> None:
        """Test negative values cannot be unsigned varints."""
        with pytest.raises(OverflowError):
            uvarint(-1)


class TestWindows:
    """Test fixed window encoding."""

    def test_padding(self) -> None:
        """Test windows are zero padded to full width."""
        assert encode_unsigned(1, 4) == b"\x01\x00\x00\x00"
        assert encode_signed(-1, 2) == b"\x01\x00"
        assert encode_signed(10, 2) == b"\x14\x00"

    def test_exact_fit(self) -> None:
        """Test a varint filling its window exactly."""
        assert encode_unsigned(16383, 2) == b"\xff\x7f"

    def test_unsigned_overflow(self) -> None:
        """Test overflow is rejected, not truncated."""
        with pytest.raises(VarintOverflowError) as exc_info:
            encode_unsigned(128, 1)

        assert exc_info.value.max_bytes == 1
        assert exc_info.value.needed == 2

    def test_signed_overflow(self) -> None:
        """Test int8 extremes do not fit a 1-byte window."""
        with pytest.raises(VarintOverflowError):
            encode_signed(-128, 1)
        with pytest.raises(VarintOverflowError):
            encode_signed(64, 1)

    def test_beyond_64_bits(self) -> None:
        """Test values beyond 64 bits raise VarintOverflowError."""
        with pytest.raises(VarintOverflowError):
            encode_unsigned(2**64, 10)
        with pytest.raises(VarintOverflowError):
            encode_signed(-(2**63) - 1, 10)

    @pytest.mark.parametrize(
        ("max_bytes", "signed", "expected"),
        [
            (1, True, (-64, 63)),
            (2, True, (-8192, 8191)),
            (4, True, (-(2**27), 2**27 - 1)),
            (8, True, (-(2**55), 2**55 - 1)),
            (1, False, (0, 127)),
            (2, False, (0, 16383)),
            (4, False, (0, 2**28 - 1)),
            (8, False, (0, 2**56 - 1)),
            (10, False, (0, 2**64 - 1)),
        ],
    )
    def test_window_limits(self, max_bytes: int, signed: bool, expected: tuple[int, int]) -> None:
        """Test representable ranges per window."""
        assert window_limits(max_bytes, signed) == expected

    def test_limits_are_tight(self) -> None:
        """Test the limits fit and one past them overflows."""
        for max_bytes in (1, 2, 4, 8):
            lo, hi = window_limits(max_bytes, signed=True)
            assert len(encode_signed(lo, max_bytes)) == max_bytes
            assert len(encode_signed(hi, max_bytes)) == max_bytes
            with pytest.raises(VarintOverflowError):
                encode_signed(lo - 1, max_bytes)
            with pytest.raises(VarintOverflowError):
                encode_signed(hi + 1, max_bytes)


class TestDecode:
    """Test reading varints from windows."""

    def test_ignores_padding(self) -> None:
        """Test bytes after the terminator are ignored."""
        assert decode_unsigned(b"\xac\x02\xff\xff") == 300
        assert decode_signed(b"\x01\x00") == -1

    def test_unterminated(self) -> None:
        """Test a varint running off the window is malformed."""
        with pytest.raises(MalformedVarintError):
            decode_unsigned(b"\x80\x80")

    def test_empty_window(self) -> None:
        """Test an empty window is malformed."""
        with pytest.raises(MalformedVarintError):
            decode_unsigned(b"")

    def test_overflow_64_bits(self) -> None:
        """Test varints over 64 bits are malformed."""
        with pytest.raises(MalformedVarintError):
            decode_unsigned(b"\xff" * 9 + b"\x02")
        with pytest.raises(MalformedVarintError):
            decode_unsigned(b"\x80" * 11)

    def test_max_uint64(self) -> None:
        """Test the largest 64-bit value decodes."""
        assert decode_unsigned(uvarint(2**64 - 1)) == 2**64 - 1

    def test_memoryview_window(self) -> None:
        """Test windows may be memoryview slices."""
        view = memoryview(b"\x00\xac\x02\x00")
        assert decode_unsigned(view[1:3]) == 300
