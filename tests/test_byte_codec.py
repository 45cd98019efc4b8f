"""Tests for ByteCodec."""

import base64

import pytest

from death_mountain_renderer.engine.byte_codec import U128_MAX, U256, U256_MAX, ByteCodec


class TestBase64:
    """Test suite for the Base64 codec."""

    @pytest.mark.parametrize(
        "data,expected",
        [
            (b"", ""),
            (b"f", "Zg=="),
            (b"fo", "Zm8="),
            (b"foo", "Zm9v"),
            (b"foob", "Zm9vYg=="),
            (b"fooba", "Zm9vYmE="),
            (b"foobar", "Zm9vYmFy"),
        ],
    )
    def test_rfc4648_vectors(self, data, expected):
        """Test the RFC 4648 section 10 test vectors."""
        assert ByteCodec.base64_encode(data) == expected

    def test_matches_standard_library(self):
        """Test output against the reference encoder for all byte values."""
        data = bytes(range(256)) * 3 + b"\xff\xfe"
        assert ByteCodec.base64_encode(data) == base64.b64encode(data).decode("ascii")

    def test_no_line_wrapping(self):
        """Test long input is not wrapped."""
        encoded = ByteCodec.base64_encode(b"x" * 1000)
        assert "\n" not in encoded

    @pytest.mark.parametrize("length", [0, 1, 2, 3, 4, 5, 57, 58, 59, 1000])
    def test_encoded_length(self, length):
        """Test output length is ceil(n / 3) * 4."""
        encoded = ByteCodec.base64_encode(b"\x01" * length)
        assert len(encoded) == -(-length // 3) * 4
        assert ByteCodec.encoded_length(length) == len(encoded)

    @pytest.mark.parametrize(
        "data",
        [b"", b"\x00", b"\x00\x00", b"<svg></svg>", "Zoë ⚔".encode("utf-8"), bytes(range(256))],
    )
    def test_round_trip(self, data):
        """Test decode inverts encode."""
        assert ByteCodec.base64_decode(ByteCodec.base64_encode(data)) == data

    def test_accepts_bytearray(self):
        """Test bytearray input."""
        assert ByteCodec.base64_encode(bytearray(b"foo")) == "Zm9v"

    def test_rejects_text_input(self):
        """Test that str input raises TypeError."""
        with pytest.raises(TypeError):
            ByteCodec.base64_encode("foo")  # type: ignore

    @pytest.mark.parametrize("text", ["Zm9", "Zm9v!===", "Z===", "Zg==Zm9v", "Zm$v"])
    def test_decode_rejects_malformed(self, text):
        """Test malformed Base64 raises ValueError."""
        with pytest.raises(ValueError):
            ByteCodec.base64_decode(text)


class TestBytesUsed:
    """Test suite for integer byte-length helpers."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0, 0), (1, 1), (255, 1), (256, 2), (65535, 2), (65536, 3), (2**64 - 1, 8), (2**64, 9), (U128_MAX, 16)],
    )
    def test_u128(self, value, expected):
        """Test minimum big-endian byte counts."""
        assert ByteCodec.bytes_used_u128(value) == expected

    @pytest.mark.parametrize("value", [-1, U128_MAX + 1])
    def test_u128_out_of_range(self, value):
        """Test values outside u128 raise ValueError."""
        with pytest.raises(ValueError):
            ByteCodec.bytes_used_u128(value)

    def test_u256_low_half_only(self):
        """Test a zero high half falls back to the low half."""
        assert ByteCodec.bytes_used_u256(U256(low=0, high=0)) == 0
        assert ByteCodec.bytes_used_u256(U256(low=300, high=0)) == 2
        assert ByteCodec.bytes_used_u256(U256(low=U128_MAX, high=0)) == 16

    def test_u256_high_half(self):
        """Test a non-zero high half counts 16 low bytes plus its own."""
        assert ByteCodec.bytes_used_u256(U256(low=0, high=1)) == 17
        assert ByteCodec.bytes_used_u256(U256(low=5, high=256)) == 18
        assert ByteCodec.bytes_used_u256(U256.from_int(U256_MAX)) == 32

    @pytest.mark.parametrize("value", [0, 1, 2**100, 2**128, 2**200 + 17, U256_MAX])
    def test_u256_matches_bit_length(self, value):
        """Test the split computation agrees with the bit length."""
        split = U256.from_int(value)
        assert split.to_int() == value
        assert ByteCodec.bytes_used_u256(split) == (value.bit_length() + 7) // 8

    def test_u256_from_int_out_of_range(self):
        """Test values outside u256 raise ValueError."""
        with pytest.raises(ValueError):
            U256.from_int(U256_MAX + 1)


class TestDecimalString:
    """Test suite for integer_to_decimal_string."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0, "0"), (7, "7"), (10, "10"), (3925, "3925"), (65535, "65535"), (2**64, "18446744073709551616")],
    )
    def test_digits(self, value, expected):
        """Test decimal conversion with no leading zeros."""
        assert ByteCodec.integer_to_decimal_string(value) == expected

    def test_negative_rejected(self):
        """Test negative values raise ValueError."""
        with pytest.raises(ValueError):
            ByteCodec.integer_to_decimal_string(-1)
