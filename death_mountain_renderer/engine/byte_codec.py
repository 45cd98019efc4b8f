"""Base64 codec and integer byte-length helpers."""

from pydantic import BaseModel, ConfigDict, Field

BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
BASE64_PAD = "="

U128_MAX = 2**128 - 1
U256_MAX = 2**256 - 1

_DECODE_TABLE = {char: index for index, char in enumerate(BASE64_ALPHABET)}


class U256(BaseModel):
    """256-bit unsigned integer split into low and high 128-bit halves."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    low: int = Field(default=0, ge=0, le=U128_MAX, description="Low 128 bits")
    high: int = Field(default=0, ge=0, le=U128_MAX, description="High 128 bits")

    @classmethod
    def from_int(cls, value: int) -> "U256":
        """Split a Python int into halves."""
        if value < 0 or value > U256_MAX:
            raise ValueError(f"Value out of u256 range: {value}")
        return cls(low=value & U128_MAX, high=value >> 128)

    def to_int(self) -> int:
        """Recombine the halves."""
        return (self.high << 128) | self.low


class ByteCodec:
    """RFC 4648 Base64 and integer width utilities."""

    @staticmethod
    def base64_encode(data: bytes) -> str:
        """
        Encode bytes with the standard alphabet, '=' padding and no line breaks.

        Args:
            data: Bytes to encode

        Returns:
            Base64 text, 4 characters for every started 3-byte group
        """
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError(f"Input must be bytes, got {type(data)}")

        chunks: list[str] = []
        full_groups = len(data) // 3
        for group in range(full_groups):
            start = group * 3
            block = (data[start] << 16) | (data[start + 1] << 8) | data[start + 2]
            chunks.append(
                BASE64_ALPHABET[(block >> 18) & 0x3F]
                + BASE64_ALPHABET[(block >> 12) & 0x3F]
                + BASE64_ALPHABET[(block >> 6) & 0x3F]
                + BASE64_ALPHABET[block & 0x3F]
            )

        remaining = len(data) - full_groups * 3
        if remaining == 1:
            block = data[-1] << 16
            chunks.append(
                BASE64_ALPHABET[(block >> 18) & 0x3F]
                + BASE64_ALPHABET[(block >> 12) & 0x3F]
                + BASE64_PAD * 2
            )
        elif remaining == 2:
            block = (data[-2] << 16) | (data[-1] << 8)
            chunks.append(
                BASE64_ALPHABET[(block >> 18) & 0x3F]
                + BASE64_ALPHABET[(block >> 12) & 0x3F]
                + BASE64_ALPHABET[(block >> 6) & 0x3F]
                + BASE64_PAD
            )

        return "".join(chunks)

    @staticmethod
    def base64_decode(text: str) -> bytes:
        """
        Decode standard padded Base64.

        Raises:
            ValueError: If the text is not canonical padded Base64
        """
        if len(text) % 4 != 0:
            raise ValueError(f"Base64 length must be a multiple of 4, got {len(text)}")

        output = bytearray()
        group_count = len(text) // 4
        for group in range(group_count):
            quad = text[group * 4 : group * 4 + 4]
            padding = len(quad) - len(quad.rstrip(BASE64_PAD))
            if padding > 2 or (padding and group != group_count - 1):
                raise ValueError(f"Misplaced Base64 padding in group {group}")

            block = 0
            for char in quad[: 4 - padding]:
                if char not in _DECODE_TABLE:
                    raise ValueError(f"Invalid Base64 character: {char!r}")
                block = (block << 6) | _DECODE_TABLE[char]
            block <<= 6 * padding

            decoded = bytes(((block >> 16) & 0xFF, (block >> 8) & 0xFF, block & 0xFF))
            output.extend(decoded[: 3 - padding])

        return bytes(output)

    @staticmethod
    def encoded_length(byte_count: int) -> int:
        """Length of the Base64 text for a given input size."""
        return -(-byte_count // 3) * 4

    @staticmethod
    def bytes_used_u128(value: int) -> int:
        """
        Minimum number of big-endian bytes needed for a u128 (0 uses 0 bytes).

        Raises:
            ValueError: If value is negative or wider than 128 bits
        """
        if value < 0 or value > U128_MAX:
            raise ValueError(f"Value out of u128 range: {value}")
        count = 0
        while value:
            value >>= 8
            count += 1
        return count

    @staticmethod
    def bytes_used_u256(value: U256) -> int:
        """Minimum number of big-endian bytes needed for a u256."""
        if value.high == 0:
            return ByteCodec.bytes_used_u128(value.low)
        return 16 + ByteCodec.bytes_used_u128(value.high)

    @staticmethod
    def integer_to_decimal_string(value: int) -> str:
        """
        Decimal ASCII digits of a non-negative integer, no leading zeros.

        Raises:
            ValueError: If value is negative
        """
        if value < 0:
            raise ValueError(f"Value must be non-negative, got {value}")
        if value == 0:
            return "0"
        digits: list[str] = []
        while value:
            value, digit = divmod(value, 10)
            digits.append(chr(ord("0") + digit))
        return "".join(reversed(digits))
