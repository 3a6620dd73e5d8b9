"""Byte buffer helpers shared by the test modules."""

# Deterministic 16-byte buffer used by the concrete examples
SIXTEEN_BYTES = b"abcdefghijklmnop"


def invert(data: bytes, positions) -> bytes:
    """Bit-invert the bytes at the given positions."""
    buffer = bytearray(data)
    for position in positions:
        buffer[position] = ~buffer[position] & 0xFF
    return bytes(buffer)
