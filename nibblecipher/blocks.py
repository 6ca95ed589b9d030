"""Conversion between text, hexadecimal strings and 32-bit big-endian blocks."""

from __future__ import annotations

from collections.abc import Iterable

_MASK32 = 0xFFFFFFFF
PAD_BYTE = b"~"
BLOCK_SIZE = 4


def _signed_char(byte: int) -> int:
    """Interpret a byte as a signed ``char``."""
    return byte - 256 if byte >= 128 else byte


def _as_c_string(text: str | bytes) -> bytes:
    """Encode text and cut it at the first NUL, as a C string would end."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return data.split(b"\0", 1)[0]


def build_block(chunk: bytes) -> int:
    """Pack four bytes into one block, treating each byte as a signed char.

    Bytes of 0x80 and above are sign-extended before being combined, so
    they also set the higher bits of the block.
    """
    if len(chunk) != BLOCK_SIZE:
        raise ValueError(f"a block needs exactly {BLOCK_SIZE} bytes, got {len(chunk)}")
    value = 0
    for byte, shift in zip(chunk, (24, 16, 8, 0)):
        value |= _signed_char(byte) << shift
    return value & _MASK32


def text_to_blocks(text: str | bytes) -> list[int]:
    """Split text into 4-byte blocks, padding the last one with ``~``."""
    data = _as_c_string(text)
    remainder = len(data) % BLOCK_SIZE
    if remainder:
        data += PAD_BYTE * (BLOCK_SIZE - remainder)
    return [build_block(data[start:start + BLOCK_SIZE]) for start in range(0, len(data), BLOCK_SIZE)]


def hex_char_to_int(char: str) -> int:
    """Return the value 0-15 of one hexadecimal digit."""
    if len(char) == 1:
        if "0" <= char <= "9":
            return ord(char) - ord("0")
        if "a" <= char <= "f":
            return 10 + ord(char) - ord("a")
        if "A" <= char <= "F":
            return 10 + ord(char) - ord("A")
    raise ValueError(f"not a hexadecimal digit: {char!r}")


def hex_to_bytes(hex_str: str) -> bytes:
    """Decode a string of hexadecimal digit pairs, with no separators allowed."""
    if len(hex_str) % 2:
        raise ValueError("hexadecimal string must have an even number of digits")
    return bytes(
        (hex_char_to_int(high) << 4) | hex_char_to_int(low)
        for high, low in zip(hex_str[::2], hex_str[1::2])
    )


def bytes_to_blocks(data: Iterable[int] | bytes) -> list[int]:
    """Pack bytes into big-endian blocks, zero-filling the last one."""
    raw = bytes(data)
    return [
        int.from_bytes(raw[start:start + BLOCK_SIZE].ljust(BLOCK_SIZE, b"\0"), "big")
        for start in range(0, len(raw), BLOCK_SIZE)
    ]