"""Key construction and per-round key derivation."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_ROUND_CONSTANT = 0xA5A5A5A5
DECRYPT_ROUNDS = 3


def build_block_key(text: str | bytes) -> int:
    """Pack the first four characters of a key into a 32-bit value.

    Characters are treated as signed chars, so bytes of 0x80 and above are
    sign-extended before being shifted into place.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    data = data.split(b"\0", 1)[0][:4]
    block = 0
    for index, byte in enumerate(data):
        signed = byte - 256 if byte >= 128 else byte
        block |= ((signed & _MASK32) << (24 - 8 * index)) & _MASK32
    return block


def derive_key(key: int, round_number: int) -> int:
    """Rotate the key left by the round number and mix in a round constant."""
    if not 0 <= round_number < 32:
        raise ValueError(f"round number must be between 0 and 31, got {round_number}")
    key &= _MASK32
    rotated = ((key << round_number) | (key >> (32 - round_number))) & _MASK32
    return rotated ^ ((_ROUND_CONSTANT * round_number) & _MASK32)


def decrypt_round_keys(key: int) -> list[int]:
    """Return the keys used by the three encryption rounds, in round order."""
    keys = [key & _MASK32]
    for round_number in range(1, DECRYPT_ROUNDS):
        keys.append(derive_key(keys[-1], round_number))
    return keys