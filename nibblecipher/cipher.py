"""The three-round block cipher: whitening, substitution and permutation."""

from __future__ import annotations

from collections.abc import Iterable

from .blocks import bytes_to_blocks, hex_to_bytes, text_to_blocks
from .keys import build_block_key, decrypt_round_keys, derive_key
from .output import blocks_to_hex, blocks_to_text
from .substitution import Mode, permute, substitute

_MASK32 = 0xFFFFFFFF
ROUNDS = 3
MAX_KEY_LENGTH = 4


def _key_value(key: int | str | bytes) -> int:
    """Turn a key given as text or as a number into a 32-bit value."""
    if isinstance(key, int):
        return key & _MASK32
    raw = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    if len(raw) > MAX_KEY_LENGTH:
        raise ValueError("key is longer than 32 bits")
    return build_block_key(raw)


def encrypt_blocks(blocks: Iterable[int], key: int) -> list[int]:
    """Run the three encryption rounds over the blocks."""
    state = [block & _MASK32 for block in blocks]
    key &= _MASK32
    for round_number in range(ROUNDS):
        state = [block ^ key for block in state]
        state = substitute(state, key, Mode.CRYPT)
        state = permute(state, key)
        key = derive_key(key, round_number + 1)
    return state


def decrypt_blocks(blocks: Iterable[int], key: int) -> list[int]:
    """Undo ``encrypt_blocks`` with the same key."""
    state = [block & _MASK32 for block in blocks]
    for round_key in reversed(decrypt_round_keys(key)):
        state = permute(state, round_key)
        state = substitute(state, round_key, Mode.DECRYPT)
        state = [block ^ round_key for block in state]
    return state


def encrypt(text: str | bytes, key: int | str | bytes) -> str:
    """Encrypt text and return the ciphertext as upper-case hexadecimal.

    The text is padded with ``~`` to a multiple of four bytes.
    """
    key_value = _key_value(key)
    return blocks_to_hex(encrypt_blocks(text_to_blocks(text), key_value))


def decrypt(hex_text: str | bytes, key: int | str | bytes) -> bytes:
    """Decrypt hexadecimal ciphertext and return the raw plaintext bytes.

    Raises ``ValueError`` if the ciphertext is not an even-length string
    of hexadecimal digits.
    """
    key_value = _key_value(key)
    if isinstance(hex_text, (bytes, bytearray)):
        hex_text = bytes(hex_text).decode("latin-1")
    data = hex_to_bytes(hex_text)
    return blocks_to_text(decrypt_blocks(bytes_to_blocks(data), key_value))