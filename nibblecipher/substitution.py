"""Key-dependent nibble substitution and nibble permutation."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .glibc_random import GlibcRandom

_MASK32 = 0xFFFFFFFF
_NIBBLES = 8


class Mode(Enum):
    """Direction of the substitution step."""

    CRYPT = 0
    DECRYPT = 1


def _shuffle(values: list, key: int) -> list:
    """Fisher-Yates shuffle driven by a generator seeded with the key."""
    gen = GlibcRandom(key)
    for i in range(len(values) - 1, 0, -1):
        j = gen.rand() % (i + 1)
        values[i], values[j] = values[j], values[i]
    return values


def make_sbox(key: int) -> list[int]:
    """Return the 4-bit substitution table for a key."""
    return _shuffle(list(range(16)), key)


def make_inverse_sbox(key: int) -> list[int]:
    """Return the table that undoes ``make_sbox(key)``."""
    inverse = [0] * 16
    for index, value in enumerate(make_sbox(key)):
        inverse[value] = index
    return inverse


def make_pairs(key: int) -> tuple[tuple[int, int], ...]:
    """Return four disjoint pairs of nibble positions to swap."""
    indices = _shuffle(list(range(_NIBBLES)), key)
    return tuple(zip(indices[::2], indices[1::2]))


def _substitute_block(block: int, table: list[int]) -> int:
    result = 0
    for shift in range(0, 32, 4):
        result |= table[(block >> shift) & 0xF] << shift
    return result


def substitute(blocks: Iterable[int], key: int, mode: Mode) -> list[int]:
    """Replace every nibble of every block through the key's table."""
    table = make_sbox(key) if Mode(mode) is Mode.CRYPT else make_inverse_sbox(key)
    return [_substitute_block(block & _MASK32, table) for block in blocks]


def _permute_block(block: int, pairs: tuple[tuple[int, int], ...]) -> int:
    for a, b in pairs:
        shift_a, shift_b = a * 4, b * 4
        nibble_a = (block >> shift_a) & 0xF
        nibble_b = (block >> shift_b) & 0xF
        block = (block & ~(0xF << shift_a) & _MASK32) | (nibble_b << shift_a)
        block = (block & ~(0xF << shift_b) & _MASK32) | (nibble_a << shift_b)
    return block


def permute(blocks: Iterable[int], key: int) -> list[int]:
    """Swap nibble pairs in every block; applying it twice restores the input."""
    pairs = make_pairs(key)
    return [_permute_block(block & _MASK32, pairs) for block in blocks]