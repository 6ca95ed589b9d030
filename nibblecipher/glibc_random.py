"""Reproducible pseudo-random numbers matching the GNU C library's ``rand``."""

from __future__ import annotations

from collections import deque

_MASK32 = 0xFFFFFFFF
_DEGREE = 31
_SEPARATION = 3
_DISCARD = _DEGREE * 10
_MODULUS = 2147483647


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _trunc_divmod(numerator: int, denominator: int) -> tuple[int, int]:
    """Divide with truncation towards zero, as C integer division does."""
    quotient = abs(numerator) // denominator
    if numerator < 0:
        quotient = -quotient
    return quotient, numerator - quotient * denominator


class GlibcRandom:
    """Additive feedback generator seeded like ``srand`` and drawn like ``rand``."""

    def __init__(self, seed: int) -> None:
        seed &= _MASK32
        if seed == 0:
            seed = 1
        word = _to_int32(seed)
        initial = [word]
        for _ in range(_DEGREE - 1):
            hi, lo = _trunc_divmod(word, 127773)
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += _MODULUS
            initial.append(word)
        values = [value & _MASK32 for value in initial]
        values.extend(values[:_SEPARATION])
        self._state: deque[int] = deque(values, maxlen=_DEGREE + _SEPARATION)
        for _ in range(_DISCARD):
            self._advance()

    def _advance(self) -> int:
        value = (self._state[-_DEGREE] + self._state[-_SEPARATION]) & _MASK32
        self._state.append(value)
        return value

    def rand(self) -> int:
        """Return the next value in the range 0 .. 2**31 - 1."""
        return self._advance() >> 1