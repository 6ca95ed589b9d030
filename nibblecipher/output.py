"""Rendering of cipher blocks as binary, hexadecimal or raw text."""

from __future__ import annotations

import os
from collections.abc import Iterable

_MASK32 = 0xFFFFFFFF
DEFAULT_RESULT_PATH = "result.txt"


def format_binary(num: int) -> str:
    """Return the 32 bits of a value, most significant first."""
    return format(num & _MASK32, "032b")


def blocks_to_hex(blocks: Iterable[int]) -> str:
    """Render blocks as upper-case hexadecimal, four big-endian bytes each."""
    return "".join(format(block & _MASK32, "08X") for block in blocks)


def blocks_to_text(blocks: Iterable[int]) -> bytes:
    """Return the raw big-endian bytes held by the blocks."""
    return b"".join((block & _MASK32).to_bytes(4, "big") for block in blocks)


def write_result(
    text: str | bytes, path: str | os.PathLike[str] = DEFAULT_RESULT_PATH
) -> None:
    """Write text followed by a newline to ``path``, replacing any old content."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    with open(path, "wb") as handle:
        handle.write(data + b"\n")