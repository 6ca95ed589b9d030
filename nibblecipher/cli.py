"""Command-line entry point: encrypt or decrypt a file with a short key."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .cipher import MAX_KEY_LENGTH, decrypt, encrypt
from .output import DEFAULT_RESULT_PATH, write_result

ENCRYPT_CHOICE = 1
DECRYPT_CHOICE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nibblecipher",
        description="Encrypt a file to hexadecimal or decrypt hexadecimal back to text.",
    )
    parser.add_argument("-f", "--file", help="file to read")
    parser.add_argument("-k", "--key", help=f"key of at most {MAX_KEY_LENGTH} bytes")
    parser.add_argument(
        "-m",
        "--mode",
        type=int,
        help=f"{ENCRYPT_CHOICE} to encrypt, {DECRYPT_CHOICE} to decrypt",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_RESULT_PATH,
        help=f"where the result is written (default {DEFAULT_RESULT_PATH})",
    )
    return parser


def _ask(prompt: str) -> str | None:
    """Print a prompt and read one whitespace-delimited word from stdin."""
    print(prompt)
    try:
        line = input()
    except EOFError:
        return None
    words = line.split()
    return words[0] if words else None


def _emit_bytes(data: bytes) -> None:
    sys.stdout.flush()
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(data.decode("latin-1"))
        sys.stdout.flush()
        return
    buffer.write(data)
    buffer.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program and return its exit status."""
    args = _build_parser().parse_args(argv)

    filename = args.file if args.file is not None else _ask("enter the file name:")
    if filename is None:
        print("no file name given", file=sys.stderr)
        return 1
    key = args.key if args.key is not None else _ask("enter the key:")
    if key is None:
        print("no key given", file=sys.stderr)
        return 1

    try:
        with open(filename, "rb") as handle:
            content = handle.read().split(b"\0", 1)[0]
    except OSError as error:
        print(f"cannot open file: {error}", file=sys.stderr)
        return 1

    if len(key.encode("utf-8")) > MAX_KEY_LENGTH:
        print("key is longer than 32 bits")
        return 0

    choice = args.mode
    if choice is None:
        answer = _ask(f"choose the mode:\n {ENCRYPT_CHOICE} - Encrypt\n {DECRYPT_CHOICE} - Decrypt")
        try:
            choice = int(answer) if answer is not None else 0
        except ValueError:
            choice = 0

    if choice == ENCRYPT_CHOICE:
        result = encrypt(content, key)
        print(result)
        write_result(result, args.output)
    elif choice == DECRYPT_CHOICE:
        try:
            plain = decrypt(content.decode("latin-1"), key)
        except ValueError as error:
            print(f"cannot decrypt: {error}", file=sys.stderr)
            return 1
        _emit_bytes(plain + b"\n")
        write_result(plain, args.output)
    else:
        print("invalid choice")
    return 0