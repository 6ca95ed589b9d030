# nibblecipher

A small, self-contained block cipher for learning and experimentation.
Text is split into 32-bit blocks, and each of three rounds XORs every
block with a round key, passes its eight 4-bit nibbles through a
key-seeded S-box, and swaps nibbles in key-seeded pairs. Ciphertext is
written as uppercase hexadecimal.

**This is not a secure cipher.** Use it to study substitution–permutation
designs, never to protect real data.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
nibblecipher
```

Run with no options, the command asks for three things in turn:

1. the name of the file to read,
2. the key (at most four bytes, since it must fit in 32 bits),
3. the mode: `1` to encrypt, `2` to decrypt.

Each answer can instead be given as an option:

| Option | Meaning |
| --- | --- |
| `-f`, `--file` | file to read |
| `-k`, `--key` | key of at most four bytes |
| `-m`, `--mode` | `1` to encrypt, `2` to decrypt |
| `-o`, `--output` | where the result is written (default `result.txt`) |

For example:

```
nibblecipher -f message.txt -k abcd -m 1
nibblecipher -f result.txt -k abcd -m 2 -o plain.txt
```

When encrypting, the file holds plain text and the result is printed as
hexadecimal. When decrypting, the file holds that hexadecimal text and
the recovered bytes are printed. In both cases the result, followed by a
newline, is also written to the output file (`result.txt` in the current
directory unless `--output` says otherwise).

The file content is read only up to its first NUL byte. A key longer
than four bytes is rejected with the message `key is longer than 32 bits`
and nothing is written. A mode other than `1` or `2` prints
`invalid choice`. The command exits with status 1 if the file cannot be
opened, if no file name or key is given, or if the text to decrypt is not
an even-length string of hexadecimal digits.

Plain text whose length is not a multiple of four is padded with `~`
before encryption, so decrypted output may end in up to three `~`
characters.

## Library use

```python
from nibblecipher.cipher import decrypt, encrypt

ciphertext = encrypt("hello world", "abcd")   # -> uppercase hex string
plaintext = decrypt(ciphertext, "abcd")       # -> b"hello world~"
```

`encrypt` and `decrypt` take the key either as text or bytes of at most
four bytes (longer keys raise `ValueError`) or as a 32-bit integer, such
as one made by `nibblecipher.keys.build_block_key`. `decrypt` returns the
raw plaintext bytes and raises `ValueError` for malformed hexadecimal.
`encrypt_blocks` and `decrypt_blocks` run the rounds directly on lists of
32-bit integers.

The building blocks are available on their own:

- `nibblecipher.blocks` — packing text and bytes into 32-bit blocks
  (`build_block`, `text_to_blocks`, `bytes_to_blocks`) and parsing
  hexadecimal (`hex_char_to_int`, `hex_to_bytes`). Bytes of 0x80 and
  above in plain text and keys are treated as signed characters and
  sign-extended when packed.
- `nibblecipher.keys` — turning a short string into a 32-bit key
  (`build_block_key`) and deriving round keys (`derive_key`,
  `decrypt_round_keys`).
- `nibblecipher.substitution` — the key-seeded S-box and its inverse
  (`make_sbox`, `make_inverse_sbox`), the nibble pairing (`make_pairs`),
  and the round steps `substitute` (with `Mode.CRYPT` or `Mode.DECRYPT`)
  and `permute`, which undoes itself when applied twice.
- `nibblecipher.output` — rendering blocks as hexadecimal or bytes
  (`blocks_to_hex`, `blocks_to_text`), as a 32-character bit string
  (`format_binary`), and saving a result (`write_result`).
- `nibblecipher.glibc_random` — `GlibcRandom`, a seeded generator whose
  `rand()` sequence drives the S-box and permutation, so that the same
  key always yields the same tables.