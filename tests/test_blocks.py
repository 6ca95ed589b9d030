import pytest

from nibblecipher.blocks import (
    build_block,
    bytes_to_blocks,
    hex_char_to_int,
    hex_to_bytes,
    text_to_blocks,
)


def test_build_block_is_big_endian():
    assert build_block(b"ABCD") == 0x41424344


def test_build_block_sign_extends_high_bytes():
    assert build_block(b"\x00\x00\x80\x00") == 0xFFFF8000


def test_build_block_rejects_wrong_length():
    with pytest.raises(ValueError):
        build_block(b"ABC")


def test_ascii_blocks_agree_with_byte_packing():
    assert build_block(b"wxyz") == bytes_to_blocks(b"wxyz")[0]


def test_text_to_blocks_pads_with_tilde():
    assert text_to_blocks("ABCDE") == bytes_to_blocks(b"ABCDE~~~")


def test_text_to_blocks_exact_multiple_has_no_padding_block():
    assert text_to_blocks("ABCDEFGH") == bytes_to_blocks(b"ABCDEFGH")


def test_text_to_blocks_empty():
    assert text_to_blocks("") == []


def test_text_to_blocks_accepts_bytes():
    assert text_to_blocks(b"hello") == text_to_blocks("hello")


def test_text_to_blocks_stops_at_nul():
    assert text_to_blocks("abc\0def") == text_to_blocks("abc")


@pytest.mark.parametrize("text", ["a", "ab", "abc", "abcd", "abcde", "hello world!"])
def test_text_to_blocks_count(text):
    assert len(text_to_blocks(text)) == (len(text) + 3) // 4


@pytest.mark.parametrize(
    "char, value",
    [("0", 0), ("9", 9), ("a", 10), ("f", 15), ("A", 10), ("F", 15)],
)
def test_hex_char_to_int(char, value):
    assert hex_char_to_int(char) == value


@pytest.mark.parametrize("char", ["g", "G", " ", "", "ab"])
def test_hex_char_to_int_rejects_invalid(char):
    with pytest.raises(ValueError):
        hex_char_to_int(char)


def test_hex_to_bytes_decodes_example():
    assert hex_to_bytes("48656C") == b"Hel"


def test_hex_to_bytes_mixed_case_matches_builtin():
    assert hex_to_bytes("deADbeEF") == bytes.fromhex("deadbeef")


def test_hex_to_bytes_rejects_odd_length():
    with pytest.raises(ValueError):
        hex_to_bytes("ABC")


def test_hex_to_bytes_rejects_bad_digit():
    with pytest.raises(ValueError):
        hex_to_bytes("4G")


def test_hex_to_bytes_rejects_trailing_newline():
    with pytest.raises(ValueError):
        hex_to_bytes("4865\n")


def test_bytes_to_blocks_zero_fills_last_block():
    assert bytes_to_blocks(b"\x01") == [0x01000000]


def test_bytes_to_blocks_round_trip():
    data = bytes(range(16))
    blocks = bytes_to_blocks(data)
    assert b"".join(block.to_bytes(4, "big") for block in blocks) == data