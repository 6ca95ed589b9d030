import pytest

from nibblecipher.output import (
    blocks_to_hex,
    blocks_to_text,
    format_binary,
    write_result,
)


def test_format_binary_is_32_bits_wide():
    result = format_binary(5)
    assert len(result) == 32
    assert result.endswith("101")
    assert set(result[:-3]) == {"0"}


def test_format_binary_all_ones():
    assert format_binary(0xFFFFFFFF) == "1" * 32


def test_format_binary_round_trips_through_int():
    for value in (0, 1, 0x80000000, 0x12345678):
        assert int(format_binary(value), 2) == value


def test_blocks_to_hex_uses_uppercase_and_zero_padding():
    assert blocks_to_hex([0x0000000A, 0x48656C6C]) == "0000000A48656C6C"


def test_blocks_to_hex_empty():
    assert blocks_to_hex([]) == ""


def test_blocks_to_text_is_big_endian():
    assert blocks_to_text([0x48656C6C, 0x6F212121]) == b"Hello!!!"


def test_blocks_to_text_keeps_zero_bytes():
    assert blocks_to_text([0x41000042]) == b"A\x00\x00B"


def test_hex_and_text_agree():
    blocks = [0xDEADBEEF, 0x01020304]
    assert bytes.fromhex(blocks_to_hex(blocks)) == blocks_to_text(blocks)


def test_write_result_appends_newline(tmp_path):
    target = tmp_path / "out.txt"
    write_result("ABCD", target)
    assert target.read_bytes() == b"ABCD\n"


def test_write_result_overwrites_and_accepts_bytes(tmp_path):
    target = tmp_path / "out.txt"
    target.write_bytes(b"old content that is long")
    write_result(b"\x00\xff", target)
    assert target.read_bytes() == b"\x00\xff\n"


def test_write_result_default_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    hex_text = blocks_to_hex([0x0000000A])
    assert hex_text == "0000000A"
    write_result(hex_text)
    assert sorted(path.name for path in tmp_path.iterdir()) == ["result.txt"]
    assert (tmp_path / "result.txt").read_bytes() == b"0000000A\n"


def test_write_result_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_result("X", tmp_path / "missing" / "out.txt")