import pytest

from svparse.parser import parse_bytes, parse_file
from svparse.reader import decode_lines, read_lines, split_lines


def test_split_lines_drops_blank_lines():
    assert split_lines("a,b\r\n\r\n1,2\r  \n3,4\n") == ["a,b", "1,2", "3,4"]


def test_decode_lines_strips_utf8_bom():
    lines, _ = decode_lines(b"\xef\xbb\xbfa,b\n1,2\n")
    assert lines == ["a,b", "1,2"]


def test_read_lines(tmp_path):
    path = tmp_path / "data.csv"
    path.write_bytes("id|name\n\n1|Ann\n".encode("utf-8"))
    lines, _ = read_lines(path)
    assert lines == ["id|name", "1|Ann"]


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.csv")


def test_parse_file(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("a,b,c\n1,2,3\n", encoding="utf-8")
    table = parse_file(path)
    assert table.headers == ("a", "b", "c")
    assert table.field(0, "c") == "3"


def test_parse_bytes():
    table, encoding = parse_bytes(b"x::y\n1::2\n", has_headers=False)
    assert table.separator == ":"
    assert len(table) == 2
    assert encoding
