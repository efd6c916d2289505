import io

import pytest

from cubcaster.textutil import atoi, read_lines, split, trim


def test_split_drops_empty_pieces():
    assert split("  tripouille   hello you   ", " ") == ["tripouille", "hello", "you"]


def test_split_only_separators_gives_empty_list():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_without_separator_returns_whole():
    assert split("abc", ",") == ["abc"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_split_pieces_contain_no_separator():
    pieces = split("a\n\nbb\nccc\n", "\n")
    assert all("\n" not in p and p for p in pieces)
    assert "".join(pieces) == "abbccc"


def test_trim_both_ends():
    assert trim("  NO ./path.xpm  ", " ") == "NO ./path.xpm"


def test_trim_all_chars_gives_empty():
    assert trim("          ", " ") == ""


def test_trim_multiple_chars_in_set():
    assert trim("\n\nmap\n", "\n") == "map"


def test_trim_empty_set_leaves_text():
    assert trim("  a  ", "") == "  a  "


def test_atoi_plain_and_signed():
    assert atoi("255") == 255
    assert atoi("  -42abc") == -42
    assert atoi("+7") == 7


def test_atoi_double_sign_is_zero():
    assert atoi("   -+342iniwn232") == 0


def test_atoi_no_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0


def test_atoi_skips_control_whitespace():
    assert atoi("\t\n\v\f\r 12") == 12


def test_read_lines_keeps_newlines():
    stream = io.StringIO("NO ./a.xpm\nSO ./b.xpm\n111")
    assert list(read_lines(stream)) == ["NO ./a.xpm\n", "SO ./b.xpm\n", "111"]


def test_read_lines_round_trip_long_text():
    text = "".join(f"line {n}\n" for n in range(2000))
    lines = list(read_lines(io.StringIO(text)))
    assert "".join(lines) == text
    assert len(lines) == 2000


def test_read_lines_empty_stream():
    assert list(read_lines(io.StringIO(""))) == []


def test_read_lines_bytes():
    stream = io.BytesIO(b"a\n\nb")
    assert list(read_lines(stream)) == [b"a\n", b"\n", b"b"]