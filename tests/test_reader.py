import io

import pytest

from cubmap.reader import iter_lines, read_map_file

TEXT = "NO ./north.xpm\nSO ./south.xpm\n\n111\n1N1\n111"


@pytest.mark.parametrize("size", [1, 2, 3, 7, 42, 1000])
def test_iter_lines_matches_splitlines(size):
    lines = list(iter_lines(io.StringIO(TEXT), size))
    assert lines == TEXT.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 5, 42])
def test_iter_lines_round_trip(size):
    text = "a\n\nbb\nccc\n"
    assert "".join(iter_lines(io.StringIO(text), size)) == text


def test_last_line_without_newline_is_kept():
    assert list(iter_lines(io.StringIO("first\nlast"))) == ["first\n", "last"]


def test_empty_stream_yields_nothing():
    assert list(iter_lines(io.StringIO(""))) == []


def test_binary_stream():
    assert list(iter_lines(io.BytesIO(b"a\nb"), 1)) == [b"a\n", b"b"]


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        list(iter_lines(io.StringIO("x\n"), size))


def test_read_map_file(tmp_path):
    path = tmp_path / "level.cub"
    path.write_text(TEXT, encoding="latin-1")
    assert read_map_file(path) == TEXT.splitlines(keepends=True)


def test_read_map_file_keeps_carriage_returns(tmp_path):
    path = tmp_path / "crlf.cub"
    path.write_bytes(b"a\r\nb\n")
    assert read_map_file(path) == ["a\r\n", "b\n"]


def test_read_map_file_missing(tmp_path):
    with pytest.raises(OSError):
        read_map_file(tmp_path / "absent.cub")