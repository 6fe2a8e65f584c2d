import pytest

from cubmap.colors import lookup_color
from cubmap.xpm import (
    XpmError,
    find_unquoted,
    load_xpm,
    parse_xpm,
    parse_xpm_text,
    quoted_lines,
    split_words,
    strip_comments,
    text_color,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 2 1",
". c #FF0000",
"x c None",
/* pixels */
".x.",
"x.x"
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("  40 40\t2  1 ") == ["40", "40", "2", "1"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_find_unquoted_skips_quoted_text():
    text = '"ab" ab'
    assert find_unquoted(text, "ab") == text.rfind("ab")


def test_find_unquoted_missing():
    assert find_unquoted('"/*"', "/*") == -1


def test_find_unquoted_empty_needle():
    with pytest.raises(ValueError):
        find_unquoted("abc", "")


def test_strip_comments_keeps_length_and_strings():
    text = '/* head */ "a /* b */ c" // tail\n"d"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "head" not in result
    assert "tail" not in result
    assert list(quoted_lines(result)) == ["a /* b */ c", "d"]


def test_text_color_hex():
    assert text_color("#00FF00") == 0x00FF00


def test_text_color_names():
    assert text_color("Red") == lookup_color("red")
    assert text_color("dark", "red") == lookup_color("dark red")
    assert text_color("None") == -1
    assert text_color("nosuchcolour") == 0


def test_quoted_lines():
    assert list(quoted_lines('x "one" y "two"')) == ["one", "two"]


def test_parse_sample():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF000000
    assert image.get_pixel(0, 1) == 0xFF000000
    assert image.get_pixel(1, 1) == 0xFF0000


def test_big_endian_bytes():
    image = parse_xpm_text(SAMPLE, big_endian=True)
    assert bytes(image.data[0:4]) == (0xFF0000).to_bytes(4, "big")
    assert image.get_pixel(2, 0) == 0xFF0000


def test_short_codes_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #000011", "a c #000022", "a"])
    assert image.get_pixel(0, 0) == 0x000022


def test_long_codes_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #000011", "abc c #000022", "abc"])
    assert image.get_pixel(0, 0) == 0x000011


def test_unknown_pixel_code_is_black():
    image = parse_xpm(["2 1 1 1", "a c #123456", "az"])
    assert image.get_pixel(0, 0) == 0x123456
    assert image.get_pixel(1, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 1 1 1", "a c #000000", "a"],
        ["1 1 1", "a c #000000", "a"],
        ["1 1 1 1", "a #000000", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        ["1 1 2 1", "a c #000000"],
    ],
)
def test_invalid_xpm_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_load_xpm_round_trip(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(SAMPLE)
    loaded = load_xpm(path)
    assert bytes(loaded.data) == bytes(parse_xpm_text(SAMPLE).data)


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "missing.xpm")