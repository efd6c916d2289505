import pytest

from cubcaster.xpm import (
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm,
    parse_xpm_text,
    strip_comments,
    text_to_rgb,
)

SMALL = ["2 2 2 1", ". c #FF0000", "# c None", ".#", "#."]

XPM_FILE = """/* XPM */
static char *tex[] = {
/* columns rows colors chars-per-pixel */
"2 1 2 1 ",
"a c red",
"b c #00FF00", // green
/* pixels */
"ab"
};
"""


def test_hex_colour_taken_from_text():
    assert text_to_rgb("#FF8000") == 0xFF8000


def test_named_colour():
    assert text_to_rgb("red") == 0xFF0000


def test_named_colour_with_second_word():
    assert text_to_rgb("Light", "Blue") == 0xADD8E6


def test_none_is_transparent_marker():
    assert text_to_rgb("None") == -1


def test_unknown_name_gives_zero():
    assert text_to_rgb("notacolour") == 0


def test_parse_small_image():
    image = parse_xpm(SMALL)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == 0xFF000000
    assert image.pixel(0, 1) == 0xFF000000
    assert image.pixel(1, 1) == 0xFF0000


def test_pixel_outside_image():
    image = parse_xpm(SMALL)
    with pytest.raises(IndexError):
        image.pixel(2, 0)


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixel(0, 0) == 0xFF


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "aaa c red", "aaa c blue", "aaa"])
    assert image.pixel(0, 0) == 0xFF0000


def test_unknown_pixel_key_is_zero():
    image = parse_xpm(["2 1 1 1", "a c red", "az"])
    assert image.pixels == (0xFF0000, 0)


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        [],
        ["1 1 1 1", "a x red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
    ],
)
def test_malformed_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_strip_comments_keeps_length_and_quotes():
    text = 'x /* gone */ "a /* kept */" // tail\ny'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "gone" not in stripped
    assert "tail" not in stripped
    assert '"a /* kept */"' in stripped
    assert stripped.endswith("y")


def test_parse_file_text():
    image = parse_xpm_text(XPM_FILE)
    assert image == XpmImage(2, 1, (0xFF0000, 0x00FF00))


def test_load_xpm_from_disk(tmp_path):
    path = tmp_path / "tex.xpm"
    path.write_text(XPM_FILE)
    assert load_xpm(path) == parse_xpm_text(XPM_FILE)


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "missing.xpm")