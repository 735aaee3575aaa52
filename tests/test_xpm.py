import pytest

from cubcaster.xpm import (
    TRANSPARENT,
    Image,
    XpmError,
    load_xpm,
    parse_xpm,
    parse_xpm_text,
    strip_comments,
    text_to_rgb,
)

XPM_FILE = """/* XPM */
static char *tex[] = {
/* columns rows colors chars-per-pixel */
"2 1 2 1",
"a c #102030",
"b c None",
// pixels
"ab"
};
"""


def test_parse_two_by_two():
    image = parse_xpm(["2 2 2 1", ". c #FF0000", "# c blue", ".#", "#."])
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == 0x0000FF
    assert image.pixel(0, 1) == 0x0000FF
    assert image.pixel(1, 1) == 0xFF0000


def test_none_color_is_transparent():
    image = parse_xpm(["1 1 1 1", "a c none", "a"])
    assert image.pixel(0, 0) == TRANSPARENT == 0xFF000000


def test_two_chars_per_pixel():
    image = parse_xpm(["2 1 2 2", "aa c red", "bb c blue", "bbaa"])
    assert image.pixel(0, 0) == 0x0000FF
    assert image.pixel(1, 0) == 0xFF0000


def test_short_codes_later_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixel(0, 0) == 0x0000FF


def test_long_codes_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.pixel(0, 0) == 0xFF0000


def test_unknown_pixel_code_reads_as_zero():
    image = parse_xpm(["1 1 1 1", "a c red", "z"])
    assert image.pixel(0, 0) == 0


def test_two_word_color_name():
    image = parse_xpm(["1 1 1 1", "a c light blue", "a"])
    assert image.pixel(0, 0) == 0xADD8E6


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["2 2", "a c red", "aa", "aa"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["1 1 2 1", "a c red"],
        [],
    ],
)
def test_malformed_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_strip_comments_keeps_length_and_quoted_text():
    text = 'a /* x */ "b/*c" // d\n"e"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert '"b/*c"' in result
    assert '"e"' in result
    assert "x" not in result
    assert " d" not in result


def test_parse_xpm_text_file_syntax():
    image = parse_xpm_text(XPM_FILE)
    assert (image.width, image.height) == (2, 1)
    assert image.pixel(0, 0) == 0x102030
    assert image.pixel(1, 0) == TRANSPARENT


def test_load_xpm(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(XPM_FILE)
    image = load_xpm(path)
    assert image.pixels == parse_xpm_text(XPM_FILE).pixels


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "missing.xpm")


def test_text_to_rgb():
    assert text_to_rgb("#00ff00", None) == 0x00FF00
    assert text_to_rgb("light", "blue") == 0xADD8E6
    assert text_to_rgb("LIGHT", "BLUE") == 0xADD8E6
    assert text_to_rgb("nosuchcolour", None) == 0
    assert text_to_rgb("#zz", None) == 0


def test_image_put_and_pixel_round_trip():
    image = Image(3, 2)
    image.put(2, 1, 0x123456)
    assert image.pixel(2, 1) == 0x123456
    assert image.pixels.count(0) == 5


def test_image_outside_reads_zero_and_put_raises():
    image = Image(1, 1, [7])
    assert image.pixel(0, 0) == 7
    assert image.pixel(1, 0) == 0
    assert image.pixel(0, -1) == 0
    with pytest.raises(IndexError):
        image.put(1, 0, 5)


def test_image_put_keeps_32_bits():
    image = Image(1, 1)
    image.put(0, 0, -1)
    assert image.pixel(0, 0) == 0xFFFFFFFF


def test_image_pixel_count_mismatch():
    with pytest.raises(ValueError):
        Image(2, 2, [1, 2, 3])