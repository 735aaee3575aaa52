import pytest

from cubcaster.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xFF0000),
        ("navy blue", 0x80),
        ("snow4", 0x8B8989),
        ("gray50", 0x7F7F7F),
        ("darkgray", 0xA9A9A9),
        ("turquoise", 0x40E0D0),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Navy Blue") == lookup_color("navyblue")


def test_first_entry_wins_for_repeated_names():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("NONE") == -1


def test_unknown_name_gives_zero():
    assert lookup_color("no such colour") == 0
    assert lookup_color("") == 0


@pytest.mark.parametrize("level", range(0, 101))
def test_gray_and_grey_agree(level):
    gray = lookup_color(f"gray{level}")
    assert gray == lookup_color(f"grey{level}")
    red, green, blue = gray >> 16, (gray >> 8) & 0xFF, gray & 0xFF
    assert red == green == blue


def test_gray_scale_is_increasing():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("ghost white", "ghostwhite"),
        ("misty rose", "mistyrose"),
        ("dim gray", "dimgrey"),
        ("light coral", "lightcoral"),
        ("dark red", "darkred"),
    ],
)
def test_aliases_share_a_value(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)


def test_first_shade_matches_base_color():
    for family in ("red", "gold", "orchid", "ivory", "cyan"):
        assert lookup_color(f"{family}1") == lookup_color(family)


def test_values_fit_in_24_bits():
    for name in ("white", "thistle4", "lightgreen", "gray100", "mediumpurple3"):
        assert 0 <= lookup_color(name) <= 0xFFFFFF