import pytest

from cubcaster.colors import lookup_color


@pytest.mark.parametrize(
    "name, value",
    [
        ("snow", 0xFFFAFA),
        ("red", 0xFF0000),
        ("black", 0x0),
        ("navy", 0x80),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_values(name, value):
    assert lookup_color(name) == value


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1


@pytest.mark.parametrize("name", ["SNOW", "Snow", "sNoW"])
def test_case_insensitive(name):
    assert lookup_color(name) == lookup_color("snow")


def test_spaced_and_joined_names_agree():
    assert lookup_color("ghost white") == lookup_color("ghostwhite")
    assert lookup_color("Light Goldenrod Yellow".replace(" ", "")) == lookup_color(
        "lightgoldenrodyellow"
    )


def test_first_duplicate_entry_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("level", [0, 1, 17, 50, 99, 100])
def test_gray_and_grey_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_scale_is_neutral_and_increasing():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    for v in values:
        assert (v >> 16) & 0xFF == (v >> 8) & 0xFF == v & 0xFF
    assert values[0] == 0x0
    assert values[-1] == 0xFFFFFF


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_whitespace_is_significant():
    with pytest.raises(KeyError):
        lookup_color(" snow")


def test_numbered_first_variant_matches_base():
    assert lookup_color("red1") == lookup_color("red")
    assert lookup_color("white") == lookup_color("gray100")