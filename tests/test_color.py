import pytest

from m3_theme_generator.color import (
    InvalidColorFormat,
    argb_to_rgb,
    hex_to_rgb,
    mix_colors,
    rgb_to_argb,
    rgb_to_hex,
)


# ──────────────────────────────────────────────────────────────────────────────
# Parsing and formatting
# ──────────────────────────────────────────────────────────────────────────────
def test_hex_to_rgb_long_form_is_case_insensitive():
    assert hex_to_rgb("#6750a4") == (103, 80, 164)
    assert hex_to_rgb("#6750A4") == (103, 80, 164)


def test_hex_to_rgb_shorthand_doubles_digits():
    assert hex_to_rgb("#abc") == (0xAA, 0xBB, 0xCC)
    assert hex_to_rgb("#FFF") == (255, 255, 255)


@pytest.mark.parametrize(
    "value",
    [
        "6750a4",
        "#6750a",
        "#6750a4f",
        "#1234",
        "#ggg",
        "#",
        "",
        "not-a-color",
        "#6750a4\n",
        "#abc\n",
        " #abc",
        None,
        0x6750A4,
    ],
)
def test_hex_to_rgb_rejects_malformed_values(value):
    with pytest.raises(InvalidColorFormat) as excinfo:
        hex_to_rgb(value)
    assert excinfo.value.value == value


def test_invalid_color_format_is_a_value_error():
    with pytest.raises(ValueError):
        hex_to_rgb("#12")


def test_rgb_to_hex_pads_and_lowercases():
    assert rgb_to_hex(0, 0, 0) == "#000000"
    assert rgb_to_hex(10, 11, 12) == "#0a0b0c"
    assert rgb_to_hex(255, 171, 205) == "#ffabcd"


def test_rgb_to_hex_rejects_out_of_range_channels():
    with pytest.raises(InvalidColorFormat):
        rgb_to_hex(256, 0, 0)
    with pytest.raises(InvalidColorFormat):
        rgb_to_hex(0, -1, 0)


@pytest.mark.parametrize("value", ["#6750A4", "#FFFFFF", "#000000", "#0a0B0c"])
def test_format_inverts_parse(value):
    assert rgb_to_hex(*hex_to_rgb(value)) == value.lower()


def test_argb_conversions():
    assert rgb_to_argb(0x67, 0x50, 0xA4) == 0xFF6750A4
    assert argb_to_rgb(0xFF6750A4) == (0x67, 0x50, 0xA4)
    assert argb_to_rgb(rgb_to_argb(1, 2, 3)) == (1, 2, 3)


# ──────────────────────────────────────────────────────────────────────────────
# Mixing
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("weight", [0.0, 0.1, 0.25, 0.5, 0.6, 0.99, 1.0])
def test_mixing_a_color_with_itself_is_a_no_op(weight):
    assert mix_colors("#6750a4", "#6750a4", weight) == "#6750a4"
    assert mix_colors("#fffbfe", "#fffbfe", weight) == "#fffbfe"


def test_weight_is_the_proportion_of_the_first_color():
    assert mix_colors("#000000", "#ffffff", 1.0) == "#000000"
    assert mix_colors("#000000", "#ffffff", 0.0) == "#ffffff"


def test_mix_interpolates_each_channel():
    assert mix_colors("#000000", "#646464", 0.6) == "#282828"
    assert mix_colors("#000000", "#646464", 0.4) == "#3c3c3c"
    assert mix_colors("#ff0000", "#0000ff", 0.5) == "#800080"


def test_mix_rounds_ties_up():
    assert mix_colors("#000000", "#010101", 0.5) == "#010101"
    assert mix_colors("#000000", "#ffffff", 0.5) == "#808080"
    assert mix_colors("#020202", "#030303", 0.5) == "#030303"


def test_mix_accepts_shorthand_colors():
    assert mix_colors("#fff", "#000", 1.0) == "#ffffff"


def test_mix_returns_none_for_unparseable_colors():
    assert mix_colors("bogus", "#ffffff", 0.5) is None
    assert mix_colors("#ffffff", "#12", 0.5) is None
    assert mix_colors("#abc\n", "#ffffff", 0.5) is None
    assert mix_colors("#000000", "#6750a4\n", 0.5) is None
