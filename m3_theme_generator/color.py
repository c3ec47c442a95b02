import re

import numpy as np

HEX_COLOR_PATTERN = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class InvalidColorFormat(ValueError):
    """Raised when a value is not a #rgb or #rrggbb hex color."""

    def __init__(self, value, message=None):
        self.value = value
        super().__init__(message or f"Invalid hex color: {value!r}")


def rgb_to_hex(r, g, b):
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise InvalidColorFormat((r, g, b), f"RGB channel out of range: {(r, g, b)}")
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    """Parse a #rgb or #rrggbb string into an (r, g, b) tuple.

    Shorthand digits are doubled, so "#abc" parses like "#aabbcc".
    """
    if not isinstance(hex_color, str) or not HEX_COLOR_PATTERN.fullmatch(hex_color):
        raise InvalidColorFormat(hex_color)

    digits = hex_color[1:]
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))


def argb_to_rgb(argb):
    return (argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF


def rgb_to_argb(r, g, b):
    return 0xFF000000 | (r << 16) | (g << 8) | b


def mix_colors(color1, color2, weight):
    """Mix two hex colors the way Sass's color.mix does.

    Args:
        color1: First hex color
        color2: Second hex color
        weight: Proportion of color1 in the mixture (0.0-1.0)

    Returns:
        The mixed color as lowercase hex, or None if either input is not a
        valid hex color.
    """
    normalized_weight = weight * 2 - 1
    weight1 = (normalized_weight + 1) / 2
    weight2 = 1 - weight1

    try:
        rgb1 = np.array(hex_to_rgb(color1), dtype=float)
        rgb2 = np.array(hex_to_rgb(color2), dtype=float)
    except InvalidColorFormat:
        return None

    # Ties round up, like JavaScript's Math.round
    mixed = np.floor(rgb1 * weight1 + rgb2 * weight2 + 0.5).astype(int)
    return rgb_to_hex(*mixed.tolist())
