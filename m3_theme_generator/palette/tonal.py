import logging
import re

from materialyoucolor.hct import Hct
from materialyoucolor.scheme.scheme_content import SchemeContent

from ..color import InvalidColorFormat, argb_to_rgb, hex_to_rgb, rgb_to_argb, rgb_to_hex

logger = logging.getLogger(__name__)

# For each color, tonal palettes are created using these tones. The tonal
# palettes then get used to create the different color roles (ex. on-primary).
# https://m3.material.io/styles/color/system/how-the-system-works
HUE_TONES = [0, 10, 20, 25, 30, 35, 40, 50, 60, 70, 80, 90, 95, 98, 99, 100]

OVERRIDE_ROLES = ["secondary", "tertiary", "neutral"]


class InvalidSeedColor(InvalidColorFormat):
    """Raised when a seed color cannot be parsed."""

    def __init__(self, value, role="primary"):
        self.role = role
        super().__init__(
            value,
            f"Cannot parse the {role} color {value!r}. "
            "Please verify it is a hex color (ex. #ffffff or #fff).",
        )


def _tone_function(palette):
    def tone(value):
        return argb_to_rgb(palette.tone(value))

    return tone


def get_material_tonal_palettes(color):
    """Get the tonal palettes Material generates from a seed color.

    Tonal palettes are the same for light and dark themes, so the scheme is
    always built as light with standard contrast.

    Args:
        color: Seed hex color

    Returns:
        dict of role name -> callable mapping a tone (0-100) to an (r, g, b)
    """
    argb = rgb_to_argb(*hex_to_rgb(color))
    scheme = SchemeContent(Hct.from_int(argb), False, 0.0)

    return {
        "primary": _tone_function(scheme.primary_palette),
        "secondary": _tone_function(scheme.secondary_palette),
        "tertiary": _tone_function(scheme.tertiary_palette),
        "neutral": _tone_function(scheme.neutral_palette),
        "neutral_variant": _tone_function(scheme.neutral_variant_palette),
        "error": _tone_function(scheme.error_palette),
    }


def palette_key(name):
    """Render a role identifier as kebab-case (neutralVariant -> neutral-variant)."""
    name = re.sub(r"([a-z])([A-Z])", r"\1-\2", name)
    return name.replace("_", "-").lower()


def get_color_tonal_palettes(color, role="primary", tonal_palettes=None):
    """Get the tone -> color maps of every role derived from one seed color.

    Only the canonical tones are requested. The extra neutral tones are
    estimated later by patch_missing_hues.

    Args:
        color: Seed hex color
        role: Role the seed was supplied for, used in error messages
        tonal_palettes: Color-science service, defaults to Material's

    Returns:
        dict of kebab-case role name -> {tone: hex color}
    """
    tonal_palettes = tonal_palettes or get_material_tonal_palettes

    try:
        hex_to_rgb(color)
    except InvalidColorFormat as e:
        raise InvalidSeedColor(color, role) from e

    palettes_by_role = tonal_palettes(color)

    palettes = {}
    for key, palette in palettes_by_role.items():
        palettes[palette_key(key)] = {tone: rgb_to_hex(*palette(tone)) for tone in HUE_TONES}

    logger.debug("Built %d tonal palettes from %s color %s", len(palettes), role, color)
    return palettes


def build_color_palettes(
    primary, secondary=None, tertiary=None, neutral=None, tonal_palettes=None
):
    """Build the palettes for a theme from up to four seed colors.

    The primary seed's scheme provides every role. Each override seed
    replaces a single role with its own primary palette.

    Returns:
        tuple: (palettes dict, comment listing the seeds used)
    """
    palettes = get_color_tonal_palettes(primary, "primary", tonal_palettes)
    comment = f"Color palettes are generated from primary: {primary}"

    overrides = {"secondary": secondary, "tertiary": tertiary, "neutral": neutral}
    for role in OVERRIDE_ROLES:
        color = overrides[role]
        if not color:
            continue
        palettes[role] = get_color_tonal_palettes(color, role, tonal_palettes)["primary"]
        comment += f", {role}: {color}"

    return palettes, comment
