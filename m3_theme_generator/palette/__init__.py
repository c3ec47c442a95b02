from .hues import patch_missing_hues
from .loader import load_palette_from_json
from .tonal import InvalidSeedColor, build_color_palettes, get_color_tonal_palettes

__all__ = [
    "InvalidSeedColor",
    "build_color_palettes",
    "get_color_tonal_palettes",
    "load_palette_from_json",
    "patch_missing_hues",
]
