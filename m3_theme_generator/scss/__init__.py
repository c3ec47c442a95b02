from .theme import THEME_FILE_NAME, THEME_TYPES, generate_scss_theme, get_color_palettes_scss

__all__ = ["THEME_FILE_NAME", "THEME_TYPES", "generate_scss_theme", "get_color_palettes_scss"]
