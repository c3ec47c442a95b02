import json

from ..palette.hues import patch_missing_hues


def export_json(palettes, filepath, color_comment=None, theme_types=None):
    """Export the tonal palettes as JSON with metadata.

    Neutral tones are estimated before export, so the file holds the same
    palettes the theme file does.

    Args:
        palettes: dict of role name -> {tone: hex color}
        filepath: Output file path
        color_comment: Note on the seed colors, stored under "_note"
        theme_types: Theme types generated alongside, stored under "_theme_types"
    """
    data = {
        role: {str(tone): color for tone, color in palette.items()}
        for role, palette in patch_missing_hues(palettes).items()
    }

    if color_comment:
        data["_note"] = color_comment

    if theme_types:
        data["_theme_types"] = ["light", "dark"] if theme_types == "both" else [theme_types]

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
