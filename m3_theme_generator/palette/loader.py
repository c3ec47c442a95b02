import json

from ..color import InvalidColorFormat, hex_to_rgb


def load_palette_from_json(json_path):
    """Load tonal palettes from a JSON file written by export_json.

    Args:
        json_path: Path to palette JSON file

    Returns:
        tuple: (dict of role name -> {tone: hex color}, note or None)
    """
    with open(json_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected an object of palettes in {json_path}")

    palettes = {}
    note = None

    for role, value in data.items():
        # Skip metadata keys
        if role.startswith("_"):
            if role == "_note":
                note = value
            continue

        if not isinstance(value, dict):
            raise ValueError(f"Expected an object of tones for {role} in {json_path}")

        palette = {}
        for tone, color in value.items():
            try:
                hex_to_rgb(color)
            except InvalidColorFormat as e:
                raise InvalidColorFormat(
                    color, f"Invalid color {color!r} for {role} tone {tone} in {json_path}"
                ) from e
            palette[int(tone)] = color.lower()
        palettes[role] = palette

    return palettes, note
