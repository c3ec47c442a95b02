from PIL import Image, ImageDraw

from ..color import hex_to_rgb

LABEL_WIDTH = 120


def print_palette(palettes):
    """Print palette info"""
    print("\n" + "=" * 60)
    print("TONAL PALETTES")
    print("=" * 60)

    for role, palette in palettes.items():
        print(f"\n{role.upper()}:")
        for tone, color in palette.items():
            print(f"  {tone:>3}  {color}")


def create_png_preview(palettes, output_path, swatch_size=32):
    """Draw one row of tone swatches per role into a PNG file.

    Args:
        palettes: dict of role name -> {tone: hex color}
        output_path: Output PNG path
        swatch_size: Width and height of a single swatch in pixels
    """
    columns = max((len(palette) for palette in palettes.values()), default=0)
    width = LABEL_WIDTH + columns * swatch_size
    height = max(len(palettes), 1) * swatch_size

    img = Image.new("RGB", (width, height), (255, 255, 255))
    draw = ImageDraw.Draw(img)

    for row, (role, palette) in enumerate(palettes.items()):
        top = row * swatch_size
        draw.text((4, top + swatch_size // 3), role, fill=(0, 0, 0))
        for column, color in enumerate(palette.values()):
            left = LABEL_WIDTH + column * swatch_size
            draw.rectangle(
                [left, top, left + swatch_size - 1, top + swatch_size - 1],
                fill=hex_to_rgb(color),
            )

    img.save(output_path)
