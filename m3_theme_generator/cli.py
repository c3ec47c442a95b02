import argparse
import logging
import os

from .export import create_png_preview, export_json, print_palette
from .palette import build_color_palettes, load_palette_from_json, patch_missing_hues
from .scss import THEME_FILE_NAME, THEME_TYPES, generate_scss_theme

logger = logging.getLogger(__name__)

PALETTE_JSON_FILE_NAME = "m3-palettes.json"
PREVIEW_FILE_NAME = "m3-palettes.png"


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate an Angular Material M3 theme from seed colors"
    )
    parser.add_argument(
        "primary_color",
        nargs="?",
        default=None,
        help="Seed color for the primary palette, also used for every role not overridden (ex. #6750a4)",
    )
    parser.add_argument(
        "--secondary",
        metavar="COLOR",
        help="Seed color for the secondary palette",
    )
    parser.add_argument(
        "--tertiary",
        metavar="COLOR",
        help="Seed color for the tertiary palette",
    )
    parser.add_argument(
        "--neutral",
        metavar="COLOR",
        help="Seed color for the neutral palette",
    )
    parser.add_argument(
        "--theme-types",
        choices=THEME_TYPES,
        default=None,
        help="Theme types to create (default: both)",
    )
    parser.add_argument(
        "--use-system-variables",
        action="store_true",
        help="Emit system-level variables in the generated themes",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Output directory (default: current directory)",
    )
    parser.add_argument(
        "--from-palette",
        metavar="JSON",
        help="Load palettes from an exported JSON file instead of seed colors",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help=f"Also export the palettes as {PALETTE_JSON_FILE_NAME}",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help=f"Also draw the palettes into {PREVIEW_FILE_NAME}",
    )
    parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite an existing theme file",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log pipeline details",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    # Validate arguments
    if args.from_palette:
        if args.primary_color:
            parser.error("Cannot use both primary_color and --from-palette")
        if args.secondary or args.tertiary or args.neutral:
            parser.error("Seed color overrides cannot be used with --from-palette")
    elif not args.primary_color:
        parser.error("Either primary_color or --from-palette is required")

    if not args.theme_types:
        logger.info("No theme types specified, creating both light and dark themes.")
        args.theme_types = "both"

    try:
        if args.from_palette:
            palettes, color_comment = _load_palettes(args)
        else:
            palettes, color_comment = build_color_palettes(
                args.primary_color,
                secondary=args.secondary,
                tertiary=args.tertiary,
                neutral=args.neutral,
            )
    except (ValueError, OSError) as e:
        parser.error(str(e))

    patched = patch_missing_hues(palettes)
    scss = generate_scss_theme(
        patched, args.theme_types, color_comment, args.use_system_variables
    )

    output_dir = args.output or "."
    theme_path = os.path.join(output_dir, THEME_FILE_NAME)
    if os.path.exists(theme_path) and not args.force:
        parser.error(f"{theme_path} already exists (use --force to overwrite)")

    os.makedirs(output_dir, exist_ok=True)

    print_palette(patched)

    with open(theme_path, "w") as f:
        f.write(scss)
    exported = [theme_path]

    if args.json:
        json_path = os.path.join(output_dir, PALETTE_JSON_FILE_NAME)
        export_json(patched, json_path, color_comment=color_comment, theme_types=args.theme_types)
        exported.append(json_path)

    if args.preview:
        preview_path = os.path.join(output_dir, PREVIEW_FILE_NAME)
        create_png_preview(patched, preview_path)
        exported.append(preview_path)

    # Print summary
    print("\n" + "=" * 60)
    print("Exported:")
    for path in exported:
        print(f"  - {path}")
    print(f"\nThemes: {args.theme_types}")
    print("=" * 60)


def _load_palettes(args):
    """Load palettes and their seed note from an exported JSON file."""
    print(f"Loading palettes: {args.from_palette}")
    palettes, note = load_palette_from_json(args.from_palette)
    color_comment = note or f"Color palettes are loaded from {os.path.basename(args.from_palette)}"
    return palettes, color_comment


if __name__ == "__main__":
    main()
