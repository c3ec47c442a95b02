from .json_export import export_json
from .preview import create_png_preview, print_palette

__all__ = ["export_json", "create_png_preview", "print_palette"]
