from ..palette.hues import patch_missing_hues

THEME_TYPES = ["light", "dark", "both"]

THEME_FILE_NAME = "m3-theme.scss"


def get_color_palettes_scss(palettes):
    """Get the Sass map representation of the color palettes.

    Args:
        palettes: dict of role name -> {tone: hex color}

    Returns:
        Sass map literal, terminated by a semicolon
    """
    scss = "(\n"
    for variant, palette in palettes.items():
        scss += f"  {variant}: (\n"
        for tone, color in palette.items():
            scss += f"    {tone}: {color},\n"
        scss += "  ),\n"
    scss += ");"
    return scss


def generate_scss_theme(palettes, theme_types, color_comment, use_system_variables):
    """Generate the theme file contents from the color palettes.

    Missing neutral tones are estimated first. Palettes that already hold
    them pass through untouched.

    Args:
        palettes: dict of role name -> {tone: hex color}
        theme_types: "light", "dark" or "both"
        color_comment: Note on the seed colors used to generate the palettes
        use_system_variables: Whether the themes emit system-level variables

    Returns:
        Sass source of the theme file
    """
    scss = [
        "// This file was generated by running 'm3-theme'.",
        "// Proceed with caution if making changes to this file.",
        "",
        "@use 'sass:map';",
        "@use '@angular/material' as mat;",
        "",
        f"// Note: {color_comment}",
        "$_palettes: " + get_color_palettes_scss(patch_missing_hues(palettes)),
        "",
        "$_rest: (",
        "  secondary: map.get($_palettes, secondary),",
        "  neutral: map.get($_palettes, neutral),",
        "  neutral-variant: map.get($_palettes, neutral-variant),",
        "  error: map.get($_palettes, error),",
        ");",
        "$_primary: map.merge(map.get($_palettes, primary), $_rest);",
        "$_tertiary: map.merge(map.get($_palettes, tertiary), $_rest);",
        "",
    ]

    themes = ["light", "dark"] if theme_types == "both" else [theme_types]
    # Palettes are passed to mat.define-theme since building the color tokens
    # from them is private to Angular Material.
    for theme_type in themes:
        scss.append(f"${theme_type}-theme: mat.define-theme((")
        scss.append("  color: (")
        scss.append(f"    theme-type: {theme_type},")
        scss.append("    primary: $_primary,")
        scss.append("    tertiary: $_tertiary,")
        if use_system_variables:
            scss.append("    use-system-variables: true,")
        scss.append("  ),")
        if use_system_variables:
            scss += ["  typography: (", "    use-system-variables: true,", "  ),"]
        scss.append("));")

    return "\n".join(scss)
