import pytest

from m3_theme_generator.color import hex_to_rgb
from m3_theme_generator.palette import tonal


def fake_tonal_palettes(color):
    """Deterministic stand-in for the color-science service.

    Every role is a grey ramp, except primary which keeps the seed's red and
    green channels so override seeds are recognisable in the output.
    """
    r, g, _ = hex_to_rgb(color)

    def ramp(t):
        v = round(t * 255 / 100)
        return v, v, v

    def primary(t):
        return r, g, round(t * 255 / 100)

    return {
        "primary": primary,
        "secondary": ramp,
        "tertiary": ramp,
        "neutral": ramp,
        "neutralVariant": ramp,
        "error": ramp,
    }


@pytest.fixture
def fake_palettes():
    return fake_tonal_palettes


@pytest.fixture
def fake_material(monkeypatch):
    """Route the default color-science service to the fake one."""
    monkeypatch.setattr(tonal, "get_material_tonal_palettes", fake_tonal_palettes)
    return fake_tonal_palettes
