import logging

from ..color import mix_colors
from .tonal import HUE_TONES

logger = logging.getLogger(__name__)

# Neutral tones that some color tokens refer to (ex. surface container is
# neutral 94), mapped to the previous/next canonical tones used to estimate
# them when they're missing.
# https://m3.material.io/styles/color/static/baseline
NEUTRAL_HUES = {
    4: (0, 10),
    6: (0, 10),
    12: (10, 20),
    17: (10, 20),
    22: (20, 25),
    24: (20, 25),
    87: (80, 90),
    92: (90, 95),
    94: (90, 95),
    96: (95, 98),
}

NEUTRAL_HUE_TONES = HUE_TONES + list(NEUTRAL_HUES)


def patch_missing_hues(palettes):
    """Estimate the neutral tones the tonal palettes don't provide.

    Each missing tone is mixed from its canonical neighbours. The input is
    never mutated: if nothing gets filled the same dict is returned,
    otherwise a new one whose neutral palette is sorted by tone.

    Args:
        palettes: dict of role name -> {tone: hex color}

    Returns:
        dict of role name -> {tone: hex color}
    """
    neutral = palettes.get("neutral")
    if neutral is None:
        return palettes

    new_neutral = None

    for hue, (prev, next_) in NEUTRAL_HUES.items():
        if hue in neutral or prev not in neutral or next_ not in neutral:
            continue

        weight = (next_ - hue) / (next_ - prev)
        result = mix_colors(neutral[prev], neutral[next_], weight)
        if result is None:
            continue

        if new_neutral is None:
            new_neutral = dict(neutral)
        new_neutral[hue] = result

    if new_neutral is None:
        return palettes

    logger.debug("Estimated %d missing neutral tones", len(new_neutral) - len(neutral))

    new_palettes = {}
    for key, value in palettes.items():
        if key == "neutral":
            new_palettes[key] = dict(sorted(new_neutral.items()))
        else:
            new_palettes[key] = value
    return new_palettes
