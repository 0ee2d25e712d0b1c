"""Color tokens and the style table they resolve through."""
from __future__ import annotations

import colorsys
import random
from dataclasses import dataclass

Color = tuple[int, int, int]


@dataclass(frozen=True)
class Style:
    """Resolved drawing parameters for one color token."""

    color: Color


PALETTES: dict[str, Style] = {
    "crimson": Style(color=(255, 58, 94)),
    "indigo": Style(color=(77, 69, 255)),
    "teal": Style(color=(24, 173, 181)),
    "violet": Style(color=(138, 43, 226)),
    "azure": Style(color=(30, 144, 255)),
    "white": Style(color=(255, 255, 255)),
    "ice": Style(color=(190, 220, 255)),
    "ember": Style(color=(255, 190, 130)),
    "rose": Style(color=(255, 160, 200)),
}

SWARM_TOKENS = ("crimson", "indigo", "teal")
FLOATING_TOKENS = ("violet", "azure", "crimson", "teal")
STAR_TINT_TOKENS = ("ice", "ember", "rose")


def resolve(token: str) -> Style:
    try:
        return PALETTES[token]
    except KeyError:
        raise KeyError(f"Unknown color token {token!r}") from None


def pick(tokens: tuple[str, ...], rng: random.Random) -> Style:
    return resolve(rng.choice(tokens))


def hsl(hue: float, saturation: float, lightness: float) -> Color:
    """CSS-style HSL (hue in degrees, others in 0-1) to an RGB triple."""
    r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0, lightness, saturation)
    return (round(r * 255), round(g * 255), round(b * 255))


def mix(a: Color, b: Color, t: float) -> Color:
    return (
        round(a[0] + (b[0] - a[0]) * t),
        round(a[1] + (b[1] - a[1]) * t),
        round(a[2] + (b[2] - a[2]) * t),
    )
