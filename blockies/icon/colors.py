"""Icon colors.

Synthesized colors are HSL strings, ``hsl(H,S%,L%)``, with numbers written
the way a browser prints them so the strings match other blockies ports
character for character. Colors are stored as (R, G, B) tuples in [0, 1]
float range once they are parsed for rendering.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

import numpy as np
from PIL import ImageColor

from blockies.prng.xorshift import SeededPRNG

_NUM = r"([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"
_HSL_RE = re.compile(
    rf"^\s*hsl\(\s*{_NUM}\s*,\s*{_NUM}%\s*,\s*{_NUM}%\s*\)\s*$", re.IGNORECASE
)


def format_number(value: float) -> str:
    """Shortest round-trip text for value, JavaScript style.

    Integral values drop the fractional part (``40`` not ``40.0``) and
    exponent notation only kicks in below 1e-6.
    """
    if float(value).is_integer():
        return str(int(value))
    text = repr(float(value))
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    if int(exponent) >= -6:
        return format(Decimal(text), "f")
    return f"{mantissa}e{int(exponent):+d}"


def format_hsl(hue: float, saturation: float, lightness: float) -> str:
    return (
        f"hsl({format_number(hue)},"
        f"{format_number(saturation)}%,"
        f"{format_number(lightness)}%)"
    )


def create_color(rng: SeededPRNG) -> str:
    """Draw one HSL color from rng.

    Consumes six draws: hue, saturation, then four for lightness.
    """
    # hue covers the whole color wheel
    hue = math.floor(rng.next() * 360)
    # 40..100 avoids greyish colors
    saturation = (rng.next() * 60) + 40
    # bell curve around 50
    lightness = (rng.next() + rng.next() + rng.next() + rng.next()) * 25
    return format_hsl(hue, saturation, lightness)


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> tuple:
    """Convert HSL (degrees, percent, percent) to (r, g, b) floats in [0, 1].

    Saturation and lightness are clamped to [0, 100] first.
    """
    h = (hue % 360.0) / 360.0
    s = min(max(saturation, 0.0), 100.0) / 100.0
    l = min(max(lightness, 0.0), 100.0) / 100.0

    c = (1.0 - abs(2.0 * l - 1.0)) * s
    k = (np.array([0.0, 8.0, 4.0]) + h * 12.0) % 12.0
    rgb = l - c / 2.0 * np.clip(np.minimum(k - 3.0, 9.0 - k), -1.0, 1.0)
    return tuple(float(v) for v in np.clip(rgb, 0.0, 1.0))


def parse_color(text: str) -> tuple:
    """Parse a CSS color string to (r, g, b) floats in [0, 1].

    HSL strings are handled here so exponent notation and out-of-range
    lightness survive; everything else goes through Pillow.
    """
    m = _HSL_RE.match(text)
    if m:
        h, s, l = (float(g) for g in m.groups())
        return hsl_to_rgb(h, s, l)
    try:
        rgb = ImageColor.getrgb(text)
    except ValueError as e:
        raise ValueError(f"Unknown color: {text!r}") from e
    return tuple(c / 255.0 for c in rgb[:3])


def palette_array(bgcolor: str, color: str, spotcolor: str) -> np.ndarray:
    """Return the (3, 3) palette indexed by cell value."""
    return np.array(
        [parse_color(bgcolor), parse_color(color), parse_color(spotcolor)],
        dtype=np.float64,
    )
