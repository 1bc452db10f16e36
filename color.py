# color.py
"""
Color helpers for seeding particles with visually distinct colors.

Particles are colored by their angular position on the starting ring, so
the ring shows a full hue wheel.
"""
from typing import NamedTuple, Tuple

# --- Data Contracts ---
#
# hsv_to_rgb(hue: float, saturation: float, value: float) -> Tuple[float, float, float]:
#   - Inputs: hue in degrees (not wrapped), saturation and value in [0, 1].
#   - Outputs: (r, g, b) floats, each in [0, 1] for non-negative hue.
#   - Invariants: hue 360 maps to the same color as hue 0.
#
# get_color(angle: float) -> Color:
#   - Inputs: angle in degrees, used directly as the hue.
#   - Outputs: fully saturated, full-value opaque Color.

CHANNEL_MAX = 255


class Color(NamedTuple):
    """An 8-bit RGBA color. Unpacks directly into pygame drawing calls."""
    r: int
    g: int
    b: int
    a: int = CHANNEL_MAX


def hsv_to_rgb(hue: float, saturation: float, value: float) -> Tuple[float, float, float]:
    """
    Converts an HSV triple to RGB floats.

    The sector index is taken with truncation toward zero, not floor, so a
    negative hue lands in the wrong sector and produces channels outside
    [0, 1]. Callers pass non-negative angles.
    """
    sector = int(hue / 60.0)
    f = hue / 60.0 - sector
    i = sector % 6

    v = value
    p = value * (1.0 - saturation)
    q = value * (1.0 - f * saturation)
    t = value * (1.0 - (1.0 - f) * saturation)

    if i == 0:
        return v, t, p
    if i == 1:
        return q, v, p
    if i == 2:
        return p, v, t
    if i == 3:
        return p, q, v
    if i == 4:
        return t, p, v
    return v, p, q


def _to_channel(component: float) -> int:
    # Truncate like an integer cast, then keep the result in 8 bits.
    return min(max(int(component * CHANNEL_MAX), 0), CHANNEL_MAX)


def get_color(angle: float) -> Color:
    """Maps an angle in degrees to an opaque, fully saturated color."""
    r, g, b = hsv_to_rgb(angle, 1.0, 1.0)
    return Color(_to_channel(r), _to_channel(g), _to_channel(b), CHANNEL_MAX)
