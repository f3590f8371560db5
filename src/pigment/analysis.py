from __future__ import annotations

"""Helpers for inspecting and tidying arbitrary color lists."""

import math
from typing import List, Sequence

import numpy as np

from .color_types import ColorValue
from .convert import hsl_to_color, rgb_to_color
from .engine import ColorEngine
from .palette import Algorithm


def color_distance(a: ColorValue, b: ColorValue) -> float:
    """Euclidean distance between two colors in 0..255 RGB space."""
    return math.dist(a.rgb, b.rgb)


def optimize_colors(colors: Sequence[ColorValue], threshold: float = 10.0) -> List[ColorValue]:
    """Drop colors closer than ``threshold`` to one already kept (order preserved)."""
    kept: List[ColorValue] = []
    for color in colors:
        if all(color_distance(color, other) >= threshold for other in kept):
            kept.append(color)
    return kept


def suggest_algorithm(colors: Sequence[ColorValue]) -> Algorithm:
    """Suggest the shade algorithm that best matches the spread of ``colors``."""
    if len(colors) < 2:
        return Algorithm.MONOCHROMATIC
    hsl = np.array([c.hsl for c in colors], dtype=np.float64)
    hue_range, sat_range, light_range = np.ptp(hsl, axis=0)
    if hue_range < 30 and light_range > 50:
        return Algorithm.LIGHTNESS
    if hue_range < 30 and sat_range > 30:
        return Algorithm.SATURATION
    if hue_range > 150:
        return Algorithm.COMPLEMENTARY
    if hue_range > 60:
        return Algorithm.ANALOGOUS
    return Algorithm.MONOCHROMATIC


def interpolate_colors(
    a: ColorValue,
    b: ColorValue,
    steps: int,
    engine: ColorEngine | None = None,
) -> List[ColorValue]:
    """Interpolate in HSL along the shortest hue arc, endpoints included.

    Raises
    ------
    ValueError
        If ``steps`` is smaller than 2.
    """
    if steps < 2:
        raise ValueError("steps must be at least 2.")
    h0, s0, l0 = a.hsl
    h1, s1, l1 = b.hsl
    dh = (h1 - h0 + 180.0) % 360.0 - 180.0
    t = np.linspace(0.0, 1.0, steps)
    hues = h0 + dh * t
    sats = s0 + (s1 - s0) * t
    lights = l0 + (l1 - l0) * t
    out = [hsl_to_color(h, s, l, engine) for h, s, l in zip(hues, sats, lights)]  # noqa: E741
    # endpoints are the inputs themselves
    out[0], out[-1] = a, b
    return out


def random_color(
    rng: np.random.Generator | int | None = None, engine: ColorEngine | None = None
) -> ColorValue:
    """Uniformly random sRGB color."""
    gen = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
    r, g, b = (int(v) for v in gen.integers(0, 256, size=3))
    return rgb_to_color(r, g, b, engine)


__all__ = [
    "color_distance",
    "optimize_colors",
    "suggest_algorithm",
    "interpolate_colors",
    "random_color",
]
