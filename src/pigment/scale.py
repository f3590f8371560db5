from __future__ import annotations

"""Shade-scale assembly shared by the shade and harmony generators.

Turns an ``(count, 3)`` array of HSL stops into labelled, contrast-scored
:class:`~pigment.color_types.ColorShade` values, and owns the parameter
normalization (shade count, contrast shift, naming pattern) both generators
apply.
"""

import logging
import math
import numbers
from enum import Enum
from typing import List, Sequence, Tuple

import numpy as np

from .accessibility import text_contrast
from .color_types import HSL, ColorShade, ColorValue
from .convert import hsl_to_color
from .engine import ColorEngine
from .errors import InvalidNamingPattern

logger = logging.getLogger(__name__)

SHADE_COUNTS: Tuple[int, ...] = (5, 7, 9, 11, 13)
CONTRAST_SHIFT_MIN = -50
CONTRAST_SHIFT_MAX = 50


class NamingPattern(str, Enum):
    """Label schemes for shade stops."""

    P50_950 = "50-950"
    P100_900 = "100-900"
    P50_900 = "50-900"
    P1_20 = "1-20"
    P10_200 = "10-200"
    CUSTOM = "custom"

    @classmethod
    def from_value(cls, value: "NamingPattern | str") -> "NamingPattern":
        if isinstance(value, NamingPattern):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for pattern in cls:
                if pattern.value == key:
                    return pattern
        raise InvalidNamingPattern(f"Unknown naming pattern: {value!r}")


_CANONICAL_LABELS = {
    NamingPattern.P50_950: (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950),
    NamingPattern.P100_900: (100, 200, 300, 400, 500, 600, 700, 800, 900),
    NamingPattern.P50_900: (50, 100, 200, 300, 400, 500, 600, 700, 800, 900),
}

_STEP_LABELS = {
    NamingPattern.P1_20: 1,
    NamingPattern.P10_200: 10,
    NamingPattern.CUSTOM: 100,
}


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def clamp_shade_count(count: int) -> int:
    """Return the nearest supported shade count (ties go to the smaller).

    Raises
    ------
    TypeError
        If ``count`` is not an integer.
    """
    if isinstance(count, bool) or not isinstance(count, numbers.Integral):
        raise TypeError(f"shade_count must be an integer: {count!r}")
    n = int(count)
    valid = min(SHADE_COUNTS, key=lambda v: (abs(v - n), v))
    if valid != n:
        logger.warning("shade_count %d is not supported; using %d", n, valid)
    return valid


def clamp_contrast_shift(shift: float) -> float:
    s = float(shift)
    if not math.isfinite(s):
        s = 0.0
    clamped = min(float(CONTRAST_SHIFT_MAX), max(float(CONTRAST_SHIFT_MIN), s))
    if clamped != s:
        logger.debug("contrast_shift %s clamped to %s", shift, clamped)
    return clamped


def apply_contrast_shift(lightness: np.ndarray, shift: float) -> np.ndarray:
    """Spread lightness away from (or towards) mid-gray.

    ``L' = L + (shift/100)·(L − 50)``, clipped to [0, 100]. The slope stays
    in [0.5, 1.5] so stop order is preserved.
    """
    k = clamp_contrast_shift(shift) / 100.0
    arr = np.asarray(lightness, dtype=np.float64)
    return np.clip(arr + k * (arr - 50.0), 0.0, 100.0)


def shade_labels(pattern: "NamingPattern | str", count: int) -> List[str]:
    """Return ``count`` labels for ``pattern`` (all distinct, ascending)."""
    p = NamingPattern.from_value(pattern)
    if count <= 0:
        return []
    step = _STEP_LABELS.get(p)
    if step is not None:
        return [str(step * (i + 1)) for i in range(count)]

    canon = _CANONICAL_LABELS[p]
    n = len(canon)
    if count == n:
        return [str(v) for v in canon]
    if count == 1:
        return [str(canon[n // 2])]
    if count < n:
        # evenly spaced subset, endpoints kept
        return [str(canon[_round_half_up(i * (n - 1) / (count - 1))]) for i in range(count)]
    first, last = canon[0], canon[-1]
    return [str(_round_half_up(first + (last - first) * i / (count - 1))) for i in range(count)]


def _hue_delta(h1: float, h2: float) -> float:
    d = (h1 - h2 + 180.0) % 360.0 - 180.0
    return abs(d)


def active_index(colors: Sequence[ColorValue], seed: HSL) -> int:
    """Index of the stop closest to the seed lightness.

    Ties are broken by hue + saturation distance, then by position.
    """
    best = 0
    best_key = None
    for i, color in enumerate(colors):
        h, s, l = color.hsl  # noqa: E741
        key = (abs(l - seed.l), _hue_delta(h, seed.h) + abs(s - seed.s), i)
        if best_key is None or key < best_key:
            best_key = key
            best = i
    return best


def assemble_shades(
    hsl_stops: np.ndarray,
    seed: HSL,
    pattern: "NamingPattern | str",
    engine: ColorEngine | None = None,
) -> Tuple[ColorShade, ...]:
    """Materialize HSL stops into labelled, contrast-scored shades."""
    arr = np.asarray(hsl_stops, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"hsl_stops must have shape (count, 3): got {arr.shape}")
    labels = shade_labels(pattern, arr.shape[0])
    colors = [hsl_to_color(h, s, l, engine) for h, s, l in arr.tolist()]  # noqa: E741
    active = active_index(colors, seed)
    return tuple(
        ColorShade(
            name=label,
            value=int(label),
            color=color,
            contrast=text_contrast(color),
            is_active=(i == active),
        )
        for i, (label, color) in enumerate(zip(labels, colors))
    )


__all__ = [
    "SHADE_COUNTS",
    "CONTRAST_SHIFT_MIN",
    "CONTRAST_SHIFT_MAX",
    "NamingPattern",
    "clamp_shade_count",
    "clamp_contrast_shift",
    "apply_contrast_shift",
    "shade_labels",
    "active_index",
    "assemble_shades",
]
