from __future__ import annotations

"""OKLCH projection engines.

This module defines the :class:`ColorEngine` protocol used by the converter
to fill the ``oklch`` field of a :class:`~pigment.color_types.ColorValue`,
and two implementations:

- :class:`ApproxColorEngine` (default): the lightweight approximation the
  palette tool has always shipped (``l = L/100``, ``c = s*l*(1-l)``,
  ``h = hue``). Output parity with existing palettes depends on it.
- :class:`OklabColorEngine`: real sRGB (D65) -> OKLab -> OKLCH math, opt-in
  through ``PIGMENT_OKLCH_MODE=oklab`` or by passing an engine explicitly.
"""

import math
from typing import Protocol

from common import settings

from .color_types import HSL, OKLCH, RGB


def normalize_hue(angle: float) -> float:
    """Wrap any angle into [0, 360).

    Non-finite input maps to 0.0. The result is never 360.0, even for tiny
    negative inputs where float modulo rounds up.
    """
    a = float(angle)
    if not math.isfinite(a):
        return 0.0
    h = a % 360.0
    if h >= 360.0:
        h -= 360.0
    return h


class ColorEngine(Protocol):
    """Protocol abstracting the OKLCH projection of a color."""

    def to_oklch(self, rgb: RGB, hsl: HSL) -> OKLCH: ...


class ApproxColorEngine:
    """HSL-derived OKLCH approximation (not a perceptual transform)."""

    def to_oklch(self, rgb: RGB, hsl: HSL) -> OKLCH:
        """Approximate OKLCH from unrounded HSL (s, l in percent)."""
        s = max(0.0, min(100.0, hsl.s)) / 100.0
        l = max(0.0, min(100.0, hsl.l)) / 100.0  # noqa: E741
        c = s * l * (1.0 - l)
        return OKLCH(round(l, 2), round(c, 2), float(round(normalize_hue(hsl.h))) % 360.0)


class OklabColorEngine:
    """OKLab/OKLCH projection of sRGB (D65)."""

    def to_oklch(self, rgb: RGB, hsl: HSL) -> OKLCH:
        """Convert integer sRGB to OKLCH with L in [0, 1]."""
        rl = _srgb_to_linear(rgb.r / 255.0)
        gl = _srgb_to_linear(rgb.g / 255.0)
        bl = _srgb_to_linear(rgb.b / 255.0)

        # Linear RGB to LMS (OKLab)
        l = 0.4122214708 * rl + 0.5363325363 * gl + 0.0514459929 * bl  # noqa: E741
        m = 0.2119034982 * rl + 0.6806995451 * gl + 0.1073969566 * bl
        s = 0.0883024619 * rl + 0.2817188376 * gl + 0.6299787005 * bl

        l_ = math.copysign(abs(l) ** (1 / 3), l)
        m_ = math.copysign(abs(m) ** (1 / 3), m)
        s_ = math.copysign(abs(s) ** (1 / 3), s)

        L_ok = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
        a_ok = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
        b_ok = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_

        C = math.sqrt(a_ok * a_ok + b_ok * b_ok)
        if C < 1e-4:
            h_deg = 0.0
        else:
            h_deg = normalize_hue(math.degrees(math.atan2(b_ok, a_ok)))

        L = max(0.0, min(1.0, L_ok))
        return OKLCH(round(L, 2), round(C, 2), float(round(h_deg)) % 360.0)


def default_engine() -> ColorEngine:
    """Return the engine selected by ``PIGMENT_OKLCH_MODE``."""
    mode = settings.get().OKLCH_MODE
    if mode == "oklab":
        return _OKLAB
    return _APPROX


def _srgb_to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


_APPROX = ApproxColorEngine()
_OKLAB = OklabColorEngine()


__all__ = [
    "ColorEngine",
    "ApproxColorEngine",
    "OklabColorEngine",
    "default_engine",
    "normalize_hue",
]
