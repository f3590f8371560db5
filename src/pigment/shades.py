from __future__ import annotations

"""Shade-scale generation from a single seed color.

This module provides :func:`generate_shades`, which coordinates the
registered shade curves (:mod:`pigment.algorithms`), the contrast shift,
shade labelling and naming to produce a :class:`~pigment.palette.Palette`.
"""

import logging
from typing import Optional

from . import algorithms
from .color_types import HSL, ColorValue
from .engine import ColorEngine
from .naming import consistent_name
from .palette import Algorithm, Palette
from .scale import NamingPattern, apply_contrast_shift, assemble_shades, clamp_shade_count

logger = logging.getLogger(__name__)


def generate_shades(
    seed: ColorValue,
    algorithm: Algorithm | str = Algorithm.TAILWIND,
    shade_count: int = 11,
    contrast_shift: float = 0,
    naming_pattern: NamingPattern | str = NamingPattern.P50_950,
    label: Optional[str] = None,
    *,
    engine: Optional[ColorEngine] = None,
) -> Palette:
    """Generate a labelled shade scale from a seed color.

    Parameters
    ----------
    seed:
        Seed color; its stored HSL drives the curve.
    algorithm:
        Registered curve name (see :class:`~pigment.palette.Algorithm`).
    shade_count:
        Number of stops. Values outside {5, 7, 9, 11, 13} are clamped to the
        nearest supported count.
    contrast_shift:
        In [-50, 50] (clamped). Positive values push light stops lighter and
        dark stops darker.
    naming_pattern:
        Label scheme for the stops.
    label:
        Palette name. When None, a deterministic name is derived from the
        generated shades.
    engine:
        Optional ColorEngine for the OKLCH field. If None, the configured
        default engine is used.

    Returns
    -------
    Palette
        Exactly ``shade_count`` shades with exactly one active stop (the one
        closest to the seed lightness).

    Raises
    ------
    InvalidAlgorithm
        Unknown ``algorithm``.
    InvalidNamingPattern
        Unknown ``naming_pattern``.
    """
    alg = Algorithm.from_value(algorithm)
    pattern = NamingPattern.from_value(naming_pattern)
    count = clamp_shade_count(shade_count)

    seed_hsl = HSL(float(seed.hsl.h), float(seed.hsl.s), float(seed.hsl.l))
    curve = algorithms.get_algorithm(alg.value)
    hsl_stops = curve(seed_hsl, count)
    hsl_stops[:, 2] = apply_contrast_shift(hsl_stops[:, 2], contrast_shift)

    shades = assemble_shades(hsl_stops, seed_hsl, pattern, engine)
    name = label if label is not None else consistent_name(shades)
    logger.debug("generated %d %s shades for %s", count, alg.value, seed.hex)
    return Palette(name=name, base_color=seed, shades=shades, algorithm=alg)


__all__ = ["generate_shades"]
