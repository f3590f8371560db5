from __future__ import annotations

"""Hue-wheel harmonies, companion color sets and random harmony generation.

Offsets, selection weights and saturation/lightness bands are read from the
packaged ``harmonies.yaml`` table (see :mod:`pigment.tables`). All randomized
functions take an explicit :class:`numpy.random.Generator`; ``None`` means a
fresh ``numpy.random.default_rng()`` at that call.
"""

import logging
from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple

import numpy as np

from common.base_registry import normalize_key

from .color_types import ColorValue
from .convert import hsl_to_color
from .engine import ColorEngine, normalize_hue
from .errors import InvalidHarmony
from .palette import Algorithm, Palette
from .scale import assemble_shades, clamp_shade_count
from .tables import HarmonySpec, harmony_table

logger = logging.getLogger(__name__)

FAN_LIMIT = 16


class Harmony(str, Enum):
    """Hue-wheel relationships (values match the keys of ``harmonies.yaml``)."""

    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    ANALOGOUS = "analogous"
    SPLIT_COMPLEMENTARY = "split_complementary"
    DOUBLE_COMPLEMENTARY = "double_complementary"

    @classmethod
    def from_value(cls, value: "Harmony | str") -> "Harmony":
        """Resolve a harmony from its value; camelCase and kebab-case are accepted."""
        if isinstance(value, Harmony):
            return value
        try:
            key = normalize_key(value)
        except (TypeError, ValueError) as exc:
            raise InvalidHarmony(f"Unknown harmony: {value!r}") from exc
        for harmony in cls:
            if harmony.value == key:
                return harmony
        raise InvalidHarmony(f"Unknown harmony: {value!r}")

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


def ensure_rng(rng: np.random.Generator | int | None = None) -> np.random.Generator:
    """Return ``rng`` as a Generator (ints seed a new one, ``None`` is unseeded)."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def _spec(harmony: "Harmony | str") -> HarmonySpec:
    return harmony_table().harmonies[Harmony.from_value(harmony).value]


def _build_angles() -> Dict[Harmony, Tuple[float, ...]]:
    return {h: _spec(h).offsets for h in Harmony}


def _build_weights() -> Dict[Harmony, float]:
    return {h: _spec(h).weight for h in Harmony}


HARMONY_ANGLES: Mapping[Harmony, Tuple[float, ...]] = _build_angles()
HARMONY_WEIGHTS: Mapping[Harmony, float] = _build_weights()


def harmony_offsets(harmony: "Harmony | str") -> Tuple[float, ...]:
    """Ordered hue offsets (degrees) of ``harmony`` relative to the base hue."""
    return _spec(harmony).offsets


def harmony_hues(hue: float, harmony: "Harmony | str") -> List[float]:
    return [normalize_hue(hue + offset) for offset in harmony_offsets(harmony)]


def generate_harmony_set(
    seed: ColorValue,
    harmony: "Harmony | str" = Harmony.COMPLEMENTARY,
    engine: ColorEngine | None = None,
) -> List[ColorValue]:
    """One color per harmony offset; seed saturation and lightness are kept.

    Raises
    ------
    InvalidHarmony
        If ``harmony`` is not a known harmony name.
    """
    h, s, l = seed.hsl  # noqa: E741
    return [hsl_to_color(hue, s, l, engine) for hue in harmony_hues(h, harmony)]


# -- companion sets (seed excluded) -------------------------------------------


def complementary_colors(seed: ColorValue, engine: ColorEngine | None = None) -> List[ColorValue]:
    h, s, l = seed.hsl  # noqa: E741
    comp = h + 180.0
    return [
        hsl_to_color(comp, s, l, engine),
        hsl_to_color(comp, max(20.0, s - 20.0), l, engine),
        hsl_to_color(comp, min(100.0, s + 20.0), l, engine),
    ]


def analogous_colors(seed: ColorValue, engine: ColorEngine | None = None) -> List[ColorValue]:
    h, s, l = seed.hsl  # noqa: E741
    return [hsl_to_color(h + d, s, l, engine) for d in (-30.0, -15.0, 15.0, 30.0)]


def triadic_colors(seed: ColorValue, engine: ColorEngine | None = None) -> List[ColorValue]:
    h, s, l = seed.hsl  # noqa: E741
    return [hsl_to_color(h + d, s, l, engine) for d in (120.0, 240.0)]


def tetradic_colors(seed: ColorValue, engine: ColorEngine | None = None) -> List[ColorValue]:
    h, s, l = seed.hsl  # noqa: E741
    return [hsl_to_color(h + d, s, l, engine) for d in (90.0, 180.0, 270.0)]


def saturation_variations(seed: ColorValue, engine: ColorEngine | None = None) -> List[ColorValue]:
    h, s, l = seed.hsl  # noqa: E741
    values = (
        max(10.0, s - 40.0),
        max(10.0, s - 20.0),
        min(100.0, s + 20.0),
        min(100.0, s + 40.0),
    )
    return [hsl_to_color(h, v, l, engine) for v in values]


def lightness_variations(seed: ColorValue, engine: ColorEngine | None = None) -> List[ColorValue]:
    h, s, l = seed.hsl  # noqa: E741
    values = (
        max(10.0, l - 30.0),
        max(10.0, l - 15.0),
        min(90.0, l + 15.0),
        min(90.0, l + 30.0),
    )
    return [hsl_to_color(h, s, v, engine) for v in values]


def generate_fan_palette(seed: ColorValue, engine: ColorEngine | None = None) -> List[ColorValue]:
    """Seed followed by its companion sets, deduplicated by hex, at most 16 colors."""
    candidates = [seed]
    candidates += complementary_colors(seed, engine)
    candidates += analogous_colors(seed, engine)
    candidates += triadic_colors(seed, engine)
    candidates += saturation_variations(seed, engine)
    candidates += lightness_variations(seed, engine)

    seen: set[str] = set()
    fan: List[ColorValue] = []
    for color in candidates:
        if color.hex in seen:
            continue
        seen.add(color.hex)
        fan.append(color)
        if len(fan) == FAN_LIMIT:
            break
    return fan


# -- random harmonies ----------------------------------------------------------


def select_harmony(rng: np.random.Generator | int | None = None) -> Harmony:
    """Pick a harmony with one uniform draw against cumulative weights."""
    gen = ensure_rng(rng)
    names = list(HARMONY_WEIGHTS)
    cumulative = np.cumsum([HARMONY_WEIGHTS[h] for h in names])
    u = float(gen.random())
    idx = int(np.searchsorted(cumulative, u, side="right"))
    return names[min(idx, len(names) - 1)]


def golden_hue(u: float, step: int = 0) -> float:
    """Base hue from a uniform draw, decorrelated across steps by the golden angle."""
    return normalize_hue(u * 360.0 + step * harmony_table().golden_angle)


def _legible(s: float, l: float) -> Tuple[float, float]:  # noqa: E741
    table = harmony_table()
    lo, hi = table.legible_lightness
    return max(s, table.min_saturation), min(hi, max(lo, l))


def generate_random_harmony(
    rng: np.random.Generator | int | None = None,
    *,
    harmony: "Harmony | str | None" = None,
    step: int = 0,
    engine: ColorEngine | None = None,
) -> Tuple[Harmony, List[ColorValue]]:
    """Generate a random, legible color set following one harmony.

    When ``harmony`` is None it is drawn with :func:`select_harmony`. Each
    color draws its saturation and lightness uniformly from the harmony's
    bands; lightness is then kept within [25, 85] and saturation at 35 or
    above.
    """
    gen = ensure_rng(rng)
    chosen = Harmony.from_value(harmony) if harmony is not None else select_harmony(gen)
    spec = _spec(chosen)
    base = golden_hue(float(gen.random()), step)
    colors: List[ColorValue] = []
    for offset in spec.offsets:
        s = float(gen.uniform(*spec.saturation))
        l = float(gen.uniform(*spec.lightness))  # noqa: E741
        s, l = _legible(s, l)  # noqa: E741
        colors.append(hsl_to_color(base + offset, s, l, engine))
    logger.debug("random harmony %s base hue %.1f", chosen.value, base)
    return chosen, colors


def generate_harmony_palette(
    rng: np.random.Generator | int | None = None,
    *,
    harmony: "Harmony | str | None" = None,
    step: int = 0,
    shade_count: int = 11,
    naming_pattern: str = "50-950",
    engine: ColorEngine | None = None,
) -> Palette:
    """Spread a random harmony across a light-to-dark shade scale.

    Stop ``i`` takes harmony color ``floor(i·n/count)``; lightness runs 85 to
    20. The two lightest stops lose 15 saturation (floor 30), the two darkest
    gain 10 (cap 90).
    """
    chosen, colors = generate_random_harmony(rng, harmony=harmony, step=step, engine=engine)
    count = clamp_shade_count(shade_count)
    idx = (np.arange(count) * len(colors)) // count
    light = np.linspace(85.0, 20.0, count)

    hsl_stops = np.empty((count, 3), dtype=np.float64)
    for i in range(count):
        h, s, _ = colors[idx[i]].hsl
        if i < 2:
            s = max(30.0, s - 15.0)
        elif i >= count - 2:
            s = min(90.0, s + 10.0)
        hsl_stops[i] = (h, s, light[i])

    base_color = colors[0]
    shades = assemble_shades(hsl_stops, base_color.hsl, naming_pattern, engine)
    return Palette(
        name=f"{chosen.label} Harmony",
        base_color=base_color,
        shades=shades,
        algorithm=Algorithm.COMPLEMENTARY,
    )


__all__ = [
    "Harmony",
    "HARMONY_ANGLES",
    "HARMONY_WEIGHTS",
    "FAN_LIMIT",
    "ensure_rng",
    "harmony_offsets",
    "harmony_hues",
    "generate_harmony_set",
    "complementary_colors",
    "analogous_colors",
    "triadic_colors",
    "tetradic_colors",
    "saturation_variations",
    "lightness_variations",
    "generate_fan_palette",
    "select_harmony",
    "golden_hue",
    "generate_random_harmony",
    "generate_harmony_palette",
]
