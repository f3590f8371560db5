from __future__ import annotations

"""Helper utilities for integrating pigment into external UIs.

This module exposes label/enum pairs for algorithm, naming-pattern, harmony
and color-format pickers, a public `export_palette` helper that converts
Palette objects into simple per-shade value lists, and the fan layout
geometry used to place harmony swatches on a half circle.
"""

import math
from typing import Dict, List, NamedTuple, Tuple

from .convert import ColorFormat, format_color
from .harmony import Harmony
from .palette import Algorithm, Palette
from .scale import NamingPattern


class FanPosition(NamedTuple):
    """Swatch offset from the fan pivot and its angle in degrees."""

    x: float
    y: float
    angle: float


# Label/Enum pairs for UI choices
ALGORITHM_OPTIONS: List[Tuple[str, Algorithm]] = [
    ("Tailwind", Algorithm.TAILWIND),
    ("Radix", Algorithm.RADIX),
    ("Ant Design", Algorithm.ANT),
    ("Lightness", Algorithm.LIGHTNESS),
    ("Saturation", Algorithm.SATURATION),
    ("Hue", Algorithm.HUE),
    ("Monochromatic", Algorithm.MONOCHROMATIC),
    ("Analogous", Algorithm.ANALOGOUS),
    ("Complementary", Algorithm.COMPLEMENTARY),
]
NAMING_PATTERN_OPTIONS: List[Tuple[str, NamingPattern]] = [
    ("50-950", NamingPattern.P50_950),
    ("100-900", NamingPattern.P100_900),
    ("50-900", NamingPattern.P50_900),
    ("1-20", NamingPattern.P1_20),
    ("10-200", NamingPattern.P10_200),
    ("Custom", NamingPattern.CUSTOM),
]
HARMONY_OPTIONS: List[Tuple[str, Harmony]] = [(h.label, h) for h in Harmony]
COLOR_FORMAT_OPTIONS: List[Tuple[str, ColorFormat]] = [
    ("HEX", ColorFormat.HEX),
    ("RGB", ColorFormat.RGB),
    ("HSL", ColorFormat.HSL),
    ("OKLCH", ColorFormat.OKLCH),
]

ALGORITHM_LABEL_MAP: Dict[str, Algorithm] = {label: value for label, value in ALGORITHM_OPTIONS}
HARMONY_LABEL_MAP: Dict[str, Harmony] = {label: value for label, value in HARMONY_OPTIONS}

EXPORT_FORMATS = ("hex", "rgb", "hsl", "oklch", "css")


def export_palette(palette: Palette, fmt: ColorFormat | str) -> List[object]:
    """Convert a Palette to a list of per-shade values in the desired format.

    ``hex`` yields strings, ``rgb``/``hsl``/``oklch`` yield tuples and
    ``css`` yields ``rgb(...)`` strings.
    """
    key = fmt.value if isinstance(fmt, ColorFormat) else str(fmt).strip().lower()
    colors = [shade.color for shade in palette.shades]
    if key == "hex":
        return [c.hex for c in colors]
    if key == "rgb":
        return [tuple(c.rgb) for c in colors]
    if key == "hsl":
        return [tuple(c.hsl) for c in colors]
    if key == "oklch":
        return [tuple(c.oklch) for c in colors]
    if key == "css":
        return [format_color(c, ColorFormat.RGB) for c in colors]
    raise ValueError(f"Unsupported export format: {fmt}")


def fan_position(index: int, total: int, radius: float = 120.0) -> FanPosition:
    """Position of swatch ``index`` of ``total`` on a half circle.

    Angles run from -90 to +90 degrees; a single swatch sits at -90.
    """
    angle = -90.0 if total <= 1 else index / (total - 1) * 180.0 - 90.0
    rad = math.radians(angle)
    return FanPosition(x=math.cos(rad) * radius, y=math.sin(rad) * radius, angle=angle)


__all__ = [
    "FanPosition",
    "ALGORITHM_OPTIONS",
    "NAMING_PATTERN_OPTIONS",
    "HARMONY_OPTIONS",
    "COLOR_FORMAT_OPTIONS",
    "ALGORITHM_LABEL_MAP",
    "HARMONY_LABEL_MAP",
    "EXPORT_FORMATS",
    "export_palette",
    "fan_position",
]
