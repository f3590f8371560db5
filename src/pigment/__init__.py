"""Public entrypoint for the pigment palette library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``pigment`` instead of individual
submodules.
"""

from .color_types import HSL, OKLCH, RGB, ColorShade, ColorValue
from .errors import (
    InvalidAlgorithm,
    InvalidHarmony,
    InvalidNamingPattern,
    ParseError,
    PigmentError,
)
from .engine import ApproxColorEngine, ColorEngine, OklabColorEngine, normalize_hue
from .convert import (
    ColorFormat,
    format_color,
    hex_to_color,
    hsl_to_color,
    parse_color,
    rgb_to_color,
)
from .accessibility import best_text_color, contrast_ratio, relative_luminance, wcag_level
from .palette import Algorithm, Palette
from .scale import NamingPattern
from .harmony import (
    Harmony,
    generate_fan_palette,
    generate_harmony_palette,
    generate_harmony_set,
    generate_random_harmony,
)
from .shades import generate_shades
from .naming import color_name, consistent_name, random_name, random_names
from .ui_helpers import (
    ALGORITHM_OPTIONS,
    HARMONY_OPTIONS,
    NAMING_PATTERN_OPTIONS,
    export_palette,
    fan_position,
)

__all__ = [
    "RGB",
    "HSL",
    "OKLCH",
    "ColorValue",
    "ColorShade",
    "PigmentError",
    "ParseError",
    "InvalidAlgorithm",
    "InvalidHarmony",
    "InvalidNamingPattern",
    "ColorEngine",
    "ApproxColorEngine",
    "OklabColorEngine",
    "normalize_hue",
    "ColorFormat",
    "hex_to_color",
    "hsl_to_color",
    "rgb_to_color",
    "parse_color",
    "format_color",
    "relative_luminance",
    "contrast_ratio",
    "wcag_level",
    "best_text_color",
    "Algorithm",
    "NamingPattern",
    "Palette",
    "Harmony",
    "generate_shades",
    "generate_harmony_set",
    "generate_fan_palette",
    "generate_random_harmony",
    "generate_harmony_palette",
    "random_name",
    "random_names",
    "consistent_name",
    "color_name",
    "export_palette",
    "fan_position",
    "ALGORITHM_OPTIONS",
    "NAMING_PATTERN_OPTIONS",
    "HARMONY_OPTIONS",
]
