from __future__ import annotations

"""WCAG 2.x luminance and contrast scoring.

The thresholds used by :func:`wcag_level` are the WCAG 2.x success-criterion
values (7, 4.5 and 3).
"""

from typing import Union

from .color_types import RGB, ColorValue
from .convert import hex_to_color, parse_hex

ColorLike = Union[ColorValue, RGB, str]

AAA_THRESHOLD = 7.0
AA_THRESHOLD = 4.5
AA_LARGE_THRESHOLD = 3.0

WHITE = hex_to_color("#FFFFFF")
BLACK = hex_to_color("#000000")


def _as_rgb(color: ColorLike) -> RGB:
    if isinstance(color, ColorValue):
        return color.rgb
    if isinstance(color, str):
        return parse_hex(color)
    r, g, b = color
    return RGB(int(r), int(g), int(b))


def _linearize(channel: int) -> float:
    c = channel / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorLike) -> float:
    """Return the WCAG relative luminance in [0, 1]."""
    r, g, b = _as_rgb(color)
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(color1: ColorLike, color2: ColorLike) -> float:
    """Return the WCAG contrast ratio in [1, 21]; symmetric in its arguments."""
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    brightest = max(l1, l2)
    darkest = min(l1, l2)
    return (brightest + 0.05) / (darkest + 0.05)


def wcag_level(ratio: float) -> str:
    """Classify a contrast ratio as ``AAA``, ``AA``, ``AA Large`` or ``Fail``."""
    if ratio >= AAA_THRESHOLD:
        return "AAA"
    if ratio >= AA_THRESHOLD:
        return "AA"
    if ratio >= AA_LARGE_THRESHOLD:
        return "AA Large"
    return "Fail"


def best_text_color(background: ColorLike) -> ColorValue:
    """Return white or black, whichever contrasts more with ``background``."""
    white_contrast = contrast_ratio(background, WHITE)
    black_contrast = contrast_ratio(background, BLACK)
    return WHITE if white_contrast > black_contrast else BLACK


def text_contrast(background: ColorLike) -> float:
    """Contrast ratio of ``background`` against its best text color."""
    return contrast_ratio(background, best_text_color(background))


def is_light_color(color: ColorLike) -> bool:
    return relative_luminance(color) > 0.5


__all__ = [
    "AAA_THRESHOLD",
    "AA_THRESHOLD",
    "AA_LARGE_THRESHOLD",
    "WHITE",
    "BLACK",
    "relative_luminance",
    "contrast_ratio",
    "wcag_level",
    "best_text_color",
    "text_contrast",
    "is_light_color",
]
