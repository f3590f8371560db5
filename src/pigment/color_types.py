from __future__ import annotations

"""Core color value types used by the pigment engine.

This module defines the immutable value types exchanged between the
converter, the shade/harmony generators and UI/export collaborators:
:class:`ColorValue` (one color in four synchronized representations) and
:class:`ColorShade` (one labelled stop of a shade scale).
"""

from dataclasses import dataclass
from typing import Any, Dict, NamedTuple


class RGB(NamedTuple):
    """sRGB channels as integers in [0, 255]."""

    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in percent [0, 100]."""

    h: float
    s: float
    l: float  # noqa: E741


class OKLCH(NamedTuple):
    """OKLCH with lightness in [0, 1], non-negative chroma and hue in degrees."""

    l: float  # noqa: E741
    c: float
    h: float


@dataclass(frozen=True)
class ColorValue:
    """One color in HEX, RGB, HSL and OKLCH at the same time.

    Instances are produced by :mod:`pigment.convert` only; all four fields
    describe the same color within rounding tolerance. Any change to a color
    produces a new instance.

    Attributes
    ----------
    hex:
        Uppercase ``#RRGGBB`` string.
    rgb:
        Integer channels in [0, 255].
    hsl:
        Rounded integer hue/saturation/lightness.
    oklch:
        OKLCH triple (approximate by default, see :mod:`pigment.engine`).
    """

    hex: str
    rgb: RGB
    hsl: HSL
    oklch: OKLCH

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain, JSON-serializable representation."""
        return {
            "hex": self.hex,
            "rgb": {"r": self.rgb.r, "g": self.rgb.g, "b": self.rgb.b},
            "hsl": {"h": self.hsl.h, "s": self.hsl.s, "l": self.hsl.l},
            "oklch": {"l": self.oklch.l, "c": self.oklch.c, "h": self.oklch.h},
        }


@dataclass(frozen=True)
class ColorShade:
    """A labelled stop of a shade scale.

    ``value`` is the numeric weight behind ``name`` (``"500"`` -> ``500``);
    ``contrast`` is the WCAG ratio of ``color`` against its best text color.
    """

    name: str
    value: int
    color: ColorValue
    contrast: float
    is_active: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "color": self.color.to_dict(),
            "contrast": self.contrast,
            "is_active": self.is_active,
        }


__all__ = ["RGB", "HSL", "OKLCH", "ColorValue", "ColorShade"]
