from __future__ import annotations

"""Container type for generated shade palettes.

This module defines the :class:`Algorithm` identifiers and the immutable
:class:`Palette` dataclass, which groups the seed color, the generated
shades and the algorithm that produced them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from common.base_registry import normalize_key

from .color_types import ColorShade, ColorValue
from .errors import InvalidAlgorithm


class Algorithm(str, Enum):
    """Shade-generation algorithms understood by :func:`pigment.generate_shades`."""

    TAILWIND = "tailwind"
    RADIX = "radix"
    ANT = "ant"
    LIGHTNESS = "lightness"
    SATURATION = "saturation"
    HUE = "hue"
    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"

    @classmethod
    def from_value(cls, value: "Algorithm | str") -> "Algorithm":
        if isinstance(value, Algorithm):
            return value
        try:
            key = normalize_key(value)
        except (TypeError, ValueError) as exc:
            raise InvalidAlgorithm(f"Unknown algorithm: {value!r}") from exc
        for alg in cls:
            if alg.value == key:
                return alg
        raise InvalidAlgorithm(f"Unknown algorithm: {value!r}")


@dataclass(frozen=True)
class Palette:
    """Generated shade palette.

    Attributes
    ----------
    name:
        Human-readable palette name (explicit label or a generated one).
    base_color:
        Seed color the palette was generated from.
    shades:
        Stops ordered as produced by the algorithm (light to dark for the
        lightness-driven algorithms). Exactly one stop is active.
    algorithm:
        Algorithm that produced the shades.
    """

    name: str
    base_color: ColorValue
    shades: Tuple[ColorShade, ...]
    algorithm: Algorithm

    def __post_init__(self) -> None:
        if not self.shades:
            raise ValueError("Palette requires at least one shade.")
        object.__setattr__(self, "shades", tuple(self.shades))

    @property
    def active_shade(self) -> Optional[ColorShade]:
        for shade in self.shades:
            if shade.is_active:
                return shade
        return None

    def hexes(self) -> List[str]:
        return [shade.color.hex for shade in self.shades]

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain, JSON-serializable representation."""
        return {
            "name": self.name,
            "base_color": self.base_color.to_dict(),
            "algorithm": self.algorithm.value,
            "shades": [shade.to_dict() for shade in self.shades],
        }


__all__ = ["Algorithm", "Palette"]
