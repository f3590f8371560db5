from __future__ import annotations

"""Human-readable palette names.

Two namers share the same analysis of a shade list (dominant hue family,
saturation and lightness bands, detected palette type):

- :func:`random_name` composes a name from the word banks with one of
  several strategies, using an injected random generator;
- :func:`consistent_name` is deterministic: the same shades always yield
  the same name.

Word banks live in the packaged ``name_banks.yaml``.
"""

from typing import Callable, List, Mapping, Sequence, Tuple, Union

import numpy as np

from .color_types import ColorShade, ColorValue
from .tables import name_banks

ShadeLike = Union[ColorShade, ColorValue]

EMPTY_NAME = "Empty Palette"

# (start, stop, family); stop is exclusive, the last row catches the rest
HUE_FAMILIES: Tuple[Tuple[float, float, str], ...] = (
    (0.0, 30.0, "red"),
    (30.0, 60.0, "orange"),
    (60.0, 90.0, "yellow"),
    (90.0, 150.0, "green"),
    (150.0, 210.0, "blue"),
    (210.0, 270.0, "blue"),
    (270.0, 330.0, "purple"),
    (330.0, 360.0, "pink"),
)


def _color(shade: ShadeLike) -> ColorValue:
    return shade.color if isinstance(shade, ColorShade) else shade


def hue_family(hue: float) -> str:
    for start, stop, family in HUE_FAMILIES:
        if start <= hue < stop:
            return family
    return "pink"


def saturation_level(saturation: float) -> str:
    if saturation > 70:
        return "high"
    if saturation > 30:
        return "medium"
    return "low"


def lightness_level(lightness: float) -> str:
    if lightness < 30:
        return "dark"
    if lightness < 70:
        return "medium"
    return "light"


def detect_palette_type(shades: Sequence[ShadeLike]) -> str:
    """Classify the hue structure of a shade list.

    Returns one of ``single``, ``monochromatic``, ``complementary``,
    ``triadic``, ``tetradic``, ``analogous`` or ``custom``.
    """
    if len(shades) < 2:
        return "single"
    buckets: List[int] = []
    for shade in shades:
        b = (int(np.floor(_color(shade).hsl.h / 30.0 + 0.5)) * 30) % 360
        if b not in buckets:
            buckets.append(b)
    if len(buckets) == 1:
        return "monochromatic"
    if len(buckets) == 2 and 150 < abs(buckets[0] - buckets[1]) < 210:
        return "complementary"
    if len(buckets) == 3:
        return "triadic"
    if len(buckets) == 4:
        return "tetradic"
    ordered = sorted(buckets)
    if all(b - a <= 60 for a, b in zip(ordered, ordered[1:])):
        return "analogous"
    return "custom"


def dominant_color(shades: Sequence[ShadeLike]) -> ColorValue:
    """Most saturated color; the first one wins on ties."""
    best = _color(shades[0])
    for shade in shades[1:]:
        color = _color(shade)
        if color.hsl.s > best.hsl.s:
            best = color
    return best


def string_hash(text: str) -> int:
    """32-bit signed rolling hash (``h = h*31 + code``)."""
    h = 0
    for ch in text:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    return h - 0x100000000 if h >= 0x80000000 else h


class _Composer:
    """Word-bank lookups bound to one analyzed shade list and one generator."""

    def __init__(self, shades: Sequence[ShadeLike], rng: np.random.Generator):
        self.rng = rng
        self.banks: Mapping = name_banks()
        dominant = dominant_color(shades)
        self.hue = hue_family(dominant.hsl.h)
        self.sat = saturation_level(dominant.hsl.s)
        self.light = lightness_level(dominant.hsl.l)
        self.kind = detect_palette_type(shades)
        colors = [_color(s) for s in shades]
        self.avg_s = sum(c.hsl.s for c in colors) / len(colors)
        self.avg_l = sum(c.hsl.l for c in colors) / len(colors)

    def pick(self, words: Sequence[str]) -> str:
        return words[int(self.rng.integers(len(words)))]

    def hue_word(self) -> str:
        return self.pick(self.banks["hue"].get(self.hue, ("Color",)))

    def sat_word(self) -> str:
        return self.pick(self.banks["saturation"][self.sat])

    def light_word(self) -> str:
        return self.pick(self.banks["lightness"][self.light])

    def type_word(self) -> str:
        return self.pick(self.banks["type"].get(self.kind, ("Custom",)))

    def theme(self, category: str) -> str:
        return self.pick(self.banks["themes"][category])

    def suffix(self) -> str:
        return self.pick(self.banks["suffixes"])

    def fallback(self) -> str:
        return f"{self.sat_word()} {self.hue_word()}"

    def strategies(self) -> List[Callable[[], str]]:
        c = self

        def blended() -> str:
            if c.avg_s > 60 and c.avg_l < 40:
                return f"{c.light_word()} {c.hue_word()}"
            if c.avg_s < 30:
                return f"{c.sat_word()} {c.hue_word()}"
            return c.hue_word()

        def monochrome() -> str:
            if c.kind == "monochromatic":
                return f"{c.theme('textures')} {c.light_word()} Monochrome"
            return c.fallback()

        def contrast() -> str:
            if c.kind == "complementary":
                return f"{c.theme('emotions')} Contrast"
            return c.fallback()

        def signature() -> str:
            if c.kind == "monochromatic" and c.avg_l > 70:
                return f"Soft {c.hue_word()} Gradient"
            if c.kind == "complementary":
                return f"{c.pick(('Dynamic', 'Bold', 'Striking'))} Contrast"
            if c.avg_s > 80:
                return f"{c.pick(('Electric', 'Neon', 'Vibrant'))} {c.hue_word()}"
            if c.avg_l < 25:
                return f"{c.pick(('Midnight', 'Shadow', 'Deep'))} {c.hue_word()}"
            return f"{c.hue_word()} {c.suffix()}"

        return [
            lambda: f"{c.sat_word()} {c.hue_word()}",
            lambda: f"{c.light_word()} {c.hue_word()}",
            lambda: f"{c.hue_word()} {c.suffix()}",
            lambda: f"{c.theme('nature')} {c.hue_word()}",
            lambda: f"{c.theme('emotions')} {c.sat_word()}",
            lambda: f"{c.theme('art_movements')} {c.type_word()}",
            lambda: f"{c.theme('textures')} {c.light_word()}",
            lambda: f"{c.theme('time_periods')} {c.hue_word()}",
            lambda: f"{c.theme('cultural')} {c.sat_word()}",
            lambda: c.theme("seasons"),
            lambda: f"{c.theme('emotions')} {c.theme('textures')} {c.hue_word()}",
            lambda: f"{c.theme('nature')} {c.theme('art_movements')}",
            lambda: f"{c.theme('cultural')} {c.theme('time_periods')} {c.type_word()}",
            blended,
            monochrome,
            contrast,
            signature,
            c.hue_word,
        ]


def random_name(
    shades: Sequence[ShadeLike], rng: np.random.Generator | int | None = None
) -> str:
    """Compose a creative palette name.

    A single shade always uses the saturation + hue strategy; monochromatic
    lists use it or the nature + hue strategy with equal odds; complementary
    lists use the emotion + saturation strategy; anything else picks a
    strategy uniformly.
    """
    if not shades:
        return EMPTY_NAME
    gen = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
    composer = _Composer(shades, gen)
    strategies = composer.strategies()
    if len(shades) == 1:
        strategy = strategies[0]
    elif composer.kind == "monochromatic":
        strategy = strategies[0 if gen.random() > 0.5 else 3]
    elif composer.kind == "complementary":
        strategy = strategies[4]
    else:
        strategy = strategies[int(gen.integers(len(strategies)))]
    name = strategy().strip()
    return name if name else composer.fallback()


def random_names(
    shades: Sequence[ShadeLike],
    count: int = 3,
    rng: np.random.Generator | int | None = None,
) -> List[str]:
    """Up to ``count`` distinct names, giving up after ``3·count`` attempts."""
    gen = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
    names: List[str] = []
    for _ in range(max(0, count) * 3):
        if len(names) >= count:
            break
        name = random_name(shades, gen)
        if name not in names:
            names.append(name)
    return names


def consistent_name(shades: Sequence[ShadeLike]) -> str:
    """Deterministic palette name derived from the shade hexes."""
    if not shades:
        return EMPTY_NAME
    colors = [_color(s) for s in shades]
    h = abs(string_hash("".join(c.hex for c in colors)))
    dominant = dominant_color(colors)
    banks = name_banks()

    hue_words = banks["hue"].get(hue_family(dominant.hsl.h), ("Color",))
    sat_words = banks["saturation"][saturation_level(dominant.hsl.s)]
    light_words = banks["lightness"][lightness_level(dominant.hsl.l)]
    suffixes = banks["suffixes"]

    hue_word = hue_words[h % len(hue_words)]
    template = h % 4
    if template == 0:
        return f"{sat_words[h % len(sat_words)]} {hue_word}"
    if template == 1:
        return f"{light_words[h % len(light_words)]} {hue_word}"
    if template == 2:
        return f"{hue_word} {suffixes[h % len(suffixes)]}"
    return hue_word


def color_name(color: ColorValue) -> str:
    """Short descriptive label for a single color (e.g. ``"Dark Blue"``)."""
    h, s, l = color.hsl  # noqa: E741
    if s <= 10:
        base = "Gray"
    elif h < 15:
        base = "Red"
    elif h < 45:
        base = "Orange"
    elif h < 75:
        base = "Yellow"
    elif h < 150:
        base = "Green"
    elif h < 210:
        base = "Cyan"
    elif h < 270:
        base = "Blue"
    elif h < 330:
        base = "Purple"
    else:
        base = "Pink"
    if l < 20:
        return f"Very Dark {base}"
    if l < 40:
        return f"Dark {base}"
    if l > 80:
        return f"Light {base}"
    return base


__all__ = [
    "EMPTY_NAME",
    "HUE_FAMILIES",
    "hue_family",
    "saturation_level",
    "lightness_level",
    "detect_palette_type",
    "dominant_color",
    "string_hash",
    "random_name",
    "random_names",
    "consistent_name",
    "color_name",
]
