from __future__ import annotations

"""Color space conversion between HEX, RGB, HSL and (approximate) OKLCH.

Every public constructor here returns a fully populated, immutable
:class:`~pigment.color_types.ColorValue`. Numeric inputs outside their
domain are clamped (channels, saturation, lightness) or wrapped (hue);
malformed strings raise :class:`~pigment.errors.ParseError`.
"""

import math
import re
from enum import Enum

from .color_types import HSL, RGB, ColorValue
from .engine import ColorEngine, default_engine, normalize_hue
from .errors import ParseError

_HEX6 = re.compile(r"[0-9A-Fa-f]{6}")
_HEX3 = re.compile(r"[0-9A-Fa-f]{3}")
_NUM = r"(\d+(?:\.\d+)?)"
_RGB_FN = re.compile(rf"rgb\(\s*{_NUM}\s*,\s*{_NUM}\s*,\s*{_NUM}\s*\)", re.IGNORECASE)
_RGBA_FN = re.compile(
    rf"rgba\(\s*{_NUM}\s*,\s*{_NUM}\s*,\s*{_NUM}\s*,\s*[0-9.]+\s*\)", re.IGNORECASE
)
_HSL_FN = re.compile(rf"hsl\(\s*{_NUM}\s*,\s*{_NUM}%\s*,\s*{_NUM}%\s*\)", re.IGNORECASE)

NAMED_COLORS = {
    "red": "#FF0000",
    "green": "#008000",
    "blue": "#0000FF",
    "black": "#000000",
    "white": "#FFFFFF",
    "yellow": "#FFFF00",
    "cyan": "#00FFFF",
    "magenta": "#FF00FF",
}


class ColorFormat(str, Enum):
    """String representations produced by :func:`format_color`."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    OKLCH = "oklch"


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x


def _clamp_channel(v: float) -> int:
    return int(_clamp(_round_half_up(float(v)), 0, 255))


def parse_hex(text: str) -> RGB:
    """Parse ``#RGB``/``#RRGGBB`` (``#`` optional) into integer channels."""
    if not isinstance(text, str):
        raise ParseError(f"hex color must be a string: {text!r}")
    s = text.strip()
    if s.startswith("#"):
        s = s[1:]
    if _HEX3.fullmatch(s):
        s = "".join(ch * 2 for ch in s)
    elif not _HEX6.fullmatch(s):
        raise ParseError(f"invalid hex color: '{text}' (expected RGB or RRGGBB)")
    return RGB(int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Return the uppercase ``#RRGGBB`` form of the (clamped) channels."""
    return f"#{_clamp_channel(r):02X}{_clamp_channel(g):02X}{_clamp_channel(b):02X}"


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """Convert 0..255 channels to unrounded HSL (h in degrees, s/l in percent)."""
    rn, gn, bn = r / 255.0, g / 255.0, b / 255.0
    mx = max(rn, gn, bn)
    mn = min(rn, gn, bn)
    l = (mx + mn) / 2.0  # noqa: E741
    d = mx - mn
    if d == 0.0:
        # achromatic
        return HSL(0.0, 0.0, l * 100.0)
    s = d / (2.0 - mx - mn) if l > 0.5 else d / (mx + mn)
    if mx == rn:
        h = (gn - bn) / d + (6.0 if gn < bn else 0.0)
    elif mx == gn:
        h = (bn - rn) / d + 2.0
    else:
        h = (rn - gn) / d + 4.0
    return HSL(normalize_hue(h * 60.0), s * 100.0, l * 100.0)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:  # noqa: E741
    """Convert HSL (degrees, percent, percent) to integer channels."""
    hn = normalize_hue(h) / 360.0
    sn = _clamp(float(s), 0.0, 100.0) / 100.0
    ln = _clamp(float(l), 0.0, 100.0) / 100.0
    if sn == 0.0:
        r = g = b = ln
    else:
        q = ln * (1.0 + sn) if ln < 0.5 else ln + sn - ln * sn
        p = 2.0 * ln - q
        r = _hue_to_channel(p, q, hn + 1.0 / 3.0)
        g = _hue_to_channel(p, q, hn)
        b = _hue_to_channel(p, q, hn - 1.0 / 3.0)
    return RGB(_clamp_channel(r * 255.0), _clamp_channel(g * 255.0), _clamp_channel(b * 255.0))


def _settle_hsl(requested: HSL, derived: HSL) -> HSL:
    # keep a requested component only while it rounds to within 1 of the derived one
    h, s, l = requested  # noqa: E741
    gap = abs(_round_half_up(h) % 360 - derived.h) % 360.0
    if derived.s != 0.0 and min(gap, 360.0 - gap) > 1.0:
        h = derived.h
    if abs(_round_half_up(s) - derived.s) > 1.0:
        s = derived.s
    if abs(_round_half_up(l) - derived.l) > 1.0:
        l = derived.l  # noqa: E741
    return HSL(h, s, l)


def _make_color(rgb: RGB, engine: ColorEngine | None, requested: HSL | None = None) -> ColorValue:
    if engine is None:
        engine = default_engine()
    hsl = rgb_to_hsl(*rgb)
    if requested is not None:
        hsl = _settle_hsl(requested, hsl)
    hsl_rounded = HSL(
        _round_half_up(normalize_hue(hsl.h)) % 360,
        _round_half_up(_clamp(hsl.s, 0.0, 100.0)),
        _round_half_up(_clamp(hsl.l, 0.0, 100.0)),
    )
    return ColorValue(
        hex=rgb_to_hex(*rgb),
        rgb=rgb,
        hsl=hsl_rounded,
        oklch=engine.to_oklch(rgb, hsl),
    )


def hex_to_color(hex_str: str, engine: ColorEngine | None = None) -> ColorValue:
    """Build a ColorValue from a 3- or 6-digit hex string.

    Raises
    ------
    ParseError
        If the string is not a valid hex color. The caller decides on a
        fallback color; none is substituted here.
    """
    rgb = parse_hex(hex_str)
    return _make_color(rgb, engine)


def rgb_to_color(r: float, g: float, b: float, engine: ColorEngine | None = None) -> ColorValue:
    """Build a ColorValue from 0..255 channels (clamped and rounded)."""
    rgb = RGB(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))
    return _make_color(rgb, engine)


def hsl_to_color(h: float, s: float, l: float, engine: ColorEngine | None = None) -> ColorValue:  # noqa: E741
    """Build a ColorValue from HSL.

    Hue is wrapped into [0, 360) and saturation/lightness are clamped to
    [0, 100]. The stored ``hsl`` keeps the requested (rounded) components
    wherever they agree with the rgb-derived values within 1 unit and falls
    back to the derived value otherwise. Achromatic results keep the
    requested hue, so harmony math does not lose it on pure black or white.
    """
    hsl = HSL(normalize_hue(h), _clamp(float(s), 0.0, 100.0), _clamp(float(l), 0.0, 100.0))
    return _make_color(hsl_to_rgb(*hsl), engine, hsl)


def parse_color(text: str, engine: ColorEngine | None = None) -> ColorValue:
    """Parse hex, ``rgb()``, ``rgba()``, ``hsl()`` or a basic color name.

    The alpha component of ``rgba()`` is accepted and ignored.
    """
    if not isinstance(text, str) or not text.strip():
        raise ParseError(f"invalid color input: {text!r}")
    s = text.strip()
    named = NAMED_COLORS.get(s.lower())
    if named is not None:
        return hex_to_color(named, engine)
    m = _RGB_FN.fullmatch(s) or _RGBA_FN.fullmatch(s)
    if m:
        channels = [float(v) for v in m.groups()]
        if any(v > 255.0 for v in channels):
            raise ParseError(f"rgb channel out of range: '{text}'")
        return rgb_to_color(*channels, engine=engine)
    m = _HSL_FN.fullmatch(s)
    if m:
        h, sat, light = (float(v) for v in m.groups())
        if sat > 100.0 or light > 100.0:
            raise ParseError(f"hsl percentage out of range: '{text}'")
        return hsl_to_color(h, sat, light, engine)
    return hex_to_color(s, engine)


def format_color(color: ColorValue, fmt: ColorFormat | str = ColorFormat.HEX) -> str:
    """Render a color as a CSS-like string in the given format."""
    try:
        f = ColorFormat(fmt)
    except ValueError as exc:
        raise ValueError(f"Unknown color format: {fmt}") from exc
    if f is ColorFormat.RGB:
        return f"rgb({color.rgb.r}, {color.rgb.g}, {color.rgb.b})"
    if f is ColorFormat.HSL:
        return f"hsl({color.hsl.h:g}, {color.hsl.s:g}%, {color.hsl.l:g}%)"
    if f is ColorFormat.OKLCH:
        return f"oklch({color.oklch.l:g} {color.oklch.c:g} {color.oklch.h:g})"
    return color.hex


def is_valid_color(color: ColorValue) -> bool:
    """Range-check all four representations of a color."""
    r, g, b = color.rgb
    if not all(0 <= v <= 255 for v in (r, g, b)):
        return False
    h, s, l = color.hsl  # noqa: E741
    if not (0 <= h <= 360 and 0 <= s <= 100 and 0 <= l <= 100):
        return False
    ol, oc, oh = color.oklch
    if not (0.0 <= ol <= 1.0 and oc >= 0.0 and 0.0 <= oh <= 360.0):
        return False
    return bool(re.fullmatch(r"#[0-9A-F]{6}", color.hex))


__all__ = [
    "ColorFormat",
    "NAMED_COLORS",
    "parse_hex",
    "parse_color",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_color",
    "rgb_to_color",
    "hsl_to_color",
    "normalize_hue",
    "format_color",
    "is_valid_color",
]
