"""
単一チャネルのスイープ系カーブ（lightness / saturation / hue / monochromatic）

- lightness: 明度 95 → 5 を線形に（h, s 固定）。
- saturation: 彩度を種の値 → 0 へ線形に（h, l 固定）。並びは高彩度 → 無彩色。
- hue: 色相を `h − 30` → `h + 30`（計 60°）で掃引し、中央に種の色相（s, l 固定）。
- monochromatic: 明度 95 → 10 を均等に（h, s 固定）。
"""

from __future__ import annotations

import numpy as np

from ..color_types import HSL
from .base import stops, wrap_hue
from .registry import algorithm

HUE_SWEEP_DEGREES = 60.0


@algorithm()
def lightness(seed: HSL, count: int) -> np.ndarray:
    h, s, _ = seed
    return stops(h, s, np.linspace(95.0, 5.0, count), count)


@algorithm()
def saturation(seed: HSL, count: int) -> np.ndarray:
    h, s, l = seed  # noqa: E741
    return stops(h, np.linspace(float(s), 0.0, count), l, count)


@algorithm()
def hue(seed: HSL, count: int) -> np.ndarray:
    """種の色相を中心に ±30° を掃引する。"""
    h, s, l = seed  # noqa: E741
    if count == 1:
        return stops(h, s, l, 1)
    idx = np.arange(count, dtype=np.float64)
    offsets = (idx - count // 2) / (count - 1) * HUE_SWEEP_DEGREES
    return stops(wrap_hue(h + offsets), s, l, count)


@algorithm()
def monochromatic(seed: HSL, count: int) -> np.ndarray:
    h, s, _ = seed
    return stops(h, s, np.linspace(95.0, 10.0, count), count)


__all__ = ["HUE_SWEEP_DEGREES", "lightness", "saturation", "hue", "monochromatic"]
