"""
キュレーション系シェードカーブ（tailwind / radix / ant）

- いずれも明 → 暗の順にストップを返し、色相は種の値で固定する。
- tailwind: 中央に種の明度。明側は 95 へ線形、暗側は `l·(1 − 0.9f)`。
- radix: 11 点のアンカー明度を count 点へ再標本化し、中央が種の明度になるよう再センタリング。
  彩度は ×0.9（tailwind より最小コントラストが高い）。
- ant: 明側は 98 へ、彩度を `s·(1 − 0.3f)` で落とす。暗側は `l·(1 − 0.85f)`、彩度は最大 +20%。
"""

from __future__ import annotations

import numpy as np

from ..color_types import HSL
from .base import split_fractions, stops, tailwind_lightness
from .registry import algorithm

RADIX_ANCHORS = np.array([99, 97, 94, 89, 82, 71, 58, 45, 32, 20, 9], dtype=np.float64)


@algorithm()
def tailwind(seed: HSL, count: int) -> np.ndarray:
    """Tailwind 風の明度ランプ（h, s 固定）。"""
    h, s, l = seed  # noqa: E741
    return stops(h, s, tailwind_lightness(l, count), count)


def _radix_lightness(l: float, count: int) -> np.ndarray:  # noqa: E741
    if count == 1:
        return np.array([float(l)])
    t = np.linspace(0.0, 1.0, count)
    anchors = np.interp(t, np.linspace(0.0, 1.0, RADIX_ANCHORS.size), RADIX_ANCHORS)
    mid = anchors[count // 2]
    light_end = max(float(RADIX_ANCHORS[0]), l + (100.0 - l) / 2.0)
    dark_end = min(float(RADIX_ANCHORS[-1]), l / 2.0)

    out = np.full(count, float(l), dtype=np.float64)
    light = anchors > mid
    dark = anchors < mid
    # アンカー間の相対位置を保ったまま [mid, a0] → [l, light_end] / [a_end, mid] → [dark_end, l]
    out[light] = l + (anchors[light] - mid) / (anchors[0] - mid) * (light_end - l)
    out[dark] = l - (mid - anchors[dark]) / (mid - anchors[-1]) * (l - dark_end)
    return out


@algorithm()
def radix(seed: HSL, count: int) -> np.ndarray:
    """Radix 風のアンカー再標本化カーブ（彩度 ×0.9）。"""
    h, s, l = seed  # noqa: E741
    return stops(h, s * 0.9, _radix_lightness(l, count), count)


@algorithm()
def ant(seed: HSL, count: int) -> np.ndarray:
    """Ant Design 風カーブ（明側で脱飽和、暗側でわずかに飽和）。"""
    h, s, l = seed  # noqa: E741
    base, f_light, f_dark = split_fractions(count)
    light = tailwind_lightness(l, count, light_end=98.0, dark_factor=0.85)
    sat = np.full(count, float(s), dtype=np.float64)
    sat[:base] = s * (1.0 - 0.3 * f_light)
    sat[base + 1 :] = np.minimum(100.0, s * (1.0 + 0.2 * f_dark))
    return stops(h, sat, light, count)


__all__ = ["RADIX_ANCHORS", "tailwind", "radix", "ant"]
