"""
色相ハーモニー系カーブ（analogous / complementary）

- 色相オフセットは `pigment.harmony` の表（harmonies.yaml）から取得する。
- ストップ i はオフセット `floor(i·n / count)` 番目の色相を採る（前半=基準色相）。
- 明度は tailwind カーブ、彩度は種の値で固定。
"""

from __future__ import annotations

import numpy as np

from ..color_types import HSL
from ..harmony import Harmony, harmony_offsets
from .base import stops, tailwind_lightness, wrap_hue
from .registry import algorithm


def _spread_hues(h: float, offsets: tuple[float, ...], count: int) -> np.ndarray:
    n = len(offsets)
    idx = (np.arange(count) * n) // count
    return wrap_hue(h + np.asarray(offsets, dtype=np.float64)[idx])


@algorithm()
def analogous(seed: HSL, count: int) -> np.ndarray:
    h, s, l = seed  # noqa: E741
    hues = _spread_hues(h, harmony_offsets(Harmony.ANALOGOUS), count)
    return stops(hues, s, tailwind_lightness(l, count), count)


@algorithm()
def complementary(seed: HSL, count: int) -> np.ndarray:
    h, s, l = seed  # noqa: E741
    hues = _spread_hues(h, harmony_offsets(Harmony.COMPLEMENTARY), count)
    return stops(hues, s, tailwind_lightness(l, count), count)


__all__ = ["analogous", "complementary"]
