"""
どこで: `pigment.algorithms` の共通ヘルパ。
何を: (h, s, l) ストップ配列の組み立てと、tailwind 系の明度カーブを提供する。
なぜ: 各カーブ関数が同じ配列形状（(count, 3), float64）を返すことを一箇所で保証するため。
"""

from __future__ import annotations

import numpy as np


def stops(h, s, l, count: int) -> np.ndarray:  # noqa: E741
    """スカラ/配列の h, s, l を (count, 3) の float64 配列へ束ねる。"""
    out = np.empty((count, 3), dtype=np.float64)
    out[:, 0] = np.broadcast_to(np.asarray(h, dtype=np.float64), (count,))
    out[:, 1] = np.broadcast_to(np.asarray(s, dtype=np.float64), (count,))
    out[:, 2] = np.broadcast_to(np.asarray(l, dtype=np.float64), (count,))
    return out


def split_fractions(count: int) -> tuple[int, np.ndarray, np.ndarray]:
    """基準インデックス `count // 2` と、明側/暗側の進行度 f を返す。

    - 明側: 基準から離れるほど f → 1（index 0 で 1）。
    - 暗側: 基準の次から末尾へ向けて f → 1（末尾で 1）。
    """
    base = count // 2
    idx = np.arange(count, dtype=np.float64)
    f_light = (base - idx[:base]) / base if base > 0 else np.empty(0)
    n_dark = count - base - 1
    f_dark = (idx[base + 1 :] - base) / n_dark if n_dark > 0 else np.empty(0)
    return base, f_light, f_dark


def tailwind_lightness(
    l: float,  # noqa: E741
    count: int,
    *,
    light_end: float = 95.0,
    dark_factor: float = 0.9,
) -> np.ndarray:
    """基準に種の明度、明側は `light_end` へ、暗側は `l·(1 − dark_factor·f)` へ。"""
    base, f_light, f_dark = split_fractions(count)
    out = np.full(count, float(l), dtype=np.float64)
    out[:base] = l + (light_end - l) * f_light
    out[base + 1 :] = l * (1.0 - dark_factor * f_dark)
    return out


def wrap_hue(h: np.ndarray) -> np.ndarray:
    """色相配列を [0, 360) へ折り返す。"""
    return np.mod(np.asarray(h, dtype=np.float64), 360.0)


__all__ = ["stops", "split_fractions", "tailwind_lightness", "wrap_hue"]
