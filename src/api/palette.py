from __future__ import annotations

"""構成値を既定とするパレット生成 API。

どこで: `api.palette`。
何を: `configs/default.yaml`（+ ルート `config.yaml`）の `palette`/`fan` 節で
      省略引数を補い、`pigment` のコア関数へ委譲する。
なぜ: コア（`pigment`）は設定ファイルを読まない純関数群に保ち、
      既定値とフォールバック色の解決をこの層へ集約するため。
"""

import logging
from typing import Any, Dict, List, Optional

import numpy as np

from pigment import (
    ColorValue,
    Palette,
    ParseError,
    generate_fan_palette,
    generate_harmony_palette,
    generate_shades,
    parse_color,
)
from pigment.ui_helpers import FanPosition, fan_position
from util.utils import config_section

logger = logging.getLogger(__name__)

# 設定ファイル欠落時の既定値
_PALETTE_DEFAULTS: Dict[str, Any] = {
    "algorithm": "tailwind",
    "shade_count": 11,
    "contrast_shift": 0,
    "naming_pattern": "50-950",
    "fallback_color": "#3B82F6",
}
_FAN_DEFAULTS: Dict[str, Any] = {"radius": 120}


def palette_config() -> Dict[str, Any]:
    """`palette` 節を既定値とマージして返す。"""
    cfg = dict(_PALETTE_DEFAULTS)
    cfg.update(config_section("palette"))
    return cfg


def fan_config() -> Dict[str, Any]:
    cfg = dict(_FAN_DEFAULTS)
    cfg.update(config_section("fan"))
    return cfg


def resolve_seed(value: ColorValue | str | None) -> ColorValue:
    """シード入力を ColorValue に解決する。

    - `ColorValue` はそのまま返す。
    - 文字列は `parse_color` で解釈し、失敗時は構成のフォールバック色へ置き換えて警告する。
    - None はフォールバック色。
    """
    if isinstance(value, ColorValue):
        return value
    fallback = str(palette_config()["fallback_color"])
    if value is None:
        return parse_color(fallback)
    try:
        return parse_color(value)
    except ParseError:
        logger.warning("invalid seed color %r; falling back to %s", value, fallback)
        return parse_color(fallback)


def generate_palette(
    seed: ColorValue | str | None = None,
    algorithm: Optional[str] = None,
    shade_count: Optional[int] = None,
    contrast_shift: Optional[float] = None,
    naming_pattern: Optional[str] = None,
    label: Optional[str] = None,
) -> Palette:
    """省略引数を構成値で補ってシェードパレットを生成する。"""
    cfg = palette_config()
    return generate_shades(
        resolve_seed(seed),
        algorithm if algorithm is not None else cfg["algorithm"],
        int(shade_count if shade_count is not None else cfg["shade_count"]),
        contrast_shift if contrast_shift is not None else cfg["contrast_shift"],
        naming_pattern if naming_pattern is not None else str(cfg["naming_pattern"]),
        label,
    )


def harmony_palette(
    seed_value: int | None = None,
    step: int = 0,
    harmony: Optional[str] = None,
) -> Palette:
    """ランダムハーモニーのシェードパレット（`seed_value` 指定で再現可能）。"""
    cfg = palette_config()
    rng = np.random.default_rng(seed_value)
    return generate_harmony_palette(
        rng,
        harmony=harmony,
        step=step,
        shade_count=int(cfg["shade_count"]),
        naming_pattern=str(cfg["naming_pattern"]),
    )


def fan(seed: ColorValue | str | None = None) -> List[tuple[ColorValue, FanPosition]]:
    """ファン配置の色と位置の組を返す。"""
    colors = generate_fan_palette(resolve_seed(seed))
    radius = float(fan_config()["radius"])
    return [(c, fan_position(i, len(colors), radius)) for i, c in enumerate(colors)]


__all__ = [
    "palette_config",
    "fan_config",
    "resolve_seed",
    "generate_palette",
    "harmony_palette",
    "fan",
]
