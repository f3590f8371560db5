"""
どこで: `pigment.algorithms` のレジストリ層（関数専用）。
何を: `@algorithm` デコレータによる登録と取得/一覧/検査を提供（キーは正規化）。
なぜ: シェード生成アルゴリズムを一貫 API で管理し、`pigment.shades` から安全に解決するため。

公開 API 概要:
- `algorithm`（デコレータ）: カーブ関数を登録
- `get_algorithm(name)` / `list_algorithms()` / `is_algorithm_registered(name)`
- `get_registry()`: 読み取り専用ビュー（テスト/診断用）

カーブ関数の契約:
- `curve(seed: HSL, count: int) -> np.ndarray`（shape=(count, 3), float64, 列は h/s/l）
- 丸め/クランプ/色生成は呼び出し側（`pigment.shades`）が担う。
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

import numpy as np

from common.base_registry import BaseRegistry

from ..color_types import HSL
from ..errors import InvalidAlgorithm

CurveFn = Callable[[HSL, int], np.ndarray]

# 共通レジストリ
_algorithm_registry = BaseRegistry()


def algorithm(arg: Any | None = None, /, name: str | None = None):
    """カーブ関数を登録するデコレータ。

    使用例:
    - `@algorithm` / `@algorithm()`                    → 関数名から自動推論。
    - `@algorithm("custom")` / `@algorithm(name="custom")` → 明示名で登録。

    例外:
    - TypeError: 関数以外を登録しようとした場合。
    """

    def _register_checked(obj: Any, resolved_name: str | None = None):
        if not inspect.isfunction(obj):
            raise TypeError(
                f"@algorithm は関数のみ登録可能です（クラス/インスタンスは不可）: got {obj!r}"
            )
        return _algorithm_registry.register(resolved_name)(obj)

    # 直付け (@algorithm)
    if inspect.isfunction(arg) and name is None:
        return _register_checked(arg, None)

    # 位置引数で名前を渡した (@algorithm("name"))
    if isinstance(arg, str) and name is None:

        def _decorator_named(obj: Any):
            return _register_checked(obj, arg)

        return _decorator_named

    # 直付けだが関数以外（クラス等）
    if arg is not None:
        return _register_checked(arg, name)

    # name キーワード引数、または引数なし
    def _decorator_generic(obj: Any):
        return _register_checked(obj, name)

    return _decorator_generic


def get_algorithm(name: str) -> CurveFn:
    """登録されたカーブ関数を取得。

    例外:
    - InvalidAlgorithm: 未登録名/不正な名前の場合（`ValueError` 派生）。
    """
    try:
        return _algorithm_registry.get(name)
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidAlgorithm(f"Unknown algorithm: {name!r}") from exc


def list_algorithms() -> list[str]:
    """登録済みアルゴリズム名をソートして返す。"""
    return sorted(_algorithm_registry.list_all())


def is_algorithm_registered(name: str) -> bool:
    """名前が登録済みかを返す。"""
    return _algorithm_registry.is_registered(name)


def unregister(name: str) -> None:
    """名前を指定して登録を解除（存在しない場合は無視）。"""
    _algorithm_registry.unregister(name)


def get_registry() -> Mapping[str, Any]:
    """読み取り専用ビューとしてレジストリ辞書を返す。"""
    return _algorithm_registry.registry


__all__ = [
    "CurveFn",
    "algorithm",
    "get_algorithm",
    "list_algorithms",
    "is_algorithm_registered",
    "unregister",
    "get_registry",
]
