"""
どこで: `pigment.algorithms` パッケージ（関数ベース）。
何を: 種の HSL → (count, 3) の HSL ストップ配列を返すシェードカーブを登録する。
なぜ: アルゴリズムの追加を登録 1 箇所に閉じ、`pigment.shades` から名前で解決するため。
"""

# カーブ関数を登録
from . import curated  # noqa: F401
from . import harmonic  # noqa: F401
from . import sweeps  # noqa: F401
from .registry import algorithm, get_algorithm, list_algorithms

__all__ = [
    "algorithm",
    "get_algorithm",
    "list_algorithms",
]
