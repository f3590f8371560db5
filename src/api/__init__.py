"""
どこで: `api` 入口（構成済みの高レベル API）。
何を: 構成値を既定とするパレット生成関数と CLI エントリを再輸出。
なぜ: 利用者が設定ファイル/フォールバック色の解決を意識せずに
      単一名前空間からパレット生成まで完結できるようにするため。

Usage:
    from api import generate_palette, harmony_palette

    pal = generate_palette("#1E96BE")
    print(pal.name, pal.hexes())
"""

from .palette import fan, generate_palette, harmony_palette, resolve_seed

__all__ = [
    "generate_palette",
    "harmony_palette",
    "fan",
    "resolve_seed",
]

# バージョン情報
__version__ = "2026.10"
