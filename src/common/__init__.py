"""
どこで: `common` パッケージ。
何を: 色エンジン/API 双方で使う軽量ユーティリティ（BaseRegistry, 設定, ロギング）。
なぜ: API 層から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .base_registry import BaseRegistry, normalize_key

__all__ = [
    "BaseRegistry",
    "normalize_key",
]
