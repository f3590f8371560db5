"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_str

OKLCH_MODES = ("approx", "oklab")
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass
class _Settings:
    # 色空間（OKLCH の算出方式: 近似 or OKLab 準拠）
    OKLCH_MODE: str = "approx"

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 候補外の値は既定値へフォールバックする（例外にはしない）。
    """
    _settings.OKLCH_MODE = env_str("PIGMENT_OKLCH_MODE", "approx", choices=OKLCH_MODES)
    _settings.LOG_LEVEL = env_str("PIGMENT_LOG_LEVEL", "info", choices=LOG_LEVELS).upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings", "OKLCH_MODES"]
