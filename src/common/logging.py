"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- ライブラリ側（`pigment`）の各モジュールは `logging.getLogger(__name__)` でロガーを取得するだけで、
  ハンドラ設定は行わない。
- CLI など上位のエントリポイントが、妥当な最小構成を 1 度だけ適用するヘルパーを使う。
"""

from __future__ import annotations

import logging

from . import settings


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - `level` 省略時は `PIGMENT_LOG_LEVEL`（既定 INFO）を使う
    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    """
    if level is None:
        level = settings.get().LOG_LEVEL
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
