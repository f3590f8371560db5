"""
どこで: `common.env`
何を: 環境変数の軽量パースヘルパを提供。
なぜ: 各所に散在する `os.getenv` + 例外/境界ガードを簡素化するため。
"""

from __future__ import annotations

import os
from typing import Iterable


def env_str(name: str, default: str, *, choices: Iterable[str] | None = None) -> str:
    """文字列環境変数を取得（小文字化・前後空白除去）。

    `choices` 指定時、候補外の値は既定値にフォールバックする。
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip().lower()
    if not s:
        return default
    if choices is not None and s not in set(choices):
        return default
    return s
