"""共通フィクスチャ。

- 乱数シード固定
- 代表的なシード色と注入用の Generator
- 設定（環境変数）の隔離
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from common import settings
from pigment import ColorValue, hex_to_color


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def rng() -> np.random.Generator:
    """シード固定の Generator（テストごとに新規）。"""
    return np.random.default_rng(12345)


@pytest.fixture()
def seed_blue() -> ColorValue:
    """シナリオ用のシード色 #1E96BE（hsl = 195, 73, 43）。"""
    return hex_to_color("#1E96BE")


@pytest.fixture()
def seed_red() -> ColorValue:
    return hex_to_color("#FF0000")


@pytest.fixture()
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """PIGMENT_* を除去した状態で設定を再読込し、終了後に元へ戻す。"""
    monkeypatch.delenv("PIGMENT_OKLCH_MODE", raising=False)
    monkeypatch.delenv("PIGMENT_LOG_LEVEL", raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()
