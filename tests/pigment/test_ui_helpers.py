from __future__ import annotations

"""UI 連携ヘルパ（選択肢/エクスポート/扇配置）のテスト。"""

import pytest

from pigment import Algorithm, Harmony, NamingPattern, generate_shades
from pigment.convert import ColorFormat
from pigment.ui_helpers import (
    ALGORITHM_LABEL_MAP,
    ALGORITHM_OPTIONS,
    COLOR_FORMAT_OPTIONS,
    HARMONY_LABEL_MAP,
    HARMONY_OPTIONS,
    NAMING_PATTERN_OPTIONS,
    export_palette,
    fan_position,
)


@pytest.fixture()
def palette(seed_blue):
    return generate_shades(seed_blue, "tailwind", 5)


def test_export_formats(palette) -> None:
    hexes = export_palette(palette, "hex")
    assert hexes == palette.hexes()
    assert all(isinstance(v, str) and v.startswith("#") for v in hexes)

    rgb = export_palette(palette, ColorFormat.RGB)
    assert all(isinstance(v, tuple) and len(v) == 3 for v in rgb)
    assert rgb[2] == tuple(palette.shades[2].color.rgb)

    hsl = export_palette(palette, " HSL ")
    assert hsl[0] == tuple(palette.shades[0].color.hsl)

    oklch = export_palette(palette, "oklch")
    assert all(0.0 <= v[0] <= 1.0 for v in oklch)

    css = export_palette(palette, "css")
    assert all(v.startswith("rgb(") for v in css)


def test_export_rejects_unknown_format(palette) -> None:
    with pytest.raises(ValueError):
        export_palette(palette, "cmyk")


def test_fan_position_half_circle() -> None:
    first = fan_position(0, 3)
    middle = fan_position(1, 3)
    last = fan_position(2, 3)
    assert first.angle == -90.0 and middle.angle == 0.0 and last.angle == 90.0
    assert first.x == pytest.approx(0.0, abs=1e-9) and first.y == pytest.approx(-120.0)
    assert middle.x == pytest.approx(120.0) and middle.y == pytest.approx(0.0, abs=1e-9)
    assert last.y == pytest.approx(120.0)
    assert fan_position(0, 1).angle == -90.0
    assert fan_position(1, 3, radius=10.0).x == pytest.approx(10.0)


def test_options_cover_enums() -> None:
    assert {v for _, v in ALGORITHM_OPTIONS} == set(Algorithm)
    assert {v for _, v in NAMING_PATTERN_OPTIONS} == set(NamingPattern)
    assert {v for _, v in HARMONY_OPTIONS} == set(Harmony)
    assert {v for _, v in COLOR_FORMAT_OPTIONS} == set(ColorFormat)
    assert ALGORITHM_LABEL_MAP["Ant Design"] is Algorithm.ANT
    assert HARMONY_LABEL_MAP["Split Complementary"] is Harmony.SPLIT_COMPLEMENTARY
