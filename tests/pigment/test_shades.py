from __future__ import annotations

"""シェードスケール生成（generate_shades / scale ヘルパ）のテスト。"""

import logging

import numpy as np
import pytest

from pigment import Algorithm, NamingPattern, generate_shades, hsl_to_color
from pigment.algorithms.registry import get_algorithm
from pigment.color_types import HSL
from pigment.convert import is_valid_color, rgb_to_hsl
from pigment.errors import InvalidAlgorithm, InvalidNamingPattern
from pigment.naming import consistent_name
from pigment.scale import (
    SHADE_COUNTS,
    active_index,
    apply_contrast_shift,
    clamp_shade_count,
    shade_labels,
)


def _lightness(pal) -> list[float]:
    return [s.color.hsl.l for s in pal.shades]


@pytest.mark.smoke
def test_tailwind_scenario(seed_blue) -> None:
    """#1E96BE / tailwind / 11 / 0 / 50-950 → 500 が種の明度付近で active。"""
    pal = generate_shades(seed_blue, "tailwind", 11, 0, "50-950")
    assert [s.name for s in pal.shades] == [
        "50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950",
    ]
    assert [s.value for s in pal.shades] == [int(s.name) for s in pal.shades]
    s500 = next(s for s in pal.shades if s.name == "500")
    assert abs(s500.color.hsl.l - 43) <= 5
    assert s500.is_active
    assert pal.active_shade is s500
    assert pal.base_color is seed_blue
    assert pal.algorithm is Algorithm.TAILWIND


@pytest.mark.parametrize("alg", list(Algorithm))
def test_every_algorithm_honours_generic_contract(seed_blue, alg: Algorithm) -> None:
    pal = generate_shades(seed_blue, alg, 11, 0, "50-950")
    assert len(pal.shades) == 11
    assert sum(1 for s in pal.shades if s.is_active) == 1
    for shade in pal.shades:
        assert is_valid_color(shade.color)
        assert 1.0 <= shade.contrast <= 21.0


@pytest.mark.parametrize("alg", list(Algorithm))
@pytest.mark.parametrize("count,shift", [(5, 0), (11, -50), (13, 0), (13, 50)])
def test_shade_hsl_agrees_with_shade_rgb(seed_blue, alg: Algorithm, count: int, shift: int) -> None:
    """各シェードの hsl はその rgb から導いた値と ±1 以内（色相は有彩色のみ）。"""
    for shade in generate_shades(seed_blue, alg, count, shift).shades:
        h, s, l = rgb_to_hsl(*shade.color.rgb)  # noqa: E741
        assert abs(shade.color.hsl.s - s) <= 1.0, shade.name
        assert abs(shade.color.hsl.l - l) <= 1.0, shade.name
        if s:
            gap = abs(shade.color.hsl.h - h) % 360.0
            assert min(gap, 360.0 - gap) <= 1.0, shade.name


def test_lightest_tailwind_stop_matches_its_hex(seed_blue) -> None:
    s50 = generate_shades(seed_blue, "tailwind", 13).shades[0]
    assert s50.name == "50"
    assert s50.color.hex == "#E9F7FC"
    assert s50.color.hsl == HSL(195, 76, 95)


@pytest.mark.parametrize("requested,expected", [(8, 7), (10, 9), (12, 11), (100, 13), (0, 5), (-3, 5)])
def test_shade_count_clamped_to_nearest(seed_blue, caplog, requested: int, expected: int) -> None:
    with caplog.at_level(logging.WARNING, logger="pigment.scale"):
        pal = generate_shades(seed_blue, "tailwind", requested)
    assert len(pal.shades) == expected
    assert any("shade_count" in r.getMessage() for r in caplog.records)


def test_supported_shade_count_does_not_warn(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="pigment.scale"):
        assert clamp_shade_count(np.int64(9)) == 9
    assert not caplog.records


@pytest.mark.parametrize("bad", ["11", 11.0, True, None])
def test_shade_count_must_be_integer(bad) -> None:
    with pytest.raises(TypeError):
        clamp_shade_count(bad)


def test_unknown_algorithm_and_pattern_fail_fast(seed_blue) -> None:
    with pytest.raises(InvalidAlgorithm):
        generate_shades(seed_blue, "material")
    with pytest.raises(ValueError):
        generate_shades(seed_blue, "")
    with pytest.raises(InvalidNamingPattern):
        generate_shades(seed_blue, "tailwind", 11, 0, "1-100")


def test_label_and_default_name(seed_blue) -> None:
    named = generate_shades(seed_blue, "tailwind", label="Ocean")
    assert named.name == "Ocean"
    auto = generate_shades(seed_blue, "tailwind")
    assert auto.name == consistent_name(auto.shades)


def test_contrast_shift_spreads_extremes(seed_blue) -> None:
    base = _lightness(generate_shades(seed_blue, "tailwind", 11, 0))
    wide = _lightness(generate_shades(seed_blue, "tailwind", 11, 50))
    narrow = _lightness(generate_shades(seed_blue, "tailwind", 11, -50))
    assert wide[0] >= base[0] and wide[-1] <= base[-1]
    assert narrow[0] <= base[0] and narrow[-1] >= base[-1]
    assert wide[0] == 100 and wide[-1] == 0


def test_contrast_shift_out_of_range_is_clamped(seed_blue) -> None:
    a = generate_shades(seed_blue, "radix", 11, 50).hexes()
    b = generate_shades(seed_blue, "radix", 11, 500).hexes()
    assert a == b


def test_apply_contrast_shift_formula() -> None:
    arr = np.array([0.0, 10.0, 50.0, 90.0, 100.0])
    np.testing.assert_allclose(apply_contrast_shift(arr, 0), arr)
    np.testing.assert_allclose(apply_contrast_shift(arr, 50), [0.0, 0.0, 50.0, 100.0, 100.0])
    np.testing.assert_allclose(apply_contrast_shift(arr, -50), [25.0, 30.0, 50.0, 70.0, 75.0])


def test_lightness_and_monochromatic_are_monotonic(seed_blue) -> None:
    for alg in ("lightness", "monochromatic", "tailwind", "radix", "ant"):
        light = _lightness(generate_shades(seed_blue, alg, 13))
        assert all(a >= b for a, b in zip(light, light[1:])), alg
    light = _lightness(generate_shades(seed_blue, "lightness", 11))
    assert light[0] == 95 and light[-1] == 5
    mono = generate_shades(seed_blue, "monochromatic", 11)
    assert set(get_algorithm("monochromatic")(seed_blue.hsl, 11)[:, 0]) == {195.0}
    assert _lightness(mono)[0] == 95 and _lightness(mono)[-1] == 10


def test_saturation_sweep(seed_blue) -> None:
    pal = generate_shades(seed_blue, "saturation", 11)
    sats = [s.color.hsl.s for s in pal.shades]
    assert sats[0] == 73 and sats[-1] == 0
    assert all(a >= b for a, b in zip(sats, sats[1:]))
    assert {s.color.hsl.l for s in pal.shades} == {43}


def test_hue_sweep_is_centred_on_seed(seed_blue) -> None:
    pal = generate_shades(seed_blue, "hue", 11)
    hues = [s.color.hsl.h for s in pal.shades]
    assert hues[0] == 165 and hues[5] == 195 and hues[-1] == 225


def test_complementary_and_analogous_hues(seed_blue) -> None:
    comp = get_algorithm("complementary")(seed_blue.hsl, 11)[:, 0].tolist()
    assert comp[:6] == [195.0] * 6
    assert comp[6:] == [15.0] * 5
    ana = get_algorithm("analogous")(seed_blue.hsl, 11)[:, 0].tolist()
    assert ana[0] == 165 and ana[-1] == 225
    assert ana[5] == 195


def test_radix_and_ant_endpoints(seed_blue) -> None:
    radix = generate_shades(seed_blue, "radix", 11)
    assert _lightness(radix)[0] == 99 and _lightness(radix)[-1] == 9
    assert radix.shades[5].color.hsl.l == 43
    assert radix.shades[5].color.hsl.s == 66
    np.testing.assert_allclose(get_algorithm("radix")(seed_blue.hsl, 11)[:, 1], 73 * 0.9)

    ant = generate_shades(seed_blue, "ant", 11)
    assert _lightness(ant)[0] == 98
    assert ant.shades[5].color.hsl.s == 73
    ant_sat = get_algorithm("ant")(seed_blue.hsl, 11)[:, 1]
    assert ant_sat[0] == pytest.approx(73 * 0.7)
    assert ant_sat[-1] == pytest.approx(73 * 1.2)


@pytest.mark.parametrize(
    "pattern,count,expected",
    [
        ("50-950", 5, [50, 300, 500, 800, 950]),
        ("50-950", 13, [50, 125, 200, 275, 350, 425, 500, 575, 650, 725, 800, 875, 950]),
        ("100-900", 9, [100, 200, 300, 400, 500, 600, 700, 800, 900]),
        ("100-900", 5, [100, 300, 500, 700, 900]),
        ("1-20", 7, [1, 2, 3, 4, 5, 6, 7]),
        ("10-200", 5, [10, 20, 30, 40, 50]),
        ("custom", 5, [100, 200, 300, 400, 500]),
    ],
)
def test_shade_labels(pattern: str, count: int, expected: list[int]) -> None:
    assert [int(v) for v in shade_labels(pattern, count)] == expected


@pytest.mark.parametrize("pattern", list(NamingPattern))
@pytest.mark.parametrize("count", SHADE_COUNTS)
def test_shade_labels_are_distinct_and_ascending(pattern: NamingPattern, count: int) -> None:
    values = [int(v) for v in shade_labels(pattern, count)]
    assert len(values) == count
    assert all(a < b for a, b in zip(values, values[1:]))


def test_active_index_tie_breaks() -> None:
    seed = HSL(195.0, 73.0, 43.0)
    same_hue = [hsl_to_color(195, 73, 40), hsl_to_color(195, 73, 46)]
    assert active_index(same_hue, seed) == 0
    other_hue = [hsl_to_color(100, 73, 40), hsl_to_color(195, 73, 46)]
    assert active_index(other_hue, seed) == 1


def test_palette_to_dict_round_trip_fields(seed_blue) -> None:
    pal = generate_shades(seed_blue, "ant", 7, 10, "100-900", label="Sea")
    d = pal.to_dict()
    assert d["name"] == "Sea"
    assert d["algorithm"] == "ant"
    assert len(d["shades"]) == 7
    assert sum(1 for s in d["shades"] if s["is_active"]) == 1
