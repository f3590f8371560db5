import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, settings, strategies as st  # type: ignore

from pigment import generate_shades, hsl_to_color, rgb_to_color
from pigment.accessibility import contrast_ratio
from pigment.convert import hex_to_color, is_valid_color, rgb_to_hsl
from pigment.engine import normalize_hue
from pigment.scale import apply_contrast_shift

channel = st.integers(0, 255)
finite = st.floats(allow_nan=False, allow_infinity=False, width=64)


@given(r=channel, g=channel, b=channel)
def test_hex_round_trip(r, g, b):
    c = rgb_to_color(r, g, b)
    again = hex_to_color(c.hex)
    assert again.rgb == c.rgb
    assert again.hex == c.hex


@given(a=st.tuples(channel, channel, channel), b=st.tuples(channel, channel, channel))
def test_contrast_ratio_bounds_and_symmetry(a, b):
    ca, cb = rgb_to_color(*a), rgb_to_color(*b)
    ratio = contrast_ratio(ca, cb)
    assert 1.0 <= ratio <= 21.0 + 1e-9
    assert ratio == pytest.approx(contrast_ratio(cb, ca))


@given(h=finite)
def test_normalize_hue_range(h):
    out = normalize_hue(h)
    assert 0.0 <= out < 360.0


@given(h=st.floats(-1e6, 1e6), k=st.integers(-10, 10))
def test_normalize_hue_is_periodic(h, k):
    a, b = normalize_hue(h), normalize_hue(h + 360.0 * k)
    gap = abs(a - b)
    assert min(gap, 360.0 - gap) == pytest.approx(0.0, abs=1e-6)


@given(h=st.floats(-720, 720), s=st.floats(-50, 150), l=st.floats(-50, 150))
def test_hsl_to_color_is_always_valid(h, s, l):  # noqa: E741
    assert is_valid_color(hsl_to_color(h, s, l))


@given(h=st.floats(0, 360), s=st.floats(0, 100), l=st.floats(0, 100))
def test_stored_hsl_agrees_with_rgb(h, s, l):  # noqa: E741
    c = hsl_to_color(h, s, l)
    dh, ds, dl = rgb_to_hsl(*c.rgb)
    assert abs(c.hsl.s - ds) <= 1.0
    assert abs(c.hsl.l - dl) <= 1.0
    if ds:
        gap = abs(c.hsl.h - dh) % 360.0
        assert min(gap, 360.0 - gap) <= 1.0


@settings(max_examples=40, deadline=None)
@given(
    rgb=st.tuples(channel, channel, channel),
    algorithm=st.sampled_from(["tailwind", "radix", "ant", "lightness", "monochromatic"]),
    count=st.integers(-5, 20),
)
def test_generate_shades_count_and_single_active(rgb, algorithm, count):
    pal = generate_shades(rgb_to_color(*rgb), algorithm, count)
    assert len(pal.shades) in (5, 7, 9, 11, 13)
    assert sum(1 for s in pal.shades if s.is_active) == 1


@given(
    lights=st.lists(st.floats(0, 100), min_size=2, max_size=13),
    shift=st.floats(-50, 50),
)
def test_contrast_shift_preserves_order(lights, shift):
    import numpy as np

    arr = np.sort(np.asarray(lights, dtype=np.float64))[::-1]
    out = apply_contrast_shift(arr, shift)
    assert np.all(out[:-1] >= out[1:] - 1e-9)
    assert np.all((out >= 0.0) & (out <= 100.0))
