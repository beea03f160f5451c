import re

import numpy as np
import pytest

from blockies.icon.colors import (
    create_color,
    format_hsl,
    format_number,
    hsl_to_rgb,
    palette_array,
    parse_color,
)
from blockies.prng.xorshift import SeededPRNG

HSL_RE = re.compile(r"^hsl\((\d+),([0-9.e+-]+)%,([0-9.e+-]+)%\)$")


@pytest.mark.parametrize("value, text", [
    (40.0, "40"),
    (0.0, "0"),
    (197, "197"),
    (40.00097936950624, "40.00097936950624"),
    (0.0001, "0.0001"),
    (0.000015, "0.000015"),
    (0.000001, "0.000001"),
    (1e-7, "1e-7"),
])
def test_format_number(value, text):
    assert format_number(value) == text


def test_format_hsl():
    assert format_hsl(0, 40.0, 50.5) == "hsl(0,40%,50.5%)"


def test_create_color_reference():
    rng = SeededPRNG("test")
    assert create_color(rng) == "hsl(0,40.00097936950624%,10.601410700473934%)"
    assert create_color(rng) == "hsl(4,41.99348018504679%,7.898475171532482%)"
    assert create_color(rng) == "hsl(197,83.21944060735404%,39.76214297581464%)"
    assert rng.draws == 18


def test_create_color_degenerate_seed():
    assert create_color(SeededPRNG("")) == "hsl(0,40%,0%)"


def test_color_ranges():
    lightness = []
    for i in range(300):
        rng = SeededPRNG(f"seed-{i}")
        for _ in range(3):
            h, s, l = HSL_RE.match(create_color(rng)).groups()
            assert 0 <= int(h) < 360
            assert 40.0 <= float(s) < 100.0
            lightness.append(float(l))
    # sum of four uniform draws: never reaches 100, clusters around 50
    assert 0.0 <= min(lightness) and max(lightness) < 100.0
    assert 40.0 < float(np.mean(lightness)) < 60.0


@pytest.mark.parametrize("hsl, rgb", [
    ((0, 100, 50), (1.0, 0.0, 0.0)),
    ((120, 100, 50), (0.0, 1.0, 0.0)),
    ((240, 100, 50), (0.0, 0.0, 1.0)),
    ((0, 0, 100), (1.0, 1.0, 1.0)),
    ((0, 0, 0), (0.0, 0.0, 0.0)),
    ((0, 100, 150), (1.0, 1.0, 1.0)),  # lightness clamped
])
def test_hsl_to_rgb(hsl, rgb):
    assert hsl_to_rgb(*hsl) == pytest.approx(rgb)


def test_parse_color():
    assert parse_color("hsl(0,100%,50%)") == pytest.approx((1.0, 0.0, 0.0))
    assert parse_color("hsl(240, 100%, 25%)") == pytest.approx((0.0, 0.0, 0.5))
    assert parse_color("hsl(0,40%,1e-7%)") == pytest.approx((0.0, 0.0, 0.0), abs=1e-6)
    assert parse_color("#ff0000") == pytest.approx((1.0, 0.0, 0.0))
    assert parse_color("white") == pytest.approx((1.0, 1.0, 1.0))


def test_parse_color_rejects_garbage():
    with pytest.raises(ValueError):
        parse_color("not-a-color")


def test_palette_array_rows_follow_cell_values():
    pal = palette_array("#000000", "#ff0000", "#0000ff")
    assert pal.shape == (3, 3)
    np.testing.assert_allclose(pal[0], [0, 0, 0])
    np.testing.assert_allclose(pal[1], [1, 0, 0])
    np.testing.assert_allclose(pal[2], [0, 0, 1])
