# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for averaging, interpolation, mixing and palette reduction.
"""

import pytest

from tincture_cie import to_LAB
from tincture_core import Color, ColorspaceNotFoundError, InvalidInputError
from tincture_mixing import (
    adjust_temperature,
    average,
    lerp,
    lerp_minus,
    lerp_plus,
    mix,
    mixbox,
    mixsub,
    negate,
    reduce_colors,
    weighted_average,
)
from tincture_representation import luma

RED = Color(255.0, 0.0, 0.0, 255.0)
BLUE = Color(0.0, 0.0, 255.0, 255.0)
TEAL = Color(12.0, 200.0, 77.0, 255.0)


# --- averaging ---

def test_average_in_rgb():
    assert average([RED, BLUE]) == pytest.approx((127.5, 0.0, 127.5, 255.0))


def test_average_in_colorspace_of_one_colour_is_identity():
    assert average([TEAL], "LAB") == pytest.approx(TEAL, abs=1e-6)


def test_average_of_nothing_raises():
    with pytest.raises(InvalidInputError):
        average([])


def test_weighted_average():
    assert weighted_average([RED, BLUE], [1.0, 3.0]) == pytest.approx((63.75, 0.0, 191.25, 255.0))


def test_weighted_average_length_mismatch():
    with pytest.raises(ValueError):
        weighted_average([RED, BLUE], [1.0])


# --- interpolation ---

# The rounded Oklab matrices round-trip to about 1e-4.
@pytest.mark.parametrize("colorspace, tol", [(None, 1e-6), ("LAB", 1e-6), ("Oklab", 1e-3), ("HSL", 1e-6)])
def test_lerp_endpoints(colorspace, tol):
    assert lerp(RED, TEAL, 0.0, colorspace) == pytest.approx(RED, abs=tol)
    assert lerp(RED, TEAL, 1.0, colorspace) == pytest.approx(TEAL, abs=tol)


def test_lerp_interpolates_alpha():
    assert lerp((0, 0, 0, 0), (0, 0, 0, 255), 0.25).alpha == pytest.approx(63.75)


def test_lerp_unknown_colorspace():
    with pytest.raises(ColorspaceNotFoundError):
        lerp(RED, BLUE, 0.5, "nope")


def test_lerp_minus_keeps_lightness_of_first():
    out = lerp_minus(RED, TEAL, 0.5)
    assert to_LAB(out).ch0 == pytest.approx(to_LAB(RED).ch0, abs=1e-6)


def test_lerp_plus_keeps_lightness_of_second():
    out = lerp_plus(RED, TEAL, 0.5)
    assert to_LAB(out).ch0 == pytest.approx(to_LAB(TEAL).ch0, abs=1e-6)


# --- mixing ---

def test_mix_of_equal_colours_is_identity():
    assert mix(TEAL, TEAL, 0.3) == pytest.approx(TEAL)


def test_mix_is_brighter_than_lerp():
    m = mix((0, 0, 0), (255, 255, 255), 0.5)
    assert m.ch0 == pytest.approx(255.0 / 2 ** 0.5)
    assert m.ch0 > lerp((0, 0, 0), (255, 255, 255), 0.5).ch0


def test_mix_in_normalized_space_endpoints():
    assert mix(RED, TEAL, 0.0, "LAB") == pytest.approx(RED, abs=1e-6)


def test_negate():
    c = Color(10.0, 20.0, 30.0, 40.0)
    assert negate(c) == (245.0, 235.0, 225.0, 40.0)
    assert negate(c, alpha=True).alpha == 215.0


def test_mixsub_of_equal_colours_is_identity():
    assert mixsub(TEAL, TEAL, 0.5) == pytest.approx(TEAL)


def test_mixsub_endpoints():
    assert mixsub(RED, BLUE, 0.0) == pytest.approx(RED)
    assert mixsub(RED, BLUE, 1.0) == pytest.approx(BLUE)


def test_mixsub_is_darker_than_lerp():
    sub = mixsub((255, 255, 0), (0, 255, 255), 0.5)
    plain = lerp((255, 255, 0), (0, 255, 255), 0.5)
    assert luma(sub) < luma(plain)


def test_mixbox_blue_and_yellow_make_green():
    r, g, b, a = mixbox((0, 33, 133), (252, 211, 0), 0.5)
    assert g > r and g > b
    assert a == 255.0


def test_mixbox_interpolates_alpha():
    assert mixbox((0, 33, 133, 0), (252, 211, 0, 200), 0.5).alpha == pytest.approx(100.0)


def test_adjust_temperature_warms_gray():
    out = adjust_temperature((128, 128, 128), 2000)
    assert out.ch0 > out.ch2


# --- reduction ---

def _two_clusters():
    return [(10, 10, 10)] * 12 + [(240, 240, 240)] * 8 + [(11, 10, 10), (239, 240, 240)]


def test_reduce_colors_recovers_clusters_sorted_by_luma():
    out = reduce_colors(_two_clusters(), 2, seed=7)
    assert len(out) == 2
    assert out[0][:3] == pytest.approx((10.0, 10.0, 10.0))
    assert out[1][:3] == pytest.approx((240.0, 240.0, 240.0))


def test_reduce_colors_is_seeded():
    data = [(i * 7 % 256, i * 13 % 256, i * 29 % 256) for i in range(60)]
    assert reduce_colors(data, 4, seed=3) == reduce_colors(data, 4, seed=3)


def test_reduce_colors_never_exceeds_input():
    assert len(reduce_colors([RED, BLUE], 5, seed=1)) <= 2


def test_reduce_colors_in_colorspace():
    out = reduce_colors(_two_clusters(), 2, "LAB", seed=7)
    assert out[0][:3] == pytest.approx((10.0, 10.0, 10.0), abs=2.0)
    assert out[1][:3] == pytest.approx((240.0, 240.0, 240.0), abs=2.0)


@pytest.mark.parametrize("colors, n", [([], 2), ([RED], 0)])
def test_reduce_colors_rejects_bad_input(colors, n):
    with pytest.raises(InvalidInputError):
        reduce_colors(colors, n)
