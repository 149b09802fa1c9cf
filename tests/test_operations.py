# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for channel operations, adjustments, temperature and filters.
"""

import pytest

from tincture_cie import to_LAB, to_LCH
from tincture_colorspaces import hue
from tincture_core import Color
from tincture_operations import (
    TEMPERATURE_NAMES,
    achromatopsia,
    adjust,
    blacken,
    brighten,
    brightness,
    complementary,
    contrast,
    darken,
    desaturate,
    exposure,
    fe_color_matrix,
    get_channel,
    grayscale,
    hue_rotate,
    modulate,
    saturate,
    saturation,
    sepia,
    set_channel,
    temperature,
    tinter,
    whiten,
)

TEAL = Color(12.0, 200.0, 77.0, 255.0)


# --- channel access ---

def test_get_channel_in_rgb_and_hsv():
    assert get_channel(TEAL, 1) == 200.0
    assert get_channel((255, 0, 0), 0, "HSV") == 0.0


def test_channel_three_is_alpha():
    c = Color(1.0, 2.0, 3.0, 40.0)
    assert get_channel(c, 3, "LAB") == 40.0
    assert set_channel(c, 3, 99.0, "LAB").alpha == 99.0


@pytest.mark.parametrize("channel", [-1, 4, 10])
def test_bad_channel_index_raises(channel):
    with pytest.raises(IndexError):
        get_channel(TEAL, channel)
    with pytest.raises(IndexError):
        set_channel(TEAL, channel, 0.0)


def test_set_channel_in_hsv():
    out = set_channel((255, 0, 0), 0, 120.0, "HSV")
    assert out == pytest.approx((0.0, 255.0, 0.0, 255.0))


def test_adjust_and_modulate():
    assert adjust(TEAL, 0, 10.0) == pytest.approx((22.0, 200.0, 77.0, 255.0))
    assert modulate(TEAL, 1, 0.5) == pytest.approx((12.0, 100.0, 77.0, 255.0))


@pytest.mark.parametrize("colorspace, tol", [
    ("HSV", 1e-6), ("HSL", 1e-6), ("HWB", 1e-6), ("LCH", 1e-6), ("Oklch", 1e-3), ("GLHS", 1e-6),
])
def test_complementary_twice_is_identity(colorspace, tol):
    once = complementary(TEAL, colorspace)
    twice = complementary(once, colorspace)
    assert twice == pytest.approx(TEAL, abs=tol)


def test_complementary_in_hsv_of_red_is_cyan():
    assert complementary((255, 0, 0), "HSV") == pytest.approx((0.0, 255.0, 255.0, 255.0))


def test_complementary_in_lch_keeps_lightness_and_chroma():
    out = to_LCH(complementary(TEAL, "LCH"))
    ref = to_LCH(TEAL)
    assert out.ch0 == pytest.approx(ref.ch0)
    assert out.ch1 == pytest.approx(ref.ch1)
    assert (out.ch2 - ref.ch2) % 360.0 == pytest.approx(180.0)


def test_default_complementary_changes_hue():
    out = complementary((255, 0, 0))
    assert hue(out) != pytest.approx(0.0)


# --- adjustments ---

def test_brighten_and_darken_move_lightness():
    base = to_LAB(TEAL).ch0
    assert to_LAB(brighten(TEAL)).ch0 > base
    assert to_LAB(darken(TEAL)).ch0 < base


def test_saturate_and_desaturate_move_chroma():
    base = to_LCH((150, 120, 110)).ch1
    assert to_LCH(saturate((150, 120, 110))).ch1 > base
    assert to_LCH(desaturate((150, 120, 110))).ch1 < base


def test_whiten_and_blacken():
    assert min(whiten(TEAL)[:3]) > min(TEAL[:3])
    assert max(blacken(TEAL)[:3]) < max(TEAL[:3])


def test_adjustments_clamp_to_rgb():
    for out in (brighten((250, 250, 250), 5.0), darken((5, 5, 5), 5.0), whiten(TEAL, 2.0)):
        assert all(0.0 <= x <= 255.0 for x in out)


def test_tinter_is_a_geometric_mean():
    assert tinter((255, 255, 255))((255, 255, 255)) == pytest.approx((255.0, 255.0, 255.0, 255.0))
    out = tinter((0, 0, 0))((255, 255, 255))
    assert out[:3] == pytest.approx((255.0 / 16.0,) * 3)


# --- temperature ---

def test_temperature_by_name_matches_kelvin():
    assert temperature("candle") == temperature(TEMPERATURE_NAMES["candle"])


def test_temperature_is_warm_to_cool():
    warm = temperature(2000)
    cool = temperature(10000)
    assert warm.ch0 == 255.0
    assert warm.ch2 < warm.ch0
    assert cool.ch2 == 255.0
    assert cool.ch0 < 255.0


def test_temperature_channels_in_range():
    for k in (1000, 1800, 4000, 6500, 12000, 40000):
        assert all(0.0 <= x <= 255.0 for x in temperature(k))


def test_unknown_temperature_name_raises():
    with pytest.raises(ValueError):
        temperature("lava")


# --- filters ---

def test_fe_color_matrix_needs_twenty_values():
    with pytest.raises(ValueError):
        fe_color_matrix([1.0] * 16)


def test_fe_color_matrix_offset_and_clamp():
    shift = fe_color_matrix([1, 0, 0, 0, 300,
                             0, 1, 0, 0, 0,
                             0, 0, 1, 0, -300,
                             0, 0, 0, 1, 0])
    assert shift(TEAL) == (255.0, 200.0, 0.0, 255.0)


@pytest.mark.parametrize("f", [
    sepia(0.0), contrast(1.0), exposure(1.0), brightness(0.0),
    saturation(1.0), hue_rotate(0.0), grayscale(0.0),
])
def test_filters_at_identity_amount(f):
    assert f(TEAL) == pytest.approx(TEAL, abs=1e-6)


def test_grayscale_filter_makes_gray():
    r, g, b, _ = grayscale(1.0)(TEAL)
    assert r == pytest.approx(g)
    assert g == pytest.approx(b)


def test_achromatopsia_is_gray():
    r, g, b, a = achromatopsia(TEAL)
    assert r == pytest.approx(g)
    assert g == pytest.approx(b)
    assert a == 255.0
