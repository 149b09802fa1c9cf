# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for gradients, palettes, luma correction and random generation.
"""

import numpy as np
import pytest

from tincture_cie import to_LAB
from tincture_core import Color, InvalidInputError
from tincture_gradient import (
    EASINGS,
    INTERPOLATIONS,
    THEME_PRESETS,
    apply_theme,
    color_themes,
    correct_luma,
    cosine_coefficients,
    gradient,
    gradient_presets_list,
    iq_gradient,
    merge_gradients,
    palette,
    palette_presets_list,
    random_color,
    random_gradient,
    random_palette,
    resample,
)
from tincture_operations import temperature
from tincture_representation import to_color

RED = Color(255.0, 0.0, 0.0, 255.0)
BLUE = Color(0.0, 0.0, 255.0, 255.0)
TEAL = Color(12.0, 200.0, 77.0, 255.0)
GOLD = Color(250.0, 240.0, 10.0, 255.0)


def _in_range(c):
    return all(0.0 <= x <= 255.0 for x in c)


# --- interpolated gradients ---

def test_linear_gradient_midpoint():
    g = gradient([RED, BLUE])
    assert g(0.5) == pytest.approx((127.5, 0.0, 127.5, 255.0))


def test_gradient_clamps_t():
    g = gradient([RED, BLUE])
    assert g(-3.0) == g(0.0)
    assert g(7.0) == g(1.0)


@pytest.mark.parametrize("interpolation", sorted(INTERPOLATIONS))
def test_gradient_hits_its_nodes(interpolation):
    colors = [RED, TEAL, GOLD, BLUE]
    g = gradient(colors, interpolation=interpolation)
    for t, c in zip((0.0, 1.0 / 3.0, 2.0 / 3.0, 1.0), colors):
        assert g(t) == pytest.approx(c, abs=1e-6), (interpolation, t)


@pytest.mark.parametrize("interpolation", ["cubic", "akima"])
def test_overshooting_splines_stay_in_range(interpolation):
    g = gradient([(0, 0, 0), (255, 255, 255), (0, 0, 0), (255, 255, 255)], interpolation=interpolation)
    for t in np.linspace(0.0, 1.0, 41):
        assert _in_range(g(float(t)))


def test_step_gradient():
    g = gradient([RED, BLUE], interpolation="step")
    assert g(0.49) == RED
    assert g(1.0) == BLUE


@pytest.mark.parametrize("colorspace, tol", [("LAB", 1e-4), ("Oklab", 1e-3), ("HSL", 1e-4), ("Cubehelix", 1e-4)])
def test_gradient_in_colorspace_keeps_endpoints(colorspace, tol):
    g = gradient([RED, TEAL], colorspace)
    assert g(0.0) == pytest.approx(RED, abs=tol)
    assert g(1.0) == pytest.approx(TEAL, abs=tol)


def test_gradient_with_domain():
    g = gradient([RED, BLUE, TEAL], domain=[0.0, 0.8, 1.0])
    assert g(0.8) == pytest.approx(BLUE)
    assert g(0.4) == pytest.approx((127.5, 0.0, 127.5, 255.0))


def test_domain_length_mismatch():
    with pytest.raises(ValueError):
        gradient([RED, BLUE], domain=[0.0, 0.5, 1.0])


def test_single_colour_gradient_is_constant():
    g = gradient([TEAL])
    assert g(0.0) == g(0.7) == TEAL


def test_empty_gradient_raises():
    with pytest.raises(InvalidInputError):
        gradient([])


def test_unknown_interpolation_raises():
    with pytest.raises(InvalidInputError):
        gradient([RED, BLUE], interpolation="sinc")


def test_callable_interpolation():
    g = gradient([RED, BLUE], interpolation=INTERPOLATIONS["linear"])
    assert g(0.25) == pytest.approx((191.25, 0.0, 63.75, 255.0))


def test_easing_blends_first_two_colours():
    g = gradient([RED, BLUE, TEAL], interpolation="quad-in")
    assert g(0.5) == pytest.approx((191.25, 0.0, 63.75, 255.0))
    assert g(1.0) == pytest.approx(BLUE)


@pytest.mark.parametrize("name", sorted(EASINGS))
def test_easings_fix_endpoints(name):
    f = EASINGS[name]
    assert f(0.0) == pytest.approx(0.0, abs=1e-3)
    assert f(1.0) == pytest.approx(1.0, abs=1e-3)


def test_gradient_output_is_clamped():
    g = gradient([(-50, 300, 10), (0, 0, 0)])
    assert g(0.0) == (0.0, 255.0, 10.0, 255.0)


# --- cosine gradients ---

def test_iq_gradient_between_two_colours():
    g = gradient([TEAL, GOLD], interpolation="iq")
    assert g(0.0) == pytest.approx(TEAL, abs=1e-6)
    assert g(1.0) == pytest.approx(GOLD, abs=1e-6)


def test_cosine_coefficients_shape():
    a, b, c, d = cosine_coefficients(RED, BLUE)
    assert len(a) == len(b) == len(c) == len(d) == 3
    assert c == (-0.5, -0.5, -0.5)


def test_iq_gradient_is_opaque_and_in_range():
    g = iq_gradient((0.5, 0.5, 0.5), (1.0, 1.0, 1.0), (1.0, 1.0, 1.0), (0.0, 0.33, 0.67))
    for t in np.linspace(0.0, 1.0, 11):
        c = g(float(t))
        assert c.alpha == 255.0
        assert _in_range(c)


def test_iq_needs_two_colours():
    with pytest.raises(InvalidInputError):
        gradient([RED], interpolation="iq")


# --- presets ---

def test_presets_list_has_builtins_and_store():
    names = gradient_presets_list()
    for name in ("cubehelix", "warm", "cool", "rainbow", "black-body", "iq-1", "mpl:viridis"):
        assert name in names


def test_stored_gradient_preset():
    g = gradient("mpl:viridis")
    assert g(0.0) == to_color("#440154")
    assert g(1.0) == to_color("#fde725")


def test_black_body_gradient():
    g = gradient("black-body")
    assert g(0.0) == temperature(1000.0)
    assert g(1.0) == temperature(15000.0)


@pytest.mark.parametrize("name", ["cubehelix", "warm", "cool", "rainbow"])
def test_builtin_gradients_stay_in_range(name):
    g = gradient(name)
    for t in np.linspace(0.0, 1.0, 21):
        assert _in_range(g(float(t)))


def test_unknown_gradient_preset_raises():
    with pytest.raises(InvalidInputError):
        gradient("mpl:not-there")


def test_random_preset_gradient_is_seeded():
    assert gradient(seed=11)(0.3) == gradient(seed=11)(0.3)


def test_merge_gradients():
    g1 = gradient([RED, BLUE])
    g2 = gradient([TEAL, GOLD])
    m = merge_gradients(g1, g2)
    assert m(0.25) == g1(0.5)
    assert m(0.75) == g2(0.5)
    assert m(1.0) == g2(1.0)


# --- palettes ---

def test_palette_preset():
    pal = palette("brewer:Set1")
    assert len(pal) == 9
    assert pal[0] == to_color("#e41a1c")
    assert "brewer:Set1" in palette_presets_list()


def test_palette_preset_resampled():
    pal = palette("brewer:Set1", 3)
    assert len(pal) == 3
    assert pal[0] == pytest.approx(to_color("#e41a1c"))
    assert pal[-1] == pytest.approx(to_color("#999999"))


def test_palette_from_gradient():
    g = gradient([RED, BLUE])
    assert len(palette(g)) == 5
    pal = palette(g, 3)
    assert pal[1] == pytest.approx((127.5, 0.0, 127.5, 255.0))


def test_palette_of_one_is_the_average():
    g = gradient([RED, BLUE])
    assert palette(g, 1)[0] == pytest.approx((127.5, 0.0, 127.5, 255.0))
    assert palette([RED, BLUE], 1)[0] == pytest.approx((127.5, 0.0, 127.5, 255.0))


def test_palette_sequence_is_normalized():
    assert palette(["#ff0000", (0, 0, 255)]) == [RED, BLUE]


def test_resample():
    out = resample([RED, BLUE], 3)
    assert out[1] == pytest.approx((127.5, 0.0, 127.5, 255.0))


@pytest.mark.parametrize("source, n", [("nope:nope", None), ([RED], 0)])
def test_palette_rejects_bad_input(source, n):
    with pytest.raises(InvalidInputError):
        palette(source, n)


def test_random_preset_palette_is_seeded():
    assert palette(seed=4) == palette(seed=4)


# --- luma correction ---

def test_correct_luma_makes_lightness_linear():
    g = correct_luma(gradient([(0, 0, 0), (255, 0, 0), (255, 255, 255)]))
    for t in (0.0, 0.25, 0.5, 0.75, 1.0):
        assert to_LAB(g(t)).ch0 == pytest.approx(100.0 * t, abs=1.0)


def test_correct_luma_of_decreasing_gradient():
    g = correct_luma(gradient([(255, 255, 255), (0, 0, 0)]))
    assert to_LAB(g(0.5)).ch0 == pytest.approx(50.0, abs=1.0)


def test_correct_luma_of_palette_keeps_length():
    pal = correct_luma([(0, 0, 0), (255, 255, 0), (0, 0, 255), (255, 255, 255)])
    assert len(pal) == 4
    ls = [to_LAB(c).ch0 for c in pal]
    assert ls == sorted(ls)


# --- themes & random ---

def test_color_themes_include_both_kinds():
    themes = color_themes()
    assert "warm" in themes
    assert "full" in themes
    assert set(THEME_PRESETS) <= set(themes)


def test_apply_gray_theme_removes_chroma():
    r, g, b, _ = apply_theme(TEAL, "gray", seed=1)
    assert r == pytest.approx(g, abs=0.5)
    assert g == pytest.approx(b, abs=0.5)


def test_apply_theme_with_fixed_channels_keeps_colour():
    assert apply_theme(TEAL, (None, None, None), seed=1) == pytest.approx(TEAL, abs=1e-6)


def test_apply_theme_keeps_alpha():
    c = Color(12.0, 200.0, 77.0, 77.0)
    assert apply_theme(c, "pastels", seed=2).alpha == 77.0
    assert apply_theme(c, (10.0, (0.0, 255.0), None), seed=2).alpha == 77.0


def test_apply_theme_needs_three_schemes():
    with pytest.raises(InvalidInputError):
        apply_theme(TEAL, (None, None))


def test_apply_theme_is_seeded():
    assert apply_theme(TEAL, "fresh", seed=9) == apply_theme(TEAL, "fresh", seed=9)


@pytest.mark.parametrize("theme", [None, "dark", "gray-light", "pastels", "full"])
def test_random_color(theme):
    for seed in range(10):
        c = random_color(theme, seed=seed)
        assert _in_range(c)
        assert c == random_color(theme, seed=seed)


def test_random_color_alpha_override():
    assert random_color(alpha=12.0, seed=1).alpha == 12.0
    assert random_color("dark", alpha=12.0, seed=1).alpha == 12.0


def test_random_color_unknown_theme():
    with pytest.raises(InvalidInputError):
        random_color("glitter", seed=1)


@pytest.mark.parametrize("seed", range(25))
def test_random_palette(seed):
    pal = random_palette(seed)
    assert len(pal) > 0
    assert all(isinstance(c, Color) and _in_range(c) for c in pal)
    assert pal == random_palette(seed)


@pytest.mark.parametrize("seed", range(25))
def test_random_gradient(seed):
    g = random_gradient(seed)
    h = random_gradient(seed)
    for t in (0.0, 0.3, 1.0):
        assert _in_range(g(t))
        assert g(t) == h(t)
