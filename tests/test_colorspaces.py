# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for the conversion kernels: round trips, reference values and the
OSA-UCS Newton solver.
"""

import math
from typing import Tuple, get_type_hints

import numpy as np
import pytest

from tincture_cie import (
    DIN99_VARIANTS,
    _uv_to_xy,
    _xy_to_uv,
    from_LAB,
    make_XYZ_to_XYZ,
    to_LAB,
    to_LCH,
    to_OSA,
    to_XYZ,
    to_Yxy,
)
from tincture_colorspaces import (
    from_HSV,
    from_luma_color_hue,
    hue,
    to_Gray,
    to_HSL,
    to_HSV,
    to_luma_color_hue,
    to_Oklab,
)
from tincture_core import Color
from tincture_kernels import OSA_MAX_ITERATIONS, osa_to_xyz, toe, inv_toe
from tincture_registry import COLORSPACES, get_colorspace
from tincture_representation import hue_polar
from tincture_whitepoints import CIE_2_D50, CIE_2_D65

SAMPLES = [
    (255.0, 0.0, 0.0),
    (0.0, 255.0, 0.0),
    (0.0, 0.0, 255.0),
    (12.0, 200.0, 77.0),
    (128.0, 128.0, 128.0),
    (250.0, 240.0, 10.0),
    (40.0, 30.0, 90.0),
    (200.0, 100.0, 150.0),
]

# One-way projection, registered with from == to.
LOSSY = {"Gray"}

# Newton inverse; checked separately on colours inside its regular region.
ITERATIVE = {"OSA"}

# Round-trip error of the rounded Oklab matrices, in 8-bit units.
OKLAB_TOL = 1e-3


def _close(a, b, tol):
    return all(abs(x - y) <= tol for x, y in zip(a, b))


# =============================================================================
# Reference values
# =============================================================================

def test_hsv_of_red():
    assert to_HSV((255, 0, 0, 255)) == pytest.approx((0.0, 1.0, 1.0, 255.0))


def test_hsv_back_to_red():
    assert from_HSV((0.0, 1.0, 1.0, 255.0)) == pytest.approx((255.0, 0.0, 0.0, 255.0))


def test_hsl_of_white():
    h, s, l, a = to_HSL((255, 255, 255))
    assert (s, l, a) == pytest.approx((0.0, 1.0, 255.0))


def test_lab_of_white_is_l100():
    L, a, b, _ = to_LAB((255, 255, 255))
    assert L == pytest.approx(100.0, abs=1e-3)
    assert a == pytest.approx(0.0, abs=1e-2)
    assert b == pytest.approx(0.0, abs=1e-2)


def test_xyz_of_white_matches_d65():
    X, Y, Z, _ = to_XYZ((255, 255, 255))
    assert Y == pytest.approx(100.0, abs=1e-2)
    assert X == pytest.approx(95.047, abs=0.05)
    assert Z == pytest.approx(108.883, abs=0.1)


def test_oklab_of_white():
    L, a, b, _ = to_Oklab((255, 255, 255))
    assert L == pytest.approx(1.0, abs=1e-4)
    assert a == pytest.approx(0.0, abs=1e-4)
    assert b == pytest.approx(0.0, abs=1e-4)


def test_gray_projection_is_idempotent():
    g = to_Gray((12, 200, 77))
    assert g.ch0 == g.ch1 == g.ch2
    assert to_Gray(g) == pytest.approx(g)


def test_alpha_passes_through_every_conversion():
    c = Color(12.0, 200.0, 77.0, 33.0)
    for name, pair in COLORSPACES.items():
        assert pair.to(c).alpha == 33.0, name


def test_kernels_do_not_clamp():
    lab = to_LAB((255, 0, 0))
    out = from_LAB(lab._replace(ch1=lab.ch1 + 60.0))
    assert max(out[:3]) > 255.0 or min(out[:3]) < 0.0


# =============================================================================
# Round-trip law
# =============================================================================

@pytest.mark.parametrize("name", sorted(set(COLORSPACES) - LOSSY - ITERATIVE))
def test_round_trip(name):
    pair = get_colorspace(name)
    for rgb in SAMPLES:
        c = Color(*rgb, 200.0)
        back = pair.from_(pair.to(c))
        assert _close(back, c, 0.5), f"{name}: {c} -> {pair.to(c)} -> {back}"


@pytest.mark.parametrize("name", ["LAB", "LCH", "LUV", "XYZ", "HSV", "HSL", "YCgCo", "JAB"])
def test_round_trip_is_tight(name):
    pair = get_colorspace(name)
    for rgb in SAMPLES:
        c = Color(*rgb)
        assert _close(pair.from_(pair.to(c)), c, 1e-6), name


# The published Oklab matrices are rounded and not exact inverses.
@pytest.mark.parametrize("name", ["Oklab", "Oklch"])
def test_oklab_round_trip_within_matrix_rounding(name):
    pair = get_colorspace(name)
    for rgb in SAMPLES:
        c = Color(*rgb)
        assert _close(pair.from_(pair.to(c)), c, OKLAB_TOL), name


@pytest.mark.parametrize("name", sorted(set(COLORSPACES) - LOSSY - {"OSA"}))
def test_normalized_round_trip(name):
    pair = get_colorspace(name, normalized=True)
    for rgb in SAMPLES:
        c = Color(*rgb)
        assert _close(pair.from_(pair.to(c)), c, 0.5), name


@pytest.mark.parametrize("name", ["LAB", "HSL", "YUV", "Oklab", "Cubehelix"])
def test_normalized_values_stay_in_band(name):
    to = get_colorspace(name, normalized=True).to
    for rgb in SAMPLES:
        v = to(rgb)
        assert all(-1e-6 <= x <= 255.0 + 1e-6 for x in v[:3]), (name, rgb, v)


@pytest.mark.parametrize("variant", sorted(DIN99_VARIANTS))
def test_din99_variants_keep_white_on_the_neutral_axis(variant):
    L, a, b, _ = get_colorspace(variant).to((255, 255, 255))
    assert L == pytest.approx(100.0, abs=0.01)
    assert abs(a) < 0.05 and abs(b) < 0.05


# =============================================================================
# Polar projection & hue
# =============================================================================

def test_luma_color_hue_round_trip():
    c = Color(50.0, -20.0, 30.0, 255.0)
    p = to_luma_color_hue(c)
    assert p.ch1 == pytest.approx(math.hypot(-20.0, 30.0))
    assert 0.0 <= p.ch2 < 360.0
    assert from_luma_color_hue(p) == pytest.approx(c)


def test_lch_is_polar_lab():
    lab = to_LAB((12, 200, 77))
    lch = to_LCH((12, 200, 77))
    assert lch.ch1 == pytest.approx(math.hypot(lab.ch1, lab.ch2))


@pytest.mark.parametrize("rgb, angle", [
    ((255, 0, 0), 0.0),
    ((255, 255, 0), 60.0),
    ((0, 255, 0), 120.0),
    ((0, 255, 255), 180.0),
    ((0, 0, 255), 240.0),
    ((255, 0, 255), 300.0),
])
def test_hexagonal_and_polar_hue_agree_on_primaries(rgb, angle):
    assert hue(rgb) == pytest.approx(angle, abs=1e-9)
    assert hue_polar(rgb) == pytest.approx(angle, abs=1e-6)


def test_hexagonal_and_polar_hue_differ_elsewhere():
    c = (255, 200, 0)
    assert abs(hue(c) - hue_polar(c)) > 0.1


# =============================================================================
# Okhsv toe
# =============================================================================

@pytest.mark.parametrize("x", [0.0, 0.1, 0.5, 0.9, 1.0])
def test_toe_is_inverted_by_inv_toe(x):
    assert inv_toe(toe(x)) == pytest.approx(x, abs=1e-9)


# =============================================================================
# OSA-UCS
# =============================================================================

def test_osa_newton_terminates_within_cap():
    levels = np.linspace(0.0, 255.0, 6)
    for r in levels:
        for g in levels:
            for b in levels:
                L, j, gg, _ = to_OSA((r, g, b))
                *_, iterations = osa_to_xyz(L, j, gg)
                assert iterations <= OSA_MAX_ITERATIONS


@pytest.mark.parametrize("rgb", [(128, 128, 128), (200, 100, 150), (40, 30, 90), (180, 160, 140)])
def test_osa_round_trip(rgb):
    pair = get_colorspace("OSA")
    c = Color(*rgb, 200.0)
    assert _close(pair.from_(pair.to(c)), c, 1.0)


@pytest.mark.parametrize("rgb", [(128, 128, 128), (12, 200, 77), (200, 100, 150), (250, 240, 10)])
def test_osa_inverse_is_finite_in_regular_region(rgb):
    L, j, g, _ = to_OSA(rgb)
    X, Y, Z, _ = osa_to_xyz(L, j, g)
    assert all(math.isfinite(v) for v in (X, Y, Z))


# =============================================================================
# White points
# =============================================================================

def test_adaptation_to_same_whitepoint_is_identity():
    adapt = make_XYZ_to_XYZ(CIE_2_D65, CIE_2_D65)
    c = Color(40.0, 50.0, 60.0, 255.0)
    assert adapt(c) == pytest.approx(c)


def test_adaptation_maps_source_white_to_destination_white():
    adapt = make_XYZ_to_XYZ(CIE_2_D65, CIE_2_D50)
    out = adapt(Color(100.0 * CIE_2_D65.X, 100.0 * CIE_2_D65.Y, 100.0 * CIE_2_D65.Z, 255.0))
    assert out[:3] == pytest.approx((100.0 * CIE_2_D50.X, 100.0 * CIE_2_D50.Y, 100.0 * CIE_2_D50.Z), abs=1e-6)


def test_yxy_chromaticity_of_white():
    Y, x, y, _ = to_Yxy((255, 255, 255))
    assert x == pytest.approx(0.3127, abs=1e-3)
    assert y == pytest.approx(0.3290, abs=1e-3)


def test_ucs_chromaticity_of_d65_is_a_float_pair():
    assert get_type_hints(_xy_to_uv)["return"] == Tuple[float, float]
    u, v = _xy_to_uv(0.3127, 0.3290)
    assert (u, v) == pytest.approx((0.19783, 0.31221), abs=1e-4)
    assert _uv_to_xy(u, v) == pytest.approx((0.3127, 0.3290))
