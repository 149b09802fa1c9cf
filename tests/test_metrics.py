# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for the colour difference metrics.
"""

import numpy as np
import pytest

from tincture_core import Color
from tincture_metrics import (
    contrast_ratio,
    delta_C_RGB,
    delta_C_star,
    delta_D_HCL,
    delta_E_2000,
    delta_E_94,
    delta_E_array,
    delta_E_CMC,
    delta_E_euclidean,
    delta_E_HyAB,
    delta_E_star,
    delta_E_z,
    delta_H_star,
    nearest_color,
    noticable_different,
)

RED = (255, 0, 0)
BLUE = (0, 0, 255)
TEAL = (12, 200, 77)

ALL_METRICS = [
    delta_E_star, delta_E_HyAB, delta_E_euclidean, delta_E_94, delta_E_CMC,
    delta_E_2000, delta_E_z, delta_D_HCL, delta_C_RGB,
]


@pytest.mark.parametrize("metric", ALL_METRICS)
def test_identity_is_zero(metric):
    assert metric(TEAL, TEAL) == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("metric", [delta_E_star, delta_E_HyAB, delta_E_2000, delta_E_z])
def test_symmetric_metrics(metric):
    assert metric(RED, TEAL) == pytest.approx(metric(TEAL, RED))


def test_cmc_is_asymmetric():
    assert delta_E_CMC(RED, BLUE) != pytest.approx(delta_E_CMC(BLUE, RED))


def test_94_is_asymmetric():
    assert delta_E_94(RED, TEAL) != pytest.approx(delta_E_94(TEAL, RED))


def test_delta_e_star_black_white():
    assert delta_E_star((0, 0, 0), (255, 255, 255)) == pytest.approx(100.0, abs=1e-2)


def test_chroma_and_hue_components():
    # Same lightness and chroma, opposite hue in LAB.
    a = Color(50.0, 20.0, 0.0, 255.0)
    b = Color(50.0, -20.0, 0.0, 255.0)
    assert delta_C_star(a, b, "pass") == pytest.approx(0.0)
    assert delta_H_star(a, b, "pass") == pytest.approx(40.0)


@pytest.mark.parametrize("lab1, lab2, expected", [
    ((50.0, 2.6772, -79.7751), (50.0, 0.0, -82.7485), 2.0425),
    ((50.0, 0.0, 0.0), (50.0, -1.0, 2.0), 2.3669),
])
def test_ciede2000_reference_pairs(lab1, lab2, expected):
    assert delta_E_2000(Color(*lab1), Color(*lab2), colorspace="pass") == pytest.approx(expected, abs=1e-4)


# --- vectorized ---

@pytest.mark.parametrize("method, single", [
    ("76", delta_E_star),
    ("94", delta_E_94),
    ("CMC", delta_E_CMC),
    ("2000", delta_E_2000),
])
def test_delta_e_array_matches_scalar(method, single):
    a = [RED, BLUE, TEAL]
    b = [TEAL, RED, (128, 128, 128)]
    out = delta_E_array(a, b, method=method)
    assert out.shape == (3,)
    assert out == pytest.approx(np.array([single(x, y) for x, y in zip(a, b)]))


def test_delta_e_array_length_mismatch():
    with pytest.raises(ValueError):
        delta_E_array([RED, BLUE], [RED])


def test_delta_e_array_unknown_method():
    with pytest.raises(ValueError):
        delta_E_array([RED], [BLUE], method="99")


# --- perception helpers ---

def test_contrast_ratio_black_white():
    assert contrast_ratio((0, 0, 0), (255, 255, 255)) == pytest.approx(21.0, abs=1e-2)
    assert contrast_ratio((255, 255, 255), (0, 0, 0)) == pytest.approx(21.0, abs=1e-2)


@pytest.mark.parametrize("c1, c2", [(RED, BLUE), (TEAL, TEAL), ((10, 10, 10), (11, 10, 10))])
def test_contrast_ratio_is_at_least_one(c1, c2):
    assert contrast_ratio(c1, c2) >= 1.0


def test_noticable_different():
    assert noticable_different((0, 0, 0), (255, 255, 255))
    assert not noticable_different((100, 100, 100), (101, 100, 100))


def test_nearest_color_returns_palette_entry():
    palette = ["#000000", "#ffffff", "#ff0000"]
    assert nearest_color(palette, (250, 10, 5)) == "#ff0000"


def test_nearest_color_with_custom_distance():
    palette = [RED, BLUE]
    assert nearest_color(palette, (10, 0, 200), delta_E_2000) == BLUE


def test_nearest_color_of_empty_palette_is_input():
    assert nearest_color([], (1, 2, 3)) == (1.0, 2.0, 3.0, 255.0)
