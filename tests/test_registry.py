# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for the colour-space registry and its normalized variant.
"""

import pytest

from tincture_core import Color, ColorspaceNotFoundError
from tincture_registry import (
    COLORSPACES,
    COLORSPACES_NORMALIZED,
    NORMALIZATION_RANGES,
    color_converter,
    colorspaces_list,
    get_colorspace,
    make_LCH,
)


def test_raw_and_normalized_tables_share_keys():
    assert set(COLORSPACES) == set(COLORSPACES_NORMALIZED)


def test_every_range_belongs_to_a_registered_space():
    assert set(NORMALIZATION_RANGES) <= set(COLORSPACES)


def test_unknown_colorspace_raises():
    with pytest.raises(ColorspaceNotFoundError):
        get_colorspace("CMYK")
    with pytest.raises(ColorspaceNotFoundError):
        get_colorspace("CMYK", normalized=True)


def test_not_found_is_a_key_error():
    with pytest.raises(KeyError):
        get_colorspace("nope")


def test_colorspaces_list_is_sorted_and_complete():
    names = colorspaces_list()
    assert names == sorted(names)
    assert set(names) == set(COLORSPACES)
    for name in ("LAB", "Oklab", "OSA", "PalettonHSV", "RGB", "pass"):
        assert name in names


def test_identity_spaces():
    c = Color(1.0, 2.0, 3.0, 4.0)
    for name in ("RGB", "pass"):
        pair = get_colorspace(name)
        assert pair.to(c) == c
        assert pair.from_(c) == c


def test_pair_unpacks_as_tuple():
    to, frm = get_colorspace("HSV")
    assert frm(to((10, 20, 30))) == pytest.approx((10.0, 20.0, 30.0, 255.0))


def test_normalized_hsv_scales_hue():
    h, s, v, _ = get_colorspace("HSV", normalized=True).to((0, 255, 255))
    assert h == pytest.approx(127.5)
    assert s == pytest.approx(255.0)
    assert v == pytest.approx(255.0)


# --- polar wrapper ---

def test_make_lch_over_lab_matches_lch():
    to, frm = make_LCH("LAB")
    lch_to, _ = get_colorspace("LCH")
    c = (12, 200, 77)
    assert to(c) == pytest.approx(lch_to(c))
    assert frm(to(c)) == pytest.approx((12.0, 200.0, 77.0, 255.0))


def test_make_lch_rejects_unknown_base():
    with pytest.raises(ColorspaceNotFoundError):
        make_LCH("nope")


# --- scaled readers ---

def test_color_converter_without_scale_is_normalized_inverse():
    assert color_converter("HSV") is get_colorspace("HSV", normalized=True).from_


def test_color_converter_single_scale():
    read = color_converter("RGB", 1.0)
    assert read((1.0, 0.5, 0.0, 1.0)) == pytest.approx((255.0, 127.5, 0.0, 255.0))


def test_color_converter_three_scales_leave_alpha():
    read = color_converter("HSV", 360.0, 100.0, 100.0)
    assert read((0.0, 100.0, 100.0, 255.0)) == pytest.approx((255.0, 0.0, 0.0, 255.0))


def test_color_converter_clamps_input():
    read = color_converter("RGB", 1.0)
    assert read((2.0, -1.0, 0.5)) == pytest.approx((255.0, 0.0, 127.5, 255.0))


def test_color_converter_rejects_two_scales():
    with pytest.raises(TypeError):
        color_converter("RGB", 1.0, 2.0)
