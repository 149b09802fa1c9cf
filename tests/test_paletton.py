# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for Paletton HSV and the Paletton palette generator.
"""

from typing import Union, get_type_hints

import pytest

from tincture_core import InvalidInputError
from tincture_paletton import (
    PALETTON_PRESETS,
    Preset,
    from_PalettonHSV,
    hue_paletton,
    paletton,
    paletton_presets_list,
    to_PalettonHSV,
)


@pytest.mark.parametrize("rgb, h", [
    ((255, 0, 0), 0.0),
    ((0, 255, 0), 180.0),
    ((0, 0, 255), 255.0),
    ((128, 128, 128), 0.0),
])
def test_hue_paletton_poles(rgb, h):
    assert hue_paletton(rgb) == pytest.approx(h)


def test_hue_paletton_differs_from_hexagonal_hue():
    # Hexagonal hue of pure green is 120.
    assert hue_paletton((0, 255, 0)) != pytest.approx(120.0)


def test_full_colour_has_unit_multipliers():
    h, s, v, _ = to_PalettonHSV((255, 0, 0))
    assert (h, s, v) == pytest.approx((0.0, 1.0, 1.0))
    assert from_PalettonHSV((0.0, 1.0, 1.0)) == pytest.approx((255.0, 0.0, 0.0, 255.0))


def test_gray_maps_to_zero_saturation():
    h, s, v, _ = to_PalettonHSV((100, 100, 100))
    assert s == 0.0
    assert from_PalettonHSV((h, s, v)) == pytest.approx((100.0, 100.0, 100.0, 255.0))


def test_hue_is_wrapped():
    assert from_PalettonHSV((360.0 + 90.0, 1.0, 1.0)) == pytest.approx(from_PalettonHSV((90.0, 1.0, 1.0)))


def test_multipliers_are_clamped():
    assert from_PalettonHSV((30.0, 5.0, 5.0)) == pytest.approx(from_PalettonHSV((30.0, 2.0, 2.0)))


def test_presets_list_matches_table():
    assert paletton_presets_list() == list(PALETTON_PRESETS)
    assert all(len(shades) == 5 for shades in PALETTON_PRESETS.values())


@pytest.mark.parametrize("kind, compl, size", [
    ("monochromatic", False, 5),
    ("monochromatic", True, 10),
    ("triad", False, 15),
    ("triad", True, 20),
    ("tetrad", False, 20),
])
def test_paletton_sizes(kind, compl, size):
    assert len(paletton(kind, 30.0, compl=compl)) == size


def test_monochromatic_full_starts_with_full_colour():
    first = paletton("monochromatic", 0.0)[0]
    assert first == pytest.approx((255.0, 0.0, 0.0, 255.0))


def test_custom_preset_sequence():
    out = paletton("monochromatic", 0.0, preset=[(1.0, 1.0), (0.0, 0.5)])
    assert len(out) == 2
    assert out[1][:3] == pytest.approx((127.5, 127.5, 127.5))


def test_preset_parameter_takes_names_or_multiplier_pairs():
    assert get_type_hints(paletton)["preset"] == Union[str, Preset]


def test_paletton_outputs_stay_in_rgb_range():
    for name in paletton_presets_list():
        for c in paletton("triad", 200.0, name, compl=True):
            assert all(-1e-9 <= x <= 255.0 + 1e-9 for x in c[:3]), name


def test_unknown_kind_raises():
    with pytest.raises(InvalidInputError):
        paletton("pentad", 0.0)


def test_unknown_preset_raises():
    with pytest.raises(InvalidInputError):
        paletton("monochromatic", 0.0, "neon-glow")
