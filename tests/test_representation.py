# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for the representation normalizer and encoders.
"""

import numpy as np
import pytest

from tincture_core import Color, InvalidColorError, InvalidInputError
from tincture_representation import (
    Pixel,
    format_hex,
    pack,
    parse_hex,
    possible_color,
    possible_palette,
    relative_luma,
    set_alpha,
    to_color,
    to_pixel,
    valid_color,
)


# --- sequence arity ---

def test_empty_sequence_is_opaque_black():
    assert to_color([]) == (0.0, 0.0, 0.0, 255.0)


def test_single_element_is_gray():
    assert to_color([5]) == to_color([5, 5, 5, 255])


def test_two_elements_are_gray_and_alpha():
    assert to_color([5, 9]) == (5.0, 5.0, 5.0, 9.0)


def test_three_elements_are_opaque_rgb():
    assert to_color((1, 2, 3)) == (1.0, 2.0, 3.0, 255.0)


def test_extra_elements_are_ignored():
    assert to_color([1, 2, 3, 4, 5, 6]) == (1.0, 2.0, 3.0, 4.0)


def test_numpy_vector_is_accepted():
    assert to_color(np.array([10, 20, 30])) == (10.0, 20.0, 30.0, 255.0)


def test_color_passes_through_unchanged():
    c = Color(-4.0, 300.0, 0.5, 12.0)
    assert to_color(c) is c


# --- packed integers ---

def test_packed_without_alpha_byte_is_opaque():
    assert to_color(0x00AABBCC) == (0xAA, 0xBB, 0xCC, 255.0)


def test_packed_with_full_alpha():
    assert to_color(0xFFAABBCC) == (0xAA, 0xBB, 0xCC, 255.0)


def test_packed_with_partial_alpha():
    assert to_color(0x80112233) == (0x11, 0x22, 0x33, 0x80)


def test_small_integer_is_a_legal_colour():
    assert to_color(0x000001) == (0.0, 0.0, 1.0, 255.0)


def test_pack_is_signed_32_bit():
    expected = 0xFFAA0101 - (1 << 32)
    assert pack((170, 1, 1, 255)) == expected
    assert pack(0xAA0101) == expected


def test_pack_round_trips_through_normalizer():
    c = Color(12.0, 34.0, 56.0, 78.0)
    assert to_color(pack(c)) == c


# --- hex strings ---

def test_hex_shorthand_expansion():
    assert to_color("#1") == to_color("#111111") == to_color("#111111ff")
    assert to_color("ab") == to_color("#ababab")
    assert to_color("#abc") == to_color("#aabbcc")


def test_hex_trailing_zero_alpha_is_transparent_not_black():
    assert to_color("#aabbcc00") == (0xAA, 0xBB, 0xCC, 0.0)


def test_hex_with_alpha():
    assert parse_hex("#11223380") == (0x11, 0x22, 0x33, 0x80)


@pytest.mark.parametrize("text", ["#12345", "#1234567", "#ggg", "#"])
def test_malformed_hex_raises(text):
    with pytest.raises(InvalidInputError):
        to_color(text)


def test_unknown_name_raises_invalid_input():
    with pytest.raises(InvalidInputError):
        to_color("definitely-not-a-colour")


def test_named_colour_lookup_is_case_insensitive():
    assert to_color("Red") == to_color("red") == (255.0, 0.0, 0.0, 255.0)


def test_format_hex_omits_opaque_alpha():
    assert format_hex((255, 0, 128)) == "#ff0080"
    assert format_hex((255, 0, 128, 16)) == "#ff008010"


# --- invalid input ---

@pytest.mark.parametrize("value", [None, True, object(), {"r": 1}, float("nan")])
def test_unclassifiable_input_raises(value):
    with pytest.raises(InvalidColorError):
        to_color(value)


def test_valid_color_never_raises():
    assert valid_color(None) is False
    assert valid_color("#zz") is False
    assert valid_color("#ff0000") == (255.0, 0.0, 0.0, 255.0)


def test_possible_color_threshold():
    assert possible_color("anything")
    assert possible_color([255, 0, 0])
    assert not possible_color([0x01000000, 0x02000000])
    assert not possible_color([])
    assert possible_palette([(1, 2, 3), (4, 5, 6)])


# --- device pixel ---

def test_pixel_round_trip():
    c = Color(10.0, 20.0, 30.0, 40.0)
    assert to_color(to_pixel(c)) == c


def test_to_pixel_rounds_and_clamps():
    assert to_pixel((300.0, -5.0, 12.6)) == Pixel(255, 0, 13, 255)


def test_to_pixel_alpha_override():
    assert to_pixel((1, 2, 3), a=7).a == 7


def test_set_alpha():
    assert set_alpha((1, 2, 3), 0.0) == (1.0, 2.0, 3.0, 0.0)


def test_relative_luma_extremes():
    assert relative_luma((0, 0, 0)) == pytest.approx(0.0)
    assert relative_luma((255, 255, 255)) == pytest.approx(255.0, abs=1e-3)
