# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Generic Channel Operations & Colour Filters
===========================================
Operations that work in any registered colour space by converting in,
editing one channel and converting back out.  Channel index 3 always
addresses alpha, which no conversion touches.

Also hosts the fixed-purpose adjustments (whiten, brighten, saturate, ...),
black-body colour temperature and SVG ``feColorMatrix`` style filters,
including colour vision deficiency simulations.
"""

import math
from typing import Callable, Dict, Final, Optional, Sequence, Union

import numpy as np

from tincture_core import Color, constrain, linear_to_srgb
from tincture_cie import from_LAB, from_LCH, to_LAB, to_LCH
from tincture_colorspaces import from_HWB, to_HWB
from tincture_registry import get_colorspace
from tincture_representation import ColorLike, clamp, to_color

__all__ = [
    # --- Channel Access ---
    "get_channel",
    "set_channel",
    "adjust",
    "modulate",
    "complementary",

    # --- Adjustments ---
    "whiten",
    "blacken",
    "brighten",
    "darken",
    "saturate",
    "desaturate",
    "tinter",

    # --- Temperature ---
    "TEMPERATURE_NAMES",
    "temperature",

    # --- Filters ---
    "ColorFilter",
    "fe_color_matrix",
    "sepia",
    "contrast",
    "exposure",
    "brightness",
    "saturation",
    "hue_rotate",
    "grayscale",
    "achromatomaly",
    "achromatopsia",
    "deuteranomaly",
    "deuteranopia",
    "protanomaly",
    "protanopia",
    "tritanomaly",
    "tritanopia",
]

ColorFilter = Callable[[ColorLike], Color]


# =============================================================================
# 1. CHANNEL ACCESS
# =============================================================================

def _check_channel(channel: int) -> None:
    if channel not in (0, 1, 2, 3):
        raise IndexError(f"Channel index must be 0, 1, 2 or 3 (alpha), got {channel}")


def _convert_in(c: ColorLike, colorspace: Optional[str]) -> Color:
    if colorspace is None:
        return to_color(c)
    return get_colorspace(colorspace).to(c)


def _convert_out(c: Color, colorspace: Optional[str]) -> Color:
    if colorspace is None:
        return c
    return get_colorspace(colorspace).from_(c)


def get_channel(c: ColorLike, channel: int, colorspace: Optional[str] = None) -> float:
    """
    Reads one channel, optionally after converting to ``colorspace``.

    >>> get_channel((255, 0, 0), 0, "HSV")
    0.0
    """
    _check_channel(channel)
    return float(_convert_in(c, colorspace)[channel])


def _edit(c: ColorLike, channel: int, colorspace: Optional[str],
          op: Callable[[float], float]) -> Color:
    _check_channel(channel)
    v = list(_convert_in(c, colorspace))
    v[channel] = op(v[channel])
    return _convert_out(Color(*v), colorspace)


def set_channel(c: ColorLike, channel: int, value: float, colorspace: Optional[str] = None) -> Color:
    """Replaces one channel in ``colorspace`` (RGB when omitted) and converts back."""
    return _edit(c, channel, colorspace, lambda _: float(value))


def adjust(c: ColorLike, channel: int, value: float, colorspace: Optional[str] = None) -> Color:
    """Adds ``value`` to one channel in ``colorspace`` and converts back."""
    return _edit(c, channel, colorspace, lambda x: x + value)


def modulate(c: ColorLike, channel: int, amount: float, colorspace: Optional[str] = None) -> Color:
    """Multiplies one channel in ``colorspace`` by ``amount`` and converts back."""
    return _edit(c, channel, colorspace, lambda x: x * amount)


# Hue channel of spaces that do not keep hue in channel 0.
_HUE_CHANNEL: Final[Dict[str, int]] = {
    "GLHS": 1,
    "LCH": 2,
    "LCHuv": 2,
    "JCH": 2,
    "Oklch": 2,
}


def complementary(c: ColorLike, colorspace: str = "PalettonHSV") -> Color:
    """
    Rotates the hue by 180°.

    Hue lives in channel 0 for the hue-first spaces (HSV, HSL, HWB, HSI, HCL,
    PalettonHSV, ...), in channel 1 for GLHS and in channel 2 for the polar
    ``(L, C, h)`` spaces.
    """
    return adjust(c, _HUE_CHANNEL.get(colorspace, 0), 180.0, colorspace)


# =============================================================================
# 2. ADJUSTMENTS
# =============================================================================

def whiten(c: ColorLike, amount: float = 0.2) -> Color:
    """Adds ``amount`` to the HWB whiteness."""
    v = to_HWB(c)
    return clamp(from_HWB(v._replace(ch1=constrain(v.ch1 + amount, 0.0, 1.0))))


def blacken(c: ColorLike, amount: float = 0.2) -> Color:
    """Adds ``amount`` to the HWB blackness."""
    v = to_HWB(c)
    return clamp(from_HWB(v._replace(ch2=constrain(v.ch2 + amount, 0.0, 1.0))))


def brighten(c: ColorLike, amount: float = 1.0) -> Color:
    """Raises CIELAB L* by ``18 * amount``."""
    v = to_LAB(c)
    return clamp(from_LAB(v._replace(ch0=max(0.0, v.ch0 + 18.0 * amount))))


def darken(c: ColorLike, amount: float = 1.0) -> Color:
    return brighten(c, -amount)


def saturate(c: ColorLike, amount: float = 1.0) -> Color:
    """Raises LCH chroma by ``18 * amount``."""
    v = to_LCH(c)
    return clamp(from_LCH(v._replace(ch1=max(0.0, v.ch1 + 18.0 * amount))))


def desaturate(c: ColorLike, amount: float = 1.0) -> Color:
    return saturate(c, -amount)


def tinter(tint: ColorLike) -> ColorFilter:
    """Returns a filter multiplying colours with ``tint`` (geometric mean per channel)."""
    t = np.asarray(to_color(tint), dtype=np.float64) + 1.0

    def apply(c: ColorLike) -> Color:
        v = np.asarray(to_color(c), dtype=np.float64) + 1.0
        return clamp(Color(*(255.0 * np.sqrt(v * t / 65536.0)).tolist()))

    return apply


# =============================================================================
# 3. BLACK-BODY TEMPERATURE
# =============================================================================

TEMPERATURE_NAMES: Final[Dict[str, float]] = {
    "candle": 1800.0,
    "sunrise": 2500.0,
    "sunset": 2500.0,
    "lightbulb": 2900.0,
    "morning": 3500.0,
    "moonlight": 4000.0,
    "midday": 5500.0,
    "cloudy-sky": 6500.0,
    "blue-sky": 10000.0,
    "warm": 2900.0,
    "white": 4250.0,
    "sunlight": 4800.0,
    "cool": 7250.0,
}


def _kelvin_red(k: float, lnk: float) -> float:
    if k < 0.65:
        return 255.0
    return min(255.0, 255.0 * linear_to_srgb(0.32068362618584273
                                             + 0.19668730877673762 * (k - 0.21298613432655075) ** -1.5139012907556737
                                             - 0.013883432789258415 * lnk))


def _kelvin_green(k: float, lnk: float) -> float:
    if k < 0.08:
        return 0.0
    if k < 0.655:
        eek = k - 0.44267061967913873
        return max(0.0, 255.0 * linear_to_srgb(1.226916242502167
                                               - 1.3109482654223614 * eek * eek * eek
                                               * math.exp(eek * -5.089297600846147)
                                               + 0.6453936305542096 * lnk))
    return 255.0 * linear_to_srgb(0.4860175851734596
                                  + 0.1802139719519286 * (k - 0.14573069517701578) ** -1.397716496795082
                                  - 0.00803698899233844 * lnk)


def _kelvin_blue(k: float, lnk: float) -> float:
    if k < 0.19:
        return 0.0
    if k > 0.66:
        return 255.0
    eek = k - 1.1367244820333684
    return constrain(255.0 * linear_to_srgb(1.677499032830161
                                            - 0.02313594016938082 * eek * eek * eek
                                            * math.exp(eek * -4.221279555918655)
                                            + 1.6550275798913296 * lnk), 0.0, 255.0)


def temperature(t: Union[float, str]) -> Color:
    """
    sRGB colour of a black body at ``t`` Kelvin (CIE 1964 10° fit).

    ``t`` may also be a name from :data:`TEMPERATURE_NAMES`, e.g. ``"candle"``.
    """
    if isinstance(t, str):
        try:
            t = TEMPERATURE_NAMES[t]
        except KeyError:
            raise ValueError(f"Unknown temperature name '{t}'. Available: {sorted(TEMPERATURE_NAMES)}") from None
    k = 0.0001 * float(t)
    lnk = math.log(k)
    return Color(_kelvin_red(k, lnk), _kelvin_green(k, lnk), _kelvin_blue(k, lnk), 255.0)


# =============================================================================
# 4. FILTERS
# =============================================================================

def fe_color_matrix(values: Sequence[float]) -> ColorFilter:
    """
    SVG ``feColorMatrix``: 4x5 matrix (row-major, 20 values) on RGBA plus offset.

    Offsets are in channel units (``[0, 255]``).  Results are clamped.
    """
    m = np.asarray(values, dtype=np.float64)
    if m.size != 20:
        raise ValueError(f"feColorMatrix needs 20 values, got {m.size}")
    m = m.reshape(4, 5)
    M, offset = m[:, :4], m[:, 4]

    def apply(c: ColorLike) -> Color:
        v = M @ np.asarray(to_color(c), dtype=np.float64) + offset
        return clamp(Color(*v.tolist()))

    return apply


def sepia(amount: float) -> ColorFilter:
    a = 1.0 - amount
    return fe_color_matrix([0.393 + 0.607 * a, 0.769 - 0.769 * a, 0.189 - 0.189 * a, 0.0, 0.0,
                            0.349 - 0.349 * a, 0.686 + 0.314 * a, 0.168 - 0.168 * a, 0.0, 0.0,
                            0.272 - 0.272 * a, 0.534 - 0.534 * a, 0.131 + 0.869 * a, 0.0, 0.0,
                            0.0, 0.0, 0.0, 1.0, 0.0])


def contrast(amount: float) -> ColorFilter:
    intercept = 127.5 * (1.0 - amount)
    return fe_color_matrix([amount, 0.0, 0.0, 0.0, intercept,
                            0.0, amount, 0.0, 0.0, intercept,
                            0.0, 0.0, amount, 0.0, intercept,
                            0.0, 0.0, 0.0, 1.0, 0.0])


def exposure(amount: float) -> ColorFilter:
    return fe_color_matrix([amount, 0.0, 0.0, 0.0, 0.0,
                            0.0, amount, 0.0, 0.0, 0.0,
                            0.0, 0.0, amount, 0.0, 0.0,
                            0.0, 0.0, 0.0, 1.0, 0.0])


def brightness(amount: float) -> ColorFilter:
    """Adds ``255 * amount`` to every colour channel."""
    o = 255.0 * amount
    return fe_color_matrix([1.0, 0.0, 0.0, 0.0, o,
                            0.0, 1.0, 0.0, 0.0, o,
                            0.0, 0.0, 1.0, 0.0, o,
                            0.0, 0.0, 0.0, 1.0, 0.0])


def saturation(amount: float) -> ColorFilter:
    """SVG ``saturate``: 0 is grayscale, 1 is identity."""
    rp, rm = 0.2126 + 0.7874 * amount, 0.2126 - 0.2126 * amount
    gp, gm = 0.7152 + 0.2848 * amount, 0.7152 - 0.7152 * amount
    bp, bm = 0.0722 + 0.9278 * amount, 0.0722 - 0.0722 * amount
    return fe_color_matrix([rp, gm, bm, 0.0, 0.0,
                            rm, gp, bm, 0.0, 0.0,
                            rm, gm, bp, 0.0, 0.0,
                            0.0, 0.0, 0.0, 1.0, 0.0])


def hue_rotate(angle_degrees: float) -> ColorFilter:
    a = math.radians(angle_degrees)
    sa = math.sin(a)
    ca = math.cos(a)
    crp, crm = 0.213 + 0.787 * ca, 0.213 - 0.213 * ca
    cgp, cgm = 0.715 + 0.285 * ca, 0.715 - 0.715 * ca
    cbp, cbm = 0.072 + 0.928 * ca, 0.072 - 0.072 * ca
    return fe_color_matrix([crp - 0.213 * sa, cgm - 0.715 * sa, cbm + 0.928 * sa, 0.0, 0.0,
                            crm + 0.143 * sa, cgp + 0.140 * sa, cbm - 0.283 * sa, 0.0, 0.0,
                            crm - 0.787 * sa, cgm + 0.715 * sa, cbp + 0.071 * sa, 0.0, 0.0,
                            0.0, 0.0, 0.0, 1.0, 0.0])


def grayscale(amount: float) -> ColorFilter:
    return saturation(1.0 - amount)


# --- Colour vision deficiency (ChromeLens matrices) ---

def _cvd(r: Sequence[float], g: Sequence[float], b: Sequence[float]) -> ColorFilter:
    return fe_color_matrix([*r, 0.0, 0.0, *g, 0.0, 0.0, *b, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0])


achromatomaly: Final = _cvd((0.618, 0.320, 0.062), (0.163, 0.775, 0.062), (0.163, 0.320, 0.516))
achromatopsia: Final = _cvd((0.299, 0.587, 0.114), (0.299, 0.587, 0.114), (0.299, 0.587, 0.114))
deuteranomaly: Final = _cvd((0.8, 0.2, 0.0), (0.258, 0.742, 0.0), (0.0, 0.142, 0.858))
deuteranopia: Final = _cvd((0.625, 0.375, 0.0), (0.7, 0.3, 0.0), (0.0, 0.3, 0.7))
protanomaly: Final = _cvd((0.817, 0.183, 0.0), (0.333, 0.667, 0.0), (0.0, 0.125, 0.875))
protanopia: Final = _cvd((0.567, 0.433, 0.0), (0.558, 0.442, 0.0), (0.0, 0.242, 0.758))
tritanomaly: Final = _cvd((0.967, 0.033, 0.0), (0.0, 0.733, 0.267), (0.0, 0.183, 0.817))
tritanopia: Final = _cvd((0.95, 0.05, 0.0), (0.0, 0.433, 0.567), (0.0, 0.475, 0.525))
