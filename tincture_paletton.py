# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Paletton HSV & Palette Generator
================================
The hue model of the Paletton colour scheme designer.  The wheel is split
into six bands (0-120, 120-180, 180-210, 210-255, 255-315, 315-360), each with
its own tangent-shaped forward map and arctangent inverse.  Saturation and
value are expressed as multipliers in ``[0, 2]`` relative to the band's base
colour, so ``(h, 1, 1)`` is the "full" colour of hue ``h``.

The constants are empirical and are reproduced as published by Paletton.
"""

import math
from typing import Callable, Dict, Final, List, Literal, NamedTuple, Sequence, Tuple, Union

from tincture_core import Color, InvalidInputError, OPAQUE, constrain, wrap_hue
from tincture_representation import ColorLike, to_color

__all__ = [
    # --- Conversions ---
    "to_PalettonHSV",
    "from_PalettonHSV",
    "hue_paletton",

    # --- Palettes ---
    "PALETTON_PRESETS",
    "PalettonKind",
    "paletton_presets_list",
    "paletton",
]

PalettonKind = Literal["monochromatic", "triad", "tetrad"]
Preset = Sequence[Tuple[float, float]]

_HALF_PI: Final[float] = 0.5 * math.pi


# =============================================================================
# 1. HUE BANDS
# =============================================================================

def _s(e: float, t: float, n: float) -> float:
    return e if n == -1.0 else e + (t - e) / (n + 1.0)


def _i(e: float, t: float, n: float) -> float:
    return t if n == -1.0 else t + (e - t) / (n + 1.0)


class _Band(NamedTuple):
    a: Tuple[float, float]
    b: Tuple[float, float]
    f: Callable[[float], float]
    fi: Callable[[float], float]
    g: Callable[[float, float, float], float]
    order: Tuple[int, int, int]


def _tan_map(k: float, origin: float, span: float, rising: bool, pole: float) -> Callable[[float], float]:
    def f(h: float) -> float:
        if h == pole:
            return -1.0
        x = (h - origin) if rising else (origin - h)
        return k * math.tan(_HALF_PI * x / span)
    return f


def _atan_map(k: float, origin: float, span: float, rising: bool, pole: float) -> Callable[[float], float]:
    def fi(e: float) -> float:
        if e == -1.0:
            return pole
        d = 2.0 * math.atan(e / k) * span / math.pi
        return origin + d if rising else origin - d
    return fi


# Upper band edge -> band.  ``order`` permutes the internal (max, mid, min)
# channels into (r, g, b).
_BANDS: Final[Tuple[Tuple[float, _Band], ...]] = (
    (120.0, _Band((1.0, 1.0), (1.0, 1.0),
                  _tan_map(0.5, 120.0, 120.0, False, 0.0),
                  _atan_map(0.5, 120.0, 120.0, False, 0.0),
                  _s, (0, 1, 2))),
    (180.0, _Band((1.0, 1.0), (1.0, 0.8),
                  _tan_map(0.5, 120.0, 60.0, True, 180.0),
                  _atan_map(0.5, 120.0, 60.0, True, 180.0),
                  _i, (1, 0, 2))),
    (210.0, _Band((1.0, 0.8), (1.0, 0.6),
                  _tan_map(0.75, 210.0, 30.0, False, 180.0),
                  _atan_map(0.75, 210.0, 30.0, False, 180.0),
                  _s, (1, 2, 0))),
    (255.0, _Band((1.0, 0.6), (0.85, 0.7),
                  _tan_map(1.33, 210.0, 45.0, True, 255.0),
                  _atan_map(1.33, 210.0, 45.0, True, 255.0),
                  _i, (2, 1, 0))),
    (315.0, _Band((0.85, 0.7), (1.0, 0.65),
                  _tan_map(1.33, 315.0, 60.0, False, 255.0),
                  _atan_map(1.33, 315.0, 60.0, False, 255.0),
                  _s, (2, 0, 1))),
    (360.0, _Band((1.0, 0.65), (1.0, 1.0),
                  _tan_map(1.33, 315.0, 45.0, True, 0.0),
                  _atan_map(1.33, 315.0, 45.0, True, 0.0),
                  _i, (0, 2, 1))),
)


def _band(h: float) -> _Band:
    for edge, band in _BANDS:
        if h < edge:
            return band
    return _BANDS[-1][1]


# =============================================================================
# 2. CONVERSIONS
# =============================================================================

def _adjust_rev(e: float, t: float) -> float:
    return e * t if t <= 1.0 else e + (1.0 - e) * (t - 1.0)


def _adjust(e: float, t: float) -> float:
    if e == 0.0:
        return 0.0
    if t <= e:
        return t / e
    return 1.0 + (t - e) / (1.0 - e)


def _hsv_to_rgb(hue: float, ks: float, kv: float, alpha: float = OPAQUE) -> Color:
    ks = constrain(ks, 0.0, 2.0)
    kv = constrain(kv, 0.0, 2.0)
    h = wrap_hue(hue)
    band = _band(h)
    n = band.f(h)
    v = _adjust_rev(band.g(band.a[1], band.b[1], n), kv)
    s = _adjust_rev(band.g(band.a[0], band.b[0], n), ks)
    hi = 255.0 * v
    lo = hi * (1.0 - s)
    mid = lo if n == -1.0 else (hi + n * lo) / (n + 1.0)
    out = [0.0, 0.0, 0.0]
    for channel, value in zip(band.order, (hi, mid, lo)):
        out[channel] = value
    return Color(out[0], out[1], out[2], alpha)


def hue_paletton(c: ColorLike) -> float:
    """Paletton hue of a colour in degrees; differs from both hexagonal and polar hue."""
    v = to_color(c)
    r, g, b = v.ch0, v.ch1, v.ch2
    if r == g == b:
        return 0.0
    f = max(r, g, b)
    p = min(r, g, b)
    if f == r:
        l, fi = (g, _band(119.0).fi) if p == b else (b, _band(359.0).fi)
    elif f == g:
        l, fi = (b, _band(209.0).fi) if p == r else (r, _band(179.0).fi)
    else:
        l, fi = (g, _band(254.0).fi) if p == r else (r, _band(314.0).fi)
    return fi(-1.0 if l == p else (f - l) / (l - p))


def to_PalettonHSV(c: ColorLike) -> Color:
    """
    RGB -> Paletton HSV.

    Hue is in ``[0, 360)``; saturation and value are multipliers in ``[0, 2]``.
    Grays map to hue 0, saturation 0 and value equal to their Rec. 601 luma.
    """
    v = to_color(c)
    r, g, b = v.ch0, v.ch1, v.ch2
    if r == g == b:
        return Color(0.0, 0.0, (0.299 * r + 0.587 * g + 0.114 * b) / 255.0, v.alpha)
    f = max(r, g, b)
    p = min(r, g, b)
    h = hue_paletton(v)
    band = _band(h)
    n = band.f(h)
    base_v = band.g(band.a[1], band.b[1], n)
    base_s = band.g(band.a[0], band.b[0], n)
    return Color(h, _adjust(base_s, (f - p) / f), _adjust(base_v, f / 255.0), v.alpha)


def from_PalettonHSV(c: ColorLike) -> Color:
    v = to_color(c)
    return _hsv_to_rgb(v.ch0, v.ch1, v.ch2, v.alpha)


# =============================================================================
# 3. PALETTE GENERATOR
# =============================================================================

# (saturation multiplier, value multiplier) for the five shades of one hue.
PALETTON_PRESETS: Final[Dict[str, Tuple[Tuple[float, float], ...]]] = {
    "pale-light": ((0.24649, 1.78676), (0.09956, 1.95603), (0.17209, 1.88583), (0.32122, 1.65929), (0.39549, 1.50186)),
    "pastels-bright": ((0.65667, 1.86024), (0.04738, 1.99142), (0.39536, 1.89478), (0.90297, 1.85419), (1.86422, 1.8314)),
    "shiny": ((1.00926, 2.0), (0.3587, 2.0), (0.5609, 2.0), (2.0, 0.8502), (2.0, 0.65438)),
    "pastels-lightest": ((0.34088, 1.09786), (0.13417, 1.62645), (0.23137, 1.38072), (0.45993, 0.92696), (0.58431, 0.81098)),
    "pastels-very-light": ((0.58181, 1.32382), (0.27125, 1.81913), (0.44103, 1.59111), (0.70192, 1.02722), (0.84207, 0.91425)),
    "full": ((1.0, 1.0), (0.61056, 1.24992), (0.77653, 1.05996), (1.06489, 0.77234), (1.25783, 0.60685)),
    "pastels-light": ((0.37045, 0.90707), (0.15557, 1.28367), (0.25644, 1.00735), (0.49686, 0.809), (0.64701, 0.69855)),
    "pastels-med": ((0.66333, 0.8267), (0.36107, 1.30435), (0.52846, 0.95991), (0.78722, 0.70882), (0.91265, 0.5616)),
    "darker": ((0.93741, 0.68672), (0.68147, 0.88956), (0.86714, 0.82989), (1.12072, 0.5673), (1.44641, 0.42034)),
    "pastels-mid-pale": ((0.38302, 0.68001), (0.15521, 0.98457), (0.26994, 0.81586), (0.46705, 0.54194), (0.64065, 0.44875)),
    "pastels": ((0.66667, 0.66667), (0.33333, 1.0), (0.5, 0.83333), (0.83333, 0.5), (1.0, 0.33333)),
    "dark-neon": ((0.94645, 0.59068), (0.99347, 0.91968), (0.93954, 0.7292), (1.01481, 0.41313), (1.04535, 0.24368)),
    "pastels-dark": ((0.36687, 0.39819), (0.25044, 0.65561), (0.319, 0.54623), (0.55984, 0.37953), (0.70913, 0.3436)),
    "pastels-very-dark": ((0.60117, 0.41845), (0.36899, 0.59144), (0.42329, 0.44436), (0.72826, 0.35958), (0.88393, 0.27004)),
    "dark": ((1.31883, 0.40212), (0.9768, 0.25402), (1.27265, 0.30941), (1.21289, 0.60821), (1.29837, 0.82751)),
    "pastels-mid-dark": ((0.26952, 0.22044), (0.23405, 0.52735), (0.23104, 0.37616), (0.42324, 0.20502), (0.54424, 0.18483)),
    "pastels-darkest": ((0.53019, 0.23973), (0.48102, 0.50306), (0.50001, 0.36755), (0.6643, 0.32778), (0.77714, 0.3761)),
    "darkest": ((1.46455, 0.21042), (0.99797, 0.16373), (0.96326, 0.274), (1.56924, 0.45022), (1.23016, 0.66)),
    "almost-black": ((0.12194, 0.15399), (0.34224, 0.50742), (0.24211, 0.34429), (0.31846, 0.24986), (0.52251, 0.33869)),
    "almost-gray-dark": ((0.10266, 0.24053), (0.13577, 0.39387), (0.11716, 0.30603), (0.14993, 0.22462), (0.29809, 0.19255)),
    "almost-gray-darker": ((0.07336, 0.36815), (0.18061, 0.50026), (0.09777, 0.314), (0.12238, 0.25831), (0.14388, 0.1883)),
    "almost-gray-mid": ((0.07291, 0.59958), (0.19602, 0.74092), (0.10876, 0.5366), (0.15632, 0.48229), (0.20323, 0.42268)),
    "almost-gray-lighter": ((0.06074, 0.82834), (0.14546, 0.97794), (0.10798, 0.76459), (0.15939, 0.68697), (0.22171, 0.62926)),
    "almost-gray-light": ((0.03501, 1.59439), (0.23204, 1.10483), (0.14935, 1.33784), (0.07371, 1.04897), (0.09635, 0.91368)),
}


def paletton_presets_list() -> List[str]:
    return list(PALETTON_PRESETS)


def _resolve_preset(preset: Union[str, Preset]) -> Preset:
    if isinstance(preset, str):
        try:
            return PALETTON_PRESETS[preset]
        except KeyError:
            raise InvalidInputError(
                f"Unknown paletton preset '{preset}'. Available: {paletton_presets_list()}"
            ) from None
    return preset


def _monochromatic(hue: float, preset: Preset) -> List[Color]:
    return [_hsv_to_rgb(hue, ks, kv) for ks, kv in preset]


def paletton(kind: PalettonKind, hue: float, preset: Union[str, Preset] = "full", compl: bool = False,
             angle: float = 30.0, adj: bool = True) -> List[Color]:
    """
    Generates a Paletton-style palette around a Paletton hue.

    Args:
        kind: ``"monochromatic"`` (one hue), ``"triad"`` (three hues) or
            ``"tetrad"`` (two complementary pairs).
        hue: Paletton hue in degrees, see :func:`hue_paletton`.
        preset: Name from :data:`PALETTON_PRESETS` or a custom sequence of
            ``(saturation, value)`` multiplier pairs.
        compl: Append the complementary hue (monochromatic and triad only).
        angle: Hue offset of the additional hues of a triad or tetrad.
        adj: Triad only.  Place the extra hues next to ``hue`` when true,
            otherwise next to its complement.

    Returns:
        Five colours per generated hue.
    """
    shades = _resolve_preset(preset)
    if kind == "monochromatic":
        out = _monochromatic(hue, shades)
        if compl:
            out += _monochromatic(hue + 180.0, shades)
        return out
    if kind == "triad":
        chue = hue + 180.0
        base = hue if adj else chue
        out = (_monochromatic(hue, shades)
               + _monochromatic(base + angle, shades)
               + _monochromatic(base - angle, shades))
        if compl:
            out += _monochromatic(chue, shades)
        return out
    if kind == "tetrad":
        return (paletton("monochromatic", hue, shades, compl=True)
                + paletton("monochromatic", hue + angle, shades, compl=True))
    raise InvalidInputError(f"Unknown paletton kind '{kind}'. Expected monochromatic, triad or tetrad.")
