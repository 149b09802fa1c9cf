# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Colour Space Registry
=====================
Maps every colour-space name to its ``(to, from_)`` conversion pair, in two
flavours sharing one key set:

- ``COLORSPACES``: raw conversions, native channel ranges.
- ``COLORSPACES_NORMALIZED``: the same conversions affinely rescaled so every
  channel lands in ``[0, 255]``.

The rescaling constants are the per-channel extrema reached when sampling the
whole RGB cube, kept verbatim as calibration data.  Alpha is never rescaled.
"""

from typing import Dict, Final, List, Literal, NamedTuple, Optional, Tuple

from tincture_core import Color, ColorspaceNotFoundError, cbrt, mnorm
from tincture_representation import ColorLike, to_color
from tincture_colorspaces import (
    from_luma_color_hue,
    to_luma_color_hue,
    Converter,
    from_CMY, from_Cubehelix, from_GLHS, from_Gray, from_HCL, from_HSB,
    from_HSI, from_HSL, from_HSV, from_HWB, from_linearRGB, from_OHTA,
    from_Okhsl, from_Okhsv, from_Okhwb, from_Oklab, from_Oklch, from_RYB,
    from_sRGB, from_XYB, from_YCbCr, from_YCgCo, from_YDbDr, from_YIQ,
    from_YPbPr, from_YUV,
    to_CMY, to_Cubehelix, to_GLHS, to_Gray, to_HCL, to_HSB,
    to_HSI, to_HSL, to_HSV, to_HWB, to_linearRGB, to_OHTA,
    to_Okhsl, to_Okhsv, to_Okhwb, to_Oklab, to_Oklch, to_RYB,
    to_sRGB, to_XYB, to_YCbCr, to_YCgCo, to_YDbDr, to_YIQ,
    to_YPbPr, to_YUV,
)
from tincture_cie import (
    from_DIN99, from_DIN99b, from_DIN99c, from_DIN99d, from_DIN99o,
    from_HunterLAB, from_IgPgTg, from_IPT, from_JAB, from_JCH, from_LAB,
    from_LCH, from_LCHuv, from_LMS, from_LUV, from_OSA, from_UCS, from_UVW,
    from_XYZ, from_XYZ1, from_Yxy,
    to_DIN99, to_DIN99b, to_DIN99c, to_DIN99d, to_DIN99o,
    to_HunterLAB, to_IgPgTg, to_IPT, to_JAB, to_JCH, to_LAB,
    to_LCH, to_LCHuv, to_LMS, to_LUV, to_OSA, to_UCS, to_UVW,
    to_XYZ, to_XYZ1, to_Yxy,
)
from tincture_paletton import from_PalettonHSV, to_PalettonHSV

__all__ = [
    # --- Types ---
    "ColorspaceName",
    "ColorspacePair",
    "ChannelRange",

    # --- Tables ---
    "COLORSPACES",
    "COLORSPACES_NORMALIZED",
    "NORMALIZATION_RANGES",

    # --- Lookup ---
    "get_colorspace",
    "colorspaces_list",
    "make_normalized",
    "to_OSA_norm",
    "from_OSA_norm",
    "make_LCH",
    "color_converter",
]

ColorspaceName = Literal[
    "CMY", "OHTA", "XYZ", "XYZ1", "DIN99", "DIN99b", "DIN99c", "DIN99d",
    "DIN99o", "UCS", "UVW", "XYB", "RYB", "Yxy", "LMS", "IPT", "IgPgTg",
    "LUV", "LAB", "Oklab", "Oklch", "Okhsv", "Okhwb", "Okhsl", "JAB",
    "HunterLAB", "LCH", "LCHuv", "JCH", "HCL", "HSB", "HSI", "HSL", "HSV",
    "PalettonHSV", "HWB", "GLHS", "YPbPr", "YDbDr", "YCbCr", "YCgCo", "YUV",
    "YIQ", "Gray", "sRGB", "linearRGB", "Cubehelix", "OSA", "RGB", "pass",
]

# (min, max) of a channel; ``None`` leaves that channel untouched.
ChannelRange = Optional[Tuple[float, float]]


class ColorspacePair(NamedTuple):
    """Forward and inverse conversion of one colour space."""
    to: Converter
    from_: Converter


def _identity(c: ColorLike) -> Color:
    return to_color(c)


# =============================================================================
# 1. RAW TABLE
# =============================================================================

COLORSPACES: Final[Dict[str, ColorspacePair]] = {
    "CMY": ColorspacePair(to_CMY, from_CMY),
    "OHTA": ColorspacePair(to_OHTA, from_OHTA),
    "XYZ": ColorspacePair(to_XYZ, from_XYZ),
    "XYZ1": ColorspacePair(to_XYZ1, from_XYZ1),
    "DIN99": ColorspacePair(to_DIN99, from_DIN99),
    "DIN99b": ColorspacePair(to_DIN99b, from_DIN99b),
    "DIN99c": ColorspacePair(to_DIN99c, from_DIN99c),
    "DIN99d": ColorspacePair(to_DIN99d, from_DIN99d),
    "DIN99o": ColorspacePair(to_DIN99o, from_DIN99o),
    "UCS": ColorspacePair(to_UCS, from_UCS),
    "UVW": ColorspacePair(to_UVW, from_UVW),
    "XYB": ColorspacePair(to_XYB, from_XYB),
    "RYB": ColorspacePair(to_RYB, from_RYB),
    "Yxy": ColorspacePair(to_Yxy, from_Yxy),
    "LMS": ColorspacePair(to_LMS, from_LMS),
    "IPT": ColorspacePair(to_IPT, from_IPT),
    "IgPgTg": ColorspacePair(to_IgPgTg, from_IgPgTg),
    "LUV": ColorspacePair(to_LUV, from_LUV),
    "LAB": ColorspacePair(to_LAB, from_LAB),
    "Oklab": ColorspacePair(to_Oklab, from_Oklab),
    "Oklch": ColorspacePair(to_Oklch, from_Oklch),
    "Okhsv": ColorspacePair(to_Okhsv, from_Okhsv),
    "Okhwb": ColorspacePair(to_Okhwb, from_Okhwb),
    "Okhsl": ColorspacePair(to_Okhsl, from_Okhsl),
    "JAB": ColorspacePair(to_JAB, from_JAB),
    "HunterLAB": ColorspacePair(to_HunterLAB, from_HunterLAB),
    "LCH": ColorspacePair(to_LCH, from_LCH),
    "LCHuv": ColorspacePair(to_LCHuv, from_LCHuv),
    "JCH": ColorspacePair(to_JCH, from_JCH),
    "HCL": ColorspacePair(to_HCL, from_HCL),
    "HSB": ColorspacePair(to_HSB, from_HSB),
    "HSI": ColorspacePair(to_HSI, from_HSI),
    "HSL": ColorspacePair(to_HSL, from_HSL),
    "HSV": ColorspacePair(to_HSV, from_HSV),
    "PalettonHSV": ColorspacePair(to_PalettonHSV, from_PalettonHSV),
    "HWB": ColorspacePair(to_HWB, from_HWB),
    "GLHS": ColorspacePair(to_GLHS, from_GLHS),
    "YPbPr": ColorspacePair(to_YPbPr, from_YPbPr),
    "YDbDr": ColorspacePair(to_YDbDr, from_YDbDr),
    "YCbCr": ColorspacePair(to_YCbCr, from_YCbCr),
    "YCgCo": ColorspacePair(to_YCgCo, from_YCgCo),
    "YUV": ColorspacePair(to_YUV, from_YUV),
    "YIQ": ColorspacePair(to_YIQ, from_YIQ),
    "Gray": ColorspacePair(to_Gray, from_Gray),
    "sRGB": ColorspacePair(to_sRGB, from_sRGB),
    "linearRGB": ColorspacePair(to_linearRGB, from_linearRGB),
    "Cubehelix": ColorspacePair(to_Cubehelix, from_Cubehelix),
    "OSA": ColorspacePair(to_OSA, from_OSA),
    "RGB": ColorspacePair(_identity, _identity),
    "pass": ColorspacePair(_identity, _identity),
}


# =============================================================================
# 2. NORMALIZED TABLE
# =============================================================================

_HUE: Final = (0.0, 360.0)
_UNIT: Final = (0.0, 1.0)
_CHROMA: Final = (-127.5, 127.5)
_Y255: Final = (0.0, 255.0)

_LAB_L: Final = (0.0, 100.0)
_OKLAB_L: Final = (0.0, 0.9999999934735462)
_OKHSV_H: Final = (0.0, 0.9999999496045209)
_JAB_J: Final = (-3.2311742677852644e-26, 0.16717463103478347)

NORMALIZATION_RANGES: Final[Dict[str, Tuple[ChannelRange, ChannelRange, ChannelRange]]] = {
    "OHTA": (_Y255, _CHROMA, _CHROMA),
    "XYZ": ((0.0, 95.04715475817799), (0.0, 100.0), (0.0, 108.8829656285427)),
    "DIN99": ((0.0, 100.0003116920774),
              (-27.45031251565246, 36.17533184258057),
              (-33.395536343165965, 31.1550705394938)),
    "DIN99b": ((0.0, 99.99966889479346),
               (-40.110035967857236, 45.52421609386709),
               (-40.48993353097326, 44.366160432960626)),
    "DIN99c": ((0.0, 99.99963151018662),
               (-38.44209843435516, 43.67298483923871),
               (-40.79039987931203, 43.59390987464932)),
    "DIN99d": ((0.0, 100.0001740520318),
               (-37.35102456489855, 42.32332072914751),
               (-41.036070820486316, 43.037583796265324)),
    "DIN99o": ((0.0, 99.99966889479346),
               (-35.434778333676974, 48.87944227965091),
               (-50.296317246972684, 45.92474100066964)),
    "UCS": ((0.0, 0.633646666666666), (0.0, 1.0), (0.0, 1.569179999999999)),
    "UVW": ((-82.16463650546362, 171.80558838900603),
            (-87.16901056149129, 70.81193420964753),
            (-17.0, 99.03972084031946)),
    "XYB": ((-0.015386116472573375, 0.02810008316127735),
            (0.0, 0.8453085619621623),
            (0.0, 0.8453085619621623)),
    "Yxy": ((0.0, 100.0), (0.0, 0.640074499456775), (0.0, 0.6000000000000001)),
    "LMS": ((0.0, 100.00260300000001), (0.0, 99.998915), (0.0, 99.994158)),
    "IPT": ((0.0, 0.99998787116167),
            (-0.45339260927924635, 0.662432531162485),
            (-0.7484710611517463, 0.651464411656511)),
    "IgPgTg": ((0.0, 0.974152505851159),
               (-0.3538247140103022, 0.393984191390090),
               (-0.41178992005867743, 0.43676627200707374)),
    "LUV": (_LAB_L,
            (-83.07975193131836, 175.05303573649485),
            (-134.1160763907768, 107.40136474095397)),
    "LAB": (_LAB_L,
            (-86.18463649762525, 98.25421868616108),
            (-107.86368104495168, 94.48248544644461)),
    "Oklab": (_OKLAB_L,
              (-0.23388757418790818, 0.27621675349252356),
              (-0.3115281476783752, 0.19856975465179516)),
    "Oklch": (_OKLAB_L, (0.0, 0.32249096477516426), (0.0, 359.99988541074447)),
    "Okhsv": (_OKHSV_H, (0.0, 1.0119788696532530), (0.0, 1.0000000319591997)),
    "Okhwb": (_OKHSV_H,
              (-0.011902363837373111, 0.999999923528539),
              (-3.195919973109085e-8, 1.0)),
    "Okhsl": ((0.0, 0.999999949604520), (0.0, 1.012343260867314), (0.0, 0.999999992396189)),
    "JAB": (_JAB_J,
            (-0.09286319310837648, 0.1090265140291988),
            (-0.15632173559361429, 0.11523306877502998)),
    "HunterLAB": (_LAB_L,
                  (-69.08211393661531, 109.48378856734126),
                  (-199.78221402287008, 55.7203132978682)),
    "LCH": (_LAB_L, (0.0, 133.81586201619493), (0.0, 359.99994682530985)),
    "LCHuv": (_LAB_L, (0.0, 179.04142708939605), (0.0, 359.99994137350546)),
    "JCH": (_JAB_J, (1.2924697071141057e-26, 0.15934590856406236),
            (1.0921476445810189e-5, 359.99995671898046)),
    "HCL": ((-179.8496181535773, 180.0), (0.0, 170.0), (0.0, 135.26590615814683)),
    "HSB": (_HUE, _UNIT, _UNIT),
    "HSI": (_HUE, _UNIT, _UNIT),
    "HSL": (_HUE, _UNIT, _UNIT),
    "HSV": (_HUE, _UNIT, _UNIT),
    "HWB": (_HUE, _UNIT, _UNIT),
    "PalettonHSV": (_HUE, (0.0, 2.0), (0.0, 2.0)),
    "GLHS": (_UNIT, (0.0, 359.7647058823529), _UNIT),
    "YPbPr": (None, (-236.589, 236.589), (-200.787, 200.787)),
    "YDbDr": (None, (-339.91499999999996, 339.91499999999996), (-339.91499999999996, 339.915)),
    "YCbCr": (_Y255, _CHROMA, _CHROMA),
    "YCgCo": (_Y255, _CHROMA, _CHROMA),
    "YUV": (None, (-111.17999999999999, 111.17999999999999), (-156.82500000000002, 156.825)),
    "YIQ": (None, (-151.90758, 151.90758), (-133.260705, 133.260705)),
    "Cubehelix": ((0.0, 359.9932808311505), (0.0, 4.61438686803972), _UNIT),
}


def _to_band(x: float, r: ChannelRange) -> float:
    return x if r is None else mnorm(x, r[0], r[1], 0.0, 255.0)


def _from_band(x: float, r: ChannelRange) -> float:
    return x if r is None else mnorm(x, 0.0, 255.0, r[0], r[1])


def make_normalized(pair: ColorspacePair,
                    ranges: Tuple[ChannelRange, ChannelRange, ChannelRange]) -> ColorspacePair:
    """Wraps a raw conversion pair so its colour-space side spans ``[0, 255]``."""
    r0, r1, r2 = ranges
    to, frm = pair

    def to_norm(c: ColorLike) -> Color:
        v = to(c)
        return Color(_to_band(v.ch0, r0), _to_band(v.ch1, r1), _to_band(v.ch2, r2), v.alpha)

    def from_norm(c: ColorLike) -> Color:
        v = to_color(c)
        return frm(Color(_from_band(v.ch0, r0), _from_band(v.ch1, r1), _from_band(v.ch2, r2), v.alpha))

    return ColorspacePair(to_norm, from_norm)


# --- OSA-UCS: j and g are compressed by three cube roots before rescaling ---

_OSA_L: Final = (-13.507581921540849, 7.1379048733958435)
_OSA_J: Final = (-1.4073863219389389, 1.4228002556769352)
_OSA_G: Final = (-1.4057783957453063, 1.4175468647969818)


def _cbrt3(x: float) -> float:
    return cbrt(cbrt(cbrt(x)))


def _cube3(x: float) -> float:
    x = x * x * x
    x = x * x * x
    return x * x * x


def to_OSA_norm(c: ColorLike) -> Color:
    v = to_OSA(c)
    return Color(mnorm(v.ch0, *_OSA_L, 0.0, 255.0),
                 mnorm(_cbrt3(v.ch1), *_OSA_J, 0.0, 255.0),
                 mnorm(_cbrt3(v.ch2), *_OSA_G, 0.0, 255.0),
                 v.alpha)


def from_OSA_norm(c: ColorLike) -> Color:
    v = to_color(c)
    return from_OSA(Color(mnorm(v.ch0, 0.0, 255.0, *_OSA_L),
                          _cube3(mnorm(v.ch1, 0.0, 255.0, *_OSA_J)),
                          _cube3(mnorm(v.ch2, 0.0, 255.0, *_OSA_G)),
                          v.alpha))


def _build_normalized() -> Dict[str, ColorspacePair]:
    table: Dict[str, ColorspacePair] = {}
    for name, pair in COLORSPACES.items():
        if name in NORMALIZATION_RANGES:
            table[name] = make_normalized(pair, NORMALIZATION_RANGES[name])
        else:
            # Already in the [0, 255] band (or a one-way projection).
            table[name] = pair
    # XYZ1 differs from XYZ only by a factor of 100, which the band absorbs.
    table["XYZ1"] = table["XYZ"]
    table["OSA"] = ColorspacePair(to_OSA_norm, from_OSA_norm)
    return table


COLORSPACES_NORMALIZED: Final[Dict[str, ColorspacePair]] = _build_normalized()


# =============================================================================
# 3. LOOKUP
# =============================================================================

def get_colorspace(name: str, normalized: bool = False) -> ColorspacePair:
    """
    Looks up the conversion pair of a colour space.

    Args:
        name: A :data:`ColorspaceName`, e.g. ``"LAB"`` or ``"Okhsl"``.
        normalized: Return the ``[0, 255]`` band variant.

    Raises:
        ColorspaceNotFoundError: The name is not registered.
    """
    table = COLORSPACES_NORMALIZED if normalized else COLORSPACES
    try:
        return table[name]
    except KeyError:
        raise ColorspaceNotFoundError(
            f"Unknown colour space '{name}'. Available: {colorspaces_list()}"
        ) from None


def colorspaces_list() -> List[str]:
    """Sorted names of all registered colour spaces."""
    return sorted(COLORSPACES)


def make_LCH(name: str) -> ColorspacePair:
    """Polar ``(luma, chroma, hue)`` conversion pair on top of any luma-based space."""
    to, frm = get_colorspace(name)
    return ColorspacePair(lambda c: to_luma_color_hue(c, to),
                          lambda c: from_luma_color_hue(c, frm))


def color_converter(name: str, *scales: float) -> Converter:
    """
    Reads colours given in an arbitrary channel scale of a normalized space.

    With no scale the normalized ``from_`` function is returned as is.  One
    scale applies to all four channels, three scales to the colour channels
    only (alpha keeps ``[0, 255]``) and four scales set every channel.  Input
    is rescaled to ``[0, 255]`` and clamped before conversion.
    """
    frm = get_colorspace(name, normalized=True).from_
    if not scales:
        return frm
    if len(scales) == 1:
        s = (scales[0],) * 4
    elif len(scales) == 3:
        s = (scales[0], scales[1], scales[2], 255.0)
    elif len(scales) == 4:
        s = tuple(scales)
    else:
        raise TypeError(f"color_converter takes 0, 1, 3 or 4 scales, got {len(scales)}")

    def convert(c: ColorLike) -> Color:
        v = to_color(c)
        return frm(Color(*(min(max(255.0 * x / k, 0.0), 255.0) for x, k in zip(v, s))))

    return convert


