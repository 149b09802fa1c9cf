# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

CIE and Perceptual Colour Spaces
================================
Conversions that pass through CIE 1931 XYZ (sRGB primaries, D65):

- XYZ (``Y`` in ``[0, 100]``) and XYZ1 (``Y`` in ``[0, 1]``), chromatic
  adaptation between white points.
- CIE 1960 UCS, CIE 1964 U*V*W*, Yxy, LMS (von Kries cone space).
- CIELAB, CIELUV, Hunter Lab and their polar forms LCH / LCHuv.
- IPT, IgPgTg, JzAzBz / JzCzhz, OSA-UCS and the DIN99 family.

The ``XYZ_to_X`` / ``X_to_XYZ`` pairs accept an explicit reference white
(:class:`~tincture_whitepoints.WhitePoint` or a name from
:data:`~tincture_whitepoints.WHITEPOINTS`).  The ``to_X`` / ``from_X`` pairs
start from sRGB and default to CIE 2° D65.

Math Notes:
    - LAB uses the exact rational CIE constants ``eps = 216/24389`` and
      ``kappa = 24389/27``.
    - OSA-UCS has no closed-form inverse; :func:`from_OSA` runs the Newton
      iteration of :func:`tincture_kernels.osa_to_xyz` (at most 20 steps).
"""

import math
from typing import Callable, Dict, Final, NamedTuple, Tuple, Union

import numpy as np

from tincture_core import Color, cbrt, fdiv, fsqrt, linear_to_srgb, spow, srgb_to_linear
from tincture_colorspaces import from_luma_color_hue, to_luma_color_hue
from tincture_kernels import (
    din99_to_lab,
    jab_to_xyz,
    lab_to_din99,
    osa_to_xyz,
    xyz_to_jab,
    xyz_to_osa,
)
from tincture_representation import ColorLike, to_color
from tincture_whitepoints import (
    ADAPTATION_METHODS,
    CIE_2_D65,
    WhitePoint,
    chromatic_adaptation_matrix,
    get_whitepoint,
)

__all__ = [
    # --- XYZ ---
    "XYZ_to_XYZ1", "XYZ1_to_XYZ",
    "to_XYZ", "from_XYZ",
    "to_XYZ1", "from_XYZ1",
    "make_XYZ_to_XYZ",

    # --- CIE 1960 / 1964 / chromaticity ---
    "XYZ_to_UCS", "UCS_to_XYZ", "to_UCS", "from_UCS",
    "XYZ_to_Yxy", "Yxy_to_XYZ", "to_Yxy", "from_Yxy",
    "XYZ_to_UVW", "UVW_to_XYZ", "to_UVW", "from_UVW",
    "make_XYZ_to_LMS", "make_LMS_to_XYZ", "to_LMS", "from_LMS",

    # --- Lab family ---
    "XYZ_to_LAB", "LAB_to_XYZ", "to_LAB", "from_LAB",
    "XYZ_to_LUV", "LUV_to_XYZ", "to_LUV", "from_LUV",
    "XYZ_to_HunterLAB", "HunterLAB_to_XYZ", "to_HunterLAB", "from_HunterLAB",
    "XYZ_to_LCH", "LCH_to_XYZ", "to_LCH", "from_LCH",
    "XYZ_to_LCHuv", "LCHuv_to_XYZ", "to_LCHuv", "from_LCHuv",

    # --- Other perceptual models ---
    "to_IPT", "from_IPT",
    "to_IgPgTg", "from_IgPgTg",
    "to_JAB", "from_JAB",
    "to_JCH", "from_JCH",
    "to_OSA", "from_OSA",

    # --- DIN99 ---
    "DIN99Params",
    "DIN99_VARIANTS",
    "make_to_DIN99", "make_from_DIN99",
    "to_DIN99", "from_DIN99",
    "to_DIN99b", "from_DIN99b",
    "to_DIN99o", "from_DIN99o",
    "to_DIN99c", "from_DIN99c",
    "to_DIN99d", "from_DIN99d",
]

WhitePointLike = Union[WhitePoint, str]
Converter = Callable[[ColorLike], Color]

LAB_EPSILON: Final[float] = 216.0 / 24389.0
LAB_KAPPA: Final[float] = 24389.0 / 27.0


def _wp(whitepoint: WhitePointLike) -> WhitePoint:
    return get_whitepoint(whitepoint) if isinstance(whitepoint, str) else whitepoint


# =============================================================================
# 1. XYZ
# =============================================================================

def XYZ_to_XYZ1(c: ColorLike) -> Color:
    v = to_color(c)
    return Color(0.01 * v.ch0, 0.01 * v.ch1, 0.01 * v.ch2, v.alpha)


def XYZ1_to_XYZ(c: ColorLike) -> Color:
    v = to_color(c)
    return Color(100.0 * v.ch0, 100.0 * v.ch1, 100.0 * v.ch2, v.alpha)


def to_XYZ1(c: ColorLike) -> Color:
    """sRGB -> XYZ (CIE 2° D65) with ``Y`` in ``[0, 1]``."""
    v = to_color(c)
    r = srgb_to_linear(v.ch0 / 255.0)
    g = srgb_to_linear(v.ch1 / 255.0)
    b = srgb_to_linear(v.ch2 / 255.0)
    return Color(r * 0.4124564390896921 + g * 0.357576077643909 + b * 0.18043748326639894,
                 r * 0.21267285140562248 + g * 0.715152155287818 + b * 0.07217499330655958,
                 r * 0.019333895582329317 + g * 0.119192025881303 + b * 0.9503040785363677,
                 v.alpha)


def to_XYZ(c: ColorLike) -> Color:
    """sRGB -> XYZ (CIE 2° D65).  X in ``[0, 95.047]``, Y in ``[0, 100]``, Z in ``[0, 108.883]``."""
    return XYZ1_to_XYZ(to_XYZ1(c))


def from_XYZ1(c: ColorLike) -> Color:
    v = to_color(c)
    x, y, z = v.ch0, v.ch1, v.ch2
    r = x * 3.2404541621141054 - y * 1.5371385127977166 - z * 0.4985314095560162
    g = -x * 0.9692660305051868 + y * 1.8760108454466942 + z * 0.04155601753034984
    b = x * 0.05564343095911469 - y * 0.20402591351675387 + z * 1.0572251882231791
    return Color(255.0 * linear_to_srgb(r), 255.0 * linear_to_srgb(g),
                 255.0 * linear_to_srgb(b), v.alpha)


def from_XYZ(c: ColorLike) -> Color:
    return from_XYZ1(XYZ_to_XYZ1(c))


def make_XYZ_to_XYZ(source: WhitePointLike, destination: WhitePointLike,
                    method: str = "bradford") -> Converter:
    """
    Builds an XYZ -> XYZ converter between two reference whites.

    Args:
        source: White point the input is relative to.
        destination: White point the output should be relative to.
        method: Any key of :data:`~tincture_whitepoints.ADAPTATION_METHODS`.

    Returns:
        A function mapping XYZ colours; alpha passes through.
    """
    M = chromatic_adaptation_matrix(method, source, destination)

    def convert(c: ColorLike) -> Color:
        v = to_color(c)
        x, y, z = M @ np.array([v.ch0, v.ch1, v.ch2], dtype=np.float64)
        return Color(float(x), float(y), float(z), v.alpha)

    return convert


# =============================================================================
# 2. UCS, Yxy, UVW, LMS
# =============================================================================

def XYZ_to_UCS(c: ColorLike) -> Color:
    """XYZ -> CIE 1960 UCS."""
    v = XYZ_to_XYZ1(c)
    return Color((2.0 / 3.0) * v.ch0, v.ch1, -0.5 * (v.ch0 - 3.0 * v.ch1 - v.ch2), v.alpha)


def UCS_to_XYZ(c: ColorLike) -> Color:
    v = to_color(c)
    return XYZ1_to_XYZ(Color(1.5 * v.ch0, v.ch1,
                             1.5 * v.ch0 - 3.0 * v.ch1 + 2.0 * v.ch2, v.alpha))


def to_UCS(c: ColorLike) -> Color:
    """sRGB -> UCS.  U in ``[0, 0.63]``, V in ``[0, 1]``, W in ``[0, 1.57]``."""
    return XYZ_to_UCS(to_XYZ(c))


def from_UCS(c: ColorLike) -> Color:
    return from_XYZ(UCS_to_XYZ(c))


def XYZ_to_Yxy(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    """XYZ -> Yxy.  Black maps to the chromaticity of ``whitepoint``."""
    v = to_color(c)
    d = v.ch0 + v.ch1 + v.ch2
    if d == 0.0:
        wp = _wp(whitepoint)
        return Color(0.0, wp.x, wp.y, v.alpha)
    return Color(v.ch1, v.ch0 / d, v.ch1 / d, v.alpha)


def Yxy_to_XYZ(c: ColorLike) -> Color:
    v = to_color(c)
    if v.ch0 == 0.0:
        return Color(0.0, 0.0, 0.0, v.alpha)
    Yy = fdiv(v.ch0, v.ch2)
    return Color(v.ch1 * Yy, v.ch0, (1.0 - v.ch1 - v.ch2) * Yy, v.alpha)


def to_Yxy(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    """sRGB -> Yxy.  Y in ``[0, 100]``, x in ``[0.15, 0.64]``, y in ``[0.06, 0.60]``."""
    return XYZ_to_Yxy(to_XYZ(c), whitepoint)


def from_Yxy(c: ColorLike) -> Color:
    return from_XYZ(Yxy_to_XYZ(c))


def _xy_to_uv(x: float, y: float) -> Tuple[float, float]:
    d = fdiv(1.0, 12.0 * y - 2.0 * x + 3.0)
    return 4.0 * x * d, 6.0 * y * d


def _uv_to_xy(u: float, v: float) -> Tuple[float, float]:
    d = fdiv(1.0, 2.0 * u - 8.0 * v + 4.0)
    return 3.0 * u * d, 2.0 * v * d


def XYZ_to_UVW(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    """XYZ -> CIE 1964 U*V*W*."""
    wp = _wp(whitepoint)
    yxy = XYZ_to_Yxy(c, wp)
    u0, v0 = _xy_to_uv(wp.x, wp.y)
    u, v = _xy_to_uv(yxy.ch1, yxy.ch2)
    W = 25.0 * cbrt(yxy.ch0) - 17.0
    W13 = 13.0 * W
    return Color(W13 * (u - u0), W13 * (v - v0), W, yxy.alpha)


def UVW_to_XYZ(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    wp = _wp(whitepoint)
    v = to_color(c)
    u0, v0 = _xy_to_uv(wp.x, wp.y)
    Y = ((17.0 + v.ch2) / 25.0) ** 3
    W13 = fdiv(1.0, 13.0 * v.ch2)
    x, y = _uv_to_xy(v.ch0 * W13 + u0, v.ch1 * W13 + v0)
    return Yxy_to_XYZ(Color(Y, x, y, v.alpha))


def to_UVW(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    """sRGB -> UVW.  U in ``[-82.2, 171.8]``, V in ``[-87.2, 70.8]``, W in ``[-17, 99]``."""
    return XYZ_to_UVW(to_XYZ(c), whitepoint)


def from_UVW(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    return from_XYZ(UVW_to_XYZ(c, whitepoint))


def make_XYZ_to_LMS(method: str = "von-kries") -> Converter:
    """XYZ -> LMS converter using the cone matrix of an adaptation ``method``."""
    M = ADAPTATION_METHODS[method]

    def convert(c: ColorLike) -> Color:
        v = to_color(c)
        l, m, s = M @ np.array([v.ch0, v.ch1, v.ch2], dtype=np.float64)
        return Color(float(l), float(m), float(s), v.alpha)

    return convert


def make_LMS_to_XYZ(method: str = "von-kries") -> Converter:
    M_inv = np.linalg.inv(ADAPTATION_METHODS[method])

    def convert(c: ColorLike) -> Color:
        v = to_color(c)
        x, y, z = M_inv @ np.array([v.ch0, v.ch1, v.ch2], dtype=np.float64)
        return Color(float(x), float(y), float(z), v.alpha)

    return convert


def to_LMS(c: ColorLike) -> Color:
    """sRGB -> LMS (von Kries, D65).  Channels in ``[0, 100]``."""
    v = to_XYZ(c)
    return Color(0.40024 * v.ch0 + 0.7076 * v.ch1 - 0.08081 * v.ch2,
                 -0.2263 * v.ch0 + 1.16532 * v.ch1 + 0.0457 * v.ch2,
                 0.91822 * v.ch2,
                 v.alpha)


def from_LMS(c: ColorLike) -> Color:
    v = to_color(c)
    return from_XYZ(Color(1.8599363874558397 * v.ch0 - 1.1293816185800916 * v.ch1
                          + 0.2198974095961933 * v.ch2,
                          0.3611914362417676 * v.ch0 + 0.6388124632850422 * v.ch1
                          - 0.0000063705968386499 * v.ch2,
                          1.0890636230968613 * v.ch2,
                          v.alpha))


# =============================================================================
# 3. LAB FAMILY
# =============================================================================

def _lab_f(v: float) -> float:
    if v > LAB_EPSILON:
        return cbrt(v)
    return (16.0 + v * LAB_KAPPA) / 116.0


def _lab_f_inv(v: float) -> float:
    v3 = v * v * v
    if v3 > LAB_EPSILON:
        return v3
    return (116.0 * v - 16.0) / LAB_KAPPA


def XYZ_to_LAB(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    """XYZ (``Y`` in ``[0, 100]``) -> CIELAB relative to ``whitepoint``."""
    wp = _wp(whitepoint)
    v = XYZ_to_XYZ1(c)
    x = _lab_f(v.ch0 / wp.X)
    y = _lab_f(v.ch1)
    z = _lab_f(v.ch2 / wp.Z)
    return Color(116.0 * y - 16.0, 500.0 * (x - y), 200.0 * (y - z), v.alpha)


def LAB_to_XYZ(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    wp = _wp(whitepoint)
    v = to_color(c)
    y = (v.ch0 + 16.0) / 116.0
    x = wp.X * _lab_f_inv(y + v.ch1 / 500.0)
    z = wp.Z * _lab_f_inv(y - v.ch2 / 200.0)
    return XYZ1_to_XYZ(Color(x, _lab_f_inv(y), z, v.alpha))


def to_LAB(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    """sRGB -> CIELAB.  L in ``[0, 100]``, a in ``[-86.2, 98.3]``, b in ``[-107.9, 94.5]``."""
    return XYZ_to_LAB(to_XYZ(c), whitepoint)


def from_LAB(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    return from_XYZ(LAB_to_XYZ(c, whitepoint))


def _ref_uv(wp: WhitePoint) -> Tuple[float, float]:
    f = 1.0 / (wp.X + 15.0 + 3.0 * wp.Z)
    return 4.0 * wp.X * f, 9.0 * f


def XYZ_to_LUV(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    """XYZ -> CIELUV relative to ``whitepoint``."""
    v = to_color(c)
    uv_factor = v.ch0 + 15.0 * v.ch1 + 3.0 * v.ch2
    if uv_factor == 0.0:
        return Color(0.0, 0.0, 0.0, v.alpha)
    ref_u, ref_v = _ref_uv(_wp(whitepoint))
    var_u = 4.0 * v.ch0 / uv_factor
    var_v = 9.0 * v.ch1 / uv_factor
    L = 116.0 * _lab_f(v.ch1 / 100.0) - 16.0
    return Color(L, 13.0 * L * (var_u - ref_u), 13.0 * L * (var_v - ref_v), v.alpha)


def LUV_to_XYZ(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    v = to_color(c)
    if v.ch0 == 0.0:
        return Color(0.0, 0.0, 0.0, v.alpha)
    ref_u, ref_v = _ref_uv(_wp(whitepoint))
    var_y = _lab_f_inv((v.ch0 + 16.0) / 116.0)
    var_u = ref_u + v.ch1 / (13.0 * v.ch0)
    var_v = ref_v + v.ch2 / (13.0 * v.ch0)
    Y = 100.0 * var_y
    X = fdiv(-9.0 * Y * var_u, (var_u - 4.0) * var_v - var_u * var_v)
    Z = fdiv(9.0 * Y - 15.0 * var_v * Y - var_v * X, 3.0 * var_v)
    return Color(X, Y, Z, v.alpha)


def to_LUV(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    """sRGB -> CIELUV.  L in ``[0, 100]``, u in ``[-83.1, 175.1]``, v in ``[-134.1, 107.4]``."""
    return XYZ_to_LUV(to_XYZ(c), whitepoint)


def from_LUV(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    return from_XYZ(LUV_to_XYZ(c, whitepoint))


_HUNTER_KA: Final[float] = 17500.0 / 198.04
_HUNTER_KB: Final[float] = 7000.0 / 218.11


def XYZ_to_HunterLAB(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    wp = _wp(whitepoint)
    v = XYZ_to_XYZ1(c)
    if v.ch1 == 0.0:
        return Color(0.0, 0.0, 0.0, v.alpha)
    X = v.ch0 / wp.X
    Z = v.ch2 / wp.Z
    sqrtY = fsqrt(v.ch1)
    ka = _HUNTER_KA * (wp.X + 1.0)
    kb = _HUNTER_KB * (wp.Z + 1.0)
    return Color(100.0 * sqrtY, ka * (X - v.ch1) / sqrtY, kb * (v.ch1 - Z) / sqrtY, v.alpha)


def HunterLAB_to_XYZ(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    wp = _wp(whitepoint)
    v = to_color(c)
    if v.ch0 == 0.0:
        return Color(0.0, 0.0, 0.0, v.alpha)
    Y = (v.ch0 / 100.0) ** 2
    sqrtY = math.sqrt(Y)
    ka = _HUNTER_KA * (wp.X + 1.0)
    kb = _HUNTER_KB * (wp.Z + 1.0)
    X = wp.X * (v.ch1 / ka * sqrtY + Y)
    Z = -wp.Z * (v.ch2 / kb * sqrtY - Y)
    return XYZ1_to_XYZ(Color(X, Y, Z, v.alpha))


def to_HunterLAB(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    """sRGB -> Hunter Lab.  L in ``[0, 100]``, a in ``[-69.1, 109.5]``, b in ``[-199.8, 55.7]``."""
    return XYZ_to_HunterLAB(to_XYZ(c), whitepoint)


def from_HunterLAB(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    return from_XYZ(HunterLAB_to_XYZ(c, whitepoint))


def XYZ_to_LCH(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    return to_luma_color_hue(XYZ_to_LAB(c, whitepoint))


def LCH_to_XYZ(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    return LAB_to_XYZ(from_luma_color_hue(c), whitepoint)


def to_LCH(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    """sRGB -> LCH(ab).  L in ``[0, 100]``, C in ``[0, 133.8]``, H in ``[0, 360)``."""
    return to_luma_color_hue(to_LAB(c, whitepoint))


def from_LCH(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    return from_LAB(from_luma_color_hue(c), whitepoint)


def XYZ_to_LCHuv(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    return to_luma_color_hue(XYZ_to_LUV(c, whitepoint))


def LCHuv_to_XYZ(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    return LUV_to_XYZ(from_luma_color_hue(c), whitepoint)


def to_LCHuv(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    """sRGB -> LCH(uv).  L in ``[0, 100]``, C in ``[0, 179.0]``, H in ``[0, 360)``."""
    return to_luma_color_hue(to_LUV(c, whitepoint))


def from_LCHuv(c: ColorLike, whitepoint: WhitePointLike = CIE_2_D65) -> Color:
    return from_LUV(from_luma_color_hue(c), whitepoint)


# =============================================================================
# 4. IPT, IgPgTg, JzAzBz, OSA-UCS
# =============================================================================

def to_IPT(c: ColorLike) -> Color:
    """sRGB -> IPT (Ebner & Fairchild).  I in ``[0, 1]``, P in ``[-0.45, 0.66]``, T in ``[-0.75, 0.65]``."""
    v = to_XYZ1(c)
    l = spow(0.4002 * v.ch0 + 0.7075 * v.ch1 - 0.0807 * v.ch2, 0.43)
    m = spow(-0.228 * v.ch0 + 1.15 * v.ch1 + 0.0612 * v.ch2, 0.43)
    s = spow(0.9184 * v.ch2, 0.43)
    return Color(0.4 * l + 0.4 * m + 0.2 * s,
                 4.455 * l - 4.851 * m + 0.396 * s,
                 0.8056 * l + 0.3572 * m - 1.1628 * s,
                 v.alpha)


def from_IPT(c: ColorLike) -> Color:
    v = to_color(c)
    e = 1.0 / 0.43
    l = spow(v.ch0 + 0.0975689305146139 * v.ch1 + 0.2052264331645916 * v.ch2, e)
    m = spow(v.ch0 - 0.1138764854731471 * v.ch1 + 0.13321715836999806 * v.ch2, e)
    s = spow(v.ch0 + 0.0326151099170664 * v.ch1 - 0.6768871830691793 * v.ch2, e)
    return from_XYZ1(Color(1.8502429449432056 * l - 1.1383016378672328 * m + 0.23843495850870136 * s,
                           0.3668307751713486 * l + 0.6438845448402355 * m - 0.010673443584379992 * s,
                           1.088850174216028 * s,
                           v.alpha))


_IGPGTG_SCALE: Final = (18.36, 21.46, 19435.0)


def to_IgPgTg(c: ColorLike) -> Color:
    """sRGB -> IgPgTg (Bernal et al.).  Ig in ``[0, 0.97]``, Pg in ``[-0.35, 0.39]``, Tg in ``[-0.41, 0.44]``."""
    v = to_XYZ1(c)
    x, y, z = v.ch0, v.ch1, v.ch2
    l = spow((2.968 * x + 2.741 * y - 0.649 * z) / _IGPGTG_SCALE[0], 0.427)
    m = spow((1.237 * x + 5.969 * y - 0.173 * z) / _IGPGTG_SCALE[1], 0.427)
    s = spow((-0.318 * x + 0.387 * y + 2.311 * z) / _IGPGTG_SCALE[2], 0.427)
    return Color(0.117 * l + 1.464 * m + 0.13 * s,
                 8.285 * l - 8.361 * m + 21.4 * s,
                 -1.208 * l + 2.412 * m - 36.53 * s,
                 v.alpha)


def from_IgPgTg(c: ColorLike) -> Color:
    v = to_color(c)
    e = 1.0 / 0.427
    l = _IGPGTG_SCALE[0] * spow(0.5818464618992453 * v.ch0 + 0.12331854793907805 * v.ch1
                                + 0.07431308420320755 * v.ch2, e)
    m = _IGPGTG_SCALE[1] * spow(0.6345481937914152 * v.ch0 - 0.009437923746683726 * v.ch1
                                - 0.0032707446752298776 * v.ch2, e)
    s = _IGPGTG_SCALE[2] * spow(0.022656986516578295 * v.ch0 - 0.004701151874826374 * v.ch1
                                - 0.030048158824914566 * v.ch2, e)
    return from_XYZ1(Color(0.4343486855574634 * l - 0.2063623701142843 * m + 0.1065303361735277 * s,
                           -0.08785463778363382 * l + 0.2084634664799235 * m - 0.009066845616854849 * s,
                           0.07447971736457794 * l - 0.06330532030466153 * m + 0.4488903142176134 * s,
                           v.alpha))


def to_JAB(c: ColorLike) -> Color:
    """sRGB -> JzAzBz (Safdar et al. 2017), reference white at 100."""
    v = to_XYZ(c)
    J, az, bz = xyz_to_jab(v.ch0, v.ch1, v.ch2)
    return Color(J, az, bz, v.alpha)


def from_JAB(c: ColorLike) -> Color:
    v = to_color(c)
    X, Y, Z = jab_to_xyz(float(v.ch0), float(v.ch1), float(v.ch2))
    return from_XYZ(Color(X, Y, Z, v.alpha))


def to_JCH(c: ColorLike) -> Color:
    return to_luma_color_hue(c, to_JAB)


def from_JCH(c: ColorLike) -> Color:
    return from_luma_color_hue(c, from_JAB)


def to_OSA(c: ColorLike) -> Color:
    """
    sRGB -> OSA-UCS ``(L, j, g)``.

    L spans roughly ``[-13.5, 7.14]``; j and g mostly stay within ``[-20, 14]``
    but some saturated dark colours (e.g. ``(18, 7, 4)``) produce extreme values.
    """
    v = to_XYZ(c)
    L, j, g = xyz_to_osa(v.ch0, v.ch1, v.ch2)
    return Color(L, j, g, v.alpha)


def from_OSA(c: ColorLike) -> Color:
    v = to_color(c)
    X, Y, Z, _ = osa_to_xyz(float(v.ch0), float(v.ch1), float(v.ch2))
    return from_XYZ(Color(X, Y, Z, v.alpha))


# =============================================================================
# 5. DIN99 FAMILY
# =============================================================================

class DIN99Params(NamedTuple):
    """Coefficient record of one DIN99 variant, applied on top of CIELAB."""
    l99mult: float
    lmult: float
    cosc: float
    sinc: float
    fmult: float
    c99mult: float
    gmult: float
    hshift: float
    gdiv: float


_R16, _R26, _R50 = math.radians(16.0), math.radians(26.0), math.radians(50.0)

DIN99_VARIANTS: Final[Dict[str, DIN99Params]] = {
    "DIN99": DIN99Params(105.509, 0.0158, math.cos(_R16), math.sin(_R16),
                         0.7, 1.0, 9.0 / 200.0, 0.0, 9.0 / 200.0),
    "DIN99b": DIN99Params(303.67, 0.0039, math.cos(_R26), math.sin(_R26),
                          0.83, 23.0, 0.075, _R26, 1.0),
    # No hue shift in the published DIN99o; the 26° rotation lives in cosc/sinc.
    "DIN99o": DIN99Params(303.67, 0.0039, math.cos(_R26), math.sin(_R26),
                          0.83, 1.0, 0.075, 0.0, 0.0435),
    "DIN99c": DIN99Params(317.65, 0.0037, 1.0, 0.0,
                          0.94, 23.0, 0.066, 0.0, 1.0),
    "DIN99d": DIN99Params(325.22, 0.0036, math.cos(_R50), math.sin(_R50),
                          1.14, 22.5, 0.06, _R50, 1.0),
}


def make_to_DIN99(variant: str) -> Converter:
    """Builds the sRGB -> DIN99 converter for a variant key of :data:`DIN99_VARIANTS`."""
    p = DIN99_VARIANTS[variant]

    def convert(c: ColorLike) -> Color:
        lab = to_LAB(c)
        L, a, b = lab_to_din99(lab.ch0, lab.ch1, lab.ch2, *p)
        return Color(L, a, b, lab.alpha)

    convert.__name__ = f"to_{variant}"
    return convert


def make_from_DIN99(variant: str) -> Converter:
    p = DIN99_VARIANTS[variant]

    def convert(c: ColorLike) -> Color:
        v = to_color(c)
        L, a, b = din99_to_lab(float(v.ch0), float(v.ch1), float(v.ch2), *p)
        return from_LAB(Color(L, a, b, v.alpha))

    convert.__name__ = f"from_{variant}"
    return convert


to_DIN99 = make_to_DIN99("DIN99")
from_DIN99 = make_from_DIN99("DIN99")
to_DIN99b = make_to_DIN99("DIN99b")
from_DIN99b = make_from_DIN99("DIN99b")
to_DIN99o = make_to_DIN99("DIN99o")
from_DIN99o = make_from_DIN99("DIN99o")
to_DIN99c = make_to_DIN99("DIN99c")
from_DIN99c = make_from_DIN99("DIN99c")
to_DIN99d = make_to_DIN99("DIN99d")
from_DIN99d = make_from_DIN99("DIN99d")
