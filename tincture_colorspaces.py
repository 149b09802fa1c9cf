# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Device, Hue-Based and Oklab-Family Colour Spaces
================================================
Forward (``to_X``) and inverse (``from_X``) conversions between the canonical
RGB reading of a :class:`~tincture_core.Color` and the colour spaces that do
not go through CIE XYZ:

1. Device / linear-matrix models: CMY, OHTA, YPbPr, YDbDr, YCbCr (JPEG,
   BT.601), YUV, YIQ, YCgCo, linear RGB and grayscale.
2. Hexagonal hue models built on one hue/chroma primitive: HSI, HSV (HSB),
   HSL, HWB, plus GLHS and the Sarifuddin-Missaoui HCL.
3. Empirical models: RYB (paint wheel), Cubehelix (D3) and XYB.
4. Oklab and its derivatives Oklch, Okhsv, Okhwb, Okhsl (the gamut search
   runs in the Numba kernels of :mod:`tincture_kernels`).

Every function accepts anything :func:`~tincture_representation.to_color`
accepts, operates on channels 0-2 and passes alpha through untouched.
Outputs are never clamped; out-of-gamut input is extrapolated.
"""

import math
from typing import Callable, Final, Optional, Tuple

from tincture_core import (
    Color,
    RAD2DEG,
    DEG2RAD,
    TWO_PI,
    fdiv,
    fsqrt,
    linear_to_srgb,
    srgb_to_linear,
    wrap,
    wrap_hue,
)
from tincture_kernels import (
    linear_to_oklab,
    oklab_to_linear,
    oklab_to_okhsl,
    oklab_to_okhsv,
    okhsl_to_oklab,
    okhsv_to_oklab,
)
from tincture_representation import ColorLike, luma, to_color

__all__ = [
    # --- Polar Projection ---
    "to_luma_color_hue",
    "from_luma_color_hue",
    "hue",

    # --- Device Models ---
    "to_CMY", "from_CMY",
    "to_OHTA", "from_OHTA",
    "to_sRGB", "from_sRGB",
    "to_linearRGB", "from_linearRGB",
    "RGB_to_RGB1", "RGB1_to_RGB",
    "to_YPbPr", "from_YPbPr",
    "to_YDbDr", "from_YDbDr",
    "to_YCbCr", "from_YCbCr",
    "to_YUV", "from_YUV",
    "to_YIQ", "from_YIQ",
    "to_YCgCo", "from_YCgCo",
    "to_Gray", "from_Gray",

    # --- Hue Models ---
    "to_HSI", "from_HSI",
    "to_HSV", "from_HSV",
    "to_HSB", "from_HSB",
    "to_HSL", "from_HSL",
    "to_HWB", "from_HWB",
    "to_HCL", "from_HCL",
    "to_GLHS", "from_GLHS",

    # --- Empirical Models ---
    "to_RYB", "from_RYB",
    "to_Cubehelix", "from_Cubehelix",
    "to_XYB", "from_XYB",

    # --- Oklab Family ---
    "to_Oklab", "from_Oklab",
    "to_Oklch", "from_Oklch",
    "to_Okhsv", "from_Okhsv",
    "to_Okhwb", "from_Okhwb",
    "to_Okhsl", "from_Okhsl",
]

Converter = Callable[[ColorLike], Color]

_INV255: Final[float] = 1.0 / 255.0


# =============================================================================
# 1. POLAR PROJECTION
# =============================================================================

def to_luma_color_hue(c: ColorLike, to: Optional[Converter] = None) -> Color:
    """
    Polar form of a ``(luma, a, b)`` triple: ``(luma, chroma, hue)``.

    Hue is ``atan2(b, a)`` in degrees, wrapped into ``[0, 360)``.  When ``to``
    is given the colour is first converted with it, so
    ``to_luma_color_hue(c, to_LAB)`` is LCH.
    """
    v = to(c) if to is not None else to_color(c)
    H = math.atan2(v.ch2, v.ch1)
    if H < 0.0:
        H += TWO_PI
    return Color(v.ch0, math.hypot(v.ch1, v.ch2), H * RAD2DEG, v.alpha)


def from_luma_color_hue(c: ColorLike, frm: Optional[Converter] = None) -> Color:
    """Inverse of :func:`to_luma_color_hue`; ``frm`` converts the result onwards."""
    v = to_color(c)
    h = v.ch2 * DEG2RAD
    out = Color(v.ch0, v.ch1 * math.cos(h), v.ch1 * math.sin(h), v.alpha)
    return frm(out) if frm is not None else out


# =============================================================================
# 2. DEVICE MODELS
# =============================================================================

def to_CMY(c: ColorLike) -> Color:
    v = to_color(c)
    return Color(255.0 - v.ch0, 255.0 - v.ch1, 255.0 - v.ch2, v.alpha)


from_CMY = to_CMY


def to_OHTA(c: ColorLike) -> Color:
    """RGB -> OHTA.  I1 in ``[0, 255]``, I2 and I3 in ``[-127.5, 127.5]``."""
    v = to_color(c)
    i1 = (v.ch0 + v.ch1 + v.ch2) / 3.0
    i2 = 0.5 * (v.ch0 - v.ch2)
    i3 = 0.25 * (2.0 * v.ch1 - v.ch0 - v.ch2)
    return Color(i1, i2, i3, v.alpha)


def from_OHTA(c: ColorLike) -> Color:
    v = to_color(c)
    i1, i2, i3 = v.ch0, v.ch1, v.ch2
    return Color(i1 + i2 - (2.0 / 3.0) * i3,
                 i1 + (4.0 / 3.0) * i3,
                 i1 - i2 - (2.0 / 3.0) * i3,
                 v.alpha)


def to_sRGB(c: ColorLike) -> Color:
    """Linear RGB -> sRGB, both on the ``[0, 255]`` scale."""
    v = to_color(c)
    return Color(255.0 * linear_to_srgb(v.ch0 * _INV255),
                 255.0 * linear_to_srgb(v.ch1 * _INV255),
                 255.0 * linear_to_srgb(v.ch2 * _INV255),
                 v.alpha)


def from_sRGB(c: ColorLike) -> Color:
    """sRGB -> linear RGB, both on the ``[0, 255]`` scale."""
    v = to_color(c)
    return Color(255.0 * srgb_to_linear(v.ch0 * _INV255),
                 255.0 * srgb_to_linear(v.ch1 * _INV255),
                 255.0 * srgb_to_linear(v.ch2 * _INV255),
                 v.alpha)


# Registered as "linearRGB": RGB -> linear RGB and back.
to_linearRGB = from_sRGB
from_linearRGB = to_sRGB


def RGB_to_RGB1(c: ColorLike) -> Color:
    v = to_color(c)
    return Color(v.ch0 * _INV255, v.ch1 * _INV255, v.ch2 * _INV255, v.alpha)


def RGB1_to_RGB(c: ColorLike) -> Color:
    v = to_color(c)
    return Color(v.ch0 * 255.0, v.ch1 * 255.0, v.ch2 * 255.0, v.alpha)


def to_YPbPr(c: ColorLike) -> Color:
    """RGB -> YPbPr (BT.709 luma).  Pb in ``[-236.6, 236.6]``, Pr in ``[-200.8, 200.8]``."""
    v = to_color(c)
    y = 0.2126 * v.ch0 + 0.7152 * v.ch1 + 0.0722 * v.ch2
    return Color(y, v.ch2 - y, v.ch0 - y, v.alpha)


def from_YPbPr(c: ColorLike) -> Color:
    v = to_color(c)
    b = v.ch0 + v.ch1
    r = v.ch0 + v.ch2
    g = (v.ch0 - 0.2126 * r - 0.0722 * b) / 0.7152
    return Color(r, g, b, v.alpha)


def to_YDbDr(c: ColorLike) -> Color:
    v = to_color(c)
    r, g, b = v.ch0, v.ch1, v.ch2
    return Color(0.299 * r + 0.587 * g + 0.114 * b,
                 -0.45 * r - 0.883 * g + 1.333 * b,
                 -1.333 * r + 1.116 * g + 0.217 * b,
                 v.alpha)


def from_YDbDr(c: ColorLike) -> Color:
    v = to_color(c)
    Y, Db, Dr = v.ch0, v.ch1, v.ch2
    return Color(Y + 9.2303716147657e-05 * Db - 0.52591263066186533 * Dr,
                 Y - 0.12913289889050927 * Db + 0.26789932820759876 * Dr,
                 Y + 0.66467905997895482 * Db - 7.9202543533108e-05 * Dr,
                 v.alpha)


def to_YCbCr(c: ColorLike) -> Color:
    """RGB -> YCbCr as used by JPEG (BT.601).  Cb and Cr in ``[-127.5, 127.5]``."""
    v = to_color(c)
    r, g, b = v.ch0, v.ch1, v.ch2
    return Color(0.298839 * r + 0.586811 * g + 0.114350 * b,
                 -0.168736 * r - 0.331264 * g + 0.5 * b,
                 0.5 * r - 0.418688 * g - 0.081312 * b,
                 v.alpha)


def from_YCbCr(c: ColorLike) -> Color:
    v = to_color(c)
    Y, Cb, Cr = v.ch0, v.ch1, v.ch2
    return Color(0.99999999999914679361 * Y - 1.2188941887145875e-06 * Cb + 1.4019995886561440468 * Cr,
                 0.99999975910502514331 * Y - 0.34413567816504303521 * Cb - 0.71413649331646789076 * Cr,
                 1.00000124040004623180 * Y + 1.77200006607230409200 * Cb + 2.1453384174593273e-06 * Cr,
                 v.alpha)


def to_YUV(c: ColorLike) -> Color:
    v = to_color(c)
    r, g, b = v.ch0, v.ch1, v.ch2
    return Color(0.298839 * r + 0.586811 * g + 0.114350 * b,
                 -0.147 * r - 0.289 * g + 0.436 * b,
                 0.615 * r - 0.515 * g - 0.1 * b,
                 v.alpha)


def from_YUV(c: ColorLike) -> Color:
    v = to_color(c)
    Y, U, V = v.ch0, v.ch1, v.ch2
    return Color(Y - 3.945707070708279e-05 * U + 1.1398279671717170825 * V,
                 Y - 0.3946101641414141437 * U - 0.5805003156565656797 * V,
                 Y + 2.0319996843434342537 * U - 4.813762626262513e-04 * V,
                 v.alpha)


def to_YIQ(c: ColorLike) -> Color:
    v = to_color(c)
    r, g, b = v.ch0, v.ch1, v.ch2
    return Color(0.298839 * r + 0.586811 * g + 0.114350 * b,
                 0.595716 * r - 0.274453 * g - 0.321263 * b,
                 0.211456 * r - 0.522591 * g + 0.311135 * b,
                 v.alpha)


def from_YIQ(c: ColorLike) -> Color:
    v = to_color(c)
    Y, I, Q = v.ch0, v.ch1, v.ch2
    return Color(Y + 0.9562957197589482261 * I + 0.6210244164652610754 * Q,
                 Y - 0.2721220993185104464 * I - 0.6473805968256950427 * Q,
                 Y - 1.1069890167364901945 * I + 1.7046149983646481374 * Q,
                 v.alpha)


def to_YCgCo(c: ColorLike) -> Color:
    v = to_color(c)
    r, g, b = v.ch0, v.ch1, v.ch2
    return Color(0.25 * r + 0.5 * g + 0.25 * b,
                 -0.25 * r + 0.5 * g - 0.25 * b,
                 0.5 * r - 0.5 * b,
                 v.alpha)


def from_YCgCo(c: ColorLike) -> Color:
    v = to_color(c)
    Cg, Co = v.ch1, v.ch2
    tmp = v.ch0 - Cg
    return Color(Co + tmp, v.ch0 + Cg, tmp - Co, v.alpha)


def to_Gray(c: ColorLike) -> Color:
    """Projects onto the gray axis using luma.  One-way: ``from_Gray`` is the same map."""
    v = to_color(c)
    l = luma(v)
    return Color(l, l, l, v.alpha)


from_Gray = to_Gray


# =============================================================================
# 3. HEXAGONAL HUE MODELS
# =============================================================================

def _to_hc(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    """Returns ``(hue_degrees, chroma, max, min)`` of an RGB triple."""
    M = max(r, g, b)
    m = min(r, g, b)
    C = M - m
    if C == 0.0:
        h = 0.0
    elif M == r:
        h = ((g - b) / C) % 6.0
    elif M == g:
        h = 2.0 + (b - r) / C
    else:
        h = 4.0 + (r - g) / C
    return 60.0 * h, C, M, m


def _from_hcx(h: float, c: float, x: float) -> Tuple[float, float, float]:
    # h is the sector coordinate in [0, 6)
    if 0.0 <= h <= 1.0:
        return c, x, 0.0
    if 1.0 <= h <= 2.0:
        return x, c, 0.0
    if 2.0 <= h <= 3.0:
        return 0.0, c, x
    if 3.0 <= h <= 4.0:
        return 0.0, x, c
    if 4.0 <= h <= 5.0:
        return x, 0.0, c
    return c, 0.0, x


def hue(c: ColorLike) -> float:
    """Hexagonal hue in ``[0, 360)``.  See :func:`tincture_representation.hue_polar`."""
    v = to_color(c)
    return _to_hc(v.ch0, v.ch1, v.ch2)[0]


def to_HSI(c: ColorLike) -> Color:
    """RGB -> HSI.  H in ``[0, 360)``, S and I in ``[0, 1]``."""
    v = to_color(c)
    H, _, _, m = _to_hc(v.ch0, v.ch1, v.ch2)
    I = (v.ch0 + v.ch1 + v.ch2) / 3.0
    S = 0.0 if I == 0.0 else 1.0 - m / I
    return Color(H, S, I * _INV255, v.alpha)


def from_HSI(c: ColorLike) -> Color:
    v = to_color(c)
    h = wrap_hue(v.ch0) / 60.0
    z = 1.0 - abs((h % 2.0) - 1.0)
    C = 3.0 * v.ch2 * v.ch1 / (1.0 + z)
    X = C * z
    m = v.ch2 * (1.0 - v.ch1)
    r, g, b = _from_hcx(h, C, X)
    return Color(255.0 * (r + m), 255.0 * (g + m), 255.0 * (b + m), v.alpha)


def to_HSV(c: ColorLike) -> Color:
    """RGB -> HSV.  H in ``[0, 360)``, S and V in ``[0, 1]``."""
    v = to_color(c)
    H, C, V, _ = _to_hc(v.ch0, v.ch1, v.ch2)
    S = 0.0 if V == 0.0 else C / V
    return Color(H, S, V * _INV255, v.alpha)


def from_HSV(c: ColorLike) -> Color:
    v = to_color(c)
    C = v.ch1 * v.ch2
    h = wrap_hue(v.ch0) / 60.0
    X = C * (1.0 - abs((h % 2.0) - 1.0))
    m = v.ch2 - C
    r, g, b = _from_hcx(h, C, X)
    return Color(255.0 * (r + m), 255.0 * (g + m), 255.0 * (b + m), v.alpha)


to_HSB = to_HSV
from_HSB = from_HSV


def to_HSL(c: ColorLike) -> Color:
    """RGB -> HSL.  H in ``[0, 360)``, S and L in ``[0, 1]``."""
    v = to_color(c)
    H, C, M, m = _to_hc(v.ch0, v.ch1, v.ch2)
    L = 0.5 * (M + m) * _INV255
    if L == 1.0 or C == 0.0:
        S = 0.0
    else:
        S = fdiv(C, 1.0 - abs(2.0 * L - 1.0))
    return Color(H, S * _INV255, L, v.alpha)


def from_HSL(c: ColorLike) -> Color:
    v = to_color(c)
    C = v.ch1 * (1.0 - abs(2.0 * v.ch2 - 1.0))
    h = wrap_hue(v.ch0) / 60.0
    X = C * (1.0 - abs((h % 2.0) - 1.0))
    m = v.ch2 - 0.5 * C
    r, g, b = _from_hcx(h, C, X)
    return Color(255.0 * (r + m), 255.0 * (g + m), 255.0 * (b + m), v.alpha)


def to_HWB(c: ColorLike) -> Color:
    """RGB -> HWB (Smith & Lyons).  H in ``[0, 360)``, W and B in ``[0, 1]``."""
    hsv = to_HSV(c)
    return Color(hsv.ch0, (1.0 - hsv.ch1) * hsv.ch2, 1.0 - hsv.ch2, hsv.alpha)


def from_HWB(c: ColorLike) -> Color:
    v = to_color(c)
    w, b = v.ch1, v.ch2
    wb = w + b
    if wb > 1.0:
        w = w / wb
        bv = 1.0 - b / wb
    else:
        bv = 1.0 - b
    s = 1.0 if w == 0.0 else 1.0 - fdiv(w, bv)
    return from_HSV(Color(v.ch0, s, bv, v.alpha))


def to_HCL(c: ColorLike) -> Color:
    """
    RGB -> HCL of Sarifuddin and Missaoui (lambda = 3).

    H in ``[-180, 180]``, C in ``[0, 170]``, L in ``[0, 135.266]``.
    """
    v = to_color(c)
    r, g, b = v.ch0, v.ch1, v.ch2
    mn = min(r, g, b)
    mx = max(r, g, b)
    Q = math.exp(0.0 if mx == 0.0 else 0.03 * (mn / mx))
    L = 0.5 * (Q * mx + (Q - 1.0) * mn)
    gb = g - b
    rg = r - g
    C = (Q / 3.0) * (abs(rg) + abs(gb) + abs(b - r))
    H = 0.0 if gb == 0.0 else math.degrees(math.atan(fdiv(gb, rg)))
    if rg >= 0.0 and gb >= 0.0:
        H = H * (2.0 / 3.0)
    elif rg >= 0.0 and gb < 0.0:
        H = (4.0 / 3.0) * H
    elif rg < 0.0 and gb >= 0.0:
        H = (4.0 / 3.0) * H + 180.0
    elif rg < 0.0 and gb < 0.0:
        H = (2.0 / 3.0) * H - 180.0
    return Color(H, C, L, v.alpha)


def from_HCL(c: ColorLike) -> Color:
    v = to_color(c)
    H = wrap(-180.0, 180.0, v.ch0)
    C = 3.0 * v.ch1
    L = 4.0 * v.ch2
    Q = 2.0 * math.exp(0.03 * (1.0 - fdiv(C, L)))
    mn = fdiv(L - C, 2.0 * (Q - 1.0))
    mx = mn + fdiv(C, Q)
    a = v.alpha
    if 0.0 <= H <= 60.0:
        t = math.tan(math.radians(1.5 * H))
        return Color(mx, fdiv(mx * t + mn, 1.0 + t), mn, a)
    if 60.0 <= H <= 120.0:
        t = math.tan(math.radians(0.75 * (H - 180.0)))
        return Color(fdiv(mx * (1.0 + t) - mn, t), mx, mn, a)
    if 120.0 <= H <= 180.0:
        t = math.tan(math.radians(0.75 * (H - 180.0)))
        return Color(mn, mx, mx * (1.0 + t) - mn * t, a)
    if -60.0 <= H <= 0.0:
        t = math.tan(math.radians(0.75 * H))
        return Color(mx, mn, mn * (1.0 + t) - mx * t, a)
    if -120.0 <= H <= -60.0:
        t = math.tan(math.radians(0.75 * H))
        return Color(fdiv(mn * (1.0 + t) - mx, t), mn, mx, a)
    t = math.tan(math.radians(1.5 * (H + 180.0)))
    return Color(mn, fdiv(mn * t + mx, 1.0 + t), mx, a)


# --- GLHS (Levkowitz), minimizer weights ---
_W_MAX: Final[float] = 0.7
_W_MID: Final[float] = 0.1
_W_MIN: Final[float] = 0.2


def to_GLHS(c: ColorLike) -> Color:
    """
    RGB -> GLHS, the generalized lightness/hue/saturation model of Levkowitz.

    Channel order is ``(L, H, S)``: L and S in ``[0, 1]``, H in ``[0, 360)``.
    """
    v = to_color(c)
    r, g, b = v.ch0, v.ch1, v.ch2
    mx = max(r, g, b)
    mn = min(r, g, b)
    md = sorted((r, g, b))[1]
    if mx == mn:
        return Color(mx * _INV255, 0.0, 0.0, v.alpha)

    l = _W_MAX * mx + _W_MID * md + _W_MIN * mn
    rng = 1.0 / (mx - mn)
    e = (md - mn) * rng
    if r > g >= b:
        k = 0
    elif g >= r > b:
        k = 1
    elif g > b >= r:
        k = 2
    elif b >= g > r:
        k = 3
    elif b > r >= g:
        k = 4
    else:
        k = 5
    f = e if k % 2 == 0 else (mx - md) * rng
    h = 60.0 * (k + f)
    lq = 255.0 * (_W_MID * e + _W_MAX)
    s = fdiv(l - mn, l) if l <= lq else fdiv(mx - l, 255.0 - l)
    return Color(l * _INV255, h, s, v.alpha)


def from_GLHS(c: ColorLike) -> Color:
    v = to_color(c)
    l = 255.0 * v.ch0
    s = v.ch2
    if s == 0.0:
        return Color(l, l, l, v.alpha)

    h = wrap_hue(v.ch1) / 60.0
    k = int(math.floor(h))
    f = h - k
    fp = f if k % 2 == 0 else 1.0 - f
    wfw = _W_MID * fp + _W_MAX
    lq = 255.0 * wfw
    if l <= lq:
        mn = (1.0 - s) * l
        md = (fp * l + mn * ((1.0 - fp) * _W_MAX - fp * _W_MIN)) / wfw
        mx = (l - md * _W_MID - mn * _W_MIN) / _W_MAX
    else:
        mx = s * 255.0 + (1.0 - s) * l
        md = (((1.0 - fp) * l - mx * ((1.0 - fp) * _W_MAX - fp * _W_MIN))
              / ((1.0 - fp) * _W_MID + _W_MIN))
        mn = (l - mx * _W_MAX - md * _W_MID) / _W_MIN

    a = v.alpha
    if k == 1:
        return Color(md, mx, mn, a)
    if k == 2:
        return Color(mn, mx, md, a)
    if k == 3:
        return Color(mn, md, mx, a)
    if k == 4:
        return Color(md, mn, mx, a)
    if k == 5:
        return Color(mx, mn, md, a)
    return Color(mx, md, mn, a)


# =============================================================================
# 4. EMPIRICAL MODELS
# =============================================================================

def to_RYB(c: ColorLike) -> Color:
    """sRGB -> RYB paint wheel (Gossett & Chen style channel reshuffling)."""
    v = to_color(c)
    w = min(v.ch0, v.ch1, v.ch2)
    r = v.ch0 - w
    g = v.ch1 - w
    b = v.ch2 - w
    mg = max(r, g, b)
    y = min(r, g)
    r -= y
    g -= y
    if b != 0.0 and g != 0.0:
        g /= 2.0
        b /= 2.0
    y += g
    b += g
    my = max(r, y, b)
    n = mg / my if my != 0.0 else 1.0
    return Color(r * n + w, y * n + w, b * n + w, v.alpha)


def from_RYB(c: ColorLike) -> Color:
    v = to_color(c)
    w = min(v.ch0, v.ch1, v.ch2)
    r = v.ch0 - w
    y = v.ch1 - w
    b = v.ch2 - w
    my = max(r, y, b)
    g = min(y, b)
    y -= g
    b -= g
    if b != 0.0 and g != 0.0:
        b *= 2.0
        g *= 2.0
    r += y
    g += y
    mg = max(r, g, b)
    n = my / mg if mg != 0.0 else 1.0
    return Color(r * n + w, g * n + w, b * n + w, v.alpha)


# --- Cubehelix (Green 2011, D3 parametrization) ---
_CH_A: Final[float] = -0.14861
_CH_B: Final[float] = 1.78277
_CH_C: Final[float] = -0.29227
_CH_D: Final[float] = -0.90649
_CH_E: Final[float] = 1.97294
_CH_ED: Final[float] = _CH_E * _CH_D
_CH_EB: Final[float] = _CH_E * _CH_B
_CH_BC_DA: Final[float] = _CH_B * _CH_C - _CH_D * _CH_A
_CH_NORM: Final[float] = 1.0 / (_CH_BC_DA + _CH_ED - _CH_EB)


def to_Cubehelix(c: ColorLike) -> Color:
    """RGB -> Cubehelix.  H in ``[0, 360)``, S in ``[0, 4.61]``, L in ``[0, 1]``."""
    v = to_color(c)
    r, g, b = v.ch0 * _INV255, v.ch1 * _INV255, v.ch2 * _INV255
    l = _CH_NORM * (_CH_BC_DA * b + _CH_ED * r - _CH_EB * g)
    bl = b - l
    k = (_CH_E * (g - l) - _CH_C * bl) / _CH_D
    s = fdiv(fsqrt(k * k + bl * bl), _CH_E * l * (1.0 - l))
    if math.isnan(s):
        return Color(0.0, 0.0, l, v.alpha)
    h = math.atan2(k, bl) * RAD2DEG - 120.0
    return Color(h + 360.0 if h < 0.0 else h, s, l, v.alpha)


def from_Cubehelix(c: ColorLike) -> Color:
    v = to_color(c)
    h = (v.ch0 + 120.0) * DEG2RAD
    l = v.ch2
    a = v.ch1 * l * (1.0 - l)
    cosh = math.cos(h)
    sinh = math.sin(h)
    return Color(255.0 * (l + a * (_CH_A * cosh + _CH_B * sinh)),
                 255.0 * (l + a * (_CH_C * cosh + _CH_D * sinh)),
                 255.0 * (l + a * _CH_E * cosh),
                 v.alpha)


# --- XYB (JPEG XL opsin space) ---
_XYB_BIAS: Final[float] = 0.0037930732552754493
_XYB_CBRT_BIAS: Final[float] = -0.15595420054924863


def _xyb_mix(m: float) -> float:
    m = max(m, 0.0)
    return m ** (1.0 / 3.0) + _XYB_CBRT_BIAS


def to_XYB(c: ColorLike) -> Color:
    """sRGB -> XYB.  X in ``[-0.0154, 0.0281]``, Y and B in ``[0, 0.8453]``."""
    lin = from_sRGB(c)
    r, g, b = lin.ch0, lin.ch1, lin.ch2
    mr = _xyb_mix(0.001176470588235294 * r + 0.00243921568627451 * g
                  + 3.0588235294117644e-4 * b + _XYB_BIAS)
    mg = _xyb_mix(9.019607843137256e-4 * r + 0.0027137254901960788 * g
                  + 3.0588235294117644e-4 * b + _XYB_BIAS)
    mb = _xyb_mix(9.545987813548164e-4 * r + 8.030095852743851e-4 * g
                  + 0.002163960260821779 * b + _XYB_BIAS)
    return Color(0.5 * (mr - mg), 0.5 * (mr + mg), mb, lin.alpha)


def from_XYB(c: ColorLike) -> Color:
    v = to_color(c)
    gr = v.ch1 + v.ch0 - _XYB_CBRT_BIAS
    gg = v.ch1 - v.ch0 - _XYB_CBRT_BIAS
    gb = v.ch2 - _XYB_CBRT_BIAS
    mr = gr * gr * gr - _XYB_BIAS
    mg = gg * gg * gg - _XYB_BIAS
    mb = gb * gb * gb - _XYB_BIAS
    r = 2813.04956 * mr - 2516.0707 * mg - 41.9788641 * mb
    g = -829.807582 * mr + 1126.78645 * mg - 41.9788641 * mb
    b = -933.007078 * mr + 691.795377 * mg + 496.211701 * mb
    return to_sRGB(Color(r, g, b, v.alpha))


# =============================================================================
# 5. OKLAB FAMILY
# =============================================================================

def to_Oklab(c: ColorLike) -> Color:
    """sRGB -> Oklab.  L in ``[0, 1]``, a in ``[-0.234, 0.276]``, b in ``[-0.312, 0.199]``."""
    v = to_color(c)
    L, a, b = linear_to_oklab(srgb_to_linear(v.ch0 * _INV255),
                              srgb_to_linear(v.ch1 * _INV255),
                              srgb_to_linear(v.ch2 * _INV255))
    return Color(L, a, b, v.alpha)


def from_Oklab(c: ColorLike) -> Color:
    v = to_color(c)
    r, g, b = oklab_to_linear(float(v.ch0), float(v.ch1), float(v.ch2))
    return Color(255.0 * linear_to_srgb(r), 255.0 * linear_to_srgb(g),
                 255.0 * linear_to_srgb(b), v.alpha)


def to_Oklch(c: ColorLike) -> Color:
    return to_luma_color_hue(c, to_Oklab)


def from_Oklch(c: ColorLike) -> Color:
    return from_luma_color_hue(c, from_Oklab)


def to_Okhsv(c: ColorLike) -> Color:
    """sRGB -> Okhsv (Ottosson).  h, s and v in ``[0, 1]``."""
    lab = to_Oklab(c)
    h, s, v = oklab_to_okhsv(lab.ch0, lab.ch1, lab.ch2)
    return Color(h, s, v, lab.alpha)


def from_Okhsv(c: ColorLike) -> Color:
    v = to_color(c)
    if v.ch2 == 0.0:
        return Color(0.0, 0.0, 0.0, v.alpha)
    L, a, b = okhsv_to_oklab(float(v.ch0), float(v.ch1), float(v.ch2))
    return from_Oklab(Color(L, a, b, v.alpha))


def to_Okhwb(c: ColorLike) -> Color:
    hsv = to_Okhsv(c)
    return Color(hsv.ch0, (1.0 - hsv.ch1) * hsv.ch2, 1.0 - hsv.ch2, hsv.alpha)


def from_Okhwb(c: ColorLike) -> Color:
    v = to_color(c)
    val = 1.0 - v.ch2
    if val == 0.0:
        return Color(0.0, 0.0, 0.0, v.alpha)
    return from_Okhsv(Color(v.ch0, 1.0 - v.ch1 / val, val, v.alpha))


def to_Okhsl(c: ColorLike) -> Color:
    """sRGB -> Okhsl (Ottosson).  h, s and l in ``[0, 1]``."""
    lab = to_Oklab(c)
    h, s, l = oklab_to_okhsl(lab.ch0, lab.ch1, lab.ch2)
    return Color(h, s, l, lab.alpha)


def from_Okhsl(c: ColorLike) -> Color:
    v = to_color(c)
    if v.ch2 == 0.0:
        return Color(0.0, 0.0, 0.0, v.alpha)
    L, a, b = okhsl_to_oklab(float(v.ch0), float(v.ch1), float(v.ch2))
    return from_Oklab(Color(L, a, b, v.alpha))
