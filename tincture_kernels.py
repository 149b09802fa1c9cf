# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Scalar Math Kernels (Numba)
===========================
JIT-compiled scalar cores for the conversion models whose arithmetic is
heavy enough to matter: the Oklab gamut search behind Okhsv/Okhsl, the
OSA-UCS Newton inversion, JzAzBz, the DIN99 family and the CIE colour
difference formulas.

Every kernel takes and returns plain floats (tuples for triplets), so the
Python wrappers in the colour-space modules stay thin.  Kernels are compiled
with ``error_model="numpy"`` and without ``fastmath``: division by zero
yields ``inf``/``nan`` instead of raising, and NaN propagates exactly as in
IEEE 754.  Out-of-gamut input is extrapolated, never clamped.

References:
    - Ottosson, B. (2020). "A perceptual color space for image processing".
    - Ottosson, B. (2021). "Okhsv and Okhsl: Two new color spaces for color picking".
    - Cao, R., Trussell, H. J., Shamey, R. (2013). "Comparison of the
      performance of inverse transformation methods from OSA-UCS to CIEXYZ".
    - Safdar, M. et al. (2017). "Perceptually uniform color space for image
      signals including high dynamic range and wide gamut".
    - Sharma, G., Wu, W., Dalal, E. N. (2005). "The CIEDE2000 color-difference formula".
"""

import math
from typing import Final, Tuple

import numpy as np
from numba import float64, njit, prange

from tincture_core import ArrayFloat, Triplet

__all__ = [
    # --- Constants ---
    "OSA_MAX_ITERATIONS",
    "OSA_TOLERANCE",

    # --- Oklab family ---
    "linear_to_oklab",
    "oklab_to_linear",
    "toe",
    "inv_toe",
    "find_cusp",
    "oklab_to_okhsv",
    "okhsv_to_oklab",
    "oklab_to_okhsl",
    "okhsl_to_oklab",

    # --- Other non-linear models ---
    "xyz_to_osa",
    "osa_to_xyz",
    "xyz_to_jab",
    "jab_to_xyz",
    "lab_to_din99",
    "din99_to_lab",

    # --- Colour differences ---
    "delta_e_94",
    "delta_e_cmc",
    "delta_e_2000",
    "batch_delta_e_76",
    "batch_delta_e_94",
    "batch_delta_e_cmc",
    "batch_delta_e_2000",
]

_MAX_DOUBLE: Final[float] = 1.7976931348623157e308
_TWO_THIRD: Final[float] = 2.0 / 3.0
_SQRT2: Final[float] = math.sqrt(2.0)

OSA_MAX_ITERATIONS: Final[int] = 20
OSA_TOLERANCE: Final[float] = 1.0e-10


@njit(float64(float64), cache=True, error_model="numpy")
def _cbrt(x: float) -> float:
    if x < 0.0:
        return -((-x) ** (1.0 / 3.0))
    return x ** (1.0 / 3.0)


# =============================================================================
# 1. OKLAB CORE
# =============================================================================

@njit(cache=True, error_model="numpy")
def linear_to_oklab(r: float, g: float, b: float) -> Triplet:
    """Linear sRGB (unit range) to Oklab."""
    l = _cbrt(0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b)
    m = _cbrt(0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b)
    s = _cbrt(0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b)
    return (0.2104542553 * l + 0.7936177850 * m - 0.0040720468 * s,
            1.9779984951 * l - 2.4285922050 * m + 0.4505937099 * s,
            0.0259040371 * l + 0.7827717662 * m - 0.8086757660 * s)


@njit(cache=True, error_model="numpy")
def oklab_to_linear(L: float, a: float, b: float) -> Triplet:
    """Oklab to linear sRGB (unit range)."""
    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.2914855480 * b
    l = l_ * l_ * l_
    m = m_ * m_ * m_
    s = s_ * s_ * s_
    return (4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s,
            -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s,
            -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s)


@njit(float64(float64), cache=True, error_model="numpy")
def toe(x: float) -> float:
    """Lightness estimate warping Oklab L towards CIE L*."""
    v = 1.170873786407767 * x - 0.206
    return 0.5 * (v + math.sqrt(v * v + 0.14050485436893204 * x))


@njit(float64(float64), cache=True, error_model="numpy")
def inv_toe(x: float) -> float:
    return (x * x + 0.206 * x) / (1.17087378640776 * (x + 0.03))


@njit(float64(float64, float64), cache=True, error_model="numpy")
def _compute_max_saturation(a: float, b: float) -> float:
    """
    Maximum saturation ``S = C/L`` reachable for the hue ``(a, b)``.

    A polynomial first guess refined by one Halley step on the cubic of the
    component that clips first.
    """
    if -1.88170328 * a - 0.80936493 * b > 1.0:
        k0, k1, k2, k3, k4 = 1.19086277, 1.76576728, 0.59662641, 0.75515197, 0.56771245
        wl, wm, ws = 4.0767416621, -3.3077115913, 0.2309699292
    elif 1.81444104 * a - 1.19445276 * b > 1.0:
        k0, k1, k2, k3, k4 = 0.73956515, -0.45954404, 0.08285427, 0.12541070, 0.14503204
        wl, wm, ws = -1.2684380046, 2.6097574011, -0.3413193965
    else:
        k0, k1, k2, k3, k4 = 1.35733652, -0.00915799, -1.15130210, -0.50559606, 0.00692167
        wl, wm, ws = -0.0041960863, -0.7034186147, 1.7076147010

    S = k0 + k1 * a + k2 * b + k3 * a * a + k4 * a * b

    kl = 0.3963377774 * a + 0.2158037573 * b
    km = -0.1055613458 * a - 0.0638541728 * b
    ks = -0.0894841775 * a - 1.2914855480 * b

    l_ = 1.0 + S * kl
    m_ = 1.0 + S * km
    s_ = 1.0 + S * ks

    l = l_ * l_ * l_
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    l_dS = 3.0 * kl * l_ * l_
    m_dS = 3.0 * km * m_ * m_
    s_dS = 3.0 * ks * s_ * s_

    l_dS2 = 6.0 * kl * kl * l_
    m_dS2 = 6.0 * km * km * m_
    s_dS2 = 6.0 * ks * ks * s_

    f = wl * l + wm * m + ws * s
    f1 = wl * l_dS + wm * m_dS + ws * s_dS
    f2 = wl * l_dS2 + wm * m_dS2 + ws * s_dS2

    return S - f * f1 / (f1 * f1 - 0.5 * f * f2)


@njit(cache=True, error_model="numpy")
def find_cusp(a: float, b: float) -> Tuple[float, float]:
    """``(L, C)`` of the most chromatic in-gamut colour for the unit hue ``(a, b)``."""
    S_cusp = _compute_max_saturation(a, b)
    r, g, bl = oklab_to_linear(1.0, S_cusp * a, S_cusp * b)
    L_cusp = _cbrt(1.0 / max(r, g, bl))
    return L_cusp, L_cusp * S_cusp


@njit(float64(float64, float64, float64, float64, float64), cache=True, error_model="numpy")
def _find_gamut_intersection(a: float, b: float, L: float, cusp_L: float, cusp_C: float) -> float:
    """Chroma at which the constant-``L`` line leaves the sRGB gamut."""
    if L <= cusp_L:
        return cusp_C * L / cusp_L

    t = cusp_C * (L - 1.0) / (cusp_L - 1.0)

    kl = 0.3963377774 * a + 0.2158037573 * b
    km = -0.1055613458 * a - 0.0638541728 * b
    ks = -0.0894841775 * a - 1.2914855480 * b

    l_ = L + t * kl
    m_ = L + t * km
    s_ = L + t * ks

    l = l_ * l_ * l_
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    ldt = 3.0 * kl * l_ * l_
    mdt = 3.0 * km * m_ * m_
    sdt = 3.0 * ks * s_ * s_

    ldt2 = 6.0 * kl * kl * l_
    mdt2 = 6.0 * km * km * m_
    sdt2 = 6.0 * ks * ks * s_

    r = 4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s - 1.0
    r1 = 4.0767416621 * ldt - 3.3077115913 * mdt + 0.2309699292 * sdt
    r2 = 4.0767416621 * ldt2 - 3.3077115913 * mdt2 + 0.2309699292 * sdt2
    ur = r1 / (r1 * r1 - 0.5 * r * r2)
    tr = -r * ur

    g = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s - 1.0
    g1 = -1.2684380046 * ldt + 2.6097574011 * mdt - 0.3413193965 * sdt
    g2 = -1.2684380046 * ldt2 + 2.6097574011 * mdt2 - 0.3413193965 * sdt2
    ug = g1 / (g1 * g1 - 0.5 * g * g2)
    tg = -g * ug

    bb = -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s - 1.0
    b1 = -0.0041960863 * ldt - 0.7034186147 * mdt + 1.7076147010 * sdt
    b2 = -0.0041960863 * ldt2 - 0.7034186147 * mdt2 + 1.7076147010 * sdt2
    ub = b1 / (b1 * b1 - 0.5 * bb * b2)
    tb = -bb * ub

    if not ur >= 0.0:
        tr = _MAX_DOUBLE
    if not ug >= 0.0:
        tg = _MAX_DOUBLE
    if not ub >= 0.0:
        tb = _MAX_DOUBLE

    return t + min(tr, tg, tb)


@njit(cache=True, error_model="numpy")
def _get_st_mid(a: float, b: float) -> Tuple[float, float]:
    S = 0.11516993 + 1.0 / (
        7.44778970 + 4.1590124 * b
        + a * (-2.19557347 + 1.7519840 * b
               + a * (-2.1370494 - 10.0230104 * b
                      + a * (-4.24894561 + 5.38770819 * b + 4.69891013 * a))))
    T = 0.11239642 + 1.0 / (
        1.61320320 - 0.68124379 * b
        + a * (0.40370612 + 0.90148123 * b
               + a * (-0.27087943 + 0.61223990 * b
                      + a * (0.00299215 - 0.45399568 * b - 0.14661872 * a))))
    return S, T


@njit(cache=True, error_model="numpy")
def _get_cs(L: float, a: float, b: float) -> Triplet:
    """Returns ``(C_0, C_mid, C_max)`` for Okhsl's piecewise chroma scale."""
    cusp_L, cusp_C = find_cusp(a, b)
    C_max = _find_gamut_intersection(a, b, L, cusp_L, cusp_C)
    S_max = cusp_C / cusp_L
    T_max = cusp_C / (1.0 - cusp_L)
    Lm = 1.0 - L

    k = C_max / min(L * S_max, Lm * T_max)

    S_mid, T_mid = _get_st_mid(a, b)
    Ca = L * S_mid
    Cb = Lm * T_mid
    C_mid = 0.9 * k * math.sqrt(math.sqrt(1.0 / (1.0 / (Ca * Ca * Ca * Ca) + 1.0 / (Cb * Cb * Cb * Cb))))

    Ca = L * 0.4
    Cb = Lm * 0.8
    C_0 = math.sqrt(1.0 / (1.0 / (Ca * Ca) + 1.0 / (Cb * Cb)))

    return C_0, C_mid, C_max


@njit(cache=True, error_model="numpy")
def _unit_hue(a: float, b: float, C: float) -> Tuple[float, float]:
    # Achromatic input has no hue; any unit vector keeps the math finite.
    if C == 0.0:
        return 1.0, 0.0
    return a / C, b / C


# =============================================================================
# 2. OKHSV / OKHSL
# =============================================================================

@njit(cache=True, error_model="numpy")
def oklab_to_okhsv(L: float, a: float, b: float) -> Triplet:
    if L == 0.0:
        return 0.0, 0.0, 0.0

    C = math.hypot(a, b)
    a_, b_ = _unit_hue(a, b, C)
    h = 0.5 + 0.5 * math.atan2(-b, -a) / math.pi

    cusp_L, cusp_C = find_cusp(a_, b_)
    S_max = cusp_C / cusp_L
    T_max = cusp_C / (1.0 - cusp_L)
    k = 1.0 - 0.5 / S_max

    t = T_max / (C + L * T_max)
    Lv = t * L
    Cv = t * C

    Lvt = inv_toe(Lv)
    Cvt = Cv * Lvt / Lv

    rs, gs, bs = oklab_to_linear(Lvt, a_ * Cvt, b_ * Cvt)
    scale_L = _cbrt(1.0 / max(rs, gs, bs, 0.0))

    L = toe(L / scale_L)
    v = L / Lv
    s = (0.5 + T_max) * Cv / (0.5 * T_max + T_max * k * Cv)
    return h, s, v


@njit(cache=True, error_model="numpy")
def okhsv_to_oklab(h: float, s: float, v: float) -> Triplet:
    if v == 0.0:
        return 0.0, 0.0, 0.0

    hr = 2.0 * math.pi * h
    a_ = math.cos(hr)
    b_ = math.sin(hr)

    cusp_L, cusp_C = find_cusp(a_, b_)
    S_max = cusp_C / cusp_L
    T_max = cusp_C / (1.0 - cusp_L)
    k = 1.0 - 0.5 / S_max

    r = 1.0 / (0.5 + T_max - T_max * k * s)
    Lv = 1.0 - 0.5 * s * r
    Cv = 0.5 * s * T_max * r

    L = v * Lv
    C = v * Cv

    Lvt = inv_toe(Lv)
    Cvt = Cv * Lvt / Lv

    L_new = inv_toe(L)
    C = C * L_new / L
    L = L_new

    rs, gs, bs = oklab_to_linear(Lvt, a_ * Cvt, b_ * Cvt)
    scale_L = _cbrt(1.0 / max(rs, gs, bs))

    L = L * scale_L
    C = C * scale_L
    return L, C * a_, C * b_


@njit(cache=True, error_model="numpy")
def oklab_to_okhsl(L: float, a: float, b: float) -> Triplet:
    if L == 0.0:
        return 0.0, 0.0, 0.0

    C = math.hypot(a, b)
    a_, b_ = _unit_hue(a, b, C)
    h = 0.5 + 0.5 * math.atan2(-b, -a) / math.pi

    C_0, C_mid, C_max = _get_cs(L, a_, b_)

    if C < C_mid:
        k1 = 0.8 * C_0
        k2 = 1.0 - k1 / C_mid
        s = 0.8 * C / (k1 + k2 * C)
    else:
        k1 = 0.3125 * C_mid * C_mid / C_0
        k2 = 1.0 - k1 / (C_max - C_mid)
        dC = C - C_mid
        s = 0.8 + 0.2 * dC / (k1 + k2 * dC)

    return h, s, toe(L)


@njit(cache=True, error_model="numpy")
def okhsl_to_oklab(h: float, s: float, l: float) -> Triplet:
    if l == 0.0:
        return 0.0, 0.0, 0.0

    hr = 2.0 * math.pi * h
    a_ = math.cos(hr)
    b_ = math.sin(hr)
    L = inv_toe(l)

    C_0, C_mid, C_max = _get_cs(L, a_, b_)

    if s < 0.8:
        t = 1.25 * s
        k1 = 0.8 * C_0
        k2 = 1.0 - k1 / C_mid
        C = t * k1 / (1.0 - t * k2)
    else:
        t = (s - 0.8) / 0.2
        k1 = 0.3125 * C_mid * C_mid / C_0
        k2 = 1.0 - k1 / (C_max - C_mid)
        C = C_mid + t * k1 / (1.0 - t * k2)

    return L, C * a_, C * b_


# =============================================================================
# 3. OSA-UCS
# =============================================================================

@njit(cache=True, error_model="numpy")
def _osa_k(X: float, Y: float, Z: float) -> Tuple[float, float, float, float]:
    """Returns ``(K, x, y, X+Y+Z)`` of the OSA lightness correction."""
    sum_xyz = X + Y + Z
    x = 0.0 if X == 0.0 else X / sum_xyz
    y = 0.0 if Y == 0.0 else Y / sum_xyz
    K = (4.4934 * x * x + 4.3034 * y * y - 4.276 * x * y
         - 1.3744 * x - 2.5643 * y + 1.8103)
    return K, x, y, sum_xyz


@njit(cache=True, error_model="numpy")
def xyz_to_osa(X: float, Y: float, Z: float) -> Triplet:
    """XYZ (``Y`` in ``[0, 100]``) to OSA-UCS ``(L, j, g)``."""
    K, _, _, _ = _osa_k(X, Y, Z)
    Y0 = Y * K
    Y03 = _cbrt(Y0) - _TWO_THIRD
    Lp = 5.9 * (Y03 + 0.042 * _cbrt(Y0 - 30.0))
    C = Lp / (5.9 * Y03)

    R3 = _cbrt(0.7990 * X + 0.4194 * Y - 0.1648 * Z)
    G3 = _cbrt(-0.4493 * X + 1.3265 * Y + 0.0927 * Z)
    B3 = _cbrt(-0.1149 * X + 0.3394 * Y + 0.7170 * Z)

    a = -13.7 * R3 + 17.7 * G3 - 4.0 * B3
    b = 1.7 * R3 + 8.0 * G3 - 9.7 * B3
    L = (Lp - 14.3993) / _SQRT2
    return L, C * b, C * a


@njit(cache=True, error_model="numpy")
def osa_to_xyz(L: float, j: float, g: float) -> Tuple[float, float, float, int]:
    """
    OSA-UCS ``(L, j, g)`` to XYZ by Newton-Raphson on the lightness residual.

    The forward map has no closed-form inverse.  Lightness gives ``Y0`` via
    Cardano's formula, then ``omega = cbrt(R)`` is refined until the residual
    drops to ``OSA_TOLERANCE`` or ``OSA_MAX_ITERATIONS`` steps were taken.

    Returns:
        ``(X, Y, Z, iterations)``.
    """
    Lp = _SQRT2 * L + 14.3993
    u = Lp / 5.9 + _TWO_THIRD

    v = 0.042 * 0.042 * 0.042
    A = -(1.0 + v)
    B = 3.0 * u
    Cc = -3.0 * u * u
    D = u * u * u + 30.0 * v

    p = (3.0 * A * Cc - B * B) / (3.0 * A * A)
    aa27 = 27.0 * A * A
    q = (2.0 * B * B * B - 9.0 * A * B * Cc + aa27 * D) / (aa27 * A)
    q2 = 0.5 * q
    p3 = p / 3.0
    s = math.sqrt(q2 * q2 + p3 * p3 * p3)
    t = _cbrt(s - q2) + _cbrt(-q2 - s) - B / (3.0 * A)

    Y0 = t * t * t
    C = Lp / (5.9 * (t - _TWO_THIRD))
    a = g / C
    b = j / C

    detr = -1.0 / 139.68999999999997
    ap = detr * (-9.7 * a + 4.0 * b)
    bp = detr * (-8.0 * a + 17.7 * b)

    omega = 4.957506551095124
    iterations = 0
    while True:
        cR = omega
        cG = omega + ap
        cB = omega + bp
        R = cR * cR * cR
        G = cG * cG * cG
        Bv = cB * cB * cB

        X = 1.06261827 * R - 0.412091749 * G + 0.297517985 * Bv
        Y = 0.359926645 * R + 0.640072108 * G - 2.61830489e-05 * Bv
        Z = -8.96301459e-05 * R - 0.369023452 * G + 1.44239010 * Bv

        K, x, y, sum_xyz = _osa_k(X, Y, Z)
        f = Y * K - Y0

        if not (iterations < OSA_MAX_ITERATIONS and f > OSA_TOLERANCE):
            return X, Y, Z, iterations

        dR = 3.0 * cR * cR
        dG = 3.0 * cG * cG
        dB = 3.0 * cB * cB

        dX = 1.06261827 * dR - 0.412091749 * dG + 0.297517985 * dB
        dY = 0.359926645 * dR + 0.640072108 * dG - 2.61830489e-05 * dB
        dZ = -8.96301459e-05 * dR - 0.369023452 * dG + 1.44239010 * dB
        dsum = dX + dY + dZ
        sum2 = sum_xyz * sum_xyz

        dx = 0.0 if X == 0.0 else (dX * sum_xyz - X * dsum) / sum2
        dy = 0.0 if Y == 0.0 else (dY * sum_xyz - Y * dsum) / sum2
        dK = (2.0 * 4.4934 * x * dx + 2.0 * 4.3034 * y * dy
              - 4.276 * (dx * y + x * dy) - 1.3744 * dx - 2.5643 * dy)
        df = dY * K + Y * dK

        omega -= f / df
        iterations += 1


# =============================================================================
# 4. JzAzBz
# =============================================================================

_JAB_B: Final[float] = 1.15
_JAB_G: Final[float] = 0.66
_JAB_C1: Final[float] = 3424.0 / 4096.0
_JAB_C2: Final[float] = 2413.0 / 128.0
_JAB_C3: Final[float] = 2392.0 / 128.0
_JAB_N: Final[float] = 2610.0 / 16384.0
_JAB_P: Final[float] = 1.7 * 2523.0 / 32.0
_JAB_D: Final[float] = -0.56
_JAB_D0: Final[float] = 1.6295499532821566e-11


@njit(float64(float64), cache=True, error_model="numpy")
def _jab_pq(v: float) -> float:
    v = (v / 10000.0) ** _JAB_N
    return ((_JAB_C1 + _JAB_C2 * v) / (1.0 + _JAB_C3 * v)) ** _JAB_P


@njit(float64(float64), cache=True, error_model="numpy")
def _jab_pq_inv(v: float) -> float:
    v = v ** (1.0 / _JAB_P)
    return 10000.0 * ((_JAB_C1 - v) / (_JAB_C3 * v - _JAB_C2)) ** (1.0 / _JAB_N)


@njit(cache=True, error_model="numpy")
def xyz_to_jab(X: float, Y: float, Z: float) -> Triplet:
    """XYZ (reference white at 100) to JzAzBz."""
    Xp = _JAB_B * X - (_JAB_B - 1.0) * Z
    Yp = _JAB_G * Y - (_JAB_G - 1.0) * X

    l = _jab_pq(0.41478972 * Xp + 0.579999 * Yp + 0.0146480 * Z)
    m = _jab_pq(-0.2015100 * Xp + 1.120649 * Yp + 0.0531008 * Z)
    s = _jab_pq(-0.0166008 * Xp + 0.264800 * Yp + 0.6684799 * Z)

    I = 0.5 * l + 0.5 * m
    az = 3.524000 * l - 4.066708 * m + 0.542708 * s
    bz = 0.199076 * l + 1.096799 * m - 1.295875 * s

    J = (1.0 + _JAB_D) * I / (1.0 + _JAB_D * I) - _JAB_D0
    return J, az, bz


@njit(cache=True, error_model="numpy")
def jab_to_xyz(J: float, az: float, bz: float) -> Triplet:
    Jp = J + _JAB_D0
    I = Jp / (1.0 + _JAB_D - _JAB_D * Jp)

    l = _jab_pq_inv(1.0000000000000002 * I + 0.1386050432715393 * az + 0.05804731615611886 * bz)
    m = _jab_pq_inv(0.9999999999999999 * I - 0.1386050432715393 * az - 0.05804731615611886 * bz)
    s = _jab_pq_inv(0.9999999999999998 * I - 0.09601924202631895 * az - 0.8118918960560388 * bz)

    Xp = 1.9242264357876069 * l - 1.0047923125953657 * m + 0.037651404030617994 * s
    Yp = 0.350316762094999 * l + 0.7264811939316552 * m - 0.06538442294808501 * s
    Zp = -0.09098281098284752 * l - 0.3127282905230739 * m + 1.5227665613052603 * s

    X = (Xp + (_JAB_B - 1.0) * Zp) / _JAB_B
    Y = (Yp + (_JAB_G - 1.0) * X) / _JAB_G
    return X, Y, Zp


# =============================================================================
# 5. DIN99 FAMILY
# =============================================================================

@njit(cache=True, error_model="numpy")
def lab_to_din99(L: float, a: float, b: float,
                 l99mult: float, lmult: float, cosc: float, sinc: float,
                 fmult: float, c99mult: float, gmult: float, hshift: float,
                 gdiv: float) -> Triplet:
    """CIELAB to a DIN99 variant described by its coefficient record."""
    e = cosc * a + sinc * b
    f = fmult * (cosc * b - sinc * a)
    G = math.hypot(e, f)
    h = math.atan2(f, e) + hshift
    C99 = c99mult * math.log1p(gmult * G) / gdiv
    L99 = l99mult * math.log1p(lmult * L)
    return L99, C99 * math.cos(h), C99 * math.sin(h)


@njit(cache=True, error_model="numpy")
def din99_to_lab(L99: float, a99: float, b99: float,
                 l99mult: float, lmult: float, cosc: float, sinc: float,
                 fmult: float, c99mult: float, gmult: float, hshift: float,
                 gdiv: float) -> Triplet:
    h = math.atan2(b99, a99) - hshift
    C99 = math.hypot(a99, b99)
    G = math.expm1((gdiv / c99mult) * C99) / gmult
    e = G * math.cos(h)
    f = G * math.sin(h) / fmult
    a = e * cosc - f * sinc
    b = e * sinc + f * cosc
    L = math.expm1(L99 / l99mult) / lmult
    return L, a, b


# =============================================================================
# 6. COLOUR DIFFERENCES
# =============================================================================

_P25_7: Final[float] = 25.0 ** 7
_R30: Final[float] = math.radians(30.0)
_R6: Final[float] = math.radians(6.0)
_R63: Final[float] = math.radians(63.0)


@njit(float64(float64), cache=True, error_model="numpy")
def _p7(v: float) -> float:
    v2 = v * v
    v7 = v2 * v2 * v2 * v
    return math.sqrt(v7 / (v7 + _P25_7))


@njit(float64(float64, float64, float64, float64, float64, float64, float64, float64, float64),
      cache=True, error_model="numpy")
def delta_e_2000(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float,
                 kl: float, kc: float, kh: float) -> float:
    """CIEDE2000 with parametric weights ``kl``, ``kc``, ``kh``."""
    C1s = math.hypot(a1, b1)
    C2s = math.hypot(a2, b2)
    Cms = 0.5 * (C1s + C2s)
    Gp = 1.0 + 0.5 * (1.0 - _p7(Cms))
    a1p = Gp * a1
    a2p = Gp * a2
    C1p = math.hypot(a1p, b1)
    C2p = math.hypot(a2p, b2)

    h1p = math.degrees(math.atan2(b1, a1p))
    if h1p < 0.0:
        h1p += 360.0
    h2p = math.degrees(math.atan2(b2, a2p))
    if h2p < 0.0:
        h2p += 360.0

    dLp = L2 - L1
    dCp = C2p - C1p
    diffh = h2p - h1p
    adiffh = abs(diffh)
    C1pC2p = C1p * C2p

    if C1pC2p == 0.0:
        dhp = 0.0
    elif adiffh <= 180.0:
        dhp = diffh
    elif diffh > 180.0:
        dhp = diffh - 360.0
    else:
        dhp = diffh + 360.0
    dHp = 2.0 * math.sqrt(C1pC2p) * math.sin(0.5 * math.radians(dhp))

    Lmp = 0.5 * (L1 + L2)
    Cmp = 0.5 * (C1p + C2p)
    hsum = h1p + h2p
    if C1pC2p == 0.0:
        hmp = hsum
    elif adiffh <= 180.0:
        hmp = 0.5 * hsum
    elif hsum < 360.0:
        hmp = 0.5 * (hsum + 360.0)
    else:
        hmp = 0.5 * (hsum - 360.0)
    hmr = math.radians(hmp)

    T = (1.0 - 0.17 * math.cos(hmr - _R30) + 0.24 * math.cos(2.0 * hmr)
         + 0.32 * math.cos(3.0 * hmr + _R6) - 0.2 * math.cos(4.0 * hmr - _R63))
    dtheta = _R30 * math.exp(-((hmp - 275.0) / 25.0) ** 2)
    Rc = 2.0 * _p7(Cmp)
    Lsq = (Lmp - 50.0) * (Lmp - 50.0)
    Sl = 1.0 + 0.015 * Lsq / math.sqrt(20.0 + Lsq)
    Sc = 1.0 + 0.045 * Cmp
    Sh = 1.0 + 0.015 * Cmp * T
    Rt = -math.sin(2.0 * dtheta) * Rc

    lt = dLp / (kl * Sl)
    ct = dCp / (kc * Sc)
    ht = dHp / (kh * Sh)
    return math.sqrt(lt * lt + ct * ct + ht * ht + Rt * ct * ht)


@njit(float64(float64, float64, float64, float64, float64, float64, float64, float64, float64),
      cache=True, error_model="numpy")
def delta_e_94(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float,
               SL: float, k1: float, k2: float) -> float:
    """CIE 1994; weights are computed from the reference sample (asymmetric)."""
    C1 = math.hypot(a1, b1)
    C2 = math.hypot(a2, b2)
    Sc = 1.0 + k1 * C1
    Sh = 1.0 + k2 * C1
    dab = C1 - C2
    dH2 = (a2 - a1) ** 2 + (b2 - b1) ** 2 - dab * dab
    dH = math.sqrt(dH2) if dH2 > 0.0 else 0.0
    return math.sqrt(((L2 - L1) / SL) ** 2 + (dab / Sc) ** 2 + (dH / Sh) ** 2)


@njit(float64(float64, float64, float64, float64, float64, float64, float64, float64),
      cache=True, error_model="numpy")
def delta_e_cmc(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float,
                l: float, c: float) -> float:
    """CMC l:c (1984); weights are computed from the reference sample (asymmetric)."""
    H = math.degrees(math.atan2(b1, a1))
    H1 = H + 360.0 if H < 0.0 else H
    C1 = math.hypot(a1, b1)
    C2 = math.hypot(a2, b2)
    dC = C1 - C2
    dL = L1 - L2
    da = a1 - a2
    db = b1 - b2
    dH = da * da + db * db - dC * dC
    C14 = C1 * C1 * C1 * C1
    F = math.sqrt(C14 / (C14 + 1900.0))
    if 164.0 <= H1 <= 345.0:
        T = 0.56 + abs(0.2 * math.cos(math.radians(H1 + 168.0)))
    else:
        T = 0.36 + abs(0.4 * math.cos(math.radians(H1 + 35.0)))
    if L1 < 16.0:
        SL = 0.511
    else:
        SL = 0.040975 * L1 / (1.0 + 0.01765 * L1)
    SC = 0.638 + 0.0638 * C1 / (1.0 + 0.0131 * C1)
    SH = SC * (1.0 + F * (T - 1.0))
    return math.sqrt((dL / (l * SL)) ** 2 + (dC / (c * SC)) ** 2 + dH / (SH * SH))


@njit(cache=True, error_model="numpy", parallel=True)
def batch_delta_e_76(lab1: ArrayFloat, lab2: ArrayFloat) -> ArrayFloat:
    """Row-wise Euclidean distance of two ``(N, 3)`` arrays."""
    n = lab1.shape[0]
    res = np.empty(n, dtype=np.float64)
    for i in prange(n):
        dL = lab2[i, 0] - lab1[i, 0]
        da = lab2[i, 1] - lab1[i, 1]
        db = lab2[i, 2] - lab1[i, 2]
        res[i] = math.sqrt(dL * dL + da * da + db * db)
    return res


@njit(cache=True, error_model="numpy", parallel=True)
def batch_delta_e_94(lab1: ArrayFloat, lab2: ArrayFloat, SL: float, k1: float, k2: float) -> ArrayFloat:
    n = lab1.shape[0]
    res = np.empty(n, dtype=np.float64)
    for i in prange(n):
        res[i] = delta_e_94(lab1[i, 0], lab1[i, 1], lab1[i, 2],
                            lab2[i, 0], lab2[i, 1], lab2[i, 2], SL, k1, k2)
    return res


@njit(cache=True, error_model="numpy", parallel=True)
def batch_delta_e_cmc(lab1: ArrayFloat, lab2: ArrayFloat, l: float, c: float) -> ArrayFloat:
    n = lab1.shape[0]
    res = np.empty(n, dtype=np.float64)
    for i in prange(n):
        res[i] = delta_e_cmc(lab1[i, 0], lab1[i, 1], lab1[i, 2],
                             lab2[i, 0], lab2[i, 1], lab2[i, 2], l, c)
    return res


@njit(cache=True, error_model="numpy", parallel=True)
def batch_delta_e_2000(lab1: ArrayFloat, lab2: ArrayFloat, kl: float, kc: float, kh: float) -> ArrayFloat:
    n = lab1.shape[0]
    res = np.empty(n, dtype=np.float64)
    for i in prange(n):
        res[i] = delta_e_2000(lab1[i, 0], lab1[i, 1], lab1[i, 2],
                              lab2[i, 0], lab2[i, 1], lab2[i, 2], kl, kc, kh)
    return res
