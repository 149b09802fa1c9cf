# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Colour Difference Metrics
=========================
Perceptual and geometric distances between two colours.  Every metric
converts both inputs through a registered colour space first (``"LAB"``
unless stated otherwise), so any encoding accepted by
:func:`~tincture_representation.to_color` works.

Symmetry:
    ``delta_E_star``, ``delta_E_HyAB``, ``delta_E_euclidean``,
    ``delta_E_z`` and ``delta_E_2000`` are symmetric.  ``delta_E_94`` and
    ``delta_E_CMC`` derive their weights from the first (reference) colour
    and are therefore asymmetric by definition.

References:
    - CIE Publication 116-1995 (CIE 1994 colour difference).
    - Clarke, McDonald, Rigg (1984). "CMC l:c colour difference formula".
    - Sharma, G., Wu, W., & Dalal, E. N. (2005). "The CIEDE2000 color-difference formula".
    - Stone, Szafir, Setlur (2014). "An Engineering Model for Color Difference as a
      Function of Size".
"""

import math
from typing import Callable, Final, Iterable, Literal, Optional, Sequence, Tuple

import numpy as np

from tincture_core import ArrayFloat, Color
from tincture_kernels import (
    batch_delta_e_76,
    batch_delta_e_94,
    batch_delta_e_2000,
    batch_delta_e_cmc,
    delta_e_94,
    delta_e_2000,
    delta_e_cmc,
)
from tincture_registry import get_colorspace
from tincture_representation import ColorLike, relative_luma, to_color

__all__ = [
    # --- CIE 1976 family ---
    "delta_E_star",
    "delta_C_star",
    "delta_H_star",
    "delta_E_HyAB",
    "delta_E_euclidean",

    # --- Weighted formulas ---
    "delta_E_94",
    "delta_E_CMC",
    "delta_E_2000",
    "delta_E_z",
    "delta_D_HCL",
    "delta_C_RGB",

    # --- Vectorized ---
    "DeltaEMethod",
    "delta_E_array",

    # --- Perception helpers ---
    "contrast_ratio",
    "noticable_different",
    "nearest_color",
]

DeltaEMethod = Literal["76", "94", "CMC", "2000"]
Distance = Callable[[ColorLike, ColorLike], float]


def _pair(c1: ColorLike, c2: ColorLike, colorspace: str) -> Tuple[Color, Color]:
    to = get_colorspace(colorspace).to
    return to(c1), to(c2)


def _safe_sqrt(x: float) -> float:
    return math.sqrt(x) if x > 0.0 else 0.0


# =============================================================================
# 1. CIE 1976 FAMILY
# =============================================================================

def delta_E_star(c1: ColorLike, c2: ColorLike, colorspace: str = "LAB") -> float:
    """ΔE*ab (CIE 1976): Euclidean distance of channels 0-2 in ``colorspace``."""
    a, b = _pair(c1, c2, colorspace)
    return math.sqrt((b.ch0 - a.ch0) ** 2 + (b.ch1 - a.ch1) ** 2 + (b.ch2 - a.ch2) ** 2)


def _chroma_diff(a: Color, b: Color) -> float:
    return math.hypot(a.ch1, a.ch2) - math.hypot(b.ch1, b.ch2)


def delta_C_star(c1: ColorLike, c2: ColorLike, colorspace: str = "LAB") -> float:
    """ΔC*ab: signed chroma difference ``C1 - C2``."""
    a, b = _pair(c1, c2, colorspace)
    return _chroma_diff(a, b)


def delta_H_star(c1: ColorLike, c2: ColorLike, colorspace: str = "LAB") -> float:
    """ΔH*ab: hue difference, ``sqrt(Δa² + Δb² - ΔC²)`` floored at zero."""
    a, b = _pair(c1, c2, colorspace)
    dC = _chroma_diff(a, b)
    return _safe_sqrt((b.ch1 - a.ch1) ** 2 + (b.ch2 - a.ch2) ** 2 - dC * dC)


def delta_E_HyAB(c1: ColorLike, c2: ColorLike, colorspace: str = "LAB") -> float:
    """HyAB: city-block lightness plus Euclidean chromatic distance."""
    a, b = _pair(c1, c2, colorspace)
    return math.hypot(b.ch1 - a.ch1, b.ch2 - a.ch2) + abs(b.ch0 - a.ch0)


def delta_E_euclidean(c1: ColorLike, c2: ColorLike, colorspace: str = "Oklab") -> float:
    """Euclidean distance, by default in Oklab."""
    return delta_E_star(c1, c2, colorspace)


# =============================================================================
# 2. WEIGHTED FORMULAS
# =============================================================================

def delta_E_94(c1: ColorLike, c2: ColorLike, textiles: bool = False, colorspace: str = "LAB") -> float:
    """
    ΔE*94 (CIE 1994).

    Args:
        c1: Reference colour; its chroma drives the weighting functions.
        c2: Sample colour.
        textiles: Use the textile constants (``kL = 2``, ``K1 = 0.048``,
            ``K2 = 0.014``) instead of graphic arts.
        colorspace: Lab-like space the formula is evaluated in.
    """
    a, b = _pair(c1, c2, colorspace)
    SL, k1, k2 = (2.0, 0.048, 0.014) if textiles else (1.0, 0.045, 0.015)
    return delta_e_94(a.ch0, a.ch1, a.ch2, b.ch0, b.ch1, b.ch2, SL, k1, k2)


def delta_E_CMC(c1: ColorLike, c2: ColorLike, l: float = 1.0, c: float = 1.0,
                colorspace: str = "LAB") -> float:
    """ΔE CMC l:c.  ``l=2, c=1`` is the usual acceptability setting."""
    a, b = _pair(c1, c2, colorspace)
    return delta_e_cmc(a.ch0, a.ch1, a.ch2, b.ch0, b.ch1, b.ch2, l, c)


def delta_E_2000(c1: ColorLike, c2: ColorLike, l: float = 1.0, c: float = 1.0, h: float = 1.0,
                 colorspace: str = "LAB") -> float:
    """CIEDE2000 with parametric weights ``l``, ``c``, ``h``."""
    a, b = _pair(c1, c2, colorspace)
    return delta_e_2000(a.ch0, a.ch1, a.ch2, b.ch0, b.ch1, b.ch2, l, c, h)


def delta_E_z(c1: ColorLike, c2: ColorLike, colorspace: str = "JAB") -> float:
    """ΔEz in JzAzBz."""
    a, b = _pair(c1, c2, colorspace)
    C1 = math.hypot(a.ch1, a.ch2)
    C2 = math.hypot(b.ch1, b.ch2)
    h1 = math.atan2(a.ch2, a.ch1)
    h2 = math.atan2(b.ch2, b.ch1)
    dH = 2.0 * math.sqrt(C1 * C2) * math.sin(0.5 * (h2 - h1))
    return math.sqrt((b.ch0 - a.ch0) ** 2 + (C2 - C1) ** 2 + dH * dH)


def _diff_hue(h1: float, h2: float) -> float:
    if h1 * h2 > 0.0:
        return abs(h1 - h2)
    return min(abs(h1) + abs(h2), (180.0 - abs(h1)) + (180.0 - abs(h2)))


def delta_D_HCL(c1: ColorLike, c2: ColorLike, colorspace: str = "HCL") -> float:
    """Sarifuddin & Missaoui distance in their HCL space (hue in ``(-180, 180]``)."""
    a, b = _pair(c1, c2, colorspace)
    dH = _diff_hue(b.ch0, a.ch0)
    dL = b.ch2 - a.ch2
    return math.sqrt((1.4456 * dL) ** 2
                     + (dH + 0.16) * (a.ch1 * a.ch1 + b.ch1 * b.ch1
                                      - 2.0 * a.ch1 * b.ch1 * math.cos(math.radians(dH))))


def delta_C_RGB(c1: ColorLike, c2: ColorLike) -> float:
    """Weighted ("redmean") Euclidean distance in gamma-encoded RGB."""
    a = to_color(c1)
    b = to_color(c2)
    dR = b.ch0 - a.ch0
    dG = b.ch1 - a.ch1
    dB = b.ch2 - a.ch2
    r = 0.5 * (a.ch0 + b.ch0)
    return math.sqrt((2.0 + r / 256.0) * dR * dR
                     + 4.0 * dG * dG
                     + (2.0 + (255.0 - r) / 256.0) * dB * dB)


# =============================================================================
# 3. VECTORIZED
# =============================================================================

def delta_E_array(colors1: Iterable[ColorLike], colors2: Iterable[ColorLike],
                  method: DeltaEMethod = "2000", colorspace: str = "LAB",
                  **params: float) -> ArrayFloat:
    """
    Pairwise ΔE of two equally long colour sequences, evaluated in parallel.

    Args:
        colors1: Reference colours.
        colors2: Sample colours.
        method: ``"76"``, ``"94"``, ``"CMC"`` or ``"2000"``.
        colorspace: Lab-like space the inputs are converted to first.
        **params: Formula weights: ``textiles`` (94), ``l``/``c`` (CMC),
            ``l``/``c``/``h`` (2000).

    Returns:
        ``(N,)`` float64 array.
    """
    to = get_colorspace(colorspace).to
    lab1 = np.array([to(c).rgb() for c in colors1], dtype=np.float64).reshape(-1, 3)
    lab2 = np.array([to(c).rgb() for c in colors2], dtype=np.float64).reshape(-1, 3)
    if lab1.shape != lab2.shape:
        raise ValueError(f"Inputs must have the same length, got {lab1.shape[0]} and {lab2.shape[0]}")

    if method == "76":
        return batch_delta_e_76(lab1, lab2)
    if method == "94":
        SL, k1, k2 = (2.0, 0.048, 0.014) if params.get("textiles") else (1.0, 0.045, 0.015)
        return batch_delta_e_94(lab1, lab2, SL, k1, k2)
    if method == "CMC":
        return batch_delta_e_cmc(lab1, lab2, float(params.get("l", 1.0)), float(params.get("c", 1.0)))
    if method == "2000":
        return batch_delta_e_2000(lab1, lab2, float(params.get("l", 1.0)),
                                  float(params.get("c", 1.0)), float(params.get("h", 1.0)))
    raise ValueError(f"Unknown delta E method '{method}'. Expected one of 76, 94, CMC, 2000.")


# =============================================================================
# 4. PERCEPTION HELPERS
# =============================================================================

def contrast_ratio(c1: ColorLike, c2: ColorLike) -> float:
    """WCAG 2 contrast ratio, always ``>= 1``."""
    l1 = relative_luma(c1) / 255.0
    l2 = relative_luma(c2) / 255.0
    if l1 > l2:
        return (l1 + 0.05) / (l2 + 0.05)
    return (l2 + 0.05) / (l1 + 0.05)


_JND_BASE: Final = ((10.16, 1.5), (10.68, 3.08), (10.70, 5.74))


def noticable_different(c1: ColorLike, c2: ColorLike, s: float = 0.1, p: float = 0.5,
                        colorspace: str = "LAB") -> bool:
    """
    Just-noticeable-difference test of Stone et al.

    Args:
        s: Visual angle of the marks in degrees (smaller needs larger steps).
        p: Fraction of observers that should notice the difference.

    Returns:
        ``True`` when any single channel difference reaches its threshold.
    """
    a, b = _pair(c1, c2, colorspace)
    for d, (base, k) in zip((a.ch0 - b.ch0, a.ch1 - b.ch1, a.ch2 - b.ch2), _JND_BASE):
        if abs(d) >= (base + k / s) * p:
            return True
    return False


def nearest_color(palette: Sequence[ColorLike], c: ColorLike,
                  distance: Optional[Distance] = None) -> ColorLike:
    """
    Palette entry closest to ``c``.

    ``distance`` defaults to the Euclidean RGB distance.  Returns ``c`` itself
    (as a :class:`Color`) when the palette is empty.
    """
    target = to_color(c)
    if distance is None:
        distance = _rgb_distance
    best: ColorLike = target
    best_d = math.inf
    for candidate in palette:
        d = abs(float(distance(target, candidate)))
        if d < best_d:
            best, best_d = candidate, d
    return best


def _rgb_distance(c1: ColorLike, c2: ColorLike) -> float:
    a = to_color(c1)
    b = to_color(c2)
    return math.sqrt((b.ch0 - a.ch0) ** 2 + (b.ch1 - a.ch1) ** 2
                     + (b.ch2 - a.ch2) ** 2 + (b.alpha - a.alpha) ** 2)
