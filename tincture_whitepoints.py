# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

White Points & Chromatic Adaptation
===================================
Reference whites for the CIE 1931 2° and CIE 1964 10° observers, plus the
von Kries style adaptation transforms used to move XYZ tristimulus values
from one white to another.

White points are stored as relative tristimulus values with ``Y == 1``.
Adaptation matrices act on column vectors: ``xyz_dst = M @ xyz_src``.
"""

import functools
from typing import Dict, Final, Literal, NamedTuple, Tuple, Union

import numpy as np

from tincture_core import ArrayFloat, ColorspaceNotFoundError

__all__ = [
    "WhitePoint",
    "WHITEPOINTS",
    "CIE_2_D65",
    "CIE_2_D50",
    "AdaptationMethod",
    "ADAPTATION_METHODS",
    "get_whitepoint",
    "chromatic_adaptation_matrix",
]


class WhitePoint(NamedTuple):
    """Reference white as relative XYZ (``Y`` normalized to 1)."""
    X: float
    Y: float
    Z: float

    @classmethod
    def from_xy(cls, x: float, y: float) -> "WhitePoint":
        """Builds a white point from CIE 1931 xy chromaticity."""
        return cls(x / y, 1.0, (1.0 - x - y) / y)

    @property
    def x(self) -> float:
        return self.X / (self.X + self.Y + self.Z)

    @property
    def y(self) -> float:
        return self.Y / (self.X + self.Y + self.Z)


# --- 2° observer (ASTM E308 tristimulus values) ---
CIE_2_D65: Final[WhitePoint] = WhitePoint(0.95047, 1.0, 1.08883)
CIE_2_D50: Final[WhitePoint] = WhitePoint(0.96422, 1.0, 0.82521)

WHITEPOINTS: Final[Dict[str, WhitePoint]] = {
    "CIE-2-A": WhitePoint(1.09850, 1.0, 0.35585),
    "CIE-2-B": WhitePoint(0.99072, 1.0, 0.85223),
    "CIE-2-C": WhitePoint(0.98074, 1.0, 1.18232),
    "CIE-2-D50": CIE_2_D50,
    "CIE-2-D55": WhitePoint(0.95682, 1.0, 0.92149),
    "CIE-2-D65": CIE_2_D65,
    "CIE-2-D75": WhitePoint(0.94972, 1.0, 1.22638),
    "CIE-2-E": WhitePoint(1.0, 1.0, 1.0),
    "CIE-2-F2": WhitePoint(0.99186, 1.0, 0.67393),
    "CIE-2-F7": WhitePoint(0.95041, 1.0, 1.08747),
    "CIE-2-F11": WhitePoint(1.00962, 1.0, 0.64350),
    # --- 10° observer (from chromaticity) ---
    "CIE-10-A": WhitePoint.from_xy(0.45117, 0.40594),
    "CIE-10-C": WhitePoint.from_xy(0.31039, 0.31905),
    "CIE-10-D50": WhitePoint.from_xy(0.34773, 0.35952),
    "CIE-10-D55": WhitePoint.from_xy(0.33411, 0.34877),
    "CIE-10-D65": WhitePoint.from_xy(0.31382, 0.33100),
    "CIE-10-D75": WhitePoint.from_xy(0.29968, 0.31740),
    "CIE-10-E": WhitePoint(1.0, 1.0, 1.0),
}


def get_whitepoint(name: str) -> WhitePoint:
    """Looks up a named white point, e.g. ``"CIE-2-D50"``."""
    try:
        return WHITEPOINTS[name]
    except KeyError:
        raise ColorspaceNotFoundError(
            f"Unknown white point '{name}'. Available: {sorted(WHITEPOINTS)}"
        ) from None


# =============================================================================
# CHROMATIC ADAPTATION
# =============================================================================

AdaptationMethod = Literal[
    "xyz-scaling", "bradford", "von-kries", "sharp", "fairchild", "cat97",
    "cat2000", "cat02", "cat02brill2008", "cat16", "bianco2010", "bianco2010-pc",
]

# Cone response (XYZ -> LMS) matrices, column-vector form.
ADAPTATION_METHODS: Final[Dict[str, ArrayFloat]] = {
    "xyz-scaling": np.eye(3),
    "bradford": np.array([
        [0.8951, 0.2664, -0.1614],
        [-0.7502, 1.7135, 0.0367],
        [0.0389, -0.0685, 1.0296]]),
    "von-kries": np.array([
        [0.40024, 0.70760, -0.08081],
        [-0.22630, 1.16532, 0.04570],
        [0.0, 0.0, 0.91822]]),
    "sharp": np.array([
        [1.2694, -0.0988, -0.1706],
        [-0.8364, 1.8006, 0.0357],
        [0.0297, -0.0315, 1.0018]]),
    "fairchild": np.array([
        [0.8562, 0.3372, -0.1934],
        [-0.8360, 1.8327, 0.0033],
        [0.0357, -0.0469, 1.0112]]),
    "cat97": np.array([
        [0.8951, -0.7502, 0.0389],
        [0.2664, 1.7135, 0.0685],
        [-0.1614, 0.0367, 1.0296]]),
    "cat2000": np.array([
        [0.7982, 0.3389, -0.1371],
        [-0.5918, 1.5512, 0.0406],
        [0.0008, 0.0239, 0.9753]]),
    "cat02": np.array([
        [0.7328, 0.4296, -0.1624],
        [-0.7036, 1.6975, 0.0061],
        [0.0030, 0.0136, 0.9834]]),
    "cat02brill2008": np.array([
        [0.7328, 0.4296, -0.1624],
        [-0.7036, 1.6975, 0.0061],
        [0.0, 0.0, 1.0]]),
    "cat16": np.array([
        [0.401288, 0.650173, -0.051461],
        [-0.250268, 1.204414, 0.045854],
        [-0.002079, 0.048952, 0.953127]]),
    "bianco2010": np.array([
        [0.8752, 0.2787, -0.1539],
        [-0.8904, 1.8709, 0.0195],
        [-0.0061, 0.0162, 0.9899]]),
    "bianco2010-pc": np.array([
        [0.6489, 0.3915, -0.0404],
        [-0.3775, 1.3055, 0.0720],
        [-0.0271, 0.0888, 0.9383]]),
}


@functools.lru_cache(maxsize=32)
def _get_cached_adaptation_matrix(method: str,
                                  src: Tuple[float, float, float],
                                  dst: Tuple[float, float, float]) -> ArrayFloat:
    """
    Cached worker: ``M_inv @ diag(dst_lms / src_lms) @ M``.

    The returned array is read-only since it is shared by every caller.
    """
    M = ADAPTATION_METHODS[method]
    src_lms = M @ np.asarray(src, dtype=np.float64)
    dst_lms = M @ np.asarray(dst, dtype=np.float64)
    gain = np.diag(dst_lms / src_lms)
    out = np.linalg.inv(M) @ gain @ M
    out.setflags(write=False)
    return out


def chromatic_adaptation_matrix(method: str,
                                src: Union[str, WhitePoint],
                                dst: Union[str, WhitePoint]) -> ArrayFloat:
    """
    Von Kries style adaptation matrix between two white points.

    Args:
        method: One of :data:`ADAPTATION_METHODS` (``"bradford"`` is the usual choice).
        src: Source white point (object or name).
        dst: Destination white point (object or name).

    Returns:
        Read-only 3x3 matrix for column vectors.

    Raises:
        ColorspaceNotFoundError: For an unknown method or white point name.
    """
    if method not in ADAPTATION_METHODS:
        raise ColorspaceNotFoundError(
            f"Unknown adaptation method '{method}'. Available: {sorted(ADAPTATION_METHODS)}"
        )
    src_wp = get_whitepoint(src) if isinstance(src, str) else src
    dst_wp = get_whitepoint(dst) if isinstance(dst, str) else dst
    return _get_cached_adaptation_matrix(method, tuple(map(float, src_wp)), tuple(map(float, dst_wp)))
