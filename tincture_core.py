# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Core Value Types and Scalar Helpers
===================================
The four-channel canonical value every Tincture function consumes and
produces, the error taxonomy, and the handful of scalar helpers (clamping,
range mapping, sRGB transfer curves) shared by all conversion modules.

The canonical value carries no colour-space tag.  ``Color(255, 0, 0, 255)``
is red when read as RGB, but the very same tuple returned by ``to_LAB`` is a
Lab triplet.  Interpretation is always supplied by the function that
produced or consumes the value, and no conversion ever clamps its output.
"""

import math
from typing import Final, NamedTuple, Tuple, TypeAlias

import numpy as np
import numpy.typing as npt

__all__ = [
    # --- Type Aliases ---
    "ArrayFloat",
    "Triplet",

    # --- Value Types ---
    "Color",

    # --- Errors ---
    "TinctureError",
    "InvalidColorError",
    "InvalidInputError",
    "ColorspaceNotFoundError",

    # --- Constants ---
    "DEG2RAD",
    "RAD2DEG",
    "TWO_PI",
    "OPAQUE",

    # --- Scalar Helpers ---
    "clamp255",
    "lclamp255",
    "constrain",
    "mnorm",
    "wrap",
    "wrap_hue",
    "cbrt",
    "srgb_to_linear",
    "linear_to_srgb",
    "lerp_scalar",
    "fdiv",
    "fsqrt",
    "spow",
]

# --- Type Aliases ---
ArrayFloat: TypeAlias = npt.NDArray[np.floating]
Triplet: TypeAlias = Tuple[float, float, float]

# --- Constants ---
DEG2RAD: Final[float] = math.pi / 180.0
RAD2DEG: Final[float] = 180.0 / math.pi
TWO_PI: Final[float] = 2.0 * math.pi
OPAQUE: Final[float] = 255.0


# =============================================================================
# 1. CANONICAL VALUE
# =============================================================================

class Color(NamedTuple):
    """
    Canonical four-channel colour value.

    Channels are plain floats.  For the default RGB reading ``ch0..ch2`` are
    red, green and blue in ``[0, 255]`` and ``alpha`` is in ``[0, 255]``.
    Being a tuple, a ``Color`` compares equal to any plain 4-tuple holding
    the same numbers.
    """
    ch0: float
    ch1: float
    ch2: float
    alpha: float = OPAQUE

    @property
    def red(self) -> float:
        return self.ch0

    @property
    def green(self) -> float:
        return self.ch1

    @property
    def blue(self) -> float:
        return self.ch2

    def rgb(self) -> Triplet:
        """Returns the three colour channels without alpha."""
        return (self.ch0, self.ch1, self.ch2)

    def to_array(self) -> ArrayFloat:
        """Returns the value as a float64 NumPy vector of length 4."""
        return np.array(self, dtype=np.float64)


# =============================================================================
# 2. ERROR TAXONOMY
# =============================================================================

class TinctureError(Exception):
    """Base class for every error raised by Tincture."""


class InvalidColorError(TinctureError, ValueError):
    """Raised when a value cannot be classified as any supported colour encoding."""


class InvalidInputError(TinctureError, ValueError):
    """Raised when a textual colour (hex string) is malformed."""


class ColorspaceNotFoundError(TinctureError, KeyError):
    """Raised when a colour-space name is missing from the registry."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable instead.
        return str(self.args[0]) if self.args else ""


# =============================================================================
# 3. SCALAR HELPERS
# =============================================================================

def constrain(v: float, lo: float, hi: float) -> float:
    """Clamps ``v`` to ``[lo, hi]``."""
    if v < lo:
        return lo
    if v > hi:
        return hi
    return v


def clamp255(v: float) -> float:
    """Clamps a channel to the ``[0, 255]`` band, keeping it a float."""
    return float(constrain(v, 0.0, 255.0))


def lclamp255(v: float) -> int:
    """Rounds (half away from zero) and clamps a channel to an int in ``[0, 255]``."""
    if v != v:
        return 0
    r = math.floor(v + 0.5)
    return int(constrain(r, 0, 255))


def mnorm(v: float, start1: float, stop1: float, start2: float, stop2: float) -> float:
    """Maps ``v`` linearly from ``[start1, stop1]`` onto ``[start2, stop2]``."""
    return start2 + (stop2 - start2) * ((v - start1) / (stop1 - start1))


def wrap(lo: float, hi: float, v: float) -> float:
    """Wraps ``v`` into the half-open interval ``[lo, hi)``."""
    span = hi - lo
    if lo <= v < hi:
        return v
    return lo + ((v - lo) % span)


def wrap_hue(h: float) -> float:
    """Wraps a hue angle in degrees into ``[0, 360)``."""
    return wrap(0.0, 360.0, h)


def cbrt(x: float) -> float:
    """Real cube root, sign preserving."""
    if x < 0.0:
        return -((-x) ** (1.0 / 3.0))
    return x ** (1.0 / 3.0)


def lerp_scalar(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


# --- IEEE 754 semantics for the pure-Python kernels ---

def fdiv(a: float, b: float) -> float:
    """Division that yields ``inf``/``nan`` on a zero divisor instead of raising."""
    if b == 0.0:
        if a == 0.0 or a != a:
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def fsqrt(x: float) -> float:
    """Square root that returns ``nan`` for negative input."""
    return math.sqrt(x) if x >= 0.0 else math.nan


def spow(x: float, e: float) -> float:
    """Sign-symmetric power: ``sign(x) * |x| ** e``."""
    if x < 0.0:
        return -((-x) ** e)
    return x ** e


# --- sRGB transfer curves (IEC 61966-2-1), unit interval ---

def srgb_to_linear(v: float) -> float:
    """sRGB EOTF (inverse gamma) on a value in ``[0, 1]``."""
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def linear_to_srgb(v: float) -> float:
    """sRGB OETF (gamma) on a value in ``[0, 1]``."""
    if v <= 0.0031308:
        return 12.92 * v
    return 1.055 * (v ** (1.0 / 2.4)) - 0.055
