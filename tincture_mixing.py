# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Mixing Algebra
==============
Averaging, interpolation and mixing of colours.

Every function takes an optional ``colorspace``.  When given, both inputs are
converted into that space, combined there and converted back to RGB.  The
raw registry is used for the linear operations (``average``, ``lerp``,
``mixsub``), the normalized one for ``mix`` and ``reduce_colors`` which need
all channels in the common ``[0, 255]`` band.

Pigment mixing is delegated to Mixbox (``pymixbox``), clustering to
:func:`scipy.cluster.vq.kmeans2`.
"""

from typing import Final, List, Optional, Sequence, Union

import mixbox as _mixbox
import numpy as np
import numpy.typing as npt
from scipy.cluster.vq import kmeans2

from tincture_core import Color, InvalidInputError
from tincture_cie import to_LAB
from tincture_operations import set_channel, temperature
from tincture_registry import ColorspacePair, get_colorspace
from tincture_representation import ColorLike, luma, to_color

__all__ = [
    # --- Averaging ---
    "average",
    "weighted_average",

    # --- Interpolation ---
    "lerp",
    "lerp_minus",
    "lerp_plus",

    # --- Mixing ---
    "mix",
    "mixbox",
    "negate",
    "mixsub",
    "adjust_temperature",

    # --- Reduction ---
    "reduce_colors",
]

_WHITE: Final[npt.NDArray[np.float64]] = np.full(4, 255.0)

# Distance between opaque white and transparent black.
_MAX_DIST: Final[float] = 510.0


def _pair(colorspace: Optional[str], normalized: bool = False) -> Optional[ColorspacePair]:
    return None if colorspace is None else get_colorspace(colorspace, normalized)


def _vec(c: ColorLike) -> npt.NDArray[np.float64]:
    return np.asarray(to_color(c), dtype=np.float64)


def _from_vec(v: npt.NDArray[np.float64]) -> Color:
    return Color(float(v[0]), float(v[1]), float(v[2]), float(v[3]))


# =============================================================================
# 1. AVERAGING
# =============================================================================

def average(colors: Sequence[ColorLike], colorspace: Optional[str] = None) -> Color:
    """
    Channel-wise mean of ``colors``, computed in ``colorspace`` (RGB when omitted).

    Raises:
        InvalidInputError: If ``colors`` is empty.
    """
    if len(colors) == 0:
        raise InvalidInputError("Cannot average an empty sequence of colours")
    pair = _pair(colorspace)
    conv = [to_color(c) if pair is None else pair.to(c) for c in colors]
    mean = _from_vec(np.mean(np.asarray(conv, dtype=np.float64), axis=0))
    return mean if pair is None else pair.from_(mean)


def weighted_average(colors: Sequence[ColorLike], weights: Sequence[float],
                     colorspace: Optional[str] = None) -> Color:
    """
    Weighted channel-wise mean ``sum(w_i * c_i) / sum(w_i)``.

    Raises:
        ValueError: If ``colors`` and ``weights`` differ in length.
        InvalidInputError: If ``colors`` is empty.
    """
    if len(colors) != len(weights):
        raise ValueError(f"Got {len(colors)} colours but {len(weights)} weights")
    if len(colors) == 0:
        raise InvalidInputError("Cannot average an empty sequence of colours")
    pair = _pair(colorspace)
    conv = np.asarray([to_color(c) if pair is None else pair.to(c) for c in colors], dtype=np.float64)
    w = np.asarray(weights, dtype=np.float64)
    res = _from_vec((conv * w[:, None]).sum(axis=0) / w.sum())
    return res if pair is None else pair.from_(res)


# =============================================================================
# 2. INTERPOLATION
# =============================================================================

def _lerp4(a: Color, b: Color, t: float) -> Color:
    return Color(a.ch0 + t * (b.ch0 - a.ch0),
                 a.ch1 + t * (b.ch1 - a.ch1),
                 a.ch2 + t * (b.ch2 - a.ch2),
                 a.alpha + t * (b.alpha - a.alpha))


def lerp(c1: ColorLike, c2: ColorLike, t: float = 0.5, colorspace: Optional[str] = None) -> Color:
    """Linear interpolation of all four channels, optionally inside ``colorspace``."""
    pair = _pair(colorspace)
    if pair is None:
        return _lerp4(to_color(c1), to_color(c2), t)
    return pair.from_(_lerp4(pair.to(c1), pair.to(c2), t))


def lerp_minus(c1: ColorLike, c2: ColorLike, t: float = 0.5, colorspace: Optional[str] = None) -> Color:
    """Like :func:`lerp`, then restores the LAB lightness of ``c1``."""
    res = lerp(c1, c2, t, colorspace)
    return set_channel(res, 0, to_LAB(c1).ch0, "LAB")


def lerp_plus(c1: ColorLike, c2: ColorLike, t: float = 0.5, colorspace: Optional[str] = None) -> Color:
    """Like :func:`lerp`, then restores the LAB lightness of ``c2``."""
    return lerp_minus(c2, c1, 1.0 - t, colorspace)


# =============================================================================
# 3. MIXING
# =============================================================================

def _mix4(a: Color, b: Color, t: float) -> Color:
    u = 1.0 - t
    return Color(float(np.sqrt(a.ch0 * a.ch0 * u + b.ch0 * b.ch0 * t)),
                 float(np.sqrt(a.ch1 * a.ch1 * u + b.ch1 * b.ch1 * t)),
                 float(np.sqrt(a.ch2 * a.ch2 * u + b.ch2 * b.ch2 * t)),
                 a.alpha + t * (b.alpha - a.alpha))


def mix(c1: ColorLike, c2: ColorLike, t: float = 0.5, colorspace: Optional[str] = None) -> Color:
    """
    Gamma-aware mix: interpolates squared channels and takes the root.

    Alpha is interpolated linearly.  With ``colorspace`` the mix happens in
    the normalized variant of that space.
    """
    pair = _pair(colorspace, normalized=True)
    if pair is None:
        return _mix4(to_color(c1), to_color(c2), t)
    return pair.from_(_mix4(pair.to(c1), pair.to(c2), t))


def mixbox(c1: ColorLike, c2: ColorLike, t: float = 0.5) -> Color:
    """
    Pigment based mixing with Mixbox (Kubelka-Munk latent space).

    RGB is rounded to bytes before mixing; alpha is interpolated linearly.
    """
    a = to_color(c1)
    b = to_color(c2)
    rgb1 = tuple(int(round(min(max(v, 0.0), 255.0))) for v in a[:3])
    rgb2 = tuple(int(round(min(max(v, 0.0), 255.0))) for v in b[:3])
    r, g, bl = _mixbox.lerp(rgb1, rgb2, float(t))[:3]
    return Color(float(r), float(g), float(bl), a.alpha + t * (b.alpha - a.alpha))


def negate(c: ColorLike, alpha: bool = False) -> Color:
    """``255 - channel`` for the colour channels and, when ``alpha`` is set, for alpha too."""
    v = to_color(c)
    return Color(255.0 - v.ch0, 255.0 - v.ch1, 255.0 - v.ch2,
                 255.0 - v.alpha if alpha else v.alpha)


def _mixsub4(a: Color, b: Color, t: float) -> Color:
    mixed = _lerp4(a, b, t)
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    f = np.clip(_WHITE - np.asarray(negate(a)) - np.asarray(negate(b)), 0.0, 255.0)
    f[3] = mixed.alpha
    cd = 4.0 * t * (1.0 - t) * float(np.linalg.norm(va - vb)) / _MAX_DIST
    return _lerp4(mixed, _from_vec(f), cd)


def mixsub(c1: ColorLike, c2: ColorLike, t: float = 0.5, colorspace: Optional[str] = None) -> Color:
    """
    Subtractive, ink-like mix.

    The plain blend is pulled towards the product of the two negatives by an
    amount that grows with the RGBA distance of the inputs and peaks at
    ``t = 0.5``.
    """
    pair = _pair(colorspace)
    if pair is None:
        return _mixsub4(to_color(c1), to_color(c2), t)
    return pair.from_(_mixsub4(pair.to(c1), pair.to(c2), t))


def adjust_temperature(c: ColorLike, temp: Union[float, str], amount: float = 0.35) -> Color:
    """Blends ``c`` towards the black-body colour of ``temp`` keeping the LAB lightness of the target."""
    return lerp_plus(to_color(c), temperature(temp), amount)


# =============================================================================
# 4. REDUCTION
# =============================================================================

def reduce_colors(colors: Sequence[ColorLike], n: int, colorspace: Optional[str] = None,
                  seed: Optional[int] = None) -> List[Color]:
    """
    Reduces a long colour sequence to at most ``n`` representatives.

    Clusters with k-means++ (in the normalized ``colorspace`` when given),
    then represents every cluster by the mean of its most frequent members.
    The result is sorted by luma, darkest first; empty clusters are dropped.

    Args:
        colors: Source colours, e.g. the pixels of an image.
        n: Number of clusters.
        colorspace: Optional space to cluster in.
        seed: Seed for the k-means++ initialisation.

    Raises:
        InvalidInputError: If ``n`` is not positive or ``colors`` is empty.
    """
    if n < 1:
        raise InvalidInputError(f"Number of colours must be positive, got {n}")
    if len(colors) == 0:
        raise InvalidInputError("Cannot reduce an empty sequence of colours")
    pair = _pair(colorspace, normalized=True)
    data = np.asarray([to_color(c) if pair is None else pair.to(c) for c in colors], dtype=np.float64)
    k = min(n, len(data))
    _, labels = kmeans2(data, k, minit="++", seed=seed)

    out: List[Color] = []
    for cluster in range(k):
        members = data[labels == cluster]
        if len(members) == 0:
            continue
        uniq, counts = np.unique(np.round(members), axis=0, return_counts=True)
        mode = _from_vec(uniq[counts == counts.max()].mean(axis=0))
        out.append(mode if pair is None else pair.from_(mode))
    return sorted(out, key=luma)
