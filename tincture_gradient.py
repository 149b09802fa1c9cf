# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Gradients & Palettes
====================
A *gradient* is a pure function ``t -> Color`` defined on ``[0, 1]``; out of
range input is clamped.  A *palette* is a finite list of colours.  The two
convert into each other: a palette is interpolated into a gradient and a
gradient is sampled back into a palette.

Interpolation is done per channel in the requested colour space with one of
the 1-D methods of :data:`INTERPOLATIONS` (NumPy / SciPy) or blended between
the first two colours with a named curve from :data:`EASINGS`.

Also provides the cosine gradients of Inigo Quilez, the built-in gradient
presets, luma correction and random palette / colour generation (thi.ng
colour themes and Paletton presets).
"""

import logging
import math
from typing import Callable, Dict, Final, List, Optional, Sequence, Tuple, Union

import numpy as np
import numpy.typing as npt
from scipy.interpolate import Akima1DInterpolator, CubicSpline, PchipInterpolator

from tincture_core import Color, InvalidInputError, clamp255, constrain, lerp_scalar, mnorm
from tincture_cie import to_LAB
from tincture_colorspaces import from_Cubehelix
from tincture_mixing import average
from tincture_operations import temperature
from tincture_paletton import hue_paletton, paletton, paletton_presets_list
from tincture_presets import gradient_data, gradients_list, named_colors_list, palette_data, palettes_list
from tincture_registry import get_colorspace
from tincture_representation import ColorLike, clamp, luma, set_alpha, to_color

__all__ = [
    # --- Types ---
    "Gradient",
    "Interpolator",

    # --- Curves ---
    "INTERPOLATIONS",
    "EASINGS",

    # --- Gradients ---
    "gradient",
    "iq_gradient",
    "cosine_coefficients",
    "merge_gradients",
    "gradient_presets_list",

    # --- Palettes ---
    "palette",
    "resample",
    "correct_luma",
    "palette_presets_list",

    # --- Random ---
    "THEME_PRESETS",
    "color_themes",
    "apply_theme",
    "random_color",
    "random_palette",
    "random_gradient",
]

logger = logging.getLogger(__name__)

Gradient = Callable[[float], Color]
Interpolator = Callable[[npt.NDArray[np.float64], npt.NDArray[np.float64]], Callable[[float], float]]
Vec3 = Tuple[float, float, float]
RandomSource = Union[None, int, np.random.Generator]


# =============================================================================
# 1. INTERPOLATION METHODS & EASINGS
# =============================================================================

def _step(x: npt.NDArray[np.float64], y: npt.NDArray[np.float64]) -> Callable[[float], float]:
    last = len(y) - 1

    def f(t: float) -> float:
        return float(y[min(max(int(np.searchsorted(x, t, side="right")) - 1, 0), last)])
    return f


def _spline(cls: type) -> Interpolator:
    def build(x: npt.NDArray[np.float64], y: npt.NDArray[np.float64]) -> Callable[[float], float]:
        s = cls(x, y)
        return lambda t: float(s(t))
    return build


INTERPOLATIONS: Final[Dict[str, Interpolator]] = {
    "linear": lambda x, y: lambda t: float(np.interp(t, x, y)),
    "cubic": _spline(CubicSpline),
    "pchip": _spline(PchipInterpolator),
    "akima": _spline(Akima1DInterpolator),
    "step": _step,
}

_BACK_S: Final[float] = 1.70158


def _bounce_out(t: float) -> float:
    if t < 4.0 / 11.0:
        return 7.5625 * t * t
    if t < 8.0 / 11.0:
        t -= 6.0 / 11.0
        return 7.5625 * t * t + 0.75
    if t < 10.0 / 11.0:
        t -= 9.0 / 11.0
        return 7.5625 * t * t + 0.9375
    t -= 21.0 / 22.0
    return 7.5625 * t * t + 0.984375


def _in_out(ease_in: Callable[[float], float]) -> Callable[[float], float]:
    def f(t: float) -> float:
        if t < 0.5:
            return 0.5 * ease_in(2.0 * t)
        return 1.0 - 0.5 * ease_in(2.0 - 2.0 * t)
    return f


def _out(ease_in: Callable[[float], float]) -> Callable[[float], float]:
    return lambda t: 1.0 - ease_in(1.0 - t)


def _quad_in(t: float) -> float:
    return t * t


def _cubic_in(t: float) -> float:
    return t * t * t


def _sin_in(t: float) -> float:
    return 1.0 - math.cos(0.5 * math.pi * t)


def _exp_in(t: float) -> float:
    return 0.0 if t <= 0.0 else 2.0 ** (10.0 * t - 10.0)


def _circle_in(t: float) -> float:
    return 1.0 - math.sqrt(max(0.0, 1.0 - t * t))


def _back_in(t: float) -> float:
    return t * t * ((_BACK_S + 1.0) * t - _BACK_S)


def _bounce_in(t: float) -> float:
    return 1.0 - _bounce_out(1.0 - t)


EASINGS: Final[Dict[str, Callable[[float], float]]] = {}
for _name, _fn in (("quad", _quad_in), ("cubic", _cubic_in), ("sin", _sin_in), ("exp", _exp_in),
                   ("circle", _circle_in), ("back", _back_in), ("bounce", _bounce_in)):
    EASINGS[f"{_name}-in"] = _fn
    EASINGS[f"{_name}-out"] = _out(_fn)
    EASINGS[f"{_name}-in-out"] = _in_out(_fn)
del _name, _fn


# =============================================================================
# 2. INTERPOLATED GRADIENTS
# =============================================================================

def _clamped(c: Color) -> Color:
    return Color(clamp255(c.ch0), clamp255(c.ch1), clamp255(c.ch2), clamp255(c.alpha))


def _interpolated(colors: Sequence[ColorLike], colorspace: str, interpolation: Union[str, Interpolator],
                  domain: Optional[Sequence[float]], to: bool, from_: bool) -> Gradient:
    pair = get_colorspace(colorspace)
    conv_to = pair.to if to else to_color
    conv_from = pair.from_ if from_ else to_color
    pts = [conv_to(c) for c in colors]
    n = len(pts)
    if n == 0:
        raise InvalidInputError("A gradient needs at least one colour")

    if isinstance(interpolation, str) and interpolation in EASINGS:
        c1 = pts[0]
        c2 = pts[1] if n > 1 else pts[0]
        easing = EASINGS[interpolation]

        def eased(t: float) -> Color:
            e = easing(constrain(t, 0.0, 1.0))
            return _clamped(conv_from(Color(*(lerp_scalar(a, b, e) for a, b in zip(c1, c2)))))
        return eased

    if n == 1:
        const = _clamped(conv_from(pts[0]))
        return lambda t: const

    if isinstance(interpolation, str):
        try:
            builder = INTERPOLATIONS[interpolation]
        except KeyError:
            raise InvalidInputError(
                f"Unknown interpolation '{interpolation}'. "
                f"Available: {sorted(INTERPOLATIONS) + sorted(EASINGS)}"
            ) from None
    else:
        builder = interpolation

    if domain is None:
        xs = np.array([mnorm(i, 0.0, n - 1.0, 0.0, 1.0) for i in range(n)])
    else:
        if len(domain) != n:
            raise ValueError(f"Domain has {len(domain)} positions for {n} colours")
        xs = np.asarray(domain, dtype=np.float64)
    ys = np.asarray(pts, dtype=np.float64)
    channels = [builder(xs, ys[:, i]) for i in range(4)]

    def interpolated(t: float) -> Color:
        ct = constrain(t, 0.0, 1.0)
        return _clamped(conv_from(Color(*(f(ct) for f in channels))))
    return interpolated


# =============================================================================
# 3. COSINE (IQ) GRADIENTS
# =============================================================================

def iq_gradient(a: Sequence[float], b: Sequence[float], c: Sequence[float], d: Sequence[float]) -> Gradient:
    """
    Cosine gradient ``a + b * cos(2π (c t + d))`` of Inigo Quilez.

    Each argument holds one coefficient per RGB channel in unit range; the
    result is scaled to ``[0, 255]``, clamped and opaque.
    """
    va, vb, vc, vd = (np.asarray(v, dtype=np.float64) for v in (a, b, c, d))

    def f(t: float) -> Color:
        rgb = 255.0 * (va + vb * np.cos(2.0 * math.pi * (vc * t + vd)))
        return Color(clamp255(float(rgb[0])), clamp255(float(rgb[1])), clamp255(float(rgb[2])), 255.0)
    return f


def cosine_coefficients(c1: ColorLike, c2: ColorLike) -> Tuple[Vec3, Vec3, Vec3, Vec3]:
    """Cosine gradient coefficients running from ``c1`` at ``t=0`` to ``c2`` at ``t=1``."""
    v1 = np.asarray(to_color(c1)[:3], dtype=np.float64)
    v2 = np.asarray(to_color(c2)[:3], dtype=np.float64)
    amp = 0.5 * (v1 - v2)
    offset = v1 - amp
    return (tuple(offset / 255.0), tuple(amp / 255.0),  # type: ignore[return-value]
            (-0.5, -0.5, -0.5), (0.0, 0.0, 0.0))


# thi.ng presets followed by the originals of Inigo Quilez.
_IQ_PRESETS: Final[Dict[str, Tuple[Vec3, Vec3, Vec3, Vec3]]] = {
    "rainbow1": ((0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (1.0, 1.0, 1.0), (0.0, 0.3333, 0.6666)),
    "rainbow2": ((0.5, 0.5, 0.5), (0.666, 0.666, 0.666), (1.0, 1.0, 1.0), (0.0, 0.3333, 0.6666)),
    "rainbow3": ((0.5, 0.5, 0.5), (0.75, 0.75, 0.75), (1.0, 1.0, 1.0), (0.0, 0.3333, 0.6666)),
    "rainbow4": ((0.5, 0.5, 0.5), (1.0, 1.0, 1.0), (1.0, 1.0, 1.0), (0.0, 0.3333, 0.6666)),
    "yellow-magenta-cyan": ((1.0, 0.5, 0.5), (0.5, 0.5, 0.5), (0.75, 1.0, 0.6666), (0.8, 1.0, 0.3333)),
    "orange-blue": ((0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (0.8, 0.8, 0.5), (0.0, 0.2, 0.5)),
    "green-magenta": ((0.6666, 0.5, 0.5), (0.5, 0.6666, 0.5), (0.6666, 0.666, 0.5), (0.2, 0.0, 0.5)),
    "green-red": ((0.5, 0.5, 0.0), (0.5, 0.5, 0.0), (0.5, 0.5, 0.0), (0.5, 0.0, 0.0)),
    "green-cyan": ((0.0, 0.5, 0.5), (0.0, 0.5, 0.5), (0.0, 0.3333, 0.5), (0.0, 0.6666, 0.5)),
    "yellow-red": ((0.5, 0.5, 0.0), (0.5, 0.5, 0.0), (0.1, 0.5, 0.0), (0.0, 0.0, 0.0)),
    "blue-cyan": ((0.0, 0.5, 0.5), (0.0, 0.5, 0.5), (0.0, 0.5, 0.3333), (0.0, 0.5, 0.6666)),
    "red-blue": ((0.5, 0.0, 0.5), (0.5, 0.0, 0.5), (0.5, 0.0, 0.5), (0.0, 0.0, 0.5)),
    "yellow-green-blue": ((0.650, 0.5, 0.310), (-0.650, 0.5, 0.6), (0.333, 0.278, 0.278), (0.660, 0.0, 0.667)),
    "blue-white-red": ((0.660, 0.56, 0.680), (0.718, 0.438, 0.720), (0.520, 0.8, 0.520), (-0.430, -0.397, -0.083)),
    "cyan-magenta": ((0.610, 0.498, 0.650), (0.388, 0.498, 0.350), (0.530, 0.498, 0.620), (3.438, 3.012, 4.025)),
    "yellow-purple-magenta": ((0.731, 1.098, 0.192), (0.358, 1.090, 0.657), (1.077, 0.360, 0.328), (0.965, 2.265, 0.837)),
    "green-blue-orange": ((0.892, 0.725, 0.000), (0.878, 0.278, 0.725), (0.332, 0.518, 0.545), (2.440, 5.043, 0.732)),
    "orange-magenta-blue": ((0.821, 0.328, 0.242), (0.659, 0.481, 0.896), (0.612, 0.340, 0.296), (2.820, 3.026, -0.273)),
    "blue-magenta-orange": ((0.938, 0.328, 0.718), (0.659, 0.438, 0.328), (0.388, 0.388, 0.296), (2.538, 2.478, 0.168)),
    "magenta-green": ((0.590, 0.811, 0.120), (0.410, 0.392, 0.590), (0.940, 0.548, 0.278), (-4.242, -6.611, -4.045)),
    "iq-1": ((0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (1.0, 1.0, 1.0), (0.0, 0.33, 0.67)),
    "iq-2": ((0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (1.0, 1.0, 1.0), (0.0, 0.1, 0.2)),
    "iq-3": ((0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (1.0, 1.0, 1.0), (0.3, 0.2, 0.2)),
    "iq-4": ((0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (1.0, 1.0, 0.5), (0.8, 0.9, 0.3)),
    "iq-5": ((0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (1.0, 0.7, 0.4), (0.0, 0.15, 0.2)),
    "iq-6": ((0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (2.0, 1.0, 0.0), (0.5, 0.2, 0.25)),
    "iq-7": ((0.8, 0.5, 0.4), (0.2, 0.4, 0.2), (2.0, 1.0, 1.0), (0.0, 0.25, 0.25)),
}


# =============================================================================
# 4. BUILT-IN GRADIENTS
# =============================================================================

def _cubehelix(colors: Sequence[ColorLike]) -> Gradient:
    # Endpoints are given in Cubehelix coordinates already.
    return _interpolated(colors, "Cubehelix", "linear", None, to=False, from_=True)


def _rainbow(t: float) -> Color:
    ts = abs(t - 0.5)
    return _clamped(from_Cubehelix(Color(t * 360.0 - 100.0, 1.5 - 1.5 * ts, 0.8 - 0.9 * ts, 255.0)))


def _black_body(t: float) -> Color:
    return temperature(lerp_scalar(1000.0, 15000.0, constrain(t, 0.0, 1.0)))


def _build_basic() -> Dict[str, Gradient]:
    basic: Dict[str, Gradient] = {k: iq_gradient(*v) for k, v in _IQ_PRESETS.items()}
    basic["cubehelix"] = _cubehelix([(300.0, 0.5, 0.0, 255.0), (-240.0, 0.5, 1.0, 255.0)])
    basic["warm"] = _cubehelix([(-100.0, 0.75, 0.35, 255.0), (80.0, 1.5, 0.8, 255.0)])
    basic["cool"] = _cubehelix([(260.0, 0.75, 0.35, 255.0), (80.0, 1.5, 0.8, 255.0)])
    basic["rainbow"] = _rainbow
    basic["black-body"] = _black_body
    return basic


_BASIC_GRADIENTS: Final[Dict[str, Gradient]] = _build_basic()


def gradient_presets_list() -> List[str]:
    """Built-in gradient names followed by the ``"set:name"`` keys of the preset store."""
    return sorted(_BASIC_GRADIENTS) + gradients_list()


def _preset_gradient(name: str) -> Gradient:
    basic = _BASIC_GRADIENTS.get(name)
    if basic is not None:
        return basic
    data = gradient_data(name)
    if data is None:
        raise InvalidInputError(f"Unknown gradient preset '{name}'")
    colors, positions = data
    logger.debug("Building preset gradient %s from %d colours", name, len(colors))
    return _interpolated(colors, "RGB", "linear", positions, True, True)


def _rng(seed: RandomSource) -> np.random.Generator:
    return np.random.default_rng(seed)


def gradient(source: Union[None, str, Sequence[ColorLike]] = None, colorspace: str = "RGB",
             interpolation: Union[str, Interpolator] = "linear",
             domain: Optional[Sequence[float]] = None,
             to: bool = True, from_: bool = True, seed: RandomSource = None) -> Gradient:
    """
    Builds a gradient function.

    Args:
        source: Preset name (see :func:`gradient_presets_list`) or a sequence
            of colours.  ``None`` picks a random preset.
        colorspace: Space to interpolate in. Defaults to ``"RGB"``.
        interpolation: Key of :data:`INTERPOLATIONS` or :data:`EASINGS`,
            ``"iq"`` for a cosine gradient between the first two colours, or a
            callable ``(xs, ys) -> (t -> y)`` applied per channel.  Easings
            only blend the first two colours.
        domain: Position of every colour. Defaults to evenly spaced on ``[0, 1]``.
        to: Convert the colours into ``colorspace`` first.  Switch off when
            they are given in that space already.
        from_: Convert interpolated values back to RGB.
        seed: Random source for ``source=None``.

    Returns:
        A function ``t -> Color`` with ``t`` clamped to ``[0, 1]`` and every
        channel clamped to ``[0, 255]``.

    Raises:
        InvalidInputError: On an unknown preset or interpolation name.
        ColorspaceNotFoundError: On an unknown ``colorspace``.

    >>> g = gradient(["#000000", "#ffffff"])
    >>> g(0.5)
    Color(ch0=127.5, ch1=127.5, ch2=127.5, alpha=255.0)
    """
    if source is None:
        source = str(_rng(seed).choice(gradient_presets_list()))
    if isinstance(source, str):
        return _preset_gradient(source)
    if interpolation == "iq":
        if len(source) < 2:
            raise InvalidInputError("A cosine gradient needs two colours")
        return iq_gradient(*cosine_coefficients(source[0], source[1]))
    return _interpolated(source, colorspace, interpolation, domain, to, from_)


def merge_gradients(g1: Gradient, g2: Gradient, midpoint: float = 0.5) -> Gradient:
    """``g1`` stretched over ``[0, midpoint)`` followed by ``g2`` over ``[midpoint, 1]``."""
    def merged(t: float) -> Color:
        if t < midpoint:
            return g1(mnorm(t, 0.0, midpoint, 0.0, 1.0))
        return g2(mnorm(t, midpoint, 1.0, 0.0, 1.0))
    return merged


# =============================================================================
# 5. PALETTES
# =============================================================================

def palette_presets_list() -> List[str]:
    return palettes_list()


def _sample(g: Gradient, n: int) -> List[Color]:
    if n == 1:
        return [g(0.0)]
    return [g(float(t)) for t in np.linspace(0.0, 1.0, n)]


def palette(source: Union[None, str, Gradient, Sequence[ColorLike]] = None, n: Optional[int] = None,
            colorspace: Optional[str] = None, interpolation: Union[str, Interpolator] = "linear",
            domain: Optional[Sequence[float]] = None, seed: RandomSource = None) -> List[Color]:
    """
    Returns a palette.

    * a preset name gives the stored palette,
    * a gradient gives ``n`` (default 5) evenly spaced samples,
    * a colour sequence is returned as is or resampled to ``n`` colours
      through a gradient built with ``colorspace`` / ``interpolation`` /
      ``domain``,
    * ``None`` picks a random preset palette.

    ``n == 1`` returns the average colour (in ``colorspace`` when given)
    instead of a single sample.

    Raises:
        InvalidInputError: On an unknown preset name or a non-positive ``n``.
    """
    if n is not None and n < 1:
        raise InvalidInputError(f"Number of colours must be positive, got {n}")
    if source is None:
        source = str(_rng(seed).choice(palettes_list()))
    if isinstance(source, str):
        data = palette_data(source)
        if data is None:
            raise InvalidInputError(f"Unknown palette preset '{source}'")
        colors = [to_color(c) for c in data]
        return colors if n is None else palette(colors, n, colorspace, interpolation, domain)

    if callable(source):
        if n == 1:
            return [average(_sample(source, 100), colorspace)]
        return _sample(source, 5 if n is None else n)

    colors = [to_color(c) for c in source]
    if n is None:
        return colors
    if n == 1:
        return [average(colors, colorspace)]
    g = gradient(colors, colorspace or "RGB", interpolation, domain)
    return _sample(g, n)


def resample(pal: Union[str, Sequence[ColorLike]], n: int, colorspace: Optional[str] = None,
             interpolation: Union[str, Interpolator] = "linear",
             domain: Optional[Sequence[float]] = None) -> List[Color]:
    """Resamples a palette to ``n`` colours through an intermediate gradient."""
    return palette(pal, n, colorspace, interpolation, domain)


_LUMA_SAMPLES: Final[int] = 200


def correct_luma(source: Union[Gradient, Sequence[ColorLike]], colorspace: str = "RGB",
                 interpolation: Union[str, Interpolator] = "linear",
                 domain: Optional[Sequence[float]] = None) -> Union[Gradient, List[Color]]:
    """
    Reparametrizes a gradient so that LAB lightness changes linearly with ``t``.

    A palette is turned into a gradient (with the given parameters),
    corrected and sampled back to the same number of colours.
    """
    if not callable(source):
        n = len(source)
        g = correct_luma(gradient(list(source), colorspace, interpolation, domain))
        return _sample(g, n)  # type: ignore[arg-type]

    g = source
    l0 = to_LAB(g(0.0)).ch0
    l1 = to_LAB(g(1.0)).ch0
    xs = np.linspace(0.0, 1.0, _LUMA_SAMPLES)
    ls = np.array([to_LAB(g(float(x))).ch0 for x in xs])
    if ls[0] > ls[-1]:
        xs, ls = xs[::-1], ls[::-1]
    # np.interp expects increasing sample points.
    ls = np.maximum.accumulate(ls)

    def corrected(t: float) -> Color:
        return g(float(np.interp(lerp_scalar(l0, l1, constrain(t, 0.0, 1.0)), ls, xs)))
    return corrected


# =============================================================================
# 6. RANDOM COLOURS & THEMES
# =============================================================================

# thi.ng colour themes: (L range, C range) in normalized LCH.
THEME_PRESETS: Final[Dict[str, Tuple[Tuple[float, float], Tuple[float, float]]]] = {
    "intense-light": ((204.0, 255.0), (229.5, 255.0)),
    "intense-dark": ((51.0, 89.25), (229.5, 255.0)),
    "light": ((229.5, 255.0), (76.5, 178.5)),
    "dark": ((38.25, 102.0), (178.5, 255.0)),
    "bright": ((204.0, 255.0), (191.25, 242.25)),
    "weak": ((178.5, 255.0), (38.25, 76.5)),
    "neutral": ((76.5, 178.5), (63.75, 89.25)),
    "fresh": ((204.0, 255.0), (102.0, 204.0)),
    "soft": ((153.0, 229.5), (51.0, 76.5)),
    "hard": ((102.0, 255.0), (216.75, 242.25)),
    "warm": ((102.0, 229.5), (153.0, 229.5)),
    "cool": ((229.5, 255.0), (12.75, 51.0)),
    "all": ((0.0, 255.0), (0.0, 255.0)),
    "gray-light": ((178.5, 255.0), (0.0, 0.0)),
    "gray-dark": ((0.0, 76.5), (0.0, 0.0)),
    "gray": ((76.5, 178.5), (0.0, 0.0)),
}

ChannelScheme = Union[None, float, Tuple[float, float]]

# Spaces picked by random_gradient; all have a smooth, well-conditioned inverse.
_RANDOM_SPACES: Final[Tuple[str, ...]] = ("RGB", "LAB", "LCH", "Oklab", "Oklch", "HSL", "HSV", "YCgCo", "Cubehelix")


def color_themes() -> List[str]:
    """Names accepted as ``theme`` by :func:`apply_theme` and :func:`random_color`."""
    return sorted(set(THEME_PRESETS) | set(paletton_presets_list()))


def _random_value(rng: np.random.Generator, scheme: ChannelScheme, value: float) -> float:
    if scheme is None:
        return value
    if isinstance(scheme, (int, float)):
        return float(rng.uniform(value - scheme, value + scheme))
    lo, hi = scheme
    return float(rng.uniform(lo, hi))


def apply_theme(c: ColorLike, theme: Union[str, Sequence[ChannelScheme]], seed: RandomSource = None) -> Color:
    """
    Random colour similar to ``c``, shaped by ``theme``.

    Work happens in normalized LCH (every channel in ``[0, 255]``).

    Args:
        c: Reference colour.
        theme: Either a name from :func:`color_themes` or one scheme per
            ``(L, C, H)`` channel: a ``(min, max)`` range, a number ``d``
            meaning ``value ± d``, or ``None`` to keep the channel.
        seed: Random source.
    """
    rng = _rng(seed)
    src = to_color(c)
    lch = get_colorspace("LCH", normalized=True)
    if isinstance(theme, str):
        if theme in THEME_PRESETS:
            (l1, l2), (c1, c2) = THEME_PRESETS[theme]
            v = lch.to(src)
            return clamp(lch.from_(Color(float(rng.uniform(l1, l2)), float(rng.uniform(c1, c2)), v.ch2, v.alpha)))
        shades = sorted(paletton("monochromatic", hue_paletton(src), theme), key=luma)
        return clamp(set_alpha(gradient(shades)(float(rng.random())), src.alpha))
    if len(theme) != 3:
        raise InvalidInputError(f"A channel theme needs three schemes (L, C, H), got {len(theme)}")
    v = lch.to(src)
    chans = [_random_value(rng, s, x) for s, x in zip(theme, v[:3])]
    return clamp(lch.from_(Color(chans[0], chans[1], chans[2], v.alpha)))


def random_color(theme: Optional[str] = None, alpha: Optional[float] = None,
                 seed: RandomSource = None) -> Color:
    """
    Random colour, optionally drawn from a colour theme.

    Without ``theme`` picks a named colour, a colour from a random palette or
    a uniform RGB value.  ``alpha`` overrides the alpha of the result.
    """
    rng = _rng(seed)
    a = 255.0 if alpha is None else float(alpha)
    if theme is None:
        r = rng.random()
        if r < 0.2:
            out = to_color(str(rng.choice(named_colors_list())))
        elif r < 0.6:
            pal = random_palette(rng)
            out = pal[int(rng.integers(len(pal)))]
        else:
            out = Color(*(float(x) for x in rng.uniform(0.0, 255.0, 3)), 255.0)
        return out if alpha is None else set_alpha(out, a)
    if theme in THEME_PRESETS:
        (l1, l2), (c1, c2) = THEME_PRESETS[theme]
        lch = get_colorspace("LCH", normalized=True)
        return clamp(lch.from_(Color(float(rng.uniform(l1, l2)), float(rng.uniform(c1, c2)),
                                     float(rng.uniform(0.0, 255.0)), a)))
    shades = paletton("monochromatic", float(rng.uniform(0.0, 360.0)), theme)
    return clamp(set_alpha(shades[int(rng.integers(len(shades)))], a))


def _random_iq(rng: np.random.Generator) -> Gradient:
    if rng.random() < 0.5:
        return iq_gradient(rng.uniform(0.2, 0.8, 3), rng.uniform(0.2, 0.8, 3),
                           rng.uniform(0.0, 2.0, 3), rng.uniform(0.0, 1.0, 3))
    preset = str(rng.choice(["pastels", "pastels-med", "full", "shiny", "dark",
                             "pastels-mid-dark", "dark-neon", "darker"]))
    pal = paletton("monochromatic", float(rng.integers(360)), preset, compl=True)
    return iq_gradient(*cosine_coefficients(pal[0], pal[5]))


def random_palette(seed: RandomSource = None) -> List[Color]:
    """Random palette from cosine gradients, presets or a Paletton scheme."""
    rng = _rng(seed)
    r = rng.random()
    if r < 0.1:
        return palette(_random_iq(rng), int(rng.integers(3, 10)))
    if r < 0.5:
        p = palette(seed=rng)
        return resample(p, 15) if len(p) > 15 else p
    if r < 0.7:
        return palette(gradient(seed=rng), int(rng.integers(3, 10)))
    kind = str(rng.choice(["monochromatic", "triad", "triad", "triad", "triad",
                           "triad", "tetrad", "tetrad", "tetrad"]))
    return paletton(kind, float(rng.uniform(0.0, 360.0)),  # type: ignore[arg-type]
                    str(rng.choice(paletton_presets_list())),
                    compl=bool(rng.random() < 0.6),
                    angle=float(rng.uniform(10.0, 90.0)),
                    adj=bool(rng.random() < 0.5))


def random_gradient(seed: RandomSource = None) -> Gradient:
    """Random gradient from cosine gradients, presets or Paletton shades."""
    rng = _rng(seed)
    colorspace = "RGB" if rng.random() < 0.5 else str(rng.choice(_RANDOM_SPACES))
    interpolation = "linear" if rng.random() < 0.5 else "cubic"
    r = rng.random()
    if r < 0.1:
        return _random_iq(rng)
    if r < 0.6:
        return gradient(palette(seed=rng), colorspace, interpolation)
    if r < 0.7:
        shades = paletton("monochromatic", float(rng.uniform(0.0, 360.0)),
                          str(rng.choice(paletton_presets_list())))
        return gradient(sorted(shades, key=luma), colorspace, interpolation)
    return gradient(seed=rng)
