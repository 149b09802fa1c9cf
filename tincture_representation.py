# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Representation Normalizer
=========================
Turns any supported external colour encoding into the canonical
:class:`~tincture_core.Color` and back into device-friendly encodings.

Accepted source shapes (checked in this order):

  * ``Color``               : returned unchanged.
  * ``SupportsColor``       : any object exposing ``to_color()`` (``Pixel``
    among them).
  * ``str``                 : ``#``-prefixed text is always hex.  Bare text
    is looked up as a named colour first (case-insensitive), then parsed as
    hex.  When the named-colour table cannot be read, hex-shaped text still
    parses and any other text raises ``InvalidInputError``.
  * ``int`` / integral float: packed ``0xAARRGGBB``.  A zero top byte means
    opaque, so ``0x00AABBCC`` and ``0xFFAABBCC`` are the same colour.
  * numeric sequence / ``np.ndarray``: arity decides the meaning:

      ====== ===================================
      len    meaning
      ====== ===================================
      0      opaque black
      1      gray, opaque (clamped)
      2      gray + alpha (clamped)
      3      RGB, opaque
      >= 4   first four as R, G, B, A
      ====== ===================================

Anything else raises :class:`~tincture_core.InvalidColorError`.
:func:`valid_color` is the non-raising check.
"""

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Any, Final, Optional, Protocol, Sequence, Union, runtime_checkable

import numpy as np

import tincture_presets
from tincture_core import (
    Color,
    InvalidColorError,
    InvalidInputError,
    OPAQUE,
    clamp255,
    lclamp255,
    srgb_to_linear,
)

__all__ = [
    # --- Device Pixel ---
    "Pixel",
    "SupportsColor",
    "ColorLike",

    # --- Normalization ---
    "to_color",
    "valid_color",
    "possible_color",
    "possible_palette",
    "color",
    "gray",
    "to_pixel",
    "pack",
    "format_hex",
    "parse_hex",

    # --- Channel Access ---
    "red", "green", "blue", "alpha",
    "ch0", "ch1", "ch2",
    "set_red", "set_green", "set_blue", "set_alpha",
    "set_ch0", "set_ch1", "set_ch2",

    # --- Whole-Colour Helpers ---
    "clamp",
    "lclamp",
    "scale",
    "scale_down",
    "scale_up",
    "is_black",
    "is_not_black",
    "luma",
    "relative_luma",
    "hue_polar",
]

logger = logging.getLogger(__name__)

_HEX_DIGITS: Final[frozenset] = frozenset("0123456789abcdefABCDEF")
_PACKED_LIMIT: Final[int] = 0x01000000
_BLACK: Final[Color] = Color(0.0, 0.0, 0.0, OPAQUE)

LUMA_R: Final[float] = 0.212671
LUMA_G: Final[float] = 0.715160
LUMA_B: Final[float] = 0.072169


# =============================================================================
# 1. DEVICE PIXEL
# =============================================================================

@runtime_checkable
class SupportsColor(Protocol):
    """Anything that can present itself as a canonical colour."""

    def to_color(self) -> Color: ...


@dataclass(frozen=True, slots=True)
class Pixel:
    """Integer RGBA pixel, every channel in ``[0, 255]``."""
    r: int
    g: int
    b: int
    a: int = 255

    def to_color(self) -> Color:
        return Color(float(self.r), float(self.g), float(self.b), float(self.a))


ColorLike = Union[Color, Pixel, SupportsColor, str, int, float, Sequence[float], np.ndarray]


# =============================================================================
# 2. PER-SHAPE DECODERS
# =============================================================================

def _from_packed(c: int) -> Color:
    c &= 0xFFFFFFFF
    a = 255 if (c & 0xFF000000) == 0 else (c >> 24) & 0xFF
    return Color(float((c >> 16) & 0xFF), float((c >> 8) & 0xFF), float(c & 0xFF), float(a))


def _is_hex(s: str) -> bool:
    return len(s) in (1, 2, 3, 6, 8) and _HEX_DIGITS.issuperset(s)


def parse_hex(text: str) -> Color:
    """
    Parses a CSS-style hex colour.

    Accepts 1, 2, 3, 6 or 8 hex digits, optionally prefixed with ``#``.
    Short forms expand CSS style (``"1"`` -> ``"111111"``, ``"ab"`` ->
    ``"ababab"``, ``"abc"`` -> ``"aabbcc"``).  Eight digits are read as
    ``rrggbbaa``; a trailing ``"00"`` yields the first six digits with alpha 0.

    Raises:
        InvalidInputError: On an unsupported length or a non-hex digit.
    """
    s = text[1:] if text.startswith("#") else text
    n = len(s)
    if not _is_hex(s):
        raise InvalidInputError(f"Malformed hex colour: {text!r}")

    if n == 8 and s[6:] == "00":
        rgb = _from_packed(int(s[:6], 16))
        return Color(rgb.ch0, rgb.ch1, rgb.ch2, 0.0)

    if n == 1:
        s = s * 6
    elif n == 2:
        s = s * 3
    elif n == 3:
        s = "".join(d + d for d in s)
    elif n == 8:
        s = s[6:] + s[:6]
    return _from_packed(int(s, 16))


def _from_string(text: str) -> Color:
    if not text.startswith("#"):
        try:
            named = tincture_presets.named_color(text)
        except OSError as exc:
            # Without a name table, hex-shaped text is still a colour.
            if not _is_hex(text):
                raise InvalidInputError(
                    f"Unknown colour name {text!r}: named colours unavailable ({exc})"
                ) from exc
            logger.debug("Named colours unavailable, reading %r as hex", text)
            named = None
        if named is not None:
            return to_color(named)
    return parse_hex(text)


def _from_sequence(seq: Sequence[Any]) -> Color:
    n = len(seq)
    if n == 0:
        return _BLACK
    if n == 1:
        return gray(float(seq[0]))
    if n == 2:
        return gray(float(seq[0]), float(seq[1]))
    if n == 3:
        return Color(float(seq[0]), float(seq[1]), float(seq[2]), OPAQUE)
    return Color(float(seq[0]), float(seq[1]), float(seq[2]), float(seq[3]))


def _is_sequence(c: Any) -> bool:
    return isinstance(c, (list, tuple, np.ndarray))


# =============================================================================
# 3. NORMALIZATION ENTRY POINTS
# =============================================================================

def to_color(c: ColorLike) -> Color:
    """
    Normalizes any supported encoding to a canonical :class:`Color`.

    Raises:
        InvalidColorError: If ``c`` matches none of the supported shapes.
        InvalidInputError: If ``c`` is text that is neither a known name nor
            well-formed hex.
    """
    if isinstance(c, Color):
        return c
    if isinstance(c, str):
        return _from_string(c)
    if isinstance(c, bool):
        raise InvalidColorError(f"Cannot interpret {c!r} as a colour")
    if isinstance(c, numbers.Integral):
        return _from_packed(int(c))
    if isinstance(c, numbers.Real):
        if not math.isfinite(c):
            raise InvalidColorError(f"Cannot interpret {c!r} as a colour")
        return _from_packed(int(c))
    if isinstance(c, np.ndarray):
        if c.ndim != 1 or not np.issubdtype(c.dtype, np.number):
            raise InvalidColorError(f"Expected a 1-D numeric array, got shape {c.shape} ({c.dtype})")
        return _from_sequence(c.tolist())
    if isinstance(c, (list, tuple)):
        try:
            return _from_sequence(c)
        except (TypeError, ValueError) as exc:
            raise InvalidColorError(f"Non-numeric colour components in {c!r}") from exc
    if isinstance(c, SupportsColor):
        return c.to_color()
    raise InvalidColorError(f"Cannot interpret {type(c).__name__} value {c!r} as a colour")


def valid_color(c: Any) -> Union[Color, bool]:
    """Returns the normalized colour, or ``False`` if ``c`` is not a colour. Never raises."""
    try:
        return to_color(c)
    except (InvalidColorError, InvalidInputError):
        return False


def possible_color(c: Any) -> bool:
    """
    Cheap shape check: could ``c`` be a single colour?

    True for text, for non-sequence objects exposing ``to_color()``, and for
    sequences whose first element is a number below ``0x01000000``.  The
    threshold tells a colour tuple apart from a list of packed colours.
    """
    if isinstance(c, str):
        return True
    if _is_sequence(c):
        if len(c) == 0:
            return False
        first = c[0]
        return (isinstance(first, numbers.Real) and not isinstance(first, bool)
                and int(first) < _PACKED_LIMIT)
    return isinstance(c, SupportsColor)


def possible_palette(c: Any) -> bool:
    """True for a sequence that is not itself a colour and not a gradient function."""
    return _is_sequence(c) and not possible_color(c) and not callable(c)


def color(r: float, g: float, b: float, a: float = OPAQUE) -> Color:
    """Builds a colour from channel values, clamping every channel to ``[0, 255]``."""
    return Color(clamp255(r), clamp255(g), clamp255(b), clamp255(a))


def gray(v: float, a: float = OPAQUE) -> Color:
    """Grayscale colour of intensity ``v`` (clamped)."""
    return color(v, v, v, a)


def to_pixel(c: ColorLike, a: Optional[float] = None) -> Pixel:
    """Rounds and clamps to an integer :class:`Pixel`, optionally overriding alpha."""
    v = to_color(c)
    return Pixel(lclamp255(v.ch0), lclamp255(v.ch1), lclamp255(v.ch2),
                 lclamp255(v.alpha if a is None else a))


def pack(c: ColorLike) -> int:
    """Packs to a signed 32-bit ``0xAARRGGBB`` integer."""
    v = to_color(c)
    packed = ((lclamp255(v.alpha) << 24) | (lclamp255(v.ch0) << 16)
              | (lclamp255(v.ch1) << 8) | lclamp255(v.ch2))
    return packed - 0x100000000 if packed & 0x80000000 else packed


def format_hex(c: ColorLike) -> str:
    """``#rrggbb``, or ``#rrggbbaa`` when alpha is below 255."""
    v = to_color(c)
    s = "#%02x%02x%02x" % (lclamp255(v.ch0), lclamp255(v.ch1), lclamp255(v.ch2))
    a = lclamp255(v.alpha)
    return s + "%02x" % a if a < 255 else s


# =============================================================================
# 4. CHANNEL ACCESS
# =============================================================================

def red(c: ColorLike) -> float:
    return to_color(c).ch0


def green(c: ColorLike) -> float:
    return to_color(c).ch1


def blue(c: ColorLike) -> float:
    return to_color(c).ch2


def alpha(c: ColorLike) -> float:
    return to_color(c).alpha


ch0 = red
ch1 = green
ch2 = blue


def set_alpha(c: ColorLike, a: float) -> Color:
    return to_color(c)._replace(alpha=float(a))


def set_red(c: ColorLike, v: float) -> Color:
    return to_color(c)._replace(ch0=float(v))


def set_green(c: ColorLike, v: float) -> Color:
    return to_color(c)._replace(ch1=float(v))


def set_blue(c: ColorLike, v: float) -> Color:
    return to_color(c)._replace(ch2=float(v))


set_ch0 = set_red
set_ch1 = set_green
set_ch2 = set_blue


# =============================================================================
# 5. WHOLE-COLOUR HELPERS
# =============================================================================

def clamp(c: ColorLike) -> Color:
    """Clamps all four channels to ``[0, 255]``."""
    v = to_color(c)
    return Color(clamp255(v.ch0), clamp255(v.ch1), clamp255(v.ch2), clamp255(v.alpha))


def lclamp(c: ColorLike) -> Color:
    """Rounds and clamps all four channels to ``[0, 255]``."""
    v = to_color(c)
    return Color(float(lclamp255(v.ch0)), float(lclamp255(v.ch1)),
                 float(lclamp255(v.ch2)), float(lclamp255(v.alpha)))


def scale(c: ColorLike, factor: float, scale_alpha: bool = False) -> Color:
    """Multiplies the colour channels by ``factor``; alpha only when ``scale_alpha``."""
    v = to_color(c)
    return Color(factor * v.ch0, factor * v.ch1, factor * v.ch2,
                 factor * v.alpha if scale_alpha else v.alpha)


def scale_down(c: ColorLike, scale_alpha: bool = False) -> Color:
    return scale(c, 1.0 / 255.0, scale_alpha)


def scale_up(c: ColorLike, scale_alpha: bool = False) -> Color:
    return scale(c, 255.0, scale_alpha)


def is_black(c: ColorLike) -> bool:
    v = clamp(c)
    return v.ch0 == 0.0 and v.ch1 == 0.0 and v.ch2 == 0.0


def is_not_black(c: ColorLike) -> bool:
    return not is_black(c)


def _luma(r: float, g: float, b: float) -> float:
    return LUMA_R * r + LUMA_G * g + LUMA_B * b


def luma(c: ColorLike) -> float:
    """Luma of the (gamma-encoded) RGB channels, same scale as the input."""
    v = to_color(c)
    return _luma(v.ch0, v.ch1, v.ch2)


def relative_luma(c: ColorLike) -> float:
    """Luma of the linearized channels, in ``[0, 255]`` for in-gamut input."""
    v = to_color(c)
    return _luma(255.0 * srgb_to_linear(v.ch0 / 255.0),
                 255.0 * srgb_to_linear(v.ch1 / 255.0),
                 255.0 * srgb_to_linear(v.ch2 / 255.0))


def hue_polar(c: ColorLike) -> float:
    """Hue angle in ``[0, 360)`` from the polar (circular) projection of RGB."""
    v = to_color(c)
    a = 0.5 * (v.ch0 + v.ch0 - v.ch1 - v.ch2)
    b = 0.8660254037844386 * (v.ch1 - v.ch2)
    h = math.degrees(math.atan2(b, a))
    return h + 360.0 if h < 0.0 else h
