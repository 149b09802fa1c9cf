# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Preset Tables
=============
Lazily loaded, process-wide preset tables.

Three read-only JSON resources back the named-colour lookup and the
palette/gradient presets:

  * ``named_colors.json``: ``{name: "#rrggbb"}``
  * ``palettes.json``    : ``{set: {name: [colour, ...]}}``
  * ``gradients.json``   : ``{set: {name: [colour, ...] | {"colors": [...],
    "positions": [...]}}}``

Palette and gradient presets are addressed as ``"set:name"`` (for example
``"brewer:Set1"``).  Each resource is parsed on first access and kept for the
lifetime of the process.  Loading is guarded by a re-entrant lock so that
concurrent first access converges on a single table.

The resource directory defaults to the bundled :mod:`tincture_data` package and
can be redirected with the ``TINCTURE_PRESETS_DIR`` environment variable or
:func:`set_presets_dir`.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, Final, List, Optional, Sequence, Tuple, Union

__all__ = [
    "PRESETS_ENV_VAR",
    "PresetStore",
    "get_store",
    "set_presets_dir",
    "named_color",
    "named_colors_list",
    "palette_data",
    "palettes_list",
    "gradient_data",
    "gradients_list",
]

logger = logging.getLogger(__name__)

PRESETS_ENV_VAR: Final[str] = "TINCTURE_PRESETS_DIR"
_DATA_PACKAGE: Final[str] = "tincture_data"

_NAMED_FILE: Final[str] = "named_colors.json"
_PALETTES_FILE: Final[str] = "palettes.json"
_GRADIENTS_FILE: Final[str] = "gradients.json"

RawColor = Union[str, int, Sequence[float]]
GradientData = Tuple[List[RawColor], Optional[List[float]]]


def _default_dir() -> Path:
    env = os.environ.get(PRESETS_ENV_VAR)
    return Path(env) if env else Path(str(files(_DATA_PACKAGE)))


class PresetStore:
    """
    Compute-once cache over the preset JSON resources.

    All public accessors are safe to call from several threads.  Tables are
    never mutated after they are built; :meth:`reset` drops them so they are
    rebuilt from the (possibly new) directory on next access.
    """

    __slots__ = ("_dir", "_lock", "_named", "_palettes", "_gradients")

    def __init__(self, directory: Optional[Union[str, Path]] = None) -> None:
        self._dir: Path = Path(directory) if directory is not None else _default_dir()
        self._lock = threading.RLock()
        self._named: Optional[Dict[str, RawColor]] = None
        self._palettes: Optional[Dict[str, List[RawColor]]] = None
        self._gradients: Optional[Dict[str, Any]] = None

    @property
    def directory(self) -> Path:
        return self._dir

    def reset(self, directory: Optional[Union[str, Path]] = None) -> None:
        """Drops every cached table, optionally switching the resource directory."""
        with self._lock:
            if directory is not None:
                self._dir = Path(directory)
            self._named = None
            self._palettes = None
            self._gradients = None

    # -- loading -----------------------------------------------------------
    def _read(self, filename: str) -> Any:
        path = self._dir / filename
        logger.debug("Loading preset resource %s", path)
        with path.open("r", encoding="utf-8") as fh:
            return json.load(fh)

    @staticmethod
    def _flatten(sets: Dict[str, Dict[str, Any]], filename: str) -> Dict[str, Any]:
        """Turns ``{set: {name: data}}`` into ``{"set:name": data}``."""
        flat: Dict[str, Any] = {}
        for set_name, entries in sets.items():
            if not isinstance(entries, dict):
                raise ValueError(f"{filename}: set '{set_name}' must map names to data")
            for name, data in entries.items():
                flat[f"{set_name}:{name}"] = data
        return flat

    def named(self) -> Dict[str, RawColor]:
        table = self._named
        if table is None:
            with self._lock:
                if self._named is None:
                    raw = self._read(_NAMED_FILE)
                    self._named = {str(k).lower(): v for k, v in raw.items()}
                    logger.debug("Loaded %d named colours", len(self._named))
                table = self._named
        return table

    def palettes(self) -> Dict[str, List[RawColor]]:
        table = self._palettes
        if table is None:
            with self._lock:
                if self._palettes is None:
                    self._palettes = self._flatten(self._read(_PALETTES_FILE), _PALETTES_FILE)
                    logger.debug("Loaded %d palette presets", len(self._palettes))
                table = self._palettes
        return table

    def gradients(self) -> Dict[str, Any]:
        table = self._gradients
        if table is None:
            with self._lock:
                if self._gradients is None:
                    self._gradients = self._flatten(self._read(_GRADIENTS_FILE), _GRADIENTS_FILE)
                    logger.debug("Loaded %d gradient presets", len(self._gradients))
                table = self._gradients
        return table


_STORE = PresetStore()


def get_store() -> PresetStore:
    """Returns the process-wide preset store."""
    return _STORE


def set_presets_dir(directory: Optional[Union[str, Path]] = None) -> None:
    """
    Points the process-wide store at another resource directory.

    Passing ``None`` restores the default (``TINCTURE_PRESETS_DIR`` or the
    bundled :mod:`tincture_data` package).  Cached tables are dropped either way.
    """
    _STORE.reset(directory if directory is not None else _default_dir())


# -- module-level accessors -----------------------------------------------

def named_color(name: str) -> Optional[RawColor]:
    """Raw definition of a named colour, or ``None`` when unknown. Case-insensitive."""
    return _STORE.named().get(name.lower())


def named_colors_list() -> List[str]:
    return sorted(_STORE.named())


def palette_data(key: str) -> Optional[List[RawColor]]:
    return _STORE.palettes().get(key)


def palettes_list() -> List[str]:
    return sorted(_STORE.palettes())


def gradient_data(key: str) -> Optional[GradientData]:
    """Colours and optional positions for a gradient preset, or ``None``."""
    data = _STORE.gradients().get(key)
    if data is None:
        return None
    if isinstance(data, dict):
        return list(data["colors"]), list(data["positions"]) if "positions" in data else None
    return list(data), None


def gradients_list() -> List[str]:
    return sorted(_STORE.gradients())
