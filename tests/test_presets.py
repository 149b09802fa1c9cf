# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for the lazily loaded preset store.
"""

import json
from concurrent.futures import ThreadPoolExecutor
from importlib.resources import files
from pathlib import Path

import pytest

import tincture_presets
from tincture_presets import (
    PresetStore,
    gradient_data,
    named_color,
    named_colors_list,
    palette_data,
    palettes_list,
    set_presets_dir,
)
from tincture_core import InvalidInputError
from tincture_representation import to_color, valid_color


@pytest.fixture
def custom_presets(tmp_path):
    (tmp_path / "named_colors.json").write_text(json.dumps({"Ink": "#102030"}), encoding="utf-8")
    (tmp_path / "palettes.json").write_text(json.dumps({"mine": {"duo": ["#000000", "#ffffff"]}}),
                                            encoding="utf-8")
    (tmp_path / "gradients.json").write_text(json.dumps({
        "mine": {
            "plain": ["#000000", "#ffffff"],
            "placed": {"colors": ["#000000", "#ff0000", "#ffffff"], "positions": [0.0, 0.2, 1.0]},
        }
    }), encoding="utf-8")
    set_presets_dir(tmp_path)
    yield tmp_path
    set_presets_dir(None)


def test_bundled_named_colours():
    assert named_color("black") == "#000000"
    assert named_color("BLACK") == "#000000"
    assert named_color("no-such-colour") is None
    assert "rebeccapurple" in named_colors_list()


def test_bundled_palette_keys_are_set_qualified():
    keys = palettes_list()
    assert keys == sorted(keys)
    assert all(":" in k for k in keys)
    assert palette_data("nope:nope") is None


def test_store_redirect(custom_presets):
    assert named_color("ink") == "#102030"
    assert to_color("ink") == (0x10, 0x20, 0x30, 255.0)
    assert palettes_list() == ["mine:duo"]
    assert gradient_data("mine:plain") == (["#000000", "#ffffff"], None)
    assert gradient_data("mine:placed") == (["#000000", "#ff0000", "#ffffff"], [0.0, 0.2, 1.0])


def test_store_reset_restores_default(custom_presets):
    set_presets_dir(None)
    assert named_color("black") == "#000000"
    assert named_color("ink") is None


def test_malformed_set_raises(tmp_path):
    (tmp_path / "palettes.json").write_text(json.dumps({"broken": ["#000000"]}), encoding="utf-8")
    store = PresetStore(tmp_path)
    with pytest.raises(ValueError):
        store.palettes()


def test_missing_resource_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        PresetStore(tmp_path).named()


def test_concurrent_first_access_builds_one_table(tmp_path):
    (tmp_path / "named_colors.json").write_text(json.dumps({"a": "#010101"}), encoding="utf-8")
    store = PresetStore(tmp_path)
    with ThreadPoolExecutor(max_workers=8) as pool:
        tables = list(pool.map(lambda _: store.named(), range(64)))
    assert all(t is tables[0] for t in tables)


def test_environment_variable_selects_directory(tmp_path, monkeypatch):
    (tmp_path / "named_colors.json").write_text(json.dumps({"env": "#abcdef"}), encoding="utf-8")
    monkeypatch.setenv(tincture_presets.PRESETS_ENV_VAR, str(tmp_path))
    assert PresetStore().named() == {"env": "#abcdef"}


def test_default_directory_is_the_bundled_data_package(monkeypatch):
    monkeypatch.delenv(tincture_presets.PRESETS_ENV_VAR, raising=False)
    bundled = Path(str(files("tincture_data")))
    store = PresetStore()
    assert store.directory == bundled
    for name in ("named_colors.json", "palettes.json", "gradients.json"):
        assert (bundled / name).is_file()
    assert store.named()["black"] == "#000000"


@pytest.fixture
def empty_presets(tmp_path):
    set_presets_dir(tmp_path)
    yield tmp_path
    set_presets_dir(None)


def test_hex_text_parses_without_named_colours(empty_presets):
    assert to_color("abc") == (0xAA, 0xBB, 0xCC, 255.0)
    assert to_color("ff0000") == (255.0, 0.0, 0.0, 255.0)


def test_names_without_named_colours_are_invalid_input(empty_presets):
    with pytest.raises(InvalidInputError):
        to_color("red")


def test_valid_color_survives_missing_named_colours(empty_presets):
    assert valid_color("red") is False
    assert valid_color("ff0000") == (255.0, 0.0, 0.0, 255.0)
