# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for the project metadata.
"""

import __about__


def test_metadata_summary():
    meta = __about__.metadata_summary()
    assert meta["title"] == "Tincture"
    assert meta["version"] == __about__.__version__
    assert meta["license"] == "LGPL-3.0-or-later"
