# -*- coding: utf-8 -*-
"""
Tincture: Representing and transforming colour across many colour spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Bundled Presets
===============
Package holding the bundled preset JSON resources read by
:mod:`tincture_presets`.
"""
