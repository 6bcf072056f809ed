# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""
Pigment -- immutable color values with any-to-any model conversion.

Quick start::

    from pigment import Color

    c = Color("rgb(10, 30, 25)")
    c.hex()                  # '#0A1E19'
    c.hsl().string()         # 'hsl(165, 50%, 7.8%)'
    c.contrast(Color("white"))

Conversions are also usable without Color::

    from pigment import convert

    convert.rgb.lch(10, 30, 25)
"""

from __future__ import annotations

__version__ = "1.0.0"

from pigment.conversion import (
    HASHED_MODEL_KEYS,
    MODELS,
    SKIPPED_MODELS,
    convert,
    route,
)
from pigment.measure import WCAGThresholds
from pigment.schema import Color

hashed_model_keys = HASHED_MODEL_KEYS

__all__ = [
    # Core API
    "Color",
    "convert",
    "route",
    # Model tables
    "MODELS",
    "SKIPPED_MODELS",
    "hashed_model_keys",
    # Config
    "WCAGThresholds",
]
