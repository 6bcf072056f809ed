# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""
The Color value type and its channel registry.

Colors are immutable (frozen dataclass). Setters and manipulations return a
new Color; channel values are range-limited every time one is built.
"""

from pigment.schema.channels import (
    CHANNELS,
    CHANNELS_BY_NAME,
    LIMITERS,
    ChannelSpec,
    apply_limiters,
    clamp_100,
    clamp_255,
    wrap_hue,
)
from pigment.schema.color_value import Color

__all__ = [
    "CHANNELS",
    "CHANNELS_BY_NAME",
    "LIMITERS",
    "ChannelSpec",
    "Color",
    "apply_limiters",
    "clamp_100",
    "clamp_255",
    "wrap_hue",
]
