# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""Perceptual measures used by Color: WCAG contrast, YIQ luma, mix weights."""

from pigment.measure.contrast import (
    DEFAULT_THRESHOLDS,
    YIQ_DARK_THRESHOLD,
    WCAGThresholds,
    contrast_ratio,
    relative_luminance,
    wcag_level,
    yiq,
)
from pigment.measure.mixing import mix_weights

__all__ = [
    "DEFAULT_THRESHOLDS",
    "YIQ_DARK_THRESHOLD",
    "WCAGThresholds",
    "contrast_ratio",
    "mix_weights",
    "relative_luminance",
    "wcag_level",
    "yiq",
]
