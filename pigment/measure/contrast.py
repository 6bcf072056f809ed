# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""
Luminance, contrast and lightness measures on sRGB channels.

References:
- Relative luminance: http://www.w3.org/TR/WCAG20/#relativeluminancedef
- Contrast ratio: http://www.w3.org/TR/WCAG20/#contrast-ratiodef
- YIQ brightness: http://24ways.org/2010/calculating-color-contrast
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class WCAGThresholds:
    """Minimum contrast ratios for each WCAG 2.0 conformance level."""

    aa: float = 4.5
    aaa: float = 7.0

    # Large text (18pt, or 14pt bold) gets relaxed minimums
    aa_large: float = 3.0
    aaa_large: float = 4.5


DEFAULT_THRESHOLDS = WCAGThresholds()

# Below this luma a color counts as dark
YIQ_DARK_THRESHOLD = 128


def _linearize(channel: float) -> float:
    chan = channel / 255
    return chan / 12.92 if chan <= 0.03928 else ((chan + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: Sequence[float]) -> float:
    """WCAG relative luminance of 0-255 sRGB channels, in [0, 1]."""
    lum = [_linearize(channel) for channel in rgb[:3]]
    return 0.2126 * lum[0] + 0.7152 * lum[1] + 0.0722 * lum[2]


def contrast_ratio(lum1: float, lum2: float) -> float:
    """(lighter + 0.05) / (darker + 0.05); ranges from 1 to 21."""
    if lum1 > lum2:
        return (lum1 + 0.05) / (lum2 + 0.05)
    return (lum2 + 0.05) / (lum1 + 0.05)


def wcag_level(
    ratio: float,
    large_text: bool = False,
    thresholds: Optional[WCAGThresholds] = None,
) -> str:
    """
    Conformance level reached by a contrast ratio.

    Returns "AAA", "AA", or "" when neither minimum is met.
    """
    if thresholds is None:
        thresholds = DEFAULT_THRESHOLDS

    if large_text:
        aaa, aa = thresholds.aaa_large, thresholds.aa_large
    else:
        aaa, aa = thresholds.aaa, thresholds.aa

    if ratio >= aaa:
        return "AAA"
    return "AA" if ratio >= aa else ""


def yiq(rgb: Sequence[float]) -> float:
    """YIQ luma of 0-255 sRGB channels."""
    return (rgb[0] * 299 + rgb[1] * 587 + rgb[2] * 114) / 1000
