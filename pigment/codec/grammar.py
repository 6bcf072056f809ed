# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""
CSS color string grammars.

Recognized notations:
- ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa`` (case-insensitive)
- ``rgb()`` / ``rgba()`` with integer or percentage channels
- ``hsl()`` / ``hsla()`` with an optional ``deg`` unit on the hue
- ``hwb()`` with an optional trailing alpha
- CSS keywords and ``transparent``

Every parser returns four values (three channels plus alpha) or None.
Channels are clamped: rgb to [0, 255], percentages to [0, 100],
alpha to [0, 1]. Hues are wrapped, not clamped.
"""

from __future__ import annotations

import math
import re
from typing import Optional

import webcolors

from pigment.codec.base import ParseResult
from pigment.codec.keywords import CSS_KEYWORDS
from pigment.numeric import clamp, round_half_up


_HEX_RE = re.compile(r"#([a-f0-9]{6})([a-f0-9]{2})?", re.IGNORECASE)
_ABBR_RE = re.compile(r"#([a-f0-9]{3,4})", re.IGNORECASE)
_RGBA_RE = re.compile(
    r"rgba?\(\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*"
    r"(?:,\s*([+-]?[\d.]+)\s*)?\)"
)
_PERCENT_RE = re.compile(
    r"rgba?\(\s*([+-]?[\d.]+)%\s*,\s*([+-]?[\d.]+)%\s*,\s*([+-]?[\d.]+)%\s*"
    r"(?:,\s*([+-]?[\d.]+)\s*)?\)"
)
_KEYWORD_RE = re.compile(r"(\D+)")
_HSL_RE = re.compile(
    r"hsla?\(\s*([+-]?(?:\d*\.)?\d+)(?:deg)?\s*,\s*([+-]?[\d.]+)%\s*,"
    r"\s*([+-]?[\d.]+)%\s*(?:,\s*([+-]?[\d.]+)\s*)?\)"
)
_HWB_RE = re.compile(
    r"hwb\(\s*([+-]?\d*\.?\d+)(?:deg)?\s*,\s*([+-]?[\d.]+)%\s*,"
    r"\s*([+-]?[\d.]+)%\s*(?:,\s*([+-]?[\d.]+)\s*)?\)"
)
_FLOAT_PREFIX_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _parse_float(text: Optional[str]) -> float:
    """Leading decimal number of ``text`` (``"1.2.3"`` -> 1.2), NaN if none."""
    if text is None:
        return math.nan
    m = _FLOAT_PREFIX_RE.match(text.strip())
    return float(m.group(0)) if m else math.nan


def _hex_alpha(digits: str) -> float:
    return round_half_up(int(digits, 16) / 255 * 100) / 100


def parse_rgb(text: str) -> Optional[list]:
    """Parse hex, ``rgb()``/``rgba()`` or a keyword into ``[r, g, b, a]``."""
    if not text:
        return None

    rgb = [0, 0, 0, 1]

    if (m := _HEX_RE.fullmatch(text)):
        digits, alpha = m.group(1), m.group(2)
        rgb[:3] = webcolors.hex_to_rgb(f"#{digits}")
        if alpha:
            rgb[3] = _hex_alpha(alpha)
    elif (m := _ABBR_RE.fullmatch(text)):
        digits = m.group(1)
        rgb[:3] = webcolors.hex_to_rgb(f"#{digits[:3]}")
        if len(digits) == 4:
            rgb[3] = _hex_alpha(digits[3] * 2)
    elif (m := _RGBA_RE.fullmatch(text)):
        for i in range(3):
            rgb[i] = int(m.group(i + 1))
        if m.group(4):
            rgb[3] = _parse_float(m.group(4))
    elif (m := _PERCENT_RE.fullmatch(text)):
        for i in range(3):
            rgb[i] = round_half_up(_parse_float(m.group(i + 1)) * 2.55)
        if m.group(4):
            rgb[3] = _parse_float(m.group(4))
    elif (m := _KEYWORD_RE.search(text)):
        name = m.group(1)
        if name == "transparent":
            return [0, 0, 0, 0]
        if name not in CSS_KEYWORDS:
            return None
        return [*CSS_KEYWORDS[name], 1]
    else:
        return None

    for i in range(3):
        rgb[i] = clamp(rgb[i], 0, 255)
    rgb[3] = clamp(rgb[3], 0, 1)

    return rgb


def _parse_angular(m: re.Match) -> list:
    """Hue wrapped into [0, 360), two clamped percentages, then alpha."""
    hue = math.fmod(math.fmod(_parse_float(m.group(1)), 360) + 360, 360)
    alpha = _parse_float(m.group(4))
    return [
        hue,
        clamp(_parse_float(m.group(2)), 0, 100),
        clamp(_parse_float(m.group(3)), 0, 100),
        clamp(1 if math.isnan(alpha) else alpha, 0, 1),
    ]


def parse_hsl(text: str) -> Optional[list]:
    """Parse ``hsl()``/``hsla()`` into ``[h, s, l, a]``."""
    if not text:
        return None
    m = _HSL_RE.fullmatch(text)
    if not m:
        return None
    return _parse_angular(m)


def parse_hwb(text: str) -> Optional[list]:
    """Parse ``hwb()`` into ``[h, w, b, a]``."""
    if not text:
        return None
    m = _HWB_RE.fullmatch(text)
    if not m:
        return None
    return _parse_angular(m)


_PARSERS = {
    "hsl": parse_hsl,
    "hwb": parse_hwb,
}


def parse(text: str) -> Optional[ParseResult]:
    """
    Parse a CSS color string.

    The first three characters pick the grammar (``hsl``, ``hwb``, otherwise
    rgb). Returns None when the text matches nothing.
    """
    if not isinstance(text, str):
        return None
    model = text[:3].lower()
    if model not in _PARSERS:
        model = "rgb"
        values = parse_rgb(text)
    else:
        values = _PARSERS[model](text)

    if values is None:
        return None
    return ParseResult(model=model, values=tuple(values))
