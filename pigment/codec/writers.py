# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""
Writers that turn channel values into CSS color strings.

Inputs are ``[c0, c1, c2]`` or ``[c0, c1, c2, alpha]``; alpha is only
written when present and not exactly 1.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, Union

from pigment.codec.base import StringFormat
from pigment.codec.keywords import REVERSE_KEYWORDS
from pigment.numeric import format_number, round_half_up


def _has_alpha(values: Sequence) -> bool:
    return len(values) >= 4 and values[3] != 1


def _hex_byte(value) -> str:
    return f"{round_half_up(value) & 0xFF:02X}"


def to_hex(values: Sequence) -> str:
    """``#RRGGBB``, plus an ``AA`` byte when alpha < 1."""
    text = "#" + "".join(_hex_byte(v) for v in values[:3])
    if len(values) >= 4 and values[3] < 1:
        text += _hex_byte(values[3] * 255)
    return text


def to_rgb(values: Sequence) -> str:
    r, g, b = (format_number(round_half_up(v)) for v in values[:3])
    if _has_alpha(values):
        return f"rgba({r}, {g}, {b}, {format_number(values[3])})"
    return f"rgb({r}, {g}, {b})"


def to_rgb_percent(values: Sequence) -> str:
    r, g, b = (format_number(round_half_up(v / 255 * 100)) for v in values[:3])
    if _has_alpha(values):
        return f"rgba({r}%, {g}%, {b}%, {format_number(values[3])})"
    return f"rgb({r}%, {g}%, {b}%)"


def to_hsl(values: Sequence) -> str:
    h, s, l = (format_number(v) for v in values[:3])
    if _has_alpha(values):
        return f"hsla({h}, {s}%, {l}%, {format_number(values[3])})"
    return f"hsl({h}, {s}%, {l}%)"


def to_hwb(values: Sequence) -> str:
    h, w, b = (format_number(v) for v in values[:3])
    alpha = f", {format_number(values[3])}" if _has_alpha(values) else ""
    return f"hwb({h}, {w}%, {b}%{alpha})"


def to_keyword(values: Sequence) -> Optional[str]:
    """Exact CSS keyword for an rgb triplet, or None."""
    return REVERSE_KEYWORDS.get(tuple(values[:3]))


_WRITERS: dict[StringFormat, Callable[[Sequence], Optional[str]]] = {
    StringFormat.RGB: to_rgb,
    StringFormat.RGB_PERCENT: to_rgb_percent,
    StringFormat.HSL: to_hsl,
    StringFormat.HWB: to_hwb,
    StringFormat.HEX: to_hex,
    StringFormat.KEYWORD: to_keyword,
}


def format_color(fmt: Union[str, StringFormat], values: Sequence) -> Optional[str]:
    """
    Render ``values`` in the notation named by ``fmt``.

    ``fmt`` is a StringFormat or its value (``"rgb"``, ``"rgb.percent"``,
    ``"hsl"``, ``"hwb"``, ``"hex"``, ``"keyword"``).
    """
    try:
        fmt = StringFormat(fmt)
    except ValueError:
        raise ValueError(f"No string format for model: {fmt}") from None
    return _WRITERS[fmt](list(values))
