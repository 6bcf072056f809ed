# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""
String codec for CSS color notations.

The Color type talks to this package through two calls only::

    parse("hsla(120, 50%, 60%, 0.4)")   # ParseResult(model='hsl', values=(...))
    format("rgb", [10, 30, 25, 0.4])    # 'rgba(10, 30, 25, 0.4)'
"""

from pigment.codec.base import DIRECT_MODELS, ParseResult, StringFormat
from pigment.codec.grammar import parse, parse_hsl, parse_hwb, parse_rgb
from pigment.codec.keywords import CSS_KEYWORDS, REVERSE_KEYWORDS
from pigment.codec.writers import (
    format_color,
    to_hex,
    to_hsl,
    to_hwb,
    to_keyword,
    to_rgb,
    to_rgb_percent,
)

format = format_color

__all__ = [
    "CSS_KEYWORDS",
    "DIRECT_MODELS",
    "REVERSE_KEYWORDS",
    "ParseResult",
    "StringFormat",
    "format",
    "format_color",
    "parse",
    "parse_hsl",
    "parse_hwb",
    "parse_rgb",
    "to_hex",
    "to_hsl",
    "to_hwb",
    "to_keyword",
    "to_rgb",
    "to_rgb_percent",
]
