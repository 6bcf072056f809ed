# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""
CSS named colors, in alphabetical order.

Names and triplets come from webcolors' CSS3 definitions. CSS Color
Module Level 4 adds ``rebeccapurple``, which the CSS3 list predates.

Order matters: nearest-keyword lookups break distance ties by table order,
and exact reverse lookups resolve duplicate triplets (aqua/cyan,
fuchsia/magenta, gray/grey) to the name that appears last.
"""

from __future__ import annotations

from types import MappingProxyType

import webcolors


# Level 4 additions missing from the CSS3 list
_LEVEL4_KEYWORDS = {
    "rebeccapurple": (102, 51, 153),
}


def _build_keywords() -> dict[str, tuple[int, int, int]]:
    table = {
        name: tuple(webcolors.name_to_rgb(name, spec=webcolors.CSS3))
        for name in webcolors.names(webcolors.CSS3)
    }
    for name, rgb in _LEVEL4_KEYWORDS.items():
        table.setdefault(name, rgb)
    return {name: table[name] for name in sorted(table)}


CSS_KEYWORDS = MappingProxyType(_build_keywords())

# (r, g, b) -> name; later names overwrite earlier ones.
REVERSE_KEYWORDS = MappingProxyType({rgb: name for name, rgb in CSS_KEYWORDS.items()})
