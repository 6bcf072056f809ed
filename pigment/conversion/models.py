# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""
Model descriptors: channel count and channel labels per color model.

Declaration order is significant. It is the order conversion methods are
generated in and the order the router builds its graph nodes in.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class ModelDescriptor:
    """Static description of one color model."""

    name: str
    labels: tuple[str, ...]
    # True when the single channel holds text (hex digits, keyword names)
    textual: bool = False

    def __post_init__(self):
        if not self.labels:
            raise ValueError(f"missing channel labels property: {self.name}")

    @property
    def channels(self) -> int:
        return len(self.labels)


MODELS = MappingProxyType({
    d.name: d
    for d in (
        ModelDescriptor("rgb", ("r", "g", "b")),
        ModelDescriptor("hsl", ("h", "s", "l")),
        ModelDescriptor("hsv", ("h", "s", "v")),
        ModelDescriptor("hwb", ("h", "w", "b")),
        ModelDescriptor("cmyk", ("c", "m", "y", "k")),
        ModelDescriptor("xyz", ("x", "y", "z")),
        ModelDescriptor("lab", ("l", "a", "b")),
        ModelDescriptor("lch", ("l", "c", "h")),
        ModelDescriptor("hex", ("hex",), textual=True),
        ModelDescriptor("keyword", ("keyword",), textual=True),
        ModelDescriptor("ansi16", ("ansi16",)),
        ModelDescriptor("ansi256", ("ansi256",)),
        ModelDescriptor("hcg", ("h", "c", "g")),
        ModelDescriptor("apple", ("r16", "g16", "b16")),
        ModelDescriptor("gray", ("gray",)),
    )
})

# Accepted as a model option but treated as "no explicit model", and never
# given a conversion method (gray would also clash with the hcg accessor).
SKIPPED_MODELS = frozenset({"keyword", "gray", "hex"})

# Sorted labels joined -> model, e.g. "bgr" -> "rgb", "b16g16r16" -> "apple".
HASHED_MODEL_KEYS = MappingProxyType({
    "".join(sorted(d.labels)): name for name, d in MODELS.items()
})


def get_model(name: str) -> ModelDescriptor:
    """Look up a model descriptor, raising ValueError for unknown names."""
    try:
        return MODELS[name]
    except KeyError:
        raise ValueError(f"Unknown model: {name}") from None
