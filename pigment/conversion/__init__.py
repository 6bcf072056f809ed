# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""
Color model descriptors, conversion primitives and the routing graph.

Any model converts to any reachable model through ``convert``::

    from pigment.conversion import convert

    convert.rgb.lch(10, 30, 25)
    convert.hwb.hsl.conversion   # ('hwb', 'rgb', 'hsl')
"""

from pigment.conversion.primitives import PRIMITIVES
from pigment.conversion.models import (
    HASHED_MODEL_KEYS,
    MODELS,
    SKIPPED_MODELS,
    ModelDescriptor,
    get_model,
)
from pigment.conversion.router import (
    GraphNode,
    build_graph,
    derive_bfs,
    get_conversion,
    route,
    wrap_conversion,
)
from pigment.conversion.wrappers import Converter, ConversionTable, ModelConversions, convert

__all__ = [
    "HASHED_MODEL_KEYS",
    "MODELS",
    "PRIMITIVES",
    "SKIPPED_MODELS",
    "Converter",
    "ConversionTable",
    "GraphNode",
    "ModelConversions",
    "ModelDescriptor",
    "build_graph",
    "convert",
    "derive_bfs",
    "get_conversion",
    "get_model",
    "route",
    "wrap_conversion",
]
