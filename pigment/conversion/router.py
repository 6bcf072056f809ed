# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""
Conversion graph router.

For a source model, a breadth-first search over the primitive edges finds
the shortest hop path to every other model. The primitives along each path
are composed into one function carrying a ``conversion`` attribute that
names the path, e.g. ``("rgb", "lab", "lch")``.

Tables are built once per source model and cached for the life of the
process. Models with no path from the source are left out of the table.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from functools import cache
from types import MappingProxyType
from typing import Callable, Optional

from pigment.conversion.primitives import PRIMITIVES
from pigment.conversion.models import MODELS, get_model

logger = logging.getLogger(__name__)


@dataclass
class GraphNode:
    """BFS bookkeeping for one model."""

    distance: int = -1
    parent: Optional[str] = None


def build_graph() -> dict[str, GraphNode]:
    """One unvisited node per known model."""
    return {model: GraphNode() for model in MODELS}


def derive_bfs(source: str) -> dict[str, GraphNode]:
    """Hop distance and parent of every model, searching out from ``source``."""
    graph = build_graph()
    queue = deque([source])
    graph[source].distance = 0

    while queue:
        current = queue.popleft()
        for adjacent in PRIMITIVES.get(current, {}):
            node = graph[adjacent]
            if node.distance == -1:
                node.distance = graph[current].distance + 1
                node.parent = current
                queue.append(adjacent)

    return graph


def _compose(steps: list[Callable]) -> Callable:
    def converted(values):
        for step in steps:
            values = step(values)
        return values

    return converted


def wrap_conversion(target: str, graph: dict[str, GraphNode]) -> Callable:
    """Compose the primitives on the parent chain ending at ``target``."""
    path = [target]
    steps = []
    current = target
    while graph[current].parent is not None:
        parent = graph[current].parent
        steps.append(PRIMITIVES[parent][current])
        path.append(parent)
        current = parent

    fn = _compose(steps[::-1])
    fn.conversion = tuple(path[::-1])
    return fn


@cache
def route(source: str) -> MappingProxyType:
    """
    Conversion functions from ``source`` to every reachable model.

    Raises ValueError for an unknown source model.
    """
    get_model(source)
    graph = derive_bfs(source)

    conversions = {}
    for target, node in graph.items():
        if node.parent is None:
            continue
        conversions[target] = wrap_conversion(target, graph)

    logger.debug("[Route] Built %d conversions from %s", len(conversions), source)
    return MappingProxyType(conversions)


def get_conversion(source: str, target: str) -> Callable:
    """Composed function from ``source`` to ``target``; ValueError if none exists."""
    conversions = route(source)
    if target not in conversions:
        get_model(target)
        raise ValueError(f"No conversion path from {source} to {target}")
    return conversions[target]
