# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""
Named channel accessors and the per-model limiter table.

Each ChannelSpec binds a name (``red``, ``hue``, ``cyan``...) to a channel
index in one or more models, with an optional limit function. Registration
does two things:

- installs the limit into LIMITERS for every listed model, so any Color
  built in that model is range-limited at construction;
- produces an accessor bound to the FIRST listed model. ``hue`` is listed
  under hsl, hsv, hwb and hcg but always reads and writes through hsl.

Accessors are plain functions taking the Color as ``self``::

    color.red()        # getter
    color.red(300)     # new Color with red clamped to 255
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Optional

from pigment.conversion.models import MODELS
from pigment.numeric import clamp

logger = logging.getLogger(__name__)

# Marks "no argument given" for getter/setter methods
UNSET: Any = object()

Limit = Callable[[Any], Any]


def _maxfn(upper: float) -> Limit:
    def limit(value):
        return clamp(value, 0, upper)

    limit.__name__ = f"clamp_{upper}"
    return limit


clamp_100 = _maxfn(100)
clamp_255 = _maxfn(255)


def wrap_hue(value: float) -> float:
    """Wrap any angle into [0, 360). Integer angles stay integers."""
    if isinstance(value, int):
        return value % 360
    return math.fmod(math.fmod(value, 360) + 360, 360)


@dataclass(frozen=True)
class ChannelSpec:
    """One named channel: where it lives and how it is range-limited."""

    name: str
    models: tuple[str, ...]
    index: int
    limit: Optional[Limit] = None

    @property
    def model(self) -> str:
        """The model the accessor converts through."""
        return self.models[0]


CHANNELS: tuple[ChannelSpec, ...] = (
    # rgb
    ChannelSpec("red", ("rgb",), 0, clamp_255),
    ChannelSpec("green", ("rgb",), 1, clamp_255),
    ChannelSpec("blue", ("rgb",), 2, clamp_255),
    # shared hue
    ChannelSpec("hue", ("hsl", "hsv", "hwb", "hcg"), 0, wrap_hue),
    # hsl
    ChannelSpec("saturationl", ("hsl",), 1, clamp_100),
    ChannelSpec("lightness", ("hsl",), 2, clamp_100),
    # hsv
    ChannelSpec("saturationv", ("hsv",), 1, clamp_100),
    ChannelSpec("value", ("hsv",), 2, clamp_100),
    # hwb
    ChannelSpec("white", ("hwb",), 1, clamp_100),
    ChannelSpec("wblack", ("hwb",), 2, clamp_100),
    # cmyk
    ChannelSpec("cyan", ("cmyk",), 0, clamp_100),
    ChannelSpec("magenta", ("cmyk",), 1, clamp_100),
    ChannelSpec("yellow", ("cmyk",), 2, clamp_100),
    ChannelSpec("black", ("cmyk",), 3, clamp_100),
    # hcg
    ChannelSpec("chroma", ("hcg",), 1, clamp_100),
    ChannelSpec("gray", ("hcg",), 2, clamp_100),
    # lab; a and b are unbounded
    ChannelSpec("l", ("lab",), 0, clamp_100),
    ChannelSpec("a", ("lab",), 1),
    ChannelSpec("b", ("lab",), 2),
    # xyz
    ChannelSpec("x", ("xyz",), 0, clamp_100),
    ChannelSpec("y", ("xyz",), 1, clamp_100),
    ChannelSpec("z", ("xyz",), 2, clamp_100),
)

CHANNELS_BY_NAME = MappingProxyType({spec.name: spec for spec in CHANNELS})


def _build_limiters() -> MappingProxyType:
    limiters: dict[str, list[Optional[Limit]]] = {}
    for spec in CHANNELS:
        for model in spec.models:
            slots = limiters.setdefault(model, [None] * MODELS[model].channels)
            slots[spec.index] = spec.limit

    logger.debug(
        "[Channels] Registered %d channels, limiting %d models",
        len(CHANNELS),
        len(limiters),
    )
    return MappingProxyType({model: tuple(slots) for model, slots in limiters.items()})


# model -> per-index limit (or None), applied by every Color construction
LIMITERS = _build_limiters()


def apply_limiters(model: str, color: list) -> list:
    """Run the model's limiters over ``color`` in index order, in place."""
    for index, limit in enumerate(LIMITERS.get(model, ())):
        if limit is not None:
            color[index] = limit(color[index])
    return color


def get_channel_spec(name: str) -> ChannelSpec:
    try:
        return CHANNELS_BY_NAME[name]
    except KeyError:
        raise ValueError(f"Unknown channel: {name}") from None


def make_accessor(spec: ChannelSpec) -> Callable:
    """Getter/setter method for one channel, bound to ``spec.model``."""
    model = spec.model
    labels = MODELS[model].labels
    index = spec.index
    limit = spec.limit

    def accessor(self, value=UNSET):
        if value is UNSET:
            channel = getattr(self, model)().color[index]
            return limit(channel) if limit else channel

        if limit:
            value = limit(value)

        color = list(getattr(self, model)().color)
        color[index] = value
        obj = dict(zip(labels, color))

        if self.valpha != 1:
            obj["alpha"] = self.valpha

        return type(self)(obj, model)

    accessor.__name__ = spec.name
    accessor.__qualname__ = f"Color.{spec.name}"
    accessor.__doc__ = (
        f"Get the {spec.name} channel ({model}[{index}]), or return a new "
        f"Color with it replaced."
    )
    return accessor
