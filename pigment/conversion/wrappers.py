# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""
Callable wrappers around routed conversions, and the ``convert`` table.

Usage::

    convert.rgb.hsl(140, 200, 100)        # [96, 48, 59]   rounded
    convert.rgb.hsl.raw([140, 200, 100])  # [96.0, 47.61..., 58.82...]
    convert.rgb.lch.conversion            # ('rgb', 'lab', 'lch')
    convert["lch"]["hsl"]                 # mapping access works too

Rounding only happens on the outermost call, never between steps.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Iterator, Optional

import numpy as np

from pigment.conversion.models import MODELS, ModelDescriptor
from pigment.conversion.router import route
from pigment.numeric import round_half_up


def _unpack(args: tuple) -> Optional[Any]:
    """Accept spread channels or one list/tuple/array of channels."""
    if not args or args[0] is None:
        return None
    if len(args) == 1 and isinstance(args[0], (list, tuple, np.ndarray)):
        return args[0]
    return args


class Converter:
    """A routed conversion. Calling it rounds list results to integers."""

    __slots__ = ("_fn", "conversion")

    def __init__(self, fn: Callable):
        self._fn = fn
        self.conversion: tuple[str, ...] = fn.conversion

    def raw(self, *args: Any) -> Any:
        """Unrounded result; None in, None out."""
        values = _unpack(args)
        if values is None:
            return None
        return self._fn(values)

    def __call__(self, *args: Any) -> Any:
        result = self.raw(*args)
        if isinstance(result, list):
            return [round_half_up(v) for v in result]
        return result

    def __repr__(self) -> str:
        return f"Converter({' -> '.join(self.conversion)})"


class ModelConversions(Mapping):
    """Every conversion out of one model, by target name or attribute."""

    def __init__(self, descriptor: ModelDescriptor):
        self.descriptor = descriptor
        self._converters = {
            target: Converter(fn) for target, fn in route(descriptor.name).items()
        }

    @property
    def channels(self) -> int:
        return self.descriptor.channels

    @property
    def labels(self) -> tuple[str, ...]:
        return self.descriptor.labels

    def __getitem__(self, target: str) -> Converter:
        return self._converters[target]

    def __getattr__(self, target: str) -> Converter:
        try:
            return self.__dict__["_converters"][target]
        except KeyError:
            raise AttributeError(
                f"No conversion from {self.descriptor.name} to {target}"
            ) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._converters)

    def __len__(self) -> int:
        return len(self._converters)


class ConversionTable(Mapping):
    """Source model -> ModelConversions, for every known model."""

    def __init__(self):
        self._models = MappingProxyType({
            name: ModelConversions(descriptor) for name, descriptor in MODELS.items()
        })

    def __getitem__(self, model: str) -> ModelConversions:
        return self._models[model]

    def __getattr__(self, model: str) -> ModelConversions:
        try:
            return self.__dict__["_models"][model]
        except KeyError:
            raise AttributeError(f"Unknown model: {model}") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)


convert = ConversionTable()
