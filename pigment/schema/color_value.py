# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""
Color: an immutable color value.

A Color is a model tag, a tuple of channels for that model, and an alpha in
[0, 1]. Every operation returns a new Color; nothing is mutated in place.

Accepted inputs, tried in this order:

    Color()                              # opaque black
    Color(other_color)                   # copy
    Color("#0A1E19"), Color("hsla(165, 50%, 8%, 0.5)"), Color("teal")
    Color([10, 30, 25, 0.5]), Color([165, 50, 8], "hsl")
    Color(0x0A1E19)                      # packed 24-bit rgb
    Color({"h": 165, "s": 50, "l": 8, "alpha": 0.5})

Each non-skipped model name is both a conversion method and a static
constructor::

    Color("teal").hsl()          # view in hsl
    Color.hsl(180, 100, 25)      # build from hsl channels
"""

from __future__ import annotations

import json
import math
import types
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from pigment import codec
from pigment.conversion.models import HASHED_MODEL_KEYS, MODELS, SKIPPED_MODELS, get_model
from pigment.conversion.wrappers import convert
from pigment.measure.contrast import (
    YIQ_DARK_THRESHOLD,
    WCAGThresholds,
    contrast_ratio,
    relative_luminance,
    wcag_level,
    yiq,
)
from pigment.measure.mixing import mix_weights
from pigment.numeric import MAX_PLACES, clamp, is_number, round_half_up, to_places
from pigment.schema.channels import (
    CHANNELS,
    UNSET,
    apply_limiters,
    get_channel_spec,
    make_accessor,
)


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_STRING_PLACES = 1
DEFAULT_ROUND_PLACES = 0
DEFAULT_MEASURE_PLACES = 6


# =============================================================================
# Input Helpers
# =============================================================================


def _resolve_model(model: Any) -> Optional[str]:
    """Validate the model option; skipped names and blanks mean "no model"."""
    if not isinstance(model, str) or not model.strip():
        return None
    if model in SKIPPED_MODELS:
        return None
    return get_model(model).name


def _unwrap(value: Any) -> Any:
    """numpy scalars (and 0-d arrays) to plain Python numbers."""
    if isinstance(value, np.generic) or (isinstance(value, np.ndarray) and value.ndim == 0):
        return value.item()
    return value


def _is_array_like(obj: Any) -> bool:
    if isinstance(obj, (str, bytes, Mapping)):
        return False
    if not (hasattr(obj, "__len__") and hasattr(obj, "__getitem__")):
        return False
    return len(obj) > 0


def _describe(obj: Any) -> str:
    if isinstance(obj, Mapping):
        obj = {str(k): v for k, v in obj.items()}
    return json.dumps(obj, default=str)


def _zero_fill(values: list, channels: int) -> list:
    """Pad to ``channels`` and replace non-numeric channels with 0."""
    values = values + [0] * (channels - len(values))
    for index in range(channels):
        if not is_number(values[index]):
            values[index] = 0
    return values


def _require_color(method: str, other: Any) -> None:
    if not isinstance(other, Color):
        raise TypeError(
            f'Argument to "{method}" was not a Color instance, '
            f"but rather an instance of {type(other).__name__}"
        )


# =============================================================================
# Model Methods
# =============================================================================


def _conversion_method(model: str):
    def conversion(self, *args):
        if args:
            return type(self)(list(args) if is_number(args[0]) else args[0], model)

        if self.model == model:
            return type(self)(self)

        conversions = convert[self.model]
        if model not in conversions:
            raise ValueError(f"No conversion path from {self.model} to {model}")

        result = conversions[model].raw(list(self.color))
        if not isinstance(result, list):
            result = [result]
        return type(self)([*result, self.valpha], model)

    conversion.__name__ = model
    conversion.__doc__ = (
        f"Convert to {model} (alpha kept), or build a new {model} Color from "
        f"the given channels."
    )
    return conversion


def _static_constructor(model: str):
    channels = MODELS[model].channels

    def construct(cls, *args):
        if args and is_number(args[0]):
            col = _zero_fill(list(args), channels)
        else:
            col = args[0] if args else None
        return cls(col, model)

    construct.__name__ = model
    construct.__doc__ = f"Build a Color in {model} from channels, a sequence or a mapping."
    return construct


class _ModelMethod:
    """Static constructor on the class, conversion method on instances."""

    def __init__(self, model: str):
        self.model = model
        self._convert = _conversion_method(model)
        self._construct = _static_constructor(model)

    def __get__(self, obj: Any, objtype: Optional[type] = None) -> Any:
        if obj is None:
            return types.MethodType(self._construct, objtype)
        return types.MethodType(self._convert, obj)


# =============================================================================
# Color
# =============================================================================


@dataclass(frozen=True, init=False, slots=True)
class Color:
    """
    Immutable color value.

    Attributes:
        model: Color model tag (rgb, hsl, hsv, hwb, cmyk, xyz, lab, lch,
            hex, keyword, ansi16, ansi256, hcg, apple, gray)
        color: Channel values, one per model channel
        valpha: Alpha in [0, 1]
    """

    model: str
    color: tuple
    valpha: float

    def __init__(self, obj: Any = None, model: Optional[str] = None):
        model = _resolve_model(model)
        obj = _unwrap(obj)

        if obj is None:
            resolved, color, alpha = "rgb", [0, 0, 0], 1
        elif isinstance(obj, Color):
            resolved, color, alpha = obj.model, list(obj.color), obj.valpha
        elif isinstance(obj, str):
            result = codec.parse(obj)
            if result is None:
                raise ValueError(f"Unable to parse color from string: {obj!r}")
            resolved = result.model
            channels = MODELS[resolved].channels
            color = list(result.values[:channels])
            tail = result.values[channels] if len(result.values) > channels else None
            alpha = tail if is_number(tail) else 1
        elif _is_array_like(obj):
            resolved = model or "rgb"
            channels = MODELS[resolved].channels
            items = [_unwrap(obj[i]) for i in range(min(channels + 1, len(obj)))]
            color = _zero_fill(items[:channels], channels)
            tail = items[channels] if len(items) > channels else None
            alpha = tail if is_number(tail) else 1
        elif is_number(obj):
            # always rgb; convert afterwards if another model is wanted
            number = (int(obj) if math.isfinite(obj) else 0) & 0xFFFFFF
            resolved = "rgb"
            color = [(number >> 16) & 0xFF, (number >> 8) & 0xFF, number & 0xFF]
            alpha = 1
        elif isinstance(obj, Mapping):
            values = dict(obj)
            alpha = 1
            if "alpha" in values:
                given = _unwrap(values.pop("alpha"))
                alpha = given if is_number(given) else 0

            hashed = "".join(sorted(str(key) for key in values))
            if hashed not in HASHED_MODEL_KEYS:
                raise ValueError(f"Unable to parse color from object: {_describe(obj)}")

            resolved = HASHED_MODEL_KEYS[hashed]
            descriptor = MODELS[resolved]
            color = []
            for label in descriptor.labels:
                value = _unwrap(values.get(label))
                if is_number(value) or (descriptor.textual and isinstance(value, str)):
                    color.append(value)
                else:
                    color.append(0)
        else:
            raise ValueError(f"Unable to parse color from object: {_describe(obj)}")

        self._assign(resolved, apply_limiters(resolved, color), clamp(alpha, 0, 1))

    def _assign(self, model: str, color: list, valpha: float) -> None:
        object.__setattr__(self, "model", model)
        object.__setattr__(self, "color", tuple(color))
        object.__setattr__(self, "valpha", valpha)

    @classmethod
    def _from_parts(cls, model: str, color: Any, valpha: float) -> "Color":
        """Build without parsing or limiting; alpha is clamped."""
        self = object.__new__(cls)
        self._assign(model, list(color), clamp(valpha, 0, 1))
        return self

    @classmethod
    def _from_channels(cls, model: str, color: Any, valpha: float) -> "Color":
        """Build from channels already in ``model``, running its limiters."""
        return cls._from_parts(model, apply_limiters(model, list(color)), valpha)

    # -------------------------------------------------------------------------
    # Conversion methods / static constructors
    # -------------------------------------------------------------------------

    rgb = _ModelMethod("rgb")
    hsl = _ModelMethod("hsl")
    hsv = _ModelMethod("hsv")
    hwb = _ModelMethod("hwb")
    cmyk = _ModelMethod("cmyk")
    xyz = _ModelMethod("xyz")
    lab = _ModelMethod("lab")
    lch = _ModelMethod("lch")
    ansi16 = _ModelMethod("ansi16")
    ansi256 = _ModelMethod("ansi256")
    hcg = _ModelMethod("hcg")
    apple = _ModelMethod("apple")

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.string()

    def string(self, places: Any = None) -> str:
        """CSS text in rgb, hsl or hwb; other models print as rgb."""
        places = clamp(to_places(places, DEFAULT_STRING_PLACES), 0, MAX_PLACES)
        source = self if self.model in codec.DIRECT_MODELS else self.rgb()
        rounded = source.round(places)
        return codec.format(rounded.model, rounded.array())

    def percent_string(self, places: Any = None) -> str:
        """``rgb(r%, g%, b%)`` text."""
        places = clamp(to_places(places, DEFAULT_STRING_PLACES), 0, MAX_PLACES)
        rounded = self.rgb().round(places)
        return codec.format(codec.StringFormat.RGB_PERCENT, rounded.array())

    def array(self) -> list:
        """Channels, with alpha appended only when it is not 1."""
        if self.valpha == 1:
            return list(self.color)
        return [*self.color, self.valpha]

    def object(self) -> dict:
        """Channel label -> value, with ``alpha`` only when it is not 1."""
        result = dict(zip(MODELS[self.model].labels, self.color))
        if self.valpha != 1:
            result["alpha"] = self.valpha
        return result

    def unit_array(self) -> list:
        rgb = [value / 255 for value in self.rgb().color]
        if self.valpha != 1:
            rgb.append(self.valpha)
        return rgb

    def unit_object(self) -> dict:
        rgb = self.rgb().object()
        for key in ("r", "g", "b"):
            rgb[key] /= 255
        if self.valpha != 1:
            rgb["alpha"] = self.valpha
        return rgb

    def to_dict(self) -> dict:
        """Plain dict for JSON; inverse of ``from_dict``."""
        return {"model": self.model, "color": list(self.color), "alpha": self.valpha}

    @classmethod
    def from_dict(cls, data: dict) -> "Color":
        model = get_model(data["model"]).name
        color = list(data["color"])
        if len(color) != MODELS[model].channels:
            raise ValueError(
                f"Expected {MODELS[model].channels} channels for {model}, got {len(color)}"
            )
        return cls._from_channels(model, color, data.get("alpha", 1))

    # -------------------------------------------------------------------------
    # Rounding and alpha
    # -------------------------------------------------------------------------

    def round(self, places: Any = None) -> "Color":
        """Round every numeric channel to ``places`` decimals; alpha untouched."""
        places = max(to_places(places, DEFAULT_ROUND_PLACES), 0)
        color = [
            round_half_up(value, places) if is_number(value) else value
            for value in self.color
        ]
        return type(self)._from_channels(self.model, color, self.valpha)

    def alpha(self, value: Any = UNSET) -> Any:
        """Alpha, or a new Color with alpha clamped to [0, 1]."""
        if value is UNSET:
            return self.valpha
        return type(self)._from_parts(self.model, self.color, value)

    # -------------------------------------------------------------------------
    # Textual views
    # -------------------------------------------------------------------------

    def keyword(self, value: Any = UNSET) -> Any:
        """Nearest CSS keyword, or a new Color parsed from ``value``."""
        if value is not UNSET:
            return type(self)(value)
        return convert.rgb.keyword(list(self.rgb().round().color))

    def hex(self, value: Any = UNSET) -> Any:
        """``#RRGGBB`` of the rounded rgb channels, or a new Color from ``value``."""
        if value is not UNSET:
            return type(self)(value)
        return codec.format(codec.StringFormat.HEX, self.rgb().round().color)

    def rgb_number(self) -> int:
        r, g, b = self.rgb().round().color
        return ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)

    # -------------------------------------------------------------------------
    # Measures
    # -------------------------------------------------------------------------

    def luminosity(self, places: Any = DEFAULT_MEASURE_PLACES) -> float:
        """WCAG relative luminance."""
        places = to_places(places, DEFAULT_MEASURE_PLACES)
        return round_half_up(relative_luminance(self.rgb().color), places)

    def _contrast(self, other: "Color") -> float:
        return contrast_ratio(
            relative_luminance(self.rgb().color),
            relative_luminance(other.rgb().color),
        )

    def contrast(self, other: "Color", places: Any = DEFAULT_MEASURE_PLACES) -> float:
        """WCAG contrast ratio against ``other``, from 1 to 21."""
        _require_color("contrast", other)
        places = to_places(places, DEFAULT_MEASURE_PLACES)
        return round_half_up(self._contrast(other), places)

    def level(
        self,
        other: "Color",
        large_text: bool = False,
        thresholds: Optional[WCAGThresholds] = None,
    ) -> str:
        """WCAG level of the contrast with ``other``: "AAA", "AA" or ""."""
        _require_color("level", other)
        return wcag_level(self._contrast(other), large_text, thresholds)

    def is_dark(self) -> bool:
        return yiq(self.rgb().color) < YIQ_DARK_THRESHOLD

    def is_light(self) -> bool:
        return not self.is_dark()

    # -------------------------------------------------------------------------
    # Manipulation
    # -------------------------------------------------------------------------

    def _keep_alpha(self, obj: dict) -> dict:
        if self.valpha != 1:
            obj["alpha"] = self.valpha
        return obj

    def negate(self) -> "Color":
        rgb = self.rgb().object()
        for key in ("r", "g", "b"):
            rgb[key] = 255 - rgb[key]
        return type(self)(self._keep_alpha(rgb), self.model)

    def lighten(self, ratio: float) -> "Color":
        h, s, l = self.hsl().color
        return type(self)(self._keep_alpha({"h": h, "s": s, "l": l + l * ratio}), self.model)

    def darken(self, ratio: float) -> "Color":
        h, s, l = self.hsl().color
        return type(self)(self._keep_alpha({"h": h, "s": s, "l": l - l * ratio}), self.model)

    def saturate(self, ratio: float) -> "Color":
        h, s, l = self.hsl().color
        return type(self)(self._keep_alpha({"h": h, "s": s + s * ratio, "l": l}), self.model)

    def desaturate(self, ratio: float) -> "Color":
        h, s, l = self.hsl().color
        return type(self)(self._keep_alpha({"h": h, "s": s - s * ratio, "l": l}), self.model)

    def whiten(self, ratio: float) -> "Color":
        h, w, b = self.hwb().color
        return type(self)(self._keep_alpha({"h": h, "w": w + w * ratio, "b": b}), self.model)

    def blacken(self, ratio: float) -> "Color":
        h, w, b = self.hwb().color
        return type(self)(self._keep_alpha({"h": h, "w": w, "b": b + b * ratio}), self.model)

    def grayscale(self) -> "Color":
        """Luma-weighted gray. The result is always opaque."""
        r, g, b = self.rgb().color
        val = r * 0.3 + g * 0.59 + b * 0.11
        return type(self).rgb(val, val, val)

    def fade(self, ratio: float) -> "Color":
        return self.alpha(self.valpha - self.valpha * ratio)

    def opaquer(self, ratio: float) -> "Color":
        return self.alpha(self.valpha + self.valpha * ratio)

    def rotate(self, degrees: float) -> "Color":
        h, s, l = self.hsl().color
        hue = math.fmod(h + degrees, 360)
        hue = 360 + hue if hue < 0 else hue
        return type(self)(self._keep_alpha({"h": hue, "s": s, "l": l}), self.model)

    def mix(self, other: "Color", weight: float = 0.5) -> "Color":
        """
        Mix ``other`` into this color, SASS style.

        ``weight`` is the share of ``other``: 0 returns this color's
        channels, 1 returns ``other``'s. Alpha differences pull the channel
        weights toward the more opaque color.
        """
        _require_color("mix", other)

        color1 = other.rgb()
        color2 = self.rgb()
        w1, w2 = mix_weights(weight, color1.alpha() - color2.alpha())

        return type(self).rgb(
            w1 * color1.red() + w2 * color2.red(),
            w1 * color1.green() + w2 * color2.green(),
            w1 * color1.blue() + w2 * color2.blue(),
            color1.alpha() * weight + color2.alpha() * (1 - weight),
        )

    # -------------------------------------------------------------------------
    # Generic channel access
    # -------------------------------------------------------------------------

    def channel(self, name: str) -> Any:
        """Value of a named channel, e.g. ``color.channel("hue")``."""
        return getattr(self, get_channel_spec(name).name)()

    def with_channel(self, name: str, value: Any) -> "Color":
        """New Color with a named channel replaced."""
        return getattr(self, get_channel_spec(name).name)(value)


for _spec in CHANNELS:
    setattr(Color, _spec.name, make_accessor(_spec))
del _spec
