# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""Base types for the string codec."""

from dataclasses import dataclass
from enum import Enum


class StringFormat(Enum):
    """Textual notation produced by the codec."""

    RGB = "rgb"
    RGB_PERCENT = "rgb.percent"
    HSL = "hsl"
    HWB = "hwb"
    HEX = "hex"
    KEYWORD = "keyword"


# Models whose channels print directly; every other model goes through rgb.
DIRECT_MODELS = frozenset({"rgb", "hsl", "hwb"})


@dataclass(frozen=True)
class ParseResult:
    """Model tag plus channel values, alpha last."""

    model: str
    values: tuple
