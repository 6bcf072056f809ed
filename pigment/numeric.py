# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""
Numeric helpers shared by conversions, the codec and the Color type.

Rounding is half-up (ties toward +inf) at every call site, the same rule
CSS serializers and JavaScript's ``Math.round`` use. Decimal places are
applied by shifting the exponent of the number's shortest repr rather than
multiplying by a power of ten, so ``round_half_up(1.005, 2)`` is ``1.01``.
"""

from __future__ import annotations

import math
import numbers
from typing import Any


# Rounding places are clamped into [0, MAX_PLACES] by string formatting.
MAX_PLACES = 20


def is_number(value: Any) -> bool:
    """True for real numbers (numpy scalars included), False for bools."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _shift(value: float, places: int) -> float:
    mantissa, _, exponent = repr(float(value)).partition("e")
    return float(f"{mantissa}e{int(exponent or 0) + places}")


def round_half_up(value: Any, places: int = 0) -> int | float:
    """
    Round ``value`` to ``places`` decimals, ties toward positive infinity.

    Returns an ``int`` when ``places <= 0``, else a ``float``.
    Non-finite values pass through unchanged.
    """
    value = float(value)
    if not math.isfinite(value):
        return value

    places = int(places)
    shifted = _shift(value, places)
    rounded = math.floor(shifted)
    if shifted - rounded >= 0.5:
        rounded += 1

    if places == 0:
        return int(rounded)
    result = _shift(rounded, -places)
    return int(result) if places < 0 else result


def clamp(value: Any, lower: float, upper: float) -> Any:
    """Clamp into [lower, upper]; NaN passes through."""
    return min(max(value, lower), upper)


def to_places(value: Any, default: int) -> int:
    """Coerce a places argument to an integer, ``default`` for non-numbers."""
    if not is_number(value):
        return default
    value = float(value)
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return MAX_PLACES if value > 0 else -MAX_PLACES
    return int(value)


def format_number(value: Any) -> str:
    """Render a number the way it prints in CSS text: ``8`` not ``8.0``."""
    if isinstance(value, numbers.Integral):
        return str(int(value))
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)
