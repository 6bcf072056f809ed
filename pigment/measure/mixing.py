# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""Alpha-aware mixing weights, after libsass ``mix()`` (functions.cpp)."""

from __future__ import annotations


def mix_weights(weight: float, alpha_delta: float) -> tuple[float, float]:
    """
    Channel weights for the primary and secondary colors of a mix.

    ``weight`` is the share of the primary color (0..1) and ``alpha_delta``
    is primary alpha minus secondary alpha. The primary weight is pulled
    toward whichever color is more opaque.
    """
    w = 2 * weight - 1
    a = alpha_delta

    w1 = ((w if w * a == -1 else (w + a) / (1 + w * a)) + 1) / 2.0
    return w1, 1 - w1
