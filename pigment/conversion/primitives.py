# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""
Pairwise conversion primitives.

Each primitive takes the source model's channels (alpha excluded) and returns
the target model's channels. Single-channel targets return a bare value:
``hex`` a 6-digit uppercase string, ``keyword`` a CSS name, ``ansi16`` and
``ansi256`` an int. ``gray`` is the exception and returns a one-item list.

Single-channel sources accept either the bare value or a one-item sequence.

Constants:
- sRGB transfer: 0.04045 / 12.92 and ((c + 0.055) / 1.055) ^ 2.4
- D65 sRGB <-> XYZ matrices (4 decimal places)
- Lab reference white: X=95.047, Y=100, Z=108.883
- Lab f(t): t ^ (1/3) above 0.008856, else 7.787 t + 16/116

The insertion order of PRIMITIVES is the edge order the router explores.
"""

from __future__ import annotations

import math
import re
from types import MappingProxyType
from typing import Any, Optional, Sequence

import numpy as np
import webcolors

from pigment.codec.keywords import CSS_KEYWORDS, REVERSE_KEYWORDS
from pigment.numeric import is_number, round_half_up


# =============================================================================
# Constants
# =============================================================================

_SRGB_TO_XYZ = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
])

_XYZ_TO_SRGB = np.array([
    [3.2406, -1.5372, -0.4986],
    [-0.9689, 1.8758, 0.0415],
    [0.0557, -0.2040, 1.0570],
])

_WHITE_D65 = (95.047, 100.0, 108.883)

_LAB_EPSILON = 0.008856
_LAB_KAPPA = 7.787
_LAB_OFFSET = 16 / 116

_KEYWORD_NAMES = tuple(CSS_KEYWORDS)
_KEYWORD_RGB = np.array([CSS_KEYWORDS[name] for name in _KEYWORD_NAMES], dtype=np.float64)

_HEX_DIGITS_RE = re.compile(r"[a-f0-9]{6}|[a-f0-9]{3}", re.IGNORECASE)


def _scalar(value: Any) -> Any:
    """Unwrap one-item sequences down to the bare channel value."""
    while isinstance(value, (list, tuple, np.ndarray)) and len(value) == 1:
        value = value[0]
    return value


def _ratio_or_zero(numerator: float, denominator: float) -> float:
    """numerator / denominator, with 0/0 (and a zero result) mapped to 0."""
    if denominator == 0:
        return 0 if numerator == 0 else math.copysign(math.inf, numerator)
    return numerator / denominator or 0


# =============================================================================
# RGB <-> cylindrical models
# =============================================================================


def rgb_to_hsl(rgb: Sequence[float]) -> list[float]:
    """Convert rgb [0,255] to hsl: hue [0,360), saturation and lightness [0,100]."""
    r = rgb[0] / 255
    g = rgb[1] / 255
    b = rgb[2] / 255
    lo = min(r, g, b)
    hi = max(r, g, b)
    delta = hi - lo

    if hi == lo:
        h = 0
    elif r == hi:
        h = (g - b) / delta
    elif g == hi:
        h = 2 + (b - r) / delta
    else:
        h = 4 + (r - g) / delta

    h = min(h * 60, 360)
    if h < 0:
        h += 360

    l = (lo + hi) / 2

    if hi == lo:
        s = 0
    elif l <= 0.5:
        s = delta / (hi + lo)
    else:
        s = delta / (2 - hi - lo)

    return [h, s * 100, l * 100]


def rgb_to_hsv(rgb: Sequence[float]) -> list[float]:
    """Convert rgb [0,255] to hsv: hue [0,360), saturation and value [0,100]."""
    r = rgb[0] / 255
    g = rgb[1] / 255
    b = rgb[2] / 255
    v = max(r, g, b)
    diff = v - min(r, g, b)

    def diffc(c):
        return (v - c) / 6 / diff + 1 / 2

    if diff == 0:
        h = 0
        s = 0
    else:
        s = diff / v
        rdif = diffc(r)
        gdif = diffc(g)
        bdif = diffc(b)

        if r == v:
            h = bdif - gdif
        elif g == v:
            h = (1 / 3) + rdif - bdif
        else:
            h = (2 / 3) + gdif - rdif

        if h < 0:
            h += 1
        elif h > 1:
            h -= 1

    return [h * 360, s * 100, v * 100]


def rgb_to_hwb(rgb: Sequence[float]) -> list[float]:
    """Convert rgb [0,255] to hwb; the hue is the hsl hue."""
    r, g, b = rgb[0], rgb[1], rgb[2]
    h = rgb_to_hsl(rgb)[0]
    w = 1 / 255 * min(r, min(g, b))
    b = 1 - 1 / 255 * max(r, max(g, b))
    return [h, w * 100, b * 100]


def rgb_to_cmyk(rgb: Sequence[float]) -> list[float]:
    """
    Convert rgb [0,255] to cmyk [0,100].

    Pure black has no ink ratio and maps to (0, 0, 0, 100).
    """
    r = rgb[0] / 255
    g = rgb[1] / 255
    b = rgb[2] / 255

    k = min(1 - r, 1 - g, 1 - b)
    c = _ratio_or_zero(1 - r - k, 1 - k)
    m = _ratio_or_zero(1 - g - k, 1 - k)
    y = _ratio_or_zero(1 - b - k, 1 - k)

    return [c * 100, m * 100, y * 100, k * 100]


def hsl_to_rgb(hsl: Sequence[float]) -> list[float]:
    """Convert hsl to rgb [0,255] via the CSS two-temporary algorithm."""
    h = hsl[0] / 360
    s = hsl[1] / 100
    l = hsl[2] / 100

    if s == 0:
        val = l * 255
        return [val, val, val]

    if l < 0.5:
        t2 = l * (1 + s)
    else:
        t2 = l + s - l * s

    t1 = 2 * l - t2

    rgb = [0.0, 0.0, 0.0]
    for i in range(3):
        t3 = h + 1 / 3 * -(i - 1)
        if t3 < 0:
            t3 += 1
        if t3 > 1:
            t3 -= 1

        if 6 * t3 < 1:
            val = t1 + (t2 - t1) * 6 * t3
        elif 2 * t3 < 1:
            val = t2
        elif 3 * t3 < 2:
            val = t1 + (t2 - t1) * (2 / 3 - t3) * 6
        else:
            val = t1

        rgb[i] = val * 255

    return rgb


def hsl_to_hsv(hsl: Sequence[float]) -> list[float]:
    """Convert hsl to hsv; hue passes through."""
    h = hsl[0]
    s = hsl[1] / 100
    l = hsl[2] / 100
    smin = s
    lmin = max(l, 0.01)

    l *= 2
    s *= l if l <= 1 else 2 - l
    smin *= lmin if lmin <= 1 else 2 - lmin
    v = (l + s) / 2
    sv = (2 * smin) / (lmin + smin) if l == 0 else (2 * s) / (l + s)

    return [h, sv * 100, v * 100]


def hsv_to_rgb(hsv: Sequence[float]) -> list[float]:
    """Convert hsv to rgb [0,255] by hue sextant."""
    h = hsv[0] / 60
    s = hsv[1] / 100
    v = hsv[2] / 100
    hi = math.floor(h) % 6

    f = h - math.floor(h)
    p = 255 * v * (1 - s)
    q = 255 * v * (1 - (s * f))
    t = 255 * v * (1 - (s * (1 - f)))
    v *= 255

    return [
        [v, t, p],
        [q, v, p],
        [p, v, t],
        [p, q, v],
        [t, p, v],
        [v, p, q],
    ][hi]


def hsv_to_hsl(hsv: Sequence[float]) -> list[float]:
    """Convert hsv to hsl; hue passes through."""
    h = hsv[0]
    s = hsv[1] / 100
    v = hsv[2] / 100
    vmin = max(v, 0.01)

    l = (2 - s) * v
    lmin = (2 - s) * vmin
    sl = _ratio_or_zero(s * vmin, lmin if lmin <= 1 else 2 - lmin)
    l /= 2

    return [h, sl * 100, l * 100]


def hwb_to_rgb(hwb: Sequence[float]) -> list[float]:
    """HWB to RGB per http://dev.w3.org/csswg/css-color/#hwb-to-rgb."""
    h = hwb[0] / 360
    wh = hwb[1] / 100
    bl = hwb[2] / 100
    ratio = wh + bl

    # whiteness + blackness is capped at 1
    if ratio > 1:
        wh /= ratio
        bl /= ratio

    i = math.floor(6 * h)
    v = 1 - bl
    f = 6 * h - i

    if i & 0x01:
        f = 1 - f

    n = wh + f * (v - wh)

    if i == 1:
        r, g, b = n, v, wh
    elif i == 2:
        r, g, b = wh, v, n
    elif i == 3:
        r, g, b = wh, n, v
    elif i == 4:
        r, g, b = n, wh, v
    elif i == 5:
        r, g, b = v, wh, n
    else:
        r, g, b = v, n, wh

    return [r * 255, g * 255, b * 255]


def cmyk_to_rgb(cmyk: Sequence[float]) -> list[float]:
    """Convert cmyk [0,100] to rgb [0,255]."""
    c = cmyk[0] / 100
    m = cmyk[1] / 100
    y = cmyk[2] / 100
    k = cmyk[3] / 100

    r = 1 - min(1, c * (1 - k) + k)
    g = 1 - min(1, m * (1 - k) + k)
    b = 1 - min(1, y * (1 - k) + k)

    return [r * 255, g * 255, b * 255]


# =============================================================================
# RGB <-> XYZ <-> Lab <-> LCh
# =============================================================================


def rgb_to_xyz(rgb: Sequence[float]) -> list[float]:
    """sRGB [0, 255] to CIE XYZ (D65) scaled to [0, ~100]."""
    srgb = np.array(rgb[:3], dtype=np.float64) / 255
    with np.errstate(invalid="ignore"):
        linear = np.where(
            srgb > 0.04045,
            np.power((srgb + 0.055) / 1.055, 2.4),
            srgb / 12.92,
        )
    return (_SRGB_TO_XYZ @ linear * 100).tolist()


def xyz_to_rgb(xyz: Sequence[float]) -> list[float]:
    """
    Convert CIE XYZ (D65, Y in [0,100]) to sRGB [0,255].

    Out-of-gamut results are clipped to [0, 255].
    """
    linear = _XYZ_TO_SRGB @ (np.array(xyz[:3], dtype=np.float64) / 100)
    with np.errstate(invalid="ignore"):
        srgb = np.where(
            linear > 0.0031308,
            1.055 * np.power(linear, 1.0 / 2.4) - 0.055,
            linear * 12.92,
        )
    return (np.clip(srgb, 0, 1) * 255).tolist()


def _lab_f(t: float) -> float:
    return t ** (1 / 3) if t > _LAB_EPSILON else _LAB_KAPPA * t + _LAB_OFFSET


def xyz_to_lab(xyz: Sequence[float]) -> list[float]:
    """Convert XYZ to CIE L*a*b* against the D65 reference white."""
    x = _lab_f(xyz[0] / _WHITE_D65[0])
    y = _lab_f(xyz[1] / _WHITE_D65[1])
    z = _lab_f(xyz[2] / _WHITE_D65[2])

    return [(116 * y) - 16, 500 * (x - y), 200 * (y - z)]


def rgb_to_lab(rgb: Sequence[float]) -> list[float]:
    """Convert rgb to Lab through XYZ."""
    return xyz_to_lab(rgb_to_xyz(rgb))


def lab_to_xyz(lab: Sequence[float]) -> list[float]:
    """Convert CIE L*a*b* to XYZ (D65); inverse of xyz_to_lab."""
    l, a, b = lab[0], lab[1], lab[2]

    y = (l + 16) / 116
    x = a / 500 + y
    z = y - b / 200

    def finv(t):
        t3 = t ** 3
        return t3 if t3 > _LAB_EPSILON else (t - _LAB_OFFSET) / _LAB_KAPPA

    return [finv(x) * _WHITE_D65[0], finv(y) * _WHITE_D65[1], finv(z) * _WHITE_D65[2]]


def lab_to_lch(lab: Sequence[float]) -> list[float]:
    """Convert Lab to LCh: chroma is the a/b radius, hue the angle in [0,360)."""
    l, a, b = lab[0], lab[1], lab[2]

    h = math.atan2(b, a) * 360 / 2 / math.pi
    if h < 0:
        h += 360

    c = math.sqrt(a * a + b * b)

    return [l, c, h]


def lch_to_lab(lch: Sequence[float]) -> list[float]:
    """Convert LCh to Lab; inverse of lab_to_lch."""
    l, c, h = lch[0], lch[1], lch[2]

    hr = h / 360 * 2 * math.pi
    return [l, c * math.cos(hr), c * math.sin(hr)]


# =============================================================================
# Keywords, hex and terminal palettes
# =============================================================================


def rgb_to_keyword(rgb: Sequence[float]) -> str:
    """
    Exact CSS keyword for the triplet, else the nearest one.

    Nearest is by squared Euclidean distance in RGB; ties go to the keyword
    that comes first in table order.
    """
    exact = REVERSE_KEYWORDS.get(tuple(rgb[:3]))
    if exact:
        return exact

    distances = np.sum((_KEYWORD_RGB - np.asarray(rgb[:3], dtype=np.float64)) ** 2, axis=1)
    return _KEYWORD_NAMES[int(np.argmin(distances))]


def keyword_to_rgb(keyword: Any) -> list[int]:
    """CSS keyword to its rgb triplet; ValueError for unknown names."""
    name = _scalar(keyword)
    if name not in CSS_KEYWORDS:
        raise ValueError(f"Unknown color keyword: {name!r}")
    return list(CSS_KEYWORDS[name])


def _pack_hex(r: Any, g: Any, b: Any) -> str:
    integer = (
        ((round_half_up(r) & 0xFF) << 16)
        + ((round_half_up(g) & 0xFF) << 8)
        + (round_half_up(b) & 0xFF)
    )
    return f"{integer:06X}"


def rgb_to_hex(rgb: Sequence[float]) -> str:
    """Six uppercase hex digits (no ``#``) of the rounded channels."""
    return _pack_hex(rgb[0], rgb[1], rgb[2])


def hex_to_rgb(value: Any) -> list[int]:
    """
    Parse 6 or 3 hex digits found anywhere in ``value``.

    Integers are read as their hexadecimal digits; no match gives black.
    """
    value = _scalar(value)
    if is_number(value) and float(value).is_integer():
        text = format(int(value), "x")
    else:
        text = str(value)

    match = _HEX_DIGITS_RE.search(text)
    if not match:
        return [0, 0, 0]

    return list(webcolors.hex_to_rgb(f"#{match.group(0)}"))


def rgb_to_ansi16(rgb: Sequence[float], saturation: Optional[float] = None) -> int:
    """
    Nearest of the 16 ANSI SGR foreground codes (30-37, 90-97).

    ``saturation`` overrides the brightness otherwise taken from the hsv value.
    """
    r, g, b = rgb[0], rgb[1], rgb[2]
    # hsv -> ansi16 passes its own value channel in
    value = rgb_to_hsv(rgb)[2] if saturation is None else saturation

    value = round_half_up(value / 50)
    if value == 0:
        return 30

    ansi = 30 + (
        (round_half_up(b / 255) << 2)
        | (round_half_up(g / 255) << 1)
        | round_half_up(r / 255)
    )

    if value == 2:
        ansi += 60

    return ansi


def hsv_to_ansi16(hsv: Sequence[float]) -> int:
    """ANSI 16-color code using the hsv value channel as brightness."""
    return rgb_to_ansi16(hsv_to_rgb(hsv), hsv[2])


def rgb_to_ansi256(rgb: Sequence[float]) -> int:
    """Nearest xterm 256-color code: 6x6x6 cube, or the gray ramp (232-255)."""
    r, g, b = rgb[0], rgb[1], rgb[2]

    # Extended greyscale ramp, except for black and white.
    if r == g and g == b:
        if r < 8:
            return 16
        if r > 248:
            return 231
        return round_half_up(((r - 8) / 247) * 24) + 232

    return (
        16
        + (36 * round_half_up(r / 255 * 5))
        + (6 * round_half_up(g / 255 * 5))
        + round_half_up(b / 255 * 5)
    )


def ansi16_to_rgb(value: Any) -> list[float]:
    """Convert an ANSI 16-color code to rgb."""
    code = _scalar(value)
    color = math.fmod(code, 10)

    # greyscale
    if color == 0 or color == 7:
        if code > 50:
            color += 3.5
        color = color / 10.5 * 255
        return [color, color, color]

    mult = (int(code > 50) + 1) * 0.5
    color = int(color)
    r = ((color & 1) * mult) * 255
    g = (((color >> 1) & 1) * mult) * 255
    b = (((color >> 2) & 1) * mult) * 255

    return [r, g, b]


def ansi256_to_rgb(value: Any) -> list[float]:
    """Convert an xterm 256-color code (16 and up) to rgb."""
    code = _scalar(value)

    # greyscale ramp
    if code >= 232:
        c = (code - 232) * 10 + 8
        return [c, c, c]

    code -= 16

    rem = math.fmod(code, 36)
    r = math.floor(code / 36) / 5 * 255
    g = math.floor(rem / 6) / 5 * 255
    b = math.fmod(rem, 6) / 5 * 255

    return [r, g, b]


# =============================================================================
# HCG
# =============================================================================


def rgb_to_hcg(rgb: Sequence[float]) -> list[float]:
    """
    Convert rgb to hcg: hue [0,360), chroma and grayness [0,100].

    Grayness is the base gray under the chroma; 0 when chroma is 100.
    """
    r = rgb[0] / 255
    g = rgb[1] / 255
    b = rgb[2] / 255
    hi = max(max(r, g), b)
    lo = min(min(r, g), b)
    chroma = hi - lo

    grayscale = lo / (1 - chroma) if chroma < 1 else 0

    if chroma <= 0:
        hue = 0
    elif hi == r:
        hue = ((g - b) / chroma) % 6
    elif hi == g:
        hue = 2 + (b - r) / chroma
    else:
        hue = 4 + (r - g) / chroma

    hue /= 6
    hue %= 1

    return [hue * 360, chroma * 100, grayscale * 100]


def hsl_to_hcg(hsl: Sequence[float]) -> list[float]:
    """Convert hsl to hcg; hue passes through."""
    s = hsl[1] / 100
    l = hsl[2] / 100

    c = (2.0 * s * l) if l < 0.5 else (2.0 * s * (1.0 - l))

    f = 0
    if c < 1.0:
        f = (l - 0.5 * c) / (1.0 - c)

    return [hsl[0], c * 100, f * 100]


def hsv_to_hcg(hsv: Sequence[float]) -> list[float]:
    """Convert hsv to hcg; hue passes through."""
    s = hsv[1] / 100
    v = hsv[2] / 100

    c = s * v
    f = 0
    if c < 1.0:
        f = (v - c) / (1 - c)

    return [hsv[0], c * 100, f * 100]


def hcg_to_rgb(hcg: Sequence[float]) -> list[float]:
    """Convert hcg to rgb [0,255] by mixing the pure hue with gray."""
    h = hcg[0] / 360
    c = hcg[1] / 100
    g = hcg[2] / 100

    if c == 0.0:
        return [g * 255, g * 255, g * 255]

    hi = (h % 1) * 6
    v = math.fmod(hi, 1)
    w = 1 - v

    sector = math.floor(hi)
    if sector == 0:
        pure = (1, v, 0)
    elif sector == 1:
        pure = (w, 1, 0)
    elif sector == 2:
        pure = (0, 1, v)
    elif sector == 3:
        pure = (0, w, 1)
    elif sector == 4:
        pure = (v, 0, 1)
    else:
        pure = (1, 0, w)

    mg = (1.0 - c) * g

    return [(c * channel + mg) * 255 for channel in pure]


def hcg_to_hsv(hcg: Sequence[float]) -> list[float]:
    """Convert hcg to hsv; hue passes through."""
    c = hcg[1] / 100
    g = hcg[2] / 100

    v = c + g * (1.0 - c)
    f = c / v if v > 0.0 else 0

    return [hcg[0], f * 100, v * 100]


def hcg_to_hsl(hcg: Sequence[float]) -> list[float]:
    """Convert hcg to hsl; hue passes through."""
    c = hcg[1] / 100
    g = hcg[2] / 100

    l = g * (1.0 - c) + 0.5 * c
    s = 0
    if 0.0 < l < 0.5:
        s = c / (2 * l)
    elif 0.5 <= l < 1.0:
        s = c / (2 * (1 - l))

    return [hcg[0], s * 100, l * 100]


def hcg_to_hwb(hcg: Sequence[float]) -> list[float]:
    """Convert hcg to hwb; hue passes through."""
    c = hcg[1] / 100
    g = hcg[2] / 100
    v = c + g * (1.0 - c)
    return [hcg[0], (v - c) * 100, (1 - v) * 100]


def hwb_to_hcg(hwb: Sequence[float]) -> list[float]:
    """Convert hwb to hcg; hue passes through."""
    w = hwb[1] / 100
    b = hwb[2] / 100
    v = 1 - b
    c = v - w
    g = (v - c) / (1 - c) if c < 1 else 0
    return [hwb[0], c * 100, g * 100]


# =============================================================================
# Apple (16-bit RGB) and gray
# =============================================================================


def apple_to_rgb(apple: Sequence[float]) -> list[float]:
    """16-bit channels [0,65535] to rgb [0,255]."""
    return [(apple[0] / 65535) * 255, (apple[1] / 65535) * 255, (apple[2] / 65535) * 255]


def rgb_to_apple(rgb: Sequence[float]) -> list[float]:
    """rgb [0,255] to 16-bit channels [0,65535]."""
    return [(rgb[0] / 255) * 65535, (rgb[1] / 255) * 65535, (rgb[2] / 255) * 65535]


def gray_to_rgb(gray: Sequence[float]) -> list[float]:
    """Gray level [0,100] to an equal-channel rgb triplet."""
    val = _scalar(gray) / 100 * 255
    return [val, val, val]


def gray_to_hsl(gray: Sequence[float]) -> list[float]:
    return [0, 0, _scalar(gray)]


def gray_to_hwb(gray: Sequence[float]) -> list[float]:
    return [0, 100, _scalar(gray)]


def gray_to_cmyk(gray: Sequence[float]) -> list[float]:
    return [0, 0, 0, _scalar(gray)]


def gray_to_lab(gray: Sequence[float]) -> list[float]:
    return [_scalar(gray), 0, 0]


def gray_to_hex(gray: Sequence[float]) -> str:
    val = _scalar(gray) / 100 * 255
    return _pack_hex(val, val, val)


def rgb_to_gray(rgb: Sequence[float]) -> list[float]:
    """Mean of the rgb channels as a gray level [0,100]."""
    val = (rgb[0] + rgb[1] + rgb[2]) / 3
    return [val / 255 * 100]


# =============================================================================
# Edge table
# =============================================================================

PRIMITIVES = MappingProxyType({
    source: MappingProxyType(targets)
    for source, targets in (
        ("rgb", {
            "hsl": rgb_to_hsl,
            "hsv": rgb_to_hsv,
            "hwb": rgb_to_hwb,
            "cmyk": rgb_to_cmyk,
            "keyword": rgb_to_keyword,
            "xyz": rgb_to_xyz,
            "lab": rgb_to_lab,
            "ansi16": rgb_to_ansi16,
            "ansi256": rgb_to_ansi256,
            "hex": rgb_to_hex,
            "hcg": rgb_to_hcg,
            "apple": rgb_to_apple,
            "gray": rgb_to_gray,
        }),
        ("keyword", {"rgb": keyword_to_rgb}),
        ("hsl", {"rgb": hsl_to_rgb, "hsv": hsl_to_hsv, "hcg": hsl_to_hcg}),
        ("hsv", {
            "rgb": hsv_to_rgb,
            "hsl": hsv_to_hsl,
            "ansi16": hsv_to_ansi16,
            "hcg": hsv_to_hcg,
        }),
        ("hwb", {"rgb": hwb_to_rgb, "hcg": hwb_to_hcg}),
        ("cmyk", {"rgb": cmyk_to_rgb}),
        ("xyz", {"rgb": xyz_to_rgb, "lab": xyz_to_lab}),
        ("lab", {"xyz": lab_to_xyz, "lch": lab_to_lch}),
        ("lch", {"lab": lch_to_lab}),
        ("hex", {"rgb": hex_to_rgb}),
        ("ansi16", {"rgb": ansi16_to_rgb}),
        ("ansi256", {"rgb": ansi256_to_rgb}),
        ("hcg", {
            "rgb": hcg_to_rgb,
            "hsv": hcg_to_hsv,
            "hsl": hcg_to_hsl,
            "hwb": hcg_to_hwb,
        }),
        ("apple", {"rgb": apple_to_rgb}),
        ("gray", {
            "rgb": gray_to_rgb,
            "hsl": gray_to_hsl,
            "hsv": gray_to_hsl,
            "hwb": gray_to_hwb,
            "cmyk": gray_to_cmyk,
            "lab": gray_to_lab,
            "hex": gray_to_hex,
        }),
    )
})
