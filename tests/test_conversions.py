# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""Tests for pairwise conversion primitives, via the rounded/raw wrappers."""

import numpy as np
import pytest

from pigment.conversion import convert
from pigment.conversion.primitives import PRIMITIVES, rgb_to_ansi16


class TestRGBCylindrical:

    def test_rgb_to_hsl(self):
        assert convert.rgb.hsl(140, 200, 100) == [96, 48, 59]

    def test_rgb_to_hsv(self):
        assert convert.rgb.hsv(140, 200, 100) == [96, 50, 78]

    def test_rgb_to_hwb(self):
        assert convert.rgb.hwb(140, 200, 100) == [96, 39, 22]

    def test_rgb_to_cmyk(self):
        assert convert.rgb.cmyk(140, 200, 100) == [30, 0, 50, 22]

    def test_black_to_cmyk_has_no_nan(self):
        assert convert.rgb.cmyk(0, 0, 0) == [0, 0, 0, 100]

    def test_hsl_to_rgb(self):
        assert convert.hsl.rgb(96, 48, 59) == [140, 201, 100]

    def test_achromatic_hsl_to_rgb(self):
        assert convert.hsl.rgb(0, 0, 50) == [128, 128, 128]

    def test_cmyk_to_rgb(self):
        assert convert.cmyk.rgb(30, 0, 50, 22) == [139, 199, 99]

    def test_hsv_black_to_hsl(self):
        assert convert.hsv.hsl(0, 0, 0) == [0, 0, 0]

    def test_hwb_over_unity_is_normalized(self):
        # whiteness + blackness > 100 renders as gray
        r, g, b = convert.hwb.rgb(0, 80, 80)
        assert r == g == b == 128


class TestXYZLab:

    def test_white_to_xyz(self):
        np.testing.assert_allclose(
            convert.rgb.xyz.raw(255, 255, 255), [95.05, 100.0, 108.9], atol=1e-9
        )

    def test_white_to_lab(self):
        assert convert.rgb.lab(255, 255, 255) == [100, 0, 0]

    def test_lab_to_lch_hue_angle(self):
        assert convert.lab.lch(50, 0, 10) == [50, 10, 90]

    def test_lch_to_lab(self):
        assert convert.lch.lab(50, 10, 90) == [50, 0, 10]

    def test_lab_white_point(self):
        np.testing.assert_allclose(
            convert.lab.xyz.raw(100, 0, 0), [95.047, 100.0, 108.883], atol=1e-9
        )


class TestKeyword:

    def test_exact_match(self):
        assert convert.rgb.keyword(255, 228, 196) == "bisque"

    def test_nearest_match(self):
        assert convert.rgb.keyword(250, 5, 5) == "red"

    def test_duplicate_triplets_resolve_to_last_name(self):
        assert convert.rgb.keyword(0, 255, 255) == "cyan"
        assert convert.rgb.keyword(128, 128, 128) == "grey"

    def test_keyword_to_rgb(self):
        assert convert.keyword.rgb("blue") == [0, 0, 255]

    def test_unknown_keyword(self):
        with pytest.raises(ValueError, match="Unknown color keyword"):
            convert.keyword.rgb("notacolor")


class TestHex:

    def test_rgb_to_hex(self):
        assert convert.rgb.hex(10, 30, 25) == "0A1E19"

    def test_hex_to_rgb(self):
        assert convert.hex.rgb("0A1E19") == [10, 30, 25]

    def test_short_hex(self):
        assert convert.hex.rgb("#abc") == [170, 187, 204]

    def test_integer_hex(self):
        assert convert.hex.rgb(0xFFAA00) == [255, 170, 0]

    def test_no_digits_is_black(self):
        assert convert.hex.rgb("zz") == [0, 0, 0]


class TestAnsi:

    def test_rgb_to_ansi16(self):
        assert convert.rgb.ansi16(255, 0, 0) == 91
        assert convert.rgb.ansi16(128, 0, 0) == 31
        assert convert.rgb.ansi16(0, 0, 0) == 30

    def test_hsv_to_ansi16_uses_value_channel(self):
        assert convert.hsv.ansi16(0, 100, 100) == 91
        assert rgb_to_ansi16([255, 0, 0], 0) == 30

    def test_ansi16_to_rgb(self):
        assert convert.ansi16.rgb(91) == [255, 0, 0]
        assert convert.ansi16.rgb(31) == [128, 0, 0]
        assert convert.ansi16.rgb(30) == [0, 0, 0]
        assert convert.ansi16.rgb(97) == [255, 255, 255]

    def test_rgb_to_ansi256(self):
        assert convert.rgb.ansi256(255, 0, 0) == 196
        assert convert.rgb.ansi256(100, 100, 100) == 241
        assert convert.rgb.ansi256(0, 0, 0) == 16
        assert convert.rgb.ansi256(255, 255, 255) == 231

    def test_ansi256_to_rgb(self):
        assert convert.ansi256.rgb(196) == [255, 0, 0]
        assert convert.ansi256.rgb(241) == [98, 98, 98]


class TestHCG:

    def test_red(self):
        assert convert.rgb.hcg(255, 0, 0) == [0, 100, 0]

    def test_blue(self):
        assert convert.rgb.hcg(0, 0, 255) == [240, 100, 0]

    def test_hue_is_never_negative(self):
        h, _, _ = convert.rgb.hcg.raw(255, 0, 128)
        assert 0 <= h < 360

    def test_hcg_to_rgb(self):
        assert convert.hcg.rgb(240, 100, 0) == [0, 0, 255]

    def test_achromatic(self):
        assert convert.hcg.rgb(0, 0, 50) == [128, 128, 128]


class TestAppleGray:

    def test_rgb_to_apple(self):
        assert convert.rgb.apple(255, 0, 0) == [65535, 0, 0]

    def test_apple_to_rgb(self):
        assert convert.apple.rgb(65535, 32768, 0) == [255, 128, 0]

    def test_gray_targets(self):
        assert convert.gray.rgb(50) == [128, 128, 128]
        assert convert.gray.hsl(50) == [0, 0, 50]
        assert convert.gray.hsv(50) == [0, 0, 50]
        assert convert.gray.hwb(50) == [0, 100, 50]
        assert convert.gray.cmyk(50) == [0, 0, 0, 50]
        assert convert.gray.lab(50) == [50, 0, 0]
        assert convert.gray.hex(50) == "808080"

    def test_rgb_to_gray(self):
        assert convert.rgb.gray(255, 255, 255) == [100]


class TestEdges:

    def test_rgb_edge_order(self):
        assert list(PRIMITIVES["rgb"]) == [
            "hsl", "hsv", "hwb", "cmyk", "keyword", "xyz", "lab",
            "ansi16", "ansi256", "hex", "hcg", "apple", "gray",
        ]

    def test_every_model_reaches_rgb(self):
        for model, targets in convert.items():
            if model != "rgb":
                assert "rgb" in targets

    def test_primitives_are_documented(self):
        for source, targets in PRIMITIVES.items():
            if source == "gray":
                continue
            for target, fn in targets.items():
                assert fn.__doc__, f"{source} -> {target}"
