# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""Tests for derived color manipulations (negate, lighten, rotate...)."""

import pytest

from pigment import Color


class TestNegateGrayscale:

    def test_negate(self):
        assert Color("rgb(67, 122, 134)").negate().color == (188, 133, 121)

    def test_negate_keeps_alpha(self):
        assert Color("rgba(67, 122, 134, 0.5)").negate().alpha() == 0.5

    def test_grayscale(self):
        assert Color("rgb(67, 122, 134)").grayscale().round().color == (107, 107, 107)

    def test_grayscale_resets_alpha(self):
        assert Color("rgba(67, 122, 134, 0.5)").grayscale().alpha() == 1


class TestLightness:

    def test_lighten(self):
        assert Color.hsl(100, 50, 50).lighten(0.5).lightness() == 75

    def test_darken(self):
        assert Color.hsl(100, 50, 50).darken(0.5).lightness() == 25

    def test_lighten_clamps(self):
        assert Color.hsl(0, 0, 80).lighten(1).lightness() == 100

    def test_lighten_rgb(self):
        assert Color("red").lighten(0.5).hex() == "#FF8080"

    def test_keeps_alpha(self):
        assert Color.hsl(100, 50, 50, 0.4).darken(0.5).alpha() == 0.4


class TestSaturation:

    def test_saturate(self):
        assert Color.hsl(100, 50, 50).saturate(0.5).saturationl() == 75

    def test_desaturate(self):
        assert Color.hsl(100, 50, 50).desaturate(0.5).saturationl() == 25


class TestWhiteness:

    def test_whiten(self):
        assert Color.hwb(100, 20, 20).whiten(0.5).white() == pytest.approx(30)

    def test_blacken(self):
        assert Color.hwb(100, 20, 20).blacken(0.5).wblack() == pytest.approx(30)


class TestAlphaManipulation:

    def test_fade(self):
        assert Color("red").fade(0.5).alpha() == 0.5

    def test_opaquer(self):
        assert Color("rgba(255, 0, 0, 0.5)").opaquer(0.5).alpha() == 0.75

    def test_opaquer_clamps(self):
        assert Color("rgba(255, 0, 0, 0.8)").opaquer(1).alpha() == 1


class TestRotate:

    def test_rotate(self):
        assert Color.hsl(60, 50, 50).rotate(180).hue() == 240

    def test_rotate_negative(self):
        assert Color.hsl(60, 50, 50).rotate(-90).hue() == 330

    def test_rotate_full_turn(self):
        assert Color.hsl(60, 50, 50).rotate(360).hue() == 60

    def test_rotate_keeps_alpha(self):
        assert Color.hsl(60, 50, 50, 0.5).rotate(10).alpha() == 0.5
