# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""Tests for named channel accessors and the limiter table."""

import pytest

from pigment import Color
from pigment.schema import CHANNELS, CHANNELS_BY_NAME, LIMITERS, apply_limiters, wrap_hue


class TestRegistry:

    def test_every_channel_has_an_accessor(self):
        for spec in CHANNELS:
            assert callable(getattr(Color, spec.name))

    def test_hue_binds_to_hsl(self):
        assert CHANNELS_BY_NAME["hue"].model == "hsl"

    def test_hue_limits_every_listed_model(self):
        for model in ("hsl", "hsv", "hwb", "hcg"):
            assert LIMITERS[model][0] is wrap_hue

    def test_lab_ab_unbounded(self):
        assert LIMITERS["lab"][1] is None
        assert LIMITERS["lab"][2] is None
        assert Color([50, -120, 150], "lab").color == (50, -120, 150)

    def test_apply_limiters(self):
        assert apply_limiters("cmyk", [120, -1, 50, 50]) == [100, 0, 50, 50]

    def test_unlimited_model_untouched(self):
        assert apply_limiters("apple", [70000, 0, 0]) == [70000, 0, 0]

    @pytest.mark.parametrize(
        "value,expected", [(0, 0), (360, 0), (370, 10), (-10, 350), (725, 5)]
    )
    def test_wrap_hue(self, value, expected):
        assert wrap_hue(value) == pytest.approx(expected)

    def test_wrap_hue_keeps_integers(self):
        assert type(wrap_hue(-10)) is int
        assert type(wrap_hue(370.5)) is float
        assert wrap_hue(370.5) == pytest.approx(10.5)

    def test_rounded_hsl_channels_are_ints(self):
        color = Color.hsl(0, 0, 100).round().color
        assert color == (0, 0, 100)
        assert all(type(v) is int for v in color)


class TestGetters:

    def test_rgb_channels(self):
        c = Color("rgb(10, 30, 25)")
        assert (c.red(), c.green(), c.blue()) == (10, 30, 25)

    def test_getter_converts(self):
        assert Color.hsl(0, 100, 50).red() == 255

    def test_hue_reads_through_hsl(self):
        assert Color.hsv(200, 50, 50).hue() == pytest.approx(200)

    def test_cmyk(self):
        c = Color("red")
        assert (c.cyan(), c.magenta(), c.yellow(), c.black()) == (0, 100, 100, 0)

    def test_hwb(self):
        c = Color.hwb(120, 20, 30)
        assert (c.white(), c.wblack()) == (20, 30)

    def test_lab_lightness(self):
        assert Color("white").l() == pytest.approx(100, abs=1e-6)

    def test_xyz(self):
        assert Color("white").y() == pytest.approx(100, abs=1e-6)


class TestSetters:

    def test_setter_returns_new_color_in_bound_model(self):
        c = Color.hsl(0, 100, 50)
        updated = c.red(10)
        assert updated.model == "rgb"
        assert updated.red() == 10
        assert c.red() == 255

    def test_setter_clamps(self):
        assert Color("black").red(300).red() == 255
        assert Color("black").lightness(-5).lightness() == 0

    def test_hue_setter_wraps(self):
        assert Color("red").hue(480).hue() == 120

    def test_hue_setter_rotates_color(self):
        assert Color("red").hue(120).hex() == "#00FF00"

    def test_setter_keeps_alpha(self):
        c = Color("rgba(255, 0, 0, 0.5)").green(255)
        assert c.alpha() == 0.5
        assert c.color == (255, 255, 0)

    def test_lab_setter(self):
        assert Color("white").a(20).model == "lab"


class TestGenericAccess:

    def test_channel(self):
        assert Color("red").channel("red") == 255

    def test_with_channel(self):
        assert Color("red").with_channel("blue", 255).hex() == "#FF00FF"

    def test_unknown_channel(self):
        with pytest.raises(ValueError, match="Unknown channel: nope"):
            Color("red").channel("nope")
        with pytest.raises(ValueError, match="Unknown channel"):
            Color("red").with_channel("nope", 1)
