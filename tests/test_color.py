# Copyright (c) 2026 Pigment
# SPDX-License-Identifier: MIT

"""Tests for Color construction, conversion methods and static constructors."""

import dataclasses

import numpy as np
import pytest

from pigment import Color


class TestConstruction:

    def test_default_is_opaque_black(self):
        c = Color()
        assert (c.model, c.color, c.valpha) == ("rgb", (0, 0, 0), 1)

    def test_copy(self):
        original = Color("rgba(10, 30, 25, 0.5)")
        assert Color(original) == original

    def test_hex_string(self):
        c = Color("#0a1e19")
        assert c.model == "rgb"
        assert c.color == (10, 30, 25)

    def test_string_alpha(self):
        assert Color("#0a1e1980").valpha == 0.5
        assert Color("hsla(165, 50%, 8%, 0.3)").valpha == 0.3

    def test_hsl_string_keeps_model(self):
        c = Color("hsl(165, 50%, 8%)")
        assert c.model == "hsl"
        assert c.color == (165, 50, 8)

    def test_keyword_string(self):
        assert Color("teal").color == (0, 128, 128)

    def test_array(self):
        c = Color([10, 30, 25, 0.5])
        assert c.color == (10, 30, 25)
        assert c.valpha == 0.5

    def test_array_with_model(self):
        c = Color([165, 50, 8], "hsl")
        assert c.model == "hsl"
        assert c.color == (165, 50, 8)

    def test_array_non_numeric_channels_zero_filled(self):
        assert Color([10, "x", None]).color == (10, 0, 0)

    def test_short_array_zero_filled(self):
        assert Color([10]).color == (10, 0, 0)

    def test_array_non_numeric_alpha_is_opaque(self):
        assert Color([10, 30, 25, "x"]).valpha == 1

    def test_numpy_array(self):
        c = Color(np.array([10, 30, 25]))
        assert c.color == (10, 30, 25)
        assert all(type(v) is int for v in c.color)

    def test_integer(self):
        assert Color(0x0A1E19).color == (10, 30, 25)

    def test_integer_is_masked_to_24_bits(self):
        assert Color(0x1FFFFFF).color == (255, 255, 255)

    def test_mapping(self):
        c = Color({"h": 165, "s": 50, "l": 8, "alpha": 0.5})
        assert c.model == "hsl"
        assert c.color == (165, 50, 8)
        assert c.valpha == 0.5

    def test_mapping_non_numeric_alpha_is_transparent(self):
        assert Color({"r": 10, "g": 30, "b": 25, "alpha": "x"}).valpha == 0

    def test_mapping_missing_channel_values(self):
        assert Color({"r": 10, "g": None, "b": 25}).color == (10, 0, 25)

    def test_mapping_apple_labels(self):
        assert Color({"r16": 65535, "g16": 0, "b16": 0}).model == "apple"

    def test_channels_limited(self):
        assert Color([300, -5, 25]).color == (255, 0, 25)

    def test_hue_wrapped(self):
        assert Color([400, 50, 50], "hsl").color[0] == 40
        assert Color([-30, 50, 50], "hsl").color[0] == 330

    def test_alpha_clamped(self):
        assert Color([10, 30, 25, 5]).valpha == 1
        assert Color([10, 30, 25, -1]).valpha == 0

    @pytest.mark.parametrize("model", ["keyword", "gray", "hex"])
    def test_skipped_models_mean_rgb(self, model):
        assert Color([10, 30, 25], model) == Color([10, 30, 25])


class TestConstructionErrors:

    def test_unparseable_string(self):
        with pytest.raises(ValueError, match="Unable to parse color from string"):
            Color("notacolor")

    def test_empty_string(self):
        with pytest.raises(ValueError, match="Unable to parse color from string"):
            Color("")

    def test_unknown_key_set(self):
        with pytest.raises(ValueError, match="Unable to parse color from object"):
            Color({"r": 1, "g": 2})

    def test_unusable_object(self):
        with pytest.raises(ValueError, match="Unable to parse color from object"):
            Color(object())

    def test_unknown_model(self):
        with pytest.raises(ValueError, match="Unknown model: nope"):
            Color([1, 2, 3], "nope")


class TestImmutability:

    def test_fields_are_frozen(self):
        c = Color("red")
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.valpha = 0.5

    def test_equal_values_are_equal_and_hashable(self):
        assert Color("red") == Color([255, 0, 0])
        assert len({Color("red"), Color("#FF0000")}) == 1

    def test_operations_return_new_values(self):
        c = Color("red")
        c.alpha(0.5)
        c.lighten(0.5)
        assert c == Color("red")


class TestConversionMethods:

    def test_convert_to_hsl(self):
        c = Color("rgb(10, 30, 25)").hsl()
        assert c.model == "hsl"
        np.testing.assert_allclose(c.color, [165, 50, 7.843137], atol=1e-5)

    def test_same_model_is_copy(self):
        c = Color("red")
        assert c.rgb() == c

    def test_alpha_kept(self):
        assert Color([10, 30, 25, 0.5]).ansi256().alpha() == 0.5

    def test_single_channel_model(self):
        assert Color("red").ansi16().color == (91,)

    def test_arguments_build_new_color(self):
        c = Color("red").hsl(120, 100, 50)
        assert c.model == "hsl"
        assert c.color == (120, 100, 50)

    def test_sequence_argument(self):
        assert Color("red").hsl([120, 100, 50]).color == (120, 100, 50)


class TestStaticConstructors:

    def test_positional_channels(self):
        c = Color.rgb(10, 30, 25)
        assert c.model == "rgb"
        assert c.color == (10, 30, 25)

    def test_positional_alpha(self):
        assert Color.rgb(10, 30, 25, 0.5).valpha == 0.5

    def test_missing_channels_zero_filled(self):
        assert Color.rgb(10, 30).color == (10, 30, 0)

    def test_sequence(self):
        assert Color.hsl([260, 10, 10]).color == (260, 10, 10)

    def test_mapping(self):
        assert Color.rgb({"r": 10, "g": 30, "b": 25}).color == (10, 30, 25)

    def test_no_arguments(self):
        assert Color.rgb() == Color()

    def test_constructor_and_method_share_name(self):
        assert Color.hsl(120, 100, 50).rgb().round().color == (0, 255, 0)


class TestDictRoundtrip:

    def test_to_dict(self):
        assert Color([10, 30, 25, 0.5]).to_dict() == {
            "model": "rgb",
            "color": [10, 30, 25],
            "alpha": 0.5,
        }

    def test_roundtrip(self):
        c = Color("hsla(165, 50%, 8%, 0.3)")
        assert Color.from_dict(c.to_dict()) == c

    def test_alpha_defaults_to_one(self):
        assert Color.from_dict({"model": "rgb", "color": [1, 2, 3]}).valpha == 1

    def test_wrong_channel_count(self):
        with pytest.raises(ValueError, match="Expected 3 channels"):
            Color.from_dict({"model": "rgb", "color": [1, 2]})

    def test_unknown_model(self):
        with pytest.raises(ValueError, match="Unknown model"):
            Color.from_dict({"model": "nope", "color": [1, 2, 3]})
