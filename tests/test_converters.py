"""Tests unitaires pour les conversions typées."""

import math

import pytest

from simpleini.errors import IniConversionError
from simpleini.ini.converters import (
    CONVERTERS,
    BoolConverter,
    ValueConverter,
    convert_value,
)


class TestConvertValue:
    """Tests pour convert_value."""

    @pytest.mark.parametrize("value,expected", [
        ("3", 3), ("-12", -12), ("+7", 7), ("007", 7),
    ])
    def test_int(self, value, expected):
        assert convert_value(value, int) == expected

    @pytest.mark.parametrize("value", [
        "hello with trailing", "3 with leading", "3.0", "", "1_000", "0x10",
    ])
    def test_int_strict(self, value):
        with pytest.raises(IniConversionError):
            convert_value(value, int)

    @pytest.mark.parametrize("value,expected", [
        ("3", 3.0), ("3.5", 3.5), ("-.5", -0.5), ("1e3", 1000.0), ("2.", 2.0),
    ])
    def test_float(self, value, expected):
        assert convert_value(value, float) == expected

    def test_float_special_values(self):
        assert math.isinf(convert_value("inf", float))
        assert math.isinf(convert_value("-Infinity", float))
        assert math.isnan(convert_value("nan", float))

    @pytest.mark.parametrize("value", ["3 with leading", "1.2.3", "e5", "", "1_0.0"])
    def test_float_strict(self, value):
        with pytest.raises(IniConversionError):
            convert_value(value, float)

    def test_str_always_succeeds(self):
        assert convert_value("3 with leading", str) == "3 with leading"
        assert convert_value("", str) == ""

    @pytest.mark.parametrize("value", ["1", "true", "Yes", "ON"])
    def test_bool_true(self, value):
        assert convert_value(value, bool) is True

    @pytest.mark.parametrize("value", ["0", "false", "No", "OFF"])
    def test_bool_false(self, value):
        assert convert_value(value, bool) is False

    def test_bool_invalid(self):
        with pytest.raises(IniConversionError):
            convert_value("maybe", bool)

    def test_unsupported_type(self):
        with pytest.raises(TypeError, match="non supporté"):
            convert_value("1", list)

    def test_error_carries_context(self):
        with pytest.raises(IniConversionError) as ctx:
            convert_value("abc", int)
        assert ctx.value.value == "abc"
        assert ctx.value.target_type is int
        assert isinstance(ctx.value, ValueError)


class TestRegistry:
    """Tests du registre de convertisseurs."""

    def test_closed_set(self):
        assert set(CONVERTERS) == {int, float, str, bool}

    def test_converters_implement_interface(self):
        assert all(isinstance(c, ValueConverter) for c in CONVERTERS.values())
        assert isinstance(CONVERTERS[bool], BoolConverter)
