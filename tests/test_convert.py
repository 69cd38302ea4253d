"""
ABOUTME: Unit tests for value conversion
ABOUTME: Tests boolean and integer parsing, list splitting and kind dispatch
"""

import pytest

from env_binder.convert import convert, parse_bool, parse_int, split_list
from env_binder.exceptions import TypeConversionError, UnsupportedFieldTypeError
from env_binder.fields import FieldDescriptor, FieldKind


def descriptor(kind, bits=64, type_name="x"):
    return FieldDescriptor(
        name="field", source_key="KEY", kind=kind, type_name=type_name, bits=bits
    )


class TestParseBool:
    """Test boolean literal parsing."""

    @pytest.mark.parametrize("value", ["1", "t", "T", "true", "TRUE", "True"])
    def test_true_literals(self, value):
        """Test accepted true literals."""
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", ["0", "f", "F", "false", "FALSE", "False"])
    def test_false_literals(self, value):
        """Test accepted false literals."""
        assert parse_bool(value) is False

    @pytest.mark.parametrize("value", ["not-a-bool", "yes", "no", "on", "2", " true"])
    def test_rejects_other_values(self, value):
        """Test that anything else is rejected."""
        with pytest.raises(ValueError):
            parse_bool(value)


class TestParseInt:
    """Test base-10 signed integer parsing."""

    def test_plain_and_signed(self):
        """Test unsigned, negative and explicitly positive values."""
        assert parse_int("42") == 42
        assert parse_int("-17") == -17
        assert parse_int("+5") == 5

    @pytest.mark.parametrize("value", ["", "abc", "1.5", " 1", "1_000", "0x10", "-"])
    def test_rejects_malformed(self, value):
        """Test that non-decimal input is rejected."""
        with pytest.raises(ValueError):
            parse_int(value)

    def test_range_is_checked_for_width(self):
        """Test that values are range-checked instead of truncated."""
        assert parse_int("127", bits=8) == 127
        assert parse_int("-128", bits=8) == -128
        with pytest.raises(ValueError, match="out of range for int8"):
            parse_int("128", bits=8)
        with pytest.raises(ValueError, match="out of range for int16"):
            parse_int("70000", bits=16)

    def test_64_bit_bounds(self):
        """Test the default 64-bit bounds."""
        assert parse_int("9223372036854775807") == 2**63 - 1
        with pytest.raises(ValueError):
            parse_int("9223372036854775808")


class TestSplitList:
    """Test comma splitting."""

    def test_splits_in_order(self):
        """Test ordered split on commas."""
        assert split_list("create,test") == ["create", "test"]

    def test_no_commas_gives_single_element(self):
        """Test that a value without commas yields one element."""
        assert split_list("create") == ["create"]

    def test_no_trimming(self):
        """Test that whitespace and empty segments are preserved."""
        assert split_list(" a, b,,") == [" a", " b", "", ""]

    def test_empty_string(self):
        """Test that an empty string splits into one empty element."""
        assert split_list("") == [""]


class TestConvert:
    """Test dispatch on field kind."""

    def test_string_verbatim(self):
        """Test that strings are assigned verbatim."""
        assert convert(descriptor(FieldKind.STRING), " raw value ") == " raw value "

    def test_bool(self):
        """Test bool conversion."""
        assert convert(descriptor(FieldKind.BOOL), "t") is True

    def test_bool_failure(self):
        """Test that a malformed bool raises TypeConversionError chained to ValueError."""
        with pytest.raises(TypeConversionError) as exc_info:
            convert(descriptor(FieldKind.BOOL), "not-a-bool")
        assert exc_info.value.target == "bool"
        assert exc_info.value.field == "field"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_int_uses_descriptor_bits(self):
        """Test that int conversion honours the declared width."""
        assert convert(descriptor(FieldKind.INT, bits=16), "8080") == 8080
        with pytest.raises(TypeConversionError) as exc_info:
            convert(descriptor(FieldKind.INT, bits=16), "65536")
        assert exc_info.value.target == "int"

    def test_string_list(self):
        """Test list[str] conversion."""
        assert convert(descriptor(FieldKind.STRING_LIST), "a,b") == ["a", "b"]

    def test_string_tuple(self):
        """Test tuple[str, ...] conversion."""
        assert convert(descriptor(FieldKind.STRING_TUPLE), "a,b") == ("a", "b")

    def test_unsupported(self):
        """Test that unsupported kinds raise with the type name."""
        with pytest.raises(UnsupportedFieldTypeError) as exc_info:
            convert(descriptor(FieldKind.UNSUPPORTED, type_name="list[int]"), "1,2")
        assert exc_info.value.kind == "list[int]"
