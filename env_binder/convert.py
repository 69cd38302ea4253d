"""
ABOUTME: String-to-value conversion for environment-bound fields
ABOUTME: Parses booleans, range-checked signed integers and comma-separated string lists
"""

import re

from .exceptions import TypeConversionError, UnsupportedFieldTypeError
from .fields import FieldDescriptor, FieldKind

TRUE_LITERALS = frozenset({"1", "t", "true"})
FALSE_LITERALS = frozenset({"0", "f", "false"})

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_bool(value: str) -> bool:
    """Parse a boolean literal (1, t, true, 0, f, false), ignoring case."""
    lowered = value.lower()
    if lowered in TRUE_LITERALS:
        return True
    if lowered in FALSE_LITERALS:
        return False
    raise ValueError(f"invalid boolean literal {value!r}")


def parse_int(value: str, bits: int = 64) -> int:
    """
    Parse a base-10 signed integer and check it fits in `bits`.

    Only an optional sign followed by ASCII digits is accepted; whitespace and
    underscores are rejected.
    """
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError(f"invalid base-10 integer {value!r}")
    number = int(value)
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    if not low <= number <= high:
        raise ValueError(f"value {value} out of range for int{bits}")
    return number


def split_list(value: str) -> list[str]:
    """Split on commas with no trimming or escaping."""
    return value.split(",")


def convert(descriptor: FieldDescriptor, value: str):
    """
    Convert a resolved string to the field's declared type.

    Raises:
        TypeConversionError: If the value is malformed for a bool or int field.
        UnsupportedFieldTypeError: If the field's type has no converter.
    """
    kind = descriptor.kind
    if kind is FieldKind.STRING:
        return value
    if kind is FieldKind.BOOL:
        try:
            return parse_bool(value)
        except ValueError as e:
            raise TypeConversionError(descriptor.name, "bool", e) from e
    if kind is FieldKind.INT:
        try:
            return parse_int(value, descriptor.bits)
        except ValueError as e:
            raise TypeConversionError(descriptor.name, "int", e) from e
    if kind is FieldKind.STRING_LIST:
        return split_list(value)
    if kind is FieldKind.STRING_TUPLE:
        return tuple(split_list(value))
    raise UnsupportedFieldTypeError(descriptor.name, descriptor.type_name)
