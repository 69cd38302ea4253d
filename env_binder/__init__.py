"""
ABOUTME: Populate dataclass configuration records from environment variables
ABOUTME: Exposes the binder, field declaration helpers and the error taxonomy
"""

from .binder import bind, load
from .exceptions import (
    BindError,
    ConfigError,
    MissingTagMetadataError,
    MissingValueError,
    NilTargetError,
    TargetNotStructPointerError,
    TypeConversionError,
    UnassignableFieldError,
    UnsupportedFieldTypeError,
)
from .fields import FieldDescriptor, FieldKind, describe, env_field

__version__ = "0.1.0"
__all__ = [
    "bind",
    "load",
    "env_field",
    "describe",
    "FieldDescriptor",
    "FieldKind",
    "ConfigError",
    "BindError",
    "NilTargetError",
    "TargetNotStructPointerError",
    "MissingTagMetadataError",
    "MissingValueError",
    "TypeConversionError",
    "UnassignableFieldError",
    "UnsupportedFieldTypeError",
]
