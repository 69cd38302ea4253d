"""
ABOUTME: Environment binder that populates dataclass records from environment variables
ABOUTME: Walks declared fields in order, resolves values with fallbacks and assigns parsed results
"""

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any, Optional, TypeVar

from .config import Lookup, resolve_value
from .convert import convert
from .exceptions import (
    MissingTagMetadataError,
    NilTargetError,
    TargetNotStructPointerError,
    UnassignableFieldError,
)
from .fields import describe

T = TypeVar("T")


def _check_target(record: Any) -> None:
    if record is None:
        raise NilTargetError()
    # A dataclass class object is the "type, not a value" case.
    if isinstance(record, type) or not dataclasses.is_dataclass(record):
        raise TargetNotStructPointerError(type(record).__name__)


def _is_frozen(record: Any) -> bool:
    params = getattr(type(record), "__dataclass_params__", None)
    return bool(params and params.frozen)


def bind(
    record: Any,
    fallbacks: Optional[Mapping[str, str]] = None,
    lookup: Optional[Lookup] = None,
) -> None:
    """
    Populate the fields of a dataclass instance from environment variables.

    Fields are processed in declaration order. For each field the environment
    variable named by its `env` metadata is looked up; an empty result falls
    back to `fallbacks`. The string is converted according to the field's type
    (str, bool, int, list[str] or tuple[str, ...]) and assigned in place.

    The first failure aborts the call. Fields bound before the failing one keep
    their new values; later fields are left untouched.

    Parameters:
        record: The dataclass instance to populate.
        fallbacks (Mapping[str, str], optional): Default values keyed by environment variable name.
        lookup (Callable[[str], str], optional): Environment lookup; defaults to the process environment.

    Raises:
        NilTargetError: If `record` is None.
        TargetNotStructPointerError: If `record` is not a dataclass instance.
        MissingTagMetadataError: If a field has no `env` metadata.
        MissingValueError: If neither source supplies a non-empty value.
        UnassignableFieldError: If the record is frozen.
        TypeConversionError: If a bool or int value is malformed.
        UnsupportedFieldTypeError: If a field's type cannot be converted.
    """
    _check_target(record)
    frozen = _is_frozen(record)

    for descriptor in describe(type(record)):
        if not descriptor.source_key:
            raise MissingTagMetadataError(descriptor.name)

        value, source = resolve_value(descriptor.source_key, fallbacks, lookup)

        if frozen:
            raise UnassignableFieldError(descriptor.name)

        setattr(record, descriptor.name, convert(descriptor, value))
        logging.debug(
            f"Bound field {descriptor.name} from {source} variable {descriptor.source_key}"
        )


def load(
    record_type: type[T],
    fallbacks: Optional[Mapping[str, str]] = None,
    lookup: Optional[Lookup] = None,
) -> T:
    """
    Instantiate `record_type` with its dataclass defaults and bind it.

    Every field of `record_type` needs a default or default_factory.
    """
    if record_type is None:
        raise NilTargetError()
    if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
        raise TargetNotStructPointerError(type(record_type).__name__)
    record = record_type()
    bind(record, fallbacks, lookup)
    return record
