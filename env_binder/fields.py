"""
ABOUTME: Field descriptor table for environment-bound dataclass records
ABOUTME: Declares source keys on fields and classifies each field's type for conversion
"""

import dataclasses
import inspect
import sys
from dataclasses import dataclass
from enum import Enum
from types import SimpleNamespace
from typing import Any, get_args, get_origin, get_type_hints

ENV_METADATA_KEY = "env"
BITS_METADATA_KEY = "env_bits"
SECRET_METADATA_KEY = "env_secret"
SUPPORTED_BITS = (8, 16, 32, 64)


class FieldKind(Enum):
    """Closed set of field types the binder knows how to convert."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    STRING_LIST = "list[str]"
    STRING_TUPLE = "tuple[str, ...]"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class FieldDescriptor:
    """One row of a record's descriptor table."""

    name: str
    source_key: str
    kind: FieldKind
    type_name: str
    bits: int = 64
    secret: bool = False


def env_field(
    key: str, *, bits: int = 64, secret: bool = False, **kwargs: Any
) -> Any:
    """
    Declare a dataclass field populated from the environment variable `key`.

    Parameters:
        key (str): Name of the environment variable backing this field.
        bits (int): Signed width used to range-check `int` fields (8, 16, 32 or 64).
        secret (bool): Mark the value as sensitive so reports mask it.
        **kwargs: Passed through to `dataclasses.field` (default, default_factory, repr, ...).

    Returns:
        dataclasses.Field: A field carrying the source key in its metadata.
    """
    if bits not in SUPPORTED_BITS:
        raise ValueError(f"bits must be one of {SUPPORTED_BITS}, got {bits}")
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[ENV_METADATA_KEY] = key
    metadata[BITS_METADATA_KEY] = bits
    metadata[SECRET_METADATA_KEY] = secret
    return dataclasses.field(metadata=metadata, **kwargs)


def type_name(tp: Any) -> str:
    """Readable name for a field annotation, used in error messages."""
    if isinstance(tp, str):
        return tp
    if get_origin(tp) is None and isinstance(tp, type):
        return tp.__name__
    return str(tp).replace("typing.", "")


def classify(tp: Any) -> FieldKind:
    """Map a resolved annotation onto a FieldKind."""
    # bool before int: bool is an int subclass but never parsed as one
    if tp is bool:
        return FieldKind.BOOL
    if tp is str:
        return FieldKind.STRING
    if tp is int:
        return FieldKind.INT

    origin = get_origin(tp)
    args = get_args(tp)
    if origin is list and args == (str,):
        return FieldKind.STRING_LIST
    if origin is tuple and args == (str, Ellipsis):
        return FieldKind.STRING_TUPLE
    return FieldKind.UNSUPPORTED


def _owner(record_type: type, name: str) -> type:
    """Class in the MRO whose own annotations declare `name`."""
    for base in record_type.__mro__:
        try:
            own = inspect.get_annotations(base)
        except NameError:
            # lazily evaluated annotations with an undefined name
            continue
        if name in own:
            return base
    return record_type


def _resolve_hint(record_type: type, f: dataclasses.Field) -> Any:
    owner = _owner(record_type, f.name)
    module = sys.modules.get(owner.__module__)
    holder = SimpleNamespace(__annotations__={f.name: f.type})
    # Module names shadow class attributes, as get_type_hints does for classes.
    try:
        hints = get_type_hints(
            holder,
            globalns=dict(vars(owner)),
            localns=dict(vars(module)) if module else {},
        )
    except (NameError, TypeError):
        # Only this field keeps its raw annotation; it classifies as
        # UNSUPPORTED and is reported by bind when reached.
        return f.type
    return hints[f.name]


def describe(record_type: type) -> list[FieldDescriptor]:
    """
    Build the descriptor table for a dataclass type, in declaration order.

    Missing metadata yields an empty `source_key` and unknown types yield
    FieldKind.UNSUPPORTED; neither raises here so the caller can report the
    first offending field in order.

    Raises:
        TypeError: If `record_type` is not a dataclass type.
    """
    if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
        raise TypeError(f"{record_type!r} is not a dataclass type")

    table = []
    for f in dataclasses.fields(record_type):
        tp = _resolve_hint(record_type, f)
        table.append(
            FieldDescriptor(
                name=f.name,
                source_key=f.metadata.get(ENV_METADATA_KEY, "") or "",
                kind=classify(tp),
                type_name=type_name(tp),
                bits=f.metadata.get(BITS_METADATA_KEY, 64),
                secret=bool(f.metadata.get(SECRET_METADATA_KEY, False)),
            )
        )
    return table
