"""
ABOUTME: Custom exception classes for environment binding
ABOUTME: Provides one error type per way a record can fail to bind
"""


class ConfigError(Exception):
    """Configuration validation error."""

    pass


class BindError(ConfigError):
    """Base class for every failure raised while binding a record."""

    pass


class NilTargetError(BindError):
    """No record was passed to bind."""

    def __init__(self, message: str = "nil target: no record to bind"):
        super().__init__(message)


class TargetNotStructPointerError(BindError):
    """The target is not a mutable dataclass instance."""

    def __init__(self, target_type: str = ""):
        self.target_type = target_type
        message = "target must be a dataclass instance"
        if target_type:
            message = f"{message}, got {target_type}"
        super().__init__(message)


class MissingTagMetadataError(BindError):
    """A record field does not declare its environment variable."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Record field \"{field}\" is missing 'env' metadata")


class MissingValueError(BindError):
    """Neither the environment nor the fallbacks supplied a value."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"environment variable {key} not set")


class TypeConversionError(BindError):
    """A resolved value could not be parsed as the field's type."""

    def __init__(self, field: str, target: str, cause: Exception | None = None):
        self.field = field
        self.target = target
        self.cause = cause
        message = f"failed to parse {target} for field {field}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class UnassignableFieldError(BindError):
    """The record field cannot be written."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"cannot assign to field {field}")


class UnsupportedFieldTypeError(BindError):
    """The record declares a field type the binder cannot convert."""

    def __init__(self, field: str, kind: str):
        self.field = field
        self.kind = kind
        super().__init__(f"unsupported field type {kind} for field {field}")
