"""Model error hierarchy: validation, parse, marshal and unmarshal failures."""

from __future__ import annotations

from typing import Optional


class ModelError(Exception):
    """Base class for every error raised by the model layer."""


class ValidationError(ModelError, ValueError):
    """Raised when a value breaks a structural or semantic rule.

    ``reason`` is the human readable rule violation. ``field`` is set when the
    failure is attributable to one field of a composite model.
    """

    def __init__(self, type_name: str, reason: str, *, field: Optional[str] = None) -> None:
        self.type_name = type_name
        self.field = field
        self.reason = reason
        super().__init__(reason)


class ParseError(ValidationError):
    """Raised when a string does not name a known enum member."""

    def __init__(self, type_name: str, value: str, reason: str) -> None:
        self.value = value
        super().__init__(type_name, reason)


class MarshalError(ModelError):
    """Raised when an invalid value is asked to serialise itself."""

    def __init__(self, type_name: str, reason: str) -> None:
        self.type_name = type_name
        self.reason = reason
        super().__init__(f"cannot marshal invalid {type_name}: {reason}")


class UnmarshalError(ModelError):
    """Raised when input cannot be decoded into a valid model value."""

    def __init__(self, type_name: str, reason: str) -> None:
        self.type_name = type_name
        self.reason = reason
        super().__init__(f"cannot unmarshal {type_name}: {reason}")
