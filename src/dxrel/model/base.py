"""Model contract and the shared validate-then-encode / decode-then-validate codec.

Every model type mixes in :class:`ModelMixin` and implements three hooks:

* ``validate()`` raises :class:`ValidationError` on any rule violation,
* ``_encode()`` returns the plain wire record (``str`` / ``dict`` / ``bool``),
* ``_decode(data)`` builds an *unvalidated* instance from a wire record.

The public codec (``to_data`` / ``from_data`` and the JSON / YAML wrappers)
wraps those hooks so an invalid value is never emitted and a decoded value is
never returned before it has been validated.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Protocol, Type, TypeVar, runtime_checkable

import yaml

from dxrel.model.errors import MarshalError, UnmarshalError, ValidationError

M = TypeVar("M", bound="ModelMixin")


@runtime_checkable
class Model(Protocol):
    """Structural contract shared by every model value."""

    def validate(self) -> None: ...

    def is_zero(self) -> bool: ...

    def type_name(self) -> str: ...

    def redacted(self) -> str: ...

    def to_data(self) -> Any: ...

    def to_json(self, *, indent: Optional[int] = None) -> str: ...

    def to_yaml(self) -> str: ...


class ModelMixin:
    """Codec plumbing shared by all models."""

    __slots__ = ()

    # ---- hooks ----

    def validate(self) -> None:
        raise NotImplementedError

    def is_zero(self) -> bool:
        raise NotImplementedError

    def _encode(self) -> Any:
        raise NotImplementedError

    @classmethod
    def _decode(cls: Type[M], data: Any) -> M:
        raise NotImplementedError

    # ---- identity / logging ----

    @classmethod
    def type_name(cls) -> str:
        return cls.__name__

    def redacted(self) -> str:
        return str(self)

    # ---- codec ----

    def to_data(self) -> Any:
        """Return the wire record, refusing to encode an invalid value."""
        try:
            self.validate()
        except ValidationError as exc:
            raise MarshalError(self.type_name(), str(exc)) from exc
        return self._encode()

    @classmethod
    def from_data(cls: Type[M], data: Any) -> M:
        """Decode a wire record, then validate before handing the value out."""
        try:
            value = cls._decode(data)
        except ValidationError as exc:
            raise UnmarshalError(cls.type_name(), f"unmarshaled {cls.type_name()} is invalid: {exc}") from exc
        try:
            value.validate()
        except ValidationError as exc:
            raise UnmarshalError(cls.type_name(), f"unmarshaled {cls.type_name()} is invalid: {exc}") from exc
        return value

    def to_json(self, *, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_data(), indent=indent)

    @classmethod
    def from_json(cls: Type[M], text: str) -> M:
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, TypeError) as exc:
            raise UnmarshalError(cls.type_name(), f"malformed JSON: {exc}") from exc
        return cls.from_data(data)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_data(), sort_keys=False, allow_unicode=True)

    @classmethod
    def from_yaml(cls: Type[M], text: str) -> M:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise UnmarshalError(cls.type_name(), f"malformed YAML: {exc}") from exc
        return cls.from_data(data)


# ---- wire-record decoding helpers ----


def decode_str(type_name: str, data: Any, *, field: Optional[str] = None) -> str:
    """Require *data* to be a string, naming *field* in the error if given."""
    if data is None:
        return ""
    if not isinstance(data, str):
        where = f"{type_name}.{field}" if field else type_name
        raise UnmarshalError(type_name, f"{where} must be a string, got {type(data).__name__}")
    return data


def decode_record(type_name: str, data: Any, fields: tuple[str, ...]) -> Dict[str, Any]:
    """Require *data* to be a mapping and keep only the known *fields*.

    Missing fields are absent from the result; unknown keys are ignored.
    """
    if not isinstance(data, Mapping):
        raise UnmarshalError(type_name, f"expected a mapping, got {type(data).__name__}")
    return {k: data[k] for k in fields if k in data}
