"""Generic helpers that work on any model value."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Type, TypeVar

from dxrel.model.base import Model, ModelMixin
from dxrel.model.errors import ModelError, ValidationError

T = TypeVar("T", bound=Model)
M = TypeVar("M", bound=ModelMixin)


def validate_all(models: Sequence[Model]) -> None:
    """Validate every model and report all failures at once."""
    failures: List[str] = []
    for i, m in enumerate(models):
        try:
            m.validate()
        except ValidationError as exc:
            failures.append(f"model[{i}] ({m.type_name()}): {exc}")
    if failures:
        raise ValidationError("models", "; ".join(failures))


def filter_zero(models: Iterable[T]) -> List[T]:
    return [m for m in models if not m.is_zero()]


def must_validate(model: T) -> T:
    """Return *model* unchanged, or raise if it is invalid.

    Meant for values built from constants, where a failure is a programming error.
    """
    model.validate()
    return model


def safe_string(model: Model, *, unsafe: bool = False) -> str:
    """``redacted()`` unless the caller explicitly opts into ``str()``."""
    if unsafe:
        return str(model)
    return model.redacted()


def to_json(model: Model, *, indent: Optional[int] = None) -> str:
    return model.to_json(indent=indent)


def to_yaml(model: Model) -> str:
    return model.to_yaml()


def from_json(cls: Type[M], text: str) -> M:
    return cls.from_json(text)


def from_yaml(cls: Type[M], text: str) -> M:
    return cls.from_yaml(text)


def clone(model: M) -> M:
    """Copy *model* through its wire form, which re-validates the copy."""
    return type(model).from_data(model.to_data())


def models_equal(a: Model, b: Model) -> bool:
    """Compare two models by wire form. Unserialisable values are never equal."""
    try:
        return a.to_data() == b.to_data()
    except ModelError:
        return False
