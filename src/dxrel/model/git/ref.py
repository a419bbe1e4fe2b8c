"""Resolved reference: a ref name bound to a concrete hash and kind."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from dxrel.model.base import ModelMixin, decode_record
from dxrel.model.errors import UnmarshalError, ValidationError
from dxrel.model.git.hash import Hash, is_full_hash, parse_hash
from dxrel.model.git.ref_kind import RefKind
from dxrel.model.git.ref_name import RefName, parse_ref_name

ZERO_TOKEN = "(zero)"


@dataclass(frozen=True, slots=True)
class Ref(ModelMixin):
    """A ref as Git resolved it.

    ``name`` is what the user (or Git) called it and may be empty for a bare
    hash. ``hash`` is required for any non-zero ref. The all-zero ``Ref()``
    stands for "no ref", e.g. the open lower bound of a commit range.
    """

    name: RefName = field(default_factory=RefName)
    kind: RefKind = RefKind.UNKNOWN
    hash: Hash = field(default_factory=Hash)

    def __str__(self) -> str:
        if self.is_zero():
            return ZERO_TOKEN
        if self.name.is_zero():
            return self.hash.short()
        return f"{self.name}({self.hash.short()})"

    def redacted(self) -> str:
        if self.is_zero():
            return ZERO_TOKEN
        if self.name.is_zero():
            return self.hash.redacted()
        return f"{self.name.redacted()}({self.hash.redacted()})"

    def is_zero(self) -> bool:
        return self.name.is_zero() and self.kind is RefKind.UNKNOWN and self.hash.is_zero()

    def validate(self) -> None:
        if self.hash.is_zero():
            raise ValidationError("Ref", "Ref Hash must not be empty", field="hash")
        try:
            self.hash.validate()
        except ValidationError as exc:
            raise ValidationError("Ref", f"invalid Ref Hash: {exc}", field="hash") from exc
        try:
            self.name.validate()
        except ValidationError as exc:
            raise ValidationError("Ref", f"invalid Ref Name: {exc}", field="name") from exc
        try:
            RefKind.coerce(self.kind)
        except ValidationError as exc:
            raise ValidationError("Ref", f"invalid Ref Kind: {exc}", field="kind") from exc
        if self.kind is RefKind.HASH and not self.name.is_zero() and not is_full_hash(self.name.value):
            raise ValidationError(
                "Ref",
                f"Ref Name {self.name.value!r} is not a full hash but Kind is {self.kind}",
                field="name",
            )

    def _encode(self) -> dict:
        return {
            "name": self.name.to_data(),
            "kind": self.kind.to_data(),
            "hash": self.hash.to_data(),
        }

    @classmethod
    def _decode(cls, data: Any) -> "Ref":
        record = decode_record("Ref", data, ("name", "kind", "hash"))
        try:
            name = RefName.from_data(record.get("name", ""))
            kind = RefKind.from_data(record.get("kind", "unknown"))
            hash_ = Hash.from_data(record.get("hash", ""))
        except UnmarshalError as exc:
            raise UnmarshalError("Ref", str(exc)) from exc
        return cls(name=name, kind=kind, hash=hash_)


def new_ref(
    name: Union[RefName, str],
    kind: Union[RefKind, int],
    hash: Union[Hash, str],
) -> Ref:
    """Build and validate a ``Ref``; plain strings are parsed first."""
    try:
        ref = Ref(
            name=parse_ref_name(name) if isinstance(name, str) else name,
            kind=RefKind.coerce(kind),
            hash=parse_hash(hash) if isinstance(hash, str) else hash,
        )
        ref.validate()
    except ValidationError as exc:
        raise ValidationError("Ref", f"invalid Ref: {exc}") from exc
    return ref


if TYPE_CHECKING:
    from dxrel.model.base import Model

    _model_check: Model = Ref()
