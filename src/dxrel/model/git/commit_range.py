"""Resolved commit range: both bounds bound to concrete hashes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from dxrel.model.base import ModelMixin, decode_record
from dxrel.model.errors import UnmarshalError, ValidationError
from dxrel.model.git.ref import Ref


@dataclass(frozen=True, slots=True)
class CommitRange(ModelMixin):
    """``from..to`` after resolution. A zero ``from_`` means "from the beginning"."""

    from_: Ref = field(default_factory=Ref)
    to: Ref = field(default_factory=Ref)

    def __str__(self) -> str:
        return f"{self.from_}..{self.to}"

    def redacted(self) -> str:
        return f"{self.from_.redacted()}..{self.to.redacted()}"

    def is_zero(self) -> bool:
        return self.from_.is_zero() and self.to.is_zero()

    def validate(self) -> None:
        if self.is_zero():
            raise ValidationError("CommitRange", "CommitRange is zero (both From and To are zero)")
        if self.to.is_zero():
            raise ValidationError("CommitRange", "CommitRange To is zero (To boundary is required)", field="to")
        try:
            self.to.validate()
        except ValidationError as exc:
            raise ValidationError("CommitRange", f"invalid CommitRange To: {exc}", field="to") from exc
        if not self.from_.is_zero():
            try:
                self.from_.validate()
            except ValidationError as exc:
                raise ValidationError("CommitRange", f"invalid CommitRange From: {exc}", field="from") from exc

    def git_range(self) -> str:
        """Hash-based revision argument for ``git log``."""
        self.validate()
        if self.from_.is_zero():
            return self.to.hash.value
        return f"{self.from_.hash.value}..{self.to.hash.value}"

    def _encode(self) -> dict:
        return {
            "from": None if self.from_.is_zero() else self.from_.to_data(),
            "to": self.to.to_data(),
        }

    @classmethod
    def _decode(cls, data: Any) -> "CommitRange":
        record = decode_record("CommitRange", data, ("from", "to"))
        try:
            from_ = Ref() if record.get("from") is None else Ref.from_data(record["from"])
            to = Ref() if record.get("to") is None else Ref.from_data(record["to"])
        except UnmarshalError as exc:
            raise UnmarshalError("CommitRange", str(exc)) from exc
        return cls(from_=from_, to=to)


def new_commit_range(from_: Ref, to: Ref) -> CommitRange:
    cr = CommitRange(from_=from_, to=to)
    try:
        cr.validate()
    except ValidationError as exc:
        raise ValidationError("CommitRange", f"invalid CommitRange: {exc}", field=exc.field) from exc
    return cr


if TYPE_CHECKING:
    from dxrel.model.base import Model

    _model_check: Model = CommitRange()
