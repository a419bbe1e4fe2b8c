"""Coarse classification of a Git reference: closed enum plus structural classifier."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any, Dict, Union

from dxrel.model.base import ModelMixin, decode_str
from dxrel.model.errors import ParseError, ValidationError
from dxrel.model.git.hash import is_full_hash
from dxrel.model.git.ref_name import RefName

BRANCH_PREFIX = "refs/heads/"
REMOTE_BRANCH_PREFIX = "refs/remotes/"
TAG_PREFIX = "refs/tags/"
HEAD_NAMES = frozenset({"HEAD", "FETCH_HEAD", "ORIG_HEAD", "MERGE_HEAD"})


class RefKind(ModelMixin, IntEnum):
    """What kind of thing a reference names.

    The numeric values are internal; every external form (``str()``, JSON,
    YAML) uses the canonical lowercase name so new kinds can be appended
    without breaking stored data.
    """

    UNKNOWN = 0
    BRANCH = 1
    REMOTE_BRANCH = 2
    TAG = 3
    HEAD = 4
    HASH = 5

    def __str__(self) -> str:
        return _KIND_NAMES[self]

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def redacted(self) -> str:
        return str(self)

    def is_zero(self) -> bool:
        return self is RefKind.UNKNOWN

    def validate(self) -> None:
        # members are a closed set; raw integers go through coerce()
        RefKind.coerce(int(self))

    def _encode(self) -> str:
        return str(self)

    @classmethod
    def _decode(cls, data: Any) -> "RefKind":
        return cls.parse(decode_str("RefKind", data))

    @classmethod
    def parse(cls, s: str) -> "RefKind":
        """Parse a kind name, case-insensitively, accepting remote-branch aliases."""
        kind = _NAME_TO_KIND.get(s.strip().lower())
        if kind is None:
            valid = ", ".join(_KIND_NAMES[k] for k in cls)
            raise ParseError("RefKind", s, f"unknown RefKind name {s!r} (valid: {valid})")
        return kind

    @classmethod
    def coerce(cls, value: Union["RefKind", int]) -> "RefKind":
        """Return the member for *value*, rejecting numbers outside the enum."""
        if isinstance(value, RefKind):
            return value
        if isinstance(value, int) and not isinstance(value, bool) and value in cls._value2member_map_:
            return cls(value)
        raise ValidationError(
            "RefKind",
            f"RefKind value {value!r} is not a known kind (valid range: 0-{int(cls.HASH)})",
        )

    @classmethod
    def describe(cls, value: int) -> str:
        """Name for *value*, or ``RefKind(<n>)`` when it is not a defined kind.

        The fallback form is deliberately not accepted by :meth:`parse`.
        """
        member = cls._value2member_map_.get(value)
        if member is None:
            return f"RefKind({value})"
        return str(member)


_KIND_NAMES: Dict[RefKind, str] = {
    RefKind.UNKNOWN: "unknown",
    RefKind.BRANCH: "branch",
    RefKind.REMOTE_BRANCH: "remote-branch",
    RefKind.TAG: "tag",
    RefKind.HEAD: "head",
    RefKind.HASH: "hash",
}

_NAME_TO_KIND: Dict[str, RefKind] = {
    **{name: kind for kind, name in _KIND_NAMES.items()},
    "remote_branch": RefKind.REMOTE_BRANCH,
    "remotebranch": RefKind.REMOTE_BRANCH,
}


def parse_ref_kind(s: str) -> RefKind:
    return RefKind.parse(s)


def classify_ref_name(name: Union[RefName, str]) -> RefKind:
    """Derive a kind from the *shape* of a ref name, without asking Git.

    Short names such as ``main`` or ``v1.0.0`` are ambiguous until resolved and
    classify as ``UNKNOWN``; so do abbreviated hashes.
    """
    s = str(name)
    if not s:
        return RefKind.UNKNOWN
    if s in HEAD_NAMES:
        return RefKind.HEAD
    if s.startswith(BRANCH_PREFIX):
        return RefKind.BRANCH
    if s.startswith(REMOTE_BRANCH_PREFIX):
        return RefKind.REMOTE_BRANCH
    if s.startswith(TAG_PREFIX):
        return RefKind.TAG
    if is_full_hash(s):
        return RefKind.HASH
    return RefKind.UNKNOWN


if TYPE_CHECKING:
    from dxrel.model.base import Model

    _model_check: Model = RefKind.UNKNOWN
