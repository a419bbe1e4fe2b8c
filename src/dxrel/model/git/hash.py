"""Git object ids (SHA-1 and SHA-256), stored as lowercase hex."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from dxrel.model.base import ModelMixin, decode_str
from dxrel.model.errors import ValidationError

HASH_HEX_SIZE_SHA1 = 40
HASH_BYTE_SIZE_SHA1 = 20
HASH_HEX_SIZE_SHA256 = 64
HASH_BYTE_SIZE_SHA256 = 32
HASH_SHORT_LEN = 7

HASH_HEX_PATTERN = r"^(?:[0-9a-f]{40}|[0-9a-f]{64})$"
HASH_HEX_RE = re.compile(HASH_HEX_PATTERN)


@dataclass(frozen=True, slots=True)
class Hash(ModelMixin):
    """A full commit / object id.

    The zero value ``Hash()`` means "no hash" and always validates. Abbreviated
    ids are not valid hashes; they are revision expressions and belong in a
    :class:`~dxrel.model.git.ref_name.RefName`.
    """

    value: str = ""

    def __str__(self) -> str:
        return self.value

    def redacted(self) -> str:
        return self.short()

    def is_zero(self) -> bool:
        return self.value == ""

    def short(self) -> str:
        return self.value[:HASH_SHORT_LEN]

    def is_sha1(self) -> bool:
        return len(self.value) == HASH_HEX_SIZE_SHA1

    def is_sha256(self) -> bool:
        return len(self.value) == HASH_HEX_SIZE_SHA256

    def validate(self) -> None:
        if self.is_zero():
            return
        s = self.value
        if len(s) not in (HASH_HEX_SIZE_SHA1, HASH_HEX_SIZE_SHA256):
            raise ValidationError(
                "Hash",
                f"Hash {s!r} has invalid length: {len(s)} "
                f"(expected {HASH_HEX_SIZE_SHA1} for SHA-1 or {HASH_HEX_SIZE_SHA256} for SHA-256)",
            )
        if not HASH_HEX_RE.fullmatch(s):
            raise ValidationError(
                "Hash",
                f"Hash {s!r} contains invalid characters (must be lowercase hexadecimal [0-9a-f])",
            )

    def _encode(self) -> str:
        return self.value

    @classmethod
    def _decode(cls, data: Any) -> "Hash":
        return parse_hash(decode_str("Hash", data))


def parse_hash(s: str) -> Hash:
    """Trim and lowercase *s*, then validate. Empty input gives the zero hash."""
    h = Hash(s.strip().lower())
    try:
        h.validate()
    except ValidationError as exc:
        raise ValidationError("Hash", f"invalid Hash: {exc}") from exc
    return h


def is_full_hash(s: str) -> bool:
    """True if *s* is exactly a 40 or 64 character lowercase hex id."""
    return HASH_HEX_RE.fullmatch(s) is not None


if TYPE_CHECKING:
    from dxrel.model.base import Model

    _model_check: Model = Hash()
