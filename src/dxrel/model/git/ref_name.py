"""Symbolic Git reference names and revision expressions."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from dxrel.model.base import ModelMixin, decode_str
from dxrel.model.errors import ValidationError

REF_NAME_MIN_LEN = 1
REF_NAME_MAX_LEN = 256

# Permissive on purpose: revision expressions such as ``HEAD~3``, ``main^2``,
# ``main@{upstream}`` and ``HEAD:path`` must pass, not only canonical refs.
REF_NAME_PATTERN = r"^[a-zA-Z0-9._/@{}\-^~:]+$"
REF_NAME_RE = re.compile(REF_NAME_PATTERN)


def check_symbolic_name(
    type_name: str,
    value: str,
    *,
    regex: re.Pattern[str],
    pattern: str,
    min_len: int,
    max_len: int,
) -> None:
    """Run the ordered checks shared by ref names and tag names.

    Whitespace, then length, then charset, then a per-character scan whose only
    purpose is a more precise message than the charset failure.
    """
    if value.strip() != value:
        raise ValidationError(type_name, f"{type_name} {value!r} contains leading or trailing whitespace")

    n = len(value)
    if n < min_len:
        raise ValidationError(type_name, f"{type_name} {value!r} is too short: {n} characters (minimum {min_len})")
    if n > max_len:
        raise ValidationError(type_name, f"{type_name} {value!r} is too long: {n} characters (maximum {max_len})")

    if not regex.fullmatch(value):
        raise ValidationError(
            type_name,
            f"{type_name} {value!r} contains invalid characters (must match pattern {pattern})",
        )

    for ch in value:
        if unicodedata.category(ch) == "Cc":
            raise ValidationError(type_name, f"{type_name} {value!r} contains control character (U+{ord(ch):04X})")
        if ord(ch) > 0x7F:
            raise ValidationError(
                type_name,
                f"{type_name} {value!r} contains non-ASCII character {ch!r} (U+{ord(ch):04X})",
            )


@dataclass(frozen=True, slots=True)
class RefName(ModelMixin):
    """A branch, tag, ``HEAD`` or revision expression, stored verbatim.

    ``RefName()`` is the zero value ("no ref specified") and always validates.
    Comparison is case-sensitive.
    """

    value: str = ""

    def __str__(self) -> str:
        return self.value

    def redacted(self) -> str:
        # ref names are not sensitive
        return self.value

    def is_zero(self) -> bool:
        return self.value == ""

    def validate(self) -> None:
        if self.is_zero():
            return
        check_symbolic_name(
            "RefName",
            self.value,
            regex=REF_NAME_RE,
            pattern=REF_NAME_PATTERN,
            min_len=REF_NAME_MIN_LEN,
            max_len=REF_NAME_MAX_LEN,
        )

    def _encode(self) -> str:
        return self.value

    @classmethod
    def _decode(cls, data: Any) -> "RefName":
        return parse_ref_name(decode_str("RefName", data))


def parse_ref_name(s: str) -> RefName:
    """Trim *s* and validate it. Blank input yields the zero ``RefName``."""
    normalized = s.strip()
    if not normalized:
        return RefName()
    name = RefName(normalized)
    try:
        name.validate()
    except ValidationError as exc:
        raise ValidationError("RefName", f"invalid RefName: {exc}") from exc
    return name


if TYPE_CHECKING:
    from dxrel.model.base import Model

    _model_check: Model = RefName()
