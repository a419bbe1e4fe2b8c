"""Tag names and tags (lightweight and annotated)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Union

from dxrel.model.base import ModelMixin, decode_record, decode_str
from dxrel.model.errors import UnmarshalError, ValidationError
from dxrel.model.git.hash import Hash, parse_hash
from dxrel.model.git.ref_name import check_symbolic_name

TAG_NAME_MIN_LEN = 1
TAG_NAME_MAX_LEN = 256
TAG_MESSAGE_MAX_LEN = 65536  # bytes, UTF-8 encoded

# Ref-name charset plus "+" for semver build metadata (v1.0.0+build.5).
TAG_NAME_PATTERN = r"^[a-zA-Z0-9._/@{}\-^~:+]+$"
TAG_NAME_RE = re.compile(TAG_NAME_PATTERN)


@dataclass(frozen=True, slots=True)
class TagName(ModelMixin):
    """Tag identifier such as ``v1.2.3``, ``release/2024.01`` or ``v1.0.0+build.5``.

    ``validate()`` never trims: whitespace at either end is an error. Use
    :func:`parse_tag_name` for raw input.
    """

    value: str = ""

    def __str__(self) -> str:
        return self.value

    def redacted(self) -> str:
        return self.value

    def is_zero(self) -> bool:
        return self.value == ""

    def validate(self) -> None:
        if self.is_zero():
            return
        check_symbolic_name(
            "TagName",
            self.value,
            regex=TAG_NAME_RE,
            pattern=TAG_NAME_PATTERN,
            min_len=TAG_NAME_MIN_LEN,
            max_len=TAG_NAME_MAX_LEN,
        )

    def _encode(self) -> str:
        return self.value

    @classmethod
    def _decode(cls, data: Any) -> "TagName":
        return parse_tag_name(decode_str("TagName", data))


def parse_tag_name(s: str) -> TagName:
    normalized = s.strip()
    if not normalized:
        return TagName()
    name = TagName(normalized)
    try:
        name.validate()
    except ValidationError as exc:
        raise ValidationError("TagName", f"invalid TagName: {exc}") from exc
    return name


@dataclass(frozen=True, slots=True)
class Tag(ModelMixin):
    """A named pointer into history.

    ``object`` is what ``refs/tags/<name>`` points at: the tag object for an
    annotated tag, the commit itself for a lightweight one. ``commit`` is
    always the commit reached after peeling. Lightweight tags carry no message.
    """

    name: TagName = field(default_factory=TagName)
    object: Hash = field(default_factory=Hash)
    commit: Hash = field(default_factory=Hash)
    annotated: bool = False
    message: str = ""

    def __str__(self) -> str:
        return (
            f"Tag{{Name:{self.name}, Object:{self.object}, Commit:{self.commit}, "
            f"Annotated:{_bool_token(self.annotated)}}}"
        )

    def redacted(self) -> str:
        return (
            f"Tag{{Name:{self.name.redacted()}, Object:{self.object.redacted()}, "
            f"Commit:{self.commit.redacted()}, Annotated:{_bool_token(self.annotated)}}}"
        )

    def is_zero(self) -> bool:
        return (
            self.name.is_zero()
            and self.object.is_zero()
            and self.commit.is_zero()
            and not self.annotated
            and self.message == ""
        )

    @property
    def is_lightweight(self) -> bool:
        return not self.annotated

    def validate(self) -> None:
        if self.name.is_zero():
            raise ValidationError("Tag", "Tag Name must not be empty", field="name")
        try:
            self.name.validate()
        except ValidationError as exc:
            raise ValidationError("Tag", f"invalid Tag Name: {exc}", field="name") from exc

        if self.object.is_zero():
            raise ValidationError("Tag", "Tag Object must not be empty", field="object")
        try:
            self.object.validate()
        except ValidationError as exc:
            raise ValidationError("Tag", f"invalid Tag Object: {exc}", field="object") from exc

        if self.commit.is_zero():
            raise ValidationError("Tag", "Tag Commit must not be empty", field="commit")
        try:
            self.commit.validate()
        except ValidationError as exc:
            raise ValidationError("Tag", f"invalid Tag Commit: {exc}", field="commit") from exc

        size = len(self.message.encode("utf-8"))
        if not self.annotated and size:
            raise ValidationError(
                "Tag",
                f"Tag Message must be empty for lightweight tags (got {size} bytes)",
                field="message",
            )
        if size > TAG_MESSAGE_MAX_LEN:
            raise ValidationError(
                "Tag",
                f"Tag Message exceeds maximum length of {TAG_MESSAGE_MAX_LEN} bytes (got {size})",
                field="message",
            )

    def _encode(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name.value,
            "object": self.object.value,
            "commit": self.commit.value,
            "annotated": self.annotated,
        }
        if self.message:
            data["message"] = self.message
        return data

    @classmethod
    def _decode(cls, data: Any) -> "Tag":
        record = decode_record("Tag", data, ("name", "object", "commit", "annotated", "message"))
        annotated = record.get("annotated", False)
        if not isinstance(annotated, bool):
            raise UnmarshalError("Tag", f"Tag.annotated must be a boolean, got {type(annotated).__name__}")
        return cls(
            name=parse_tag_name(decode_str("Tag", record.get("name"), field="name")),
            object=parse_hash(decode_str("Tag", record.get("object"), field="object")),
            commit=parse_hash(decode_str("Tag", record.get("commit"), field="commit")),
            annotated=annotated,
            message=decode_str("Tag", record.get("message"), field="message"),
        )


def _bool_token(value: bool) -> str:
    return "true" if value else "false"


def new_tag(
    name: Union[TagName, str],
    object: Union[Hash, str],
    commit: Union[Hash, str],
    annotated: bool = False,
    message: str = "",
) -> Tag:
    """Build and validate a ``Tag``; plain strings are parsed first."""
    try:
        tag = Tag(
            name=parse_tag_name(name) if isinstance(name, str) else name,
            object=parse_hash(object) if isinstance(object, str) else object,
            commit=parse_hash(commit) if isinstance(commit, str) else commit,
            annotated=annotated,
            message=message,
        )
        tag.validate()
    except ValidationError as exc:
        raise ValidationError("Tag", f"invalid Tag: {exc}", field=exc.field) from exc
    return tag


if TYPE_CHECKING:
    from dxrel.model.base import Model

    _model_check: Model = Tag()
