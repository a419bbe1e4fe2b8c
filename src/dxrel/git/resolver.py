"""Resolve symbolic ranges and tags into concrete model values via git."""

from __future__ import annotations

from pathlib import Path
from typing import List

from dxrel.git.adapter import GitError, RawTag, for_each_tag, rev_parse_commit, symbolic_full_name
from dxrel.model.errors import ValidationError
from dxrel.model.git.commit_range import CommitRange, new_commit_range
from dxrel.model.git.commit_range_spec import CommitRangeSpec
from dxrel.model.git.hash import parse_hash
from dxrel.model.git.ref import Ref, new_ref
from dxrel.model.git.ref_kind import HEAD_NAMES, RefKind, classify_ref_name
from dxrel.model.git.ref_name import RefName
from dxrel.model.git.tag import Tag, new_tag


class ResolveError(GitError):
    """Raised when a ref cannot be resolved to a commit."""


def _kind_for(repo_root: Path, name: RefName) -> RefKind:
    """Classify *name*, asking git for the full ref name when the shape is ambiguous."""
    if name.value in HEAD_NAMES:
        return RefKind.HEAD
    kind = classify_ref_name(name)
    if kind is not RefKind.UNKNOWN:
        return kind
    return classify_ref_name(symbolic_full_name(repo_root, name.value))


def resolve_ref(repo_root: Path, name: RefName) -> Ref:
    """Resolve *name* to the commit it designates.

    The zero ``RefName`` resolves to the zero ``Ref``.
    """
    if name.is_zero():
        return Ref()
    try:
        name.validate()
    except ValidationError as exc:
        raise ResolveError(str(exc)) from exc
    if name.value.startswith("-"):
        raise ResolveError(f"refusing to resolve {name.value!r}: looks like a command-line option")

    try:
        commit = rev_parse_commit(repo_root, name.value)
    except GitError as exc:
        raise ResolveError(f"cannot resolve {name.value!r} to a commit: {exc}") from exc

    try:
        return new_ref(name, _kind_for(repo_root, name), parse_hash(commit))
    except ValidationError as exc:
        raise ResolveError(f"git returned an unusable ref for {name.value!r}: {exc}") from exc


def resolve_range(repo_root: Path, spec: CommitRangeSpec) -> CommitRange:
    """Turn a symbolic ``from..to`` into hashes. Invalid specs are rejected before git runs."""
    spec.validate()
    from_ref = resolve_ref(repo_root, spec.from_)
    to_ref = resolve_ref(repo_root, spec.to)
    return new_commit_range(from_ref, to_ref)


def _tag_commit(repo_root: Path, raw: RawTag) -> str:
    """The commit *raw* finally points at.

    for-each-ref peels one level only; nested tags and tags of trees or blobs
    go through ``^{commit}``, which fails for the latter.
    """
    if raw.object_type == "commit":
        return raw.object
    if raw.object_type == "tag" and raw.peeled_type == "commit":
        return raw.peeled
    try:
        return rev_parse_commit(repo_root, f"refs/tags/{raw.name}")
    except GitError as exc:
        raise ResolveError(f"tag {raw.name!r} does not point at a commit: {exc}") from exc


def list_tags(repo_root: Path) -> List[Tag]:
    """Return every tag in the repository, sorted by name.

    Raises ResolveError when a tag never reaches a commit.
    """
    tags: List[Tag] = []
    for raw in for_each_tag(repo_root):
        annotated = raw.object_type == "tag"
        commit = _tag_commit(repo_root, raw)
        message = raw.message.rstrip("\n") if annotated else ""
        try:
            tags.append(new_tag(raw.name, raw.object, commit, annotated, message))
        except ValidationError as exc:
            raise ResolveError(f"tag {raw.name!r} is not representable: {exc}") from exc
    return sorted(tags, key=lambda t: t.name.value)
