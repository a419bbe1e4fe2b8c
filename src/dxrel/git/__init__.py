"""Git interface layer: subprocess adapter and resolver."""

from dxrel.git.adapter import (
    GitError,
    RawTag,
    for_each_tag,
    get_repo_root,
    rev_parse_commit,
    symbolic_full_name,
)
from dxrel.git.resolver import ResolveError, list_tags, resolve_range, resolve_ref

__all__ = [
    "GitError",
    "RawTag",
    "ResolveError",
    "for_each_tag",
    "get_repo_root",
    "list_tags",
    "resolve_range",
    "resolve_ref",
    "rev_parse_commit",
    "symbolic_full_name",
]
