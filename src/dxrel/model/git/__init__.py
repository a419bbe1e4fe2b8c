"""Git value types: hashes, ref names, kinds, ranges, tags."""

from dxrel.model.git.commit_range import CommitRange, new_commit_range
from dxrel.model.git.commit_range_spec import CommitRangeSpec, new_commit_range_spec
from dxrel.model.git.hash import Hash, is_full_hash, parse_hash
from dxrel.model.git.ref import Ref, new_ref
from dxrel.model.git.ref_kind import RefKind, classify_ref_name, parse_ref_kind
from dxrel.model.git.ref_name import RefName, parse_ref_name
from dxrel.model.git.tag import Tag, TagName, new_tag, parse_tag_name

__all__ = [
    "CommitRange",
    "CommitRangeSpec",
    "Hash",
    "Ref",
    "RefKind",
    "RefName",
    "Tag",
    "TagName",
    "classify_ref_name",
    "is_full_hash",
    "new_commit_range",
    "new_commit_range_spec",
    "new_ref",
    "new_tag",
    "parse_hash",
    "parse_ref_kind",
    "parse_ref_name",
    "parse_tag_name",
]
