"""Git subprocess wrapper: repo root, rev-parse, symbolic names, tag listing."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, NamedTuple, Optional


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


class RawTag(NamedTuple):
    """One row of ``git for-each-ref refs/tags``, before validation."""

    name: str
    object: str
    object_type: str
    peeled: str  # empty for lightweight tags
    peeled_type: str
    message: str


# %00 between fields, %01 between records: tag messages may contain newlines.
_FIELD_SEP = "\x00"
_RECORD_SEP = "\x01"
_TAG_FORMAT = "%00".join([
    "%(refname:strip=2)",
    "%(objectname)",
    "%(objecttype)",
    "%(*objectname)",
    "%(*objecttype)",
    "%(contents)",
]) + "%01"


def _run_git(args: list[str], cwd: Path, timeout: int = 30) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.strip() or f"exit status {result.returncode}"
        raise GitError(f"git {args[0]} failed: {stderr}")
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())


def rev_parse_commit(repo_root: Path, rev: str) -> str:
    """Return the full commit id *rev* peels to."""
    out = _run_git(["rev-parse", "--verify", "--quiet", f"{rev}^{{commit}}"], cwd=repo_root)
    return out.strip()


def symbolic_full_name(repo_root: Path, rev: str) -> str:
    """Return the full ref name for *rev* (``refs/heads/main``), or ``""``.

    Revision expressions and raw hashes have no full name; neither do
    ambiguous short names, which git reports on stderr with a zero exit.
    """
    out = _run_git(["rev-parse", "--symbolic-full-name", rev], cwd=repo_root)
    lines = out.strip().splitlines()
    return lines[0] if len(lines) == 1 else ""


def for_each_tag(repo_root: Path) -> List[RawTag]:
    """List every tag with its target, peeled commit and message."""
    out = _run_git(["for-each-ref", f"--format={_TAG_FORMAT}", "refs/tags"], cwd=repo_root)
    tags: List[RawTag] = []
    for record in out.split(_RECORD_SEP):
        record = record.lstrip("\n")
        if not record:
            continue
        parts = record.split(_FIELD_SEP, 5)
        if len(parts) != 6:
            raise GitError(f"unexpected for-each-ref output: {record[:80]!r}")
        name, obj, obj_type, peeled, peeled_type, message = parts
        tags.append(RawTag(name, obj, obj_type, peeled, peeled_type, message))
    return tags
