"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from dxrel.model.git.commit_range_spec import CommitRangeSpec, new_commit_range_spec

OutputFormat = Literal["text", "json", "yaml"]

OUTPUT_FORMATS: tuple[str, ...] = ("text", "json", "yaml")


@dataclass
class RangeConfig:
    from_: str = ""  # empty = from the beginning of history
    to: str = "HEAD"


@dataclass
class OutputConfig:
    format: OutputFormat = "text"


@dataclass
class DxrelConfig:
    version: str = "1.0"
    range: RangeConfig = field(default_factory=RangeConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def range_spec(self) -> CommitRangeSpec:
        """Validated spec for the configured default range."""
        return new_commit_range_spec(self.range.from_, self.range.to)
