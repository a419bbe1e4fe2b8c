"""Load and merge configuration from .dxrel.toml and env vars."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from dxrel.config.schema import OUTPUT_FORMATS, DxrelConfig, OutputConfig, RangeConfig
from dxrel.model.errors import ValidationError

CONFIG_FILENAME = ".dxrel.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    data = raw.get(name, {})
    if not isinstance(data, dict):
        raise ConfigError(f"[{name}] must be a table")
    return data


def _str_value(data: Dict[str, Any], key: str, section: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise ConfigError(f"{section}.{key} must be a string")
    return value


def _build_range(raw: Dict[str, Any]) -> RangeConfig:
    data = _section(raw, "range")
    return RangeConfig(
        from_=_str_value(data, "from", "range", ""),
        to=_str_value(data, "to", "range", "HEAD"),
    )


def _build_output(raw: Dict[str, Any]) -> OutputConfig:
    data = _section(raw, "output")
    fmt = _str_value(data, "format", "output", "text")
    if fmt not in OUTPUT_FORMATS:
        raise ConfigError(f"output.format must be one of {', '.join(OUTPUT_FORMATS)} (got {fmt!r})")
    return OutputConfig(format=fmt)  # type: ignore[arg-type]


def _merge_env_overrides(cfg: DxrelConfig) -> None:
    """Apply CI_DXREL_* environment variable overrides."""
    if (val := os.environ.get("CI_DXREL_FROM")) is not None:
        cfg.range.from_ = val
    if val := os.environ.get("CI_DXREL_TO"):
        cfg.range.to = val
    if val := os.environ.get("CI_DXREL_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> DxrelConfig:
    """Load, validate, and return a DxrelConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = DxrelConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = DxrelConfig(
            version=str(raw.get("version", "1.0")),
            range=_build_range(raw),
            output=_build_output(raw),
        )

    _merge_env_overrides(cfg)

    try:
        cfg.range_spec()
    except ValidationError as exc:
        raise ConfigError(f"Invalid [range]: {exc}") from exc
    return cfg
