"""dxrel CLI: Typer application with range, resolve, kind, tags, and init commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from dxrel import __version__
from dxrel.config.schema import OUTPUT_FORMATS
from dxrel.model.base import Model

app = typer.Typer(
    name="dxrel",
    help="Validate, classify and resolve git refs and commit ranges.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    from dxrel.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def _load_config(repo_root: Path, config: Optional[str]):
    from dxrel.config.loader import ConfigError, load_config

    try:
        return load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def _check_format(fmt: str) -> str:
    if fmt not in OUTPUT_FORMATS:
        console.print(f"[bold red]Invalid format:[/bold red] {escape(fmt)}")
        raise typer.Exit(code=2)
    return fmt


def _emit(model: Model, fmt: str) -> None:
    """Print one model on stdout in the requested format."""
    if fmt == "json":
        print(model.to_json(indent=2))
    elif fmt == "yaml":
        print(model.to_yaml(), end="")
    else:
        print(str(model))


def _emit_many(models: List[Model], fmt: str) -> None:
    if fmt == "json":
        print(json.dumps([m.to_data() for m in models], indent=2))
    elif fmt == "yaml":
        print(yaml.safe_dump([m.to_data() for m in models], sort_keys=False, allow_unicode=True), end="")
    else:
        for m in models:
            print(str(m))


def _build_spec(repo_root: Path, config: Optional[str], from_ref: Optional[str], to_ref: Optional[str]):
    """CLI flags override the configured range; either bound may come from config."""
    from dxrel.model.errors import ValidationError
    from dxrel.model.git.commit_range_spec import new_commit_range_spec

    cfg = _load_config(repo_root, config)
    frm = cfg.range.from_ if from_ref is None else from_ref
    to = cfg.range.to if to_ref is None else to_ref
    try:
        return cfg, new_commit_range_spec(frm, to)
    except ValidationError as exc:
        console.print(f"[bold red]Invalid range:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


# ── range ─────────────────────────────────────────────────────────────────────


@app.command("range")
def range_cmd(
    from_ref: Optional[str] = typer.Option(None, "--from", help="Exclusive lower bound (empty = beginning)"),
    to_ref: Optional[str] = typer.Option(None, "--to", help="Inclusive upper bound"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .dxrel.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: text | json | yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Validate a symbolic commit range without touching git objects."""
    repo_root = _resolve_repo_root()
    cfg, spec = _build_spec(repo_root, config, from_ref, to_ref)
    fmt = _check_format(format or cfg.output.format)

    if verbose:
        console.print(f"[dim]Repo root: {repo_root}[/dim]")
        console.print(f"[dim]git argument: {spec.git_range()}[/dim]")

    _emit(spec, fmt)


# ── resolve ───────────────────────────────────────────────────────────────────


@app.command()
def resolve(
    from_ref: Optional[str] = typer.Option(None, "--from", help="Exclusive lower bound (empty = beginning)"),
    to_ref: Optional[str] = typer.Option(None, "--to", help="Inclusive upper bound"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .dxrel.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: text | json | yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Resolve a symbolic range into concrete commit hashes."""
    from dxrel.git.adapter import GitError
    from dxrel.git.resolver import resolve_range

    repo_root = _resolve_repo_root()
    cfg, spec = _build_spec(repo_root, config, from_ref, to_ref)
    fmt = _check_format(format or cfg.output.format)

    if verbose:
        console.print(f"[dim]Resolving {spec}[/dim]")

    try:
        commit_range = resolve_range(repo_root, spec)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    if verbose:
        console.print(f"[dim]git argument: {commit_range.git_range()}[/dim]")

    _emit(commit_range, fmt)


# ── kind ──────────────────────────────────────────────────────────────────────


@app.command()
def kind(
    ref: str = typer.Argument(..., help="Ref name or revision expression"),
) -> None:
    """Classify a ref name by shape (no git lookup)."""
    from dxrel.model.errors import ValidationError
    from dxrel.model.git.ref_kind import classify_ref_name
    from dxrel.model.git.ref_name import parse_ref_name

    try:
        name = parse_ref_name(ref)
    except ValidationError as exc:
        console.print(f"[bold red]Invalid ref:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    print(classify_ref_name(name))


# ── tags ──────────────────────────────────────────────────────────────────────


@app.command()
def tags(
    format: str = typer.Option("text", "--format", "-f", help="Output format: text | json | yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """List repository tags as validated Tag values."""
    from dxrel.git.adapter import GitError
    from dxrel.git.resolver import list_tags

    fmt = _check_format(format)
    repo_root = _resolve_repo_root()

    try:
        found = list_tags(repo_root)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    if verbose:
        annotated = sum(1 for t in found if t.annotated)
        console.print(f"[dim]{len(found)} tags ({annotated} annotated)[/dim]")

    _emit_many(list(found), fmt)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .dxrel.toml in the repo root."""
    from dxrel.config.defaults import DEFAULT_TOML
    from dxrel.config.loader import CONFIG_FILENAME

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"dxrel {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """dxrel: git refs and commit ranges for release tooling."""
