"""Typer-based command line interface for inspecting configurations.

``SCHEMA`` arguments are import references of the form
``package.module:ClassName`` naming a pydantic model.

Exit codes
----------
0 success
2 key not found
3 I/O error (missing or unreadable configuration file)
4 schema error (import failure, not a model class)
5 decode or conversion error
"""

from __future__ import annotations

import importlib
import json
import os
import sys
from pathlib import Path
from typing import Any, NoReturn

import typer

from .config import Configuration, load_file
from .utils.errors import (
    ConversionError,
    DecodeError,
    SchemaTypeError,
    UnsupportedKindError,
)
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

app = typer.Typer(
    name="confnode",
    help="Inspect YAML configurations through their schema node tree.",
)


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def import_schema(reference: str) -> Any:
    """Import the object named by ``module:attribute``."""

    module_name, sep, attr = reference.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"schema reference must look like 'module:Class', got '{reference}'")
    module = importlib.import_module(module_name)
    try:
        return getattr(module, attr)
    except AttributeError:
        raise ValueError(f"module '{module_name}' has no attribute '{attr}'") from None


def _format_value(value: Any) -> str:
    return json.dumps(value, default=str)


def _load(schema_ref: str, config_path: Path, strict: bool) -> Configuration:
    try:
        schema = import_schema(schema_ref)
    except (ImportError, ValueError) as exc:
        _safe_exit(4, str(exc))
    try:
        return load_file(schema, config_path, strict=strict)
    except SchemaTypeError as exc:
        _safe_exit(4, str(exc))
    except OSError as exc:
        _safe_exit(3, str(exc))
    except (DecodeError, ConversionError, UnsupportedKindError) as exc:
        _safe_exit(5, str(exc).splitlines()[0])


@app.callback()
def main(
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Log tree construction to stderr"
    ),
) -> None:
    """Entry point for the confnode command group."""

    if verbose:
        configure_logging(verbose)


@app.command()
def show(
    schema: str = typer.Argument(..., help="Schema as 'module:Class'"),
    config_path: Path = typer.Argument(..., help="YAML configuration file"),  # noqa: B008
    strict: bool = typer.Option(  # noqa: B008
        False, "--strict", help="Fail when an env or default value cannot be converted"
    ),
) -> None:
    """Print every leaf of the configuration as ``path = value``."""

    config = _load(schema, config_path, strict)
    for key in config.keys():
        typer.echo(f"{key} = {_format_value(config.get(key))}")


@app.command()
def get(
    schema: str = typer.Argument(..., help="Schema as 'module:Class'"),
    config_path: Path = typer.Argument(..., help="YAML configuration file"),  # noqa: B008
    key: str = typer.Argument(..., help="Dotted path, e.g. 'server.port'"),
    strict: bool = typer.Option(  # noqa: B008
        False, "--strict", help="Fail when an env or default value cannot be converted"
    ),
) -> None:
    """Print the value stored at ``key``."""

    config = _load(schema, config_path, strict)
    node = config.node.find_node(key)
    if node is None:
        _safe_exit(2, f"key not found: {key}")
    value = node.value if node.kind is not None else node.to_dict()
    typer.echo(_format_value(value))


__all__ = ["app", "import_schema"]
