"""Catalog and preset commands for The Referee CLI."""

from __future__ import annotations

import sys
from typing import Any, Optional

import typer

from referee.cli.io import console
from referee.cli.renderers import (
    render_category_table,
    render_comparison_output,
    render_preset_table,
)
from referee.cli.utils import apply_log_override
from referee.core.exceptions import RefereeError


def _cli() -> Any:
    return sys.modules["referee.cli"]


def categories(
    category: Optional[str] = typer.Argument(
        None, help="Describe a single category instead of listing all."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON payload."),
) -> None:
    """List supported categories, their criteria and known candidates."""

    orchestrator = _cli().get_orchestrator()
    try:
        result = orchestrator.execute("describe_category", {"category": category})
    except RefereeError as exc:
        console.print(f"[red]{exc}[/]")
        raise typer.Exit(code=1) from exc

    entries = result.get("categories") or []
    if as_json:
        console.print_json(data=entries)
        return
    render_category_table(entries)


def presets() -> None:
    """List the example comparisons defined in presets.yaml."""

    render_preset_table(_cli().get_config_service().presets)


def preset(
    name: str = typer.Argument(..., help="Preset name, see `referee presets`."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON response."),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """Run a named example comparison."""

    apply_log_override(log_level)
    cli_module = _cli()
    try:
        result = cli_module.get_orchestrator().execute("run_preset", {"preset": name})
    except KeyError as exc:
        console.print(f"[red]{exc.args[0] if exc.args else exc}[/]")
        raise typer.Exit(code=1) from exc
    except RefereeError as exc:
        console.print(f"[red]Preset '{name}' is invalid: {exc}[/]")
        raise typer.Exit(code=1) from exc

    comparison = result.get("comparison") or {}
    if as_json:
        console.print_json(data=comparison)
        return
    render_comparison_output(comparison, cli_module.get_config_service().output_config)
