"""Primary comparison commands for The Referee CLI."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import typer

from referee.cli.io import console
from referee.cli.renderers import render_comparison_output
from referee.cli.utils import (
    apply_log_override,
    constraints_from_options,
    weights_from_options,
)
from referee.core.exceptions import RefereeError
from referee.services.comparison_request import ComparisonRequest

logger = logging.getLogger(__name__)


def _cli() -> Any:
    return sys.modules["referee.cli"]


def _run_comparison(context: dict[str, Any], *, as_json: bool) -> dict[str, Any]:
    cli_module = _cli()
    orchestrator = cli_module.get_orchestrator()
    try:
        result = orchestrator.execute("compare_candidates", context)
    except RefereeError as exc:
        console.print(f"[red]Comparison failed: {exc}[/]")
        raise typer.Exit(code=1) from exc

    comparison = result.get("comparison") or {}
    if as_json:
        console.print_json(data=comparison)
    else:
        render_comparison_output(comparison, cli_module.get_config_service().output_config)
    return comparison


def compare(
    category: str = typer.Argument(
        ..., help="Comparison category (api, cloud-service, tech-stack, framework)."
    ),
    items: List[str] = typer.Argument(..., help="Candidate names to compare."),
    weight: Optional[List[str]] = typer.Option(
        None,
        "--weight",
        "-w",
        help="Criterion weight as criterion=number; repeat for several criteria.",
    ),
    constraint: Optional[List[str]] = typer.Option(
        None,
        "--constraint",
        "-c",
        help="Descriptive constraint as key=value (recorded, not scored).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON response."),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation (e.g., DEBUG, INFO).",
    ),
) -> None:
    """Compare candidates of a category and recommend one."""

    apply_log_override(log_level)
    context = {
        "category": category,
        "items": list(items),
        "weights": weights_from_options(weight),
        "constraints": constraints_from_options(constraint),
    }
    comparison = _run_comparison(context, as_json=as_json)
    logger.info(
        "Comparison executed (recommended=%s).",
        (comparison.get("recommendation") or {}).get("recommended"),
    )


def compare_file(
    path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="JSON file holding a comparison request."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON response."),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """Run a comparison described by a JSON request file."""

    apply_log_override(log_level)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        console.print(f"[red]Request file is not valid JSON: {exc}[/]")
        raise typer.Exit(code=1) from exc

    try:
        request = ComparisonRequest.from_dict(payload)
    except RefereeError as exc:
        console.print(f"[red]Invalid request: {exc}[/]")
        raise typer.Exit(code=1) from exc

    _run_comparison(request.as_context(), as_json=as_json)
    logger.info("Comparison request file processed: %s", path)
