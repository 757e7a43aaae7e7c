"""The Referee CLI package."""

from __future__ import annotations

import logging

import typer

from referee.cli.commands.catalog import categories, preset, presets
from referee.cli.commands.core import compare, compare_file
from referee.cli.commands.settings import settings_show
from referee.cli.io import console
from referee.cli.renderers import (
    render_category_table,
    render_comparison_output,
    render_preset_table,
    render_recommendation,
)
from referee.cli.runtime import (
    get_config_service,
    get_orchestrator,
    get_runtime,
    initialize_runtime,
    set_runtime,
    set_runtime_level,
)
from referee.cli.utils import (
    apply_log_override,
    constraints_from_options,
    weights_from_options,
)
from referee.core.logging_setup import configure_logging
from referee.core.orchestrator import Orchestrator
from referee.services.comparison_service import ComparisonService
from referee.services.config_service import ConfigService

logger = logging.getLogger(__name__)

# Typer application ----------------------------------------------------------

app = typer.Typer(
    add_completion=False,
    help="The Referee: compare options and get a ranked recommendation.",
)

app.command()(compare)
app.command("compare-file")(compare_file)
app.command()(categories)
app.command()(presets)
app.command()(preset)
app.command("settings")(settings_show)


def main() -> None:
    """CLI entry point."""

    app()


__all__: list[str] = [
    # Typer app / entrypoint
    "app",
    "main",
    # Console & logging
    "console",
    "logger",
    "configure_logging",
    # Runtime
    "get_config_service",
    "get_orchestrator",
    "get_runtime",
    "initialize_runtime",
    "set_runtime",
    "set_runtime_level",
    # Commands
    "categories",
    "compare",
    "compare_file",
    "preset",
    "presets",
    "settings_show",
    # Renderers
    "render_category_table",
    "render_comparison_output",
    "render_preset_table",
    "render_recommendation",
    # Utilities
    "apply_log_override",
    "constraints_from_options",
    "weights_from_options",
    # Classes re-exported so tests can override them
    "ComparisonService",
    "ConfigService",
    "Orchestrator",
]
