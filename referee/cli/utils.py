"""Utility helpers shared across CLI command modules."""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Optional

import typer

from referee.core.exceptions import InvalidRequestError
from referee.services.comparison_request import (
    parse_constraint_options,
    parse_weight_options,
)

logger = logging.getLogger(__name__)


def _cli():
    return sys.modules["referee.cli"]


def apply_log_override(log_level: Optional[str]) -> None:
    """Override logging level for the current invocation.

    The runtime is started first so its one-time logging setup cannot
    reset the level afterwards.
    """

    if not log_level or not isinstance(log_level, str):
        return
    _cli().get_runtime()
    try:
        _cli().set_runtime_level(log_level)
        logger.info("Log level overridden to %s", log_level.upper())
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def weights_from_options(options: Optional[Iterable[str]]) -> dict[str, float]:
    """Turn repeated ``--weight criterion=N`` flags into a weights mapping."""

    try:
        return parse_weight_options(options or [])
    except InvalidRequestError as exc:
        raise typer.BadParameter(str(exc), param_hint="--weight") from exc


def constraints_from_options(options: Optional[Iterable[str]]) -> dict[str, str]:
    """Turn repeated ``--constraint key=value`` flags into a constraints mapping."""

    try:
        return parse_constraint_options(options or [])
    except InvalidRequestError as exc:
        raise typer.BadParameter(str(exc), param_hint="--constraint") from exc


__all__ = [
    "apply_log_override",
    "constraints_from_options",
    "weights_from_options",
]
