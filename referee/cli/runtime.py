"""Runtime wiring for The Referee CLI."""

from __future__ import annotations

import logging
from typing import Any

from referee.core.logging_setup import configure_logging
from referee.core.logging_setup import set_runtime_level  # re-export via utils
from referee.core.orchestrator import Orchestrator
from referee.services.comparison_service import ComparisonService
from referee.services.config_service import ConfigService
from referee.workflows.compare_candidates import CompareCandidatesWorkflow
from referee.workflows.describe_category import DescribeCategoryWorkflow
from referee.workflows.run_preset import RunPresetWorkflow

logger = logging.getLogger(__name__)

_RUNTIME_CACHE: tuple[Orchestrator, ConfigService] | None = None

_DEFAULT_CONFIG_SERVICE = ConfigService
_DEFAULT_COMPARISON_SERVICE = ComparisonService


def initialize_runtime() -> tuple[Orchestrator, ConfigService]:
    """Load configuration, configure logging and register every workflow."""

    config_service_cls = _resolve_dependency("ConfigService", _DEFAULT_CONFIG_SERVICE)
    config_service = config_service_cls()
    configure_logging(config_service.logging_config)
    logger.debug("Runtime initialization starting.")

    comparison_service_cls = _resolve_dependency(
        "ComparisonService", _DEFAULT_COMPARISON_SERVICE
    )
    comparison_service = comparison_service_cls()

    orchestrator = Orchestrator()
    orchestrator.register(CompareCandidatesWorkflow(comparison_service=comparison_service))
    orchestrator.register(DescribeCategoryWorkflow())
    orchestrator.register(
        RunPresetWorkflow(
            config_service=config_service, comparison_service=comparison_service
        )
    )
    logger.debug("Registered workflows: %s", ", ".join(orchestrator.names()))
    return orchestrator, config_service


def get_runtime() -> tuple[Orchestrator, ConfigService]:
    """Return the lazily-initialized orchestrator and configuration."""

    global _RUNTIME_CACHE
    if _RUNTIME_CACHE is None:
        _RUNTIME_CACHE = initialize_runtime()
    return _RUNTIME_CACHE


def set_runtime(runtime: tuple[Orchestrator, ConfigService] | None) -> None:
    """Replace the cached runtime tuple (``None`` forces re-initialization)."""

    global _RUNTIME_CACHE
    _RUNTIME_CACHE = runtime


def get_orchestrator() -> Orchestrator:
    orchestrator, _ = get_runtime()
    return orchestrator


def get_config_service() -> ConfigService:
    _, config_service = get_runtime()
    return config_service


def _resolve_dependency(name: str, default: Any) -> Any:
    """Return a dependency, preferring overrides on the cli package."""

    from sys import modules

    cli_module = modules.get("referee.cli")
    if cli_module is not None and hasattr(cli_module, name):
        return getattr(cli_module, name)
    return default


__all__ = [
    "get_config_service",
    "get_orchestrator",
    "get_runtime",
    "initialize_runtime",
    "set_runtime",
    "set_runtime_level",
]
