"""Named workflow dispatch with timing logs.

Updates:
    v0.1.0 - 2025-11-09 - Dispatches comparison workflows and logs their duration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from time import perf_counter
from typing import Protocol


class Workflow(Protocol):
    """Contract shared by every workflow the orchestrator can run."""

    name: str

    def run(self, context: dict) -> dict:
        """Execute the workflow for ``context`` and return its payload."""

        ...


@dataclass(slots=True)
class Orchestrator:
    workflows: dict[str, Workflow] = field(default_factory=dict)

    _logger = logging.getLogger(__name__)

    def execute(self, workflow_name: str, context: dict) -> dict:
        """Run a registered workflow.

        Args:
            workflow_name (str): Registered workflow name.
            context (dict): Workflow input.

        Returns:
            dict: The workflow's result payload.

        Raises:
            KeyError: If no workflow is registered under ``workflow_name``.
        """

        workflow = self.workflows.get(workflow_name)
        if workflow is None:
            raise KeyError(f"Workflow '{workflow_name}' is not registered.")

        started = perf_counter()
        try:
            result = workflow.run(context)
        except Exception as exc:
            self._logger.error(
                "workflow_failed",
                extra={
                    "workflow": workflow_name,
                    "duration_ms": _elapsed_ms(started),
                    "error": str(exc),
                    "error_type": type(exc).__name__,
                },
                exc_info=True,
            )
            raise

        self._logger.info(
            "workflow_completed",
            extra={
                "workflow": workflow_name,
                "duration_ms": _elapsed_ms(started),
                "context_keys": sorted(context),
            },
        )
        return result

    def register(self, workflow: Workflow) -> None:
        self.workflows[workflow.name] = workflow

    def names(self) -> list[str]:
        return sorted(self.workflows)


def _elapsed_ms(started: float) -> float:
    return round((perf_counter() - started) * 1000, 2)
