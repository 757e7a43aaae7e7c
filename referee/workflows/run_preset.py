"""Workflow running a named example request from presets.yaml."""

from __future__ import annotations

from dataclasses import dataclass

from ..services.comparison_request import ComparisonRequest
from ..services.comparison_service import ComparisonService
from ..services.config_service import ConfigService


@dataclass
class RunPresetWorkflow:
    config_service: ConfigService
    comparison_service: ComparisonService
    name: str = "run_preset"

    def run(self, context: dict) -> dict:
        """Load the preset named in ``context["preset"]`` and compare it."""

        preset_name = context.get("preset")
        if not preset_name:
            raise ValueError("Preset workflow requires a preset name.")

        request = ComparisonRequest.from_dict(self.config_service.get_preset(preset_name))
        result = self.comparison_service.compare(
            request.category,
            request.items,
            weights=request.weights,
            constraints=request.constraints,
        )
        return {
            "workflow": self.name,
            "preset": preset_name,
            "comparison": result.as_dict(),
        }
