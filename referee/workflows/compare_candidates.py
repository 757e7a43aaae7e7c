"""Workflow wrapper for candidate comparison."""

from __future__ import annotations

from dataclasses import dataclass

from ..services.comparison_service import ComparisonResult, ComparisonService


@dataclass
class CompareCandidatesWorkflow:
    comparison_service: ComparisonService
    name: str = "compare_candidates"

    def run(self, context: dict) -> dict:
        """Score the requested candidates and return the serialised comparison."""

        category = context.get("category")
        items = context.get("items") or []
        if not category or not isinstance(items, list) or not items:
            raise ValueError("Comparison workflow requires a category and a list of items.")

        result: ComparisonResult = self.comparison_service.compare(
            category,
            items,
            weights=context.get("weights"),
            constraints=context.get("constraints"),
        )
        return {"workflow": self.name, "comparison": result.as_dict()}
