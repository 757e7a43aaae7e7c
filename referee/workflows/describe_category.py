"""Workflow listing supported categories and their known candidates."""

from __future__ import annotations

from dataclasses import dataclass

from ..services.category_catalog import get_profile, iter_profiles


@dataclass
class DescribeCategoryWorkflow:
    name: str = "describe_category"

    def run(self, context: dict) -> dict:
        """Describe one category, or every category when none is given."""

        category = context.get("category")
        if category:
            profiles = [get_profile(category)]
        else:
            profiles = iter_profiles()
        return {
            "workflow": self.name,
            "categories": [profile.describe() for profile in profiles],
        }
