"""Static candidate catalog for every supported comparison category.

Updates:
    v0.1.0 - 2025-11-09 - Introduced closed category enum and read-only profiles.
    v0.2.0 - 2025-11-16 - Added category descriptions for the CLI listing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from ..core.exceptions import UnsupportedCategoryError


class Category(str, Enum):
    """Closed set of comparison categories."""

    API = "api"
    CLOUD_SERVICE = "cloud-service"
    TECH_STACK = "tech-stack"
    FRAMEWORK = "framework"

    @classmethod
    def parse(cls, value: Any) -> "Category":
        """Resolve a caller-supplied identifier into a category.

        Args:
            value (Any): Category identifier such as ``"api"``.

        Returns:
            Category: Matching enum member.

        Raises:
            UnsupportedCategoryError: If the identifier is not a known category.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise UnsupportedCategoryError(value, supported_categories())


@dataclass(slots=True, frozen=True)
class CandidateProfile:
    """Fixed scoring data for one candidate inside a category."""

    scores: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    pros: tuple[str, ...] = ()
    cons: tuple[str, ...] = ()
    best_for: str = ""

    @property
    def is_known(self) -> bool:
        return bool(self.scores)


@dataclass(slots=True, frozen=True)
class CategoryProfile:
    """Criterion list and candidate table for a single category."""

    category: Category
    label: str
    criteria: tuple[str, ...]
    candidates: Mapping[str, CandidateProfile]
    default_best_for: str

    def lookup(self, name: str) -> CandidateProfile:
        """Return the profile for ``name`` or an empty fallback profile."""

        profile = self.candidates.get(name)
        if profile is not None:
            return profile
        return CandidateProfile(best_for=self.default_best_for)

    def describe(self) -> dict[str, Any]:
        """Return a JSON serialisable summary of the category."""

        return {
            "category": self.category.value,
            "label": self.label,
            "criteria": list(self.criteria),
            "candidates": [
                {
                    "name": name,
                    "scores": dict(profile.scores),
                    "bestFor": profile.best_for,
                }
                for name, profile in self.candidates.items()
            ],
            "defaultBestFor": self.default_best_for,
        }


def _profile(
    scores: dict[str, float],
    pros: list[str],
    cons: list[str],
    best_for: str,
) -> CandidateProfile:
    return CandidateProfile(
        scores=MappingProxyType(dict(scores)),
        pros=tuple(pros),
        cons=tuple(cons),
        best_for=best_for,
    )


_API = CategoryProfile(
    category=Category.API,
    label="API styles",
    criteria=(
        "performance",
        "ease_of_use",
        "documentation",
        "cost",
        "scalability",
        "community",
    ),
    candidates=MappingProxyType(
        {
            "REST": _profile(
                {
                    "performance": 0.7,
                    "ease_of_use": 0.9,
                    "documentation": 0.8,
                    "cost": 0.9,
                    "scalability": 0.6,
                    "community": 0.9,
                },
                ["Simple and intuitive", "Great caching support", "Wide adoption", "HTTP-based"],
                ["Over-fetching data", "Multiple endpoints", "Versioning challenges"],
                "Simple CRUD operations and public APIs",
            ),
            "GraphQL": _profile(
                {
                    "performance": 0.8,
                    "ease_of_use": 0.6,
                    "documentation": 0.7,
                    "cost": 0.8,
                    "scalability": 0.8,
                    "community": 0.7,
                },
                ["Single endpoint", "Flexible queries", "Strong typing", "Real-time subscriptions"],
                ["Learning curve", "Caching complexity", "Query complexity"],
                "Complex data relationships and mobile applications",
            ),
            "gRPC": _profile(
                {
                    "performance": 0.9,
                    "ease_of_use": 0.5,
                    "documentation": 0.6,
                    "cost": 0.7,
                    "scalability": 0.9,
                    "community": 0.6,
                },
                ["High performance", "Binary protocol", "Streaming support", "Language agnostic"],
                ["Limited browser support", "Debugging difficulty", "Steep learning curve"],
                "Microservices and high-performance internal APIs",
            ),
        }
    ),
    default_best_for="General purpose applications",
)

_CLOUD_SERVICE = CategoryProfile(
    category=Category.CLOUD_SERVICE,
    label="Cloud services",
    criteria=("cost", "performance", "reliability", "features", "support", "integration"),
    candidates=MappingProxyType(
        {
            "AWS": _profile(
                {
                    "cost": 0.6,
                    "performance": 0.9,
                    "reliability": 0.9,
                    "features": 0.9,
                    "support": 0.8,
                    "integration": 0.9,
                },
                ["Largest service portfolio", "Global infrastructure", "Mature ecosystem"],
                ["Complex pricing", "Steep learning curve", "Can be expensive"],
                "Large-scale applications with diverse requirements",
            ),
            "Azure": _profile(
                {
                    "cost": 0.7,
                    "performance": 0.8,
                    "reliability": 0.8,
                    "features": 0.8,
                    "support": 0.9,
                    "integration": 0.8,
                },
                ["Microsoft integration", "Hybrid cloud support", "Enterprise focus"],
                ["Inconsistent UI", "Service gaps", "Windows-centric"],
                "Enterprise applications with Microsoft stack",
            ),
            "GCP": _profile(
                {
                    "cost": 0.8,
                    "performance": 0.8,
                    "reliability": 0.8,
                    "features": 0.7,
                    "support": 0.7,
                    "integration": 0.7,
                },
                ["Competitive pricing", "Strong AI/ML services", "Kubernetes native"],
                ["Smaller ecosystem", "Limited enterprise features", "Fewer regions"],
                "Data analytics and machine learning workloads",
            ),
        }
    ),
    default_best_for="General cloud computing needs",
)

_TECH_STACK = CategoryProfile(
    category=Category.TECH_STACK,
    label="Technology stacks",
    criteria=(
        "learning_curve",
        "performance",
        "ecosystem",
        "job_market",
        "maintenance",
        "scalability",
    ),
    candidates=MappingProxyType(
        {
            "MEAN": _profile(
                {
                    "learning_curve": 0.7,
                    "performance": 0.7,
                    "ecosystem": 0.8,
                    "job_market": 0.8,
                    "maintenance": 0.7,
                    "scalability": 0.8,
                },
                ["JavaScript everywhere", "JSON throughout", "Active community"],
                ["Angular complexity", "Frequent updates", "Performance concerns"],
                "Enterprise applications with complex requirements",
            ),
            "MERN": _profile(
                {
                    "learning_curve": 0.8,
                    "performance": 0.8,
                    "ecosystem": 0.9,
                    "job_market": 0.9,
                    "maintenance": 0.8,
                    "scalability": 0.8,
                },
                ["React popularity", "Component reusability", "Strong ecosystem"],
                ["JSX learning curve", "Rapid ecosystem changes", "SEO challenges"],
                "Modern web applications with rich UIs",
            ),
            "Django": _profile(
                {
                    "learning_curve": 0.6,
                    "performance": 0.7,
                    "ecosystem": 0.7,
                    "job_market": 0.7,
                    "maintenance": 0.8,
                    "scalability": 0.7,
                },
                ["Rapid development", "Built-in admin", "Security features"],
                ["Monolithic structure", "Python performance", "Template limitations"],
                "Content-heavy websites and rapid prototyping",
            ),
        }
    ),
    default_best_for="Web application development",
)

_FRAMEWORK = CategoryProfile(
    category=Category.FRAMEWORK,
    label="Front-end frameworks",
    criteria=(
        "performance",
        "bundle_size",
        "learning_curve",
        "community",
        "job_opportunities",
        "flexibility",
    ),
    candidates=MappingProxyType(
        {
            "React": _profile(
                {
                    "performance": 0.8,
                    "bundle_size": 0.6,
                    "learning_curve": 0.7,
                    "community": 0.9,
                    "job_opportunities": 0.9,
                    "flexibility": 0.8,
                },
                ["Large ecosystem", "Job market", "Flexibility", "Meta backing"],
                ["Rapid changes", "JSX complexity", "Tooling overhead"],
                "Complex applications with dynamic UIs",
            ),
            "Vue": _profile(
                {
                    "performance": 0.8,
                    "bundle_size": 0.8,
                    "learning_curve": 0.9,
                    "community": 0.7,
                    "job_opportunities": 0.7,
                    "flexibility": 0.7,
                },
                ["Gentle learning curve", "Great documentation", "Progressive adoption"],
                ["Smaller ecosystem", "Fewer job opportunities", "Single maintainer risk"],
                "Progressive enhancement and small to medium apps",
            ),
            "Angular": _profile(
                {
                    "performance": 0.7,
                    "bundle_size": 0.5,
                    "learning_curve": 0.5,
                    "community": 0.8,
                    "job_opportunities": 0.8,
                    "flexibility": 0.6,
                },
                ["Full framework", "TypeScript native", "Enterprise ready"],
                ["Steep learning curve", "Verbose syntax", "Large bundle size"],
                "Large enterprise applications",
            ),
        }
    ),
    default_best_for="Frontend development",
)

_PROFILES: Mapping[Category, CategoryProfile] = MappingProxyType(
    {
        Category.API: _API,
        Category.CLOUD_SERVICE: _CLOUD_SERVICE,
        Category.TECH_STACK: _TECH_STACK,
        Category.FRAMEWORK: _FRAMEWORK,
    }
)


def supported_categories() -> list[str]:
    """Return the identifiers of every supported category in declaration order."""

    return [member.value for member in Category]


def get_profile(category: Category | str) -> CategoryProfile:
    """Return the catalog profile for ``category``.

    Args:
        category (Category | str): Enum member or category identifier.

    Returns:
        CategoryProfile: Criteria and candidate table for the category.

    Raises:
        UnsupportedCategoryError: If the category is unknown.
    """

    return _PROFILES[Category.parse(category)]


def iter_profiles() -> list[CategoryProfile]:
    """Return every category profile in declaration order."""

    return [_PROFILES[member] for member in Category]


__all__ = [
    "CandidateProfile",
    "Category",
    "CategoryProfile",
    "get_profile",
    "iter_profiles",
    "supported_categories",
]
