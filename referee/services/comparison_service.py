"""Candidate comparison engine.

Updates:
    v0.1.0 - 2025-11-09 - Replaced free-form comparisons with catalog-backed scoring.
    v0.2.0 - 2025-11-16 - Results keep input order; ranking only drives the recommendation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence

from . import scoring
from .category_catalog import Category, CategoryProfile, get_profile

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CandidateResult:
    """Scored view of one requested candidate."""

    name: str
    scores: Dict[str, float]
    pros: List[str]
    cons: List[str]
    best_for: str
    overall_score: float

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "scores": dict(self.scores),
            "pros": list(self.pros),
            "cons": list(self.cons),
            "bestFor": self.best_for,
            "overallScore": self.overall_score,
        }


@dataclass(slots=True)
class Alternative:
    name: str
    reason: str

    def as_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "reason": self.reason}


@dataclass(slots=True)
class Recommendation:
    """Winner, confidence and runner-up guidance for a comparison."""

    recommended: str
    confidence: str
    reasoning: str
    alternatives: List[Alternative] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "recommended": self.recommended,
            "confidence": self.confidence,
            "reasoning": self.reasoning,
            "alternatives": [alternative.as_dict() for alternative in self.alternatives],
        }


@dataclass(slots=True)
class ComparisonResult:
    """Structured comparison between candidates of one category."""

    category: str
    items: List[str]
    constraints: Dict[str, Any]
    results: List[CandidateResult]
    recommendation: Recommendation
    timestamp: str

    def as_dict(self) -> Dict[str, Any]:
        """Return a JSON serialisable representation."""

        return {
            "category": self.category,
            "items": list(self.items),
            "constraints": dict(self.constraints),
            "results": [result.as_dict() for result in self.results],
            "recommendation": self.recommendation.as_dict(),
            "timestamp": self.timestamp,
        }


class ComparisonService:
    """Scores candidates against the static catalog and picks a winner."""

    def compare(
        self,
        category: Category | str,
        items: Sequence[str],
        *,
        weights: Optional[Mapping[str, float]] = None,
        constraints: Optional[Mapping[str, Any]] = None,
    ) -> ComparisonResult:
        """Compare candidates of a category and recommend one.

        Args:
            category (Category | str): Category identifier, e.g. ``"api"``.
            items (Sequence[str]): Candidate names, order preserved in the output.
            weights (Mapping[str, float] | None): Optional criterion weights.
            constraints (Mapping[str, Any] | None): Descriptive constraints, echoed
                back unchanged and not used for scoring.

        Returns:
            ComparisonResult: Per-candidate results plus the recommendation.

        Raises:
            UnsupportedCategoryError: If the category is unknown.
            ValueError: If no candidates were supplied.
            TypeError: If ``items`` is a single string.
        """

        profile = get_profile(category)
        if isinstance(items, str):
            raise TypeError("items must be a sequence of candidate names, not a string.")
        names = list(items)
        if not names:
            raise ValueError("At least one candidate is required for a comparison.")

        weights = dict(weights or {})
        results = [self._score_candidate(profile, name, weights) for name in names]
        recommendation = self._recommend(results)
        logger.info(
            "comparison_completed",
            extra={
                "tool": "comparison_service",
                "category": profile.category.value,
                "candidates": len(results),
                "recommended": recommendation.recommended,
                "confidence": recommendation.confidence,
            },
        )
        return ComparisonResult(
            category=profile.category.value,
            items=names,
            constraints=dict(constraints or {}),
            results=results,
            recommendation=recommendation,
            timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        )

    @staticmethod
    def _score_candidate(
        profile: CategoryProfile, name: str, weights: Mapping[str, float]
    ) -> CandidateResult:
        candidate = profile.lookup(name)
        if not candidate.is_known:
            logger.debug(
                "unknown_candidate",
                extra={"category": profile.category.value, "candidate": name},
            )
        scores = dict(candidate.scores)
        return CandidateResult(
            name=name,
            scores=scores,
            pros=list(candidate.pros),
            cons=list(candidate.cons),
            best_for=candidate.best_for,
            overall_score=scoring.weighted_score(scores, weights),
        )

    @staticmethod
    def _recommend(results: List[CandidateResult]) -> Recommendation:
        ranked = scoring.rank(results, key=lambda result: result.overall_score)
        winner = ranked[0]
        runner_up = ranked[1] if len(ranked) > 1 else None
        runner_up_score = runner_up.overall_score if runner_up else None

        alternatives = [
            Alternative(name=entry.name, reason=scoring.alternative_reason(entry.scores))
            for entry in ranked[1 : 1 + scoring.MAX_ALTERNATIVES]
        ]
        return Recommendation(
            recommended=winner.name,
            confidence=scoring.confidence_label(winner.overall_score, runner_up_score),
            reasoning=scoring.compose_reasoning(
                winner.name,
                winner.scores,
                winner.overall_score,
                runner_up.name if runner_up else None,
                runner_up_score,
            ),
            alternatives=alternatives,
        )
