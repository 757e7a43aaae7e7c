"""Score aggregation, ranking and recommendation text helpers."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence, TypeVar

HIGH_CONFIDENCE_GAP = 0.3
MEDIUM_CONFIDENCE_GAP = 0.15
CLOSE_SECOND_GAP = 0.2
STRENGTH_THRESHOLD = 0.7
MAX_ALTERNATIVES = 2

# Gaps are compared after rounding so that 0.9 - 0.6 lands on 0.3.
_GAP_PRECISION = 10

T = TypeVar("T")


def weighted_score(
    scores: Mapping[str, float], weights: Optional[Mapping[str, float]] = None
) -> float:
    """Aggregate a score vector into a single overall score.

    Without weights the overall score is the arithmetic mean of the vector.
    With weights, only the weighted criteria contribute, and the sum is
    divided by the total of every supplied weight, so a weight on a
    criterion the candidate lacks lowers its score.

    Args:
        scores (Mapping[str, float]): Criterion to score mapping.
        weights (Mapping[str, float] | None): Criterion to relative importance.

    Returns:
        float: Overall score, ``0.0`` for an empty vector.
    """

    if not scores:
        return 0.0
    if not weights:
        return sum(scores.values()) / len(scores)

    total_weight = sum(weights.values()) or 1
    weighted_sum = sum(
        score * weights[criterion]
        for criterion, score in scores.items()
        if criterion in weights
    )
    return weighted_sum / total_weight


def score_gap(winner: float, runner_up: float) -> float:
    return round(winner - runner_up, _GAP_PRECISION)


def confidence_label(winner: float, runner_up: Optional[float]) -> str:
    """Bucket the winner's lead over the runner-up into a confidence label."""

    if runner_up is None:
        return "high"
    gap = score_gap(winner, runner_up)
    if gap > HIGH_CONFIDENCE_GAP:
        return "high"
    if gap > MEDIUM_CONFIDENCE_GAP:
        return "medium"
    return "low"


def rank(items: Sequence[T], key) -> list[T]:
    """Return ``items`` sorted by ``key`` descending, keeping input order on ties."""

    return sorted(items, key=key, reverse=True)


def strengths(scores: Mapping[str, float]) -> list[str]:
    return [
        criterion for criterion, score in scores.items() if score > STRENGTH_THRESHOLD
    ]


def compose_reasoning(
    winner_name: str,
    winner_scores: Mapping[str, float],
    winner_score: float,
    runner_up_name: Optional[str] = None,
    runner_up_score: Optional[float] = None,
) -> str:
    """Explain why the winner was picked and flag a close runner-up."""

    reasoning = (
        f"{winner_name} is recommended because it excels in: "
        f"{', '.join(strengths(winner_scores))}."
    )
    if (
        runner_up_name is not None
        and runner_up_score is not None
        and score_gap(winner_score, runner_up_score) < CLOSE_SECOND_GAP
    ):
        reasoning += (
            f" However, {runner_up_name} is a close second and might be better "
            "if your priorities change."
        )
    return reasoning


def top_criteria(scores: Mapping[str, float], limit: int = 2) -> list[str]:
    """Return the ``limit`` highest scoring criteria, ties kept in vector order."""

    ordered = sorted(scores.items(), key=lambda entry: entry[1], reverse=True)
    return [criterion for criterion, _ in ordered[:limit]]


def alternative_reason(scores: Mapping[str, float]) -> str:
    return f"Consider if {' and '.join(top_criteria(scores))} are your top priorities"


__all__ = [
    "CLOSE_SECOND_GAP",
    "HIGH_CONFIDENCE_GAP",
    "MAX_ALTERNATIVES",
    "MEDIUM_CONFIDENCE_GAP",
    "STRENGTH_THRESHOLD",
    "alternative_reason",
    "compose_reasoning",
    "confidence_label",
    "rank",
    "score_gap",
    "strengths",
    "top_criteria",
    "weighted_score",
]
