from datetime import datetime

import pytest

from referee.core.exceptions import UnsupportedCategoryError
from referee.services.comparison_service import ComparisonService


@pytest.fixture()
def service() -> ComparisonService:
    return ComparisonService()


def test_weighted_api_comparison_recommends_grpc(service: ComparisonService) -> None:
    result = service.compare(
        "api",
        ["REST", "GraphQL", "gRPC"],
        weights={"performance": 3, "ease_of_use": 1},
    )

    scores = {entry.name: entry.overall_score for entry in result.results}
    assert scores["REST"] == pytest.approx(0.75)
    assert scores["GraphQL"] == pytest.approx(0.75)
    assert scores["gRPC"] == pytest.approx(0.80)

    recommendation = result.recommendation
    assert recommendation.recommended == "gRPC"
    assert recommendation.confidence == "low"
    assert recommendation.reasoning.startswith(
        "gRPC is recommended because it excels in: performance, scalability."
    )
    assert "close second" in recommendation.reasoning
    assert {alternative.name for alternative in recommendation.alternatives} == {
        "REST",
        "GraphQL",
    }


def test_results_keep_input_order(service: ComparisonService) -> None:
    items = ["gRPC", "REST", "GraphQL"]

    result = service.compare("api", items)

    assert [entry.name for entry in result.results] == items
    assert result.items == items


def test_equal_weights_use_mean_scores(service: ComparisonService) -> None:
    result = service.compare("api", ["REST", "GraphQL", "gRPC"])

    scores = [entry.overall_score for entry in result.results]
    assert scores == pytest.approx([0.8, 4.4 / 6, 0.7])
    assert result.recommendation.recommended == "REST"
    assert result.recommendation.confidence == "low"
    assert [alt.as_dict() for alt in result.recommendation.alternatives] == [
        {"name": "GraphQL", "reason": "Consider if performance and cost are your top priorities"},
        {"name": "gRPC", "reason": "Consider if performance and scalability are your top priorities"},
    ]


def test_unknown_candidate_scores_zero_and_ranks_last(service: ComparisonService) -> None:
    result = service.compare(
        "api", ["SOAP", "REST", "gRPC"], weights={"performance": 10}
    )

    soap = result.results[0]
    assert soap.overall_score == 0
    assert soap.scores == {}
    assert soap.pros == [] and soap.cons == []
    assert soap.best_for == "General purpose applications"
    assert result.recommendation.recommended == "gRPC"
    assert result.recommendation.alternatives[-1].name == "SOAP"


def test_single_candidate_has_high_confidence(service: ComparisonService) -> None:
    result = service.compare("cloud-service", ["AWS"])

    assert result.recommendation.recommended == "AWS"
    assert result.recommendation.confidence == "high"
    assert result.recommendation.alternatives == []
    assert "close second" not in result.recommendation.reasoning


def test_duplicates_are_scored_independently(service: ComparisonService) -> None:
    result = service.compare("framework", ["Vue", "Vue"])

    assert [entry.name for entry in result.results] == ["Vue", "Vue"]
    assert result.results[0].overall_score == result.results[1].overall_score
    assert result.recommendation.confidence == "low"
    assert [alt.name for alt in result.recommendation.alternatives] == ["Vue"]


def test_only_two_alternatives_are_returned(service: ComparisonService) -> None:
    result = service.compare("tech-stack", ["MEAN", "MERN", "Django", "Rails"])

    assert result.recommendation.recommended == "MERN"
    assert len(result.recommendation.alternatives) == 2
    assert "Rails" not in {alt.name for alt in result.recommendation.alternatives}


def test_clear_cloud_winner_confidence(service: ComparisonService) -> None:
    result = service.compare(
        "cloud-service", ["GCP", "AWS"], weights={"features": 1}
    )

    # AWS 0.9, GCP 0.7 -> gap 0.2
    assert result.recommendation.recommended == "AWS"
    assert result.recommendation.confidence == "medium"


def test_constraints_are_echoed_but_do_not_change_scores(service: ComparisonService) -> None:
    constraints = {"budget": "limited", "team_size": "small"}

    plain = service.compare("framework", ["React", "Vue", "Angular"])
    constrained = service.compare(
        "framework", ["React", "Vue", "Angular"], constraints=constraints
    )

    assert constrained.constraints == constraints
    assert plain.constraints == {}
    assert [r.overall_score for r in constrained.results] == [
        r.overall_score for r in plain.results
    ]


def test_unsupported_category_raises(service: ComparisonService) -> None:
    with pytest.raises(UnsupportedCategoryError) as excinfo:
        service.compare("unknown-type", ["item1", "item2"])

    assert isinstance(excinfo.value, ValueError)
    assert "unknown-type" in str(excinfo.value)


def test_empty_candidate_list_is_rejected(service: ComparisonService) -> None:
    with pytest.raises(ValueError):
        service.compare("api", [])


def test_single_string_is_not_split_into_candidates(service: ComparisonService) -> None:
    with pytest.raises(TypeError):
        service.compare("api", "REST")


def test_as_dict_matches_response_shape(service: ComparisonService) -> None:
    payload = service.compare(
        "api", ["REST", "gRPC"], constraints={"performance": "high"}
    ).as_dict()

    assert set(payload) == {
        "category",
        "items",
        "constraints",
        "results",
        "recommendation",
        "timestamp",
    }
    assert payload["category"] == "api"
    assert set(payload["results"][0]) == {
        "name",
        "scores",
        "pros",
        "cons",
        "bestFor",
        "overallScore",
    }
    assert set(payload["recommendation"]) == {
        "recommended",
        "confidence",
        "reasoning",
        "alternatives",
    }
    assert payload["timestamp"].endswith("Z")
    datetime.fromisoformat(payload["timestamp"].replace("Z", "+00:00"))
