import pytest

from referee.core.exceptions import InvalidRequestError
from referee.services.comparison_request import (
    ComparisonRequest,
    parse_constraint_options,
    parse_weight_options,
)


def test_from_dict_normalises_payload() -> None:
    request = ComparisonRequest.from_dict(
        {
            "category": " api ",
            "items": ["REST", " gRPC "],
            "constraints": {"client_types": ["web", "mobile"], "budget": "low"},
            "weights": {"performance": 3, "cost": 0.5},
        }
    )

    assert request.category == "api"
    assert request.items == ["REST", "gRPC"]
    assert request.constraints == {"client_types": "web, mobile", "budget": "low"}
    assert request.weights == {"performance": 3.0, "cost": 0.5}
    assert request.as_context()["items"] == ["REST", "gRPC"]


def test_from_dict_accepts_legacy_type_key() -> None:
    request = ComparisonRequest.from_dict({"type": "framework", "items": ["Vue"]})

    assert request.category == "framework"
    assert request.weights == {} and request.constraints == {}


@pytest.mark.parametrize(
    ("payload", "field"),
    [
        (["api"], "request"),
        ({"items": ["REST"]}, "category"),
        ({"category": "api"}, "items"),
        ({"category": "api", "items": []}, "items"),
        ({"category": "api", "items": "REST"}, "items"),
        ({"category": "api", "items": ["REST", 3]}, "items"),
        ({"category": "api", "items": ["REST"], "weights": [1]}, "weights"),
        ({"category": "api", "items": ["REST"], "weights": {"cost": -1}}, "weights"),
        ({"category": "api", "items": ["REST"], "weights": {"cost": True}}, "weights"),
        ({"category": "api", "items": ["REST"], "weights": {"cost": "3"}}, "weights"),
        ({"category": "api", "items": ["REST"], "constraints": "fast"}, "constraints"),
    ],
)
def test_from_dict_rejects_invalid_payloads(payload, field: str) -> None:
    with pytest.raises(InvalidRequestError) as excinfo:
        ComparisonRequest.from_dict(payload)
    assert excinfo.value.field == field


def test_unknown_category_is_left_to_the_engine() -> None:
    request = ComparisonRequest.from_dict({"category": "unknown-type", "items": ["a"]})

    assert request.category == "unknown-type"


def test_parse_weight_options() -> None:
    assert parse_weight_options(["performance=3", "ease_of_use = 1.5"]) == {
        "performance": 3.0,
        "ease_of_use": 1.5,
    }
    assert parse_weight_options([]) == {}


@pytest.mark.parametrize("option", ["performance", "performance=", "=3", "cost=abc", "cost=0"])
def test_parse_weight_options_rejects_bad_values(option: str) -> None:
    with pytest.raises(InvalidRequestError):
        parse_weight_options([option])


def test_parse_constraint_options() -> None:
    assert parse_constraint_options(["budget=medium", "scale=enterprise=global"]) == {
        "budget": "medium",
        "scale": "enterprise=global",
    }
    with pytest.raises(InvalidRequestError):
        parse_constraint_options(["budget"])
