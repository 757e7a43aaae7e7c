"""Validation of structured comparison requests."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping

from ..core.exceptions import InvalidRequestError


@dataclass(slots=True)
class ComparisonRequest:
    """Validated ``{category, items, constraints?, weights?}`` payload."""

    category: str
    items: List[str]
    constraints: Dict[str, str] = field(default_factory=dict)
    weights: Dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: Any) -> "ComparisonRequest":
        """Build a request from a decoded JSON/YAML payload.

        Args:
            payload (Any): Mapping with ``category`` and ``items`` keys.

        Returns:
            ComparisonRequest: Normalised request.

        Raises:
            InvalidRequestError: If a field is missing or malformed.
        """

        if not isinstance(payload, Mapping):
            raise InvalidRequestError("request", "expected an object")

        category = payload.get("category", payload.get("type"))
        if not isinstance(category, str) or not category.strip():
            raise InvalidRequestError("category", "a non-empty string is required")

        return cls(
            category=category.strip(),
            items=_coerce_items(payload.get("items")),
            constraints=_coerce_constraints(payload.get("constraints")),
            weights=_coerce_weights(payload.get("weights")),
        )

    def as_context(self) -> Dict[str, Any]:
        """Return the workflow context for this request."""

        return {
            "category": self.category,
            "items": list(self.items),
            "constraints": dict(self.constraints),
            "weights": dict(self.weights),
        }


def _coerce_items(value: Any) -> List[str]:
    if not isinstance(value, list) or not value:
        raise InvalidRequestError("items", "a non-empty list of candidate names is required")
    items: List[str] = []
    for entry in value:
        if not isinstance(entry, str) or not entry.strip():
            raise InvalidRequestError("items", f"candidate names must be strings, got {entry!r}")
        items.append(entry.strip())
    return items


def _coerce_constraints(value: Any) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidRequestError("constraints", "expected a mapping of descriptive values")
    constraints: Dict[str, str] = {}
    for key, entry in value.items():
        if isinstance(entry, list):
            constraints[str(key)] = ", ".join(str(item) for item in entry)
        else:
            constraints[str(key)] = str(entry)
    return constraints


def _coerce_weights(value: Any) -> Dict[str, float]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidRequestError("weights", "expected a mapping of criterion to number")
    weights: Dict[str, float] = {}
    for criterion, weight in value.items():
        weights[str(criterion)] = _coerce_weight(str(criterion), weight)
    return weights


def _coerce_weight(criterion: str, weight: Any) -> float:
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise InvalidRequestError("weights", f"weight for '{criterion}' must be a number")
    number = float(weight)
    if not math.isfinite(number) or number <= 0:
        raise InvalidRequestError("weights", f"weight for '{criterion}' must be positive")
    return number


def _split_option(option: str, field_name: str) -> tuple[str, str]:
    key, separator, value = option.partition("=")
    if not separator or not key.strip() or not value.strip():
        raise InvalidRequestError(field_name, f"expected KEY=VALUE, got '{option}'")
    return key.strip(), value.strip()


def parse_weight_options(options: Iterable[str]) -> Dict[str, float]:
    """Parse ``criterion=weight`` command-line options into a weights mapping."""

    weights: Dict[str, float] = {}
    for option in options:
        criterion, raw = _split_option(option, "weights")
        try:
            number = float(raw)
        except ValueError as exc:
            raise InvalidRequestError(
                "weights", f"weight for '{criterion}' must be a number, got '{raw}'"
            ) from exc
        weights[criterion] = _coerce_weight(criterion, number)
    return weights


def parse_constraint_options(options: Iterable[str]) -> Dict[str, str]:
    """Parse ``key=value`` command-line options into a constraints mapping."""

    constraints: Dict[str, str] = {}
    for option in options:
        key, value = _split_option(option, "constraints")
        constraints[key] = value
    return constraints


__all__ = [
    "ComparisonRequest",
    "parse_constraint_options",
    "parse_weight_options",
]
