"""Domain errors raised by the comparison engine and its request layer."""

from __future__ import annotations

from typing import Iterable


class RefereeError(Exception):
    """Base class for errors surfaced to Referee callers."""


class UnsupportedCategoryError(RefereeError, ValueError):
    """Raised when a comparison is requested for an unknown category."""

    def __init__(self, category: object, supported: Iterable[str]) -> None:
        self.category = category
        self.supported = tuple(supported)
        super().__init__(
            f"Comparison category '{category}' not supported. "
            f"Supported categories: {', '.join(self.supported)}."
        )


class InvalidRequestError(RefereeError, ValueError):
    """Raised when a comparison request payload fails validation."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"Invalid '{field}': {message}")
