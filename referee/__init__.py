"""The Referee: weighted comparison of well-known technology options."""

from referee.core.exceptions import (
    InvalidRequestError,
    RefereeError,
    UnsupportedCategoryError,
)
from referee.services.comparison_service import ComparisonResult, ComparisonService

__version__ = "0.2.0"

__all__ = [
    "ComparisonResult",
    "ComparisonService",
    "InvalidRequestError",
    "RefereeError",
    "UnsupportedCategoryError",
    "__version__",
]
