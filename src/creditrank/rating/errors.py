"""
Rating failures.

Validation and rank allocation return a RatingError value describing what
went wrong. The service raises it wrapped in InvalidRatingError, the single
"invalid input" category callers catch and branch on by kind.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    NULL_RATING = "NullRating"
    NO_NOTATION_PROVIDED = "NoNotationProvided"
    INVALID_MOODYS_FORMAT = "InvalidMoodysFormat"
    INVALID_SP_FORMAT = "InvalidSPFormat"
    INVALID_FITCH_FORMAT = "InvalidFitchFormat"
    NON_POSITIVE_ORDER = "NonPositiveOrder"
    DUPLICATE_ORDER_NUMBER = "DuplicateOrderNumber"
    NOT_FOUND = "NotFound"
    INVALID_ID = "InvalidId"


@dataclass(frozen=True)
class RatingError:
    kind: ErrorKind
    message: str
    value: Any = None

    @classmethod
    def null_rating(cls) -> "RatingError":
        return cls(ErrorKind.NULL_RATING, "Rating cannot be null")

    @classmethod
    def no_notation(cls) -> "RatingError":
        return cls(
            ErrorKind.NO_NOTATION_PROVIDED,
            "At least one rating agency notation must be provided",
        )

    @classmethod
    def invalid_format(cls, kind: ErrorKind, agency_label: str, value: str) -> "RatingError":
        return cls(kind, f"Invalid {agency_label} rating format: {value}", value)

    @classmethod
    def non_positive_order(cls, value: int) -> "RatingError":
        return cls(ErrorKind.NON_POSITIVE_ORDER, "Order number must be positive", value)

    @classmethod
    def duplicate_order(cls, value: int) -> "RatingError":
        return cls(
            ErrorKind.DUPLICATE_ORDER_NUMBER,
            f"Order number {value} already exists. Each rating must have a unique order number.",
            value,
        )

    @classmethod
    def not_found(cls, rating_id: Any) -> "RatingError":
        return cls(ErrorKind.NOT_FOUND, f"Rating not found with id: {rating_id}", rating_id)

    @classmethod
    def invalid_id(cls, rating_id: Any) -> "RatingError":
        return cls(ErrorKind.INVALID_ID, "Invalid ID for deletion", rating_id)


class InvalidRatingError(ValueError):
    """Raised by RatingService when an operation is rejected."""

    def __init__(self, error: RatingError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def value(self) -> Any:
        return self.error.value
