from typing import Optional

from creditrank.log import get_logger
from creditrank.rating import notation
from creditrank.rating.errors import ErrorKind, RatingError
from creditrank.rating.models import Rating
from creditrank.rating.notation import Agency

logger = get_logger(__name__)

# agency -> (error kind, label used in messages)
_FORMAT_ERRORS = {
    Agency.MOODYS: (ErrorKind.INVALID_MOODYS_FORMAT, "Moody's"),
    Agency.SP: (ErrorKind.INVALID_SP_FORMAT, "S&P"),
    Agency.FITCH: (ErrorKind.INVALID_FITCH_FORMAT, "Fitch"),
}


class RatingValidator:
    """
    Format and completeness checks for a candidate rating.

    validate() never mutates its input and returns None when the rating is
    acceptable, or the first RatingError found, checked in this order:
    null rating, no notation, Moody's format, S&P format, Fitch format,
    non-positive rank.

    Agencies disagreeing about investment vs speculative grade is
    tolerated; it is logged and the rating is still accepted.
    """

    def validate(self, rating: Optional[Rating]) -> Optional[RatingError]:
        if rating is None:
            return RatingError.null_rating()

        if not rating.notations():
            return RatingError.no_notation()

        for agency in Agency:
            value = rating.notation(agency)
            if notation.is_blank(value):
                continue
            if not notation.is_valid(agency, value):
                kind, label = _FORMAT_ERRORS[agency]
                return RatingError.invalid_format(kind, label, value)

        if rating.order_number is not None and rating.order_number <= 0:
            return RatingError.non_positive_order(rating.order_number)

        if rating.is_divergent():
            logger.warning(
                "rating.agency_divergence",
                rating_id=rating.id,
                notations={a.value: v for a, v in rating.notations().items()},
            )

        return None

    def is_valid(self, rating: Optional[Rating]) -> bool:
        return self.validate(rating) is None
