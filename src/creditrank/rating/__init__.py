"""
Rating

Credit rating validation, rank allocation and grade classification.
"""

from creditrank.rating.errors import ErrorKind, InvalidRatingError, RatingError
from creditrank.rating.models import Rating
from creditrank.rating.repository import RatingRepository
from creditrank.rating.service import RatingService

__all__ = [
    "ErrorKind",
    "InvalidRatingError",
    "Rating",
    "RatingError",
    "RatingRepository",
    "RatingService",
]
