from dataclasses import replace
from typing import List, NoReturn, Optional

from creditrank.log import get_logger
from creditrank.rating.allocator import OrderAllocator
from creditrank.rating.classifier import GradeClassifier
from creditrank.rating.errors import InvalidRatingError, RatingError
from creditrank.rating.models import Rating
from creditrank.rating.repository import RatingRepository
from creditrank.rating.validator import RatingValidator

logger = get_logger(__name__)


class RatingService:
    """
    Handles rating business rules, using the repository for data access.

    save() runs validation, then rank allocation, then persists. Every
    rejection is raised as InvalidRatingError before anything is written.
    """

    def __init__(self, repository=None, investment_grade_floor: int = None):
        self.repository = repository or RatingRepository()
        self.validator = RatingValidator()
        self.allocator = OrderAllocator(self.repository)
        self.classifier = GradeClassifier(self.repository, investment_grade_floor)

    def _reject(self, error: RatingError) -> NoReturn:
        logger.info("rating.rejected", kind=error.kind.value, value=error.value)
        raise InvalidRatingError(error)

    # Writes

    def save(self, rating: Optional[Rating]) -> Rating:
        """
        Validate, allocate a rank and store a rating.

        The caller's object is left untouched; the stored rating is returned.
        """
        error = self.validator.validate(rating)
        if error is not None:
            self._reject(error)

        candidate = replace(rating)
        error = self.allocator.allocate(candidate)
        if error is not None:
            self._reject(error)

        try:
            saved = self.repository.save(candidate)
        except InvalidRatingError as e:
            logger.info("rating.rejected", kind=e.kind.value, value=e.value)
            raise

        logger.info("rating.saved", rating_id=saved.id, order_number=saved.order_number)
        return saved

    def delete_by_id(self, rating_id: Optional[int]) -> None:
        if rating_id is None or rating_id <= 0:
            self._reject(RatingError.invalid_id(rating_id))

        if not self.repository.exists_by_id(rating_id):
            self._reject(RatingError.not_found(rating_id))

        self.repository.delete_by_id(rating_id)
        logger.info("rating.deleted", rating_id=rating_id)

    # Reads

    def find_all(self) -> List[Rating]:
        return self.classifier.find_all()

    def find_by_id(self, rating_id: Optional[int]) -> Optional[Rating]:
        if rating_id is None or rating_id <= 0:
            return None
        return self.repository.find_by_id(rating_id)

    def get(self, rating_id: Optional[int]) -> Rating:
        """Like find_by_id, but raises NOT_FOUND instead of returning None."""
        rating = self.find_by_id(rating_id)
        if rating is None:
            self._reject(RatingError.not_found(rating_id))
        return rating

    def exists_by_id(self, rating_id: Optional[int]) -> bool:
        if rating_id is None or rating_id <= 0:
            return False
        return self.repository.exists_by_id(rating_id)

    def find_by_agency(self, agency: Optional[str]) -> List[Rating]:
        return self.classifier.find_by_agency(agency)

    def find_investment_grade(self) -> List[Rating]:
        return self.classifier.find_investment_grade()

    def find_speculative_grade(self) -> List[Rating]:
        return self.classifier.find_speculative_grade()

    def find_by_order_range(self, min_rank: Optional[int], max_rank: Optional[int]) -> List[Rating]:
        return self.classifier.find_by_order_range(min_rank, max_rank)

    def find_divergent(self) -> List[Rating]:
        return self.classifier.find_divergent()

    def find_recent(self, limit: int = 10) -> List[Rating]:
        return self.repository.find_recent(limit)

    def grade_counts(self) -> dict:
        return self.classifier.grade_counts()
