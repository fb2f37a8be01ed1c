from typing import List, Optional

from creditrank.config import config
from creditrank.rating.models import Rating
from creditrank.rating.notation import Agency


class GradeClassifier:
    """
    Read-side range queries over the rank space.

    Ranks 1..investment_grade_floor are investment grade, everything above
    is speculative grade. The floor defaults to 12 (Baa3/BBB-).
    """

    def __init__(self, repository, investment_grade_floor: int = None):
        self.repository = repository
        self.investment_grade_floor = (
            investment_grade_floor
            if investment_grade_floor is not None
            else config.investment_grade_floor
        )

    def is_investment_grade_rank(self, rank: int) -> bool:
        return 1 <= rank <= self.investment_grade_floor

    def is_speculative_grade_rank(self, rank: int) -> bool:
        return rank > self.investment_grade_floor

    def find_all(self) -> List[Rating]:
        return self.repository.find_all()

    def find_by_agency(self, agency: Optional[str]) -> List[Rating]:
        """Ratings the named agency has rated. Unknown or blank names give []."""
        parsed = Agency.parse(agency)
        if parsed is None:
            return []
        return self.repository.find_by_agency_not_null(parsed)

    def find_investment_grade(self) -> List[Rating]:
        return self.find_by_order_range(1, self.investment_grade_floor)

    def find_speculative_grade(self) -> List[Rating]:
        return self.repository.find_by_rank_greater_or_equal(self.investment_grade_floor + 1)

    def find_by_order_range(self, min_rank: Optional[int], max_rank: Optional[int]) -> List[Rating]:
        """Ratings with min_rank <= rank <= max_rank; [] for a missing or inverted window."""
        if min_rank is None or max_rank is None or min_rank > max_rank:
            return []
        return self.repository.find_by_rank_range(min_rank, max_rank)

    def find_divergent(self) -> List[Rating]:
        """Ratings whose agencies disagree on investment vs speculative grade."""
        return [r for r in self.repository.find_all() if r.is_divergent()]

    def grade_counts(self) -> dict:
        return self.repository.count_by_grade(self.investment_grade_floor)
