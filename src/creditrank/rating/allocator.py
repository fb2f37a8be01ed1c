from typing import Optional

from creditrank.log import get_logger
from creditrank.rating.errors import RatingError
from creditrank.rating.models import Rating

logger = get_logger(__name__)


class OrderAllocator:
    """
    Resolves the order number a rating is saved with.

    The lookup here is read-then-write and not atomic. Concurrent writers are
    caught by the unique constraint on rating.order_number, which the
    repository reports as the same DUPLICATE_ORDER_NUMBER error.
    """

    def __init__(self, repository):
        self.repository = repository

    def next_rank(self) -> int:
        """One past the current maximum rank, or 1 for an empty store."""
        max_rank = self.repository.find_max_rank()
        return 1 if max_rank is None else max_rank + 1

    def allocate(self, rating: Rating) -> Optional[RatingError]:
        """
        Assign or check rating.order_number in place.

        A new rating without a rank gets next_rank(). An explicit rank is
        accepted if nobody holds it, or only the rating itself does, and
        rejected with DUPLICATE_ORDER_NUMBER otherwise. An update without a
        rank keeps its stored rank.
        """
        if rating.id is None and rating.order_number is None:
            rating.order_number = self.next_rank()
            logger.debug("rating.rank_assigned", order_number=rating.order_number)
            return None

        if rating.order_number is None:
            # Updates without a rank keep the one already stored.
            existing = self.repository.find_by_id(rating.id)
            if existing is not None:
                rating.order_number = existing.order_number
            return None

        holder = self.repository.find_by_rank(rating.order_number)
        if holder is not None and holder.id != rating.id:
            logger.warning(
                "rating.rank_conflict",
                order_number=rating.order_number,
                holder_id=holder.id,
                rating_id=rating.id,
            )
            return RatingError.duplicate_order(rating.order_number)

        return None
