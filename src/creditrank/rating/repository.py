from typing import List, Optional

from psycopg.errors import UniqueViolation

from creditrank import db
from creditrank.rating.errors import InvalidRatingError, RatingError
from creditrank.rating.models import Rating
from creditrank.rating.notation import Agency

ORDER_NUMBER_CONSTRAINT = "rating_order_number_key"

_AGENCY_COLUMNS = {
    Agency.MOODYS: "moodys_rating",
    Agency.SP: "sp_rating",
    Agency.FITCH: "fitch_rating",
}


class RatingRepository:
    """
    Repository for credit rating data access.
    Encapsulates all SQL and queries for the rating table.

    Every list query returns ratings ordered by ascending order_number.
    """

    def find_all(self) -> List[Rating]:
        rows = db.fetch_all("SELECT * FROM rating ORDER BY order_number")
        return [Rating.from_row(r) for r in rows]

    def find_by_id(self, rating_id: int) -> Optional[Rating]:
        return Rating.from_row(
            db.fetch_one("SELECT * FROM rating WHERE id = %s", (rating_id,))
        )

    def exists_by_id(self, rating_id: int) -> bool:
        row = db.fetch_one(
            "SELECT EXISTS (SELECT 1 FROM rating WHERE id = %s) AS found",
            (rating_id,),
        )
        return bool(row["found"])

    def find_by_rank(self, rank: int) -> Optional[Rating]:
        return Rating.from_row(
            db.fetch_one("SELECT * FROM rating WHERE order_number = %s", (rank,))
        )

    def find_max_rank(self) -> Optional[int]:
        """Highest order_number in use, or None if the table is empty."""
        row = db.fetch_one("SELECT MAX(order_number) AS max_rank FROM rating")
        return row["max_rank"] if row else None

    def find_by_agency_not_null(self, agency: Agency) -> List[Rating]:
        """Ratings with a non-blank notation from the given agency."""
        column = _AGENCY_COLUMNS[agency]
        rows = db.fetch_all(
            f"""
            SELECT * FROM rating
            WHERE {column} ~ '\\S'
            ORDER BY order_number
            """
        )
        return [Rating.from_row(r) for r in rows]

    def find_by_rank_range(self, min_rank: int, max_rank: int) -> List[Rating]:
        rows = db.fetch_all(
            """
            SELECT * FROM rating
            WHERE order_number BETWEEN %s AND %s
            ORDER BY order_number
            """,
            (min_rank, max_rank),
        )
        return [Rating.from_row(r) for r in rows]

    def find_by_rank_greater_or_equal(self, min_rank: int) -> List[Rating]:
        rows = db.fetch_all(
            "SELECT * FROM rating WHERE order_number >= %s ORDER BY order_number",
            (min_rank,),
        )
        return [Rating.from_row(r) for r in rows]

    def find_recent(self, limit: int = 10) -> List[Rating]:
        """Most recently created ratings, newest first."""
        rows = db.fetch_all(
            "SELECT * FROM rating ORDER BY id DESC LIMIT %s",
            (limit,),
        )
        return [Rating.from_row(r) for r in rows]

    def count_by_grade(self, investment_grade_floor: int) -> dict:
        row = db.fetch_one(
            """
            SELECT
                COUNT(*) FILTER (WHERE order_number <= %s) AS investment,
                COUNT(*) FILTER (WHERE order_number > %s) AS speculative
            FROM rating
            """,
            (investment_grade_floor, investment_grade_floor),
        )
        return {"investment": row["investment"], "speculative": row["speculative"]}

    def exists_by_notations(
        self,
        moodys_rating: Optional[str],
        sp_rating: Optional[str],
        fitch_rating: Optional[str],
    ) -> bool:
        """Whether a rating with exactly these three notations is stored."""
        row = db.fetch_one(
            """
            SELECT EXISTS (
                SELECT 1 FROM rating
                WHERE moodys_rating IS NOT DISTINCT FROM %s
                  AND sp_rating IS NOT DISTINCT FROM %s
                  AND fitch_rating IS NOT DISTINCT FROM %s
            ) AS found
            """,
            (moodys_rating, sp_rating, fitch_rating),
        )
        return bool(row["found"])

    def save(self, rating: Rating) -> Rating:
        """
        Insert a new rating (no id) or update an existing one.

        The unique constraint on order_number is the final arbiter of rank
        uniqueness; a violation surfaces as DUPLICATE_ORDER_NUMBER.
        """
        params = (
            rating.moodys_rating,
            rating.sp_rating,
            rating.fitch_rating,
            rating.order_number,
        )
        with db.get_connection() as conn:
            try:
                # Nested in a savepoint so a constraint violation leaves
                # an enclosing transaction usable.
                with conn.transaction():
                    if rating.id is None:
                        row = conn.execute(
                            """
                            INSERT INTO rating (moodys_rating, sp_rating, fitch_rating, order_number)
                            VALUES (%s, %s, %s, %s)
                            RETURNING id
                            """,
                            params,
                        ).fetchone()
                    else:
                        row = conn.execute(
                            """
                            UPDATE rating
                            SET moodys_rating = %s, sp_rating = %s,
                                fitch_rating = %s, order_number = %s
                            WHERE id = %s
                            RETURNING id
                            """,
                            params + (rating.id,),
                        ).fetchone()
            except UniqueViolation as e:
                if e.diag.constraint_name == ORDER_NUMBER_CONSTRAINT:
                    raise InvalidRatingError(
                        RatingError.duplicate_order(rating.order_number)
                    ) from e
                raise

        if row is None:
            raise InvalidRatingError(RatingError.not_found(rating.id))

        return self.find_by_id(row[0])

    def delete_by_id(self, rating_id: int) -> bool:
        """Delete a rating. Returns False if no row had that id."""
        return db.execute("DELETE FROM rating WHERE id = %s", (rating_id,)) > 0
