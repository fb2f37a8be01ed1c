from dataclasses import dataclass
from typing import Optional

from creditrank.rating import notation
from creditrank.rating.notation import Agency


@dataclass
class Rating:
    """
    A credit rating row: up to three agency notations and the rank that
    orders all ratings from best (1) to worst.
    """

    moodys_rating: Optional[str] = None
    sp_rating: Optional[str] = None
    fitch_rating: Optional[str] = None
    order_number: Optional[int] = None
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: Optional[dict]) -> Optional["Rating"]:
        if row is None:
            return None
        return cls(
            id=row["id"],
            moodys_rating=row["moodys_rating"],
            sp_rating=row["sp_rating"],
            fitch_rating=row["fitch_rating"],
            order_number=row["order_number"],
        )

    def notation(self, agency: Agency) -> Optional[str]:
        return {
            Agency.MOODYS: self.moodys_rating,
            Agency.SP: self.sp_rating,
            Agency.FITCH: self.fitch_rating,
        }[agency]

    def notations(self) -> dict[Agency, str]:
        """Present (non-blank) notations keyed by agency."""
        return {
            agency: self.notation(agency)
            for agency in Agency
            if not notation.is_blank(self.notation(agency))
        }

    def is_investment_grade(self) -> bool:
        """True if any agency rates this investment grade."""
        return any(
            notation.is_investment_grade(agency, value)
            for agency, value in self.notations().items()
        )

    def is_divergent(self) -> bool:
        """True if the agencies' notations straddle the investment-grade boundary."""
        present = self.notations().items()
        return any(notation.is_investment_grade(a, v) for a, v in present) and any(
            notation.is_speculative_grade(a, v) for a, v in present
        )
