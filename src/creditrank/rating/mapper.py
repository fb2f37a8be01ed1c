"""
Conversion between the Rating entity and its transfer representation.
"""

from dataclasses import asdict, dataclass
from typing import Optional

from creditrank.rating import notation
from creditrank.rating.models import Rating
from creditrank.rating.notation import Agency


@dataclass
class RatingDTO:
    id: Optional[int] = None
    moodys_rating: Optional[str] = None
    sp_rating: Optional[str] = None
    fitch_rating: Optional[str] = None
    order_number: Optional[int] = None

    def is_investment_grade(self) -> bool:
        return (
            notation.is_investment_grade(Agency.MOODYS, self.moodys_rating)
            or notation.is_investment_grade(Agency.SP, self.sp_rating)
            or notation.is_investment_grade(Agency.FITCH, self.fitch_rating)
        )

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "RatingDTO":
        return cls(
            id=data.get("id"),
            moodys_rating=data.get("moodys_rating"),
            sp_rating=data.get("sp_rating"),
            fitch_rating=data.get("fitch_rating"),
            order_number=data.get("order_number"),
        )


# level -> (moodys, sp, fitch, order_number)
QUALITY_PRESETS = {
    "PRIME": ("Aaa", "AAA", "AAA", 1),
    "HIGH_INVESTMENT": ("Aa2", "AA", "AA", 4),
    "INVESTMENT": ("A2", "A", "A", 7),
    "LOWER_INVESTMENT": ("Baa2", "BBB", "BBB", 10),
    "SPECULATIVE": ("Ba2", "BB", "BB", 13),
    "HIGH_YIELD": ("B2", "B", "B", 16),
}


def to_dto(rating: Optional[Rating]) -> Optional[RatingDTO]:
    if rating is None:
        return None
    return RatingDTO(
        id=rating.id,
        moodys_rating=rating.moodys_rating,
        sp_rating=rating.sp_rating,
        fitch_rating=rating.fitch_rating,
        order_number=rating.order_number,
    )


def to_entity(dto: Optional[RatingDTO]) -> Optional[Rating]:
    if dto is None:
        return None
    return Rating(
        id=dto.id,
        moodys_rating=dto.moodys_rating,
        sp_rating=dto.sp_rating,
        fitch_rating=dto.fitch_rating,
        order_number=dto.order_number,
    )


def update_entity(rating: Optional[Rating], dto: Optional[RatingDTO]) -> None:
    """Copy notations and rank from a DTO onto an existing entity, keeping its id."""
    if rating is None or dto is None:
        return
    rating.moodys_rating = dto.moodys_rating
    rating.sp_rating = dto.sp_rating
    rating.fitch_rating = dto.fitch_rating
    rating.order_number = dto.order_number


def default_for_quality(level: Optional[str]) -> RatingDTO:
    """Preset DTO for a named quality level; an empty DTO for unknown levels."""
    if level is None:
        return RatingDTO()
    preset = QUALITY_PRESETS.get(level.upper())
    if preset is None:
        return RatingDTO()
    moodys, sp, fitch, order_number = preset
    return RatingDTO(
        moodys_rating=moodys,
        sp_rating=sp,
        fitch_rating=fitch,
        order_number=order_number,
    )
