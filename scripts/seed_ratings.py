"""Seed the quality preset ratings into the database."""
from creditrank.log import setup_logging
from creditrank.rating import RatingService
from creditrank.rating.mapper import QUALITY_PRESETS, default_for_quality, to_entity


def main():
    setup_logging()
    service = RatingService()

    for level in QUALITY_PRESETS:
        rating = to_entity(default_for_quality(level))
        existing = service.repository.find_by_rank(rating.order_number)
        if existing:
            print(f"Skipping {level} - rank {rating.order_number} already taken")
            continue

        result = service.save(rating)
        print(f"Created: {level} (id={result.id}, rank={result.order_number})")


if __name__ == "__main__":
    main()
