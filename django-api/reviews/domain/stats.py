from dataclasses import dataclass, field

from reviews.domain.models import RATING_RANGE, Review


@dataclass(frozen=True)
class ReviewStats:
    count: int
    average: float
    histogram: dict[int, int] = field(default_factory=dict)


def summarize(reviews: list[Review]) -> ReviewStats:
    """Average rating and per-star histogram; an empty set averages 0.0."""
    low, high = RATING_RANGE
    histogram = {star: 0 for star in range(low, high + 1)}
    for review in reviews:
        histogram[review.rating] += 1
    count = len(reviews)
    average = round(sum(review.rating for review in reviews) / count, 1) if count else 0.0
    return ReviewStats(count=count, average=average, histogram=histogram)
