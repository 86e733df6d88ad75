from reviews.domain.models import Review, ReviewId, clean_review_input
from reviews.domain.stats import ReviewStats, summarize

__all__ = [
    "Review",
    "ReviewId",
    "ReviewStats",
    "clean_review_input",
    "summarize",
]
