"""Rating aggregation over post reviews."""

from typing import Iterable

from blog.domain.model.aggregate import RatingSummary
from blog.domain.model.review import Review
from blog.domain.value import Rate

RATE_VALUES: dict[Rate, int] = {
    Rate.ONE: 1,
    Rate.TWO: 2,
    Rate.THREE: 3,
    Rate.FOUR: 4,
    Rate.FIVE: 5,
}


def rating_value(rate: Rate | str) -> int:
    """Map a rate to its 1..5 score.

    Unknown categories score 0 instead of raising, so one bad row cannot
    break a whole post view.
    """
    try:
        return RATE_VALUES[Rate(rate)]
    except ValueError:
        return 0


def average_rating(reviews: Iterable[Review]) -> float:
    """Arithmetic mean of the live reviews' scores, 0.0 when there are none."""
    scores = [rating_value(review.rate) for review in reviews if not review.is_deleted]
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def summarize_ratings(reviews: Iterable[Review]) -> RatingSummary:
    """Compute the mean and count of a post's live reviews.

    Args:
        reviews: Reviews of a single post

    Returns:
        Rating summary; (0.0, 0) for a post nobody rated
    """
    live = [review for review in reviews if not review.is_deleted]
    return RatingSummary(average=average_rating(live), count=len(live))
