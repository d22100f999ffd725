"""Unit tests for rating aggregation."""

import pytest

from blog.domain.model import RatingSummary
from blog.domain.service import average_rating, rating_value, summarize_ratings
from blog.domain.value import Rate
from tests.conftest import make_review


class TestRatingValue:
    """Tests for rating_value."""

    @pytest.mark.parametrize(
        "rate,expected",
        [(Rate.ONE, 1), (Rate.THREE, 3), (Rate.FIVE, 5), ("FOUR", 4)],
    )
    def test_known_rates(self, rate, expected):
        assert rating_value(rate) == expected

    def test_unknown_rate_scores_zero(self):
        assert rating_value("ELEVEN") == 0


class TestAverageRating:
    """Tests for average_rating and summarize_ratings."""

    def test_mean_of_reviews(self):
        reviews = [
            make_review(Rate.FIVE, 1),
            make_review(Rate.FIVE, 2),
            make_review(Rate.ONE, 3),
        ]

        assert average_rating(reviews) == pytest.approx(11 / 3)

    def test_no_reviews_is_zero(self):
        assert average_rating([]) == 0.0
        assert summarize_ratings([]) == RatingSummary(average=0.0, count=0)

    def test_deleted_reviews_are_ignored(self):
        reviews = [
            make_review(Rate.FOUR, 1),
            make_review(Rate.ONE, 2, is_deleted=True),
        ]

        summary = summarize_ratings(reviews)

        assert summary.average == 4.0
        assert summary.count == 1


class TestStars:
    """Tests for RatingSummary.stars."""

    @pytest.mark.parametrize(
        "average,stars",
        [
            (0.0, ""),
            (3.5, "★★★½"),
            (3.49, "★★★"),
            (4.6, "★★★★½"),
            (5.0, "★★★★★"),
        ],
    )
    def test_star_rendering(self, average, stars):
        assert RatingSummary(average=average, count=1).stars == stars
