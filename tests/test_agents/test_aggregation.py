"""
Unit tests for the Review Aggregator.
"""

import pytest
from datetime import datetime, timedelta, timezone
from reviewpulse.agents.aggregation import ReviewAggregator, rating_bucket, top_n
from reviewpulse.agents.keywords import extract_keywords
from reviewpulse.agents.sentiment import classify
from reviewpulse.models.review import CanonicalReview, SENTIMENT_LABELS

NOW = datetime(2024, 6, 15, 12, 0, 0)


def make_review(text, score=5, date=None, review_id="r"):
    """Build a canonical review the way the normalization agent does."""
    return CanonicalReview(
        review_id=review_id,
        text=text,
        score=score,
        sentiment=classify(text),
        keywords=extract_keywords(text),
        date=date
    )


@pytest.fixture
def aggregator():
    return ReviewAggregator()


def test_empty_collection(aggregator):
    """Zero reviews produce a degenerate report, not an error."""
    analysis = aggregator.aggregate([], now=NOW)

    assert analysis.sentiment_breakdown == {label: 0.0 for label in SENTIMENT_LABELS}
    assert analysis.keyword_frequency == {}
    assert analysis.rating_distribution == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
    assert analysis.recent_issues == {}
    assert analysis.top_positive_keywords == {}
    assert analysis.top_negative_keywords == {}


def test_sentiment_breakdown_sums_to_100(aggregator):
    reviews = [
        make_review("This app is great, I love it, best ever"),
        make_review("Terrible app, keeps crashing, worst bug ever"),
        make_review("It's okay, works fine"),
    ]

    breakdown = aggregator.sentiment_breakdown(reviews)

    assert list(breakdown) == list(SENTIMENT_LABELS)
    assert breakdown["positive"] == 33.33
    assert breakdown["negative"] == 33.33
    assert breakdown["neutral"] == 33.33
    assert breakdown["somewhat_positive"] == 0.0
    assert abs(sum(breakdown.values()) - 100) <= 0.05


def test_sentiment_breakdown_rounds_half_up(aggregator):
    """One positive review in 32 is 3.125%, reported as 3.13."""
    reviews = [make_review("great love best")]
    reviews += [make_review("Opened it today", review_id=str(i)) for i in range(31)]

    breakdown = aggregator.sentiment_breakdown(reviews)

    assert breakdown["positive"] == 3.13
    assert breakdown["neutral"] == 96.88


def test_keyword_frequency_sorted_by_count(aggregator):
    reviews = [
        make_review("crash login"),
        make_review("crash login payment"),
        make_review("crash"),
    ]

    analysis = aggregator.aggregate(reviews, now=NOW)

    assert analysis.keyword_frequency == {"crash": 3, "login": 2, "payment": 1}
    assert list(analysis.keyword_frequency) == ["crash", "login", "payment"]


def test_keyword_frequency_limited_to_20_in_discovery_order(aggregator):
    """Equal counts keep the order keywords were first seen."""
    terms = [f"term{i:02d}" for i in range(25)]
    reviews = [make_review(" ".join(terms))]

    analysis = aggregator.aggregate(reviews, now=NOW)

    assert list(analysis.keyword_frequency) == terms[:20]
    counts = list(analysis.keyword_frequency.values())
    assert all(a >= b for a, b in zip(counts, counts[1:]))


def test_keyword_counted_once_per_review(aggregator):
    analysis = aggregator.aggregate([make_review("crash crash crash")], now=NOW)
    assert analysis.keyword_frequency == {"crash": 1}


def test_rating_distribution_floors_and_skips_out_of_range(aggregator):
    scores = [1, 2.7, 5, 5.9, 0.5, 6, None, float("nan"), float("inf")]
    reviews = [make_review("fine", score=s) for s in scores]

    distribution = aggregator.rating_distribution(reviews)

    assert distribution == {1: 1, 2: 1, 3: 0, 4: 0, 5: 2}
    assert sum(distribution.values()) < len(reviews)


def test_top_positive_and_negative_keywords(aggregator):
    """Filters by review sentiment but ranks by global frequency."""
    reviews = [
        make_review("Great design, love the layout, best ever"),
        make_review("Terrible design, worst layout, constant crash"),
        make_review("Okay design overall"),
    ]

    analysis = aggregator.aggregate(reviews, now=NOW)

    assert analysis.top_positive_keywords == {
        "design": 3, "layout": 2, "great": 1, "love": 1, "best": 1, "ever": 1
    }
    assert list(analysis.top_positive_keywords)[:2] == ["design", "layout"]
    assert analysis.top_negative_keywords == {
        "design": 3, "layout": 2, "terrible": 1, "worst": 1, "constant": 1, "crash": 1
    }
    assert "okay" not in analysis.top_positive_keywords
    assert "okay" not in analysis.top_negative_keywords


def test_somewhat_negative_not_in_negative_table(aggregator):
    review = make_review("slow and buggy sync, nice icons, poor search")
    assert review.sentiment == "somewhat_negative"

    analysis = aggregator.aggregate([review], now=NOW)

    assert analysis.top_negative_keywords == {}


def test_recent_issues_window(aggregator):
    """Only negative reviews from the last 7 days contribute."""
    reviews = [
        make_review("Terrible crash again, worst update", date=NOW - timedelta(days=2)),
        make_review("Awful login failure, horrible", date=NOW - timedelta(days=10)),
        make_review("Great update, love it", date=NOW - timedelta(days=1)),
        make_review("Horrible and awful sync", date=None),
    ]

    analysis = aggregator.aggregate(reviews, now=NOW)

    assert analysis.recent_issues == {"terrible": 1, "crash": 1, "worst": 1, "update": 1}
    assert "login" not in analysis.recent_issues


def test_recent_issues_include_somewhat_negative(aggregator):
    review = make_review(
        "slow and buggy sync, nice icons, poor search",
        date=NOW - timedelta(days=1)
    )

    analysis = aggregator.aggregate([review], now=NOW)

    assert list(analysis.recent_issues) == [
        "slow", "buggy", "sync", "nice", "icons", "poor", "search"
    ]


def test_recent_window_boundary_is_inclusive(aggregator):
    review = make_review("worst crash", date=NOW - timedelta(days=7))

    analysis = aggregator.aggregate([review], now=NOW)

    assert analysis.recent_issues == {"worst": 1, "crash": 1}


def test_recent_issues_limited_to_10(aggregator):
    text = "Terrible worst awful alpha bravo charlie delta echo foxtrot hotel india juliet"
    review = make_review(text, date=NOW - timedelta(days=1))

    analysis = aggregator.aggregate([review], now=NOW)

    assert len(analysis.recent_issues) == 10
    assert list(analysis.recent_issues)[-1] == "hotel"


def test_default_now_is_current_time(aggregator):
    yesterday = datetime.now(timezone.utc).replace(tzinfo=None) - timedelta(days=1)
    review = make_review("worst crash", date=yesterday)

    analysis = aggregator.aggregate([review])

    assert analysis.recent_issues == {"worst": 1, "crash": 1}


def test_aggregate_is_deterministic(aggregator):
    reviews = [
        make_review("Great design, love the layout", date=NOW),
        make_review("Terrible crash after login", date=NOW),
    ]

    first = aggregator.aggregate(reviews, now=NOW).to_dict()
    second = aggregator.aggregate(reviews, now=NOW).to_dict()

    assert first == second


def test_top_n_is_stable():
    counts = {"a": 1, "b": 3, "c": 1, "d": 3}
    assert list(top_n(counts, 3).items()) == [("b", 3), ("d", 3), ("a", 1)]


def test_rating_bucket():
    assert rating_bucket(4.99) == 4
    assert rating_bucket(5) == 5
    assert rating_bucket(0.99) is None
    assert rating_bucket("4") is None
    assert rating_bucket(True) is None


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
