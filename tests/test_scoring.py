"""
Tests for the local score estimator, rating bands and the quick-wins table.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from trustable_score.core.models import QuickWin, Rating, ScoreSignals
from trustable_score.core.scoring import (
    BASE_SCORE,
    QUICK_WINS,
    estimate_score,
    get_quick_wins,
    rating_for_score,
)

BOOLEAN_SIGNALS = ["has_wikidata", "has_google_business", "has_schema_markup", "has_comparison_content"]

LOW = {
    "platformCount": 1,
    "hasWikidata": False,
    "hasGoogleBusiness": False,
    "hasSchemaMarkup": False,
    "contentAge": 24,
    "hasComparisonContent": False,
}

ALL_ON = {
    "platformCount": 4,
    "hasWikidata": True,
    "hasGoogleBusiness": True,
    "hasSchemaMarkup": True,
    "contentAge": 3,
    "hasComparisonContent": True,
}


# --- Estimator ---


def test_low_signals_score_base_only():
    assert estimate_score(LOW) == 20


def test_all_signals_reach_cap():
    """20+25+10+8+10+12+15 = 100."""
    assert estimate_score(ALL_ON) == 100


def test_medium_signals():
    signals = ScoreSignals(platform_count=3, has_wikidata=True, has_schema_markup=True, content_age=12)
    # 20 + 15 + 10 + 10 + 8
    assert estimate_score(signals) == 63


def test_accepts_snake_case_mapping():
    snake = {
        "platform_count": 4,
        "has_wikidata": True,
        "has_google_business": True,
        "has_schema_markup": True,
        "content_age": 3,
        "has_comparison_content": True,
    }
    assert estimate_score(snake) == estimate_score(ALL_ON)


@pytest.mark.parametrize(
    "count,bonus",
    [(0, 0), (1, 0), (2, 10), (3, 15), (4, 25), (5, 25), (100, 25)],
)
def test_platform_bonus(count, bonus):
    assert estimate_score(ScoreSignals(platform_count=count)) == BASE_SCORE + bonus


def test_platform_bonus_non_decreasing():
    scores = [estimate_score(ScoreSignals(platform_count=n)) for n in range(10)]
    assert scores == sorted(scores)


@pytest.mark.parametrize(
    "age,bonus",
    [(0, 12), (6, 12), (6.5, 8), (12, 8), (12.1, 0), (24, 0), (100, 0)],
)
def test_freshness_bonus(age, bonus):
    assert estimate_score(ScoreSignals(content_age=age)) == BASE_SCORE + bonus


def test_unknown_content_age_earns_nothing():
    assert estimate_score({}) == BASE_SCORE
    assert estimate_score(ScoreSignals(content_age=None)) == BASE_SCORE


@pytest.mark.parametrize("field", BOOLEAN_SIGNALS)
@pytest.mark.parametrize("count", [0, 3, 4])
@pytest.mark.parametrize("age", [None, 3, 9, 24])
def test_flipping_boolean_never_lowers_score(field, count, age):
    base = ScoreSignals(platform_count=count, content_age=age)
    flipped = base.model_copy(update={field: True})
    assert estimate_score(flipped) >= estimate_score(base)


def test_score_stays_in_bounds():
    extreme_high = {**ALL_ON, "platformCount": 100, "contentAge": 0}
    extreme_low = {**LOW, "platformCount": 0, "contentAge": 100}
    assert 0 <= estimate_score(extreme_low) <= 100
    assert 0 <= estimate_score(extreme_high) <= 100
    assert isinstance(estimate_score(extreme_high), int)


def test_negative_inputs_rejected():
    with pytest.raises(ValidationError):
        estimate_score({"platformCount": -1})
    with pytest.raises(ValidationError):
        ScoreSignals(content_age=-3)


def test_signals_are_immutable():
    signals = ScoreSignals(platform_count=2)
    with pytest.raises(ValidationError):
        signals.platform_count = 5


# --- Rating bands ---


@pytest.mark.parametrize(
    "score,rating",
    [
        (0, Rating.MINIMAL),
        (19, Rating.MINIMAL),
        (20, Rating.LOW),
        (39, Rating.LOW),
        (40, Rating.MODERATE),
        (59, Rating.MODERATE),
        (60, Rating.GOOD),
        (79, Rating.GOOD),
        (80, Rating.EXCELLENT),
        (100, Rating.EXCELLENT),
        (-5, Rating.MINIMAL),
        (150, Rating.EXCELLENT),
    ],
)
def test_rating_for_score(score, rating):
    assert rating_for_score(score) is rating


# --- Quick wins ---


def test_quick_wins_shape():
    wins = get_quick_wins()
    assert len(wins) == 5
    for win in wins:
        assert isinstance(win, QuickWin)
        assert win.action and win.impact and win.effort and win.details


def test_quick_wins_identical_across_calls():
    first = get_quick_wins()
    first.clear()
    assert get_quick_wins() == list(QUICK_WINS)
    assert get_quick_wins()[0].action == "Create Wikidata entry"
    assert get_quick_wins()[-1].action == "Add citations to content"


def test_quick_win_records_are_frozen():
    with pytest.raises(ValidationError):
        QUICK_WINS[0].action = "changed"
