from datetime import date
from types import SimpleNamespace

import pytest

from app.domain.rating import (
    author_score,
    calculate_rating,
    publication_date_score,
    whole_years_between,
)

TODAY = date(2024, 6, 15)


def _book(publication_date: date):
    return SimpleNamespace(publication_date=publication_date)


def _author(followers_number: int):
    return SimpleNamespace(followers_number=followers_number)


# ============================================================================
# ELAPSED YEARS
# ============================================================================


@pytest.mark.parametrize(
    "start, expected",
    [
        (date(2024, 6, 15), 0),
        (date(2023, 6, 16), 0),
        (date(2023, 6, 15), 1),
        (date(2014, 6, 15), 10),
        (date(2014, 6, 16), 9),
        (date(2025, 12, 1), -1),
        (date(2026, 6, 15), -2),
    ],
)
def test_whole_years_between(start, expected):
    assert whole_years_between(start, TODAY) == expected


# ============================================================================
# PUBLICATION DATE SCORE
# ============================================================================


@pytest.mark.parametrize(
    "years_ago, expected",
    [
        (0, 10.0),
        (5, 7.0),
        (6, 6.7),
        (15, 4.0),
        (16, 3.9),
        (30, 2.5),
        (45, 1.0),
        (100, 1.0),
    ],
)
def test_publication_date_score(years_ago, expected):
    published = date(TODAY.year - years_ago, TODAY.month, TODAY.day)
    assert publication_date_score(published, TODAY) == pytest.approx(expected)


def test_publication_date_score_future_exceeds_ten():
    """Future books have negative elapsed years and are not clamped."""
    published = date(TODAY.year + 2, TODAY.month, TODAY.day)
    assert publication_date_score(published, TODAY) == pytest.approx(11.2)


# ============================================================================
# AUTHOR SCORE
# ============================================================================


@pytest.mark.parametrize(
    "followers, expected",
    [
        (1500, 10.0),
        (1001, 10.0),
        (1000, 8.0),
        (501, 8.0),
        (500, 6.0),
        (101, 6.0),
        (100, 4.0),
        (51, 4.0),
        (50, 2.0),
        (0, 2.0),
    ],
)
def test_author_score_thresholds_are_strict(followers, expected):
    assert author_score(followers) == expected


# ============================================================================
# BLENDED RATING
# ============================================================================


def test_rating_new_book_popular_author():
    rating = calculate_rating(_book(TODAY), _author(1500), today=TODAY)
    assert rating == pytest.approx(10.0)


def test_rating_ten_year_old_book_small_audience():
    rating = calculate_rating(_book(date(2014, 6, 15)), _author(75), today=TODAY)
    assert rating == pytest.approx(4.9)


def test_rating_thirty_year_old_book_tiny_audience():
    rating = calculate_rating(_book(date(1994, 6, 15)), _author(10), today=TODAY)
    assert rating == pytest.approx(2.3)


def test_rating_defaults_to_today():
    rating = calculate_rating(_book(date.today()), _author(1500))
    assert rating == pytest.approx(10.0)
