from __future__ import annotations

from datetime import date

PUBLICATION_WEIGHT = 0.6
AUTHOR_WEIGHT = 0.4

# (strictly greater than, score), checked in order
FOLLOWER_BRACKETS: tuple[tuple[int, float], ...] = (
    (1000, 10.0),
    (500, 8.0),
    (100, 6.0),
    (50, 4.0),
)
DEFAULT_AUTHOR_SCORE = 2.0


def whole_years_between(start: date, end: date) -> int:
    """Whole calendar years from start to end, negative when end precedes start."""
    if end < start:
        return -whole_years_between(end, start)
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


def publication_date_score(publication_date: date, today: date | None = None) -> float:
    """
    Score a book by how recently it was published.

    - Up to 5 years: 10 down to 7
    - 6 to 15 years: 6.7 down to 4
    - Older: loses 0.1 per year, never below 1

    Future dates give negative years and therefore scores above 10.
    """
    years = whole_years_between(publication_date, today or date.today())

    if years <= 5:
        return 10 - years * 0.6
    if years <= 15:
        return 7 - (years - 5) * 0.3
    return max(1.0, 4 - (years - 15) * 0.1)


def author_score(followers_number: int) -> float:
    """Score an author by audience reach. A count equal to a threshold falls in the lower bracket."""
    for threshold, score in FOLLOWER_BRACKETS:
        if followers_number > threshold:
            return score
    return DEFAULT_AUTHOR_SCORE


def calculate_rating(book, author, today: date | None = None) -> float:
    """Blend recency and author popularity into a book rating."""
    return (
        publication_date_score(book.publication_date, today) * PUBLICATION_WEIGHT
        + author_score(author.followers_number) * AUTHOR_WEIGHT
    )
