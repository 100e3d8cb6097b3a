"""Partial updates where only non-null incoming fields overwrite stored ones."""

from typing import Any

AUTHOR_FIELDS = ("name", "age", "followers_number")
BOOK_FIELDS = ("title", "author_id", "publication_date", "type")


def merge(existing, patch, fields) -> dict[str, Any]:
    """
    Return the merged values of ``fields``: ``patch.field`` unless it is None, else ``existing.field``.

    ``existing`` and ``patch`` are any objects exposing the fields as attributes.
    Identity is never part of ``fields``, so an incoming id never overwrites the stored one.
    """
    merged = {}
    for field in fields:
        value = getattr(patch, field, None)
        merged[field] = value if value is not None else getattr(existing, field)
    return merged


def merge_author(existing, patch) -> dict[str, Any]:
    return merge(existing, patch, AUTHOR_FIELDS)


def merge_book(existing, patch) -> dict[str, Any]:
    return merge(existing, patch, BOOK_FIELDS)
