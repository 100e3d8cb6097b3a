"""Custom domain exceptions for the application."""

from enum import Enum


class ErrorReason(str, Enum):
    """Closed set of error reasons, each bound to a message template."""

    TECHNICAL = "error.ws.technical"
    BOOK_NOT_FOUND_ID = "error.book.not_found_id"
    BOOK_NOT_FOUND_TITLE = "error.book.not_found_title"
    BOOK_NOT_FOUND_ISBN = "error.book.not_found_isbn"
    AUTHOR_NOT_FOUND_ID = "error.author.not_found_id"
    INVALID_API_KEY = "error.invalid.api_key"


# Problem type tags used in the error wire shape.
URI_FUNCTIONAL_EXCEPTION = "/problem/functional-exception"
URI_TECHNICAL_EXCEPTION = "/problem/technical-exception"

_NOT_FOUND_REASONS = {
    ("author", "id"): ErrorReason.AUTHOR_NOT_FOUND_ID,
    ("book", "id"): ErrorReason.BOOK_NOT_FOUND_ID,
    ("book", "title"): ErrorReason.BOOK_NOT_FOUND_TITLE,
    ("book", "isbn"): ErrorReason.BOOK_NOT_FOUND_ISBN,
}


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class FunctionalError(DomainError):
    """Client-correctable failure, carried as a reason code plus message parameters."""

    def __init__(self, reason: ErrorReason, *params):
        super().__init__(reason.value, *params)
        self.reason = reason
        self.params = params


class NotFoundError(FunctionalError):
    """Raised when a requested resource does not exist."""

    def __init__(self, entity: str, key, by: str = "id"):
        try:
            reason = _NOT_FOUND_REASONS[(entity, by)]
        except KeyError:
            raise ValueError(f"No not-found reason for {entity} by {by}") from None
        super().__init__(reason, key)
        self.entity = entity
        self.key = key
        self.by = by


class TechnicalError(Exception):
    """Unexpected internal or infrastructure failure."""

    pass
