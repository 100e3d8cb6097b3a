"""Message catalog resolving error reasons to localized strings."""

from app.core.config import settings
from app.errors import ErrorReason

DEFAULT_LOCALE = "en"

CATALOG: dict[str, dict[ErrorReason, str]] = {
    "en": {
        ErrorReason.TECHNICAL: "A technical error has occurred, please try again later",
        ErrorReason.BOOK_NOT_FOUND_ID: "Book not found with id: {0}",
        ErrorReason.BOOK_NOT_FOUND_TITLE: "Book not found with title: {0}",
        ErrorReason.BOOK_NOT_FOUND_ISBN: "Book not found with ISBN: {0}",
        ErrorReason.AUTHOR_NOT_FOUND_ID: "Author not found with id: {0}",
        ErrorReason.INVALID_API_KEY: "Invalid or missing API key",
    },
    "fr": {
        ErrorReason.TECHNICAL: "Une erreur technique est survenue, veuillez réessayer plus tard",
        ErrorReason.BOOK_NOT_FOUND_ID: "Livre introuvable avec l'id : {0}",
        ErrorReason.BOOK_NOT_FOUND_TITLE: "Livre introuvable avec le titre : {0}",
        ErrorReason.BOOK_NOT_FOUND_ISBN: "Livre introuvable avec l'ISBN : {0}",
        ErrorReason.AUTHOR_NOT_FOUND_ID: "Auteur introuvable avec l'id : {0}",
        ErrorReason.INVALID_API_KEY: "Clé API invalide ou absente",
    },
}


def get_message(reason: ErrorReason, *params, locale: str | None = None) -> str:
    """
    Render the message template bound to a reason code.

    Unknown locales fall back to English.
    """
    templates = CATALOG.get(locale or settings.messages_locale, CATALOG[DEFAULT_LOCALE])
    return templates[reason].format(*params)
