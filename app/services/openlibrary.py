"""Client for the Open Library books registry, queried by ISBN."""

import logging
from typing import Any

import httpx

from app.core.config import settings
from app.errors import TechnicalError

logger = logging.getLogger(__name__)


def fetch_by_isbn(isbn: str) -> dict[str, Any] | None:
    """
    Query the registry for an ISBN and return its JSON payload.

    Returns None when the registry answers with a JSON null. Transport
    failures and non-2xx statuses raise httpx errors to the caller.

    Raises:
        httpx.HTTPError: If the request fails or returns an error status
        TechnicalError: If the registry answers with something other than a JSON object
    """
    params = {"bibkeys": f"ISBN:{isbn}", "format": "json"}
    logger.info("Querying Open Library for ISBN %s", isbn)

    with httpx.Client(timeout=settings.openlibrary_timeout_seconds) as client:
        response = client.get(settings.openlibrary_api_url, params=params)
        response.raise_for_status()
        payload = response.json()

    if payload is not None and not isinstance(payload, dict):
        raise TechnicalError(
            f"Unexpected Open Library payload type: {type(payload).__name__}"
        )
    return payload
