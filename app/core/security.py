import secrets

from app.core.config import settings


def verify_api_key(api_key: str | None) -> bool:
    """Check a request's api key against the configured shared secret."""
    if not api_key:
        return False
    return secrets.compare_digest(api_key.encode(), settings.api_key.encode())
