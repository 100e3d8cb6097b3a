from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = Field(alias="DATABASE_URL")

    # Shared secret expected in the "api-key" header
    api_key: str = Field(alias="API_KEY")

    # Open Library ISBN registry
    openlibrary_api_url: str = Field(
        default="https://openlibrary.org/api/books", alias="OPENLIBRARY_API_URL"
    )
    openlibrary_timeout_seconds: float | None = Field(
        default=None, alias="OPENLIBRARY_TIMEOUT_SECONDS"
    )

    # Locale used to render error messages
    messages_locale: str = Field(default="en", alias="MESSAGES_LOCALE")

    # Frontend URL allowed by CORS
    frontend_url: str | None = Field(default=None, alias="FRONTEND_URL")

    @field_validator("frontend_url", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: str | None) -> str | None:
        """Convert empty strings to None for optional string fields."""
        if v == "":
            return None
        return v

    @field_validator("openlibrary_timeout_seconds", mode="before")
    @classmethod
    def empty_str_to_none_float(cls, v: str | float | None) -> float | None:
        """Convert empty strings to None for the optional timeout."""
        if v == "":
            return None
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
