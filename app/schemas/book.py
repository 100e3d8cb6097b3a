from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Book(BaseModel):
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    title: str
    author_id: int
    author_name: str | None = None
    publication_date: date
    type: str | None = None


class BookCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=255)
    author_id: int
    publication_date: date
    type: str | None = Field(None, max_length=100)


class BookUpdate(BaseModel):
    """Partial book update. The author reference is always required and re-checked."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = Field(None, min_length=1, max_length=255)
    author_id: int
    publication_date: date | None = None
    type: str | None = Field(None, max_length=100)
