from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Author(BaseModel):
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    name: str
    age: int
    followers_number: int


class AuthorCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255)
    age: int = Field(default=0, ge=0)
    followers_number: int = Field(default=0, ge=0, description="Audience reach")


class AuthorUpdate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = Field(None, min_length=1, max_length=255)
    age: int | None = Field(None, ge=0)
    followers_number: int | None = Field(None, ge=0)
