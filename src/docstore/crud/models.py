"""Document, author, and search request models"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Iterable

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator


def _as_utc(value: datetime) -> datetime:
    """Naive timestamps are taken as UTC; aware ones are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


Timestamp = Annotated[datetime, AfterValidator(_as_utc)]


class Author(BaseModel):
    """A document author, identified by id"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Document(BaseModel):
    """A stored document. id stays None until the repo assigns one."""
    model_config = ConfigDict(frozen=True)

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: Timestamp | None = None


class SearchRequest(BaseModel):
    """Filter over stored documents.

    Every field is optional. None means the clause is inactive; an empty
    collection is an active clause that nothing can satisfy.
    """
    model_config = ConfigDict(frozen=True)

    title_prefixes: frozenset[str] | None = Field(default=None, description="Title starts with any of these")
    contains_contents: frozenset[str] | None = Field(default=None, description="Content contains any of these")
    author_ids: frozenset[str] | None = Field(default=None, description="Author id is one of these")
    created_from: Timestamp | None = Field(default=None, description="Inclusive lower bound on created")
    created_to: Timestamp | None = Field(default=None, description="Inclusive upper bound on created")

    @field_validator("title_prefixes", "contains_contents", "author_ids", mode="before")
    @classmethod
    def _to_frozenset(cls, value: Iterable[str] | None) -> frozenset[str] | None:
        if value is None or isinstance(value, str):
            return value
        return frozenset(value)
