"""Value models: documents, their authors, and search requests"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


def as_utc(value: datetime | None) -> datetime | None:
    """Treat a naive timestamp as UTC; aware timestamps pass through unchanged."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class _Model(BaseModel):
    """Accepts snake_case names in code and camelCase keys from external data."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, validate_assignment=True)


class Author(_Model):
    id:   Optional[str] = None
    name: Optional[str] = None


class Document(_Model):
    """A stored record. id is assigned by the repository when left blank.

    created is always timezone-aware; a naive value is read as UTC.
    """
    id:      Optional[str] = None
    title:   Optional[str] = None
    content: Optional[str] = None
    author:  Optional[Author] = None
    created: Optional[datetime] = None

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)


class SearchRequest(_Model):
    """Search criteria; None on any field means no constraint on that dimension.

    An empty list is a present constraint with zero alternatives and matches nothing.
    Naive bounds are read as UTC, like Document.created.
    """
    title_prefixes:    Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None   # exact equality with the full content
    author_ids:        Optional[list[str]] = None
    created_from:      Optional[datetime] = None    # exclusive
    created_to:        Optional[datetime] = None    # exclusive

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_as_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)
