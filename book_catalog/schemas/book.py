"""Pydantic schemas for book records."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Gender(str, Enum):
    """Literary genre of a book."""

    NONE = "NONE"
    FICTION = "FICTION"
    MISTERY = "MISTERY"
    FANTASY = "FANTASY"
    ROMANCE = "ROMANCE"


class Author(BaseModel):
    """Author view derived from a book's denormalized author fields."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    nationality: Optional[str] = None


class BookBase(BaseModel):
    title: str
    description: Optional[str] = None
    isbn: Optional[str] = None
    publisher: str
    gender: Gender
    publish_year: Optional[int] = None
    author_name: str
    author_nationality: Optional[str] = None


class BookCreate(BookBase):
    pass


class Book(BookBase):
    """A stored catalog entry. Records are immutable; updates replace them."""

    model_config = ConfigDict(frozen=True)

    id: str

    @property
    def author(self) -> Author:
        return Author(name=self.author_name, nationality=self.author_nationality)


# Fields a caller may change through an update, and the subset that can never be cleared
UPDATABLE_FIELDS = frozenset(BookCreate.model_fields)
REQUIRED_FIELDS = frozenset(
    name for name, field in BookCreate.model_fields.items() if field.is_required()
)
