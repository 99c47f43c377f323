"""GraphQL object types exposed by the catalog."""
from typing import Optional

import strawberry

from book_catalog.schemas import Author, Book, Gender

GenderEnum = strawberry.enum(Gender)


@strawberry.type(name="Author")
class AuthorType:
    name: Optional[str]
    nationality: Optional[str]

    @classmethod
    def from_model(cls, author: Author) -> "AuthorType":
        return cls(name=author.name, nationality=author.nationality)


@strawberry.type(name="Book")
class BookType:
    id: str
    title: str
    description: Optional[str]
    isbn: Optional[str]
    publisher: str
    gender: GenderEnum
    publish_year: Optional[int]
    author: AuthorType

    @classmethod
    def from_record(cls, book: Book) -> "BookType":
        return cls(
            id=book.id,
            title=book.title,
            description=book.description,
            isbn=book.isbn,
            publisher=book.publisher,
            gender=book.gender,
            publish_year=book.publish_year,
            author=AuthorType.from_model(book.author),
        )


def to_book_type(book: Optional[Book]) -> Optional[BookType]:
    return BookType.from_record(book) if book is not None else None
