"""
GraphQL schema for the book catalog.

Queries and mutations are thin: they pull the ``BookService`` from the
request context, call it, and convert records to ``BookType``. Application
errors become ``GraphQLError`` with the error code in ``extensions``.
"""
from typing import List, Optional

import strawberry
from graphql import GraphQLError
from strawberry.types import Info

from book_catalog.api.context import CatalogContext
from book_catalog.api.types import BookType, GenderEnum, to_book_type
from book_catalog.core.exceptions import AppException
from book_catalog.schemas import BookCreate
from book_catalog.services.books import BookService


def _service(info: Info) -> BookService:
    context: CatalogContext = info.context
    return context.service


def as_graphql_error(exc: AppException) -> GraphQLError:
    extensions = {"code": exc.error_code, **exc.details}
    return GraphQLError(exc.message, extensions=extensions, original_error=exc)


@strawberry.type
class Query:
    @strawberry.field
    def get_books_count(self, info: Info) -> int:
        return _service(info).count_books()

    @strawberry.field
    def get_all_books(self, info: Info) -> Optional[List[Optional[BookType]]]:
        return [BookType.from_record(book) for book in _service(info).list_books()]

    @strawberry.field
    def get_book(self, info: Info, id: Optional[str] = None) -> Optional[BookType]:
        if id is None:
            return None
        return to_book_type(_service(info).get_book(id))

    @strawberry.field
    def get_all_books_by_author(
        self, info: Info, author_name: Optional[str] = None
    ) -> Optional[List[Optional[BookType]]]:
        if author_name is None:
            return []
        books = _service(info).list_books_by_author(author_name)
        return [BookType.from_record(book) for book in books]


@strawberry.type
class Mutation:
    @strawberry.mutation
    def add_book(
        self,
        info: Info,
        title: str,
        publisher: str,
        gender: GenderEnum,
        author_name: str,
        description: Optional[str] = None,
        isbn: Optional[str] = None,
        publish_year: Optional[int] = None,
        author_nationality: Optional[str] = None,
    ) -> Optional[BookType]:
        data = BookCreate(
            title=title,
            description=description,
            isbn=isbn,
            publisher=publisher,
            gender=gender,
            publish_year=publish_year,
            author_name=author_name,
            author_nationality=author_nationality,
        )
        try:
            book = _service(info).create_book(data)
        except AppException as exc:
            raise as_graphql_error(exc) from exc
        return BookType.from_record(book)

    @strawberry.mutation
    def update_book(
        self,
        info: Info,
        id: str,
        title: Optional[str] = strawberry.UNSET,
        description: Optional[str] = strawberry.UNSET,
        isbn: Optional[str] = strawberry.UNSET,
        publisher: Optional[str] = strawberry.UNSET,
        gender: Optional[GenderEnum] = strawberry.UNSET,
        publish_year: Optional[int] = strawberry.UNSET,
        author_name: Optional[str] = strawberry.UNSET,
        author_nationality: Optional[str] = strawberry.UNSET,
    ) -> Optional[BookType]:
        supplied = {
            "title": title,
            "description": description,
            "isbn": isbn,
            "publisher": publisher,
            "gender": gender,
            "publish_year": publish_year,
            "author_name": author_name,
            "author_nationality": author_nationality,
        }
        # Omitted arguments stay UNSET; only the rest reach the store
        changes = {name: value for name, value in supplied.items() if value is not strawberry.UNSET}
        return to_book_type(_service(info).update_book(id, changes))

    @strawberry.mutation
    def delete_book(self, info: Info, id: str) -> Optional[BookType]:
        return to_book_type(_service(info).delete_book(id))


schema = strawberry.Schema(query=Query, mutation=Mutation)
