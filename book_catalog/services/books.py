from typing import Any, List, Mapping, Optional

from book_catalog.core.exceptions import DuplicateTitleError
from book_catalog.core.logging import get_logger
from book_catalog.schemas import Book, BookCreate
from book_catalog.storage import BookCatalogStore, Outcome

logger = get_logger("services.books")


class BookService:
    """
    Service for book business logic. Unknown ids come back as ``None``;
    a duplicate title on create raises ``DuplicateTitleError``.
    """
    def __init__(self, store: BookCatalogStore):
        self._store = store

    def count_books(self) -> int:
        return self._store.count()

    def list_books(self) -> List[Book]:
        return self._store.list()

    def get_book(self, book_id: str) -> Optional[Book]:
        return self._store.get(book_id).book

    def list_books_by_author(self, author_name: str) -> List[Book]:
        return self._store.list_by_author(author_name)

    def create_book(self, book: BookCreate) -> Book:
        """
        Add a new book, enforcing title uniqueness.
        """
        result = self._store.create(book)
        if result.outcome is Outcome.DUPLICATE_TITLE:
            logger.warning(f"Rejected book with duplicate title {book.title!r}")
            raise DuplicateTitleError(book.title)
        logger.info(f"Created book {result.book.id} ({result.book.title!r})")
        return result.book

    def update_book(self, book_id: str, changes: Mapping[str, Any]) -> Optional[Book]:
        """
        Change only the supplied fields of an existing book.
        """
        result = self._store.update(book_id, changes)
        if not result.ok:
            logger.info(f"Update skipped, no book with id {book_id}")
            return None
        logger.info(f"Updated book {book_id}: {', '.join(sorted(changes)) or 'no fields'}")
        return result.book

    def delete_book(self, book_id: str) -> Optional[Book]:
        result = self._store.delete(book_id)
        if not result.ok:
            logger.info(f"Delete skipped, no book with id {book_id}")
            return None
        logger.info(f"Deleted book {book_id} ({result.book.title!r})")
        return result.book
