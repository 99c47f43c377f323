"""
In-memory book catalog.

``BookCatalogStore`` keeps books in insertion order in a plain list. Every
operation runs under one re-entrant lock so concurrent requests can't
interleave a title check with an append, or lose an update.
"""
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from typing import Any, Iterable, List, Mapping, Optional

from book_catalog.core.utils import IDGenerator
from book_catalog.schemas import Book, BookCreate, REQUIRED_FIELDS, UPDATABLE_FIELDS


class Outcome(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    DUPLICATE_TITLE = "duplicate_title"


@dataclass(frozen=True)
class BookResult:
    """
    Result of a single-book operation. ``book`` is set only when ``outcome``
    is ``OK``.
    """
    outcome: Outcome
    book: Optional[Book] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK

    @classmethod
    def found(cls, book: Book) -> "BookResult":
        return cls(Outcome.OK, book)

    @classmethod
    def not_found(cls) -> "BookResult":
        return cls(Outcome.NOT_FOUND)

    @classmethod
    def duplicate_title(cls) -> "BookResult":
        return cls(Outcome.DUPLICATE_TITLE)


class BookCatalogStore:
    """
    List-based in-memory store for books.
    """
    def __init__(self, id_gen: Optional[IDGenerator] = None, books: Iterable[Book] = ()):
        self._storage: List[Book] = []
        self._id_gen = id_gen or IDGenerator()
        self._lock = RLock()
        for book in books:
            self._seed(book)

    def _seed(self, book: Book) -> None:
        if self._id_gen.is_issued(book.id):
            raise ValueError(f'Seed id {book.id!r} is already issued')
        if self._has_title(book.title):
            raise ValueError(f'Duplicate seed title {book.title!r}')
        self._id_gen.reserve(book.id)
        self._storage.append(book)

    def _index_of(self, id: str) -> Optional[int]:
        for idx, item in enumerate(self._storage):
            if item.id == id:
                return idx
        return None

    def _has_title(self, title: str) -> bool:
        return any(item.title == title for item in self._storage)

    def count(self) -> int:
        with self._lock:
            return len(self._storage)

    def list(self) -> List[Book]:
        with self._lock:
            return list(self._storage)

    def get(self, id: str) -> BookResult:
        with self._lock:
            idx = self._index_of(id)
            if idx is None:
                return BookResult.not_found()
            return BookResult.found(self._storage[idx])

    def list_by_author(self, author_name: str) -> List[Book]:
        with self._lock:
            return [item for item in self._storage if item.author_name == author_name]

    def create(self, data: BookCreate) -> BookResult:
        with self._lock:
            if self._has_title(data.title):
                return BookResult.duplicate_title()
            book = Book(id=self._id_gen.next_id(), **data.model_dump())
            self._storage.append(book)
            return BookResult.found(book)

    def update(self, id: str, changes: Mapping[str, Any]) -> BookResult:
        """
        Apply ``changes`` to the book with ``id``. Only keys present in
        ``changes`` are touched; ``None`` clears an optional field and is
        ignored for a required one.
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f'Unknown book fields: {", ".join(sorted(unknown))}')
        applied = {
            name: value
            for name, value in changes.items()
            if value is not None or name not in REQUIRED_FIELDS
        }
        with self._lock:
            idx = self._index_of(id)
            if idx is None:
                return BookResult.not_found()
            current = self._storage[idx]
            updated = Book.model_validate({**current.model_dump(), **applied})
            self._storage[idx] = updated
            return BookResult.found(updated)

    def delete(self, id: str) -> BookResult:
        with self._lock:
            idx = self._index_of(id)
            if idx is None:
                return BookResult.not_found()
            return BookResult.found(self._storage.pop(idx))
