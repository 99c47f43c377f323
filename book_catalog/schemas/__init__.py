from .book import Author, Book, BookCreate, Gender, REQUIRED_FIELDS, UPDATABLE_FIELDS

__all__ = [
    "Author",
    "Book",
    "BookCreate",
    "Gender",
    "REQUIRED_FIELDS",
    "UPDATABLE_FIELDS",
]
