from fastapi import Request

from book_catalog.config import Settings
from book_catalog.core.utils import IDGenerator
from book_catalog.fixtures import SEED_BOOKS
from book_catalog.services.books import BookService
from book_catalog.storage import BookCatalogStore


def build_store(settings: Settings) -> BookCatalogStore:
    """
    Create the catalog store owned by one application instance.
    """
    seed = SEED_BOOKS if settings.seed_fixtures else ()
    return BookCatalogStore(IDGenerator(), books=seed)


def get_book_service(request: Request) -> BookService:
    """
    Dependency provider for BookService.
    """
    return request.app.state.book_service
