from fastapi import Depends
from strawberry.fastapi import BaseContext

from book_catalog.dependencies import get_book_service
from book_catalog.services.books import BookService


class CatalogContext(BaseContext):
    """Per-request GraphQL context carrying the application's book service."""

    def __init__(self, service: BookService):
        super().__init__()
        self.service = service


async def get_context(
    service: BookService = Depends(get_book_service),
) -> CatalogContext:
    return CatalogContext(service)
