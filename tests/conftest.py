"""Shared fixtures."""
import pytest
from httpx import ASGITransport, AsyncClient

from book_catalog.api import CatalogContext
from book_catalog.config import Settings
from book_catalog.core.utils import IDGenerator
from book_catalog.fixtures import SEED_BOOKS
from book_catalog.main import create_app
from book_catalog.services import BookService
from book_catalog.storage import BookCatalogStore


@pytest.fixture
def store() -> BookCatalogStore:
    return BookCatalogStore(IDGenerator())


@pytest.fixture
def seeded_store() -> BookCatalogStore:
    return BookCatalogStore(IDGenerator(), books=SEED_BOOKS)


@pytest.fixture
def service(seeded_store) -> BookService:
    return BookService(seeded_store)


@pytest.fixture
def context(service) -> CatalogContext:
    return CatalogContext(service)


@pytest.fixture
def app():
    return create_app(Settings(seed_fixtures=True, graphiql=False))


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
