"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from book_catalog import __version__
from book_catalog.api import create_graphql_router
from book_catalog.config import Settings, get_settings
from book_catalog.core.logging import get_logger, setup_logging
from book_catalog.dependencies import build_store
from book_catalog.services.books import BookService
from book_catalog.storage import BookCatalogStore

logger = get_logger("main")


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[BookCatalogStore] = None,
) -> FastAPI:
    """Build an application that owns its own catalog store."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    if store is None:
        store = build_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup and shutdown."""
        logger.info(f"Catalog loaded with {store.count()} book(s)")
        logger.info(f"Server ready at: {settings.public_url}")
        yield
        logger.info("Server shutting down")

    app = FastAPI(
        title=settings.app_name,
        description="GraphQL API over an in-memory book catalog",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.book_service = BookService(store)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Resolver errors, expected or not, come back in the GraphQL "errors" list
    app.include_router(create_graphql_router(settings), prefix=settings.graphql_path)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.app_name}

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": __version__,
            "graphql": settings.graphql_path,
        }

    return app


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "book_catalog.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
