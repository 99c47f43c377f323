"""Application configuration and environment variables."""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Book Catalog"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Server
    host: str = "0.0.0.0"
    port: int = 4000

    # GraphQL
    graphql_path: str = "/graphql"
    graphiql: bool = True

    # Catalog
    seed_fixtures: bool = True  # Load the two sample books on startup

    model_config = {
        "env_prefix": "BOOK_CATALOG_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }

    @property
    def public_url(self) -> str:
        """URL printed on startup; wildcard hosts are shown as localhost."""
        host = "localhost" if self.host in ("0.0.0.0", "::") else self.host
        return f"http://{host}:{self.port}{self.graphql_path}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

