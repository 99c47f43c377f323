"""
GraphQL API package.

``create_graphql_router`` builds the Strawberry router mounted by the
FastAPI application.
"""
from strawberry.fastapi import GraphQLRouter

from book_catalog.api.context import CatalogContext, get_context
from book_catalog.api.schema import schema
from book_catalog.config import Settings


def create_graphql_router(settings: Settings) -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphiql else None,
    )


__all__ = ["CatalogContext", "create_graphql_router", "schema"]
