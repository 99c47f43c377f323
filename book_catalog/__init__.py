"""GraphQL API over an in-memory book catalog."""

__version__ = "1.0.0"
