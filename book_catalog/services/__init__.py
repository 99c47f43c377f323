from .books import BookService

__all__ = ["BookService"]
