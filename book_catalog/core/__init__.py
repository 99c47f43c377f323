"""Core utilities: logging, exceptions and id generation."""
