"""Test factories for Messages API models."""

from .base import AsyncSQLAlchemyModelFactory
from .messages import MessageFactory

__all__ = [
    "AsyncSQLAlchemyModelFactory",
    "MessageFactory",
]
