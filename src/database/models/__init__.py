"""Database models for the Messages API."""

from .base import Base
from .messages import CONTENT_MAX_LENGTH, TITLE_MAX_LENGTH, Message

__all__ = [
    "Base",
    "Message",
    "TITLE_MAX_LENGTH",
    "CONTENT_MAX_LENGTH",
]
