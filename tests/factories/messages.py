"""Factory for Message models."""

from datetime import datetime, timezone

import factory
from src.database.models import Message
from .base import AsyncSQLAlchemyModelFactory, UUIDFactory


class MessageFactory(AsyncSQLAlchemyModelFactory[Message]):
    """Factory for creating Message instances."""

    class Meta:
        model = Message

    id = UUIDFactory()
    organization_id = UUIDFactory()
    title = factory.Sequence(lambda n: f"Message title {n}")
    content = factory.LazyAttribute(lambda o: f"Body of {o.title.lower()}.")
    is_active = True
    created_at = factory.LazyFunction(lambda: datetime.now(timezone.utc))
    updated_at = None
