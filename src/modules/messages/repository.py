"""Message persistence.

``MessageRepository`` is the contract the message service depends on.
``SQLAlchemyMessageRepository`` implements it on top of an ``AsyncSession``.
Every lookup is scoped by organization; title lookups are case-insensitive.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError

from src.core.base import BaseRepository
from src.database.models import Message
from src.modules.messages.exceptions import DuplicateMessageTitleError


class MessageRepository(ABC):
    @abstractmethod
    async def get_by_id(
        self, organization_id: UUID, message_id: UUID
    ) -> Message | None: ...

    @abstractmethod
    async def get_by_title(
        self, organization_id: UUID, title: str
    ) -> Message | None: ...

    @abstractmethod
    async def get_all_by_organization(self, organization_id: UUID) -> list[Message]: ...

    @abstractmethod
    async def create(self, message: Message) -> Message:
        """Persist a new message and return it with its id assigned."""

    @abstractmethod
    async def update(self, message: Message) -> Message | None:
        """Overwrite the stored row for ``message``; ``None`` if it is gone."""

    @abstractmethod
    async def delete(self, organization_id: UUID, message_id: UUID) -> bool: ...


class SQLAlchemyMessageRepository(BaseRepository, MessageRepository):
    async def get_by_id(
        self, organization_id: UUID, message_id: UUID
    ) -> Message | None:
        stmt = select(Message).where(
            Message.id == message_id, Message.organization_id == organization_id
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_title(self, organization_id: UUID, title: str) -> Message | None:
        stmt = select(Message).where(
            Message.organization_id == organization_id,
            func.lower(Message.title) == func.lower(title),
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_all_by_organization(self, organization_id: UUID) -> list[Message]:
        stmt = (
            select(Message)
            .where(Message.organization_id == organization_id)
            .order_by(Message.created_at.asc(), Message.id.asc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create(self, message: Message) -> Message:
        # Read before commit; a rollback leaves the instance unusable
        organization_id, title = message.organization_id, message.title
        self.db.add(message)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            self.logger.warning(
                "Duplicate title rejected by storage",
                organization_id=str(organization_id),
                error=str(e.orig),
            )
            raise DuplicateMessageTitleError(organization_id, title)
        await self.db.refresh(message)
        return message

    async def update(self, message: Message) -> Message | None:
        stmt = (
            update(Message)
            .where(
                Message.id == message.id,
                Message.organization_id == message.organization_id,
            )
            .values(
                title=message.title,
                content=message.content,
                is_active=message.is_active,
                updated_at=message.updated_at,
            )
            .returning(Message)
        )
        try:
            result = await self.db.execute(stmt)
            updated = result.scalar_one_or_none()
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            self.logger.warning(
                "Duplicate title rejected by storage",
                organization_id=str(message.organization_id),
                message_id=str(message.id),
                error=str(e.orig),
            )
            raise DuplicateMessageTitleError(message.organization_id, message.title)
        return updated

    async def delete(self, organization_id: UUID, message_id: UUID) -> bool:
        stmt = delete(Message).where(
            Message.id == message_id, Message.organization_id == organization_id
        )
        result = await self.db.execute(stmt)
        await self.db.commit()
        return result.rowcount > 0
