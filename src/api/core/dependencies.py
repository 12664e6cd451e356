from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.modules.messages.repository import (
    MessageRepository,
    SQLAlchemyMessageRepository,
)
from src.modules.messages.service import MessageService


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session from app state."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


async def get_message_repository(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> MessageRepository:
    """Get message repository bound to the request's database session."""
    return SQLAlchemyMessageRepository(db)


async def get_message_service(
    repository: Annotated[MessageRepository, Depends(get_message_repository)],
) -> MessageService:
    """Get message service with its repository."""
    return MessageService(repository)


AsyncSessionDep = Annotated[AsyncSession, Depends(get_db_session)]
MessageServiceDep = Annotated[MessageService, Depends(get_message_service)]
