"""Message service: validation, title uniqueness and repository orchestration."""

from datetime import datetime, timezone
from uuid import UUID

from src.database.models import CONTENT_MAX_LENGTH, TITLE_MAX_LENGTH, Message
from src.modules.messages.exceptions import DuplicateMessageTitleError
from src.modules.messages.repository import MessageRepository
from src.modules.messages.results import (
    Conflict,
    Created,
    Deleted,
    MessageResult,
    NotFound,
    Updated,
    ValidationError,
)
from src.utils.logger import get_logger

TITLE_MIN_LENGTH = 3
CONTENT_MIN_LENGTH = 10

MESSAGE_NOT_FOUND = "Message not found."
MESSAGE_NOT_FOUND_DURING_UPDATE = "Message not found during update."
MESSAGE_NOT_DELETED = "Message not found or could not be deleted."
CANNOT_UPDATE_INACTIVE = "Cannot update an inactive message."
CANNOT_DELETE_INACTIVE = "Cannot delete an inactive message."


def _duplicate_title(title: str | None) -> Conflict:
    return Conflict(f"A message with title '{title}' already exists.")


def _validate_length(
    errors: dict[str, list[str]],
    field: str,
    value: str | None,
    min_length: int,
    max_length: int,
) -> None:
    if value is None or not value.strip():
        errors.setdefault(field, []).append(f"{field} is required.")
    elif not min_length <= len(value.strip()) <= max_length:
        errors.setdefault(field, []).append(
            f"{field} must be between {min_length} and {max_length} characters."
        )


def validate_message_fields(
    title: str | None, content: str | None
) -> dict[str, list[str]]:
    """Check title and content independently and collect every failure."""
    errors: dict[str, list[str]] = {}
    _validate_length(errors, "Title", title, TITLE_MIN_LENGTH, TITLE_MAX_LENGTH)
    _validate_length(
        errors, "Content", content, CONTENT_MIN_LENGTH, CONTENT_MAX_LENGTH
    )
    return errors


class MessageService:
    """Create, update, delete and read messages scoped to an organization.

    Predictable failures come back as ``MessageResult`` variants. Anything the
    repository raises other than ``DuplicateMessageTitleError`` propagates.
    """

    def __init__(self, repository: MessageRepository):
        self.repository = repository
        self.logger = get_logger(self.__class__.__name__)

    async def create_message(
        self, organization_id: UUID, title: str | None, content: str | None
    ) -> MessageResult:
        errors = validate_message_fields(title, content)
        if errors:
            return ValidationError(errors)

        trimmed_title = title.strip()
        existing = await self.repository.get_by_title(organization_id, trimmed_title)
        if existing is not None:
            self.logger.info(
                "Rejected duplicate message title",
                organization_id=str(organization_id),
                title=trimmed_title,
            )
            return _duplicate_title(title)

        message = Message(
            organization_id=organization_id,
            title=trimmed_title,
            content=content.strip(),
            is_active=True,
            created_at=datetime.now(timezone.utc),
        )
        try:
            created = await self.repository.create(message)
        except DuplicateMessageTitleError:
            return _duplicate_title(title)

        self.logger.info(
            "Message created",
            organization_id=str(organization_id),
            message_id=str(created.id),
        )
        return Created(created)

    async def update_message(
        self,
        organization_id: UUID,
        message_id: UUID,
        title: str | None,
        content: str | None,
        is_active: bool,
    ) -> MessageResult:
        message = await self.repository.get_by_id(organization_id, message_id)
        if message is None:
            return NotFound(MESSAGE_NOT_FOUND)

        if not message.is_active:
            return ValidationError({"IsActive": [CANNOT_UPDATE_INACTIVE]})

        errors = validate_message_fields(title, content)
        if errors:
            return ValidationError(errors)

        trimmed_title = title.strip()
        if message.title.lower() != trimmed_title.lower():
            by_title = await self.repository.get_by_title(
                organization_id, trimmed_title
            )
            if by_title is not None and by_title.id != message_id:
                self.logger.info(
                    "Rejected duplicate message title",
                    organization_id=str(organization_id),
                    message_id=str(message_id),
                    title=trimmed_title,
                )
                return _duplicate_title(title)

        # The stored entity is left untouched until the repository confirms
        changes = Message(
            id=message.id,
            organization_id=message.organization_id,
            title=trimmed_title,
            content=content.strip(),
            is_active=is_active,
            created_at=message.created_at,
            updated_at=datetime.now(timezone.utc),
        )
        try:
            updated = await self.repository.update(changes)
        except DuplicateMessageTitleError:
            return _duplicate_title(title)
        if updated is None:
            return NotFound(MESSAGE_NOT_FOUND_DURING_UPDATE)

        self.logger.info(
            "Message updated",
            organization_id=str(organization_id),
            message_id=str(message_id),
            is_active=is_active,
        )
        return Updated()

    async def delete_message(
        self, organization_id: UUID, message_id: UUID
    ) -> MessageResult:
        message = await self.repository.get_by_id(organization_id, message_id)
        if message is None:
            return NotFound(MESSAGE_NOT_FOUND)

        if not message.is_active:
            return ValidationError({"IsActive": [CANNOT_DELETE_INACTIVE]})

        deleted = await self.repository.delete(organization_id, message_id)
        if not deleted:
            return NotFound(MESSAGE_NOT_DELETED)

        self.logger.info(
            "Message deleted",
            organization_id=str(organization_id),
            message_id=str(message_id),
        )
        return Deleted()

    async def get_message(
        self, organization_id: UUID, message_id: UUID
    ) -> Message | None:
        return await self.repository.get_by_id(organization_id, message_id)

    async def get_all_messages(self, organization_id: UUID) -> list[Message]:
        return await self.repository.get_all_by_organization(organization_id)
