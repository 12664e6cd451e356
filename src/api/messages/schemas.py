"""Messages API schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, Field

from src.api.core.messages import APIResponse


class MessageModel(BaseModel):
    id: UUID
    organization_id: UUID
    title: str
    content: str
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class MessageCreateRequest(BaseModel):
    # Presence and length are checked by the service so that every field
    # problem is reported together
    title: str | None = None
    content: str | None = None


class MessageUpdateRequest(MessageCreateRequest):
    is_active: bool = Field(validation_alias=AliasChoices("is_active", "isActive"))


MessageResponse = APIResponse[MessageModel]
MessageListResponse = APIResponse[list[MessageModel]]
