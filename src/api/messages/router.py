"""Organization-scoped message endpoints."""

from typing import NoReturn
from uuid import UUID

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from src.api.core.dependencies import MessageServiceDep
from src.api.core.exceptions.base import AppException
from src.api.core.messages import APIResponse, MessageCode
from src.api.messages.schemas import (
    MessageCreateRequest,
    MessageListResponse,
    MessageModel,
    MessageResponse,
    MessageUpdateRequest,
)
from src.modules.messages.results import (
    Conflict,
    Created,
    Deleted,
    MessageResult,
    NotFound,
    Updated,
    ValidationError,
)

router = APIRouter(
    prefix="/organizations/{organization_id}/messages", tags=["messages"]
)


def raise_for_failure(result: MessageResult) -> NoReturn:
    """Turn a failed service result into the matching API error."""
    match result:
        case NotFound(reason=reason):
            raise AppException(
                MessageCode.MESSAGE_NOT_FOUND,
                status.HTTP_404_NOT_FOUND,
                message=reason,
            )
        case Conflict(reason=reason):
            raise AppException(
                MessageCode.MESSAGE_TITLE_CONFLICT,
                status.HTTP_409_CONFLICT,
                message=reason,
            )
        case ValidationError(errors=errors):
            raise AppException(
                MessageCode.VALIDATION_ERROR,
                status.HTTP_400_BAD_REQUEST,
                details=errors,
            )
        case _:
            raise AppException(MessageCode.INTERNAL_ERROR)


@router.get("/", response_model=MessageListResponse)
async def list_messages(
    organization_id: UUID,
    service: MessageServiceDep,
) -> MessageListResponse:
    """List all messages of an organization."""
    messages = await service.get_all_messages(organization_id)
    return APIResponse.success(
        data=[MessageModel.model_validate(message) for message in messages]
    )


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(
    organization_id: UUID,
    message_id: UUID,
    service: MessageServiceDep,
) -> MessageResponse:
    """Get a single message."""
    message = await service.get_message(organization_id, message_id)
    if message is None:
        raise AppException(MessageCode.MESSAGE_NOT_FOUND, status.HTTP_404_NOT_FOUND)
    return APIResponse.success(data=MessageModel.model_validate(message))


@router.post(
    "/", response_model=MessageResponse, status_code=status.HTTP_201_CREATED
)
async def create_message(
    organization_id: UUID,
    message_data: MessageCreateRequest,
    request: Request,
    service: MessageServiceDep,
):
    """Create a message; titles are unique per organization."""
    result = await service.create_message(
        organization_id, message_data.title, message_data.content
    )
    match result:
        case Created(message=message):
            data = MessageModel.model_validate(message)
        case _:
            raise_for_failure(result)

    location = request.url_for(
        "get_message", organization_id=organization_id, message_id=data.id
    )
    body = APIResponse.success(message_code=MessageCode.MESSAGE_CREATED, data=data)
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=body.model_dump(mode="json"),
        headers={"Location": str(location)},
    )


@router.put("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_message(
    organization_id: UUID,
    message_id: UUID,
    message_data: MessageUpdateRequest,
    service: MessageServiceDep,
) -> Response:
    """Update an active message."""
    result = await service.update_message(
        organization_id,
        message_id,
        message_data.title,
        message_data.content,
        message_data.is_active,
    )
    if not isinstance(result, Updated):
        raise_for_failure(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_message(
    organization_id: UUID,
    message_id: UUID,
    service: MessageServiceDep,
) -> Response:
    """Delete an active message."""
    result = await service.delete_message(organization_id, message_id)
    if not isinstance(result, Deleted):
        raise_for_failure(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
