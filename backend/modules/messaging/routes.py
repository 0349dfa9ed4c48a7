"""
Conversations API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.middleware.auth import get_current_user
from api.dependencies import get_messaging_service
from shared.models import AuthenticatedUser

from .interfaces import IMessagingService
from .models import (
    ConversationDetail,
    ConversationSummary,
    CreateConversationRequest,
    MessageView,
    SendMessageRequest,
)

router = APIRouter()


@router.post("", response_model=ConversationSummary, status_code=201)
async def create_conversation(
    request: CreateConversationRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessagingService = Depends(get_messaging_service),
) -> ConversationSummary:
    """
    Start a conversation with another user.

    If the two users already have a conversation it is returned as-is
    and the initial message is not added.
    """
    conversation = await service.create_conversation(user.id, request)
    if not conversation:
        raise HTTPException(status_code=400, detail="Unable to create conversation")
    return conversation


@router.get("", response_model=list[ConversationSummary])
async def list_conversations(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessagingService = Depends(get_messaging_service),
) -> list[ConversationSummary]:
    """List the current user's conversations, most recent first."""
    return await service.list_conversations(user.id)


@router.get("/{conversation_id}", response_model=ConversationDetail)
async def get_conversation(
    conversation_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessagingService = Depends(get_messaging_service),
) -> ConversationDetail:
    """Get a conversation with its messages."""
    conversation = await service.get_conversation(conversation_id, user.id)
    if not conversation:
        raise HTTPException(status_code=404, detail="Conversation not found")
    return conversation


@router.post("/{conversation_id}/messages", response_model=MessageView, status_code=201)
async def send_message(
    conversation_id: str,
    request: SendMessageRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessagingService = Depends(get_messaging_service),
) -> MessageView:
    """Send a message in a conversation."""
    message = await service.send_message(conversation_id, user.id, request)
    if not message:
        raise HTTPException(status_code=404, detail="Conversation not found")
    return message
