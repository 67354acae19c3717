from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from apps.okai.db import get_okai_session
from apps.okai.producers import ResultProducers, get_result_producers
from apps.okai.schemas.chat import (
    ChatSessionCreate, ChatSessionUpdate, ChatSessionResponse,
    MessageCreate, MessageResponse, AiMessageRequest
)
from apps.okai.services import SessionService, MessageService

router = APIRouter(prefix="/chat")


async def get_session_service(db: AsyncSession = Depends(get_okai_session)) -> SessionService:
    """Dependency to get chat session service"""
    return SessionService(db)


async def get_message_service(
    db: AsyncSession = Depends(get_okai_session),
    producers: ResultProducers = Depends(get_result_producers)
) -> MessageService:
    """Dependency to get chat message service"""
    return MessageService(db, producers.chat_responder)


@router.post("/sessions", response_model=ChatSessionResponse, status_code=status.HTTP_201_CREATED)
async def create_chat_session(
    session_data: ChatSessionCreate,
    session_service: SessionService = Depends(get_session_service)
):
    """
    Create a new chat session

    - **id**: Optional client-chosen id, generated when omitted (409 if taken)
    - **title**: Optional title
    - **gen_z_mode** / **copy_code_only_mode** / **target_language**: response modes
    """
    return await session_service.create_session(session_data)


@router.get("/sessions", response_model=List[ChatSessionResponse])
async def get_chat_sessions(session_service: SessionService = Depends(get_session_service)):
    """List all chat sessions, most recently active first"""
    return await session_service.list_sessions()


@router.patch("/sessions/{session_id}", response_model=ChatSessionResponse)
async def update_chat_session(
    session_id: str,
    session_data: ChatSessionUpdate,
    session_service: SessionService = Depends(get_session_service)
):
    """Update session settings; only the fields sent are changed"""
    return await session_service.update_session(session_id, session_data)


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_chat_session(
    session_id: str,
    session_service: SessionService = Depends(get_session_service)
):
    """Delete a chat session together with its messages"""
    await session_service.delete_session(session_id)


@router.delete("/sessions", status_code=status.HTTP_204_NO_CONTENT)
async def clear_chat_history(session_service: SessionService = Depends(get_session_service)):
    """Delete every chat session and message"""
    await session_service.clear_history()


@router.post("/messages", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_chat_message(
    message_data: MessageCreate,
    message_service: MessageService = Depends(get_message_service)
):
    """Append a message to an existing chat session"""
    return await message_service.append_message(message_data)


@router.get("/sessions/{session_id}/messages", response_model=List[MessageResponse])
async def get_chat_messages(
    session_id: str,
    limit: Optional[int] = Query(None, ge=0),
    offset: int = Query(0, ge=0),
    message_service: MessageService = Depends(get_message_service)
):
    """
    Get messages for a chat session, oldest first

    - **limit**: Maximum number of messages (0 returns none, omitted returns all)
    - **offset**: Number of messages to skip
    """
    return await message_service.list_messages(session_id, limit=limit, offset=offset)


@router.post("/ai-messages", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def send_ai_message(
    request: AiMessageRequest,
    message_service: MessageService = Depends(get_message_service)
):
    """Send a user message and return the assistant's reply"""
    return await message_service.send_ai_message(request)
