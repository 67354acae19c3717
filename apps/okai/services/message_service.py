from sqlalchemy import select
from typing import List, Optional
import logging

from apps.okai.models import ChatSession, ChatMessage, MessageRole, ContentType
from apps.okai.schemas.chat import MessageCreate, AiMessageRequest
from apps.okai.services.base import StoreService
from apps.okai.exceptions import SessionNotFound
from apps.okai.producers import ChatPrompt, ChatResponder
from common.utils.clock import bump_timestamp, utcnow

logger = logging.getLogger(__name__)


def build_system_prompt(gen_z_mode: bool, copy_code_only_mode: bool, target_language: Optional[str]) -> str:
    system_prompt = ""
    if gen_z_mode:
        system_prompt += "Respond in a casual, Gen Z style with slang and emojis. "
    if copy_code_only_mode:
        system_prompt += "Only respond with code, no explanations. "
    if target_language and target_language.lower() != "english":
        system_prompt += f"Respond in {target_language}. "
    return system_prompt


class MessageService(StoreService):
    """Chat message store; messages are immutable once written"""

    def __init__(self, db, chat_responder: Optional[ChatResponder] = None):
        super().__init__(db)
        self.chat_responder = chat_responder

    async def _require_session(self, session_id: str) -> ChatSession:
        result = await self._execute(
            select(ChatSession).where(ChatSession.id == session_id),
            "load chat session"
        )
        session = result.scalar_one_or_none()
        if not session:
            raise SessionNotFound(f"Chat session with id {session_id} does not exist")
        return session

    def _stage_message(
        self,
        session: ChatSession,
        role: MessageRole,
        content: str,
        content_type: ContentType = ContentType.TEXT,
        metadata: Optional[dict] = None
    ) -> ChatMessage:
        """Add a message and touch its session inside the current transaction"""
        message = ChatMessage(
            session_id=session.id,
            role=role,
            content=content,
            content_type=content_type,
            message_metadata=metadata,
            created_at=utcnow()
        )
        self.db.add(message)
        session.updated_at = bump_timestamp(session.updated_at)
        return message

    async def append_message(self, message_data: MessageCreate) -> ChatMessage:
        """Insert one message and bump the owning session in a single commit"""
        session = await self._require_session(message_data.session_id)

        message = self._stage_message(
            session,
            message_data.role,
            message_data.content,
            message_data.content_type,
            message_data.metadata
        )
        await self._commit("create chat message")
        await self._refresh(message, "load chat message")
        return message

    async def list_messages(
        self,
        session_id: str,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[ChatMessage]:
        """Messages in conversational order; unknown sessions yield an empty list"""
        if limit == 0:
            return []

        query = (
            select(ChatMessage)
            .where(ChatMessage.session_id == session_id)
            .order_by(ChatMessage.created_at.asc(), ChatMessage.id.asc())
            .offset(offset)
        )
        if limit is not None:
            query = query.limit(limit)

        result = await self._execute(query, "list chat messages")
        return list(result.scalars().all())

    async def send_ai_message(self, request: AiMessageRequest) -> ChatMessage:
        """
        Store the user turn, ask the responder, store its reply.

        Modes omitted from the request fall back to the session's stored settings.
        """
        if self.chat_responder is None:
            raise RuntimeError("MessageService needs a chat responder to send AI messages")

        session = await self._require_session(request.session_id)

        gen_z_mode = session.gen_z_mode if request.gen_z_mode is None else request.gen_z_mode
        copy_code_only_mode = (
            session.copy_code_only_mode if request.copy_code_only_mode is None else request.copy_code_only_mode
        )
        target_language = request.target_language or session.target_language or "english"

        user_content = request.message_content
        content_type = ContentType.TEXT
        metadata = None
        if request.image_file_base64:
            content_type = ContentType.IMAGE
            metadata = {"hasImage": True}
        elif request.pdf_file_content:
            content_type = ContentType.PDF
            metadata = {"hasPdf": True}
            user_content = f"PDF Content: {request.pdf_file_content}\n\nUser Question: {request.message_content}"

        self._stage_message(session, MessageRole.USER, user_content, content_type, metadata)

        try:
            reply = await self.chat_responder.reply(ChatPrompt(
                content=request.message_content,
                system_prompt=build_system_prompt(gen_z_mode, copy_code_only_mode, target_language),
                gen_z_mode=gen_z_mode,
                copy_code_only_mode=copy_code_only_mode,
                target_language=target_language,
                image_file_base64=request.image_file_base64,
                pdf_file_content=request.pdf_file_content
            ))
        except Exception:
            # Nothing from this turn is kept when the responder fails
            await self.db.rollback()
            raise

        assistant_message = self._stage_message(session, MessageRole.ASSISTANT, reply)
        await self._commit("send AI message")
        await self._refresh(assistant_message, "load assistant message")

        logger.info(f"Assistant replied in chat session {session.id}")
        return assistant_message
