from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import List, Optional
from uuid import uuid4
import logging

from apps.okai.models import ChatSession, ChatMessage
from apps.okai.schemas.chat import ChatSessionCreate, ChatSessionUpdate
from apps.okai.services.base import StoreService
from apps.okai.exceptions import DuplicateKey, NotFound
from common.utils.clock import bump_timestamp, utcnow

logger = logging.getLogger(__name__)


class SessionService(StoreService):
    """Chat session store"""

    async def get_session(self, session_id: str) -> Optional[ChatSession]:
        result = await self._execute(
            select(ChatSession).where(ChatSession.id == session_id),
            "load chat session"
        )
        return result.scalar_one_or_none()

    async def create_session(self, session_data: ChatSessionCreate) -> ChatSession:
        """Create a chat session, generating an id when none is supplied"""
        session_id = session_data.id or str(uuid4())

        if await self.get_session(session_id):
            raise DuplicateKey(f"Chat session with id {session_id} already exists")

        now = utcnow()
        session = ChatSession(
            id=session_id,
            title=session_data.title,
            gen_z_mode=bool(session_data.gen_z_mode),
            copy_code_only_mode=bool(session_data.copy_code_only_mode),
            target_language=session_data.target_language,
            created_at=now,
            updated_at=now
        )
        self.db.add(session)
        try:
            await self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent create of the same id
            await self.db.rollback()
            raise DuplicateKey(f"Chat session with id {session_id} already exists") from e
        except SQLAlchemyError as e:
            await self._fail("create chat session", e)
        await self._refresh(session, "load chat session")

        logger.info(f"Created chat session {session.id}")
        return session

    async def list_sessions(self) -> List[ChatSession]:
        """All sessions, most recently active first"""
        result = await self._execute(
            select(ChatSession).order_by(ChatSession.updated_at.desc()),
            "list chat sessions"
        )
        return list(result.scalars().all())

    async def update_session(self, session_id: str, session_data: ChatSessionUpdate) -> ChatSession:
        session = await self.get_session(session_id)
        if not session:
            raise NotFound(f"Chat session with id {session_id} not found")

        update_data = session_data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if field in ("gen_z_mode", "copy_code_only_mode") and value is None:
                continue  # non-nullable flags keep their value
            setattr(session, field, value)
        session.updated_at = bump_timestamp(session.updated_at)

        await self._commit("update chat session")
        await self._refresh(session, "load chat session")
        return session

    async def delete_session(self, session_id: str) -> None:
        """Delete a session and its messages; unknown ids are ignored"""
        await self._execute(
            delete(ChatMessage).where(ChatMessage.session_id == session_id),
            "delete chat messages"
        )
        result = await self._execute(
            delete(ChatSession).where(ChatSession.id == session_id),
            "delete chat session"
        )
        await self._commit("delete chat session")

        if result.rowcount:
            logger.info(f"Deleted chat session {session_id}")

    async def clear_history(self) -> None:
        """Delete every message and then every session"""
        await self._execute(delete(ChatMessage), "clear chat messages")
        await self._execute(delete(ChatSession), "clear chat sessions")
        await self._commit("clear chat history")

        logger.info("Cleared all chat history")
