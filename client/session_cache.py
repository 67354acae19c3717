"""
Client-side cache of chat sessions and the open session's messages.

The cache mirrors server state and is refreshed at fixed points only: when
the open session changes and after every mutation made through it. It never
guesses at server state in between.
"""
from typing import Any, Dict, List, Optional
import logging

from apps.okai.models import ContentType, MessageRole
from apps.okai.schemas.chat import ChatSessionResponse, MessageResponse
from client.api_client import OkaiClient

logger = logging.getLogger(__name__)


class SessionCache:
    def __init__(self, client: OkaiClient):
        self.client = client
        self.sessions: List[ChatSessionResponse] = []
        self.current_session_id: Optional[str] = None
        self.messages: List[MessageResponse] = []

    @property
    def current_session(self) -> Optional[ChatSessionResponse]:
        for session in self.sessions:
            if session.id == self.current_session_id:
                return session
        return None

    def refresh_sessions(self) -> List[ChatSessionResponse]:
        """Reload the session list; opens the most recent session if none is open"""
        self.sessions = self.client.get_chat_sessions()
        if self.current_session_id is None and self.sessions:
            self.select_session(self.sessions[0].id)
        return self.sessions

    def select_session(self, session_id: Optional[str]) -> List[MessageResponse]:
        """Switch the open session and reload its messages"""
        self.current_session_id = session_id
        self.messages = self.client.get_chat_messages(session_id) if session_id else []
        return self.messages

    def create_session(
        self,
        title: Optional[str] = "New Chat",
        gen_z_mode: bool = False,
        copy_code_only_mode: bool = False,
        target_language: Optional[str] = None,
        session_id: Optional[str] = None
    ) -> ChatSessionResponse:
        session = self.client.create_chat_session(
            id=session_id,
            title=title,
            gen_z_mode=gen_z_mode,
            copy_code_only_mode=copy_code_only_mode,
            target_language=target_language
        )
        self.select_session(session.id)
        self.refresh_sessions()
        return session

    def update_session(self, session_id: str, **fields) -> ChatSessionResponse:
        session = self.client.update_chat_session(session_id, **fields)
        self.refresh_sessions()
        return session

    def delete_session(self, session_id: str) -> None:
        self.client.delete_chat_session(session_id)
        if self.current_session_id == session_id:
            self.current_session_id = None
            self.messages = []
        # Opens the next most recent session when the open one was removed
        self.refresh_sessions()

    def clear_history(self) -> None:
        self.client.clear_chat_history()
        self.sessions = []
        self.current_session_id = None
        self.messages = []

    def _require_open_session(self) -> str:
        if self.current_session_id is None:
            raise RuntimeError("No chat session is open")
        return self.current_session_id

    def append_message(
        self,
        role: MessageRole,
        content: str,
        content_type: ContentType = ContentType.TEXT,
        metadata: Optional[Dict[str, Any]] = None
    ) -> MessageResponse:
        """Append to the open session; the session list is reloaded for its new ordering"""
        session_id = self._require_open_session()
        message = self.client.create_chat_message(session_id, role, content, content_type, metadata)
        self.messages.append(message)
        self.refresh_sessions()
        return message

    def send_message(self, content: str, **attachments) -> MessageResponse:
        """Send a user turn to the assistant and reload the conversation"""
        session_id = self._require_open_session()
        reply = self.client.send_ai_message(session_id, content, **attachments)
        self.select_session(session_id)
        self.refresh_sessions()
        return reply
