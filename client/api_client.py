"""
HTTP client for the OKAIgpt API, one method per operation
"""
from datetime import datetime
from typing import Any, Dict, List, Optional
import logging

import requests
from pydantic import TypeAdapter

from apps.okai.exceptions import error_from_code
from apps.okai.models import ContentType, MessageRole, VideoStatus
from apps.okai.schemas.chat import ChatSessionResponse, MessageResponse
from apps.okai.schemas.video import VideoResponse
from apps.okai.schemas.results import (
    DocumentAnalysisResponse, ImageResponse, QuizResponse,
    WebSearchResponse, RecentActivity
)
from client.config import get_client_settings

logger = logging.getLogger(__name__)

_sessions_adapter = TypeAdapter(List[ChatSessionResponse])
_messages_adapter = TypeAdapter(List[MessageResponse])
_activities_adapter = TypeAdapter(List[RecentActivity])

# Sentinel for "leave this field alone" in partial updates
UNSET: Any = object()


def _partial(**fields) -> Dict[str, Any]:
    return {name: value for name, value in fields.items() if value is not UNSET}


class OkaiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http: Optional[requests.Session] = None
    ):
        settings = get_client_settings()
        self.base_url = (base_url or settings.BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.TIMEOUT_SECONDS
        self.http = http or requests.Session()

    def close(self) -> None:
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        response = self.http.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)

        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = {}
            code = body.get("error", "") if isinstance(body, dict) else ""
            detail = body.get("detail") if isinstance(body, dict) else None
            message = detail if isinstance(detail, str) else f"{method} {path} failed with {response.status_code}"
            logger.warning(f"{method} {path} -> {response.status_code}: {message}")
            if not code:
                response.raise_for_status()
            raise error_from_code(code, message)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # Chat sessions

    def create_chat_session(
        self,
        id: Optional[str] = None,
        title: Optional[str] = None,
        gen_z_mode: Optional[bool] = None,
        copy_code_only_mode: Optional[bool] = None,
        target_language: Optional[str] = None
    ) -> ChatSessionResponse:
        payload = {
            "id": id,
            "title": title,
            "gen_z_mode": gen_z_mode,
            "copy_code_only_mode": copy_code_only_mode,
            "target_language": target_language,
        }
        data = self._request("POST", "/chat/sessions", json=payload)
        return ChatSessionResponse.model_validate(data)

    def get_chat_sessions(self) -> List[ChatSessionResponse]:
        return _sessions_adapter.validate_python(self._request("GET", "/chat/sessions"))

    def update_chat_session(
        self,
        session_id: str,
        title: Optional[str] = UNSET,
        gen_z_mode: Optional[bool] = UNSET,
        copy_code_only_mode: Optional[bool] = UNSET,
        target_language: Optional[str] = UNSET
    ) -> ChatSessionResponse:
        payload = _partial(
            title=title,
            gen_z_mode=gen_z_mode,
            copy_code_only_mode=copy_code_only_mode,
            target_language=target_language
        )
        data = self._request("PATCH", f"/chat/sessions/{session_id}", json=payload)
        return ChatSessionResponse.model_validate(data)

    def delete_chat_session(self, session_id: str) -> None:
        self._request("DELETE", f"/chat/sessions/{session_id}")

    def clear_chat_history(self) -> None:
        self._request("DELETE", "/chat/sessions")

    # Chat messages

    def create_chat_message(
        self,
        session_id: str,
        role: MessageRole,
        content: str,
        content_type: ContentType = ContentType.TEXT,
        metadata: Optional[Dict[str, Any]] = None
    ) -> MessageResponse:
        payload = {
            "session_id": session_id,
            "role": MessageRole(role).value,
            "content": content,
            "content_type": ContentType(content_type).value,
            "metadata": metadata,
        }
        return MessageResponse.model_validate(self._request("POST", "/chat/messages", json=payload))

    def get_chat_messages(
        self,
        session_id: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None
    ) -> List[MessageResponse]:
        params = {}
        if limit is not None:
            params["limit"] = limit
        if offset is not None:
            params["offset"] = offset
        data = self._request("GET", f"/chat/sessions/{session_id}/messages", params=params)
        return _messages_adapter.validate_python(data)

    def send_ai_message(
        self,
        session_id: str,
        message_content: str,
        gen_z_mode: Optional[bool] = None,
        copy_code_only_mode: Optional[bool] = None,
        target_language: Optional[str] = None,
        image_file_base64: Optional[str] = None,
        pdf_file_content: Optional[str] = None
    ) -> MessageResponse:
        payload = {
            "session_id": session_id,
            "message_content": message_content,
            "gen_z_mode": gen_z_mode,
            "copy_code_only_mode": copy_code_only_mode,
            "target_language": target_language,
            "image_file_base64": image_file_base64,
            "pdf_file_content": pdf_file_content,
        }
        return MessageResponse.model_validate(self._request("POST", "/chat/ai-messages", json=payload))

    # Tools

    def analyze_document(self, image_url: str, prompt: str) -> DocumentAnalysisResponse:
        data = self._request("POST", "/documents/analyze", json={"image_url": image_url, "prompt": prompt})
        return DocumentAnalysisResponse.model_validate(data)

    def generate_image(self, prompt: str) -> ImageResponse:
        return ImageResponse.model_validate(self._request("POST", "/images", json={"prompt": prompt}))

    def generate_quiz(self, source_text: str) -> QuizResponse:
        return QuizResponse.model_validate(self._request("POST", "/quizzes", json={"source_text": source_text}))

    def search_web(self, query: str) -> WebSearchResponse:
        return WebSearchResponse.model_validate(self._request("POST", "/search", json={"query": query}))

    def get_recent_activities(self, limit: Optional[int] = None) -> List[RecentActivity]:
        params = {"limit": limit} if limit is not None else {}
        return _activities_adapter.validate_python(self._request("GET", "/activities", params=params))

    # Videos

    def generate_video(self, prompt: str, initial_image_url: Optional[str] = None) -> VideoResponse:
        payload = {"prompt": prompt, "initial_image_url": initial_image_url}
        return VideoResponse.model_validate(self._request("POST", "/videos", json=payload))

    def get_video_status(self, video_id: int) -> VideoResponse:
        return VideoResponse.model_validate(self._request("GET", f"/videos/{video_id}"))

    def update_video_status(
        self,
        video_id: int,
        status: Optional[VideoStatus] = UNSET,
        video_url: Optional[str] = UNSET,
        progress_message: Optional[str] = UNSET,
        completed_at: Optional[datetime] = UNSET
    ) -> VideoResponse:
        payload = _partial(
            status=status if status is UNSET or status is None else VideoStatus(status).value,
            video_url=video_url,
            progress_message=progress_message,
            completed_at=completed_at.isoformat() if isinstance(completed_at, datetime) else completed_at
        )
        return VideoResponse.model_validate(self._request("PATCH", f"/videos/{video_id}", json=payload))

    def healthcheck(self) -> Dict[str, Any]:
        return self._request("GET", "/health")
