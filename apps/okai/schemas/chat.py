from pydantic import BaseModel, Field, AliasChoices
from datetime import datetime
from typing import Optional, Dict, Any

from apps.okai.models.message import MessageRole, ContentType


class ChatSessionCreate(BaseModel):
    id: Optional[str] = None
    title: Optional[str] = None
    gen_z_mode: Optional[bool] = None
    copy_code_only_mode: Optional[bool] = None
    target_language: Optional[str] = None


class ChatSessionUpdate(BaseModel):
    """Only the fields present in the request body are applied"""
    title: Optional[str] = None
    gen_z_mode: Optional[bool] = None
    copy_code_only_mode: Optional[bool] = None
    target_language: Optional[str] = None


class ChatSessionResponse(BaseModel):
    id: str
    title: Optional[str] = None
    gen_z_mode: bool
    copy_code_only_mode: bool
    target_language: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True
    }


class MessageCreate(BaseModel):
    session_id: str
    role: MessageRole
    content: str
    content_type: ContentType = ContentType.TEXT
    metadata: Optional[Dict[str, Any]] = None


class MessageResponse(BaseModel):
    id: int
    session_id: str
    role: MessageRole
    content: str
    content_type: ContentType
    metadata: Optional[Dict[str, Any]] = Field(
        default=None,
        validation_alias=AliasChoices("message_metadata", "metadata")
    )
    created_at: datetime

    model_config = {
        "from_attributes": True
    }


class AiMessageRequest(BaseModel):
    """User turn for the assistant; omitted modes fall back to the session settings"""
    session_id: str
    message_content: str
    gen_z_mode: Optional[bool] = None
    copy_code_only_mode: Optional[bool] = None
    target_language: Optional[str] = None
    image_file_base64: Optional[str] = None
    pdf_file_content: Optional[str] = None
