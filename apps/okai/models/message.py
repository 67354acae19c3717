from sqlmodel import SQLModel, Field
from sqlalchemy import Column, Text, Integer, DateTime, ForeignKey, JSON, Enum as SAEnum
import sqlalchemy.dialects.postgresql as pg
from datetime import datetime
from typing import Optional, Dict, Any
from enum import Enum

from common.utils.clock import utcnow

class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"

class ContentType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    PDF = "pdf"

def enum_values(enum_cls):
    return [member.value for member in enum_cls]

class ChatMessage(SQLModel, table=True):
    __tablename__ = "chat_messages"

    id: Optional[int] = Field(default=None, sa_column=Column(Integer, primary_key=True, autoincrement=True))
    session_id: str = Field(
        sa_column=Column(Text, ForeignKey("chat_sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    )
    role: MessageRole = Field(
        sa_column=Column(SAEnum(MessageRole, name="message_role", values_callable=enum_values), nullable=False)
    )
    content: str = Field(sa_column=Column(Text, nullable=False))
    content_type: ContentType = Field(
        default=ContentType.TEXT,
        sa_column=Column(
            SAEnum(ContentType, name="content_type", values_callable=enum_values),
            nullable=False,
            default=ContentType.TEXT,
        )
    )
    # "metadata" is reserved on declarative classes, so the attribute is renamed
    message_metadata: Optional[Dict[str, Any]] = Field(
        default=None,
        sa_column=Column("metadata", JSON().with_variant(pg.JSONB(), "postgresql"), nullable=True)
    )
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime, nullable=False))

    def __repr__(self):
        return f"<ChatMessage {self.id} ({self.role}) in {self.session_id}>"
