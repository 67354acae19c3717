from sqlmodel import SQLModel, Field
from sqlalchemy import Column, Text, Boolean, DateTime
from datetime import datetime
from typing import Optional

from common.utils.clock import utcnow

class ChatSession(SQLModel, table=True):
    __tablename__ = "chat_sessions"

    # Opaque id, chosen by the client or generated on create
    id: str = Field(sa_column=Column(Text, primary_key=True, nullable=False))
    title: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    # Response generation modes
    gen_z_mode: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))
    copy_code_only_mode: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))
    target_language: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime, nullable=False))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime, nullable=False))

    def __repr__(self):
        return f"<ChatSession {self.id} ({self.title})>"
