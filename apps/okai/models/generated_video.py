from sqlmodel import SQLModel, Field
from sqlalchemy import Column, Text, Integer, DateTime, Enum as SAEnum
from datetime import datetime
from typing import Optional
from enum import Enum

from common.utils.clock import utcnow
from apps.okai.models.message import enum_values


class VideoStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """No further progress is expected once a video completed or failed"""
        return self in (VideoStatus.COMPLETED, VideoStatus.FAILED)


class GeneratedVideo(SQLModel, table=True):
    __tablename__ = "generated_videos"

    id: Optional[int] = Field(default=None, sa_column=Column(Integer, primary_key=True, autoincrement=True))
    prompt: str = Field(sa_column=Column(Text, nullable=False))
    initial_image_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    video_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    # Any status may follow any other; the store does not check transitions
    status: VideoStatus = Field(
        default=VideoStatus.PENDING,
        sa_column=Column(
            SAEnum(VideoStatus, name="video_status", values_callable=enum_values),
            nullable=False,
            default=VideoStatus.PENDING,
        )
    )
    progress_message: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime, nullable=False))
    completed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))

    def __repr__(self):
        return f"<GeneratedVideo {self.id} (Status: {self.status})>"
