from typing import Optional
from datetime import datetime
from pydantic import BaseModel, field_validator

from apps.okai.models.generated_video import VideoStatus
from common.utils.clock import to_naive_utc


class VideoCreate(BaseModel):
    prompt: str
    initial_image_url: Optional[str] = None


class VideoUpdate(BaseModel):
    """Partial status update, normally sent by the generation process"""
    video_url: Optional[str] = None
    status: Optional[VideoStatus] = None
    progress_message: Optional[str] = None
    completed_at: Optional[datetime] = None

    @field_validator("completed_at")
    @classmethod
    def store_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # Columns hold naive UTC
        return to_naive_utc(value)


class VideoResponse(BaseModel):
    id: int
    prompt: str
    initial_image_url: Optional[str] = None
    video_url: Optional[str] = None
    status: VideoStatus
    progress_message: Optional[str] = None
    created_at: datetime
    completed_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }
