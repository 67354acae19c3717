from sqlalchemy import select
import logging

from apps.okai.models import GeneratedVideo, VideoStatus
from apps.okai.schemas.video import VideoCreate, VideoUpdate
from apps.okai.services.base import StoreService
from apps.okai.exceptions import NotFound
from apps.okai.producers import VideoGenerator

logger = logging.getLogger(__name__)


class VideoService(StoreService):
    """
    Video generation lifecycle store.

    ``pending`` is the only initial status. Updates are applied as given:
    transitions and the video_url/status pairing are the caller's business.
    """

    def __init__(self, db, video_generator: VideoGenerator):
        super().__init__(db)
        self.video_generator = video_generator

    async def start_generation(self, video_data: VideoCreate) -> GeneratedVideo:
        progress_message = await self.video_generator.start(
            video_data.prompt, video_data.initial_image_url
        )

        video = GeneratedVideo(
            prompt=video_data.prompt,
            initial_image_url=video_data.initial_image_url,
            video_url=None,
            status=VideoStatus.PENDING,
            progress_message=progress_message,
            completed_at=None
        )
        self.db.add(video)
        await self._commit("start video generation")
        await self._refresh(video, "load video")

        logger.info(f"Queued video generation {video.id}")
        return video

    async def get_status(self, video_id: int) -> GeneratedVideo:
        result = await self._execute(
            select(GeneratedVideo).where(GeneratedVideo.id == video_id),
            "load video status"
        )
        video = result.scalar_one_or_none()
        if not video:
            raise NotFound(f"Video with id {video_id} not found")
        return video

    async def update_status(self, video_id: int, video_data: VideoUpdate) -> GeneratedVideo:
        video = await self.get_status(video_id)

        update_data = video_data.model_dump(exclude_unset=True)
        if update_data.get("status", video.status) is None:
            update_data.pop("status")  # status column is not nullable
        for field, value in update_data.items():
            setattr(video, field, value)

        await self._commit("update video status")
        await self._refresh(video, "load video")

        logger.info(f"Video {video.id} is now {video.status.value}")
        return video
