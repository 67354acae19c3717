"""
Test cases for the video generation lifecycle store
"""
from datetime import datetime, timedelta, timezone

import pytest

from apps.okai.exceptions import NotFound
from apps.okai.models import VideoStatus
from apps.okai.producers.placeholder import PlaceholderVideoGenerator, VIDEO_QUEUED_MESSAGE
from apps.okai.schemas.video import VideoCreate, VideoUpdate
from apps.okai.services import VideoService


def video_service(db):
    return VideoService(db, PlaceholderVideoGenerator())


class TestVideoLifecycle:
    """Test cases for starting, reading and updating video generations"""

    def test_start_is_pending(self, run_in_db):
        async def scenario(db):
            return await video_service(db).start_generation(
                VideoCreate(prompt="a cat surfing", initial_image_url="https://img/cat.png")
            )

        video = run_in_db(scenario)
        assert video.id is not None
        assert video.status == VideoStatus.PENDING
        assert video.video_url is None
        assert video.completed_at is None
        assert video.initial_image_url == "https://img/cat.png"
        assert video.progress_message == VIDEO_QUEUED_MESSAGE

    def test_completed_update_is_read_back(self, run_in_db):
        async def scenario(db):
            service = video_service(db)
            video = await service.start_generation(VideoCreate(prompt="waves"))
            await service.update_status(video.id, VideoUpdate(status=VideoStatus.COMPLETED, video_url="x"))
            return await service.get_status(video.id)

        video = run_in_db(scenario)
        assert video.status == VideoStatus.COMPLETED
        assert video.video_url == "x"
        assert video.prompt == "waves"
        assert video.progress_message == VIDEO_QUEUED_MESSAGE

    def test_unsent_fields_are_kept(self, run_in_db):
        async def scenario(db):
            service = video_service(db)
            video = await service.start_generation(VideoCreate(prompt="waves"))
            await service.update_status(video.id, VideoUpdate(status=VideoStatus.PROCESSING, progress_message="50%"))
            await service.update_status(video.id, VideoUpdate(video_url="https://v/1.mp4"))
            return await service.get_status(video.id)

        video = run_in_db(scenario)
        assert video.status == VideoStatus.PROCESSING
        assert video.progress_message == "50%"
        assert video.video_url == "https://v/1.mp4"

    def test_null_status_is_ignored(self, run_in_db):
        async def scenario(db):
            service = video_service(db)
            video = await service.start_generation(VideoCreate(prompt="waves"))
            return await service.update_status(video.id, VideoUpdate(status=None, progress_message="still going"))

        video = run_in_db(scenario)
        assert video.status == VideoStatus.PENDING
        assert video.progress_message == "still going"

    def test_any_transition_is_accepted(self, run_in_db):
        """Transitions are not checked, even out of a terminal status"""
        completed_at = datetime(2024, 5, 1, 12, 30)

        async def scenario(db):
            service = video_service(db)
            video = await service.start_generation(VideoCreate(prompt="waves"))
            await service.update_status(
                video.id, VideoUpdate(status=VideoStatus.FAILED, completed_at=completed_at)
            )
            return await service.update_status(video.id, VideoUpdate(status=VideoStatus.PENDING))

        video = run_in_db(scenario)
        assert video.status == VideoStatus.PENDING
        assert video.completed_at == completed_at

    def test_missing_video(self, run_in_db):
        async def scenario(db):
            service = video_service(db)
            with pytest.raises(NotFound):
                await service.get_status(404)
            with pytest.raises(NotFound):
                await service.update_status(404, VideoUpdate(status=VideoStatus.COMPLETED))

        run_in_db(scenario)


class TestVideoStatus:
    def test_terminal_statuses(self):
        assert VideoStatus.COMPLETED.is_terminal
        assert VideoStatus.FAILED.is_terminal
        assert not VideoStatus.PENDING.is_terminal
        assert not VideoStatus.PROCESSING.is_terminal


class TestVideoUpdateSchema:
    def test_aware_completed_at_becomes_naive_utc(self):
        update = VideoUpdate(completed_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone(timedelta(hours=5))))
        assert update.completed_at == datetime(2024, 5, 1, 7, 0)
        assert update.completed_at.tzinfo is None

    def test_naive_completed_at_is_kept(self):
        assert VideoUpdate(completed_at=datetime(2024, 5, 1, 12, 0)).completed_at == datetime(2024, 5, 1, 12, 0)
        assert VideoUpdate(completed_at=None).completed_at is None
