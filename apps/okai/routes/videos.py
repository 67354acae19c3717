from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from apps.okai.db import get_okai_session
from apps.okai.producers import ResultProducers, get_result_producers
from apps.okai.schemas.video import VideoCreate, VideoUpdate, VideoResponse
from apps.okai.services import VideoService

router = APIRouter(prefix="/videos")


async def get_video_service(
    db: AsyncSession = Depends(get_okai_session),
    producers: ResultProducers = Depends(get_result_producers)
) -> VideoService:
    """Dependency to get video service"""
    return VideoService(db, producers.video_generator)


@router.post("", response_model=VideoResponse, status_code=status.HTTP_201_CREATED)
async def generate_video(
    video_data: VideoCreate,
    video_service: VideoService = Depends(get_video_service)
):
    """
    Start a video generation

    The record starts as `pending`; poll `GET /videos/{id}` until it is
    `completed` or `failed`.
    """
    return await video_service.start_generation(video_data)


@router.get("/{video_id}", response_model=VideoResponse)
async def get_video_status(
    video_id: int,
    video_service: VideoService = Depends(get_video_service)
):
    """Get the current status of a video generation"""
    return await video_service.get_status(video_id)


@router.patch("/{video_id}", response_model=VideoResponse)
async def update_video_status(
    video_id: int,
    video_data: VideoUpdate,
    video_service: VideoService = Depends(get_video_service)
):
    """Update status, progress message, video URL or completion time"""
    return await video_service.update_status(video_id, video_data)
