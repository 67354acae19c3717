from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from apps.okai.config import get_okai_settings
from apps.okai.db import get_okai_session
from apps.okai.producers import ResultProducers, get_result_producers
from apps.okai.schemas.results import (
    DocumentAnalysisCreate, DocumentAnalysisResponse,
    ImageCreate, ImageResponse,
    QuizCreate, QuizResponse,
    WebSearchCreate, WebSearchResponse,
    RecentActivity
)
from apps.okai.services import ResultService, ActivityService

router = APIRouter()


async def get_result_service(
    db: AsyncSession = Depends(get_okai_session),
    producers: ResultProducers = Depends(get_result_producers)
) -> ResultService:
    """Dependency to get result service"""
    return ResultService(db, producers)


async def get_activity_service(db: AsyncSession = Depends(get_okai_session)) -> ActivityService:
    """Dependency to get activity service"""
    return ActivityService(db)


@router.post("/documents/analyze", response_model=DocumentAnalysisResponse, status_code=status.HTTP_201_CREATED)
async def analyze_document(
    request: DocumentAnalysisCreate,
    result_service: ResultService = Depends(get_result_service)
):
    """Analyze a scanned document image with the given prompt"""
    return await result_service.analyze_document(request)


@router.post("/images", response_model=ImageResponse, status_code=status.HTTP_201_CREATED)
async def generate_image(
    request: ImageCreate,
    result_service: ResultService = Depends(get_result_service)
):
    """Generate an image from a text prompt"""
    return await result_service.generate_image(request)


@router.post("/quizzes", response_model=QuizResponse, status_code=status.HTTP_201_CREATED)
async def generate_quiz(
    request: QuizCreate,
    result_service: ResultService = Depends(get_result_service)
):
    """Generate a multiple-choice quiz from source text"""
    return await result_service.generate_quiz(request)


@router.post("/search", response_model=WebSearchResponse, status_code=status.HTTP_201_CREATED)
async def search_web(
    request: WebSearchCreate,
    result_service: ResultService = Depends(get_result_service)
):
    """Search the web and summarize the findings"""
    return await result_service.search_web(request)


@router.get("/activities", response_model=List[RecentActivity])
async def get_recent_activities(
    limit: Optional[int] = Query(None, ge=1),
    activity_service: ActivityService = Depends(get_activity_service)
):
    """Most recent tool results across documents, images, videos, quizzes and searches"""
    if limit is None:
        limit = get_okai_settings().RECENT_ACTIVITIES_DEFAULT_LIMIT
    return await activity_service.list_recent(limit)
