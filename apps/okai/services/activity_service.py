from sqlalchemy import select
from typing import List

from apps.okai.models import DocumentAnalysis, GeneratedImage, GeneratedVideo, Quiz, WebSearch
from apps.okai.schemas.results import (
    DocumentAnalysisActivity, DocumentAnalysisResponse,
    GeneratedImageActivity, ImageResponse,
    GeneratedVideoActivity,
    QuizActivity, QuizResponse,
    WebSearchActivity, WebSearchResponse,
    RecentActivity
)
from apps.okai.schemas.video import VideoResponse
from apps.okai.services.base import StoreService

# (table model, response schema, feed entry), in tie-break order
ACTIVITY_SOURCES = [
    (DocumentAnalysis, DocumentAnalysisResponse, DocumentAnalysisActivity),
    (GeneratedImage, ImageResponse, GeneratedImageActivity),
    (GeneratedVideo, VideoResponse, GeneratedVideoActivity),
    (Quiz, QuizResponse, QuizActivity),
    (WebSearch, WebSearchResponse, WebSearchActivity),
]


class ActivityService(StoreService):
    """Newest-first feed across the tool result tables"""

    async def list_recent(self, limit: int = 10) -> List[RecentActivity]:
        """
        Merge the newest ``limit`` rows of every result table by created_at.

        Each table is read on its own and merged in memory; equal timestamps
        keep the order of ACTIVITY_SOURCES.
        """
        activities = []
        for model, response_schema, activity_schema in ACTIVITY_SOURCES:
            result = await self._execute(
                select(model).order_by(model.created_at.desc()).limit(limit),
                f"list recent {model.__tablename__}"
            )
            activities.extend(
                activity_schema(data=response_schema.model_validate(row))
                for row in result.scalars().all()
            )

        activities.sort(key=lambda activity: activity.data.created_at, reverse=True)
        return activities[:limit]
