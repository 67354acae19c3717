from typing import Annotated, List, Dict, Any, Literal, Union
from datetime import datetime
from pydantic import BaseModel, Field

from apps.okai.schemas.video import VideoResponse


class DocumentAnalysisCreate(BaseModel):
    image_url: str
    prompt: str


class DocumentAnalysisResponse(BaseModel):
    id: int
    image_url: str
    prompt: str
    analysis_result: str
    created_at: datetime

    model_config = {
        "from_attributes": True
    }


class ImageCreate(BaseModel):
    prompt: str


class ImageResponse(BaseModel):
    id: int
    prompt: str
    image_url: str
    created_at: datetime

    model_config = {
        "from_attributes": True
    }


class QuizCreate(BaseModel):
    source_text: str


class QuizResponse(BaseModel):
    id: int
    source_text: str
    quiz_data: Dict[str, Any]
    created_at: datetime

    model_config = {
        "from_attributes": True
    }


class WebSearchCreate(BaseModel):
    query: str


class WebSearchResponse(BaseModel):
    id: int
    query: str
    summary: str
    sources: List[str]
    created_at: datetime

    model_config = {
        "from_attributes": True
    }


# Recent activity feed entries, tagged by their source table
class DocumentAnalysisActivity(BaseModel):
    type: Literal["document_analysis"] = "document_analysis"
    data: DocumentAnalysisResponse


class GeneratedImageActivity(BaseModel):
    type: Literal["generated_image"] = "generated_image"
    data: ImageResponse


class GeneratedVideoActivity(BaseModel):
    type: Literal["generated_video"] = "generated_video"
    data: VideoResponse


class QuizActivity(BaseModel):
    type: Literal["quiz"] = "quiz"
    data: QuizResponse


class WebSearchActivity(BaseModel):
    type: Literal["web_search"] = "web_search"
    data: WebSearchResponse


RecentActivity = Annotated[
    Union[
        DocumentAnalysisActivity,
        GeneratedImageActivity,
        GeneratedVideoActivity,
        QuizActivity,
        WebSearchActivity,
    ],
    Field(discriminator="type"),
]
