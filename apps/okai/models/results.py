"""
Create-and-read result records produced by the assistant tools
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, Text, Integer, DateTime, JSON
import sqlalchemy.dialects.postgresql as pg
from datetime import datetime
from typing import Optional, Dict, Any, List

from common.utils.clock import utcnow


def json_column(nullable: bool = False) -> Column:
    return Column(JSON().with_variant(pg.JSONB(), "postgresql"), nullable=nullable)


class DocumentAnalysis(SQLModel, table=True):
    __tablename__ = "document_analysis"

    id: Optional[int] = Field(default=None, sa_column=Column(Integer, primary_key=True, autoincrement=True))
    image_url: str = Field(sa_column=Column(Text, nullable=False))
    prompt: str = Field(sa_column=Column(Text, nullable=False))
    analysis_result: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime, nullable=False))


class GeneratedImage(SQLModel, table=True):
    __tablename__ = "generated_images"

    id: Optional[int] = Field(default=None, sa_column=Column(Integer, primary_key=True, autoincrement=True))
    prompt: str = Field(sa_column=Column(Text, nullable=False))
    image_url: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime, nullable=False))


class Quiz(SQLModel, table=True):
    __tablename__ = "quiz"

    id: Optional[int] = Field(default=None, sa_column=Column(Integer, primary_key=True, autoincrement=True))
    source_text: str = Field(sa_column=Column(Text, nullable=False))
    quiz_data: Dict[str, Any] = Field(sa_column=json_column())
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime, nullable=False))

    @property
    def question_count(self) -> int:
        return len(self.quiz_data.get("quiz", []))


class WebSearch(SQLModel, table=True):
    __tablename__ = "web_search"

    id: Optional[int] = Field(default=None, sa_column=Column(Integer, primary_key=True, autoincrement=True))
    query: str = Field(sa_column=Column(Text, nullable=False))
    summary: str = Field(sa_column=Column(Text, nullable=False))
    sources: List[str] = Field(sa_column=json_column())
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime, nullable=False))
