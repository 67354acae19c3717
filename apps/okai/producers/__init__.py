from dataclasses import dataclass, field
from functools import lru_cache

from .base import (
    ChatPrompt, ChatResponder, DocumentAnalyzer, ImageGenerator,
    QuizGenerator, SearchResult, VideoGenerator, WebSearcher
)
from .placeholder import (
    PlaceholderChatResponder, PlaceholderDocumentAnalyzer, PlaceholderImageGenerator,
    PlaceholderQuizGenerator, PlaceholderVideoGenerator, PlaceholderWebSearcher
)


@dataclass
class ResultProducers:
    """The producer used by each tool"""
    document_analyzer: DocumentAnalyzer = field(default_factory=PlaceholderDocumentAnalyzer)
    image_generator: ImageGenerator = field(default_factory=PlaceholderImageGenerator)
    video_generator: VideoGenerator = field(default_factory=PlaceholderVideoGenerator)
    quiz_generator: QuizGenerator = field(default_factory=PlaceholderQuizGenerator)
    web_searcher: WebSearcher = field(default_factory=PlaceholderWebSearcher)
    chat_responder: ChatResponder = field(default_factory=PlaceholderChatResponder)


@lru_cache()
def get_result_producers() -> ResultProducers:
    return ResultProducers()


__all__ = [
    "ResultProducers",
    "get_result_producers",
    "ChatPrompt",
    "SearchResult",
    "DocumentAnalyzer",
    "ImageGenerator",
    "VideoGenerator",
    "QuizGenerator",
    "WebSearcher",
    "ChatResponder",
]
