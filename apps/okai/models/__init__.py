# Import all models so SQLAlchemy can discover them
from .chat_session import ChatSession
from .message import ChatMessage, MessageRole, ContentType
from .generated_video import GeneratedVideo, VideoStatus
from .results import DocumentAnalysis, GeneratedImage, Quiz, WebSearch

__all__ = [
    "ChatSession",
    "ChatMessage",
    "MessageRole",
    "ContentType",
    "GeneratedVideo",
    "VideoStatus",
    "DocumentAnalysis",
    "GeneratedImage",
    "Quiz",
    "WebSearch",
]
