from .session_service import SessionService
from .message_service import MessageService
from .video_service import VideoService
from .result_service import ResultService
from .activity_service import ActivityService
from .performance_service import PerformanceService, get_performance_service

__all__ = [
    "SessionService",
    "MessageService",
    "VideoService",
    "ResultService",
    "ActivityService",
    "PerformanceService",
    "get_performance_service",
]
