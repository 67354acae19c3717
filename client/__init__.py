from .api_client import OkaiClient, UNSET
from .session_cache import SessionCache
from .video_poller import VideoStatusPoller, poll_until_done

__all__ = [
    "OkaiClient",
    "UNSET",
    "SessionCache",
    "VideoStatusPoller",
    "poll_until_done",
]
