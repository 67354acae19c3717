"""
Cancellable polling of a video generation's status
"""
from typing import Callable, Optional
import logging
import threading

from apps.okai.schemas.video import VideoResponse
from client.api_client import OkaiClient
from client.config import get_client_settings

logger = logging.getLogger(__name__)


class VideoStatusPoller:
    """
    Polls ``get_video_status`` on a fixed interval from a background thread.

    Polling stops on the first terminal status, on the first error (from the
    request or from ``on_update``) or on ``cancel()``. Errors are not retried;
    ``wait()`` re-raises them.
    """

    def __init__(
        self,
        client: OkaiClient,
        video_id: int,
        interval: Optional[float] = None,
        on_update: Optional[Callable[[VideoResponse], None]] = None
    ):
        self.client = client
        self.video_id = video_id
        self.interval = interval if interval is not None else get_client_settings().VIDEO_POLL_INTERVAL_SECONDS
        self.on_update = on_update

        self.latest: Optional[VideoResponse] = None
        self.error: Optional[BaseException] = None

        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def cancelled(self) -> bool:
        return self._stop.is_set() and not self._finished()

    def _finished(self) -> bool:
        return self.error is not None or (self.latest is not None and self.latest.status.is_terminal)

    def start(self) -> "VideoStatusPoller":
        if self._thread is not None:
            raise RuntimeError("Poller already started")
        self._thread = threading.Thread(
            target=self._run,
            name=f"video-poll-{self.video_id}",
            daemon=True
        )
        self._thread.start()
        return self

    def _run(self) -> None:
        try:
            while not self._stop.wait(self.interval):
                video = self.client.get_video_status(self.video_id)
                self.latest = video
                if self.on_update is not None:
                    self.on_update(video)
                if video.status.is_terminal:
                    logger.info(f"Video {self.video_id} finished as {video.status.value}")
                    break
        except Exception as e:
            logger.error(f"Polling video {self.video_id} failed: {e}")
            self.error = e
        finally:
            self._stop.set()

    def cancel(self) -> None:
        """Stop polling and release the polling thread"""
        self._stop.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()

    def wait(self, timeout: Optional[float] = None) -> Optional[VideoResponse]:
        """Block until polling ends; returns the last status seen"""
        if self._thread is None:
            raise RuntimeError("Poller was not started")
        self._thread.join(timeout)
        if self.error is not None:
            raise self.error
        return self.latest

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.cancel()


def poll_until_done(
    client: OkaiClient,
    video_id: int,
    interval: Optional[float] = None,
    timeout: Optional[float] = None,
    on_update: Optional[Callable[[VideoResponse], None]] = None
) -> Optional[VideoResponse]:
    """Poll to a terminal status, giving up (and cancelling) after ``timeout`` seconds"""
    with VideoStatusPoller(client, video_id, interval=interval, on_update=on_update) as poller:
        video = poller.wait(timeout)
    if video is None or not video.status.is_terminal:
        logger.warning(f"Stopped polling video {video_id} before it finished")
    return video
