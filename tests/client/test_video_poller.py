"""
Test cases for the cancellable video status poller
"""
import threading
import time
from unittest.mock import MagicMock

import pytest

from apps.okai.exceptions import NotFound
from apps.okai.models import VideoStatus
from client.video_poller import VideoStatusPoller, poll_until_done

INTERVAL = 0.01


def video(status, video_url=None):
    item = MagicMock()
    item.status = status
    item.video_url = video_url
    return item


class TestVideoStatusPoller:
    """Test cases for when polling stops"""

    def test_stops_on_terminal_status(self):
        client = MagicMock()
        client.get_video_status.side_effect = [
            video(VideoStatus.PENDING),
            video(VideoStatus.PROCESSING),
            video(VideoStatus.COMPLETED, "https://v/1.mp4"),
        ]
        updates = []

        poller = VideoStatusPoller(client, 7, interval=INTERVAL, on_update=updates.append).start()
        final = poller.wait(timeout=5)

        assert final.status == VideoStatus.COMPLETED
        assert final.video_url == "https://v/1.mp4"
        assert [u.status for u in updates] == [
            VideoStatus.PENDING, VideoStatus.PROCESSING, VideoStatus.COMPLETED
        ]
        assert client.get_video_status.call_count == 3
        client.get_video_status.assert_called_with(7)
        assert not poller.running
        assert not poller.cancelled

    def test_failed_is_terminal(self):
        client = MagicMock()
        client.get_video_status.return_value = video(VideoStatus.FAILED)

        assert poll_until_done(client, 7, interval=INTERVAL, timeout=5).status == VideoStatus.FAILED
        assert client.get_video_status.call_count == 1

    def test_error_stops_without_retry(self):
        client = MagicMock()
        client.get_video_status.side_effect = NotFound("Video with id 7 not found")

        poller = VideoStatusPoller(client, 7, interval=INTERVAL).start()
        with pytest.raises(NotFound):
            poller.wait(timeout=5)

        time.sleep(INTERVAL * 5)
        assert client.get_video_status.call_count == 1
        assert isinstance(poller.error, NotFound)

    def test_callback_error_stops_polling(self):
        """An exception from on_update ends polling and is re-raised by wait()"""
        client = MagicMock()
        client.get_video_status.return_value = video(VideoStatus.PENDING)

        def on_update(update):
            raise ValueError("view closed")

        poller = VideoStatusPoller(client, 7, interval=INTERVAL, on_update=on_update).start()
        with pytest.raises(ValueError):
            poller.wait(timeout=5)

        time.sleep(INTERVAL * 5)
        assert client.get_video_status.call_count == 1
        assert isinstance(poller.error, ValueError)
        assert not poller.running
        assert not poller.cancelled

    def test_cancel_stops_polling(self):
        polled = threading.Event()

        def get_video_status(video_id):
            polled.set()
            return video(VideoStatus.PROCESSING)

        client = MagicMock()
        client.get_video_status.side_effect = get_video_status

        poller = VideoStatusPoller(client, 7, interval=INTERVAL).start()
        assert polled.wait(5)
        poller.cancel()

        calls = client.get_video_status.call_count
        time.sleep(INTERVAL * 5)
        assert client.get_video_status.call_count == calls
        assert not poller.running
        assert poller.cancelled

    def test_context_manager_cancels(self):
        client = MagicMock()
        client.get_video_status.return_value = video(VideoStatus.PENDING)

        with VideoStatusPoller(client, 7, interval=INTERVAL) as poller:
            assert poller.running

        assert not poller.running

    def test_cancel_before_first_poll(self):
        client = MagicMock()
        poller = VideoStatusPoller(client, 7, interval=60).start()
        poller.cancel()

        assert not poller.running
        assert poller.wait() is None
        client.get_video_status.assert_not_called()

    def test_start_twice(self):
        poller = VideoStatusPoller(MagicMock(), 7, interval=60).start()
        try:
            with pytest.raises(RuntimeError):
                poller.start()
        finally:
            poller.cancel()

    def test_timeout_cancels(self):
        client = MagicMock()
        client.get_video_status.return_value = video(VideoStatus.PROCESSING)

        result = poll_until_done(client, 7, interval=INTERVAL, timeout=INTERVAL * 5)
        assert result is None or result.status == VideoStatus.PROCESSING
