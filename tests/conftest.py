"""
Configuration for pytest tests.
"""

import os
import asyncio
import pytest

os.environ["ENVIRONMENT"] = "development"

from yt_insights.utils.error_handling import UpstreamFetchError, UpstreamLookupError

TEST_API_KEY = "test-key-0123456789abcdef"


class FakeYouTubeClient:
    """In-memory stand-in for YouTubeClient that records every call."""

    def __init__(
        self,
        transcripts=None,
        search_results=None,
        channel_videos=None,
        channel_info=None,
        channel_error=None,
    ):
        self.transcripts = transcripts or {}
        self.search_results = search_results or []
        self.channel_videos = channel_videos or []
        self.channel_info = channel_info or {}
        self.channel_error = channel_error
        self.calls = []

    async def get_transcript(self, video_id):
        self.calls.append(("get_transcript", video_id))
        if video_id in self.transcripts:
            return self.transcripts[video_id]
        raise UpstreamFetchError(f"Failed to fetch transcript: no captions for {video_id}")

    async def search_videos(self, query, max_results=5):
        self.calls.append(("search_videos", query, max_results))
        return list(self.search_results)[:max_results]

    async def get_channel_info(self, channel_id):
        self.calls.append(("get_channel_info", channel_id))
        if self.channel_error:
            raise UpstreamLookupError(self.channel_error)
        return self.channel_info

    async def get_channel_videos(self, channel_id, max_results=50):
        self.calls.append(("get_channel_videos", channel_id, max_results))
        if self.channel_error:
            raise UpstreamLookupError(self.channel_error)
        return list(self.channel_videos)[:max_results]

    def called(self, method):
        return [call for call in self.calls if call[0] == method]


def search_item(video_id, title="", channel_title="", description="", published_at="2024-01-01T00:00:00Z"):
    """Build a search result item shaped like the Data API's."""
    item = {
        "snippet": {
            "title": title,
            "channelTitle": channel_title,
            "description": description,
            "publishedAt": published_at,
        },
    }
    if video_id:
        item["id"] = {"kind": "youtube#video", "videoId": video_id}
    else:
        item["id"] = {"kind": "youtube#channel"}
    return item


def playlist_item(video_id, title=""):
    """Build an uploads playlist item shaped like the Data API's."""
    item = {"snippet": {"title": title}, "contentDetails": {}}
    if video_id:
        item["contentDetails"]["videoId"] = video_id
    return item


def run(coro):
    """Drive a coroutine to completion."""
    return asyncio.run(coro)


@pytest.fixture
def api_key():
    """Return an API key that passes validation."""
    return TEST_API_KEY


@pytest.fixture
def fake_client():
    """Return an empty fake YouTube client."""
    return FakeYouTubeClient()
