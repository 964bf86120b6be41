"""
YouTube Data API and transcript client.
"""

import asyncio
import json
import re
from typing import Any, Dict, List, Optional

import httpx
from youtube_transcript_api import YouTubeTranscriptApi

from yt_insights.config import config
from yt_insights.utils.error_handling import UpstreamFetchError, UpstreamLookupError
from yt_insights.utils.logger import logging

MIN_TRANSCRIPT_LENGTH = 20


class YouTubeClient:
    """Class to handle fetching video, channel and transcript data."""

    def __init__(
        self,
        api_key: str,
        base_url: str = config.YOUTUBE_API_BASE,
        timeout: float = config.HTTP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client with an API key.

        Args:
            api_key: YouTube Data API v3 key
            base_url: Data API root URL
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def _get(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Call a Data API endpoint and return the decoded JSON body."""
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.get(
                f"{self.base_url}/{endpoint}",
                params={**params, "key": self.api_key},
            )
            response.raise_for_status()
            return response.json()

    async def get_transcript(self, video_id: str) -> str:
        """
        Get the transcript of a video.

        Falls back to the video description when captions are missing or
        too short to be useful.

        Args:
            video_id: YouTube video ID

        Returns:
            Transcript text (or description)
        """
        try:
            transcript = await asyncio.to_thread(self._fetch_captions, video_id)
            if len(transcript) >= MIN_TRANSCRIPT_LENGTH:
                return transcript

            logging.info(f"Transcript for {video_id} too short, using description")
            description = await self.get_video_description(video_id)
            return description or ""
        except Exception as e:
            description = await self.get_video_description(video_id)
            if description:
                logging.info(f"Transcript unavailable for {video_id}, using description: {e}")
                return description
            raise UpstreamFetchError(f"Failed to fetch transcript: {e}") from e

    @staticmethod
    def _fetch_captions(video_id: str) -> str:
        fetched = YouTubeTranscriptApi().fetch(video_id)
        return " ".join(snippet.text for snippet in fetched).strip()

    async def search_videos(self, query: str, max_results: int = 5) -> List[Dict[str, Any]]:
        """
        Search for videos on YouTube.

        A query rejected with HTTP 400 is retried once with ``$`` and quotes
        removed.

        Args:
            query: Search terms
            max_results: Maximum number of results

        Returns:
            Search result items
        """
        async def do_request(q: str) -> List[Dict[str, Any]]:
            data = await self._get("search", {
                "part": "snippet",
                "q": q,
                "type": "video",
                "maxResults": max_results,
            })
            return data.get("items") or []

        try:
            return await do_request(query)
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 400:
                simplified = re.sub(r"\s+", " ", re.sub(r"[$\"']", "", query)).strip()
                if simplified and simplified != query:
                    logging.info(f"Search rejected, retrying with simplified query: {simplified}")
                    try:
                        return await do_request(simplified)
                    except httpx.HTTPError as retry_error:
                        logging.warning(f"Simplified search failed: {retry_error}")
            raise UpstreamLookupError(f"Failed to search videos: {_describe_http_error(e)}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise UpstreamLookupError(f"Failed to search videos: {e}") from e

    async def get_channel_info(self, channel_id: str) -> Dict[str, Any]:
        """
        Get channel information.

        Args:
            channel_id: YouTube channel ID

        Returns:
            The channel resource (snippet, statistics, contentDetails, brandingSettings)
        """
        try:
            data = await self._get("channels", {
                "part": "snippet,statistics,contentDetails,brandingSettings",
                "id": channel_id,
            })
        except httpx.HTTPStatusError as e:
            raise UpstreamLookupError(f"Failed to get channel info: {_describe_http_error(e)}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise UpstreamLookupError(f"Failed to get channel info: {e}") from e

        items = data.get("items") or []
        if not items:
            raise UpstreamLookupError("Failed to get channel info: Channel not found")
        return items[0]

    async def get_channel_videos(self, channel_id: str, max_results: int = 50) -> List[Dict[str, Any]]:
        """
        Get the uploaded videos of a channel.

        Args:
            channel_id: YouTube channel ID
            max_results: Maximum number of playlist items

        Returns:
            Playlist items of the channel's uploads playlist
        """
        try:
            channel_info = await self.get_channel_info(channel_id)
        except UpstreamLookupError as e:
            raise UpstreamLookupError(f"Failed to get channel videos: {e}") from e

        uploads_playlist_id = (
            channel_info.get("contentDetails", {}).get("relatedPlaylists", {}).get("uploads")
        )
        if not uploads_playlist_id:
            raise UpstreamLookupError(
                "Failed to get channel videos: Could not find uploads playlist for channel"
            )

        try:
            data = await self._get("playlistItems", {
                "part": "snippet,contentDetails",
                "playlistId": uploads_playlist_id,
                "maxResults": max_results,
            })
        except httpx.HTTPStatusError as e:
            raise UpstreamLookupError(f"Failed to get channel videos: {_describe_http_error(e)}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise UpstreamLookupError(f"Failed to get channel videos: {e}") from e

        return data.get("items") or []

    async def get_video_description(self, video_id: str) -> Optional[str]:
        """
        Get a video's description, used when no transcript is available.

        Returns:
            The trimmed description, or None if it is empty or cannot be fetched
        """
        try:
            data = await self._get("videos", {"part": "snippet", "id": video_id})
        except (httpx.HTTPError, ValueError) as e:
            logging.debug(f"Could not fetch description for {video_id}: {e}")
            return None

        items = data.get("items") or []
        description = items[0].get("snippet", {}).get("description") if items else None
        return str(description).strip() if description else None


def _describe_http_error(error: httpx.HTTPStatusError) -> str:
    detail = ""
    try:
        detail = f" Response: {json.dumps(error.response.json())}"
    except ValueError:
        pass
    return f"HTTP {error.response.status_code}.{detail}"
