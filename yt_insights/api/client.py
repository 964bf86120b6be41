"""
API client for calling a running YouTube insights tool server.
"""

import requests
from typing import Dict, List, Any, Optional
from urllib.parse import urljoin
from yt_insights.config import config


class ApiError(Exception):
    """A tool call was answered with an error status."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class ApiClient:
    """Client for interacting with the tool server over HTTP."""

    def __init__(self, base_url: str = config.PUBLIC_URL, timeout: float = config.HTTP_TIMEOUT * 10):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Seconds to wait for a tool call; channel analysis can be slow
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/v1/")
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    def list_tools(self) -> List[Dict[str, Any]]:
        """
        List the tools the server exposes.

        Returns:
            Tool descriptors with name, description and inputSchema
        """
        response = requests.get(self._url("tools"), timeout=self.timeout)
        response.raise_for_status()
        return response.json()["tools"]

    def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> str:
        """
        Call a tool.

        Args:
            name: Tool name
            arguments: Tool arguments using their wire names

        Returns:
            The tool's text output
        """
        response = requests.post(
            self._url(f"tools/{name}"),
            json=arguments or {},
            timeout=self.timeout,
        )

        if response.status_code >= 400:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            raise ApiError(response.status_code, detail)

        return "".join(block["text"] for block in response.json()["content"])

    def get_transcript(self, video_id: str) -> str:
        return self.call_tool("get_transcript", {"videoId": video_id})

    def get_summary(self, video_id: str) -> str:
        return self.call_tool("get_summary", {"videoId": video_id})

    def search_videos(self, query: str, max_results: int = 5, api_key: Optional[str] = None) -> str:
        return self.call_tool("search_videos", {"query": query, "maxResults": max_results, "apiKey": api_key})

    def analyze_channel(self, channel_id: str, max_videos: int = 50, api_key: Optional[str] = None) -> str:
        return self.call_tool("analyze_channel", {"channelId": channel_id, "maxVideos": max_videos, "apiKey": api_key})
