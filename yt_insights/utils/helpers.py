"""
Helper utility functions for the YouTube insights tool server.
"""

import re
from typing import Optional, Union

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
CHANNEL_URL = "https://www.youtube.com/channel/{channel_id}"


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract the video ID from a YouTube URL.

    Plain IDs are returned untouched by callers, so only strings that
    look like URLs are parsed.

    Args:
        url: YouTube URL

    Returns:
        Video ID or None if the string is not a recognised YouTube URL
    """
    if "youtube.com" not in url and "youtu.be" not in url:
        return None

    # YouTube URL patterns
    patterns = [
        r"(?:watch\?v=)([0-9A-Za-z_-]{11})",
        r"(?:embed\/)([0-9A-Za-z_-]{11})",
        r"(?:v=|\/)([0-9A-Za-z_-]{11}).*",
    ]

    for pattern in patterns:
        match = re.search(pattern, url)
        if match:
            return match.group(1)

    return None


def watch_url(video_id: str) -> str:
    """Get the watch page URL for a video."""
    return WATCH_URL.format(video_id=video_id)


def channel_url(channel_id: str) -> str:
    """Get the public URL for a channel."""
    return CHANNEL_URL.format(channel_id=channel_id)


def format_count(value: Union[str, int, None]) -> str:
    """
    Format a statistics counter with thousands separators.

    Args:
        value: Counter as returned by the Data API (usually a string)

    Returns:
        Formatted number, 0 when the value is missing or not numeric
    """
    try:
        return f"{int(value or 0):,}"
    except (TypeError, ValueError):
        return "0"
