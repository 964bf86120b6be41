"""
Channel content analysis: summarize a channel's uploads and classify them.
"""

from typing import Any, Dict, Optional

from yt_insights.core.themes import ThemeScanner
from yt_insights.core.tools.base import BaseTool
from yt_insights.models.schemas import ChannelAnalysisArgs, VideoDigest
from yt_insights.utils.error_handling import UpstreamFetchError
from yt_insights.utils.helpers import watch_url
from yt_insights.utils.logger import logging

SUMMARY_SOURCE_CHARS = 3000
SAMPLE_SUMMARIES = 5
RULE = "=" * 80


def playlist_video_id(item: Dict[str, Any]) -> Optional[str]:
    """Video ID of an uploads playlist item, if it has one."""
    content_details = item.get("contentDetails") or {}
    resource_id = (item.get("snippet") or {}).get("resourceId") or {}
    return content_details.get("videoId") or resource_id.get("videoId")


class ChannelAnalysisTool(BaseTool):
    """Analyzes a channel's videos and describes the nature of its content."""

    async def run(self, args: ChannelAnalysisArgs) -> str:
        channel_id = args.channel_id
        videos = await self.client.get_channel_videos(channel_id, args.max_videos)

        if not videos:
            return f"No videos found for channel: {channel_id}"

        output = "Channel Content Analysis\n\n"
        output += RULE + "\n\n"
        output += f"Analyzing {len(videos)} videos from channel...\n\n"

        scanner = ThemeScanner()
        digests = []
        for video in videos:
            video_id = playlist_video_id(video)
            if not video_id:
                continue
            title = (video.get("snippet") or {}).get("title") or ""

            try:
                transcript = await self.client.get_transcript(video_id)
            except UpstreamFetchError as e:
                logging.debug(f"Skipping {video_id} in channel analysis: {e}")
                continue

            digests.append(VideoDigest(
                video_id=video_id,
                title=title,
                summary=self.summarizer.summarize(transcript[:SUMMARY_SOURCE_CHARS]),
            ))
            scanner.scan(transcript)

        logging.info(f"Analyzed {len(digests)} of {len(videos)} videos for channel {channel_id}")

        output += f"Total Videos Analyzed: {len(digests)}\n\n"
        output += scanner.report(digests)
        output += "\n" + RULE + "\n\n"

        output += "Sample Video Summaries:\n\n"
        for index, digest in enumerate(digests[:SAMPLE_SUMMARIES], start=1):
            output += f"{index}. {digest.title}\n"
            output += f"   {digest.summary}\n"
            output += f"   Link: {watch_url(digest.video_id)}\n\n"

        return output
