"""
Video search with per-result transcript excerpts and summaries.
"""

from typing import Any, Dict, List

from yt_insights.core.tools.base import BaseTool
from yt_insights.models.schemas import SearchArgs, SearchResultItem
from yt_insights.utils.error_handling import UpstreamFetchError
from yt_insights.utils.helpers import watch_url
from yt_insights.utils.logger import logging

SUMMARY_SOURCE_CHARS = 5000
EXCERPT_CHARS = 500
DESCRIPTION_CHARS = 200
FALLBACK_SUMMARY_CHARS = 300
RULE = "=" * 80


class SearchTool(BaseTool):
    """Searches videos and summarizes each hit's transcript."""

    async def run(self, args: SearchArgs) -> str:
        search_results = await self.client.search_videos(args.query, args.max_results)

        if not search_results:
            return f'No videos found for query: "{args.query}"'

        results = []
        for item in search_results:
            result = await self._process_item(item)
            if result is not None:
                results.append(result)

        return render_search_results(args.query, results)

    async def _process_item(self, item: Dict[str, Any]):
        video_id = (item.get("id") or {}).get("videoId")
        if not video_id:
            return None

        snippet = item.get("snippet") or {}
        description = snippet.get("description") or ""
        fields = {
            "video_id": video_id,
            "title": snippet.get("title") or "",
            "channel_title": snippet.get("channelTitle") or "",
            "published_at": snippet.get("publishedAt") or "",
            "description": description[:DESCRIPTION_CHARS],
            "link": watch_url(video_id),
        }

        try:
            transcript = await self.client.get_transcript(video_id)
        except UpstreamFetchError as e:
            logging.info(f"No transcript for search result {video_id}: {e}")
            return SearchResultItem(
                transcript="Transcript unavailable",
                summary=description[:FALLBACK_SUMMARY_CHARS],
                error=f"Failed to get transcript: {e}",
                **fields,
            )

        return SearchResultItem(
            transcript=transcript[:EXCERPT_CHARS],
            summary=self.summarizer.summarize(transcript[:SUMMARY_SOURCE_CHARS]),
            **fields,
        )


def render_search_results(query: str, results: List[SearchResultItem]) -> str:
    output = f'Search Results for: "{query}"\n\n'
    output += RULE + "\n\n"

    for index, result in enumerate(results, start=1):
        output += f"Result {index}:\n"
        output += f"Title: {result.title}\n"
        output += f"Channel: {result.channel_title}\n"
        output += f"Published: {result.published_at}\n"
        output += f"Link: {result.link}\n"
        output += f"\nDescription:\n{result.description}\n\n"
        output += f"Transcript (excerpt):\n{result.transcript}...\n\n"
        output += f"Summary:\n{result.summary}\n\n"
        if result.error:
            output += f"Note: {result.error}\n"
        output += RULE + "\n\n"

    return output
