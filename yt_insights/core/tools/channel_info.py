from yt_insights.core.tools.base import BaseTool
from yt_insights.models.schemas import ChannelArgs
from yt_insights.utils.helpers import channel_url, format_count

RULE = "=" * 80


class ChannelInfoTool(BaseTool):
    """Reports a channel's metadata and statistics."""

    async def run(self, args: ChannelArgs) -> str:
        channel_id = args.channel_id
        channel_info = await self.client.get_channel_info(channel_id)
        snippet = channel_info.get("snippet") or {}
        statistics = channel_info.get("statistics") or {}
        branding = (channel_info.get("brandingSettings") or {}).get("channel")

        output = "Channel Information\n\n"
        output += RULE + "\n\n"
        output += f"Channel ID: {channel_id}\n"
        output += f"Title: {snippet.get('title')}\n"
        output += f"Description: {snippet.get('description') or 'N/A'}\n"
        output += f"Custom URL: {snippet.get('customUrl') or 'N/A'}\n"
        output += f"Published At: {snippet.get('publishedAt')}\n"
        output += f"Country: {snippet.get('country') or 'N/A'}\n"
        output += "\nStatistics:\n"
        output += f"- View Count: {format_count(statistics.get('viewCount'))}\n"
        output += f"- Subscriber Count: {format_count(statistics.get('subscriberCount'))}\n"
        output += f"- Video Count: {format_count(statistics.get('videoCount'))}\n"
        output += f"- Hidden Subscriber Count: {'Yes' if statistics.get('hiddenSubscriberCount') else 'No'}\n"

        if branding:
            output += "\nChannel Branding:\n"
            output += f"- Keywords: {branding.get('keywords') or 'N/A'}\n"
            output += f"- Feature: {branding.get('feature') or 'N/A'}\n"
            output += f"- Unsubscribed Trailer: {branding.get('unsubscribedTrailer') or 'N/A'}\n"

        thumbnails = snippet.get("thumbnails") or {}
        if thumbnails.get("high"):
            output += f"\nChannel Thumbnail: {thumbnails['high'].get('url')}\n"
        if thumbnails.get("default"):
            output += f"Channel Banner: {thumbnails['default'].get('url')}\n"

        output += f"\nChannel URL: {channel_url(channel_id)}\n"
        return output
