from yt_insights.core.tools.base import BaseTool
from yt_insights.models.schemas import VideoArgs


class TranscriptTool(BaseTool):
    """Returns the raw transcript of a video."""

    async def run(self, args: VideoArgs) -> str:
        transcript = await self.client.get_transcript(args.video_id)
        return f"Transcript for video {args.video_id}:\n\n{transcript}"
