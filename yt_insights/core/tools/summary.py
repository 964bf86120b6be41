from yt_insights.core.tools.base import BaseTool
from yt_insights.models.schemas import VideoArgs


class SummaryTool(BaseTool):
    """Summarizes the full transcript of a video."""

    async def run(self, args: VideoArgs) -> str:
        transcript = await self.client.get_transcript(args.video_id)
        summary = self.summarizer.summarize(transcript)
        return f"Summary for video {args.video_id}:\n\n{summary}"
