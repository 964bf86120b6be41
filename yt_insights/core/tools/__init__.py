"""
Registry of the tools the server exposes.
"""

from typing import Dict, NamedTuple, Type

from pydantic import BaseModel

from yt_insights.core.tools.base import BaseTool
from yt_insights.core.tools.channel_analysis import ChannelAnalysisTool
from yt_insights.core.tools.channel_info import ChannelInfoTool
from yt_insights.core.tools.founder_scout import FounderScoutTool
from yt_insights.core.tools.search import SearchTool
from yt_insights.core.tools.summary import SummaryTool
from yt_insights.core.tools.transcript import TranscriptTool
from yt_insights.models.schemas import (
    ChannelAnalysisArgs,
    ChannelArgs,
    FounderScoutArgs,
    SearchArgs,
    VideoArgs,
)


class ToolSpec(NamedTuple):
    name: str
    description: str
    args_model: Type[BaseModel]
    tool_cls: Type[BaseTool]

    def input_schema(self) -> Dict:
        """JSON schema of the tool's arguments, using the wire names."""
        return self.args_model.model_json_schema(by_alias=True)


TOOL_SPECS: Dict[str, ToolSpec] = {
    spec.name: spec
    for spec in (
        ToolSpec(
            "get_transcript",
            "Get the transcript of a YouTube video by video ID",
            VideoArgs,
            TranscriptTool,
        ),
        ToolSpec(
            "get_summary",
            "Get a summary of a YouTube video from its transcript",
            VideoArgs,
            SummaryTool,
        ),
        ToolSpec(
            "search_videos",
            "Search YouTube videos and get their transcripts and summaries",
            SearchArgs,
            SearchTool,
        ),
        ToolSpec(
            "get_channel_info",
            "Get information about a YouTube channel",
            ChannelArgs,
            ChannelInfoTool,
        ),
        ToolSpec(
            "analyze_channel",
            "Analyze all videos from a channel and provide summary of content nature",
            ChannelAnalysisArgs,
            ChannelAnalysisTool,
        ),
        ToolSpec(
            "founder_scout",
            "Founder Scout agent: confirm inputs, search videos, fetch transcripts, and create business reports",
            FounderScoutArgs,
            FounderScoutTool,
        ),
    )
}

__all__ = ["BaseTool", "ToolSpec", "TOOL_SPECS"]
