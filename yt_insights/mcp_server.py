"""
Model Context Protocol server exposing the tools over stdio, and over SSE
when mounted on the HTTP app.

Tool parameters keep the camelCase wire names so MCP clients see the same
argument names as HTTP callers.
"""

from typing import Optional

from mcp.server.fastmcp import FastMCP

from yt_insights.config import config
from yt_insights.core.dispatcher import ToolDispatcher
from yt_insights.core.tools import TOOL_SPECS

mcp = FastMCP(
    config.APP_NAME,
    host=config.SERVER_HOST,
    port=config.SERVER_PORT,
    sse_path=config.SSE_PATH,
    message_path=config.MESSAGE_PATH,
)
dispatcher = ToolDispatcher()


def _description(name: str) -> str:
    return TOOL_SPECS[name].description


@mcp.tool(name="get_transcript", description=_description("get_transcript"))
async def get_transcript(videoId: str, apiKey: Optional[str] = None) -> str:
    return await dispatcher.call("get_transcript", {"videoId": videoId, "apiKey": apiKey})


@mcp.tool(name="get_summary", description=_description("get_summary"))
async def get_summary(videoId: str, apiKey: Optional[str] = None) -> str:
    return await dispatcher.call("get_summary", {"videoId": videoId, "apiKey": apiKey})


@mcp.tool(name="search_videos", description=_description("search_videos"))
async def search_videos(query: str, apiKey: Optional[str] = None, maxResults: int = 5) -> str:
    return await dispatcher.call(
        "search_videos", {"query": query, "apiKey": apiKey, "maxResults": maxResults}
    )


@mcp.tool(name="get_channel_info", description=_description("get_channel_info"))
async def get_channel_info(channelId: str, apiKey: Optional[str] = None) -> str:
    return await dispatcher.call("get_channel_info", {"channelId": channelId, "apiKey": apiKey})


@mcp.tool(name="analyze_channel", description=_description("analyze_channel"))
async def analyze_channel(channelId: str, apiKey: Optional[str] = None, maxVideos: int = 50) -> str:
    return await dispatcher.call(
        "analyze_channel", {"channelId": channelId, "apiKey": apiKey, "maxVideos": maxVideos}
    )


@mcp.tool(name="founder_scout", description=_description("founder_scout"))
async def founder_scout(
    monthlyRevenue: Optional[str] = None,
    keyTopic: Optional[str] = None,
    targetGeography: Optional[str] = None,
    maxResults: int = 5,
    confirm: bool = True,
    apiKey: Optional[str] = None,
) -> str:
    return await dispatcher.call("founder_scout", {
        "monthlyRevenue": monthlyRevenue,
        "keyTopic": keyTopic,
        "targetGeography": targetGeography,
        "maxResults": maxResults,
        "confirm": confirm,
        "apiKey": apiKey,
    })


def run_stdio():
    """Serve the tools on stdin/stdout."""
    mcp.run()
