"""
Tests for the stdio (MCP) transport.
"""

from unittest.mock import AsyncMock, patch

from conftest import run
from yt_insights import mcp_server


def test_registered_tools():
    tools = run(mcp_server.mcp.list_tools())

    assert {tool.name for tool in tools} == {
        "get_transcript",
        "get_summary",
        "search_videos",
        "get_channel_info",
        "analyze_channel",
        "founder_scout",
    }


def test_tools_use_wire_names():
    tools = {tool.name: tool for tool in run(mcp_server.mcp.list_tools())}

    assert "videoId" in tools["get_summary"].inputSchema["properties"]
    assert "maxResults" in tools["founder_scout"].inputSchema["properties"]


def test_tool_forwards_to_dispatcher():
    with patch.object(mcp_server.dispatcher, "call", AsyncMock(return_value="done")) as call:
        output = run(mcp_server.search_videos("python", apiKey="k" * 20, maxResults=2))

    assert output == "done"
    call.assert_awaited_once_with("search_videos", {"query": "python", "apiKey": "k" * 20, "maxResults": 2})


def test_founder_scout_defaults():
    with patch.object(mcp_server.dispatcher, "call", AsyncMock(return_value="prompt")) as call:
        run(mcp_server.founder_scout())

    call.assert_awaited_once_with("founder_scout", {
        "monthlyRevenue": None,
        "keyTopic": None,
        "targetGeography": None,
        "maxResults": 5,
        "confirm": True,
        "apiKey": None,
    })
