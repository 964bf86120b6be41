"""
Tests for tool dispatch: argument validation, credentials and client reuse.
"""

import pytest

from conftest import TEST_API_KEY, FakeYouTubeClient, run
from yt_insights.core.dispatcher import ToolDispatcher, parse_arguments
from yt_insights.core.tools import TOOL_SPECS
from yt_insights.utils.caching import ClientCache
from yt_insights.utils.error_handling import (
    CredentialError,
    ToolExecutionError,
    UnknownToolError,
)


@pytest.fixture
def created():
    """Keys the client factory was called with."""
    return []


@pytest.fixture
def dispatcher(created):
    client = FakeYouTubeClient(
        transcripts={"abc123": "hello there", "dQw4w9WgXcQ": "never gonna"},
        channel_error="Failed to get channel info: Channel not found",
    )

    def factory(api_key):
        created.append(api_key)
        return client

    return ToolDispatcher(clients=ClientCache(maxsize=4), client_factory=factory, default_api_key=None)


def test_list_tools(dispatcher):
    tools = {tool["name"]: tool for tool in dispatcher.list_tools()}

    assert set(tools) == {
        "get_transcript",
        "get_summary",
        "search_videos",
        "get_channel_info",
        "analyze_channel",
        "founder_scout",
    }
    schema = tools["get_transcript"]["inputSchema"]
    assert schema["required"] == ["videoId"]
    assert "apiKey" in schema["properties"]
    assert "required" not in tools["founder_scout"]["inputSchema"]
    assert tools["analyze_channel"]["inputSchema"]["properties"]["maxVideos"]["default"] == 50


def test_call_tool(dispatcher):
    output = run(dispatcher.call("get_transcript", {"videoId": "abc123", "apiKey": TEST_API_KEY}))

    assert output == "Transcript for video abc123:\n\nhello there"


def test_video_url_argument(dispatcher):
    output = run(dispatcher.call("get_transcript", {
        "videoId": "https://youtu.be/dQw4w9WgXcQ",
        "apiKey": TEST_API_KEY,
    }))

    assert output == "Transcript for video dQw4w9WgXcQ:\n\nnever gonna"


def test_unknown_tool(dispatcher):
    with pytest.raises(ToolExecutionError) as excinfo:
        run(dispatcher.call("does_not_exist", {"apiKey": TEST_API_KEY}))

    assert excinfo.value.status_code == 404
    assert isinstance(excinfo.value.cause, UnknownToolError)
    assert str(excinfo.value) == "Error executing tool does_not_exist: Unknown tool: does_not_exist"


@pytest.mark.parametrize("arguments", [{}, {"videoId": ""}, {"videoId": None}])
def test_missing_parameter(dispatcher, arguments):
    with pytest.raises(ToolExecutionError) as excinfo:
        run(dispatcher.call("get_transcript", {**arguments, "apiKey": TEST_API_KEY}))

    assert excinfo.value.status_code == 400
    assert str(excinfo.value) == "Error executing tool get_transcript: videoId parameter is required"


def test_invalid_parameter(dispatcher):
    with pytest.raises(ToolExecutionError) as excinfo:
        run(dispatcher.call("founder_scout", {"monthlyRevenue": "$1M/month", "apiKey": TEST_API_KEY}))

    assert excinfo.value.status_code == 400
    assert "Invalid value for monthlyRevenue" in str(excinfo.value)


def test_out_of_range_parameter(dispatcher):
    with pytest.raises(ToolExecutionError) as excinfo:
        run(dispatcher.call("search_videos", {"query": "x", "maxResults": 500, "apiKey": TEST_API_KEY}))

    assert excinfo.value.status_code == 400


@pytest.mark.parametrize("api_key", [None, "", "too-short"])
def test_missing_or_short_key(dispatcher, created, api_key):
    with pytest.raises(ToolExecutionError) as excinfo:
        run(dispatcher.call("get_transcript", {"videoId": "abc123", "apiKey": api_key}))

    assert excinfo.value.status_code == 401
    assert isinstance(excinfo.value.cause, CredentialError)
    assert str(excinfo.value).startswith("Error executing tool get_transcript: API key required")
    assert "minimum 20 characters" in str(excinfo.value)
    assert created == []


def test_short_key_diagnostic(dispatcher):
    with pytest.raises(ToolExecutionError, match=r"length 9 \(starts with: too-sh\)"):
        run(dispatcher.call("get_transcript", {"videoId": "abc123", "apiKey": "too-short"}))


def test_key_is_cleaned(dispatcher, created):
    run(dispatcher.call("get_transcript", {"videoId": "abc123", "apiKey": f'\ufeff  "{TEST_API_KEY}"  '}))

    assert created == [TEST_API_KEY]


def test_argument_key_overrides_default(created):
    dispatcher = ToolDispatcher(
        client_factory=lambda key: created.append(key) or FakeYouTubeClient(transcripts={"abc123": "t"}),
        default_api_key="default-key-0123456789abcdef",
    )

    run(dispatcher.call("get_transcript", {"videoId": "abc123"}))
    run(dispatcher.call("get_transcript", {"videoId": "abc123", "apiKey": TEST_API_KEY}))

    assert created == ["default-key-0123456789abcdef", TEST_API_KEY]


def test_client_reused_per_key(dispatcher, created):
    other_key = "another-key-0123456789abcdef"

    for key in (TEST_API_KEY, TEST_API_KEY, other_key, TEST_API_KEY):
        run(dispatcher.call("get_transcript", {"videoId": "abc123", "apiKey": key}))

    assert created == [TEST_API_KEY, other_key]
    assert TEST_API_KEY in dispatcher.clients


def test_upstream_failure_is_wrapped(dispatcher):
    with pytest.raises(ToolExecutionError) as excinfo:
        run(dispatcher.call("get_channel_info", {"channelId": "UC404", "apiKey": TEST_API_KEY}))

    assert excinfo.value.status_code == 502
    assert str(excinfo.value) == (
        "Error executing tool get_channel_info: Failed to get channel info: Channel not found"
    )


def test_transcript_failure_is_wrapped(dispatcher):
    with pytest.raises(ToolExecutionError) as excinfo:
        run(dispatcher.call("get_summary", {"videoId": "missing", "apiKey": TEST_API_KEY}))

    assert excinfo.value.status_code == 502
    assert "Failed to fetch transcript" in str(excinfo.value)


def test_numeric_text_argument_is_coerced():
    """A number passed where text is expected is read as its string form."""
    args = parse_arguments(TOOL_SPECS["search_videos"], {"query": 2024, "maxResults": 3})

    assert args.query == "2024"
    assert args.max_results == 3
