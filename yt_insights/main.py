"""
Command line entry point: run one tool and print its output.
"""

import argparse
import asyncio
import json
import sys
from typing import Any, Dict, List, Optional

import requests
from dotenv import load_dotenv

from yt_insights.api.client import ApiClient, ApiError
from yt_insights.core.dispatcher import ToolDispatcher
from yt_insights.core.tools import TOOL_SPECS
from yt_insights.utils.error_handling import ToolError
from yt_insights.utils.logger import logging

# Only these arguments take JSON values; everything else stays a string
JSON_ARGUMENTS = ("maxResults", "maxVideos", "confirm")


def parse_tool_arguments(pairs: List[str]) -> Dict[str, Any]:
    """
    Turn ``key=value`` pairs into tool arguments.

    Numeric and boolean arguments are JSON-decoded; every other value is
    kept as the literal string.
    """
    arguments = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected key=value, got: {pair}")
        if key in JSON_ARGUMENTS:
            try:
                value = json.loads(value)
            except ValueError:
                logging.debug(f"Passing {key} through as text: {value}")
        arguments[key] = value
    return arguments


def run_tool(name: str, arguments: Dict[str, Any], remote: Optional[str] = None) -> str:
    """
    Run a tool in-process, or on a server when ``remote`` is given.

    Args:
        name: Tool name
        arguments: Tool arguments using their wire names
        remote: Base URL of a running server

    Returns:
        The tool's text output
    """
    if remote:
        return ApiClient(base_url=remote).call_tool(name, arguments)
    return asyncio.run(ToolDispatcher().call(name, arguments))


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="YouTube Insights tools")
    parser.add_argument("tool", choices=sorted(TOOL_SPECS), help="Tool to run")
    parser.add_argument("--arg", action="append", default=[], metavar="KEY=VALUE",
                        help="Tool argument, e.g. --arg videoId=dQw4w9WgXcQ (repeatable)")
    parser.add_argument("--remote", help="Base URL of a running tool server")

    args = parser.parse_args(argv)

    # Load environment variables
    load_dotenv()

    try:
        output = run_tool(args.tool, parse_tool_arguments(args.arg), args.remote)
    except (ValueError, ToolError, ApiError, requests.RequestException) as e:
        logging.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
