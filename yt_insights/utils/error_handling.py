"""
Centralized error handling for the tool server.

Every failure a tool call can surface derives from ``ToolError`` and carries
the HTTP status the API layer answers with.
"""

import json
from typing import Any, Dict, Optional

from yt_insights.config import config
from yt_insights.utils.logger import logging


class ToolError(Exception):
    """Base class for errors surfaced to tool callers."""

    status_code = 500


class MissingParameterError(ToolError):
    """A required tool argument is absent or empty."""

    status_code = 400


class InvalidParameterError(ToolError):
    """A tool argument is present but not acceptable."""

    status_code = 400


class CredentialError(ToolError):
    """No usable YouTube API key was supplied."""

    status_code = 401


class UnknownToolError(ToolError):
    """The requested tool is not registered."""

    status_code = 404


class UpstreamFetchError(ToolError):
    """A single item (transcript, description) could not be fetched."""

    status_code = 502


class UpstreamLookupError(ToolError):
    """A lookup the whole call depends on failed (channel, playlist, search)."""

    status_code = 502


class ToolExecutionError(ToolError):
    """Wraps any failure raised while a tool runs."""

    def __init__(self, tool_name: str, cause: Exception):
        super().__init__(f"Error executing tool {tool_name}: {cause}")
        self.tool_name = tool_name
        self.cause = cause
        self.status_code = getattr(cause, "status_code", 500)


def describe_key(api_key: Optional[str]) -> str:
    """
    Describe an API key without revealing it.

    Args:
        api_key: The key to describe

    Returns:
        Length and a short prefix, or a note that no key was found
    """
    if not api_key:
        return "No API key found"
    return f"Found key with length {len(api_key)} (starts with: {api_key[:min(6, len(api_key))]})"


def credential_error(api_key: Optional[str]) -> CredentialError:
    """Build the error raised when a key is missing or too short."""
    return CredentialError(
        f"API key required and must be valid (minimum {config.MIN_API_KEY_LENGTH} characters). "
        f"Diagnostic: {describe_key(api_key)}. "
        "Pass apiKey with the tool call or set YOUTUBE_API_KEY=your_key in the .env file "
        "(no quotes, no spaces around =)."
    )


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    try:
        logging.info(f"Diagnostic info: {json.dumps(context, default=str)}")
    except (TypeError, ValueError) as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")
