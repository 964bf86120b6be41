"""
Tool call dispatch shared by the HTTP and stdio transports.
"""

from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from yt_insights.config import config, clean_api_key
from yt_insights.core.entities import EntityExtractor, RegexEntityExtractor
from yt_insights.core.summarizer import TranscriptSummarizer
from yt_insights.core.tools import TOOL_SPECS, ToolSpec
from yt_insights.core.youtube_client import YouTubeClient
from yt_insights.utils.caching import ClientCache
from yt_insights.utils.error_handling import (
    InvalidParameterError,
    MissingParameterError,
    ToolExecutionError,
    UnknownToolError,
    credential_error,
    log_diagnostic_info,
)
from yt_insights.utils.logger import logging


class ToolDispatcher:
    """Validates tool arguments, resolves the API client and runs tools."""

    def __init__(
        self,
        clients: Optional[ClientCache] = None,
        client_factory: Callable[[str], Any] = YouTubeClient,
        default_api_key: Optional[str] = config.YOUTUBE_API_KEY,
        extractor: Optional[EntityExtractor] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            clients: Cache of API clients per credential
            client_factory: Builds a client from an API key
            default_api_key: Key used when a call does not pass ``apiKey``
            extractor: Entity extraction strategy for founder scout
        """
        self.clients = clients if clients is not None else ClientCache()
        self.client_factory = client_factory
        self.default_api_key = default_api_key
        self.summarizer = TranscriptSummarizer()
        self.extractor = extractor or RegexEntityExtractor()

    def list_tools(self) -> List[Dict[str, Any]]:
        """Describe every registered tool."""
        return [
            {
                "name": spec.name,
                "description": spec.description,
                "inputSchema": spec.input_schema(),
            }
            for spec in TOOL_SPECS.values()
        ]

    def get_spec(self, name: str) -> ToolSpec:
        spec = TOOL_SPECS.get(name)
        if spec is None:
            raise UnknownToolError(f"Unknown tool: {name}")
        return spec

    def resolve_api_key(self, arguments: Dict[str, Any]) -> str:
        """
        Pick and validate the API key for a call.

        The ``apiKey`` argument wins over the configured key.
        """
        raw_key = arguments.get("apiKey") or self.default_api_key
        api_key = clean_api_key(raw_key)

        log_diagnostic_info({
            "has_api_key_in_args": bool(arguments.get("apiKey")),
            "has_default_api_key": bool(self.default_api_key),
            "api_key_length": len(api_key) if api_key else 0,
        })

        if not api_key or len(api_key) < config.MIN_API_KEY_LENGTH:
            raise credential_error(api_key)
        return api_key

    async def call(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> str:
        """
        Run a tool.

        Args:
            name: Registered tool name
            arguments: Tool arguments with their wire (camelCase) names

        Returns:
            The tool's text output

        Raises:
            ToolExecutionError: Wraps every failure, including an unknown
                tool or a missing API key; its status comes from the cause
        """
        arguments = {key: value for key, value in (arguments or {}).items() if value is not None}

        logging.info(f"Running tool {name}")
        try:
            spec = self.get_spec(name)
            api_key = self.resolve_api_key(arguments)
            client = self.clients.get_or_create(api_key, self.client_factory)
            args = parse_arguments(spec, arguments)
            tool = spec.tool_cls(client, summarizer=self.summarizer, extractor=self.extractor)
            return await tool.run(args)
        except Exception as e:
            logging.error(f"Tool {name} failed: {e}")
            raise ToolExecutionError(name, e) from e


def parse_arguments(spec: ToolSpec, arguments: Dict[str, Any]):
    """
    Validate raw arguments against a tool's model.

    Raises:
        MissingParameterError: A required argument is absent or empty
        InvalidParameterError: An argument has an unacceptable value
    """
    try:
        return spec.args_model.model_validate(arguments)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            if error["type"] in ("missing", "string_too_short"):
                raise MissingParameterError(f"{field} parameter is required") from e
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise InvalidParameterError(f"Invalid value for {field}: {first['msg']}") from e
