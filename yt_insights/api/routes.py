"""
API routes for the YouTube insights tool server.
"""

from functools import lru_cache
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Path

from yt_insights.api.schems import ToolCallResponse, ToolDescriptor, ToolListResponse
from yt_insights.core.dispatcher import ToolDispatcher
from yt_insights.utils.error_handling import ToolError
from yt_insights.utils.logger import logging

router = APIRouter(prefix="/api/v1", tags=["tools"])


@lru_cache(maxsize=1)
def get_dispatcher() -> ToolDispatcher:
    """
    Get the process-wide dispatcher.

    This is a dependency that will be used in FastAPI route functions, and
    it owns the API client cache.
    """
    return ToolDispatcher()


@router.get("/tools", response_model=ToolListResponse, response_model_by_alias=True)
async def list_tools(dispatcher: ToolDispatcher = Depends(get_dispatcher)):
    """List the available tools and their input schemas."""
    return ToolListResponse(
        tools=[ToolDescriptor(**descriptor) for descriptor in dispatcher.list_tools()]
    )


@router.post("/tools/{name}", response_model=ToolCallResponse)
async def call_tool(
    name: str = Path(..., description="Tool name, e.g. get_summary"),
    arguments: Optional[Dict[str, Any]] = Body(default=None),
    dispatcher: ToolDispatcher = Depends(get_dispatcher),
):
    """
    Call a tool with its arguments as the JSON body.

    - Argument names use the wire form (``videoId``, ``maxResults``, ...)
    - Errors come back as ``{"detail": "..."}`` with a matching status code
    """
    try:
        text = await dispatcher.call(name, arguments or {})
    except ToolError as e:
        logging.error(f"Tool call {name} failed: {str(e)}")
        raise HTTPException(status_code=e.status_code, detail=str(e))

    return ToolCallResponse.from_text(text)
