from pydantic import BaseModel, Field
from typing import List, Dict, Any


class TextContent(BaseModel):
    """One block of tool output."""
    type: str = "text"
    text: str


class ToolCallResponse(BaseModel):
    """Model for tool call responses."""
    content: List[TextContent]

    @classmethod
    def from_text(cls, text: str) -> "ToolCallResponse":
        return cls(content=[TextContent(text=text)])


class ToolDescriptor(BaseModel):
    """Model describing a registered tool."""
    name: str
    description: str
    input_schema: Dict[str, Any] = Field(..., alias="inputSchema")

    model_config = {"populate_by_name": True}


class ToolListResponse(BaseModel):
    """Model for the tool listing."""
    tools: List[ToolDescriptor]
