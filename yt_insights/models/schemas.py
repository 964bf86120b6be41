"""
Data models for the YouTube insights tool server.
"""
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator

from yt_insights.utils.helpers import extract_video_id


class MonthlyRevenue(str, Enum):
    """Revenue bands a founder scout search can target."""
    TEN_K = "$10k/month"
    THIRTY_K = "$30k/month"
    FIFTY_K = "$50k/month"
    HUNDRED_K = "$100k/month"


class KeyTopic(str, Enum):
    """Topics an insight search can be scoped to."""
    FOUNDER_JOURNEY = "Founder Journey"
    BUSINESS_MODEL = "Business Model and Strategy"
    REVENUE_AND_SCALE = "Revenue Streams and Scale"


class Geography(str, Enum):
    """Target geographies for founder scout searches."""
    USA = "USA"
    EUROPE = "Europe"
    ASIA = "Asia"
    GLOBAL = "Global"


class ExtractedEntities(BaseModel):
    """Founder and business names pulled out of a video."""
    founder_name: str = "Unknown"
    business_name: str = "Unknown"


class BusinessReport(BaseModel):
    """One founder scout search result after entity/insight/story extraction."""
    founder_name: str = "Unknown"
    business_name: str = "Unknown"
    monthly_revenue: MonthlyRevenue
    insights: List[str] = Field(default_factory=list, max_length=8)
    founder_story: str = Field("", max_length=1200)
    source: str

    model_config = ConfigDict(frozen=True)


class VideoDigest(BaseModel):
    """Summary of one video analyzed as part of a channel."""
    video_id: str
    title: str = ""
    summary: str


class SearchResultItem(BaseModel):
    """A search hit with its transcript excerpt and summary."""
    video_id: str
    title: str = ""
    channel_title: str = ""
    published_at: str = ""
    description: str = ""
    transcript: str
    summary: str
    link: str
    error: Optional[str] = None


# Tool arguments. Wire names are camelCase; attributes are snake_case.

class ToolArgs(BaseModel):
    """Arguments shared by every tool."""
    api_key: Optional[str] = Field(None, alias="apiKey", description="YouTube Data API v3 key")

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)


class VideoArgs(ToolArgs):
    """Arguments for tools that work on a single video."""
    video_id: str = Field(
        ...,
        alias="videoId",
        min_length=1,
        description="YouTube video ID (e.g., from URL youtube.com/watch?v=VIDEO_ID)",
    )

    @field_validator("video_id")
    def accept_video_urls(cls, v):
        return extract_video_id(v) or v


class SearchArgs(ToolArgs):
    """Arguments for the video search tool."""
    query: str = Field(..., min_length=1, description="Search query for YouTube videos")
    max_results: int = Field(
        5, alias="maxResults", ge=1, le=50,
        description="Maximum number of results to return (default: 5)",
    )


class ChannelArgs(ToolArgs):
    """Arguments for tools that work on a channel."""
    channel_id: str = Field(..., alias="channelId", min_length=1, description="YouTube channel ID")


class ChannelAnalysisArgs(ChannelArgs):
    """Arguments for the channel analysis tool."""
    max_videos: int = Field(
        50, alias="maxVideos", ge=1, le=50,
        description="Maximum number of videos to analyze (default: 50)",
    )


class FounderScoutArgs(ToolArgs):
    """Arguments for the founder scout tool. Selections may be left out."""
    monthly_revenue: Optional[MonthlyRevenue] = Field(
        None, alias="monthlyRevenue",
        description="One of: $10k/month, $30k/month, $50k/month, $100k/month",
    )
    key_topic: Optional[KeyTopic] = Field(
        None, alias="keyTopic",
        description="One of: Founder Journey, Business Model and Strategy, Revenue Streams and Scale",
    )
    target_geography: Optional[Geography] = Field(
        None, alias="targetGeography",
        description="One of: USA, Europe, Asia, Global",
    )
    max_results: int = Field(
        5, alias="maxResults", ge=1, le=50,
        description="Max number of videos to analyze (default: 5)",
    )
    confirm: bool = Field(
        True,
        description="If true, only returns confirmation. Set false to fetch results.",
    )

    @field_validator("monthly_revenue", "key_topic", "target_geography", mode="before")
    def blank_is_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def has_selections(self) -> bool:
        return None not in (self.monthly_revenue, self.key_topic, self.target_geography)
