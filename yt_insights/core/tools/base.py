"""
Base class for tools: one tool turns validated arguments into a text report.
"""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel

from yt_insights.core.entities import EntityExtractor, RegexEntityExtractor
from yt_insights.core.summarizer import TranscriptSummarizer
from yt_insights.core.youtube_client import YouTubeClient


class BaseTool(ABC):
    """A tool that composes analysis output into a report."""

    def __init__(
        self,
        client: YouTubeClient,
        summarizer: Optional[TranscriptSummarizer] = None,
        extractor: Optional[EntityExtractor] = None,
    ):
        self.client = client
        self.summarizer = summarizer or TranscriptSummarizer()
        self.extractor = extractor or RegexEntityExtractor()

    @abstractmethod
    async def run(self, args: BaseModel) -> str:
        """Run the tool and return its text output."""
