"""
Founder and business name extraction.

Extraction is heuristic: an ordered list of patterns per entity is tried
against the transcript and the first match wins. Callers depend only on
``EntityExtractor`` so another strategy can be plugged in.
"""

import re
from abc import ABC, abstractmethod
from typing import Optional, Pattern, Sequence

from yt_insights.core.segmenter import normalize_whitespace
from yt_insights.models.schemas import ExtractedEntities

UNKNOWN = "Unknown"

# 1-3 capitalized words
_PERSON = r"([A-Z][a-z]+(?: [A-Z][a-z]+){0,2})"
# 1-4 capitalized words that may carry digits and ' & -
_ORGANIZATION = r"([A-Z][\w'&-]+(?: [A-Z][\w'&-]+){0,3})"

FOUNDER_PATTERNS = (
    re.compile(r"(?i:my name is) " + _PERSON),
    re.compile(r"(?i:i'm) " + _PERSON),
    re.compile(r"(?i:i am) " + _PERSON),
    re.compile(r"(?i:with) " + _PERSON),
)

BUSINESS_PATTERNS = (
    re.compile(r"at " + _ORGANIZATION),
    re.compile(r"from " + _ORGANIZATION),
    re.compile(r"(?i:company (?:called|named)) " + _ORGANIZATION),
    re.compile(r"(?i:founder of) " + _ORGANIZATION),
)


class EntityExtractor(ABC):
    """Strategy for pulling founder and business names out of a video."""

    @abstractmethod
    def extract(self, title: str, channel_title: str, transcript: str) -> ExtractedEntities:
        """
        Extract the founder and business names.

        Args:
            title: Video title
            channel_title: Name of the channel that published the video
            transcript: Transcript (or description) text

        Returns:
            ExtractedEntities, with "Unknown" for anything not found
        """


class RegexEntityExtractor(EntityExtractor):
    """Ordered regex patterns with channel and title fallbacks."""

    def __init__(
        self,
        founder_patterns: Sequence[Pattern] = FOUNDER_PATTERNS,
        business_patterns: Sequence[Pattern] = BUSINESS_PATTERNS,
    ):
        self.founder_patterns = founder_patterns
        self.business_patterns = business_patterns

    def extract(self, title: str, channel_title: str, transcript: str) -> ExtractedEntities:
        transcript = transcript or ""

        founder_name = _first_match(self.founder_patterns, transcript)
        if not founder_name and channel_title:
            founder_name = normalize_whitespace(channel_title)

        business_name = _first_match(self.business_patterns, transcript)
        if not business_name:
            business_name = _title_segment(title)

        return ExtractedEntities(
            founder_name=founder_name or UNKNOWN,
            business_name=business_name or UNKNOWN,
        )


def _first_match(patterns: Sequence[Pattern], text: str) -> Optional[str]:
    for pattern in patterns:
        match = pattern.search(text)
        if match and match.group(1):
            return normalize_whitespace(match.group(1))
    return None


def _title_segment(title: str) -> Optional[str]:
    """Second ``|``-separated part of a title, e.g. "How I did it | Acme"."""
    parts = [normalize_whitespace(part) for part in (title or "").split("|")]
    if len(parts) > 1:
        return parts[1]
    return None
