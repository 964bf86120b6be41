"""
Theme scanning and content-nature classification for a set of videos.
"""

import math
from typing import Dict, List, Sequence, Tuple

from yt_insights.core.segmenter import segment
from yt_insights.models.schemas import VideoDigest

THEME_MARKERS = (
    "learn", "how", "tutorial", "guide", "tips", "tricks",
    "explain", "understand", "beginner", "advanced", "review",
    "comparison", "best", "worst", "free", "paid", "tool",
)

# label -> markers that imply it
CONTENT_TYPES = (
    ("Tutorial/Educational", ("tutorial", "how")),
    ("Reviews", ("review", "comparison")),
    ("Guide/How-to", ("guide", "tips")),
)

MAX_TOPICS = 50
DETAILED_DEPTH = 1000
MODERATE_DEPTH = 500


class ThemeScanner:
    """
    Accumulates theme markers over the transcripts of several videos.

    Markers are matched as plain substrings of the lower-cased transcript,
    so "how" also counts a transcript that only says "show". Each marker
    counts once per video no matter how often it occurs.
    """

    def __init__(self):
        self.tally: Dict[str, int] = {}
        self.topics: List[str] = []

    def scan(self, transcript: str) -> None:
        """Add one video's transcript to the tally."""
        lower_transcript = (transcript or "").lower()

        for marker in THEME_MARKERS:
            if marker in lower_transcript:
                self.tally[marker] = self.tally.get(marker, 0) + 1

        for sentence in segment(transcript, min_length=30, max_length=150):
            if len(self.topics) >= MAX_TOPICS:
                break
            self.topics.append(sentence)

    def top_themes(self, limit: int = 10) -> List[Tuple[str, int]]:
        """Markers by count, most frequent first; ties keep vocabulary order."""
        ranked = sorted(
            self.tally.items(),
            key=lambda item: (-item[1], THEME_MARKERS.index(item[0])),
        )
        return ranked[:limit]

    def content_types(self) -> str:
        labels = [
            label for label, markers in CONTENT_TYPES
            if any(marker in self.tally for marker in markers)
        ]
        return ", ".join(labels) if labels else "General Video Content"

    def report(self, digests: Sequence[VideoDigest]) -> str:
        """
        Render the content nature analysis.

        Args:
            digests: Summaries of the analyzed videos

        Returns:
            Multi-line report text
        """
        analysis = "Content Nature Analysis:\n\n"

        analysis += "Most Common Themes:\n"
        for keyword, count in self.top_themes():
            analysis += f"- {keyword} (appears {count} times)\n"
        analysis += "\n"

        analysis += f"Content Type: {self.content_types()}\n\n"

        analysis += "Overall Nature:\n"
        average_length = average_summary_length(digests)
        if average_length > DETAILED_DEPTH:
            analysis += "Content appears to be detailed and comprehensive, suggesting educational or in-depth content.\n"
        elif average_length > MODERATE_DEPTH:
            analysis += "Content is moderately detailed, suggesting informative videos with practical information.\n"
        else:
            analysis += "Content is concise, suggesting short-form or entertainment-focused videos.\n"

        analysis += f"Average content depth: {math.floor(average_length + 0.5)} characters per summary.\n"
        return analysis


def average_summary_length(digests: Sequence[VideoDigest]) -> float:
    """Mean summary length; 0 when nothing was analyzed."""
    if not digests:
        return 0.0
    return sum(len(digest.summary) for digest in digests) / len(digests)
