"""
Module for summarizing transcripts with extractive heuristics.
"""

from typing import List

from yt_insights.core.segmenter import normalize_whitespace, segment

KEY_POINT_OPENERS = ("we", "they", "this")
KEY_POINT_MARKERS = ("important", "learn", "understand", "key")


class TranscriptSummarizer:
    """Class to handle transcript summarization operations."""

    min_sentence_length = 20
    max_key_points = 5

    def summarize(self, transcript_text: str) -> str:
        """
        Summarize a transcript text.

        Short transcripts (three qualifying sentences or fewer) are returned
        whitespace-normalized but otherwise untouched. Longer ones become an
        overview built from the opening and closing sentences, preceded by
        any key points found.

        Args:
            transcript_text: Transcript text, possibly already truncated

        Returns:
            Summarized text
        """
        cleaned = normalize_whitespace(transcript_text)
        sentences = segment(cleaned, min_length=self.min_sentence_length)

        if len(sentences) <= 3:
            return cleaned

        # The two blocks overlap when there are only a few sentences
        block_size = max(2, len(sentences) // 3)
        start_sentences = ". ".join(sentences[:block_size])
        end_sentences = ". ".join(sentences[-block_size:])

        key_points = self.extract_key_points(sentences)

        summary = ""
        if key_points:
            bullets = "\n".join(f"- {point}" for point in key_points)
            summary += f"Key Points:\n{bullets}\n\n"

        summary += f"Overview: {start_sentences}... {end_sentences}"
        return summary

    def extract_key_points(self, sentences: List[str]) -> List[str]:
        """
        Pick sentences that read like key points.

        Args:
            sentences: Candidate sentences in transcript order

        Returns:
            Up to five key point sentences, in discovery order
        """
        key_points = []

        for sentence in sentences:
            lower_sentence = sentence.lower().strip()
            if (
                30 < len(lower_sentence) < 150
                and (
                    lower_sentence.startswith(KEY_POINT_OPENERS)
                    or any(marker in lower_sentence for marker in KEY_POINT_MARKERS)
                )
            ):
                trimmed = sentence.strip()
                if len(trimmed) < 200:
                    key_points.append(trimmed)

            if len(key_points) >= self.max_key_points:
                break

        return key_points


def generate_summary(transcript_text: str) -> str:
    """Summarize with the default summarizer."""
    return TranscriptSummarizer().summarize(transcript_text)
