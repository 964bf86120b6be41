"""
Topic-scoped insight selection and founder story composition.
"""

from typing import Dict, List, Tuple

from yt_insights.core.segmenter import normalize_whitespace, split_clauses
from yt_insights.models.schemas import KeyTopic

TOPIC_KEYWORDS: Dict[KeyTopic, Tuple[str, ...]] = {
    KeyTopic.FOUNDER_JOURNEY: (
        "started", "first customer", "mistake", "learned", "quit", "challenge", "pivot",
    ),
    KeyTopic.BUSINESS_MODEL: (
        "pricing", "subscription", "margins", "strategy", "positioning", "distribution", "acquisition",
    ),
    KeyTopic.REVENUE_AND_SCALE: (
        "revenue", "arpu", "mrr", "churn", "scale", "growth", "profit",
    ),
}

MAX_INSIGHTS = 8
MIN_INSIGHT_LENGTH = 40
MAX_INSIGHT_LENGTH = 220

SHORT_STORY_LENGTH = 400
MAX_STORY_LENGTH = 1200
STORY_CLAUSES = 3


def candidate_sentences(transcript: str) -> List[str]:
    return [
        clause for clause in split_clauses(transcript)
        if MIN_INSIGHT_LENGTH < len(clause) < MAX_INSIGHT_LENGTH
    ]


def select_insights(transcript: str, topic: KeyTopic) -> List[str]:
    """
    Select the sentences that talk about a topic.

    Args:
        transcript: Transcript text
        topic: Topic whose keywords a sentence must mention

    Returns:
        Up to eight matching sentences. When nothing matches, the first
        candidate sentence alone; empty only if there are no candidates.
    """
    keywords = TOPIC_KEYWORDS[KeyTopic(topic)]
    candidates = candidate_sentences(transcript)

    matches = []
    for sentence in candidates:
        lower = sentence.lower()
        if any(keyword in lower for keyword in keywords):
            matches.append(sentence.strip())
        if len(matches) >= MAX_INSIGHTS:
            break

    if not matches and candidates:
        matches.append(candidates[0])
    return matches


def compose_founder_story(transcript: str) -> str:
    """Opening and closing clauses of a transcript, capped at 1200 chars."""
    text = normalize_whitespace(transcript)
    if len(text) <= SHORT_STORY_LENGTH:
        return text

    clauses = split_clauses(text)
    start = ". ".join(clauses[:STORY_CLAUSES])
    end = ". ".join(clauses[-STORY_CLAUSES:])
    return f"{start}... {end}"[:MAX_STORY_LENGTH]
