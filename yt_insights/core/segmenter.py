"""
Lexical sentence splitting shared by the analysis modules.

Transcripts have no reliable grammar, so splitting is purely on punctuation.
"""

import re
from typing import List, Optional

_WHITESPACE = re.compile(r"\s+")
_SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
_CLAUSE_BOUNDARY = re.compile(r"[.!?]+\s")


def normalize_whitespace(text: Optional[str]) -> str:
    """Collapse whitespace runs to single spaces and trim the ends."""
    return _WHITESPACE.sub(" ", text or "").strip()


def segment(text: Optional[str], min_length: Optional[int] = None, max_length: Optional[int] = None) -> List[str]:
    """
    Split text into trimmed sentences on runs of ``.``, ``!`` and ``?``.

    Args:
        text: Raw text
        min_length: Keep only sentences longer than this
        max_length: Keep only sentences shorter than this

    Returns:
        Sentences in their original order
    """
    sentences = []
    for piece in _SENTENCE_BOUNDARY.split(normalize_whitespace(text)):
        sentence = piece.strip()
        if not sentence:
            continue
        if min_length is not None and len(sentence) <= min_length:
            continue
        if max_length is not None and len(sentence) >= max_length:
            continue
        sentences.append(sentence)
    return sentences


def split_clauses(text: Optional[str]) -> List[str]:
    """
    Split text where terminal punctuation is followed by whitespace.

    Unlike :func:`segment`, a period inside a token ("3.5", "acme.io") is not
    a boundary, and the final clause keeps its trailing punctuation.
    """
    return [piece for piece in _CLAUSE_BOUNDARY.split(normalize_whitespace(text)) if piece]
