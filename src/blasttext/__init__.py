"""
BlastText - blast text into segments by word, sentence, character or regex.

A pure library that assumes nothing about presentation or localization.
The host application renders the segments and injects localization.
"""

from .core.types import (
    ALL,
    CHARACTER,
    SENTENCE,
    WORD,
    DelimiterKind,
    DelimiterRule,
    MatchSpan,
    Segment,
)
from .segmenters.blast import BlastSegmenter, InvalidPatternError, blast, blast_spans
from .runtime.blast_text import BlastText

__version__ = "0.1.0"

__all__ = [
    "ALL",
    "CHARACTER",
    "SENTENCE",
    "WORD",
    "DelimiterKind",
    "DelimiterRule",
    "MatchSpan",
    "Segment",
    "BlastSegmenter",
    "InvalidPatternError",
    "blast",
    "blast_spans",
    "BlastText",
]
