"""LangGraph node factories for BlastText integration."""

from typing import Union
from langchain_core.runnables import RunnableLambda
from ...core.abc import Segmenter
from ...core.types import DelimiterRule
from ...segmenters.blast import BlastSegmenter
from .state_keys import *

def make_blast_node(segmenter: Union[Segmenter, DelimiterRule],
                    text_key: str = TEXT,
                    output_key: str = BLAST_SEGMENTS):
    """
    Create a LangGraph node that blasts a text state value into segments.

    Args:
        segmenter: Configured segmenter, or a delimiter rule to build one from
        text_key: State key containing the text to blast
        output_key: State key receiving the list of segment strings

    Returns:
        RunnableLambda: Node that adds the segments to state
    """
    if isinstance(segmenter, DelimiterRule):
        segmenter = BlastSegmenter(segmenter)

    def _blast(state):
        text = state.get(text_key, "")
        return {output_key: segmenter.segment(text)}

    return RunnableLambda(_blast)

def make_blast_spans_node(segmenter: BlastSegmenter,
                          text_key: str = TEXT,
                          output_key: str = BLAST_SPANS):
    """
    Create a LangGraph node that records segment offsets instead of strings.

    Args:
        segmenter: Configured BlastSegmenter
        text_key: State key containing the text to blast
        output_key: State key receiving ``[{"start", "end", ...}]`` dicts

    Returns:
        RunnableLambda: Node that adds the span dicts to state
    """
    def _blast_spans(state):
        text = state.get(text_key, "")
        return {output_key: [span.__dict__ for span in segmenter.spans(text)]}

    return RunnableLambda(_blast_spans)
