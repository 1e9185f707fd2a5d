"""Default state key names for LangGraph integration."""

# Standard state keys used by BlastText nodes
TEXT = "text"
BLAST_SEGMENTS = "blast_segments"

# Additional optional keys
BLAST_SPANS = "blast_spans"
