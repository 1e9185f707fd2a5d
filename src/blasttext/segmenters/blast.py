"""Regex segmentation engine that blasts text into ordered substrings."""

import re
from typing import List, Optional
from ..core.abc import Logger, Meter
from ..core.types import DelimiterKind, DelimiterRule, MatchSpan, WORD
from .patterns import BUILTIN_PATTERNS, resolve_pattern

class InvalidPatternError(ValueError):
    """Raised when a custom delimiter pattern is not a valid regular expression."""

    def __init__(self, pattern: str, error: Exception):
        super().__init__(f"Illegal regular expression: {pattern!r} ({error})")
        self.pattern = pattern
        self.error = error

# Built-in patterns are fixed, so compiling them here turns a broken pattern
# into an import failure rather than a runtime condition.
_COMPILED_BUILTINS = {
    kind: re.compile(pattern) for kind, pattern in BUILTIN_PATTERNS.items()
}

def compile_rule(rule: DelimiterRule) -> "re.Pattern[str]":
    """
    Compile the pattern for a delimiter rule.

    Args:
        rule: Delimiter rule to compile

    Returns:
        re.Pattern: Compiled pattern (shared constant for built-in rules)

    Raises:
        InvalidPatternError: If a custom pattern does not compile
    """
    if rule.is_builtin:
        return _COMPILED_BUILTINS[rule.kind]

    pattern = resolve_pattern(rule)
    try:
        return re.compile(pattern)
    except (re.error, OverflowError) as e:
        raise InvalidPatternError(pattern, e) from e

def _span_for(match: "re.Match[str]", rule: DelimiterRule) -> MatchSpan:
    """Convert a match into segment and capture offsets."""
    start, end = match.span()
    capture_start, capture_end = start, end
    if match.re.groups and match.start(1) != -1:
        capture_start, capture_end = match.span(1)

    if rule.kind is DelimiterKind.CUSTOM:
        # Custom patterns define their own segment through the first group
        return MatchSpan(capture_start, capture_end, capture_start, capture_end)

    # Built-in groups only trim whitespace; the segment keeps it so the
    # pieces concatenate back into the original text
    return MatchSpan(start, end, capture_start, capture_end)

def blast_spans(text: str, rule: DelimiterRule = WORD) -> List[MatchSpan]:
    """
    Scan text once and collect the offsets of every non-overlapping match.

    Offsets are ``str`` indices (code points), the same unit used for slicing.

    Args:
        text: Input text to scan
        rule: Delimiter rule to apply

    Returns:
        List[MatchSpan]: Match offsets in scan order

    Raises:
        InvalidPatternError: If a custom pattern does not compile
    """
    regex = compile_rule(rule)
    if not text:
        return []
    return [_span_for(m, rule) for m in regex.finditer(text)]

def blast(text: str, rule: DelimiterRule = WORD) -> List[str]:
    """
    Blast a string into pieces for a given delimiter rule.

    Only those pieces of the text that match the rule are returned::

        blast("Hallo World", WORD)
        # -> ["Hallo ", "World"]

    Args:
        text: Input text to segment
        rule: Delimiter rule to apply (defaults to ``WORD``)

    Returns:
        List[str]: Ordered segments, empty if nothing matched

    Raises:
        InvalidPatternError: If a custom pattern does not compile
    """
    return [text[span.start:span.end] for span in blast_spans(text, rule)]

class BlastSegmenter:
    """
    Segmenter bound to a single delimiter rule.
    Satisfies the ``Segmenter`` protocol and reports to an optional logger/meter.
    """

    def __init__(self, rule: DelimiterRule = WORD, *,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize segmenter.

        Args:
            rule: Delimiter rule used for every call
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.rule = rule
        self.log = logger
        self.meter = meter

    def spans(self, text: str) -> List[MatchSpan]:
        """Match offsets for text, reporting failures and segment counts."""
        try:
            spans = blast_spans(text, self.rule)
        except InvalidPatternError as e:
            if self.meter:
                self.meter.inc("blasttext.invalid_pattern")
            if self.log:
                self.log.error("blast_invalid_pattern", pattern=e.pattern, error=str(e.error))
            raise

        if self.meter:
            self.meter.inc("blasttext.blast_calls", rule=self.rule.kind.value)
            self.meter.observe("blasttext.segments", float(len(spans)), rule=self.rule.kind.value)
        if self.log:
            self.log.info("blast_complete",
                          rule=str(self.rule),
                          text_length=len(text),
                          segments=len(spans))
        return spans

    def segment(self, text: str) -> List[str]:
        """
        Segment text according to the bound rule.

        Args:
            text: Input text to segment

        Returns:
            List[str]: Ordered segments
        """
        return [text[span.start:span.end] for span in self.spans(text)]
