"""Data types and result structures for BlastText operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

class DelimiterKind(str, Enum):
    """Named delimiter rules. ``custom`` carries its own pattern."""
    ALL = "all"
    CHARACTER = "character"
    WORD = "word"
    SENTENCE = "sentence"
    CUSTOM = "custom"

@dataclass(frozen=True)
class DelimiterRule:
    """
    Rule according to which a text is divided into segments.

    Use the module constants ``ALL``, ``CHARACTER``, ``WORD`` and ``SENTENCE``
    for the built-in rules and ``DelimiterRule.custom(pattern)`` for a
    caller-supplied regular expression.
    """
    kind: DelimiterKind
    pattern: Optional[str] = None    # only set for custom rules

    def __post_init__(self):
        # Accept plain strings ("word") as well as enum members
        object.__setattr__(self, "kind", DelimiterKind(self.kind))
        if self.kind is DelimiterKind.CUSTOM:
            if self.pattern is None:
                raise ValueError("Custom delimiter requires a pattern")
        elif self.pattern is not None:
            raise ValueError(f"Delimiter '{self.kind.value}' does not take a pattern")

    @classmethod
    def custom(cls, pattern: str) -> "DelimiterRule":
        """
        Create a rule from a custom regular expression.

        The following example would result in only "World" being kept::

            blast("Hallo World!", DelimiterRule.custom(r"World"))

        Args:
            pattern: Regular expression in Python ``re`` syntax, used verbatim

        Returns:
            DelimiterRule: Custom rule carrying the pattern
        """
        return cls(DelimiterKind.CUSTOM, pattern)

    @classmethod
    def parse(cls, name: str, pattern: Optional[str] = None) -> "DelimiterRule":
        """Build a rule from its configuration name, e.g. ``"sentence"``."""
        try:
            kind = DelimiterKind(name.strip().lower())
        except ValueError:
            choices = ", ".join(k.value for k in DelimiterKind)
            raise ValueError(f"Unknown delimiter '{name}' (expected one of: {choices})")
        return cls(kind, pattern)

    @property
    def is_builtin(self) -> bool:
        return self.kind is not DelimiterKind.CUSTOM

    def __str__(self) -> str:
        if self.is_builtin:
            return self.kind.value
        return f"custom({self.pattern!r})"

ALL = DelimiterRule(DelimiterKind.ALL)
CHARACTER = DelimiterRule(DelimiterKind.CHARACTER)
WORD = DelimiterRule(DelimiterKind.WORD)
SENTENCE = DelimiterRule(DelimiterKind.SENTENCE)

@dataclass(frozen=True)
class MatchSpan:
    """Character offsets of one match within the scanned text."""
    start: int                  # segment start (code point index)
    end: int                    # segment end, exclusive
    capture_start: int          # primary capturing group start
    capture_end: int            # primary capturing group end, exclusive

    @property
    def length(self) -> int:
        return self.end - self.start

@dataclass(frozen=True)
class Segment:
    """One blasted piece of text, ready to be displayed or processed on its own."""
    id: str                     # stable identity of this record (uuid4 hex)
    index: int                  # position in scan order
    value: str                  # copied substring, independent of the source text
    start: int
    end: int
