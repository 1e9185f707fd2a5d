"""Delimiter resolver: maps a delimiter rule to its regular expression text."""

from typing import Dict
from ..core.types import DelimiterKind, DelimiterRule

# Characters that "." must not match (Unicode line terminators)
LINE_TERMINATORS = "\n\x0b\x0c\r\x85\u2028\u2029"

# Capturing group that matches any character except line terminators
ALL_PATTERN = "([^" + LINE_TERMINATORS + "])"

# Capturing group that matches any non-whitespace character
CHARACTER_PATTERN = r"\s*(\S)\s*"

# Matches strings in between whitespace characters
WORD_PATTERN = r"\s*(\S+)\s*"

# Matches phrases either ending in Latin alphabet punctuation or located at
# the end of the text, plus any closing quotes that follow.
# (Linebreaks are not considered punctuation.)
SENTENCE_PATTERN = r"\s*(?=\S)(([.]{2,})?[^!?]+?([.…!?]+|(?=\s+$)|$)(\s*[′’'”″“\")»]+)*)\s*"

BUILTIN_PATTERNS: Dict[DelimiterKind, str] = {
    DelimiterKind.ALL: ALL_PATTERN,
    DelimiterKind.CHARACTER: CHARACTER_PATTERN,
    DelimiterKind.WORD: WORD_PATTERN,
    DelimiterKind.SENTENCE: SENTENCE_PATTERN,
}

def resolve_pattern(rule: DelimiterRule) -> str:
    """
    Resolve a delimiter rule to regular expression text.

    Custom patterns are passed through untouched; they are not validated here.

    Args:
        rule: Delimiter rule to resolve

    Returns:
        str: Pattern text in Python ``re`` syntax
    """
    if rule.kind is DelimiterKind.CUSTOM:
        return rule.pattern
    return BUILTIN_PATTERNS[rule.kind]
