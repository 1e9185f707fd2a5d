"""BlastText component: blasted content as identifiable segment records."""

import uuid
from typing import Callable, Iterator, List, Optional, TypeVar
from ..core.abc import Localizer, Logger, Meter
from ..core.types import DelimiterRule, MatchSpan, Segment, WORD
from ..segmenters.blast import BlastSegmenter, blast_spans

T = TypeVar("T")

class BlastText:
    """
    Text blasted into segments according to a delimiter rule.

        BlastText("Hello World", delimiter=WORD).values
        # -> ["Hello ", "World"]

    Use ``BlastText.localized`` to resolve a localization key before blasting.
    Each access to ``spans``, ``segments``, ``values`` or iteration is one
    logged and metered blast call; ``len()`` is not.
    """

    def __init__(self, content: str, delimiter: DelimiterRule = WORD, *,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize with content that is displayed without localization.

        Args:
            content: The string to blast, used verbatim
            delimiter: Rule according to which the content is divided
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.content = content
        self.delimiter = delimiter
        self.segmenter = BlastSegmenter(delimiter, logger=logger, meter=meter)

    @classmethod
    def localized(cls, key: str, localizer: Localizer, *, locale: Optional[str] = None,
                  delimiter: DelimiterRule = WORD,
                  logger: Optional[Logger] = None, meter: Optional[Meter] = None) -> "BlastText":
        """
        Initialize from a localization key.

        The key is resolved by the injected localizer; when no localized string
        exists the key itself is blasted. A localizer with a
        ``lookup(key, locale)`` method that returns None for a missing key is
        asked through it, so a translation equal to its key is not a fallback.

        Args:
            key: Localization key
            localizer: Localization provider (implements Protocol)
            locale: Locale to resolve for; provider default if None
            delimiter: Rule according to which the content is divided
            logger: Optional structured logger
            meter: Optional metrics collector

        Returns:
            BlastText: Component holding the localized content
        """
        lookup = getattr(localizer, "lookup", None)
        if lookup is not None:
            content = lookup(key, locale)
            missing = content is None
            if missing:
                content = key
        else:
            content = localizer.localize(key, locale)
            missing = content == key
        if logger and missing:
            logger.warn("localization_fallback", key=key, locale=locale)
        return cls(content, delimiter, logger=logger, meter=meter)

    @property
    def spans(self) -> List[MatchSpan]:
        """Character offsets of each segment in ``content``."""
        return self.segmenter.spans(self.content)

    @property
    def segments(self) -> List[Segment]:
        """
        Blasted content as fresh segment records.

        Every access blasts the content again and assigns new identities.
        """
        return [
            Segment(id=uuid.uuid4().hex,
                    index=i,
                    value=self.content[span.start:span.end],
                    start=span.start,
                    end=span.end)
            for i, span in enumerate(self.spans)
        ]

    @property
    def values(self) -> List[str]:
        return [self.content[span.start:span.end] for span in self.spans]

    def map_segments(self, modifier: Callable[[Segment], T]) -> List[T]:
        """Apply a modifier to each segment in order and collect the results."""
        return [modifier(segment) for segment in self.segments]

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        # Counting is not a blast call; bypass the segmenter's log and meter.
        return len(blast_spans(self.content, self.delimiter))

    def __repr__(self) -> str:
        return f"BlastText({self.content!r}, delimiter={self.delimiter})"
