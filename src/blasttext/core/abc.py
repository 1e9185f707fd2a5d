"""Protocol interfaces for dependency injection from the host application."""

from typing import Protocol, List, Optional, Any

class Segmenter(Protocol):
    """Text segmenter. ``BlastSegmenter`` is the regex-driven implementation."""

    def segment(self, text: str) -> List[str]:
        """
        Segment text into ordered pieces.

        Args:
            text: Input text to segment

        Returns:
            List[str]: List of text segments
        """
        ...

class Localizer(Protocol):
    """Host-injected localization lookup performed before text is blasted."""

    def localize(self, key: str, locale: Optional[str] = None) -> str:
        """
        Resolve a localization key for a locale.

        Args:
            key: Symbolic localization key
            locale: Locale identifier such as ``"de_DE"``; provider default if None

        Returns:
            str: Localized string, or the key itself when there is no match
        """
        ...

    # Providers may also offer lookup(key, locale) -> Optional[str], which
    # returns None instead of the key for a missing message.

class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...

class Meter(Protocol):
    """Optional metrics collection interface."""

    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...

    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
