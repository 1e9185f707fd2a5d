"""Small utility functions."""

import locale as _locale
import re
from typing import Optional

_LOCALE_SEPARATORS = re.compile(r"[_\-.@]")

def language_code(locale: Optional[str]) -> Optional[str]:
    """
    Extract the language code from a locale identifier.

    ``"de_DE"``, ``"de-DE"`` and ``"de_DE.UTF-8"`` all yield ``"de"``.
    Returns None for an empty or missing locale.
    """
    if not locale:
        return None
    code = _LOCALE_SEPARATORS.split(locale.strip(), maxsplit=1)[0]
    return code.lower() or None

def current_locale() -> Optional[str]:
    """Locale of the running process, or None if it cannot be determined."""
    try:
        name, _ = _locale.getlocale()
    except ValueError:
        return None
    return name
