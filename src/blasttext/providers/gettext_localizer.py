"""Localizer backed by compiled gettext catalogs."""

import gettext
from pathlib import Path
from typing import Optional, Union
from ..core.util import current_locale, language_code


class _MissingMessage(gettext.NullTranslations):
    """Last fallback in a translation chain; marks a message as untranslated."""

    def gettext(self, message):
        return None


class GettextLocalizer:
    """Resolve keys through ``<localedir>/<lang>/LC_MESSAGES/<domain>.mo`` files.

    A missing catalog or message falls back to the key itself.
    """

    def __init__(self, localedir: Union[str, Path], domain: str = "messages",
                 default_locale: Optional[str] = None):
        """Initialize gettext localizer.

        Args:
            localedir: Directory containing one sub-directory per language code
            domain: gettext domain, i.e. the ``.mo`` file name without extension
            default_locale: Locale used when none is passed to ``localize``;
                the process locale if None
        """
        self.localedir = Path(localedir)
        self.domain = domain
        self.default_locale = default_locale

    def translation(self, locale: Optional[str] = None) -> gettext.NullTranslations:
        """Translations for the locale's language, or a pass-through fallback."""
        lang = language_code(locale or self.default_locale or current_locale())
        if not lang:
            return gettext.NullTranslations()
        return gettext.translation(self.domain, localedir=str(self.localedir),
                                   languages=[lang], fallback=True)

    def lookup(self, key: str, locale: Optional[str] = None) -> Optional[str]:
        """Return the localized string for key, or None if there is no match."""
        translations = self.translation(locale)
        translations.add_fallback(_MissingMessage())
        return translations.gettext(key)

    def localize(self, key: str, locale: Optional[str] = None) -> str:
        """Return the localized string for key, or the key if there is no match."""
        content = self.lookup(key, locale)
        return key if content is None else content


def create_gettext_localizer(localedir: Union[str, Path], domain: str = "messages",
                             default_locale: Optional[str] = None) -> GettextLocalizer:
    """Create a gettext localizer instance."""
    return GettextLocalizer(localedir, domain=domain, default_locale=default_locale)
