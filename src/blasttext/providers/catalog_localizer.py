"""Mapping-backed localizer with YAML catalog loading."""

import yaml
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union
from ..core.util import current_locale, language_code


class CatalogLoadError(Exception):
    """Exception raised when a localization catalog cannot be loaded."""
    pass


class CatalogLocalizer:
    """Localizer that looks keys up in per-language string tables.

    Catalogs are keyed by language code (``"de"``, ``"en"``). Catalog keys and
    lookup locales such as ``"de_AT"`` are both reduced to their language code.
    """

    def __init__(self, catalogs: Mapping[str, Mapping[str, str]],
                 default_locale: Optional[str] = None):
        """Initialize catalog localizer.

        Args:
            catalogs: Mapping of language or locale code to ``{key: localized string}``;
                ``"de_DE"`` and ``"de-DE"`` are stored under ``"de"``
            default_locale: Locale used when none is passed to ``localize``;
                the process locale if None

        Raises:
            ValueError: If a catalog key has no language code
        """
        self.catalogs: Dict[str, Dict[str, str]] = {}
        for lang, table in catalogs.items():
            code = language_code(str(lang))
            if code is None:
                raise ValueError(f"Catalog key {lang!r} has no language code")
            self.catalogs.setdefault(code, {}).update(table)
        self.default_locale = default_locale

    @property
    def languages(self):
        return sorted(self.catalogs)

    def lookup(self, key: str, locale: Optional[str] = None) -> Optional[str]:
        """Return the localized string for key, or None if there is no match."""
        lang = language_code(locale or self.default_locale or current_locale())
        table = self.catalogs.get(lang) if lang else None
        if table is None:
            return None
        return table.get(key)

    def localize(self, key: str, locale: Optional[str] = None) -> str:
        """Return the localized string for key, or the key if there is no match."""
        content = self.lookup(key, locale)
        return key if content is None else content


def _build_catalogs(data: Any, source: str) -> Dict[str, Dict[str, str]]:
    if not isinstance(data, dict):
        raise CatalogLoadError(f"{source} must contain a YAML mapping, got {type(data)}")

    catalogs: Dict[str, Dict[str, str]] = {}
    for lang, table in data.items():
        if language_code(str(lang)) is None:
            raise CatalogLoadError(f"Catalog key {lang!r} has no language code")
        if not isinstance(table, dict):
            raise CatalogLoadError(f"Catalog for language '{lang}' must be a mapping, got {type(table)}")
        bad_keys = [k for k, v in table.items() if not isinstance(v, str)]
        if bad_keys:
            raise CatalogLoadError(f"Non-string values in catalog '{lang}': {bad_keys}")
        catalogs[str(lang)] = {str(k): v for k, v in table.items()}
    return catalogs


def load_catalog(path: Union[str, Path], default_locale: Optional[str] = None) -> CatalogLocalizer:
    """Load a localizer from a YAML file of ``{language: {key: value}}``.

    Raises:
        CatalogLoadError: If file cannot be read or has the wrong shape
    """
    path = Path(path)

    if not path.exists():
        raise CatalogLoadError(f"Catalog file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CatalogLoadError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise CatalogLoadError(f"Cannot read catalog file {path}: {e}")

    return CatalogLocalizer(_build_catalogs(data, f"Catalog file {path}"), default_locale)


def load_catalog_from_string(yaml_content: str, default_locale: Optional[str] = None) -> CatalogLocalizer:
    """Load a localizer from YAML content.

    Raises:
        CatalogLoadError: If YAML is invalid or has the wrong shape
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise CatalogLoadError(f"Invalid YAML content: {e}")

    return CatalogLocalizer(_build_catalogs(data, "Catalog content"), default_locale)
