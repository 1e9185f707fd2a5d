"""
BlastText Providers Package

This package contains localization providers that resolve a localization key
to a string before it is blasted. All providers implement the ``Localizer``
protocol and are injected by the host application.
"""

from .catalog_localizer import CatalogLocalizer, CatalogLoadError, load_catalog, load_catalog_from_string
from .gettext_localizer import GettextLocalizer, create_gettext_localizer

__all__ = [
    'CatalogLocalizer',
    'CatalogLoadError',
    'load_catalog',
    'load_catalog_from_string',
    'GettextLocalizer',
    'create_gettext_localizer',
]
