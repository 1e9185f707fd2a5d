"""Utility functions for examples."""

from pathlib import Path
from typing import Optional, Union

def create_localizer_with_fallback(catalog_path: Optional[Union[str, Path]] = None,
                                   localedir: Optional[Union[str, Path]] = None):
    """Create the best available localizer with fallbacks."""

    # Try localization sources in priority order:
    # 1. YAML catalog file
    # 2. gettext locale directory
    # 3. Empty catalog (every key falls back to itself)
    if catalog_path is not None:
        from blasttext.providers.catalog_localizer import load_catalog, CatalogLoadError
        try:
            localizer = load_catalog(catalog_path)
            print(f"✅ Using YAML catalog: {catalog_path} ({', '.join(localizer.languages)})")
            return localizer
        except CatalogLoadError as e:
            print(f"⚠️  Catalog not usable: {e}")

    if localedir is not None:
        if Path(localedir).is_dir():
            from blasttext.providers.gettext_localizer import create_gettext_localizer
            print(f"✅ Using gettext catalogs from: {localedir}")
            return create_gettext_localizer(localedir)
        print(f"⚠️  gettext locale directory not found: {localedir}")

    from blasttext.providers.catalog_localizer import CatalogLocalizer
    print("🔍 No localization available, keys are displayed as-is")
    return CatalogLocalizer({})


class SimpleConsoleLogger:
    """Simple console logger for examples."""

    def info(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"INFO: {msg} {details}" if details else f"INFO: {msg}")

    def warn(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"WARN: {msg} {details}" if details else f"WARN: {msg}")

    def error(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"ERROR: {msg} {details}" if details else f"ERROR: {msg}")
