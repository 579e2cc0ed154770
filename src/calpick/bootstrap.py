from __future__ import annotations
from calpick.core.catalog import ThemeCatalog
from calpick.themes.specs import DEFAULT_THEME, MONTHLY_THEMES, STATIC_THEMES

def build_catalog() -> ThemeCatalog:
    return ThemeCatalog(STATIC_THEMES, MONTHLY_THEMES, default=DEFAULT_THEME)
