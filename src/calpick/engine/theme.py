from __future__ import annotations

from loguru import logger

from ..core.catalog import ThemeCatalog
from ..core.types import ThemePalette
from ..themes.seasonal import MOODS


def resolve(catalog: ThemeCatalog, name: str, month_index: int) -> ThemePalette:
    """
    Palette for `name` in the displayed month (0=January). Unknown names fall
    back to the catalog default instead of failing.
    """
    table = catalog.monthly(name)
    if table is not None:
        # month_index outside 0..11 is a caller bug; let the KeyError surface.
        return table[month_index]
    palette = catalog.static(name)
    if palette is not None:
        return palette
    logger.debug("Unknown theme, using default", theme=name, default=catalog.default)
    return catalog.get(catalog.default, month_index)

def season_name(month_index: int) -> str:
    return MOODS[month_index]
