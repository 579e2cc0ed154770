from __future__ import annotations
from typing import Dict

from ..core.types import ThemePalette
from .seasonal import SEASONAL
from .static import CYBERPUNK, DARK, LIGHT, METALLIC, NATURE, RETRO

DEFAULT_THEME = "light"

# Static themes (one palette each)
STATIC_THEMES: Dict[str, ThemePalette] = {
    "light": LIGHT,
    "dark": DARK,
    "metallic": METALLIC,
    "cyberpunk": CYBERPUNK,
    "retro": RETRO,
    "nature": NATURE,
}

# Month-varying themes (month index 0..11 -> palette)
MONTHLY_THEMES: Dict[str, Dict[int, ThemePalette]] = {
    "seasonal": SEASONAL,
}
