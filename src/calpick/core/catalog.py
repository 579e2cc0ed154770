from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .errors import ThemeCatalogError
from .types import ThemePalette

MonthlyPalettes = Mapping[int, ThemePalette]

@dataclass(frozen=True)
class ThemeCatalog:
    """
    Read-only theme registry: each name maps either to one static palette or
    to a month-index (0..11) -> palette table.
    """
    _static: Mapping[str, ThemePalette] = field(default_factory=dict)
    _monthly: Mapping[str, MonthlyPalettes] = field(default_factory=dict)
    default: str = "light"

    def __post_init__(self) -> None:
        clash = set(self._static) & set(self._monthly)
        if clash:
            raise ThemeCatalogError(f"Theme names registered as both static and monthly: {sorted(clash)}")
        object.__setattr__(self, "_static", MappingProxyType(dict(self._static)))
        object.__setattr__(
            self, "_monthly",
            MappingProxyType({k: MappingProxyType(dict(v)) for k, v in self._monthly.items()}),
        )
        if self.default not in self:
            raise ThemeCatalogError(f"Default theme '{self.default}' is not in the catalog. Available: {self.list()}")

    def is_monthly(self, name: str) -> bool:
        return name in self._monthly

    def static(self, name: str) -> Optional[ThemePalette]:
        return self._static.get(name)

    def monthly(self, name: str) -> Optional[MonthlyPalettes]:
        return self._monthly.get(name)

    def get(self, name: str, month_index: int = 0) -> ThemePalette:
        """Strict lookup (no fallback)."""
        if name in self._monthly:
            return self._monthly[name][month_index]
        if name in self._static:
            return self._static[name]
        raise ThemeCatalogError(f"Unknown theme '{name}'. Available: {self.list()}")

    def list(self) -> List[str]:
        return sorted([*self._static, *self._monthly])

    def __contains__(self, name: object) -> bool:
        return name in self._static or name in self._monthly

    def extend(
        self,
        static: Optional[Dict[str, ThemePalette]] = None,
        monthly: Optional[Dict[str, Dict[int, ThemePalette]]] = None,
        *,
        overwrite: bool = False,
    ) -> "ThemeCatalog":
        """Return a new catalog with extra themes; this one is left untouched."""
        static = dict(static or {})
        monthly = dict(monthly or {})
        if not overwrite:
            dup = sorted(n for n in [*static, *monthly] if n in self)
            if dup:
                raise ThemeCatalogError(f"Themes already exist: {dup}. Use overwrite=True to replace.")
        new_static = {k: v for k, v in self._static.items() if k not in monthly}
        new_monthly = {k: v for k, v in self._monthly.items() if k not in static}
        new_static.update(static)
        new_monthly.update(monthly)
        return ThemeCatalog(new_static, new_monthly, default=self.default)
