class CalpickError(Exception):
    """Base error."""

class SelectionStateError(CalpickError, ValueError):
    """Raised when a selection state would break the ordered-range invariant."""

class ThemeCatalogError(CalpickError, KeyError):
    """Raised on strict catalog lookups of unknown themes or duplicate registration."""
