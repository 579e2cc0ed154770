"""Diagnostics package.

- pretty_month: plain-text rendering of a MonthView (no UI toolkit required)
"""

__all__ = ["pretty_month"]
