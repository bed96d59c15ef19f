"""Terminal interaction helpers."""

from .selection import RichSelector, Selector, parse_selection

__all__ = ["RichSelector", "Selector", "parse_selection"]
