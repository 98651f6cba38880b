"""Filler game bot, its move strategy, and a viewer that draws matches."""

__version__ = "1.0.0"