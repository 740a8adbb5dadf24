"""Pirate-ship card deck and a small top-down shooting prototype."""

__version__ = "0.1.0"