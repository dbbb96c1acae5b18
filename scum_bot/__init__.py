"""Scum and Villainy dice bot.

Resolves chat messages into dice and character rolls.
"""

__version__ = "0.1.0"
