"""A turn-based console strategy game of the living against the undead."""

__version__ = "0.1.0"