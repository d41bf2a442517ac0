"""A small vertical bullet shooter: game state, rules and a pygame front end."""

__version__ = "0.1.0"