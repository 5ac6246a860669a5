"""A two-scene pygame game: walk the overworld, then fight the boss."""

__version__ = "0.1.0"