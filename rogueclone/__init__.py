"""Ring handling for a classic dungeon-crawling role-playing game."""

__version__ = "6.0.0"
__all__ = ["rings"]