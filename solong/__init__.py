"""Tile-based puzzle game: gather every collectible, then reach the exit, plus small text and buffer helpers."""

__version__ = "0.1.0"
__all__ = ["charclass", "memory", "strings", "printf", "linereader", "gamemap", "game", "display", "cli"]