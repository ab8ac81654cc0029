"""A top-down arena game: a walled, tiled arena and a player who moves and aims."""

__version__ = "0.1.0"
__all__ = ["background", "player", "game"]