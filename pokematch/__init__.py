"""Terminal tile-matching puzzle: board, matching rules, screen, menus, leaderboard and game."""

__version__ = "0.1.0"
__all__ = ["board", "matching", "screen", "leaderboard", "menu", "game"]