"""Rules engine for a classic falling-block puzzle game: pieces, grid, scoring, high scores and menus."""

__version__ = "0.1.0"
__all__ = ["block", "factory", "grid", "highscores", "game", "hud", "menu"]