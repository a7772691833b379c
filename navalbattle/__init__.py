"""Two-player Naval Battle game: boards, ship placement, rendering and a terminal game."""

__version__ = "1.0.0"
__all__ = ["board", "render", "generation", "cli"]