"""A minimal 2D pygame engine: window, rectangles, frame timing and per-frame input state."""

__version__ = "0.1.0"
__all__ = ["engine", "input", "main"]