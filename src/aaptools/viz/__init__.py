from .draw import draw_coloring

__all__ = [
    "draw_coloring",
]
