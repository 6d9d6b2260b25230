from .coloring import coloring_to_str, str_to_coloring, color_classes

__all__ = [
    "coloring_to_str",
    "str_to_coloring",
    "color_classes",
]
