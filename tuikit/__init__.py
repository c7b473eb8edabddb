"""Layout containers, list and input widgets and an in-memory screen for text user interfaces."""

__version__ = "0.1.0"
__all__ = [
    "styles",
    "semigraphics",
    "primitive",
    "flex",
    "frame",
    "listview",
    "inputfield",
    "grid",
    "pages",
]