"""
canvas_bounds.py
----------------
Shared, mutable drawing-surface dimensions.

One instance is owned by the GameManager and handed to every entity by
reference, so a window resize is visible to all of them on their next clamp.
"""


class CanvasBounds:
    """Width/height of the drawing surface in pixels."""

    __slots__ = ("width", "height")

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def resize(self, width: float, height: float):
        """Update dimensions in place."""
        self.width = width
        self.height = height

    def __repr__(self) -> str:
        return f"<CanvasBounds {self.width:g}x{self.height:g}>"
