"""
entity_types.py
---------------
Direction and movement model constants shared by all entities.
"""

from enum import Enum


class Direction(Enum):
    """
    Cardinal movement commands.

    Values are unit (dx, dy) offsets in screen space (y grows downward).
    """
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def key(self) -> str:
        """Lowercase name used by configs and sprite rows."""
        return self.name.lower()

    @classmethod
    def parse(cls, value) -> "Direction":
        """
        Convert a name like "left" or "UP" into a Direction.

        Raises:
            ValueError: If the value names no direction.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {value!r}") from None


class MovementModel(Enum):
    """
    Two interchangeable movement rules.

    FRICTION: input adds to velocity, velocity decays every frame.
    STEP:     input moves a fixed step, dropped if it would crowd another entity.
    """
    FRICTION = "friction"
    STEP = "step"

    @classmethod
    def parse(cls, value) -> "MovementModel":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown movement model: {value!r}") from None
