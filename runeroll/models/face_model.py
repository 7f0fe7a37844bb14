import enum
from typing import Optional, Tuple

from runeroll.core.exceptions import MalformedPathError


class Color(str, enum.Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"

    @property
    def hex(self) -> str: return {
        Color.RED: "#ff0044",
        Color.GREEN: "#00ffaa",
        Color.BLUE: "#3399ff",
        Color.YELLOW: "#ffaa00",
    }[self]

    @property
    def display_name(self) -> str: return {
        Color.RED: "Rose",
        Color.GREEN: "Moss",
        Color.BLUE: "Azure",
        Color.YELLOW: "Amber",
    }[self]

    @property
    def letter(self) -> str: return self.value[0]

    @classmethod
    def parse(cls, raw) -> "Color":
        """Accept a Color, its name, its hex code or its map letter"""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise ValueError(f"Unknown rune color: {raw!r}")

        text = raw.strip().lower()
        for color in cls:
            if text in (color.value, color.hex, color.letter):
                return color
        raise ValueError(f"Unknown rune color: {raw!r}")

    def __str__(self): return self.value.capitalize()


class Slot(enum.IntEnum):
    TOP = 0
    BOTTOM = 1
    FRONT = 2
    BACK = 3
    LEFT = 4
    RIGHT = 5


FaceColor = Optional[Color]
FaceSet = Tuple[FaceColor, FaceColor, FaceColor, FaceColor, FaceColor, FaceColor]
GridPosition = Tuple[int, int]


class Direction(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def vector(self) -> GridPosition: return {
        Direction.UP: (0, -1),
        Direction.DOWN: (0, 1),
        Direction.LEFT: (-1, 0),
        Direction.RIGHT: (1, 0),
    }[self]

    @property
    def opposite(self) -> "Direction": return {
        Direction.UP: Direction.DOWN,
        Direction.DOWN: Direction.UP,
        Direction.LEFT: Direction.RIGHT,
        Direction.RIGHT: Direction.LEFT,
    }[self]

    def apply(self, position: GridPosition) -> GridPosition:
        dx, dy = self.vector
        return position[0] + dx, position[1] + dy

    @staticmethod
    def between(start: GridPosition, end: GridPosition) -> "Direction":
        """Direction of the unit step start -> end"""
        delta = (end[0] - start[0], end[1] - start[1])
        for direction in Direction:
            if direction.vector == delta:
                return direction
        raise MalformedPathError(
            f"Non-adjacent path segment from [{start[0]},{start[1]}] to [{end[0]},{end[1]}]"
        )


# new slot <- old slot, one row per direction
_ROLL_TABLE = {
    Direction.UP: (Slot.FRONT, Slot.BACK, Slot.BOTTOM, Slot.TOP, Slot.LEFT, Slot.RIGHT),
    Direction.DOWN: (Slot.BACK, Slot.FRONT, Slot.TOP, Slot.BOTTOM, Slot.LEFT, Slot.RIGHT),
    Direction.LEFT: (Slot.RIGHT, Slot.LEFT, Slot.FRONT, Slot.BACK, Slot.TOP, Slot.BOTTOM),
    Direction.RIGHT: (Slot.LEFT, Slot.RIGHT, Slot.FRONT, Slot.BACK, Slot.BOTTOM, Slot.TOP),
}


def initial_faces() -> FaceSet:
    return (None, None, None, None, None, None)


def roll(faces: FaceSet, direction: Direction) -> FaceSet:
    """Tip the cube one grid step in ``direction``; pure relabeling of the six slots"""
    return tuple(faces[source] for source in _ROLL_TABLE[direction])


def with_bottom(faces: FaceSet, color: FaceColor) -> FaceSet:
    return faces[:Slot.BOTTOM] + (color,) + faces[Slot.BOTTOM + 1:]


def bottom(faces: FaceSet) -> FaceColor:
    return faces[Slot.BOTTOM]


def describe(color: FaceColor) -> str:
    return "unmarked" if color is None else str(color)
