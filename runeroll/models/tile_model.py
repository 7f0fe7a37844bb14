import enum
from dataclasses import dataclass
from typing import Optional

from runeroll.core.exceptions import LevelError
from runeroll.models.face_model import Color, GridPosition


class TileKind(str, enum.Enum):
    START = "start"
    FLOOR = "floor"
    END = "end"
    PICKUP = "pickup"
    GATE = "gate"
    WIPE = "wipe"

    @property
    def is_colored(self) -> bool:
        return self in (TileKind.PICKUP, TileKind.GATE)


@dataclass(frozen=True)
class Tile:
    position: GridPosition
    kind: TileKind
    color: Optional[Color] = None

    def __post_init__(self):
        object.__setattr__(self, "position", (int(self.position[0]), int(self.position[1])))
        try:
            object.__setattr__(self, "kind", TileKind(self.kind))
            if self.color is not None:
                object.__setattr__(self, "color", Color.parse(self.color))
        except ValueError as e:
            raise LevelError(f"Invalid tile at {self.position}: {e}") from e
        if self.kind.is_colored and self.color is None:
            raise LevelError(f"{self.kind.value} tile at {self.position} needs a color")
        if not self.kind.is_colored and self.color is not None:
            raise LevelError(f"{self.kind.value} tile at {self.position} cannot carry a color")

    @classmethod
    def start(cls, position: GridPosition) -> "Tile": return cls(position, TileKind.START)
    @classmethod
    def floor(cls, position: GridPosition) -> "Tile": return cls(position, TileKind.FLOOR)
    @classmethod
    def end(cls, position: GridPosition) -> "Tile": return cls(position, TileKind.END)
    @classmethod
    def wipe(cls, position: GridPosition) -> "Tile": return cls(position, TileKind.WIPE)
    @classmethod
    def pickup(cls, position: GridPosition, color: Color) -> "Tile": return cls(position, TileKind.PICKUP, color)
    @classmethod
    def gate(cls, position: GridPosition, color: Color) -> "Tile": return cls(position, TileKind.GATE, color)
