from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple

from runeroll.core.exceptions import LevelError
from runeroll.models.face_model import GridPosition
from runeroll.models.tile_model import Tile, TileKind


@dataclass(frozen=True)
class Level:
    """Immutable sparse grid. Positions missing from ``tiles`` are void."""

    id: str
    width: int
    height: int
    par_moves: int # advisory only, solver_services.solve is authoritative
    tiles: Mapping[GridPosition, Tile]
    start: GridPosition = field(init=False)
    ends: Tuple[GridPosition, ...] = field(init=False)
    pickup_positions: Tuple[GridPosition, ...] = field(init=False)

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise LevelError(f"Level {self.id}: must have positive width/height, got {self.width}x{self.height}")
        starts = [p for p, t in self.tiles.items() if t.kind is TileKind.START]
        ends = [p for p, t in self.tiles.items() if t.kind is TileKind.END]
        if not starts:
            raise LevelError(f"Level {self.id}: missing start tile")
        if len(starts) > 1:
            raise LevelError(f"Level {self.id}: expected exactly 1 start, got {len(starts)}")
        if not ends:
            raise LevelError(f"Level {self.id}: missing end tile")
        for position, tile in self.tiles.items():
            if tile.position != position:
                raise LevelError(f"Level {self.id}: tile {tile} indexed under {position}")
            x, y = position
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise LevelError(f"Level {self.id}: has out-of-bounds tile at [{x}, {y}]")

        # frozen dataclass, so derived fields go through object.__setattr__
        object.__setattr__(self, "tiles", MappingProxyType(dict(self.tiles)))
        object.__setattr__(self, "start", starts[0])
        object.__setattr__(self, "ends", tuple(sorted(ends, key=_row_major)))
        object.__setattr__(self, "pickup_positions", tuple(sorted(
            (p for p, t in self.tiles.items() if t.kind is TileKind.PICKUP), key=_row_major
        )))

    @classmethod
    def from_tiles(cls, id: str, width: int, height: int, par_moves: int, tiles: Iterable[Tile]) -> "Level":
        """Build a level from a tile list, refusing duplicate positions"""
        index = {}
        for tile in tiles:
            if tile.position in index:
                raise LevelError(f"Level {id}: duplicate tile at {tile.position[0]},{tile.position[1]}")
            index[tile.position] = tile
        return cls(id=id, width=width, height=height, par_moves=par_moves, tiles=index)

    def sorted_tiles(self) -> List[Tile]:
        return [self.tiles[p] for p in sorted(self.tiles, key=_row_major)]

    def __hash__(self): return hash((self.id, self.width, self.height, self.par_moves, frozenset(self.tiles.items())))


def _row_major(position: GridPosition):
    return position[1], position[0]


def tile_at(level: Level, position: GridPosition) -> Optional[Tile]:
    return level.tiles.get(tuple(position))


def is_adjacent(a: GridPosition, b: GridPosition) -> bool:
    """Axis-aligned neighbours only; diagonals are never adjacent"""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
