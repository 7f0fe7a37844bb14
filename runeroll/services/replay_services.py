from dataclasses import dataclass
from typing import List, Sequence, Union

from runeroll.models import Direction, GridPosition, Level, TileKind, initial_faces, tile_at
from runeroll.services.move_services import Rejected, step


@dataclass(frozen=True)
class Valid:
    def __bool__(self): return True


@dataclass(frozen=True)
class Invalid:
    step: int
    reason: str

    def __bool__(self): return False


ReplayResult = Union[Valid, Invalid]


def replay(level: Level, path: Sequence[GridPosition]) -> ReplayResult:
    """Walk ``path`` through the move simulator and report the first rejection.

    A non-adjacent pair of positions raises MalformedPathError: that is a
    broken path, not a gameplay outcome.
    """
    path = [tuple(position) for position in path]
    if len(path) < 2:
        return Invalid(0, "Path must have at least 2 positions.")

    start_tile = tile_at(level, path[0])
    if start_tile is None or start_tile.kind is not TileKind.START:
        return Invalid(0, "Path must start on a start tile.")

    final_tile = tile_at(level, path[-1])
    if final_tile is None or final_tile.kind is not TileKind.END:
        return Invalid(0, "Path must end on an end tile.")

    faces, consumed = initial_faces(), frozenset()
    for index in range(1, len(path)):
        direction = Direction.between(path[index - 1], path[index])
        result = step(level, path[index - 1], faces, consumed, direction)
        if isinstance(result, Rejected):
            return Invalid(index, result.reason)
        faces, consumed = result.faces, result.consumed

    return Valid()


def walk(start: GridPosition, moves: Sequence[Direction]) -> List[GridPosition]:
    """Expand a move sequence into the positions it visits, ``start`` included"""
    path = [tuple(start)]
    for direction in moves:
        path.append(direction.apply(path[-1]))
    return path
