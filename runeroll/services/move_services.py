from dataclasses import dataclass
from typing import FrozenSet, Union

from runeroll.models import (
    Direction, FaceSet, GridPosition, Level, TileKind,
    bottom, describe, roll, tile_at, with_bottom,
)


NO_TILE = "no tile in that direction"


@dataclass(frozen=True)
class Rejected:
    reason: str


@dataclass(frozen=True)
class Accepted:
    position: GridPosition
    faces: FaceSet
    consumed: FrozenSet[GridPosition]


@dataclass(frozen=True)
class Reached(Accepted):
    """Accepted move that landed on an end tile"""


StepResult = Union[Rejected, Accepted, Reached]


def step(
        level: Level,
        position: GridPosition,
        faces: FaceSet,
        consumed: FrozenSet[GridPosition],
        direction: Direction,
) -> StepResult:
    """Roll the cube one tile and apply the destination tile's rule.

    Never mutates its inputs. Rejections are results, not exceptions.
    """
    target = direction.apply(position)
    tile = tile_at(level, target)
    if tile is None:
        return Rejected(NO_TILE)

    faces = roll(faces, direction)

    if tile.kind is TileKind.WIPE:
        faces = with_bottom(faces, None)
    elif tile.kind is TileKind.PICKUP:
        # pickups imprint once per traversal, later visits act as floor
        if target not in consumed:
            faces = with_bottom(faces, tile.color)
            consumed = consumed | {target}
    elif tile.kind is TileKind.GATE:
        if bottom(faces) != tile.color:
            return Rejected(
                f"gate at [{target[0]},{target[1]}] expected {describe(tile.color)}, "
                f"got {describe(bottom(faces))}"
            )

    if tile.kind is TileKind.END:
        return Reached(target, faces, frozenset(consumed))
    return Accepted(target, faces, frozenset(consumed))
