import logging
from typing import List, Optional, Tuple

from runeroll.core.config import Settings, settings as default_settings
from runeroll.core.exceptions import GeneratorConsistencyError
from runeroll.models import (
    Color, Direction, GridPosition, Level, Tile,
    bottom, initial_faces, roll, with_bottom,
)
from runeroll.services.replay_services import Invalid, replay

logger = logging.getLogger(__name__)

# cycle order for generated pickups
PROC_COLORS = (Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW)


def hamiltonian_path(size: int) -> List[GridPosition]:
    """Serpentine sweep over a size x size grid: even rows left to right, odd rows back"""
    if isinstance(size, bool) or not isinstance(size, int) or size < 2:
        raise ValueError(f"Level size must be an integer >= 2, received {size!r}.")

    path = []
    for y in range(size):
        xs = range(size) if y % 2 == 0 else range(size - 1, -1, -1)
        path.extend((x, y) for x in xs)
    return path


def generate_solvable_level(size: int, settings: Optional[Settings] = None) -> Tuple[Level, List[GridPosition]]:
    """Build a level whose tiles are tagged along the Hamiltonian sweep.

    Face state is simulated exactly as the move simulator would see it, so
    the sweep itself is always a valid solution. The result is replayed
    before it is returned.
    """
    settings = settings or default_settings
    path = hamiltonian_path(size)
    tiles = [Tile.start(path[0])]

    faces = initial_faces()
    color_index = 0
    for i in range(1, len(path) - 1):
        current = path[i]
        faces = roll(faces, Direction.between(path[i - 1], current))

        # wipe only a marked face, pickup only onto an unmarked one
        if i % settings.GENERATOR_WIPE_STRIDE == 0 and bottom(faces) is not None:
            tiles.append(Tile.wipe(current))
            faces = with_bottom(faces, None)
            continue

        if i % settings.GENERATOR_PICKUP_STRIDE == 0 and bottom(faces) is None:
            color = PROC_COLORS[color_index % len(PROC_COLORS)]
            color_index += 1
            tiles.append(Tile.pickup(current, color))
            faces = with_bottom(faces, color)
            continue

        if i % settings.GENERATOR_GATE_STRIDE == 0 and bottom(faces) is not None:
            tiles.append(Tile.gate(current, bottom(faces)))
            continue

        tiles.append(Tile.floor(current))

    tiles.append(Tile.end(path[-1]))

    level = Level.from_tiles(
        id=f"PROC_{size}",
        width=size,
        height=size,
        par_moves=len(path) - 1,
        tiles=tiles,
    )

    result = replay(level, path)
    if isinstance(result, Invalid):
        raise GeneratorConsistencyError(
            f"Generated level failed replay validation at step {result.step}: {result.reason}"
        )

    logger.debug(f"Generated {level.id}: {len(tiles)} tiles, {color_index} pickups")
    return level, path
