import logging
from typing import List, Optional, Sequence, Tuple

from runeroll.core.config import Settings, settings as default_settings
from runeroll.core.exceptions import LevelError
from runeroll.models import Color, GridPosition, Level, Tile, TileKind
from runeroll.schemas import DifficultyReport, LevelSchema
from runeroll.services.generator_services import generate_solvable_level
from runeroll.services.replay_services import ReplayResult, replay
from runeroll.services.scoring_services import score_level
from runeroll.services.solver_services import assert_solvable, require_solution

logger = logging.getLogger(__name__)

# Map legend:
#  # or space = void, . = floor, S = start, E = end, W = wipe
#  r g b y = pickup, R G B Y = gate (requires that bottom face color)
VOID_CHARS = "# "
COLOR_BY_LETTER = {color.letter: color for color in Color}


def level_from_ascii(id: str, par_moves: int, rows: Sequence[str]) -> Level:
    """Compile an ASCII map into a Level; rows are y, characters are x"""
    if not rows:
        raise LevelError(f"Level {id}: map is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise LevelError(f"Level {id}: map rows must all have the same width")

    tiles = []
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            position = (x, y)
            if ch in VOID_CHARS:
                continue
            if ch == ".":
                tiles.append(Tile.floor(position))
            elif ch == "S":
                tiles.append(Tile.start(position))
            elif ch == "E":
                tiles.append(Tile.end(position))
            elif ch == "W":
                tiles.append(Tile.wipe(position))
            elif ch in COLOR_BY_LETTER:
                tiles.append(Tile.pickup(position, COLOR_BY_LETTER[ch]))
            elif ch.lower() in COLOR_BY_LETTER:
                tiles.append(Tile.gate(position, COLOR_BY_LETTER[ch.lower()]))
            else:
                raise LevelError(f"Level {id}: unknown char '{ch}' at ({x},{y})")

    # maps are stricter than Level itself: one end only
    for kind in (TileKind.START, TileKind.END):
        count = sum(1 for tile in tiles if tile.kind is kind)
        if count != 1:
            raise LevelError(f"Level {id}: expected exactly 1 {kind.value}, got {count}")

    return Level.from_tiles(id=id, width=width, height=len(rows), par_moves=par_moves, tiles=tiles)


def level_to_ascii(level: Level) -> List[str]:
    symbols = {
        TileKind.FLOOR: ".",
        TileKind.START: "S",
        TileKind.END: "E",
        TileKind.WIPE: "W",
    }
    rows = []
    for y in range(level.height):
        row = ""
        for x in range(level.width):
            tile = level.tiles.get((x, y))
            if tile is None:
                row += "#"
            elif tile.kind is TileKind.PICKUP:
                row += tile.color.letter
            elif tile.kind is TileKind.GATE:
                row += tile.color.letter.upper()
            else:
                row += symbols[tile.kind]
        rows.append(row)
    return rows


class LevelServices:
    """ Level loading, generation and certification for the presentation layer"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

    def load_json(self, raw: str) -> Level:
        return LevelSchema.model_validate_json(raw).to_level()

    def dump_json(self, level: Level) -> str:
        return LevelSchema.from_level(level).model_dump_json(by_alias=True)

    def load_ascii(self, id: str, par_moves: int, rows: Sequence[str]) -> Level:
        return level_from_ascii(id, par_moves, rows)

    def generate(self, size: int) -> Tuple[Level, List[GridPosition]]:
        level, path = generate_solvable_level(size, self.settings)
        logger.info(f"Generated level {level.id} ({size}x{size}, {len(path)} path cells)")
        return level, path

    def lint(self, level: Level, path: Sequence[GridPosition]) -> ReplayResult:
        """Replay an authored solution path against the level"""
        result = replay(level, path)
        if not result:
            logger.warning(f"Level {level.id}: path invalid at step {result.step}: {result.reason}")
        return result

    def certify(self, level: Level) -> int:
        """Prove the level solvable and return its par"""
        par = assert_solvable(level, self.settings.SOLVER_MAX_STEPS)
        if par != level.par_moves:
            logger.warning(f"Level {level.id}: advisory par {level.par_moves} differs from solved par {par}")
        else:
            logger.info(f"Level {level.id}: certified, par {par}")
        return par

    def score(self, level: Level) -> DifficultyReport:
        """Solve the level and rate it along the optimal route"""
        result = require_solution(level, self.settings.SOLVER_MAX_STEPS)
        report = score_level(level, result.path)
        logger.info(f"Level {level.id}: difficulty {report.score} ({report.tier.value}), par {report.par_moves}")
        return report
