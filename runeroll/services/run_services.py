import logging
from typing import FrozenSet

from runeroll.core.exceptions import RunFinishedError
from runeroll.models.face_model import Direction, FaceSet, GridPosition, initial_faces
from runeroll.models.level_model import Level
from runeroll.services.move_services import Rejected, Reached, step

logger = logging.getLogger(__name__)


def stars(par: int, moves: int) -> int:
    """Score a finished run against par"""
    if moves <= par:
        return 3
    if moves <= par + 3:
        return 2
    return 1


class Run:
    """Caller-owned run state for one level: one cube, one traversal"""

    level: Level
    position: GridPosition
    faces: FaceSet
    consumed: FrozenSet[GridPosition]
    moves: int
    solved: bool

    def __init__(self, level: Level):
        self.level = level
        self.reset()

    def reset(self):
        self.position = self.level.start
        self.faces = initial_faces()
        self.consumed = frozenset()
        self.moves = 0
        self.solved = False

    def move(self, direction: Direction):
        """Attempt one roll; commit it unless the step was rejected"""
        if self.solved:
            raise RunFinishedError(f"Level {self.level.id} already solved in {self.moves} moves")

        result = step(self.level, self.position, self.faces, self.consumed, direction)
        if isinstance(result, Rejected):
            logger.debug(f"[{self.level.id}] {direction.value} rejected at {self.position}: {result.reason}")
            return result

        self.position, self.faces, self.consumed = result.position, result.faces, result.consumed
        self.moves += 1
        if isinstance(result, Reached):
            self.solved = True
            logger.debug(f"[{self.level.id}] solved in {self.moves} moves")
        return result

    @property
    def stars(self) -> int:
        return stars(self.level.par_moves, self.moves)
