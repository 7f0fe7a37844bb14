"""Offline breadth-first solver.

Used at build/test time to certify hand-authored levels and compute par.
The search state is ``(position, faces, consumed-pickup bitmask)``: a pickup
behaves differently once it has been read, so the consumed set is part of
the key and two visits with different masks are never merged.
"""
import enum
import logging
from collections import deque
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple

from runeroll.core.config import settings
from runeroll.core.exceptions import LevelUnsolvableError, SolverBoundExceededError
from runeroll.models import Direction, GridPosition, Level, initial_faces
from runeroll.services.move_services import Rejected, step

logger = logging.getLogger(__name__)


class SolveStatus(str, enum.Enum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable" # state space exhausted
    BOUND_EXCEEDED = "bound_exceeded" # depth cap hit, undecided


@dataclass(frozen=True)
class SolveResult:
    status: SolveStatus
    moves: Optional[int] = None
    explored: int = 0
    path: Optional[Tuple[Direction, ...]] = None # one optimal move sequence, shown as a hint

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED


def consumed_mask(consumed: FrozenSet[GridPosition], pickup_bits: Dict[GridPosition, int]) -> int:
    mask = 0
    for position in consumed:
        mask |= pickup_bits[position]
    return mask


def _unwind(parents, key) -> Tuple[Direction, ...]:
    moves = []
    while parents[key] is not None:
        key, direction = parents[key]
        moves.append(direction)
    return tuple(reversed(moves))


def search(level: Level, max_steps: Optional[int] = None) -> SolveResult:
    """BFS from the start state; the first end tile dequeued gives the minimal move count"""
    if max_steps is None:
        max_steps = settings.SOLVER_MAX_STEPS
    if max_steps < 0:
        raise ValueError(f"max_steps must be >= 0, received {max_steps}")

    pickup_bits = {position: 1 << i for i, position in enumerate(level.pickup_positions)}
    ends = set(level.ends)

    start_key = (level.start, initial_faces(), 0)
    # state key -> (parent key, direction taken from it)
    visited = {start_key: None}
    queue = deque([((level.start, initial_faces(), frozenset()), start_key, 0)])
    truncated = False

    while queue:
        (position, faces, consumed), here, depth = queue.popleft()
        if position in ends:
            logger.debug(f"[{level.id}] solved in {depth} moves, {len(visited)} states")
            return SolveResult(SolveStatus.SOLVED, depth, len(visited), _unwind(visited, here))

        for direction in Direction:
            result = step(level, position, faces, consumed, direction)
            if isinstance(result, Rejected):
                continue
            key = (result.position, result.faces, consumed_mask(result.consumed, pickup_bits))
            if key in visited:
                continue
            if depth >= max_steps:
                # an unseen state lies past the cap, so the search is incomplete
                truncated = True
                continue
            visited[key] = (here, direction)
            queue.append(((result.position, result.faces, result.consumed), key, depth + 1))

    status = SolveStatus.BOUND_EXCEEDED if truncated else SolveStatus.UNSOLVABLE
    logger.debug(f"[{level.id}] {status.value} after {len(visited)} states (max_steps={max_steps})")
    return SolveResult(status, None, len(visited))


def solve(level: Level, max_steps: Optional[int] = None) -> Optional[int]:
    """Minimal move count, or None when no solution was found within ``max_steps``"""
    return search(level, max_steps).moves


def hint(level: Level, max_steps: Optional[int] = None) -> Optional[Tuple[Direction, ...]]:
    """One optimal move sequence from the start, or None when ``solve`` would return None"""
    return search(level, max_steps).path


def require_solution(level: Level, max_steps: Optional[int] = None) -> SolveResult:
    """Like ``search`` but raises unless the level was solved"""
    if max_steps is None:
        max_steps = settings.SOLVER_MAX_STEPS
    result = search(level, max_steps)
    if result.status is SolveStatus.UNSOLVABLE:
        raise LevelUnsolvableError(f"Level {level.id} is NOT solvable under current rules")
    if result.status is SolveStatus.BOUND_EXCEEDED:
        raise SolverBoundExceededError(
            f"Level {level.id}: no solution within {max_steps} moves, "
            f"search incomplete after {result.explored} states"
        )
    return result


def assert_solvable(level: Level, max_steps: Optional[int] = None) -> int:
    return require_solution(level, max_steps).moves
