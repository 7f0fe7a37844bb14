"""Difficulty report for a solved level.

The score mixes solution length, level features, how branchy the optimal
route is and how many other optimal routes exist. Star thresholds scale with
par so long levels leave proportionally more slack.
"""
import logging
import math
from typing import Optional, Sequence

from runeroll.models import Direction, Level, TileKind, initial_faces
from runeroll.schemas.difficulty_schema import DifficultyMetrics, DifficultyReport, Tier
from runeroll.services.move_services import Rejected, step
from runeroll.services.solver_services import consumed_mask

logger = logging.getLogger(__name__)

ALT_SOLUTION_LIMIT = 12
EASY_BELOW = 40
HARD_FROM = 75


def star_thresholds(par: int):
    """Move counts for 3, 2 and 1 stars"""
    return par, math.ceil(par * 1.25), math.ceil(par * 1.6)


def legal_moves(level: Level, position, faces, consumed):
    return [d for d in Direction if not isinstance(step(level, position, faces, consumed, d), Rejected)]


def count_optimal_solutions(level: Level, par: int, limit: int = ALT_SOLUTION_LIMIT) -> int:
    """Number of distinct move sequences reaching an end tile in exactly ``par`` moves, capped at ``limit``.

    Layered BFS with path counts. A state first seen at an earlier depth can
    not lie on a shortest route, so only fresh states carry counts forward.
    """
    if par < 0:
        raise ValueError(f"par must be >= 0, received {par}")
    pickup_bits = {position: 1 << i for i, position in enumerate(level.pickup_positions)}
    ends = set(level.ends)

    start_key = (level.start, initial_faces(), 0)
    seen = {start_key}
    frontier = {start_key: ((level.start, initial_faces(), frozenset()), 1)}

    for _ in range(par):
        layer = {}
        for (position, faces, consumed), count in frontier.values():
            if position in ends:
                continue
            for direction in Direction:
                result = step(level, position, faces, consumed, direction)
                if isinstance(result, Rejected):
                    continue
                key = (result.position, result.faces, consumed_mask(result.consumed, pickup_bits))
                if key in seen:
                    continue
                state = (result.position, result.faces, result.consumed)
                previous = layer.get(key)
                layer[key] = (state, count + (previous[1] if previous else 0))
        seen.update(layer)
        frontier = layer

    total = sum(count for (position, _, _), count in frontier.values() if position in ends)
    return min(total, limit)


def score_level(level: Level, moves: Sequence[Direction], alt_limit: Optional[int] = None) -> DifficultyReport:
    """Score ``level`` given one optimal solution ``moves`` (e.g. ``SolveResult.path``).

    Raises ValueError if ``moves`` is rejected by the move simulator.
    """
    par = len(moves)
    alt_limit = ALT_SOLUTION_LIMIT if alt_limit is None else alt_limit

    gates = wipes = 0
    colors = set()
    for tile in level.tiles.values():
        if tile.kind is TileKind.WIPE:
            wipes += 1
        elif tile.kind is TileKind.GATE:
            gates += 1
            colors.add(tile.color)
        elif tile.kind is TileKind.PICKUP:
            colors.add(tile.color)

    # branching along the optimal route, end state included
    position, faces, consumed = level.start, initial_faces(), frozenset()
    states = [(position, faces, consumed)]
    for index, direction in enumerate(moves, start=1):
        result = step(level, position, faces, consumed, direction)
        if isinstance(result, Rejected):
            raise ValueError(f"Level {level.id}: move {index} ({direction.name}) rejected: {result.reason}")
        position, faces, consumed = result.position, result.faces, result.consumed
        states.append((position, faces, consumed))

    total_branch = forced_steps = revisits = 0
    keys = set()
    for state in states:
        if state in keys:
            revisits += 1
        keys.add(state)
        branch = len(legal_moves(level, *state))
        total_branch += branch
        if branch <= 1:
            forced_steps += 1
    avg_branching = total_branch / len(states)

    alternatives = count_optimal_solutions(level, par, alt_limit)

    scarcity = 1 / max(1, alternatives)
    branching_penalty = max(0.0, avg_branching - 1.0)
    score = (
        0.85 * par
        + 3.2 * gates
        + 1.8 * wipes
        + 2.0 * len(colors)
        + 6.0 * scarcity
        + 4.0 * branching_penalty
        + 0.6 * revisits
    )
    score = round(score, 1)

    tier = Tier.MEDIUM
    if score < EASY_BELOW:
        tier = Tier.EASY
    elif score >= HARD_FROM:
        tier = Tier.HARD

    star3, star2, star1 = star_thresholds(par)
    logger.debug(f"[{level.id}] difficulty {score} ({tier.value}), {alternatives} optimal routes seen")
    return DifficultyReport(
        par_moves=par,
        star3=star3,
        star2=star2,
        star1=star1,
        score=score,
        tier=tier,
        metrics=DifficultyMetrics(
            optimal_solutions_seen=alternatives,
            avg_branching=round(avg_branching, 2),
            forced_steps=forced_steps,
            revisits=revisits,
            pickups=len(level.pickup_positions),
            gates=gates,
            wipes=wipes,
            colors_used=len(colors),
        ),
    )
