"""Rolling-cube grid puzzle engine."""
from runeroll.core import (
    Settings,
    settings,
    RuneRollError,
    LevelError,
    MalformedPathError,
    GeneratorConsistencyError,
    LevelUnsolvableError,
    SolverBoundExceededError,
    RunFinishedError,
)
from runeroll.models import (
    Color, Slot, Direction, FaceSet, GridPosition, Tile, TileKind, Level,
    initial_faces, roll, tile_at, is_adjacent,
)
from runeroll.schemas import LevelSchema, TileSchema, DifficultyReport, DifficultyMetrics, Tier
from runeroll.services import (
    Rejected, Accepted, Reached, StepResult, step,
    Valid, Invalid, ReplayResult, replay, walk,
    hamiltonian_path, generate_solvable_level,
    SolveStatus, SolveResult, search, solve, hint, require_solution, assert_solvable,
    star_thresholds, count_optimal_solutions, score_level,
    Run, stars,
    LevelServices, level_from_ascii, level_to_ascii,
)
