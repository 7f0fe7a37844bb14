from runeroll.services.move_services import Rejected, Accepted, Reached, StepResult, step
from runeroll.services.replay_services import Valid, Invalid, ReplayResult, replay, walk
from runeroll.services.generator_services import hamiltonian_path, generate_solvable_level
from runeroll.services.solver_services import (
    SolveStatus, SolveResult, search, solve, hint, require_solution, assert_solvable,
)
from runeroll.services.scoring_services import star_thresholds, count_optimal_solutions, score_level
from runeroll.services.run_services import Run, stars
from runeroll.services.level_services import LevelServices, level_from_ascii, level_to_ascii
