from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class Tier(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class DifficultyMetrics(BaseModel):
    optimal_solutions_seen: int = Field(alias="optimalSolutionsSeen")
    avg_branching: float = Field(alias="avgBranching")
    forced_steps: int = Field(alias="forcedSteps")
    revisits: int
    pickups: int
    gates: int
    wipes: int
    colors_used: int = Field(alias="colorsUsed")

    model_config = ConfigDict(populate_by_name=True)


# Report shown next to a level: star thresholds plus the inputs to its score
class DifficultyReport(BaseModel):
    par_moves: int = Field(alias="parMoves")
    star3: int
    star2: int
    star1: int
    score: float # 0..100, open ended for very hard levels
    tier: Tier
    metrics: DifficultyMetrics

    model_config = ConfigDict(populate_by_name=True)
