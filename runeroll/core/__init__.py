from runeroll.core.config import Settings, settings
from runeroll.core.exceptions import (
    RuneRollError,
    LevelError,
    MalformedPathError,
    GeneratorConsistencyError,
    LevelUnsolvableError,
    SolverBoundExceededError,
    RunFinishedError,
)
