"""Structural faults.

Gameplay rejections (no tile, wrong gate colour) are never raised; they are
returned as ``Rejected`` step results. Everything here means a level, a path
or the generator itself is broken.
"""


class RuneRollError(Exception):
    """Base class for every error raised by the engine"""


class LevelError(RuneRollError):
    """Malformed level: missing start/end, duplicate tiles, bad map"""


class MalformedPathError(RuneRollError, ValueError):
    """Two consecutive path positions are not grid-adjacent"""


class GeneratorConsistencyError(RuneRollError):
    """A generated level failed its own replay check"""


class LevelUnsolvableError(RuneRollError):
    """The whole state space was searched and no end tile is reachable"""


class SolverBoundExceededError(RuneRollError):
    """The search hit its depth cap before deciding solvability"""


class RunFinishedError(RuneRollError):
    """A move was attempted on a run that already reached an end tile"""
