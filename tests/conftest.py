import pytest

from runeroll.models import Color, Level, Tile


@pytest.fixture
def gate_mismatch_level():
    """Start -> red pickup -> blue gate -> End, in a single row"""
    return Level.from_tiles("GATE_MISMATCH", 4, 1, 3, [
        Tile.start((0, 0)),
        Tile.pickup((1, 0), Color.RED),
        Tile.gate((2, 0), Color.BLUE),
        Tile.end((3, 0)),
    ])


@pytest.fixture
def corridor_level():
    return Level.from_tiles("CORRIDOR", 3, 1, 2, [
        Tile.start((0, 0)),
        Tile.floor((1, 0)),
        Tile.end((2, 0)),
    ])
