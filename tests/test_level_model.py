import pytest

from runeroll.core.exceptions import LevelError
from runeroll.models import Color, Level, Tile, TileKind, is_adjacent, tile_at


def test_tile_at_returns_declared_tiles_only(corridor_level):
    assert tile_at(corridor_level, (1, 0)).kind is TileKind.FLOOR
    assert tile_at(corridor_level, [2, 0]).kind is TileKind.END
    assert tile_at(corridor_level, (1, 1)) is None
    assert tile_at(corridor_level, (-1, 0)) is None


def test_level_indexes_start_ends_and_pickups(gate_mismatch_level):
    assert gate_mismatch_level.start == (0, 0)
    assert gate_mismatch_level.ends == ((3, 0),)
    assert gate_mismatch_level.pickup_positions == ((1, 0),)


def test_level_is_immutable(corridor_level):
    with pytest.raises(Exception):
        corridor_level.id = "other"
    with pytest.raises(TypeError):
        corridor_level.tiles[(5, 5)] = Tile.floor((5, 5))


def test_missing_start_raises():
    with pytest.raises(LevelError, match="missing start"):
        Level.from_tiles("NO_START", 2, 1, 1, [Tile.floor((0, 0)), Tile.end((1, 0))])


def test_missing_end_raises():
    with pytest.raises(LevelError, match="missing end"):
        Level.from_tiles("NO_END", 2, 1, 1, [Tile.start((0, 0)), Tile.floor((1, 0))])


def test_two_starts_raise():
    with pytest.raises(LevelError, match="exactly 1 start"):
        Level.from_tiles("TWO_STARTS", 3, 1, 1, [Tile.start((0, 0)), Tile.start((1, 0)), Tile.end((2, 0))])


def test_duplicate_positions_raise():
    with pytest.raises(LevelError, match="duplicate"):
        Level.from_tiles("DUP", 2, 1, 1, [Tile.start((0, 0)), Tile.end((1, 0)), Tile.floor((1, 0))])


def test_multiple_ends_are_allowed():
    level = Level.from_tiles("TWO_ENDS", 3, 1, 1, [Tile.end((0, 0)), Tile.start((1, 0)), Tile.end((2, 0))])
    assert level.ends == ((0, 0), (2, 0))


def test_colored_tiles_need_color():
    with pytest.raises(LevelError):
        Tile((0, 0), TileKind.GATE)
    with pytest.raises(LevelError):
        Tile((0, 0), TileKind.FLOOR, Color.RED)


@pytest.mark.parametrize("a, b, expected", [
    ((0, 0), (1, 0), True),
    ((0, 0), (0, -1), True),
    ((0, 0), (1, 1), False),
    ((0, 0), (0, 0), False),
    ((0, 0), (2, 0), False),
])
def test_is_adjacent(a, b, expected):
    assert is_adjacent(a, b) is expected


@pytest.mark.parametrize("position", [(2, 0), (0, 1), (-1, 0)])
def test_out_of_bounds_tile_raises(position):
    with pytest.raises(LevelError, match="out-of-bounds"):
        Level.from_tiles("OOB", 2, 1, 1, [Tile.start((0, 0)), Tile.floor((1, 0)), Tile.end(position)])


@pytest.mark.parametrize("width, height", [(0, 1), (2, 0), (-1, 3)])
def test_non_positive_size_raises(width, height):
    with pytest.raises(LevelError, match="positive width/height"):
        Level.from_tiles("FLAT", width, height, 1, [Tile.start((0, 0)), Tile.end((1, 0))])


def test_tile_coerces_plain_strings():
    tile = Tile((1, 2), "gate", "blue")
    assert tile.kind is TileKind.GATE
    assert tile.color is Color.BLUE
    assert Tile([0, 0], "floor") == Tile.floor((0, 0))


@pytest.mark.parametrize("kind, color", [("lava", None), ("pickup", "purple")])
def test_tile_rejects_unknown_values(kind, color):
    with pytest.raises(LevelError, match="Invalid tile"):
        Tile((0, 0), kind, color)
