from runeroll.models import Color, Direction, Level, Slot, Tile, initial_faces, roll
from runeroll.models.face_model import bottom, with_bottom
from runeroll.services.move_services import NO_TILE, Accepted, Reached, Rejected, step


def test_move_into_void_is_rejected_without_rolling(corridor_level):
    faces = with_bottom(initial_faces(), Color.RED)
    result = step(corridor_level, (0, 0), faces, frozenset(), Direction.UP)
    assert result == Rejected(NO_TILE)


def test_floor_move_only_rolls(corridor_level):
    faces = ("T", "B", "F", "K", "L", "R")
    result = step(corridor_level, (0, 0), faces, frozenset(), Direction.RIGHT)
    assert type(result) is Accepted
    assert result.position == (1, 0)
    assert result.faces == roll(faces, Direction.RIGHT)
    assert result.consumed == frozenset()


def test_end_tile_is_reached(corridor_level):
    result = step(corridor_level, (1, 0), initial_faces(), frozenset(), Direction.RIGHT)
    assert isinstance(result, Reached)
    assert result.position == (2, 0)


def test_pickup_imprints_bottom_and_is_consumed(gate_mismatch_level):
    result = step(gate_mismatch_level, (0, 0), initial_faces(), frozenset(), Direction.RIGHT)
    assert bottom(result.faces) is Color.RED
    assert result.consumed == frozenset({(1, 0)})


def test_consumed_pickup_behaves_as_floor(gate_mismatch_level):
    faces = ("T", "B", "F", "K", "L", "R")
    result = step(gate_mismatch_level, (0, 0), faces, frozenset({(1, 0)}), Direction.RIGHT)
    assert result.faces == roll(faces, Direction.RIGHT)
    assert result.consumed == frozenset({(1, 0)})


def test_gate_rejects_wrong_color(gate_mismatch_level):
    faces = with_bottom(initial_faces(), Color.RED)
    result = step(gate_mismatch_level, (1, 0), faces, frozenset({(1, 0)}), Direction.RIGHT)
    assert isinstance(result, Rejected)
    assert "expected Blue" in result.reason


def test_gate_accepts_matching_color():
    level = Level.from_tiles("GATE_OK", 3, 1, 2, [
        Tile.start((0, 0)), Tile.gate((1, 0), Color.BLUE), Tile.end((2, 0)),
    ])
    # RIGHT brings the right face down
    faces = [None] * 6
    faces[Slot.RIGHT] = Color.BLUE
    result = step(level, (0, 0), tuple(faces), frozenset(), Direction.RIGHT)
    assert type(result) is Accepted
    assert bottom(result.faces) is Color.BLUE


def test_wipe_clears_bottom():
    level = Level.from_tiles("WIPE", 3, 1, 2, [
        Tile.start((0, 0)), Tile.wipe((1, 0)), Tile.end((2, 0)),
    ])
    faces = [None] * 6
    faces[Slot.RIGHT] = Color.GREEN
    faces[Slot.TOP] = Color.RED
    result = step(level, (0, 0), tuple(faces), frozenset(), Direction.RIGHT)
    assert bottom(result.faces) is None
    assert Color.GREEN not in result.faces
    assert Color.RED in result.faces


def test_step_does_not_mutate_inputs(gate_mismatch_level):
    faces = initial_faces()
    consumed = frozenset()
    step(gate_mismatch_level, (0, 0), faces, consumed, Direction.RIGHT)
    assert faces == initial_faces()
    assert consumed == frozenset()
