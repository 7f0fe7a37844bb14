from runeroll.models.face_model import (
    Color, Slot, Direction, FaceColor, FaceSet, GridPosition,
    initial_faces, roll, with_bottom, bottom, describe,
)
from runeroll.models.tile_model import Tile, TileKind
from runeroll.models.level_model import Level, tile_at, is_adjacent
