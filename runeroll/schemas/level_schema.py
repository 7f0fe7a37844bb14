from pydantic import BaseModel, ConfigDict, Field
from typing import List

from runeroll.models import Level
from runeroll.schemas.tile_schema import TileSchema


# On-disk / wire shape of a level. Structural checks (start, end, duplicates)
# happen in Level itself when converting.
class LevelSchema(BaseModel):
    id: str
    width: int = Field(ge=1)
    height: int = Field(ge=1)
    par_moves: int = Field(default=0, ge=0, alias="parMoves")
    tiles: List[TileSchema]

    model_config = ConfigDict(populate_by_name=True)

    def to_level(self) -> Level:
        return Level.from_tiles(
            id=self.id,
            width=self.width,
            height=self.height,
            par_moves=self.par_moves,
            tiles=[tile.to_tile() for tile in self.tiles],
        )

    @classmethod
    def from_level(cls, level: Level) -> "LevelSchema":
        return cls(
            id=level.id,
            width=level.width,
            height=level.height,
            par_moves=level.par_moves,
            tiles=[TileSchema.model_validate(tile) for tile in level.sorted_tiles()],
        )
