from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, Tuple

from runeroll.models import Color, Tile, TileKind


class TileSchema(BaseModel):
    position: Tuple[int, int] = Field(validation_alias=AliasChoices("position", "pos"))
    kind: TileKind = Field(validation_alias=AliasChoices("kind", "type"))
    color: Optional[Color] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator('kind', mode='before') # authored levels call gates "match"
    @classmethod
    def match_to_gate(cls, value):
        if isinstance(value, str) and value.strip().lower() == "match":
            return TileKind.GATE
        return value

    @field_validator('color', mode='before') # runs before Pydantic type conversion. Accepts name, hex or letter
    @classmethod
    def parse_color(cls, value):
        if value is None or value == "":
            return None
        return Color.parse(value)

    @model_validator(mode='after')
    def color_matches_kind(self):
        if self.kind.is_colored and self.color is None:
            raise ValueError(f"{self.kind.value} tile at {self.position} needs a color")
        if not self.kind.is_colored and self.color is not None:
            raise ValueError(f"{self.kind.value} tile at {self.position} cannot carry a color")
        return self

    def to_tile(self) -> Tile:
        return Tile(self.position, self.kind, self.color)
