from runeroll.schemas.tile_schema import TileSchema
from runeroll.schemas.level_schema import LevelSchema
from runeroll.schemas.difficulty_schema import Tier, DifficultyMetrics, DifficultyReport
