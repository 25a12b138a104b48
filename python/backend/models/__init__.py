from backend.models.board import Direction, Grid, Player, Tile
from backend.models.level import LevelCatalog, LevelDefinition

__all__ = ["Direction", "Grid", "LevelCatalog", "LevelDefinition", "Player", "Tile"]
