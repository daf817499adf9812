"""Terrain tile types, data records, settings and naming helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class TerrainTileType(IntEnum):
    """Kinds of terrain a tile can hold."""

    INVALID = 0
    ROCK = 1
    GRASS = 2
    SAND = 3
    WATER = 4
    ROCK_SAND = 5
    ROCK_WATER = 6
    ROCK_GRASS = 7
    SAND_GRASS = 8
    SAND_WATER = 9
    WATER_GRASS = 10


TILE_TYPE_COUNT = len(TerrainTileType)


class TerrainBiasCategory(IntEnum):
    """Groups of terrain types that share a bias value."""

    ROCK = 0
    SAND = 1
    WATER = 2
    GRASS = 3


class TraverseDirection(Enum):
    """Direction in which propagation moved onto a tile."""

    NORTH = "north"
    EAST = "east"
    WEST = "west"
    SOUTH = "south"


@dataclass
class TileData:
    """Configuration of one tile type: its texture and allowed neighbours."""

    tile_type: TerrainTileType = TerrainTileType.INVALID
    texture_path: str = ""
    valid_neighbours: list[TerrainTileType] = field(default_factory=list)


@dataclass
class BiasData:
    """Bias weight of a category and the terrain types it applies to."""

    bias: float = 0.0
    valid_terrain_types: list[TerrainTileType] = field(default_factory=list)


@dataclass(frozen=True)
class GridBounds:
    """Rectangular grid extent with the origin at (0, 0)."""

    width: int
    height: int

    def contains(self, x, y):
        """Return True when (x, y) lies on the grid."""
        return 0 <= x < self.width and 0 <= y < self.height


@dataclass(frozen=True)
class Settings:
    """Global sizes for the grid and the tiles drawn on it."""

    tile_size: int = 64
    grid_size_x: int = 10
    grid_size_y: int = 10

    @property
    def bounds(self) -> GridBounds:
        return GridBounds(self.grid_size_x, self.grid_size_y)


_TILE_NAMES = {
    TerrainTileType.ROCK: "Rock",
    TerrainTileType.GRASS: "Grass",
    TerrainTileType.SAND: "Sand",
    TerrainTileType.WATER: "Water",
    TerrainTileType.ROCK_GRASS: "RockGrass",
    TerrainTileType.ROCK_SAND: "RockSand",
    TerrainTileType.ROCK_WATER: "RockWater",
    TerrainTileType.SAND_GRASS: "SandGrass",
    TerrainTileType.SAND_WATER: "SandWater",
    TerrainTileType.WATER_GRASS: "WaterGrass",
}

_BIAS_NAMES = {
    TerrainBiasCategory.ROCK: "RockBias",
    TerrainBiasCategory.SAND: "SandBias",
    TerrainBiasCategory.WATER: "WaterBias",
    TerrainBiasCategory.GRASS: "GrassBias",
}


def tile_type_name(tile_type):
    """Return the configuration name of a tile type."""
    if tile_type == TILE_TYPE_COUNT:
        return "TerrainTileTypeCount"
    try:
        member = TerrainTileType(tile_type)
    except ValueError:
        return "InvalidTileType"
    return _TILE_NAMES.get(member, "InvalidTileType")


def bias_category_name(category):
    """Return the configuration name of a bias category."""
    try:
        return _BIAS_NAMES[TerrainBiasCategory(category)]
    except ValueError:
        raise ValueError(f"unknown bias category: {category!r}") from None


def format_tile(x, y, tile_type):
    """Format one grid cell as a report line."""
    return f"[{x}][{y}] = {tile_type_name(tile_type)}"