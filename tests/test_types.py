import pytest

from terrainwfc.types import (
    BiasData,
    GridBounds,
    Settings,
    TerrainBiasCategory,
    TerrainTileType,
    TileData,
    bias_category_name,
    format_tile,
    tile_type_name,
)


@pytest.mark.parametrize(
    "tile_type, name",
    [
        (TerrainTileType.ROCK, "Rock"),
        (TerrainTileType.GRASS, "Grass"),
        (TerrainTileType.SAND, "Sand"),
        (TerrainTileType.WATER, "Water"),
        (TerrainTileType.ROCK_GRASS, "RockGrass"),
        (TerrainTileType.ROCK_SAND, "RockSand"),
        (TerrainTileType.ROCK_WATER, "RockWater"),
        (TerrainTileType.SAND_GRASS, "SandGrass"),
        (TerrainTileType.SAND_WATER, "SandWater"),
        (TerrainTileType.WATER_GRASS, "WaterGrass"),
        (TerrainTileType.INVALID, "InvalidTileType"),
    ],
)
def test_tile_type_name(tile_type, name):
    assert tile_type_name(tile_type) == name


def test_tile_type_name_count_and_unknown():
    assert tile_type_name(len(TerrainTileType)) == "TerrainTileTypeCount"
    assert tile_type_name(99) == "InvalidTileType"


def test_tile_type_names_are_unique_for_valid_types():
    names = {tile_type_name(t) for t in TerrainTileType if t != TerrainTileType.INVALID}
    assert len(names) == len(TerrainTileType) - 1


@pytest.mark.parametrize(
    "category, name",
    [
        (TerrainBiasCategory.ROCK, "RockBias"),
        (TerrainBiasCategory.SAND, "SandBias"),
        (TerrainBiasCategory.WATER, "WaterBias"),
        (TerrainBiasCategory.GRASS, "GrassBias"),
    ],
)
def test_bias_category_name(category, name):
    assert bias_category_name(category) == name


def test_bias_category_name_rejects_unknown():
    with pytest.raises(ValueError):
        bias_category_name(len(TerrainBiasCategory))


def test_format_tile():
    assert format_tile(4, 2, TerrainTileType.WATER) == "[4][2] = Water"


def test_grid_bounds_contains():
    bounds = GridBounds(3, 2)
    assert bounds.contains(0, 0)
    assert bounds.contains(2, 1)
    assert not bounds.contains(3, 0)
    assert not bounds.contains(0, 2)
    assert not bounds.contains(-1, 0)
    assert not bounds.contains(0, -1)


def test_settings_defaults_and_bounds():
    settings = Settings()
    assert settings.tile_size == 64
    assert (settings.grid_size_x, settings.grid_size_y) == (10, 10)
    assert settings.bounds == GridBounds(10, 10)


def test_records_have_independent_lists():
    first, second = TileData(), TileData()
    first.valid_neighbours.append(TerrainTileType.ROCK)
    assert second.valid_neighbours == []
    bias_a, bias_b = BiasData(), BiasData()
    bias_a.valid_terrain_types.append(TerrainTileType.SAND)
    assert bias_b.valid_terrain_types == []