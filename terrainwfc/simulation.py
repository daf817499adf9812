"""Wiring of data, bias, tile grid and renderer, and the command entry point."""

from __future__ import annotations

import argparse
import random
import sys

from .bias import BiasManager
from .data import DEFAULT_DATA_PATH, DataParser
from .render import RenderManager, TileRenderData
from .tile_manager import TileManager
from .types import Settings, TerrainBiasCategory, TerrainTileType, format_tile

ROCK_SEED = (4, 4)
WATER_SEED = (1, 3)


class SimulationManager:
    """Loads the configuration and drives the terrain grid."""

    def __init__(self, data_path=DEFAULT_DATA_PATH, settings=None, rng=None):
        self.settings = settings if settings is not None else Settings()
        self.rng = rng if rng is not None else random.Random()
        self.data_parser = DataParser(data_path)
        self.bias: BiasManager | None = None
        self._tile_manager: TileManager | None = None

    @property
    def tile_manager(self) -> TileManager:
        if self._tile_manager is None:
            raise RuntimeError("components are not initialized")
        return self._tile_manager

    def initialize_components(self):
        """Load the data file, build the bias manager and the tile grid."""
        self.data_parser.load()
        self.bias = BiasManager(
            [self.data_parser.bias_data(c) for c in TerrainBiasCategory], self.rng
        )
        self._tile_manager = TileManager(
            self.settings.grid_size_x,
            self.settings.grid_size_y,
            self.data_parser,
            self.bias,
            self.rng,
            self.settings.tile_size,
        )
        self._tile_manager.initialize_grid()

    def force_tile_entropy(self, location, tile_type, valid_neighbours):
        """Start a fresh propagation pass from one forced tile."""
        self.tile_manager.clear_iterations()
        self.tile_manager.force_tile_entropy(location, tile_type, valid_neighbours)

    def set_tile_to_terrain_type(self, location, terrain_type):
        """Collapse a tile to rock using the neighbour rules of terrain_type, then print the grid."""
        neighbours = self.data_parser.tile_data(terrain_type).valid_neighbours
        self.force_tile_entropy(location, TerrainTileType.ROCK, neighbours)
        for line in self.tile_report():
            print(line)

    def tile_report(self) -> list[str]:
        """One line per cell, row by row."""
        manager = self.tile_manager
        return [
            format_tile(x, y, manager.tile_at(x, y).tile_type)
            for y in range(manager.bounds.height)
            for x in range(manager.bounds.width)
        ]

    def render_data(self) -> TileRenderData:
        """Texture paths for the renderer, taken from the tile data."""
        def path(tile_type):
            return self.data_parser.tile_data(tile_type).texture_path

        return TileRenderData(
            grass_texture_path=path(TerrainTileType.GRASS),
            rock_texture_path=path(TerrainTileType.ROCK),
            sand_texture_path=path(TerrainTileType.SAND),
            water_texture_path=path(TerrainTileType.WATER),
            rock_grass_texture_path=path(TerrainTileType.ROCK_GRASS),
            rock_sand_texture_path=path(TerrainTileType.ROCK_SAND),
            rock_water_texture_path=path(TerrainTileType.ROCK_WATER),
            sand_grass_texture_path=path(TerrainTileType.SAND_GRASS),
            sand_water_texture_path=path(TerrainTileType.SAND_WATER),
            water_grass_texture_path=path(TerrainTileType.WATER_GRASS),
        )

    def run(self, renderer):
        """Seed two tiles and draw frames until the renderer asks to close."""
        renderer.initialize(self.render_data())
        renderer.refresh_tile_grid(self.tile_manager.tiles)

        self.set_tile_to_terrain_type(ROCK_SEED, TerrainTileType.ROCK)
        self.set_tile_to_terrain_type(WATER_SEED, TerrainTileType.WATER)

        while not renderer.should_close():
            renderer.render_frame()
        renderer.close()


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="terrainwfc", description="Procedural 2D terrain generation."
    )
    parser.add_argument("--data", default=DEFAULT_DATA_PATH, help="tile data JSON file")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    settings = Settings()
    simulation = SimulationManager(args.data, settings, random.Random(args.seed))
    try:
        simulation.initialize_components()
    except (OSError, ValueError) as error:
        print(f"terrainwfc: cannot load {args.data}: {error}", file=sys.stderr)
        return 1

    renderer = RenderManager(
        settings.grid_size_x, settings.grid_size_y, settings.tile_size
    )
    simulation.run(renderer)
    return 0